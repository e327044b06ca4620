from .profile_store import (
    ProfileConflictError,
    ProfileStore,
    ProfileStoreError,
    SqlAlchemyProfileStore,
)
from .search import InvalidSearchRequestError, SmartSearchService

__all__ = [
    "ProfileConflictError",
    "ProfileStore",
    "ProfileStoreError",
    "SqlAlchemyProfileStore",
    "InvalidSearchRequestError",
    "SmartSearchService",
]
