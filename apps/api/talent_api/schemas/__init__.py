"""Pydantic request/response schemas."""

from talent_api.schemas.profile import ProfileCreate, ProfileListResponse, ProfileResponse
from talent_api.schemas.search import ErrorResponse, SmartSearchRequest, SmartSearchResponse

__all__ = [
    "ProfileCreate",
    "ProfileListResponse",
    "ProfileResponse",
    "ErrorResponse",
    "SmartSearchRequest",
    "SmartSearchResponse",
]
