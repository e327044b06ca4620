from .profile import router as profile_router
from .search import router as search_router

ROUTERS = (profile_router, search_router)

__all__ = ["ROUTERS", "profile_router", "search_router"]
