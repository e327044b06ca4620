from typing import Annotated

from fastapi import Depends

from talent_api.db.session import async_session
from talent_api.providers import get_chat_provider
from talent_api.services import ProfileStore, SmartSearchService, SqlAlchemyProfileStore


def get_profile_store() -> ProfileStore:
    return SqlAlchemyProfileStore(async_session)


def get_smart_search_service(
    store: Annotated[ProfileStore, Depends(get_profile_store)],
) -> SmartSearchService:
    """Search service for one request; provider is None when no Gemini key is configured."""
    return SmartSearchService(store=store, chat_provider=get_chat_provider())
