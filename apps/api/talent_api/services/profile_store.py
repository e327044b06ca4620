"""Profile store: the read/create surface the directory and smart search depend on."""

import logging
import uuid
from abc import ABC, abstractmethod
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from talent_api.db.models import Profile
from talent_api.domain import ProfileSchema
from talent_api.schemas import ProfileCreate

logger = logging.getLogger(__name__)


class ProfileStoreError(Exception):
    """Raised when the profile store cannot be read or written. Distinct from "not found"."""


class ProfileConflictError(ProfileStoreError):
    """Raised when a create collides with an existing unique value (username)."""


class ProfileStore(ABC):
    @abstractmethod
    async def select_all(self) -> list[ProfileSchema]:
        pass

    @abstractmethod
    async def select_by_ids(self, ids: Sequence[str]) -> list[ProfileSchema]:
        """Profiles whose id is in ids, in store order. Unknown ids are skipped."""
        pass

    @abstractmethod
    async def create(self, data: ProfileCreate) -> ProfileSchema:
        pass


class SqlAlchemyProfileStore(ProfileStore):
    """Profile store over the profiles table. Opens one session per operation."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def select_all(self) -> list[ProfileSchema]:
        stmt = select(Profile).order_by(Profile.created_at, Profile.id)
        try:
            async with self._session_factory() as session:
                rows = (await session.execute(stmt)).scalars().all()
        except SQLAlchemyError as e:
            logger.error("Profile store select_all failed: %s", e)
            raise ProfileStoreError("Failed to fetch profiles") from e
        return [ProfileSchema.model_validate(r) for r in rows]

    async def select_by_ids(self, ids: Sequence[str]) -> list[ProfileSchema]:
        wanted = [i for i in ids if _is_uuid(i)]
        if not wanted:
            return []
        stmt = (
            select(Profile)
            .where(Profile.id.in_(wanted))
            .order_by(Profile.created_at, Profile.id)
        )
        try:
            async with self._session_factory() as session:
                rows = (await session.execute(stmt)).scalars().all()
        except SQLAlchemyError as e:
            logger.error("Profile store select_by_ids failed | ids=%d error=%s", len(wanted), e)
            raise ProfileStoreError("Failed to fetch profiles") from e
        return [ProfileSchema.model_validate(r) for r in rows]

    async def create(self, data: ProfileCreate) -> ProfileSchema:
        profile = Profile(
            full_name=_clean(data.full_name),
            username=_clean(data.username),
            headline=_clean(data.headline),
            avatar_url=_clean(data.avatar_url),
        )
        try:
            async with self._session_factory() as session:
                session.add(profile)
                await session.commit()
                await session.refresh(profile)
        except IntegrityError as e:
            raise ProfileConflictError("Username is already taken") from e
        except SQLAlchemyError as e:
            logger.error("Profile store create failed: %s", e)
            raise ProfileStoreError("Failed to create profile") from e
        return ProfileSchema.model_validate(profile)


def _is_uuid(value: str) -> bool:
    """Profile ids are UUIDs; anything else cannot match and must not reach the query."""
    try:
        uuid.UUID(str(value))
    except ValueError:
        return False
    return True


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None
