"""
Shared fixtures: in-memory profile store, scripted chat provider, API client.
"""
import json
from typing import Sequence

import pytest
from fastapi.testclient import TestClient

from talent_api.core import limiter
from talent_api.dependencies import get_profile_store, get_smart_search_service
from talent_api.domain import ProfileSchema
from talent_api.main import app
from talent_api.providers import ChatProvider
from talent_api.schemas import ProfileCreate
from talent_api.services import ProfileConflictError, ProfileStore, ProfileStoreError, SmartSearchService


class FakeProfileStore(ProfileStore):
    """Profile store backed by a list; fail=True makes every call raise ProfileStoreError."""

    def __init__(self, profiles: Sequence[ProfileSchema] = (), fail: bool = False):
        self.profiles = list(profiles)
        self.fail = fail
        self.select_all_calls = 0

    async def select_all(self) -> list[ProfileSchema]:
        self.select_all_calls += 1
        if self.fail:
            raise ProfileStoreError("Failed to fetch profiles")
        return list(self.profiles)

    async def select_by_ids(self, ids: Sequence[str]) -> list[ProfileSchema]:
        if self.fail:
            raise ProfileStoreError("Failed to fetch profiles")
        wanted = set(ids)
        return [p for p in self.profiles if p.id in wanted]

    async def create(self, data: ProfileCreate) -> ProfileSchema:
        if self.fail:
            raise ProfileStoreError("Failed to create profile")
        if data.username and any(p.username == data.username for p in self.profiles):
            raise ProfileConflictError("Username is already taken")
        profile = ProfileSchema(id=f"id-{len(self.profiles) + 1}", **data.model_dump())
        self.profiles.append(profile)
        return profile


class FakeChatProvider(ChatProvider):
    """Returns a canned reply, or raises a canned error; records prompts it was sent."""

    def __init__(self, reply: str | None = None, error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []
        self.configs: list[dict | None] = []

    async def generate(self, prompt: str, generation_config: dict | None = None) -> str:
        self.prompts.append(prompt)
        self.configs.append(generation_config)
        if self.error is not None:
            raise self.error
        return self.reply or ""


def make_profile(profile_id: str, full_name=None, username=None, headline=None) -> ProfileSchema:
    return ProfileSchema(id=profile_id, full_name=full_name, username=username, headline=headline)


def model_reply(profile_ids: list[str], reasoning: str = "") -> str:
    return json.dumps({"profileIds": profile_ids, "reasoning": reasoning})


@pytest.fixture
def sample_profiles() -> list[ProfileSchema]:
    return [
        make_profile("id-1", "Alex Johnson", "alexj", "Frontend Developer | React, TypeScript"),
        make_profile("id-2", "Sarah Chen", "schen", "Cloud engineer working with AWS and Docker"),
        make_profile("id-3", None, "pm_jess", "Product Manager | Agile, Scrum, 5 years experience"),
    ]


@pytest.fixture(autouse=True)
def _disable_rate_limit():
    limiter.enabled = False
    yield
    limiter.enabled = True


@pytest.fixture
def api():
    """TestClient plus a hook to install the store and chat provider used by the app."""

    class _Api:
        def __init__(self):
            self.client = TestClient(app)

        def use(self, store: ProfileStore, chat_provider: ChatProvider | None = None) -> TestClient:
            app.dependency_overrides[get_profile_store] = lambda: store
            app.dependency_overrides[get_smart_search_service] = lambda: SmartSearchService(
                store=store, chat_provider=chat_provider
            )
            return self.client

    yield _Api()
    app.dependency_overrides.clear()
