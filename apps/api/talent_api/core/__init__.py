"""Core configuration, logging, and shared infrastructure."""

from talent_api.core.config import Settings, get_settings
from talent_api.core.constants import (
    DEFAULT_SKILL,
    SKILL_VOCABULARY,
    SMART_SEARCH_CORS_HEADERS,
    SMART_SEARCH_GENERATION_CONFIG,
    TENURE_MARKERS,
)
from talent_api.core.limiter import limiter
from talent_api.core.logging import configure_logging

__all__ = [
    "Settings",
    "get_settings",
    "DEFAULT_SKILL",
    "SKILL_VOCABULARY",
    "SMART_SEARCH_CORS_HEADERS",
    "SMART_SEARCH_GENERATION_CONFIG",
    "TENURE_MARKERS",
    "limiter",
    "configure_logging",
]
