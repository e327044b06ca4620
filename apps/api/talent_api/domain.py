"""
Domain types for directory profiles and smart search.
Read-only records handed to the search pipeline; built fresh per request.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

UNKNOWN_DISPLAY_NAME = "Unknown"

SearchSource = Literal["ai", "keyword", "empty"]


class ProfileSchema(BaseModel):
    """A directory profile. Every text field may be absent."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: str
    full_name: Optional[str] = None
    username: Optional[str] = None
    headline: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: Optional[datetime] = None

    @property
    def display_name(self) -> str:
        """full_name, else username, else "Unknown"."""
        for value in (self.full_name, self.username):
            if value and value.strip():
                return value.strip()
        return UNKNOWN_DISPLAY_NAME


class FallbackReason(str, Enum):
    """Why a smart search ended on keyword matching instead of the model's answer."""

    MODEL_NOT_CONFIGURED = "model_not_configured"
    MODEL_TRANSPORT_ERROR = "model_transport_error"
    MODEL_BAD_STATUS = "model_bad_status"
    MODEL_MALFORMED_RESPONSE = "model_malformed_response"
    MODEL_INVALID_OUTPUT = "model_invalid_output"
    MODEL_EMPTY_RESULT = "model_empty_result"


@dataclass(frozen=True)
class SearchResult:
    profiles: list[ProfileSchema]
    reasoning: str
    query: Optional[str] = None
    source: SearchSource = "keyword"
    fallback_reason: Optional[FallbackReason] = None
