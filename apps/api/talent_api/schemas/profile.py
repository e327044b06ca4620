from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, model_validator


class ProfileResponse(BaseModel):
    id: str
    full_name: Optional[str] = None
    username: Optional[str] = None
    headline: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: Optional[datetime] = None
    display_name: str
    skills: list[str] = []


class ProfileListResponse(BaseModel):
    profiles: list[ProfileResponse]


class ProfileCreate(BaseModel):
    full_name: Optional[str] = Field(None, max_length=255)
    username: Optional[str] = Field(None, max_length=255)
    headline: Optional[str] = None
    avatar_url: Optional[str] = Field(None, max_length=1000)

    @model_validator(mode="after")
    def _require_display_name(self) -> "ProfileCreate":
        """A profile must be nameable: full_name or username has to be non-blank."""
        if not (self.full_name or "").strip() and not (self.username or "").strip():
            raise ValueError("full_name or username is required")
        return self
