from typing import Optional

from pydantic import BaseModel

from talent_api.schemas.profile import ProfileResponse


class SmartSearchRequest(BaseModel):
    # Optional here so a missing query is answered 400 by the service, not 422 by validation
    query: Optional[str] = None


class SmartSearchResponse(BaseModel):
    profiles: list[ProfileResponse]
    query: Optional[str] = None
    reasoning: str


class ErrorResponse(BaseModel):
    error: str
