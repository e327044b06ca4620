"""Shared domain-to-response serializers."""

from talent_api.domain import ProfileSchema, SearchResult
from talent_api.schemas import ProfileResponse, SmartSearchResponse
from talent_api.skills import extract_skills


def profile_to_response(profile: ProfileSchema) -> ProfileResponse:
    """Map ProfileSchema to ProfileResponse, deriving display name and skills."""
    return ProfileResponse(
        id=profile.id,
        full_name=profile.full_name,
        username=profile.username,
        headline=profile.headline,
        avatar_url=profile.avatar_url,
        created_at=profile.created_at,
        display_name=profile.display_name,
        skills=extract_skills(profile.headline),
    )


def search_result_to_response(result: SearchResult) -> SmartSearchResponse:
    return SmartSearchResponse(
        profiles=[profile_to_response(p) for p in result.profiles],
        query=result.query,
        reasoning=result.reasoning,
    )
