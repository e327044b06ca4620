"""Deterministic keyword matching used when the model path is unavailable."""

from typing import Sequence

from talent_api.domain import ProfileSchema
from talent_api.skills import extract_skills


def search_terms(query: str | None) -> list[str]:
    """Lowercased whitespace-separated terms; empty for a blank query."""
    return (query or "").lower().split()


def _searchable_fields(profile: ProfileSchema) -> list[str]:
    fields = [profile.full_name, profile.username, profile.headline]
    values = [f.lower() for f in fields if f]
    values.extend(skill.lower() for skill in extract_skills(profile.headline))
    return values


def profile_matches(profile: ProfileSchema, terms: Sequence[str]) -> bool:
    """True when any term is a substring of any searchable field (OR across terms and fields)."""
    if not terms:
        return False
    fields = _searchable_fields(profile)
    return any(term in field for term in terms for field in fields)


def match_profiles(profiles: Sequence[ProfileSchema], query: str | None) -> list[ProfileSchema]:
    """Profiles hit by at least one query term, in their original order.

    A blank query has no terms and matches nothing; it is not a "show all" filter.
    """
    terms = search_terms(query)
    if not terms:
        return []
    return [p for p in profiles if profile_matches(p, terms)]
