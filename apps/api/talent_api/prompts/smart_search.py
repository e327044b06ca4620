"""Prompt for model-backed profile search.

The model sees every candidate profile as one line and must answer with a single
JSON object: {"profileIds": [...], "reasoning": "..."}. The response parser
locates that object structurally, so prose or code fences around it are tolerated.
"""

from typing import Sequence

from talent_api.domain import ProfileSchema
from talent_api.skills import extract_skills

SKILL_SEPARATOR = ", "


def format_profile_line(profile: ProfileSchema) -> str:
    """One compact line: id, display name, headline, extracted skills."""
    skills = extract_skills(profile.headline)
    headline = (profile.headline or "").strip() or "N/A"
    return (
        f"ID: {profile.id} | Name: {profile.display_name} | "
        f"Headline: {headline} | Skills: {SKILL_SEPARATOR.join(skills) or 'N/A'}"
    )


def build_smart_search_prompt(profiles: Sequence[ProfileSchema], query: str) -> str:
    profiles_context = "\n".join(format_profile_line(p) for p in profiles)
    return f"""You are a helpful assistant that finds relevant talent profiles based on search queries.

PROFILES (one per line)
{profiles_context}

SEARCH QUERY
"{query}"

TASK
Select the profiles that match the search query. Judge by role, headline and skills.
Only include profiles that are clearly relevant. Use IDs exactly as listed above.

OUTPUT (STRICT)
Return ONLY a JSON object with exactly these two fields:
{{
  "profileIds": ["<profile id>", "<profile id>"],
  "reasoning": "<one or two sentences explaining why these profiles match>"
}}
- "profileIds" is an array of ID strings copied from the PROFILES list; use [] if nothing matches.
- "reasoning" is a plain string.
- Do NOT add any other fields, markdown, or text outside the JSON object.
"""
