"""Skill extraction from profile headlines.

Two headline shapes are understood:
  "Senior Engineer | React, Node.js | AWS"  -> title segment dropped, rest split on commas
  "Backend developer into Python and AWS"    -> known vocabulary terms mined from free text
"""

import re

from talent_api.core.constants import DEFAULT_SKILL, SKILL_VOCABULARY, TENURE_MARKERS

# Whole-word, case-insensitive. Terms like "C++" and "Node.js" end in punctuation,
# so boundaries are "not a letter/digit" rather than \b.
_VOCABULARY_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = tuple(
    (term, re.compile(rf"(?<![A-Za-z0-9]){re.escape(term)}(?![A-Za-z0-9])", re.IGNORECASE))
    for term in SKILL_VOCABULARY
)


def _is_tenure_phrase(token: str) -> bool:
    lowered = token.lower()
    return any(marker in lowered for marker in TENURE_MARKERS)


def _skills_from_segments(headline: str) -> list[str]:
    skills: list[str] = []
    for segment in headline.split("|")[1:]:
        for token in segment.split(","):
            token = token.strip()
            if token and not _is_tenure_phrase(token):
                skills.append(token)
    return skills


def _skills_from_vocabulary(headline: str) -> list[str]:
    found = [term for term, pattern in _VOCABULARY_PATTERNS if pattern.search(headline)]
    return found or [DEFAULT_SKILL]


def extract_skills(headline: str | None) -> list[str]:
    """Derive a skill list from a headline. Empty for a missing/blank headline."""
    if headline is None or not headline.strip():
        return []
    if "|" in headline:
        return _skills_from_segments(headline)
    return _skills_from_vocabulary(headline)
