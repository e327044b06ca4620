"""LLM prompt templates."""

from .smart_search import build_smart_search_prompt, format_profile_line

__all__ = ["build_smart_search_prompt", "format_profile_line"]
