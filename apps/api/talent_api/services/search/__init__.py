"""Smart search: keyword matching, model response parsing, and the search pipeline."""

from .keyword_match import match_profiles
from .response_parser import (
    ParseFailureKind,
    ParsedModelResponse,
    ResponseParseError,
    parse_model_response,
)
from .smart_search import InvalidSearchRequestError, SmartSearchService

__all__ = [
    "match_profiles",
    "ParseFailureKind",
    "ParsedModelResponse",
    "ResponseParseError",
    "parse_model_response",
    "InvalidSearchRequestError",
    "SmartSearchService",
]
