"""Smart search pipeline.

Pipeline: validate query -> fetch all profiles -> (empty store: answer immediately)
-> model attempt (prompt -> Gemini -> parse) -> on any model-side failure or an empty
answer, keyword fallback over the same profiles -> SearchResult.

Only an invalid request or a store failure surfaces as an error. Every model failure
is recorded as a FallbackReason, logged, and summarized in the reasoning text.
"""

import logging

from talent_api.core import SMART_SEARCH_GENERATION_CONFIG
from talent_api.domain import FallbackReason, ProfileSchema, SearchResult
from talent_api.prompts.smart_search import build_smart_search_prompt
from talent_api.providers import (
    ChatBadStatusError,
    ChatMalformedResponseError,
    ChatProvider,
    ChatServiceError,
    ChatTransportError,
)
from talent_api.services.profile_store import ProfileStore

from .keyword_match import match_profiles
from .response_parser import ParsedModelResponse, ResponseParseError, parse_model_response

logger = logging.getLogger(__name__)

NO_PROFILES_REASONING = "No profiles in store."

_FALLBACK_TRIGGER_TEXT = {
    FallbackReason.MODEL_NOT_CONFIGURED: "AI search not configured",
    FallbackReason.MODEL_TRANSPORT_ERROR: "model request failed",
    FallbackReason.MODEL_BAD_STATUS: "model error occurred",
    FallbackReason.MODEL_MALFORMED_RESPONSE: "model returned malformed response",
    FallbackReason.MODEL_INVALID_OUTPUT: "model returned invalid response",
    FallbackReason.MODEL_EMPTY_RESULT: "model found no matches",
}


class InvalidSearchRequestError(ValueError):
    """Raised when the search query is missing or blank."""


class _ModelFallback(Exception):
    """Internal signal: leave the model path for keyword matching."""

    def __init__(self, reason: FallbackReason, detail: str = "", status_code: int | None = None):
        super().__init__(detail or reason.value)
        self.reason = reason
        self.detail = detail
        self.status_code = status_code


def fallback_reasoning(reason: FallbackReason, match_count: int, status_code: int | None = None) -> str:
    """Caller-facing reasoning for a keyword fallback, e.g. "model returned invalid response; keyword fallback found 2 matches"."""
    trigger = _FALLBACK_TRIGGER_TEXT[reason]
    if status_code is not None:
        trigger = f"{trigger} (HTTP {status_code})"
    noun = "match" if match_count == 1 else "matches"
    return f"{trigger}; keyword fallback found {match_count} {noun}"


def validate_query(query: object) -> str:
    if not isinstance(query, str) or not query.strip():
        raise InvalidSearchRequestError("Query parameter is required")
    return query.strip()


def filter_by_ids(profiles: list[ProfileSchema], profile_ids: list[str]) -> list[ProfileSchema]:
    """Profiles whose id is in profile_ids, in fetch order (membership only, no re-ranking)."""
    wanted = set(profile_ids)
    return [p for p in profiles if p.id in wanted]


class SmartSearchService:
    """Natural-language profile search with a deterministic keyword fallback.

    The profile store and the chat provider are injected; chat_provider=None means
    no model credential is configured and every search is keyword-only.
    """

    def __init__(
        self,
        store: ProfileStore,
        chat_provider: ChatProvider | None = None,
        generation_config: dict | None = None,
    ):
        self.store = store
        self.chat_provider = chat_provider
        self.generation_config = dict(generation_config or SMART_SEARCH_GENERATION_CONFIG)

    async def search(self, query: object) -> SearchResult:
        text = validate_query(query)
        logger.info("smart_search: query received | query=%s", text[:80])

        # ProfileStoreError propagates to the caller
        profiles = await self.store.select_all()
        logger.info("smart_search: profiles fetched | count=%d", len(profiles))
        if not profiles:
            return SearchResult(profiles=[], reasoning=NO_PROFILES_REASONING, query=text, source="empty")

        try:
            parsed = await self._model_attempt(profiles, text)
        except _ModelFallback as fb:
            return self._keyword_fallback(profiles, text, fb)

        matched = filter_by_ids(profiles, parsed.profile_ids)
        if not matched:
            logger.warning(
                "smart_search: model ids matched no stored profile | returned_ids=%d",
                len(parsed.profile_ids),
            )
        logger.info(
            "smart_search: model success | returned_ids=%d matched=%d",
            len(parsed.profile_ids),
            len(matched),
        )
        return SearchResult(profiles=matched, reasoning=parsed.reasoning, query=text, source="ai")

    async def _model_attempt(self, profiles: list[ProfileSchema], query: str) -> ParsedModelResponse:
        if self.chat_provider is None:
            raise _ModelFallback(FallbackReason.MODEL_NOT_CONFIGURED)

        prompt = build_smart_search_prompt(profiles, query)
        logger.info(
            "smart_search: LLM call start | profiles=%d prompt_chars=%d",
            len(profiles),
            len(prompt),
        )
        try:
            raw = await self.chat_provider.generate(prompt, self.generation_config)
        except ChatBadStatusError as e:
            raise _ModelFallback(FallbackReason.MODEL_BAD_STATUS, str(e), e.status_code) from e
        except ChatTransportError as e:
            raise _ModelFallback(FallbackReason.MODEL_TRANSPORT_ERROR, str(e)) from e
        except ChatMalformedResponseError as e:
            raise _ModelFallback(FallbackReason.MODEL_MALFORMED_RESPONSE, str(e)) from e
        except ChatServiceError as e:
            raise _ModelFallback(FallbackReason.MODEL_TRANSPORT_ERROR, str(e)) from e
        except Exception as e:
            logger.exception("smart_search: LLM call raised unexpectedly")
            raise _ModelFallback(FallbackReason.MODEL_TRANSPORT_ERROR, f"{type(e).__name__}: {e}") from e
        logger.info("smart_search: LLM call success | response_chars=%d", len(raw))

        try:
            parsed = parse_model_response(raw)
        except ResponseParseError as e:
            raise _ModelFallback(
                FallbackReason.MODEL_INVALID_OUTPUT,
                f"{e.kind.value}: {e} raw_preview={raw[:100]!r}",
            ) from e
        if not parsed.profile_ids:
            raise _ModelFallback(FallbackReason.MODEL_EMPTY_RESULT, parsed.reasoning[:100])
        return parsed

    def _keyword_fallback(self, profiles: list[ProfileSchema], query: str, fb: _ModelFallback) -> SearchResult:
        matched = match_profiles(profiles, query)
        log = logger.info if fb.reason is FallbackReason.MODEL_NOT_CONFIGURED else logger.warning
        log(
            "smart_search: keyword fallback | reason=%s matched=%d detail=%s",
            fb.reason.value,
            len(matched),
            fb.detail,
        )
        return SearchResult(
            profiles=matched,
            reasoning=fallback_reasoning(fb.reason, len(matched), fb.status_code),
            query=query,
            source="keyword",
            fallback_reason=fb.reason,
        )
