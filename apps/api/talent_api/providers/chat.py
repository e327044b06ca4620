import logging
from abc import ABC, abstractmethod

import httpx

from talent_api.core import get_settings

logger = logging.getLogger(__name__)


class ChatServiceError(Exception):
    """Raised when the chat/LLM API is unavailable or returns invalid or unexpected output."""


class ChatTransportError(ChatServiceError):
    """Raised on connection errors and timeouts."""


class ChatBadStatusError(ChatServiceError):
    """Raised when the chat/LLM API answers with a non-success HTTP status."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code


class ChatMalformedResponseError(ChatServiceError):
    """Raised when the response body has no candidates or no text content."""


class ChatProvider(ABC):
    @abstractmethod
    async def generate(self, prompt: str, generation_config: dict | None = None) -> str:
        """Send a single prompt and return the generated text."""
        pass


class GeminiChatProvider(ChatProvider):
    """Gemini generateContent REST endpoint."""

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str,
        timeout: float = 12.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    async def generate(self, prompt: str, generation_config: dict | None = None) -> str:
        payload: dict = {"contents": [{"parts": [{"text": prompt}]}]}
        if generation_config:
            payload["generationConfig"] = generation_config
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                r = await client.post(
                    self.endpoint,
                    json=payload,
                    headers={"Content-Type": "application/json", "x-goog-api-key": self.api_key},
                )
                r.raise_for_status()
                data = r.json()
        except httpx.HTTPStatusError as e:
            body = getattr(e.response, "text", None) or ""
            if body:
                logger.warning(
                    "Gemini API error %s: %s",
                    e.response.status_code,
                    body[:500],
                )
            raise ChatBadStatusError(
                e.response.status_code,
                f"Chat API returned {e.response.status_code}.",
            ) from e
        except httpx.RequestError as e:
            raise ChatTransportError(
                "Chat service unavailable (timeout or connection error)."
            ) from e
        except ValueError as e:
            raise ChatMalformedResponseError("Chat API returned a non-JSON body.") from e
        return _extract_text(data)


def _extract_text(data: object) -> str:
    """candidates[0].content.parts[0].text, with a distinct error for each missing level."""
    candidates = data.get("candidates") if isinstance(data, dict) else None
    if not candidates or not isinstance(candidates, list):
        raise ChatMalformedResponseError(
            "Chat API returned no candidates (e.g. safety filter)."
        )
    content = candidates[0].get("content") if isinstance(candidates[0], dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    if not parts or not isinstance(parts, list) or not isinstance(parts[0], dict):
        raise ChatMalformedResponseError("Chat API candidate has no content parts.")
    text = parts[0].get("text")
    if not isinstance(text, str) or not text.strip():
        raise ChatMalformedResponseError("Chat API returned missing or empty text.")
    return text


def get_chat_provider() -> ChatProvider | None:
    """Configured provider, or None when no Gemini key is set (keyword-only search)."""
    s = get_settings()
    if not s.gemini_api_key:
        return None
    return GeminiChatProvider(
        api_key=s.gemini_api_key,
        model=s.gemini_model,
        base_url=s.gemini_api_base_url,
        timeout=s.gemini_timeout_seconds,
    )
