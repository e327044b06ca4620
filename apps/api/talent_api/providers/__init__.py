from .chat import (
    ChatBadStatusError,
    ChatMalformedResponseError,
    ChatProvider,
    ChatServiceError,
    ChatTransportError,
    GeminiChatProvider,
    get_chat_provider,
)

__all__ = [
    "ChatBadStatusError",
    "ChatMalformedResponseError",
    "ChatProvider",
    "ChatServiceError",
    "ChatTransportError",
    "GeminiChatProvider",
    "get_chat_provider",
]
