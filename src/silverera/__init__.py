"""Client-side access to the chat, vision and image-generation providers."""

from .ai import (
    AIError,
    ChatMessage,
    ImageGenerationRequest,
    ProviderError,
    TransportFailure,
    build_ai,
)

__all__ = [
    "AIError",
    "ChatMessage",
    "ImageGenerationRequest",
    "ProviderError",
    "TransportFailure",
    "build_ai",
]
