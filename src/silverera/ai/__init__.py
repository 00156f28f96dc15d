"""Provider access for chat, vision and image generation.

Design goals:
- One POST per call, no retries, no caching, no shared state between calls.
- Every provider path checks for an error indicator and decodes the response
  against an explicit schema, so callers only ever see ProviderError or
  TransportFailure.
- Credentials come from the environment, never from source.
"""

from .base import AIClient, AIConfig, VisionClient
from .direct_client import DirectAI
from .errors import AIError, ProviderError, ResponseShapeError, TransportFailure
from .factory import build_ai
from .proxy_client import ProxyAI
from .types import ChatMessage, ImageGenerationRequest, ImagePart, TextPart

__all__ = [
    "AIClient",
    "AIConfig",
    "AIError",
    "ChatMessage",
    "DirectAI",
    "ImageGenerationRequest",
    "ImagePart",
    "ProviderError",
    "ProxyAI",
    "ResponseShapeError",
    "TextPart",
    "TransportFailure",
    "VisionClient",
    "build_ai",
]
