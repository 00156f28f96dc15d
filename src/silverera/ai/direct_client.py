from __future__ import annotations

from typing import Any, Optional, Sequence, Union

from silverera import config as app_config
from silverera.helpers import clean_image_url

from ._json import decode_chat_content, decode_image_url
from .base import HTTPProvider, VisionClient
from .types import (
    ChatMessage,
    ImageGenerationRequest,
    ImagePart,
    MessageLike,
    TextPart,
    serialize_messages,
)

CHAT_PATH = "/chat/completions"
IMAGE_PATH = "/images/generations"


class DirectAI(HTTPProvider, VisionClient):
    """OpenAI-compatible provider called with a bearer token.

    The token is read from ``config.api_key_env`` when the client is built.
    """

    async def _complete(self, model: str, messages: list[Any]) -> str:
        body: dict[str, Any] = {"model": model, "messages": messages}
        payload = await self._post(CHAT_PATH, body)
        return decode_chat_content(payload, context=f"{self._cfg.provider} {CHAT_PATH}")

    async def chat(self, messages: Sequence[MessageLike]) -> str:
        model = self._cfg.chat_model or app_config.CHAT_MODEL
        return await self._complete(model, serialize_messages(messages))

    async def vision(
        self, image_data: str, prompt: str, system_prompt: Optional[str] = None
    ) -> str:
        """Describe an image.

        ``image_data`` is the base64 payload (or a URL) and is sent as-is.
        """

        messages = [
            ChatMessage(
                role="system",
                content=(
                    app_config.DEFAULT_VISION_SYSTEM_PROMPT
                    if system_prompt is None
                    else system_prompt
                ),
            ),
            ChatMessage(
                role="user",
                content=(TextPart(text=prompt), ImagePart(url=image_data)),
            ),
        ]
        model = self._cfg.vision_model or app_config.VISION_MODEL
        return await self._complete(model, serialize_messages(messages))

    async def generate_image(self, request: Union[ImageGenerationRequest, str]) -> str:
        if isinstance(request, str):
            request = ImageGenerationRequest(prompt=request)
        body = {
            "model": self._cfg.image_model or app_config.IMAGE_MODEL,
            "prompt": request.prompt,
            "size": request.size or app_config.DEFAULT_IMAGE_SIZE,
        }
        payload = await self._post(IMAGE_PATH, body)
        url = decode_image_url(payload, context=f"{self._cfg.provider} {IMAGE_PATH}")
        return clean_image_url(url)
