from __future__ import annotations

from typing import Sequence, Union

from silverera.helpers import clean_image_url

from ._json import decode_chat_content, decode_image_url
from .base import AIClient, HTTPProvider
from .types import ImageGenerationRequest, MessageLike, serialize_messages

CHAT_PATH = "/api/ai-chat"
IMAGE_PATH = "/api/ai-image"


class ProxyAI(HTTPProvider, AIClient):
    """Relay client.

    The relay holds the real provider key, so requests carry no credential
    and no model name; the relay decides both.
    """

    async def chat(self, messages: Sequence[MessageLike]) -> str:
        body = {"messages": serialize_messages(messages)}
        payload = await self._post(CHAT_PATH, body)
        return decode_chat_content(payload, context=f"{self._cfg.provider} {CHAT_PATH}")

    async def generate_image(self, request: Union[ImageGenerationRequest, str]) -> str:
        if isinstance(request, str):
            request = ImageGenerationRequest(prompt=request)
        payload = await self._post(IMAGE_PATH, request.to_body())
        url = decode_image_url(payload, context=f"{self._cfg.provider} {IMAGE_PATH}")
        return clean_image_url(url)
