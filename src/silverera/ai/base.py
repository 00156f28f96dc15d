from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Optional, Protocol, Sequence, Union

import httpx

from silverera import logger as logger_mod

from ._json import error_message
from .errors import AIError, ProviderError, TransportFailure
from .types import ImageGenerationRequest, MessageLike

log = logger_mod.get_logger()


@dataclass(frozen=True)
class AIConfig:
    provider: str
    base_url: str
    # Name of the env var holding the bearer token; None sends no credential.
    api_key_env: Optional[str] = None
    chat_model: Optional[str] = None
    vision_model: Optional[str] = None
    image_model: Optional[str] = None


class AIClient(Protocol):
    """Operations every provider offers."""

    async def chat(self, messages: Sequence[MessageLike]) -> str:
        raise NotImplementedError

    async def generate_image(self, request: Union[ImageGenerationRequest, str]) -> str:
        raise NotImplementedError


class VisionClient(AIClient, Protocol):
    async def vision(
        self, image_data: str, prompt: str, system_prompt: Optional[str] = None
    ) -> str:
        raise NotImplementedError


def resolve_api_key(config: AIConfig) -> Optional[str]:
    if not config.api_key_env:
        return None
    api_key = os.getenv(config.api_key_env)
    if not api_key:
        raise AIError(
            f"Missing env var {config.api_key_env} for {config.provider} API key"
        )
    return api_key


class HTTPProvider:
    """Issues one JSON POST per call and unwraps the provider envelope."""

    def __init__(
        self,
        config: AIConfig,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._cfg = config
        self._api_key = resolve_api_key(config)
        self._transport = transport

    @property
    def config(self) -> AIConfig:
        return self._cfg

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    async def _post(self, path: str, body: dict[str, Any]) -> Any:
        """POST ``body`` to ``path`` and return the decoded JSON payload.

        Raises ProviderError when the payload carries an error indicator
        (whatever the HTTP status) and TransportFailure for everything the
        transport layer gets wrong.
        """

        context = f"{self._cfg.provider} {path}"
        log.debug(f"POST {context}")

        try:
            async with httpx.AsyncClient(
                base_url=self._cfg.base_url, transport=self._transport
            ) as client:
                response = await client.post(path, json=body, headers=self._headers())
        except httpx.HTTPError as e:
            log.warning(f"⚠️ Transport error while calling {context}: {e}")
            raise TransportFailure(f"Request to {context} failed: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            log.warning(
                f"⚠️ Non-JSON response from {context}: {response.status_code}"
            )
            raise TransportFailure(
                f"Non-JSON response from {context} (status {response.status_code})"
            ) from e

        message = error_message(payload)
        if message is not None:
            log.warning(f"⚠️ Provider error from {context}: {message}")
            raise ProviderError(message, status_code=response.status_code)

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            log.warning(f"⚠️ HTTP {response.status_code} from {context}")
            raise TransportFailure(
                f"HTTP {response.status_code} from {context}"
            ) from e

        return payload
