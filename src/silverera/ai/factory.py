from __future__ import annotations

from typing import Optional

import httpx

from silverera import config as app_config

from .base import AIClient, AIConfig
from .direct_client import DirectAI
from .errors import AIError
from .proxy_client import ProxyAI


def build_ai(
    *,
    provider: str = "proxy",
    base_url: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> AIClient:
    """Factory for provider clients.

    Providers:
    - proxy: the credential-holding relay (default)
    - zhipu: the direct provider, key taken from ZHIPU_API_KEY

    Extend by adding new provider clients and mapping here.
    """

    p = provider.lower().strip()
    if p == "proxy":
        return ProxyAI(
            AIConfig(provider="proxy", base_url=base_url or app_config.PROXY_BASE_URL),
            transport=transport,
        )
    if p == "zhipu":
        return DirectAI(
            AIConfig(
                provider="zhipu",
                base_url=base_url or app_config.DIRECT_BASE_URL,
                api_key_env=app_config.DIRECT_API_KEY_ENV,
                chat_model=app_config.CHAT_MODEL,
                vision_model=app_config.VISION_MODEL,
                image_model=app_config.IMAGE_MODEL,
            ),
            transport=transport,
        )

    raise AIError(f"Unknown AI provider: {provider}")
