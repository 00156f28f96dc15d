import pytest

from silverera import config
from silverera.ai import AIError, DirectAI, ProxyAI, build_ai


def test_build_proxy_by_default():
    client = build_ai()
    assert isinstance(client, ProxyAI)
    assert client.config.base_url == config.PROXY_BASE_URL
    assert client.config.api_key_env is None


def test_build_zhipu(zhipu_key):
    client = build_ai(provider=" Zhipu ", base_url="https://provider.test")
    assert isinstance(client, DirectAI)
    assert client.config.base_url == "https://provider.test"
    assert client.config.api_key_env == "ZHIPU_API_KEY"


def test_unknown_provider():
    with pytest.raises(AIError, match="Unknown AI provider"):
        build_ai(provider="nope")


@pytest.mark.asyncio
async def test_built_client_uses_injected_transport(replay):
    transport = replay({"choices": [{"message": {"content": "hi there"}}]})
    client = build_ai(base_url="https://relay.test", transport=transport)
    assert await client.chat([{"role": "user", "content": "hello"}]) == "hi there"
    assert str(transport.requests[0].url) == "https://relay.test/api/ai-chat"
