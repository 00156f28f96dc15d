import json
import sys
from pathlib import Path

import httpx
import pytest

# This repo uses a src/ layout, so when running tests without an editable install,
# we add <repo>/src to sys.path.
repo_root = Path(__file__).resolve().parents[1]
src_path = str(repo_root / "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)


class RecordingTransport(httpx.MockTransport):
    """MockTransport that replays canned responses and keeps every request."""

    def __init__(self, *responses: httpx.Response):
        self.requests: list[httpx.Request] = []
        self._responses = list(responses)
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if len(self._responses) > 1:
            return self._responses.pop(0)
        return self._responses[0]

    def body(self, index: int = -1) -> dict:
        return json.loads(self.requests[index].content)


@pytest.fixture
def replay():
    """Fixture: factory building a RecordingTransport from JSON payloads."""

    def _factory(*payloads, status_code: int = 200) -> RecordingTransport:
        return RecordingTransport(
            *(httpx.Response(status_code, json=p) for p in payloads)
        )

    return _factory


@pytest.fixture
def zhipu_key(monkeypatch):
    monkeypatch.setenv("ZHIPU_API_KEY", "test-key")
    return "test-key"
