"""Configure pytest environment for all tests."""

import logging
from typing import Any, List

import httpx
import pytest

logger = logging.getLogger(__name__)

_ENV_VARS = (
    "ELEVENLABS_API_KEY",
    "VOCALIS_ELEVENLABS_BASE_URL",
    "VOCALIS_ELEVENLABS_TIMEOUT_MS",
)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Point configuration at an empty directory and clear provider env vars."""
    config_dir = tmp_path / "vocalis-config"
    monkeypatch.setenv("VOCALIS_CONFIG_DIR", str(config_dir))
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield config_dir


class FakeElevenLabsAPI:
    """Serves a fixed ``/models`` payload and records incoming requests."""

    def __init__(self, payload: Any = None, status_code: int = 200, content: bytes | None = None):
        self.payload = [] if payload is None else payload
        self.status_code = status_code
        self.content = content
        self.requests: List[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.payload)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))

    @property
    def request_count(self) -> int:
        return len(self.requests)


def model_payload(model_id: str, *, tts: bool = False, conversion: bool = False, **extra):
    payload = {
        "model_id": model_id,
        "name": model_id,
        "can_do_text_to_speech": tts,
        "can_do_voice_conversion": conversion,
    }
    payload.update(extra)
    return payload


@pytest.fixture
def fake_api():
    """Factory for fake ``/models`` endpoints."""
    return FakeElevenLabsAPI


@pytest.fixture
def payload():
    """Factory for single entries of the ``/models`` response."""
    return model_payload
