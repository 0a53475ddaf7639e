"""
Pytest configuration and fixtures
"""
import sys
from pathlib import Path
from types import SimpleNamespace

import anthropic
import httpx
import pytest
from fastapi.testclient import TestClient

# Add backend directory to path for imports
backend_dir = Path(__file__).resolve().parent.parent
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

from main import create_app  # noqa: E402
from senior_care.config.settings import Settings  # noqa: E402

MESSAGES_URL = "https://api.anthropic.com/v1/messages"


def text_reply(text: str):
    """Shape of an anthropic Message carrying a single text block."""
    return SimpleNamespace(content=[SimpleNamespace(type="text", text=text)])


def status_error(error_cls, status_code: int, message: str = "upstream error"):
    response = httpx.Response(status_code, request=httpx.Request("POST", MESSAGES_URL))
    return error_cls(message, response=response, body=None)


def connection_error():
    return anthropic.APIConnectionError(request=httpx.Request("POST", MESSAGES_URL))


class FakeMessages:
    """Stand-in for ``AsyncAnthropic().messages`` that records every call."""

    def __init__(self):
        self.calls = []
        self.reply = text_reply("Hello! I'm here to help.")
        self.error = None

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.reply


class FakeAnthropic:
    def __init__(self):
        self.messages = FakeMessages()


def make_settings(**overrides) -> Settings:
    values = {
        "anthropic_api_key": "test-key",
        "environment": "development",
        "enable_request_logging": False,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def fake_anthropic() -> FakeAnthropic:
    return FakeAnthropic()


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def app(settings, fake_anthropic):
    return create_app(settings, anthropic_client=fake_anthropic)


@pytest.fixture
def client(app) -> TestClient:
    with TestClient(app) as test_client:
        yield test_client
