"""
Pytest fixtures for WhatsApp Cloud tests.
"""

import httpx
import pytest

from whatsapp_cloud.client import WhatsAppClient
from whatsapp_cloud.config import ClientConfig

ACCESS_TOKEN = "test-access-token"
PHONE_NUMBER_ID = "1234567890"
WABA_ID = "9876543210"
APP_SECRET = "test_app_secret"
VERIFY_TOKEN = "test_verify_token"


class GraphRecorder:
    """
    Stand-in for the Graph API behind httpx.MockTransport.

    Records every request and answers with the configured status/body.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.json: object = {"success": True}
        self.content: bytes | None = None
        self.headers: dict[str, str] = {}

    def reply(self, status_code: int = 200, json: object = None, content: bytes | None = None, headers=None):
        self.status_code = status_code
        self.json = json
        self.content = content
        self.headers = headers or {}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content, headers=self.headers)
        return httpx.Response(self.status_code, json=self.json, headers=self.headers)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def config():
    """Valid client configuration."""
    return ClientConfig(
        access_token=ACCESS_TOKEN,
        phone_number_id=PHONE_NUMBER_ID,
        business_account_id=WABA_ID,
        app_secret=APP_SECRET,
        verify_token=VERIFY_TOKEN,
    )


@pytest.fixture
def graph():
    """Recording Graph API double."""
    return GraphRecorder()


@pytest.fixture
def mock_transport(graph):
    return httpx.MockTransport(graph)


@pytest.fixture
def client(config, mock_transport):
    """WhatsAppClient wired to the recording Graph API."""
    return WhatsAppClient(config, transport=mock_transport)


@pytest.fixture
def wa_env(monkeypatch):
    """WA_* environment for code paths that load config from the environment."""
    monkeypatch.setenv("WA_ACCESS_TOKEN", ACCESS_TOKEN)
    monkeypatch.setenv("WA_PHONE_NUMBER_ID", PHONE_NUMBER_ID)
    monkeypatch.setenv("WA_BUSINESS_ACCOUNT_ID", WABA_ID)
    monkeypatch.setenv("WA_APP_SECRET", APP_SECRET)
    monkeypatch.setenv("WA_VERIFY_TOKEN", VERIFY_TOKEN)
