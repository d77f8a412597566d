"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - client_config: Explicit configuration pointing at a fake backend
    - fake_backend: Scriptable chat/upload endpoints behind httpx.MockTransport
    - backend: BackendClient wired to the fake backend
    - controller: Fresh SessionController seeded with the greeting
    - resume: A small picked file
    - async_client: HTTPX client for the hosting app
"""

from collections.abc import AsyncGenerator, Callable

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from onboarding_chat.api.app import create_app
from onboarding_chat.client.backend import BackendClient
from onboarding_chat.client.config import ClientConfig
from onboarding_chat.models.schemas import UploadedFile
from onboarding_chat.session.controller import SessionController

BACKEND_URL = "http://backend.test"

Reply = dict | httpx.Response | Exception


class FakeBackend:
    """Answers chat and upload requests from queued replies.

    Each queued reply is a JSON-able dict, a ready httpx.Response, or an
    exception to raise from the transport.
    """

    def __init__(self) -> None:
        self.chat_replies: list[Reply] = []
        self.upload_replies: list[Reply] = []
        self.requests: list[httpx.Request] = []
        self.observe: Callable[[httpx.Request], None] | None = None

    @property
    def chat_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == "/api/chat"]

    @property
    def upload_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == "/api/upload"]

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.observe is not None:
            self.observe(request)

        queue = self.chat_replies if request.url.path == "/api/chat" else self.upload_replies
        reply = queue.pop(0)
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, httpx.Response):
            return reply
        return httpx.Response(200, json=reply)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def client_config() -> ClientConfig:
    """Return configuration pointing at the fake backend.

    Returns:
        ClientConfig with a short timeout and default endpoint paths.
    """
    return ClientConfig(api_base_url=BACKEND_URL, request_timeout=5.0)


@pytest.fixture
def fake_backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def backend(client_config: ClientConfig, fake_backend: FakeBackend) -> BackendClient:
    return BackendClient(config=client_config, transport=fake_backend.transport)


@pytest.fixture
def controller(backend: BackendClient) -> SessionController:
    return SessionController(backend)


@pytest.fixture
def resume() -> UploadedFile:
    return UploadedFile(name="resume.pdf", content=b"%PDF-1.4 resume", content_type="application/pdf")


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for the hosting app.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
