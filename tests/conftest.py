"""Common test fixtures and configuration."""

import httpx
import pytest

from fake_backend import BackendState, create_fake_backend
from presentations.api_client import PresentationApiClient
from presentations.config import Settings
from presentations.services.session_gate import SessionGate
from presentations.services.workspace import FileWorkspace

API_URL = "http://backend.test"


@pytest.fixture
def settings() -> Settings:
    return Settings(API_URL=API_URL, LOG_LEVEL="DEBUG")


@pytest.fixture
def backend() -> BackendState:
    return BackendState(password="secret")


@pytest.fixture
def transport(backend) -> httpx.ASGITransport:
    return httpx.ASGITransport(app=create_fake_backend(backend))


@pytest.fixture
def api(settings, transport) -> PresentationApiClient:
    return PresentationApiClient(settings=settings, transport=transport)


@pytest.fixture
def session_store() -> dict:
    return {}


@pytest.fixture
def gate(session_store, api) -> SessionGate:
    return SessionGate(session_store, api)


@pytest.fixture
def workspace(api) -> FileWorkspace:
    return FileWorkspace(api)


@pytest.fixture
def unreachable_api(settings) -> PresentationApiClient:
    """Client whose every request fails at the transport level."""

    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    return PresentationApiClient(settings=settings, transport=httpx.MockTransport(refuse))
