"""
pytest fixtures for integration tests.

Integration tests use:
- FastAPI's TestClient (in-process, no Docker needed)
- The real notifier, configurator and Jinja2 message builder
- Dependency overrides to inject StubEmailTransport instead of SMTP

Decision: Stubbing only the transport exercises every layer except the
network. Delivery through a real SMTP server is left to manual runs against
Mailhog.
"""

from collections.abc import Callable, Iterator

import pytest
from fastapi.testclient import TestClient

from config.settings import Settings
from otp_delivery.infrastructure.email.transport_configurator import resolve_transport_config
from otp_delivery.main import app
from otp_delivery.presentation.dependencies import get_config_resolver, get_email_transport
from tests.mocks.stub_email_transport import StubEmailTransport


@pytest.fixture
def stub_transport() -> StubEmailTransport:
    return StubEmailTransport(delivery_id="abc123")


@pytest.fixture
def make_client(stub_transport: StubEmailTransport) -> Iterator[Callable[[Settings], TestClient]]:
    """
    Factory for a TestClient bound to the given settings snapshot.

    Decision: Using TestClient as a context manager runs the app's lifespan,
    like a real deployment.
    """
    clients: list[TestClient] = []

    def _make(settings: Settings) -> TestClient:
        app.dependency_overrides[get_config_resolver] = lambda: (
            lambda: resolve_transport_config(settings)
        )
        app.dependency_overrides[get_email_transport] = lambda: stub_transport
        client = TestClient(app)
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)
    # Clean up overrides after test
    app.dependency_overrides.clear()
