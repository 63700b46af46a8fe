"""Pytest configuration and fixtures."""

import logging
from datetime import date

import httpx
import pytest
from faker import Faker

from account_client.client import RemoteAccountClient
from account_client.config import ServiceConfig
from account_client.transport import HttpTransport
from fake_server import NAMESPACE, URL, FakeAccountServer


@pytest.fixture
def today() -> date:
    """Fixed clock value for creation-date fallbacks."""
    return date(2024, 2, 29)


@pytest.fixture
def fake() -> Faker:
    """Seeded Faker for reproducible reply data."""
    Faker.seed(42)
    return Faker("fr_FR")


@pytest.fixture
def service_config() -> ServiceConfig:
    return ServiceConfig(url=URL, namespace=NAMESPACE)


@pytest.fixture
def server() -> FakeAccountServer:
    """Fresh in-memory account service."""
    return FakeAccountServer()


@pytest.fixture
def http_client(server: FakeAccountServer):
    with httpx.Client(transport=httpx.MockTransport(server.handle)) as client:
        yield client


@pytest.fixture
def client(
    service_config: ServiceConfig, http_client: httpx.Client, today: date
) -> RemoteAccountClient:
    """Client wired to the fake server."""
    return RemoteAccountClient(
        service_config,
        transport=HttpTransport(service_config.url, client=http_client),
        clock=lambda: today,
    )


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo setup_logging() changes to the root logger after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
