"""API test fixtures: the full app over a pinned clock."""

import pytest
from starlette.testclient import TestClient

from api.app import create_app
from core.config import ServiceConfig


@pytest.fixture
def config():
    return ServiceConfig(environment="test")


@pytest.fixture
def app(service, config):
    """Application built by the real factory around the fixed-clock service."""
    return create_app(service=service, config=config)


@pytest.fixture
def client(app):
    return TestClient(app, raise_server_exceptions=False)
