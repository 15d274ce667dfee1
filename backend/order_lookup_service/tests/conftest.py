"""Shared fixtures for the order lookup service tests."""

import pytest
from fastapi.testclient import TestClient

from order_lookup.main import create_app
from order_lookup.service import OrderLookupService


@pytest.fixture
def lookup_service() -> OrderLookupService:
    return OrderLookupService()


@pytest.fixture
def client(lookup_service: OrderLookupService):
    """Test client over an app wired with the real lookup service."""
    with TestClient(create_app(lookup_service)) as test_client:
        yield test_client
