"""Shared test fixtures for pteroclient."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from pteroclient.api.client import PanelHTTPClient
from pteroclient.config import ClientConfig

BASE_URL = "https://panel.test"
TOKEN = "ptlc_test-token"


@pytest.fixture
def client_config():
    return ClientConfig(auth_token=TOKEN, base_url=BASE_URL)


@pytest.fixture
def mock_client(client_config):
    """A PanelHTTPClient with mocked JSON helpers."""
    client = PanelHTTPClient(client_config)
    client.get_json = MagicMock(return_value={})
    client.post = MagicMock(return_value=b"")
    return client


@pytest.fixture
def sample_attributes():
    """Raw server attributes as the panel sends them."""
    return {
        "server_owner": True,
        "identifier": "1a7ce997",
        "internal_id": 7,
        "uuid": "1a7ce997-259b-452e-8b4e-cecc464142ca",
        "name": "Survival",
        "node": "Node 1",
        "description": "Vanilla survival world",
        "limits": {"memory": 2048, "swap": 0, "disk": 10000},
        "is_suspended": False,
    }


@pytest.fixture
def sample_listing(sample_attributes):
    """Listing envelope with two servers."""
    second = dict(
        sample_attributes,
        identifier="5b9a41c2",
        name="Creative",
        description="Flat creative world",
    )
    return {
        "object": "list",
        "data": [
            {"object": "server", "attributes": sample_attributes},
            {"object": "server", "attributes": second},
        ],
        "meta": {"pagination": {"total": 2, "count": 2}},
    }


@pytest.fixture
def sample_resources():
    return {
        "object": "stats",
        "attributes": {
            "current_state": "running",
            "is_suspended": False,
            "resources": {"memory_bytes": 588701696, "cpu_absolute": 0.3},
        },
    }
