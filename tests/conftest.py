"""Pytest configuration and fixtures for Hue transport tests."""

import json
from typing import Any, Optional

import pytest

from hue_transport.config import HueConfig
from hue_transport.transport import HttpTransport


class FakeAdapter:
    """Adapter double returning a canned response."""

    def __init__(
        self,
        response: Any = None,
        status_code: Optional[int] = 200,
        content_type: Optional[str] = "application/json",
        raw: Optional[bytes] = None,
        error: Optional[Exception] = None,
    ):
        self.raw = raw if raw is not None else json.dumps(response).encode()
        self.status_code = status_code
        self.content_type = content_type
        self.error = error
        self.requests = []
        self.opened = 0
        self.closed = 0

    def open(self) -> None:
        self.opened += 1

    def send(self, method: str, url: str, body: Optional[bytes] = None) -> bytes:
        self.requests.append((method, url, body))
        if self.error is not None:
            raise self.error
        return self.raw

    def get_http_status_code(self) -> Optional[int]:
        return self.status_code

    def get_content_type(self) -> Optional[str]:
        return self.content_type

    def close(self) -> None:
        self.closed += 1


@pytest.fixture
def hue_config():
    """Configuration pointing at a local test bridge."""
    return HueConfig(bridge_host="127.0.0.1", username="test_username_1234")


@pytest.fixture
def transport(hue_config):
    """Transport without an explicit adapter."""
    return HttpTransport(hue_config)


@pytest.fixture
def make_adapter():
    """Factory for fake adapters."""
    return FakeAdapter


@pytest.fixture
def mock_hue_response_success():
    """Mock successful Hue API response."""
    return [{"success": {"/lights/1/state/on": True}}]


@pytest.fixture
def mock_hue_response_error():
    """Mock error Hue API response."""
    return [{
        "error": {
            "type": 3,
            "address": "/lights/99",
            "description": "resource, /lights/99, not available"
        }
    }]


@pytest.fixture
def mock_lights_response():
    """Mock response for listing all lights."""
    return {
        "1": {
            "name": "Living Room Light",
            "state": {"on": True, "bri": 200, "ct": 366, "reachable": True},
            "type": "Extended color light"
        },
        "2": {
            "name": "Kitchen Light",
            "state": {"on": False, "bri": 100, "ct": 300, "reachable": True},
            "type": "Dimmable light"
        }
    }


@pytest.fixture
def mock_bridge_config():
    """Mock bridge configuration response."""
    return {
        "name": "Test Bridge",
        "swversion": "1.50.1963220030",
        "apiversion": "1.50.0",
        "mac": "00:17:88:01:02:03",
        "bridgeid": "001788FFFE010203",
        "modelid": "BSB002"
    }
