import gzip
import json
import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from amazon_ads_api.utils.http import TransportResponse  # noqa: E402

API_BASE = "https://advertising-api.amazon.com/v2"


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "asyncio: mark test to run in an asyncio event loop"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch):
    """Set the environment variables Settings reads during tests."""
    monkeypatch.setenv("AMAZON_AD_API_CLIENT_ID", "test-client-id")
    monkeypatch.setenv("AMAZON_AD_API_ACCESS_TOKEN", "test-access-token")
    monkeypatch.setenv("AMAZON_AD_API_PROFILE_ID", "test-profile-123")
    monkeypatch.setenv("AMAZON_ADS_REGION", "na")
    monkeypatch.setenv("AMAZON_ADS_SANDBOX_MODE", "false")
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    yield


def json_response(payload, status_code=200) -> TransportResponse:
    """Build a transport response carrying a JSON body."""
    return TransportResponse(
        status_code=status_code, content=json.dumps(payload).encode("utf-8")
    )


def gzip_json(payload) -> bytes:
    """Compress a payload the way report downloads are served."""
    return gzip.compress(json.dumps(payload).encode("utf-8"))


@pytest.fixture
def mock_transport():
    """Transport double: real-looking URLs, scripted ``execute`` results."""

    def build_url(path, params=None):
        if path.startswith("https://"):
            return path
        url = f"{API_BASE}/{path}"
        if params:
            url += "?" + "&".join(f"{k}={v}" for k, v in params.items())
        return url

    transport = MagicMock()
    transport.build_url = MagicMock(side_effect=build_url)
    transport.execute = AsyncMock()
    return transport


@pytest.fixture
def make_response():
    return json_response


@pytest.fixture
def gzip_payload():
    return gzip_json
