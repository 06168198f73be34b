import logging

import pytest

from amazon_ads_api.config.settings import Settings, configure_logging
from amazon_ads_api.utils.region_config import RegionConfig


@pytest.mark.unit
def test_credentials_read_from_environment():
    settings = Settings(_env_file=None)
    assert settings.client_id == "test-client-id"
    assert settings.access_token == "test-access-token"
    assert settings.profile_id == "test-profile-123"
    assert settings.amazon_ads_api_version == "v2"


@pytest.mark.unit
@pytest.mark.parametrize(
    "region, endpoint",
    [
        ("na", "https://advertising-api.amazon.com"),
        ("EU", "https://advertising-api-eu.amazon.com"),
        (" fe ", "https://advertising-api-fe.amazon.com"),
    ],
)
def test_region_endpoint(monkeypatch, region, endpoint):
    monkeypatch.setenv("AMAZON_ADS_REGION", region)
    assert Settings(_env_file=None).region_endpoint == endpoint


@pytest.mark.unit
def test_sandbox_overrides_region(monkeypatch):
    monkeypatch.setenv("AMAZON_ADS_REGION", "eu")
    monkeypatch.setenv("AMAZON_ADS_SANDBOX_MODE", "true")
    assert Settings(_env_file=None).region_endpoint == RegionConfig.SANDBOX_ENDPOINT


@pytest.mark.unit
def test_invalid_region_rejected(monkeypatch):
    from pydantic import ValidationError

    monkeypatch.setenv("AMAZON_ADS_REGION", "apac")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


@pytest.mark.unit
def test_region_config_helpers():
    assert RegionConfig.get_api_endpoint("EU") == "https://advertising-api-eu.amazon.com"
    assert RegionConfig.get_api_endpoint("apac") == "https://advertising-api.amazon.com"
    assert RegionConfig.get_api_endpoint(None) == "https://advertising-api.amazon.com"


@pytest.mark.unit
def test_configure_logging_sets_package_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    configure_logging()
    assert logging.getLogger("amazon_ads_api").level == logging.DEBUG
    configure_logging("warning")
    assert logging.getLogger("amazon_ads_api").level == logging.WARNING
