"""Configuration settings for the Amazon Ads API client.

Settings are loaded from environment variables and ``.env`` files.
Credentials are consumed as-is: obtaining and refreshing the access token
is the caller's concern.
"""

import logging
from typing import Literal, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..utils.region_config import RegionConfig


class Settings(BaseSettings):
    """Client settings loaded from environment variables.

    :param client_id: Amazon Ads API client ID
    :type client_id: Optional[str]
    :param access_token: OAuth2 access token sent as a bearer token
    :type access_token: Optional[str]
    :param profile_id: Advertising profile used as the request scope
    :type profile_id: Optional[str]
    :param amazon_ads_region: Amazon Ads API region (na/eu/fe)
    :type amazon_ads_region: Literal["na", "eu", "fe"]
    :param amazon_ads_sandbox_mode: Send requests to the sandbox
    :type amazon_ads_sandbox_mode: bool
    :param amazon_ads_api_version: Path prefix of versioned endpoints
    :type amazon_ads_api_version: str
    :param http_timeout: Per-request timeout in seconds
    :type http_timeout: float
    :param log_level: Logging level for the package loggers
    :type log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    client_id: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("AMAZON_AD_API_CLIENT_ID", "client_id"),
        description="Amazon Ads API Client ID",
    )
    access_token: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("AMAZON_AD_API_ACCESS_TOKEN", "access_token"),
        description="OAuth2 access token",
    )
    profile_id: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("AMAZON_AD_API_PROFILE_ID", "profile_id"),
        description="Amazon Ads Profile ID",
    )

    amazon_ads_region: Literal["na", "eu", "fe"] = Field(
        "na", description="Amazon Ads API Region"
    )
    amazon_ads_sandbox_mode: bool = Field(
        False, description="Enable sandbox mode for testing"
    )
    amazon_ads_api_version: str = Field("v2", description="API version path prefix")

    http_timeout: float = Field(30.0, description="HTTP request timeout in seconds")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", description="Logging level"
    )

    @field_validator("amazon_ads_region", mode="before")
    @classmethod
    def normalize_region(cls, v):
        """Accept region codes in any case.

        :param v: The raw region value
        :return: Lower-cased region code
        """
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @property
    def region_endpoint(self) -> str:
        """Get the region-specific endpoint.

        :return: Region-specific API endpoint URL, or the sandbox endpoint
        :rtype: str
        """
        return RegionConfig.get_api_endpoint(
            self.amazon_ads_region, sandbox=self.amazon_ads_sandbox_mode
        )


def get_settings() -> Settings:
    """Load settings from the current environment."""
    return Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Set the level of the package loggers.

    Handlers are left to the application; this only sets the level and
    attaches a default stream handler when the root logger has none.

    :param level: Level name; defaults to ``Settings.log_level``
    """
    level = (level or get_settings().log_level).upper()
    logging.getLogger("amazon_ads_api").setLevel(level)
    if not logging.getLogger().handlers:
        logging.basicConfig(
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
