"""Region endpoints for the Amazon Ads API.

Single source of truth for the regional API hosts; the transport and the
settings both read from here.
"""

from typing import Dict, Literal, Optional

RegionCode = Literal["na", "eu", "fe"]


class RegionConfig:
    """Region-specific API endpoints."""

    API_ENDPOINTS: Dict[RegionCode, str] = {
        "na": "https://advertising-api.amazon.com",
        "eu": "https://advertising-api-eu.amazon.com",
        "fe": "https://advertising-api-fe.amazon.com",
    }

    SANDBOX_ENDPOINT = "https://advertising-api-test.amazon.com"

    DEFAULT_REGION: RegionCode = "na"

    @classmethod
    def get_api_endpoint(cls, region: Optional[str] = None, sandbox: bool = False) -> str:
        """Get API endpoint URL for the specified region.

        The sandbox has a single endpoint serving every region.

        :param region: Region code (na, eu, fe) or None for default
        :type region: Optional[str]
        :param sandbox: Return the sandbox endpoint instead
        :type sandbox: bool
        :return: Full API endpoint URL
        :rtype: str

        Example:
            >>> RegionConfig.get_api_endpoint("eu")
            'https://advertising-api-eu.amazon.com'
        """
        if sandbox:
            return cls.SANDBOX_ENDPOINT
        if region is None:
            region = cls.DEFAULT_REGION
        region = region.lower()
        return cls.API_ENDPOINTS.get(region, cls.API_ENDPOINTS[cls.DEFAULT_REGION])
