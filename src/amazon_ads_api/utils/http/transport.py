"""HTTP transport for the Amazon Ads API.

``AdsTransport`` is the only component that talks to the network. It
composes URLs, attaches the standard Amazon Ads headers and turns every
network failure or non-2xx response into a :class:`TransportError`.
Retries, rate limiting and token refresh are deliberately absent: callers
layer their own policy on top.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Protocol

import httpx

from ...config.settings import Settings, get_settings
from ...exceptions import ConfigurationError, TransportError

logger = logging.getLogger(__name__)


def create_timeout(
    connect: float = 5.0,
    read: float = 30.0,
    write: float = 10.0,
    pool: float = 5.0,
) -> httpx.Timeout:
    """Create an httpx timeout configuration.

    :param connect: Connection timeout in seconds
    :param read: Read timeout in seconds
    :param write: Write timeout in seconds
    :param pool: Pool acquisition timeout in seconds
    :return: Configured timeout
    :rtype: httpx.Timeout
    """
    return httpx.Timeout(connect=connect, read=read, write=write, pool=pool)


@dataclass(frozen=True)
class TransportResponse:
    """Status code and raw body of a successful response."""

    status_code: int
    content: bytes
    headers: Mapping[str, str] = field(default_factory=dict)

    def json(self) -> Any:
        """Decode the body as JSON; an empty body decodes to ``None``."""
        if not self.content:
            return None
        return json.loads(self.content)


PREVIEW_BYTES = 64


def decode_json(response: TransportResponse, url: str) -> Any:
    """Decode a response body as JSON.

    :param response: A successful response
    :param url: URL the response came from, for the error message
    :return: The decoded body
    :raises TransportError: If the body is not JSON
    """
    try:
        return response.json()
    except ValueError as e:
        logger.warning(f"{url} returned a body that is not JSON: {e}")
        raise TransportError(
            f"{url} returned a body that is not JSON: {e}",
            status_code=response.status_code,
            response_body=response.content[:PREVIEW_BYTES].decode("utf-8", "replace"),
        ) from e


class Transport(Protocol):
    """What the pipeline and endpoint functions need from a transport."""

    def build_url(self, path: str, params: Optional[Mapping[str, Any]] = None) -> str: ...

    async def execute(
        self,
        method: str,
        url: str,
        body: Any = None,
    ) -> TransportResponse: ...


class AdsTransport:
    """Async transport for Amazon Ads API calls.

    :param base_url: API endpoint, e.g. ``https://advertising-api.amazon.com``
    :param client_id: Sent as ``Amazon-Advertising-API-ClientId``
    :param access_token: Sent as a bearer token
    :param profile_id: Sent as ``Amazon-Advertising-API-Scope`` when set
    :param api_version: Prefix of versioned paths
    :param timeout: httpx timeout
    :param client: Pre-built httpx client (tests, shared pools)
    """

    def __init__(
        self,
        base_url: str,
        client_id: str,
        access_token: str,
        profile_id: Optional[str] = None,
        api_version: str = "v2",
        timeout: Optional[httpx.Timeout] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_version = api_version.strip("/")
        self._headers = {
            "Authorization": f"Bearer {access_token}",
            "Amazon-Advertising-API-ClientId": client_id,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if profile_id:
            self._headers["Amazon-Advertising-API-Scope"] = str(profile_id)
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=timeout or create_timeout(),
            follow_redirects=True,
        )

    @classmethod
    def from_settings(
        cls, settings: Optional[Settings] = None, **kwargs
    ) -> "AdsTransport":
        """Create a transport from environment settings.

        :param settings: Settings to use (default: loaded from environment)
        :param kwargs: Passed to the constructor
        :return: Configured transport
        :raises ConfigurationError: If the client ID or access token is missing
        """
        settings = settings or get_settings()
        if not settings.client_id:
            raise ConfigurationError(
                "Amazon Ads client ID is not configured",
                setting="AMAZON_AD_API_CLIENT_ID",
            )
        if not settings.access_token:
            raise ConfigurationError(
                "Amazon Ads access token is not configured",
                setting="AMAZON_AD_API_ACCESS_TOKEN",
            )
        kwargs.setdefault("timeout", create_timeout(read=settings.http_timeout))
        return cls(
            base_url=settings.region_endpoint,
            client_id=settings.client_id,
            access_token=settings.access_token,
            profile_id=settings.profile_id,
            api_version=settings.amazon_ads_api_version,
            **kwargs,
        )

    def build_url(self, path: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Compose a versioned API URL.

        Absolute URLs (report download locations) are used unchanged apart
        from the query string.

        :param path: Path below the version prefix, or an absolute URL
        :param params: Query parameters; ``None`` values are dropped
        :return: The full URL
        """
        if path.startswith(("http://", "https://")):
            url = path
        else:
            url = f"{self.base_url}/{self.api_version}/{path.lstrip('/')}"
        query = {k: _query_value(v) for k, v in (params or {}).items() if v is not None}
        if query:
            url = str(httpx.URL(url).copy_merge_params(query))
        return url

    async def execute(
        self,
        method: str,
        url: str,
        body: Any = None,
    ) -> TransportResponse:
        """Issue one HTTP request.

        :param method: HTTP method
        :param url: Full URL, usually from :meth:`build_url`
        :param body: JSON-serializable request body
        :return: The successful response
        :raises TransportError: On network errors and non-2xx responses
        """
        logger.debug(f"{method} {url}")
        try:
            response = await self._client.request(
                method,
                url,
                headers=self._headers,
                json=body,
            )
        except httpx.HTTPError as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise TransportError(f"{method} {url} failed: {e}") from e

        if not response.is_success:
            logger.warning(f"{method} {url} returned HTTP {response.status_code}")
            raise TransportError(
                f"{method} {url} returned HTTP {response.status_code}",
                status_code=response.status_code,
                response_body=response.text,
            )

        return TransportResponse(
            status_code=response.status_code,
            content=response.content,
            headers=dict(response.headers),
        )

    async def aclose(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AdsTransport":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


def _query_value(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    if hasattr(value, "value"):
        return value.value
    return value
