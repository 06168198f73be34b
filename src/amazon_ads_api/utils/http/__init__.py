"""HTTP utilities public API (barrel module).

Recommended import pattern for consumers:
    from amazon_ads_api.utils.http import AdsTransport
"""

from .transport import (
    AdsTransport,
    Transport,
    TransportResponse,
    create_timeout,
    decode_json,
)

__all__ = [
    "AdsTransport",
    "Transport",
    "TransportResponse",
    "create_timeout",
    "decode_json",
]
