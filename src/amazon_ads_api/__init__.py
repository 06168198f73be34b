"""Amazon Advertising API client package.

This package turns Amazon Ads API responses into typed models and drives
the asynchronous Sponsored Products report lifecycle: request a report,
poll its status, download the gzip payload and hydrate its rows.

:var __version__: Current package version
:type __version__: str
"""

from .exceptions import (
    AmazonAdsError,
    ConfigurationError,
    HydrationError,
    ListElementError,
    ReportDecodeError,
    ReportDecompressionError,
    ReportFailedError,
    ReportNotReadyError,
    ReportStateError,
    TransportError,
    TypeMismatch,
    TypeResolutionError,
    UnknownEnumValue,
)
from .hydration import dehydrate, hydrate, hydrate_list
from .models import ReportRecordType
from .reports import (
    decode_report,
    download_and_decode_report,
    download_report,
    poll_report,
    submit_report,
)
from .utils.http import AdsTransport

__version__ = "0.1.0"

__all__ = [
    "AdsTransport",
    "ReportRecordType",
    "hydrate",
    "hydrate_list",
    "dehydrate",
    "submit_report",
    "poll_report",
    "download_report",
    "decode_report",
    "download_and_decode_report",
    "AmazonAdsError",
    "ConfigurationError",
    "TypeResolutionError",
    "HydrationError",
    "TypeMismatch",
    "UnknownEnumValue",
    "ListElementError",
    "ReportDecompressionError",
    "ReportDecodeError",
    "ReportStateError",
    "ReportNotReadyError",
    "ReportFailedError",
    "TransportError",
]
