"""Structured exception classes for the Amazon Ads API client.

Errors fall into three groups:

- Registry defects (:class:`TypeResolutionError`): a model or list type
  was never registered. Not retryable.
- Data contract drift (:class:`HydrationError` and subclasses): the live
  API returned a value the declared models cannot hold. Every instance
  carries the offending field path, and list errors carry the index.
- Report and transport failures (:class:`ReportDecompressionError`,
  :class:`ReportDecodeError`, :class:`ReportStateError`,
  :class:`TransportError`).
"""

import json
from typing import Any, Dict, Optional


class AmazonAdsError(Exception):
    """Base exception for all Amazon Ads API client errors.

    :param message: Human-readable error message
    :param code: Optional error code for programmatic handling
    :param details: Optional dictionary containing additional error context
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize the exception with message, code, and details."""
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format.

        :return: Dictionary containing error code, message, and details
        """
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }

    def to_json(self) -> str:
        """Convert exception to JSON string.

        :return: JSON-encoded string representation of the exception
        """
        return json.dumps(self.to_dict())


class ConfigurationError(AmazonAdsError):
    """Raised for configuration-related errors.

    :param message: Description of the configuration error
    :param setting: Optional name of the problematic setting
    """

    def __init__(self, message: str, setting: Optional[str] = None):
        """Initialize configuration error with message and optional setting."""
        details = {}
        if setting:
            details["setting"] = setting
        super().__init__(message=message, code="CONFIGURATION_ERROR", details=details)


class TypeResolutionError(AmazonAdsError):
    """Raised when a model or list type cannot be resolved.

    Indicates a defect in the type registry or in calling code, never a
    problem with the payload being hydrated.

    :param message: Description of the resolution failure
    :param type_name: Name that failed to resolve
    """

    def __init__(self, message: str, type_name: Optional[str] = None):
        details = {}
        if type_name:
            details["type_name"] = type_name
        super().__init__(message=message, code="TYPE_RESOLUTION_ERROR", details=details)
        self.type_name = type_name


class HydrationError(AmazonAdsError):
    """Base class for payload values that do not fit the declared models.

    :param message: Description of the failure
    :param field: Path of the offending field (``a.b[2].c``)
    :param code: Error code
    :param details: Extra context merged into ``details``
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        merged: Dict[str, Any] = {"field": field}
        merged.update(details or {})
        super().__init__(message=message, code=code, details=merged)
        self.field = field


class TypeMismatch(HydrationError):
    """Raised when a raw value is incompatible with its declared type.

    :param field: Path of the offending field
    :param expected: Name of the declared type
    :param value: The raw value that failed coercion
    """

    def __init__(self, field: Optional[str], expected: str, value: Any):
        super().__init__(
            message=f"Field '{field}' expected {expected}, got {value!r}",
            field=field,
            code="TYPE_MISMATCH",
            details={"expected": expected, "value": repr(value)},
        )
        self.expected = expected
        self.value = value


class UnknownEnumValue(HydrationError):
    """Raised when a categorical value is outside the known enum set.

    :param field: Path of the offending field
    :param enum_name: Name of the declared enum
    :param value: The unrecognized raw value
    """

    def __init__(self, field: Optional[str], enum_name: str, value: Any):
        super().__init__(
            message=f"Field '{field}' has unknown {enum_name} value {value!r}",
            field=field,
            code="UNKNOWN_ENUM_VALUE",
            details={"enum": enum_name, "value": repr(value)},
        )
        self.enum_name = enum_name
        self.value = value


class ListElementError(HydrationError):
    """Raised when one element of a list fails hydration.

    :param index: Position of the failing element in the source array
    :param error: The element's own hydration error
    """

    def __init__(self, index: int, error: HydrationError):
        super().__init__(
            message=f"List element {index} failed hydration: {error.message}",
            field=error.field,
            code="LIST_ELEMENT_ERROR",
            details={"index": index, "cause": error.to_dict()},
        )
        self.index = index
        self.error = error


class ReportDecompressionError(AmazonAdsError):
    """Raised when a downloaded report is not valid gzip data.

    Usually means the storage location returned something other than the
    report (an HTML error page, an expired link). Re-download rather than
    re-parse.

    :param message: Description of the failure
    :param size: Size in bytes of the rejected payload
    :param preview: Leading bytes of the payload, for diagnostics
    """

    def __init__(self, message: str, size: int = 0, preview: str = ""):
        super().__init__(
            message=message,
            code="REPORT_DECOMPRESSION_ERROR",
            details={"size": size, "preview": preview},
        )


class ReportDecodeError(AmazonAdsError):
    """Raised when a decompressed report is not UTF-8 JSON."""

    def __init__(self, message: str):
        super().__init__(message=message, code="REPORT_DECODE_ERROR")


class ReportStateError(AmazonAdsError):
    """Raised when a report job is used in a state that does not allow it.

    :param message: Description of the failure
    :param report_id: Identifier of the report job
    :param status: Status the job was in
    """

    def __init__(self, message: str, report_id: Optional[str], status: Optional[str]):
        super().__init__(
            message=message,
            code="REPORT_STATE_ERROR",
            details={"report_id": report_id, "status": status},
        )
        self.report_id = report_id
        self.status = status


class ReportNotReadyError(ReportStateError):
    """Raised when a download is attempted before the report succeeded."""


class ReportFailedError(ReportStateError):
    """Raised when a download is attempted for a failed report."""


class TransportError(AmazonAdsError):
    """Raised by the HTTP transport for network errors and non-2xx responses.

    :param message: Description of the failure
    :param status_code: Optional HTTP status code from the API response
    :param response_body: Optional response body from the failed request
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_body: Optional[str] = None,
    ):
        details: Dict[str, Any] = {}
        if status_code:
            details["status_code"] = status_code
        if response_body:
            details["response_body"] = response_body
        super().__init__(message=message, code="TRANSPORT_ERROR", details=details)
        self.status_code = status_code
        self.response_body = response_body
