import json

import pytest

from amazon_ads_api.exceptions import (
    AmazonAdsError,
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


@pytest.mark.unit
def test_every_error_shares_the_base():
    for cls in (
        TypeResolutionError,
        TypeMismatch,
        UnknownEnumValue,
        ListElementError,
        ReportDecompressionError,
        ReportDecodeError,
        ReportNotReadyError,
        ReportFailedError,
        TransportError,
    ):
        assert issubclass(cls, AmazonAdsError)


@pytest.mark.unit
def test_kinds_are_distinguishable():
    assert not issubclass(TypeResolutionError, HydrationError)
    assert not issubclass(ReportDecompressionError, HydrationError)
    assert not issubclass(ReportDecodeError, ReportDecompressionError)
    assert not issubclass(TransportError, HydrationError)
    assert issubclass(ReportFailedError, ReportStateError)
    assert not issubclass(ReportFailedError, ReportNotReadyError)


@pytest.mark.unit
def test_type_mismatch_context():
    error = TypeMismatch("rows[3].clicks", "integer", "many")
    assert error.code == "TYPE_MISMATCH"
    assert error.details == {
        "field": "rows[3].clicks",
        "expected": "integer",
        "value": "'many'",
    }
    assert "rows[3].clicks" in str(error)


@pytest.mark.unit
def test_list_element_error_wraps_inner():
    inner = UnknownEnumValue("state", "State", "deleted")
    error = ListElementError(4, inner)
    assert error.index == 4
    assert error.error is inner
    assert error.field == "state"
    payload = json.loads(error.to_json())
    assert payload["error"] == "LIST_ELEMENT_ERROR"
    assert payload["details"]["index"] == 4
    assert payload["details"]["cause"]["error"] == "UNKNOWN_ENUM_VALUE"


@pytest.mark.unit
def test_transport_error_omits_empty_context():
    assert TransportError("connection reset").details == {}
    error = TransportError("bad request", status_code=400, response_body="{}")
    assert error.to_dict()["details"] == {"status_code": 400, "response_body": "{}"}
