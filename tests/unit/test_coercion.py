"""Unit tests for typed value coercion."""

import os
import time
from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from amazon_ads_api.exceptions import TypeMismatch, TypeResolutionError, UnknownEnumValue
from amazon_ads_api.hydration import (
    DateTimeType,
    DateType,
    EnumType,
    ListOf,
    ModelType,
    Primitive,
    coerce,
    serialize,
)
from amazon_ads_api.models import PlacementAdjustment, State, SuggestedBid


@pytest.fixture
def local_zone():
    """Switch the process time zone for one test."""
    original = os.environ.get("TZ")

    def switch(name):
        os.environ["TZ"] = name
        time.tzset()

    yield switch

    if original is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = original
    if hasattr(time, "tzset"):
        time.tzset()


@pytest.mark.unit
class TestPrimitives:
    @pytest.mark.parametrize(
        "raw, tag, expected",
        [
            (42, Primitive.INTEGER, 42),
            ("42", Primitive.INTEGER, 42),
            (1.25, Primitive.FLOAT, 1.25),
            ("1.25", Primitive.FLOAT, 1.25),
            (3, Primitive.FLOAT, 3.0),
            ("2.50", Primitive.DECIMAL, Decimal("2.50")),
            ("hello", Primitive.STRING, "hello"),
            (True, Primitive.BOOLEAN, True),
            ("false", Primitive.BOOLEAN, False),
        ],
    )
    def test_compatible_values(self, raw, tag, expected):
        assert coerce(raw, tag, "f") == expected

    @pytest.mark.parametrize(
        "raw, tag",
        [
            ("abc", Primitive.INTEGER),
            (1.5, Primitive.INTEGER),
            ("lots", Primitive.FLOAT),
            (5, Primitive.STRING),
            ("maybe", Primitive.BOOLEAN),
            ({"a": 1}, Primitive.INTEGER),
            ([1, 2], Primitive.STRING),
            (True, Primitive.INTEGER),
            (False, Primitive.FLOAT),
            (True, Primitive.DECIMAL),
        ],
    )
    def test_incompatible_values_raise_type_mismatch(self, raw, tag):
        with pytest.raises(TypeMismatch) as exc:
            coerce(raw, tag, "impressions")
        assert exc.value.field == "impressions"
        assert exc.value.details["field"] == "impressions"
        assert exc.value.expected == tag.value

    def test_absent_value_is_none(self):
        assert coerce(None, Primitive.INTEGER, "clicks") is None


@pytest.mark.unit
class TestEnums:
    def test_known_value(self):
        assert coerce("paused", EnumType(State), "state") is State.PAUSED

    @pytest.mark.parametrize("raw", ["deleted", "ENABLED", 1, ""])
    def test_unknown_value_never_defaults(self, raw):
        with pytest.raises(UnknownEnumValue) as exc:
            coerce(raw, EnumType(State), "state")
        assert exc.value.enum_name == "State"
        assert exc.value.field == "state"

    def test_unhashable_value(self):
        with pytest.raises(UnknownEnumValue):
            coerce({"state": "enabled"}, EnumType(State), "state")


@pytest.mark.unit
class TestDates:
    def test_report_date(self):
        assert coerce("20190301", DateType(), "startDate") == date(2019, 3, 1)

    @pytest.mark.parametrize("raw", ["2019-03-01", "not a date", 20190301])
    def test_non_conforming_date(self, raw):
        with pytest.raises(TypeMismatch) as exc:
            coerce(raw, DateType(), "startDate")
        assert exc.value.expected == "date"

    def test_epoch_millis(self):
        value = coerce(86_400_000, DateTimeType(), "creationDate")
        assert value == datetime(1970, 1, 2, tzinfo=timezone.utc)

    def test_iso_string_with_zulu(self):
        value = coerce("2024-05-01T12:00:00Z", DateTimeType(), "creationDate")
        assert value == datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

    def test_iso_string_without_offset_is_utc(self):
        value = coerce("2024-05-01T12:00:00", DateTimeType(), "creationDate")
        assert value == datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

    @pytest.mark.skipif(not hasattr(time, "tzset"), reason="needs time.tzset")
    def test_naive_timestamp_round_trip_ignores_local_zone(self, local_zone):
        local_zone("America/New_York")
        tag = DateTimeType()
        value = coerce("2024-05-01T12:00:00", tag, "creationDate")
        again = coerce(serialize(value, tag), tag, "creationDate")
        assert again == datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        assert serialize(datetime(2024, 5, 1, 12, 0), tag) == serialize(value, tag)

    @pytest.mark.parametrize("raw", ["yesterday", True, 1.5])
    def test_non_conforming_datetime(self, raw):
        with pytest.raises(TypeMismatch):
            coerce(raw, DateTimeType(), "creationDate")


@pytest.mark.unit
class TestNested:
    def test_nested_model(self):
        value = coerce(
            {"suggested": 0.5, "rangeStart": 0.2, "rangeEnd": "0.9"},
            ModelType("SuggestedBid"),
            "suggestedBid",
        )
        assert isinstance(value, SuggestedBid)
        assert value.rangeEnd == 0.9

    def test_nested_error_carries_path(self):
        with pytest.raises(TypeMismatch) as exc:
            coerce({"suggested": "high"}, ModelType("SuggestedBid"), "suggestedBid")
        assert exc.value.field == "suggestedBid.suggested"

    def test_unregistered_nested_model(self):
        with pytest.raises(TypeResolutionError):
            coerce({}, ModelType("NoSuchModel"), "thing")

    def test_list_of_models(self):
        value = coerce(
            [
                {"predicate": "placementTop", "percentage": 50},
                {"predicate": "placementProductPage", "percentage": 10},
            ],
            ListOf(ModelType("PlacementAdjustment")),
            "adjustments",
        )
        assert [type(v) for v in value] == [PlacementAdjustment, PlacementAdjustment]
        assert value[1].percentage == 10.0

    def test_list_element_error_carries_index_in_path(self):
        with pytest.raises(UnknownEnumValue) as exc:
            coerce(
                [{"predicate": "placementTop"}, {"predicate": "sidebar"}],
                ListOf(ModelType("PlacementAdjustment")),
                "adjustments",
            )
        assert exc.value.field == "adjustments[1].predicate"

    def test_list_tag_rejects_object(self):
        with pytest.raises(TypeMismatch):
            coerce({"a": 1}, ListOf(Primitive.INTEGER), "ids")


@pytest.mark.unit
class TestSerialize:
    def test_wire_forms(self):
        assert serialize(State.ENABLED, EnumType(State)) == "enabled"
        assert serialize(date(2019, 3, 1), DateType()) == "20190301"
        assert serialize(
            datetime(1970, 1, 2, tzinfo=timezone.utc), DateTimeType()
        ) == 86_400_000
        assert serialize(Decimal("2.5"), Primitive.DECIMAL) == 2.5
        assert serialize(None, Primitive.INTEGER) is None
