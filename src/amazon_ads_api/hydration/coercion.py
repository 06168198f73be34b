"""Coercion of raw JSON values into declared field types.

``coerce`` is the single gate every hydrated value passes through. A value
that does not fit its tag raises :class:`TypeMismatch` or
:class:`UnknownEnumValue`; nothing is silently defaulted. ``serialize`` is
the inverse used when a model is turned back into JSON.
"""

from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional

from pydantic import TypeAdapter, ValidationError

from ..exceptions import TypeMismatch, UnknownEnumValue
from .types import (
    DateTimeType,
    DateType,
    EnumType,
    ListOf,
    ModelType,
    Primitive,
    TypeTag,
)

if TYPE_CHECKING:
    from .registry import TypeRegistry

_ADAPTERS: Dict[Primitive, TypeAdapter] = {
    Primitive.INTEGER: TypeAdapter(int),
    Primitive.FLOAT: TypeAdapter(float),
    Primitive.DECIMAL: TypeAdapter(Decimal),
    Primitive.STRING: TypeAdapter(str),
    Primitive.BOOLEAN: TypeAdapter(bool),
}


_NUMERIC = (Primitive.INTEGER, Primitive.FLOAT, Primitive.DECIMAL)


def _coerce_primitive(raw: Any, tag: Primitive, field: Optional[str]) -> Any:
    # JSON objects and arrays never fit a scalar, and JSON booleans never fit
    # a number, even where pydantic would accept them
    if isinstance(raw, (dict, list)):
        raise TypeMismatch(field, tag.value, raw)
    if isinstance(raw, bool) and tag in _NUMERIC:
        raise TypeMismatch(field, tag.value, raw)
    try:
        return _ADAPTERS[tag].validate_python(raw)
    except ValidationError:
        raise TypeMismatch(field, tag.value, raw) from None


def _coerce_enum(raw: Any, tag: EnumType, field: Optional[str]) -> Enum:
    try:
        return tag.enum(raw)
    except (ValueError, TypeError):
        raise UnknownEnumValue(field, tag.enum.__name__, raw) from None


def _coerce_date(raw: Any, tag: DateType, field: Optional[str]) -> date:
    if not isinstance(raw, str):
        raise TypeMismatch(field, "date", raw)
    try:
        return datetime.strptime(raw, tag.wire_format).date()
    except ValueError:
        raise TypeMismatch(field, "date", raw) from None


def _coerce_datetime(raw: Any, field: Optional[str]) -> datetime:
    if isinstance(raw, int) and not isinstance(raw, bool):
        try:
            return datetime.fromtimestamp(raw / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            raise TypeMismatch(field, "datetime", raw) from None
    if isinstance(raw, str):
        text = raw[:-1] + "+00:00" if raw.endswith("Z") else raw
        try:
            value = datetime.fromisoformat(text)
        except ValueError:
            raise TypeMismatch(field, "datetime", raw) from None
        # API timestamps without an offset are UTC
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value
    raise TypeMismatch(field, "datetime", raw)


def coerce(
    raw: Any,
    tag: TypeTag,
    field: Optional[str] = None,
    registry: Optional["TypeRegistry"] = None,
) -> Any:
    """Convert one raw JSON value to the type named by ``tag``.

    :param raw: Decoded JSON value; ``None`` stands for absent or null
    :param tag: Declared type of the field
    :param field: Path of the field, carried into any error raised
    :param registry: Registry used to resolve nested models
    :return: The coerced value, or ``None`` for an absent value
    :raises TypeMismatch: If the value does not fit the tag
    :raises UnknownEnumValue: If an enum value is outside the known set
    :raises TypeResolutionError: If a nested model is not registered
    """
    if raw is None:
        return None
    if isinstance(tag, Primitive):
        return _coerce_primitive(raw, tag, field)
    if isinstance(tag, EnumType):
        return _coerce_enum(raw, tag, field)
    if isinstance(tag, DateType):
        return _coerce_date(raw, tag, field)
    if isinstance(tag, DateTimeType):
        return _coerce_datetime(raw, field)
    if isinstance(tag, ListOf):
        if not isinstance(raw, list):
            raise TypeMismatch(field, str(tag), raw)
        return [
            coerce(item, tag.item, f"{field}[{i}]", registry)
            for i, item in enumerate(raw)
        ]
    if isinstance(tag, ModelType):
        from .hydrator import hydrate

        return hydrate(tag.name, raw, registry=registry, path=field)
    raise TypeError(f"Unsupported type tag {tag!r}")


def serialize(value: Any, tag: TypeTag) -> Any:
    """Convert a coerced value back to its JSON wire form.

    :param value: A value previously produced by :func:`coerce`
    :param tag: Declared type of the field
    :return: A JSON-serializable value
    """
    if value is None:
        return None
    if isinstance(tag, Primitive):
        return float(value) if tag is Primitive.DECIMAL else value
    if isinstance(tag, EnumType):
        return value.value
    if isinstance(tag, DateType):
        return value.strftime(tag.wire_format)
    if isinstance(tag, DateTimeType):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return int(value.timestamp() * 1000)
    if isinstance(tag, ListOf):
        return [serialize(item, tag.item) for item in value]
    if isinstance(tag, ModelType):
        from .hydrator import dehydrate

        return dehydrate(value)
    raise TypeError(f"Unsupported type tag {tag!r}")
