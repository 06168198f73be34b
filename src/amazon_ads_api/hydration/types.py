"""Type tags driving field coercion.

A tag names the declared type of one model field. Tags are derived once,
when a model is registered, from its pydantic annotations; hydration never
inspects annotations again.
"""

import types
import typing
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Type, Union

from pydantic import BaseModel

from ..exceptions import TypeResolutionError


class Primitive(str, Enum):
    """Scalar type tags."""

    INTEGER = "integer"
    FLOAT = "float"
    DECIMAL = "decimal"
    STRING = "string"
    BOOLEAN = "boolean"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class EnumType:
    """Tag for a field holding one member of a fixed value set."""

    enum: Type[Enum]

    def __str__(self) -> str:
        return self.enum.__name__


@dataclass(frozen=True)
class ModelType:
    """Tag for a nested model, referenced by registered name."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ListOf:
    """Tag for a homogeneous JSON array nested inside a model."""

    item: "TypeTag"

    def __str__(self) -> str:
        return f"list[{self.item}]"


@dataclass(frozen=True)
class DateType:
    """Tag for a calendar date, ``YYYYMMDD`` on the wire."""

    wire_format: str = "%Y%m%d"

    def __str__(self) -> str:
        return "date"


@dataclass(frozen=True)
class DateTimeType:
    """Tag for a timestamp: epoch milliseconds or an ISO-8601 string."""

    def __str__(self) -> str:
        return "datetime"


TypeTag = Union[Primitive, EnumType, ModelType, ListOf, DateType, DateTimeType]

_SCALARS = {
    bool: Primitive.BOOLEAN,
    int: Primitive.INTEGER,
    float: Primitive.FLOAT,
    Decimal: Primitive.DECIMAL,
    str: Primitive.STRING,
}


def is_nullable(annotation: Any) -> bool:
    """Whether ``annotation`` admits ``None``."""
    origin = typing.get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        return type(None) in typing.get_args(annotation)
    return annotation is None or annotation is type(None)


def _strip_optional(annotation: Any) -> Any:
    origin = typing.get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        args = [a for a in typing.get_args(annotation) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def tag_for_annotation(annotation: Any, owner: str = "?", field: str = "?") -> TypeTag:
    """Derive the type tag for a field annotation.

    :param annotation: The field's annotation
    :param owner: Model name, used in the error message
    :param field: Field name, used in the error message
    :return: The tag for the annotation
    :raises TypeResolutionError: If the annotation has no tag
    """
    annotation = _strip_optional(annotation)

    if typing.get_origin(annotation) in (list, typing.List):
        args = typing.get_args(annotation)
        if len(args) == 1:
            return ListOf(tag_for_annotation(args[0], owner, field))

    if isinstance(annotation, type):
        # datetime subclasses date, so order matters
        if issubclass(annotation, datetime):
            return DateTimeType()
        if issubclass(annotation, date):
            return DateType()
        if issubclass(annotation, Enum):
            return EnumType(annotation)
        if issubclass(annotation, BaseModel):
            return ModelType(annotation.__name__)
        if annotation in _SCALARS:
            return _SCALARS[annotation]

    raise TypeResolutionError(
        f"No type tag for {owner}.{field} annotated {annotation!r}",
        type_name=owner,
    )
