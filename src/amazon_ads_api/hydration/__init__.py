"""Response hydration: raw JSON to typed models.

Recommended import pattern:
    from amazon_ads_api.hydration import hydrate, hydrate_list
"""

from .coercion import coerce, serialize
from .hydrator import dehydrate, hydrate, hydrate_list
from .registry import (
    FieldSpec,
    ListDescriptor,
    ModelDescriptor,
    TypeRegistry,
    default_registry,
)
from .types import (
    DateTimeType,
    DateType,
    EnumType,
    ListOf,
    ModelType,
    Primitive,
    TypeTag,
    is_nullable,
    tag_for_annotation,
)

__all__ = [
    "coerce",
    "serialize",
    "hydrate",
    "hydrate_list",
    "dehydrate",
    "FieldSpec",
    "ModelDescriptor",
    "ListDescriptor",
    "TypeRegistry",
    "default_registry",
    "Primitive",
    "EnumType",
    "ModelType",
    "ListOf",
    "DateType",
    "DateTimeType",
    "TypeTag",
    "is_nullable",
    "tag_for_annotation",
]
