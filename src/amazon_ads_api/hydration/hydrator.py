"""Model and list hydration.

Hydration turns decoded JSON into typed models by walking a descriptor's
field table and passing each raw value through :func:`coerce`. Keys the
table does not declare are ignored, so new API fields never break existing
clients. These functions keep no state of their own.
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

from ..exceptions import HydrationError, ListElementError, TypeMismatch
from .coercion import coerce, serialize
from .registry import ListTarget, ModelTarget, TypeRegistry, default_registry

if TYPE_CHECKING:
    from ..models.base import ApiModel, ModelList

logger = logging.getLogger(__name__)

ROOT = "$"


def hydrate(
    target: ModelTarget,
    raw: Any,
    registry: Optional[TypeRegistry] = None,
    path: Optional[str] = None,
) -> "ApiModel":
    """Build a model instance from a decoded JSON object.

    :param target: Registered model name, model class or descriptor
    :param raw: Decoded JSON object
    :param registry: Registry to resolve against (default: package registry)
    :param path: Field path of ``raw`` within an enclosing payload
    :return: The populated model
    :raises TypeResolutionError: If ``target`` is not registered
    :raises TypeMismatch: If ``raw`` is not an object or a field does not fit
    :raises UnknownEnumValue: If an enum field holds an unknown value
    """
    if registry is None:
        registry = default_registry()
    descriptor = registry.resolve(target)

    if not isinstance(raw, dict):
        raise TypeMismatch(path or ROOT, f"{descriptor.name} object", raw)

    values: Dict[str, Any] = {}
    for spec in descriptor.fields:
        if spec.json_key not in raw:
            values[spec.attr] = spec.default
            continue
        field = f"{path}.{spec.json_key}" if path else spec.json_key
        value = coerce(raw[spec.json_key], spec.tag, field, registry)
        if value is None:
            # null stands for absent; a non-nullable field without a default
            # cannot hold it
            if spec.default is not None:
                value = spec.default
            elif not spec.nullable:
                raise TypeMismatch(field, str(spec.tag), None)
        values[spec.attr] = value

    return descriptor.model.model_construct(**values)


def hydrate_list(
    target: ListTarget,
    raw: Any,
    registry: Optional[TypeRegistry] = None,
) -> "ModelList":
    """Build an ordered model list from a decoded JSON array.

    Fails on the first bad element; no partial list is returned.

    :param target: Registered list name, list class or descriptor
    :param raw: Decoded JSON array
    :param registry: Registry to resolve against (default: package registry)
    :return: The list, in source order
    :raises TypeResolutionError: If ``target`` is not registered
    :raises TypeMismatch: If ``raw`` is not an array
    :raises ListElementError: If an element fails hydration
    """
    if registry is None:
        registry = default_registry()
    descriptor = registry.resolve_list(target)

    if not isinstance(raw, list):
        raise TypeMismatch(ROOT, f"array of {descriptor.item}", raw)

    items = []
    for index, element in enumerate(raw):
        try:
            items.append(hydrate(descriptor.item, element, registry=registry))
        except HydrationError as e:
            logger.debug(f"{descriptor.name} element {index} rejected: {e.message}")
            raise ListElementError(index, e) from e

    logger.debug(f"Hydrated {descriptor.name} with {len(items)} items")
    return descriptor.list_class(items)


def dehydrate(
    model: "ApiModel", registry: Optional[TypeRegistry] = None
) -> Dict[str, Any]:
    """Serialize a model back to its JSON wire form.

    Absent (``None``) fields are omitted.

    :param model: A registered model instance
    :param registry: Registry to resolve against (default: package registry)
    :return: JSON-serializable dictionary keyed by API field names
    """
    if registry is None:
        registry = default_registry()
    descriptor = registry.resolve(type(model))
    out: Dict[str, Any] = {}
    for spec in descriptor.fields:
        value = getattr(model, spec.attr)
        if value is not None:
            out[spec.json_key] = serialize(value, spec.tag)
    return out
