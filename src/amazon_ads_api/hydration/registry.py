"""Model and list descriptors, and the registry that resolves them.

Each registered model class is turned into a :class:`ModelDescriptor` once:
an explicit table of ``json key -> (attribute, type tag)`` entries. The
hydrator only ever reads these tables, so the registry is safe to share
between threads and tasks.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Iterable, Mapping, Tuple, Type, Union

from ..exceptions import TypeResolutionError
from .types import ListOf, ModelType, TypeTag, is_nullable, tag_for_annotation

if TYPE_CHECKING:
    from ..models.base import ApiModel, ModelList

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldSpec:
    """One entry of a model's field table.

    :param attr: Attribute name on the model
    :param json_key: Key in the API payload, verbatim
    :param tag: Declared type of the field
    :param default: Value used when the key is absent or null
    :param nullable: Whether the declared type admits ``None``
    """

    attr: str
    json_key: str
    tag: TypeTag
    default: Any = None
    nullable: bool = True


@dataclass(frozen=True)
class ModelDescriptor:
    """Field table for one model type."""

    name: str
    model: Type["ApiModel"]
    fields: Tuple[FieldSpec, ...]

    @classmethod
    def from_model(cls, model: Type["ApiModel"]) -> "ModelDescriptor":
        """Build the field table from a model's declared pydantic fields.

        :param model: The model class
        :return: Its descriptor
        :raises TypeResolutionError: If a field annotation has no type tag
        """
        specs = []
        for attr, info in model.model_fields.items():
            tag = tag_for_annotation(info.annotation, model.__name__, attr)
            default = None if info.is_required() else info.get_default(
                call_default_factory=True
            )
            specs.append(
                FieldSpec(
                    attr,
                    info.alias or attr,
                    tag,
                    default,
                    nullable=is_nullable(info.annotation),
                )
            )
        return cls(name=model.__name__, model=model, fields=tuple(specs))


@dataclass(frozen=True)
class ListDescriptor:
    """Declares the item model of a homogeneous list type."""

    name: str
    item: str
    list_class: Type["ModelList"]


ModelTarget = Union[str, Type["ApiModel"], ModelDescriptor]
ListTarget = Union[str, Type["ModelList"], ListDescriptor]


def _nested_names(tag: TypeTag) -> Iterable[str]:
    if isinstance(tag, ModelType):
        yield tag.name
    elif isinstance(tag, ListOf):
        yield from _nested_names(tag.item)


class TypeRegistry:
    """Immutable name -> descriptor mapping for models and model lists.

    Every nested model reference and every list item type must itself be
    registered; a dangling reference fails at construction rather than on
    the first payload that exercises it.

    :param models: Model classes to register
    :param lists: Model list classes to register
    """

    def __init__(
        self,
        models: Iterable[Type["ApiModel"]] = (),
        lists: Iterable[Type["ModelList"]] = (),
    ):
        descriptors = {}
        for model in models:
            descriptor = ModelDescriptor.from_model(model)
            descriptors[descriptor.name] = descriptor

        for descriptor in descriptors.values():
            for spec in descriptor.fields:
                for name in _nested_names(spec.tag):
                    if name not in descriptors:
                        raise TypeResolutionError(
                            f"{descriptor.name}.{spec.attr} references "
                            f"unregistered model '{name}'",
                            type_name=name,
                        )

        list_descriptors = {}
        for list_class in lists:
            item = list_class.item_model.__name__
            if item not in descriptors:
                raise TypeResolutionError(
                    f"{list_class.__name__} item model '{item}' is not registered",
                    type_name=item,
                )
            list_descriptors[list_class.__name__] = ListDescriptor(
                name=list_class.__name__, item=item, list_class=list_class
            )

        self._models: Mapping[str, ModelDescriptor] = MappingProxyType(descriptors)
        self._lists: Mapping[str, ListDescriptor] = MappingProxyType(list_descriptors)
        logger.debug(
            f"Type registry built: {len(self._models)} models, "
            f"{len(self._lists)} lists"
        )

    @property
    def models(self) -> Mapping[str, ModelDescriptor]:
        return self._models

    @property
    def lists(self) -> Mapping[str, ListDescriptor]:
        return self._lists

    def resolve(self, target: ModelTarget) -> ModelDescriptor:
        """Resolve a model name, class or descriptor to its registered descriptor.

        :param target: What to resolve
        :return: The registered descriptor
        :raises TypeResolutionError: If the target is not registered
        """
        if isinstance(target, ModelDescriptor):
            name = target.name
        elif isinstance(target, str):
            name = target
        else:
            name = getattr(target, "__name__", repr(target))

        descriptor = self._models.get(name)
        if descriptor is None or (
            not isinstance(target, str)
            and not isinstance(target, ModelDescriptor)
            and descriptor.model is not target
        ):
            raise TypeResolutionError(
                f"Model type '{name}' is not registered", type_name=name
            )
        return descriptor

    def resolve_list(self, target: ListTarget) -> ListDescriptor:
        """Resolve a list name, class or descriptor to its registered descriptor.

        :param target: What to resolve
        :return: The registered list descriptor
        :raises TypeResolutionError: If the target is not registered
        """
        if isinstance(target, ListDescriptor):
            name = target.name
        elif isinstance(target, str):
            name = target
        else:
            name = getattr(target, "__name__", repr(target))

        descriptor = self._lists.get(name)
        if descriptor is None:
            raise TypeResolutionError(
                f"List type '{name}' is not registered", type_name=name
            )
        return descriptor

    def __contains__(self, name: object) -> bool:
        return name in self._models or name in self._lists


def default_registry() -> TypeRegistry:
    """Return the registry of all models shipped with this package."""
    from ..models.catalog import registry

    return registry
