"""Base classes for API models and model lists.

Models are frozen pydantic models. They are filled by the hydrator, not by
pydantic validation, so every value has already passed type coercion.
"""

import json
from typing import Any, ClassVar, Dict, Generic, Iterable, Iterator, List, Type, TypeVar, overload

from pydantic import BaseModel, ConfigDict

M = TypeVar("M", bound="ApiModel")


class ApiModel(BaseModel):
    """Base model for all Amazon Ads API payloads.

    Implements the JSON round trip through the registered field table:
    :meth:`to_dict` yields the API's field names and wire formats.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
    )

    def to_dict(self) -> Dict[str, Any]:
        """Convert the model to its API wire form.

        :return: Dictionary keyed by API field names, absent fields omitted
        """
        from ..hydration import dehydrate

        return dehydrate(self)

    def to_json(self, **kwargs) -> str:
        """Convert the model to a JSON string.

        :param kwargs: Passed to :func:`json.dumps`
        :return: JSON representation
        """
        return json.dumps(self.to_dict(), **kwargs)


class ModelList(Generic[M]):
    """Ordered, immutable collection of one model type.

    Subclasses declare their item type:

        class AdGroupList(ModelList[AdGroup]):
            item_model = AdGroup
    """

    item_model: ClassVar[Type["ApiModel"]]

    def __init__(self, items: Iterable[M] = ()):
        self._items = tuple(items)
        for item in self._items:
            if not isinstance(item, self.item_model):
                raise TypeError(
                    f"{type(self).__name__} holds {self.item_model.__name__}, "
                    f"got {type(item).__name__}"
                )

    @overload
    def __getitem__(self, index: int) -> M: ...

    @overload
    def __getitem__(self, index: slice) -> "ModelList[M]": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return type(self)(self._items[index])
        return self._items[index]

    def __iter__(self) -> Iterator[M]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModelList):
            return NotImplemented
        return type(self) is type(other) and self._items == other._items

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"

    def to_list(self) -> List[Dict[str, Any]]:
        """Convert every item to its API wire form.

        :return: List of dictionaries in list order
        """
        return [item.to_dict() for item in self._items]

    def to_json(self, **kwargs) -> str:
        """Convert the list to a JSON array string.

        :param kwargs: Passed to :func:`json.dumps`
        :return: JSON representation
        """
        return json.dumps(self.to_list(), **kwargs)
