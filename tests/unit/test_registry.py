"""Unit tests for descriptors and the type registry."""

from datetime import date
from typing import Dict, List, Optional

import pytest

from amazon_ads_api.exceptions import TypeResolutionError
from amazon_ads_api.hydration import (
    DateType,
    EnumType,
    ListOf,
    ModelDescriptor,
    ModelType,
    Primitive,
    TypeRegistry,
    hydrate,
    tag_for_annotation,
)
from amazon_ads_api.models import ApiModel, ModelList, State, registry
from amazon_ads_api.models.catalog import LISTS, MODELS


class Leaf(ApiModel):
    value: Optional[int] = None


class Branch(ApiModel):
    label: Optional[str] = None
    leaves: Optional[List[Leaf]] = None
    first: Optional[Leaf] = None


class BranchList(ModelList[Branch]):
    item_model = Branch


@pytest.mark.unit
class TestTags:
    @pytest.mark.parametrize(
        "annotation, expected",
        [
            (int, Primitive.INTEGER),
            (Optional[float], Primitive.FLOAT),
            (Optional[str], Primitive.STRING),
            (bool, Primitive.BOOLEAN),
            (Optional[date], DateType()),
            (Optional[State], EnumType(State)),
            (Optional[Leaf], ModelType("Leaf")),
            (Optional[List[Leaf]], ListOf(ModelType("Leaf"))),
            (List[int], ListOf(Primitive.INTEGER)),
            (int | None, Primitive.INTEGER),
        ],
    )
    def test_annotation_to_tag(self, annotation, expected):
        assert tag_for_annotation(annotation) == expected

    def test_unsupported_annotation(self):
        with pytest.raises(TypeResolutionError):
            tag_for_annotation(Dict[str, int], "Thing", "mapping")


@pytest.mark.unit
class TestDescriptor:
    def test_field_table(self):
        descriptor = ModelDescriptor.from_model(Branch)
        assert descriptor.name == "Branch"
        assert [f.json_key for f in descriptor.fields] == ["label", "leaves", "first"]
        assert descriptor.fields[1].tag == ListOf(ModelType("Leaf"))

    def test_alias_is_json_key(self):
        from pydantic import Field

        class Aliased(ApiModel):
            profile_id: Optional[int] = Field(None, alias="profileId")

        descriptor = ModelDescriptor.from_model(Aliased)
        assert descriptor.fields[0].attr == "profile_id"
        assert descriptor.fields[0].json_key == "profileId"

        local = TypeRegistry(models=[Aliased])
        assert hydrate(Aliased, {"profileId": "12"}, registry=local).profile_id == 12

    def test_descriptor_is_immutable(self):
        descriptor = registry.resolve("AdGroup")
        with pytest.raises(Exception):
            descriptor.name = "Other"


@pytest.mark.unit
class TestTypeRegistry:
    def test_local_registry(self):
        local = TypeRegistry(models=[Leaf, Branch], lists=[BranchList])
        assert "Branch" in local
        assert "BranchList" in local
        branch = hydrate(
            "Branch",
            {"label": "a", "leaves": [{"value": 1}], "first": {"value": 2}},
            registry=local,
        )
        assert branch.leaves[0].value == 1
        assert branch.first.value == 2

    def test_models_not_in_default_registry(self):
        with pytest.raises(TypeResolutionError):
            registry.resolve(Branch)

    def test_dangling_nested_reference_fails_at_build(self):
        with pytest.raises(TypeResolutionError) as exc:
            TypeRegistry(models=[Branch])
        assert exc.value.type_name == "Leaf"

    def test_list_with_unregistered_item_fails_at_build(self):
        with pytest.raises(TypeResolutionError):
            TypeRegistry(models=[Leaf], lists=[BranchList])

    def test_mappings_are_read_only(self):
        with pytest.raises(TypeError):
            registry.models["Injected"] = None

    def test_default_registry_covers_catalog(self):
        assert set(registry.models) == {m.__name__ for m in MODELS}
        assert set(registry.lists) == {lst.__name__ for lst in LISTS}

    def test_resolve_list(self):
        descriptor = registry.resolve_list("CampaignReportList")
        assert descriptor.item == "CampaignReport"
