# tests/test_extractor.py
"""
Tests for operation extraction.
"""

from __future__ import annotations

import pytest
import yaml

from speckit.contract.extractor import extract_operations, infer_return_type, list_operations
from speckit.contract.loader import parse_contract
from speckit.contract.models import OperationSpec
from speckit.contract.types import NUMBER, STRING
from speckit.core.errors import EmptyOperationSetError

# =============================================================================
# Tests: Traversal
# =============================================================================


class TestTraversal:
    """Document order for paths, canonical order for verbs."""

    def test_document_order(self, pet_store):
        ids = [op.operation_id for op in extract_operations(pet_store)]

        assert ids == ["listPets", "createPet", "getPet", "deletePet"]

    def test_canonical_verb_order_ignores_document_order(self):
        text = """
info: {title: T}
paths:
  /things/{id}:
    delete: {operationId: removeThing}
    patch: {operationId: patchThing}
    put: {operationId: putThing}
    get: {operationId: getThing}
"""
        ids = [op.operation_id for op in extract_operations(parse_contract(text))]

        assert ids == ["getThing", "putThing", "patchThing", "removeThing"]

    def test_skips_operations_without_id(self, pet_store_data):
        del pet_store_data["paths"]["/pets"]["post"]["operationId"]

        ids = [op.operation_id for op in extract_operations(parse_contract(yaml.safe_dump(pet_store_data, sort_keys=False)))]

        assert "createPet" not in ids
        assert ids == ["listPets", "getPet", "deletePet"]

    def test_methods_are_upper_case(self, pet_operations):
        assert [op.method for op in pet_operations] == ["GET", "POST", "GET", "DELETE"]


# =============================================================================
# Tests: Filtering
# =============================================================================


class TestFiltering:
    def test_filter_keeps_document_order(self, pet_store):
        ops = extract_operations(pet_store, ["deletePet", "listPets"])

        assert [op.operation_id for op in ops] == ["listPets", "deletePet"]

    def test_filter_matching_nothing_raises(self, pet_store):
        with pytest.raises(EmptyOperationSetError) as exc_info:
            extract_operations(pet_store, ["launchRocket"])

        assert exc_info.value.operation_ids == ["launchRocket"]

    def test_empty_contract_raises(self):
        with pytest.raises(EmptyOperationSetError, match="No operations found"):
            extract_operations(parse_contract("info: {title: T}\npaths: {}\n"))

    def test_list_operations_never_raises(self):
        assert list_operations(parse_contract("info: {title: T}\n")) == []


# =============================================================================
# Tests: Descriptors
# =============================================================================


class TestDescriptors:
    def test_params_split_by_location(self, pet_operations):
        list_pets, _, get_pet, _ = pet_operations

        assert [p.name for p in list_pets.query_params] == ["limit", "offset"]
        assert list_pets.path_params == ()
        assert list_pets.query_params[0].semantic_type == NUMBER
        assert [p.name for p in get_pet.path_params] == ["id"]
        assert get_pet.path_params[0].semantic_type == STRING

    def test_collection_paths(self, pet_operations):
        assert [op.is_collection for op in pet_operations] == [True, True, False, False]

    def test_has_body(self, pet_operations):
        assert [op.has_body for op in pet_operations] == [False, True, False, False]

    def test_return_types(self, pet_operations):
        assert [op.return_type for op in pet_operations] == ["Object", "Pet", "Pet", "void"]

    def test_summary_falls_back_to_operation_id(self):
        text = "info: {title: T}\npaths:\n  /x:\n    get: {operationId: getX}\n"

        (op,) = extract_operations(parse_contract(text))

        assert op.summary == "getX"

    def test_tags_are_kept(self, pet_operations):
        assert pet_operations[0].tags == ("Pet",)


class TestInferReturnType:
    """200 first, then 201; JSON content decides the type."""

    def _op(self, responses):
        return OperationSpec.model_validate({"operationId": "x", "responses": responses})

    def test_no_success_response_is_void(self):
        assert infer_return_type(self._op({"404": {"description": "missing"}})) == "void"

    def test_success_without_content_is_void(self):
        assert infer_return_type(self._op({"200": {"description": "ok"}})) == "void"

    def test_non_json_content_is_generic(self):
        op = self._op({"200": {"description": "ok", "content": {"text/plain": {}}}})

        assert infer_return_type(op) == "Object"

    def test_200_wins_over_201(self):
        op = self._op(
            {
                "201": {"content": {"application/json": {"schema": {"$ref": "#/components/schemas/B"}}}},
                "200": {"content": {"application/json": {"schema": {"$ref": "#/components/schemas/A"}}}},
            }
        )

        assert infer_return_type(op) == "A"
