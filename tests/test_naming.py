# tests/test_naming.py
"""
Tests for identifier case conversion.
"""

from __future__ import annotations

import pytest

from speckit.emit.base import artifact_name
from speckit.emit.naming import (
    JAVA_RESERVED,
    PYTHON_RESERVED,
    TYPESCRIPT_RESERVED,
    derive_class_name,
    safe_identifier,
    split_words,
    to_camel_case,
    to_pascal_case,
    to_snake_case,
    unique_identifier,
)


class TestCaseConversion:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("listPets", "list_pets"),
            ("getHTTPStatus", "get_http_status"),
            ("pet-id", "pet_id"),
            ("already_snake", "already_snake"),
        ],
    )
    def test_snake_case(self, name, expected):
        assert to_snake_case(name) == expected

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("pet_id", "petId"),
            ("listPets", "listPets"),
            ("ListPets", "listPets"),
            ("X-Request-Id", "xRequestId"),
        ],
    )
    def test_camel_case(self, name, expected):
        assert to_camel_case(name) == expected

    def test_pascal_case(self):
        assert to_pascal_case("list_pets") == "ListPets"

    def test_split_words(self):
        assert split_words("PetStoreAPI") == ["Pet", "Store", "API"]
        assert split_words("") == []


class TestClassNames:
    def test_derive_class_name_strips_non_alphanumerics(self):
        assert derive_class_name("Pet Store API") == "PetStoreAPI"
        assert derive_class_name("my-api v2") == "Myapiv2"

    def test_derive_class_name_empty(self):
        assert derive_class_name("") == "Default"
        assert derive_class_name("!!!") == "Default"

    def test_artifact_name(self):
        assert artifact_name("PetStoreAPI") == "pet-store-api-client"


class TestSafeIdentifier:
    def test_reserved_words_get_suffix(self):
        assert safe_identifier("class", JAVA_RESERVED) == "class_"
        assert safe_identifier("delete", TYPESCRIPT_RESERVED) == "delete_"
        assert safe_identifier("from", PYTHON_RESERVED) == "from_"

    def test_leading_digit(self):
        assert safe_identifier("1st", PYTHON_RESERVED) == "_1st"

    def test_plain_names_pass_through(self):
        assert safe_identifier("petId", JAVA_RESERVED) == "petId"


class TestUniqueIdentifier:
    def test_claims_free_name(self):
        taken = {"body"}

        assert unique_identifier("limit", taken) == "limit"
        assert taken == {"body", "limit"}

    def test_taken_names_get_suffix(self):
        taken = {"body", "body_"}

        assert unique_identifier("body", taken) == "body__"

    def test_same_snake_case_twice(self):
        taken = set()

        first = unique_identifier(to_snake_case("pet_id"), taken)
        second = unique_identifier(to_snake_case("petId"), taken)

        assert (first, second) == ("pet_id", "pet_id_")
