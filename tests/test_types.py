# tests/test_types.py
"""
Tests for semantic type mapping and per-language projection.
"""

from __future__ import annotations

import pytest

from speckit.contract.models import SchemaObject
from speckit.contract.types import (
    ANY,
    ARRAY,
    BOOLEAN,
    NUMBER,
    OBJECT,
    STRING,
    SemanticType,
    TypeKind,
    map_type,
    project,
    project_return,
    supported_languages,
)
from speckit.core.errors import UnsupportedLanguageError


class TestMapType:
    @pytest.mark.parametrize(
        "schema_type,expected",
        [
            ("string", STRING),
            ("integer", NUMBER),
            ("number", NUMBER),
            ("boolean", BOOLEAN),
            ("array", ARRAY),
            ("object", OBJECT),
        ],
    )
    def test_scalars(self, schema_type, expected):
        assert map_type(SchemaObject(type=schema_type)) == expected

    def test_ref_keeps_trailing_name(self):
        semantic = map_type(SchemaObject.model_validate({"$ref": "#/components/schemas/Pet"}))

        assert semantic.kind is TypeKind.REF
        assert semantic.ref_name == "Pet"
        assert str(semantic) == "Pet"

    def test_missing_schema_is_any(self):
        assert map_type(None) == ANY

    def test_unknown_type_is_any(self):
        assert map_type(SchemaObject(type="file")) == ANY
        assert map_type(SchemaObject()) == ANY


class TestProject:
    def test_number_per_language(self):
        assert project(NUMBER, "java") == "Integer"
        assert project(NUMBER, "typescript") == "number"
        assert project(NUMBER, "python") == "int"

    def test_refs_fall_back_to_untyped(self):
        ref = SemanticType(TypeKind.REF, ref_name="Pet")

        assert project(ref, "java") == "Object"
        assert project(ref, "typescript") == "any"
        assert project(ref, "python") == "Any"

    def test_unknown_language_raises(self):
        with pytest.raises(UnsupportedLanguageError) as exc_info:
            project(STRING, "cobol")

        assert exc_info.value.language == "cobol"
        assert exc_info.value.available == ["java", "python", "typescript"]

    def test_every_language_covers_every_kind(self):
        for language in supported_languages():
            for kind in TypeKind:
                assert project(SemanticType(kind), language)


class TestProjectReturn:
    def test_void(self):
        assert project_return("void", "java") == "void"
        assert project_return("void", "typescript") == "void"
        assert project_return("void", "python") == "None"

    def test_body(self):
        assert project_return("Pet", "java") == "String"
        assert project_return("Object", "typescript") == "any"
        assert project_return("Pet", "python") == "Any"

    def test_unknown_language_raises(self):
        with pytest.raises(UnsupportedLanguageError):
            project_return("void", "go")
