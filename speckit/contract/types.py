# speckit/contract/types.py
"""
Type mapping between contract schemas and target languages.

Two steps, both pure:
    map_type(schema)            → SemanticType (language-neutral)
    project(semantic, language) → native type name

The projection tables below are the single source of truth for every
emitter. Supporting a new language means adding one table here; emitters
never spell out type names themselves.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from speckit.contract.models import SchemaObject
from speckit.core.errors import UnsupportedLanguageError

VOID = "void"
GENERIC_OBJECT = "Object"


class TypeKind(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"
    REF = "ref"
    ANY = "any"


@dataclass(frozen=True)
class SemanticType:
    """Language-neutral type. `ref_name` is set only for REF."""

    kind: TypeKind
    ref_name: Optional[str] = None

    def __str__(self) -> str:
        if self.kind is TypeKind.REF and self.ref_name:
            return self.ref_name
        return self.kind.value


STRING = SemanticType(TypeKind.STRING)
NUMBER = SemanticType(TypeKind.NUMBER)
BOOLEAN = SemanticType(TypeKind.BOOLEAN)
ARRAY = SemanticType(TypeKind.ARRAY)
OBJECT = SemanticType(TypeKind.OBJECT)
ANY = SemanticType(TypeKind.ANY)

_SCALARS: Dict[str, SemanticType] = {
    "string": STRING,
    "integer": NUMBER,
    "number": NUMBER,
    "boolean": BOOLEAN,
    "array": ARRAY,
    "object": OBJECT,
}


# =============================================================================
# Projection Tables
# =============================================================================

# Refs and unknown shapes fall back to the ANY row: generated code declares
# no model classes, so schema names cannot be used as native types.
PROJECTIONS: Dict[str, Dict[TypeKind, str]] = {
    "java": {
        TypeKind.STRING: "String",
        TypeKind.NUMBER: "Integer",
        TypeKind.BOOLEAN: "Boolean",
        TypeKind.ARRAY: "List<?>",
        TypeKind.OBJECT: "Object",
        TypeKind.ANY: "Object",
    },
    "typescript": {
        TypeKind.STRING: "string",
        TypeKind.NUMBER: "number",
        TypeKind.BOOLEAN: "boolean",
        TypeKind.ARRAY: "any[]",
        TypeKind.OBJECT: "any",
        TypeKind.ANY: "any",
    },
    "python": {
        TypeKind.STRING: "str",
        TypeKind.NUMBER: "int",
        TypeKind.BOOLEAN: "bool",
        TypeKind.ARRAY: "list",
        TypeKind.OBJECT: "dict",
        TypeKind.ANY: "Any",
    },
}

# Method result types: (no body, has body)
RETURN_PROJECTIONS: Dict[str, tuple[str, str]] = {
    "java": ("void", "String"),
    "typescript": ("void", "any"),
    "python": ("None", "Any"),
}


# =============================================================================
# Mapping Functions
# =============================================================================


def map_type(schema: Optional[SchemaObject]) -> SemanticType:
    """
    Map a contract schema to a semantic type.

    Unknown or missing shapes map to ANY rather than failing.
    """
    if schema is None:
        return ANY

    if schema.ref_name:
        return SemanticType(TypeKind.REF, ref_name=schema.ref_name)

    return _SCALARS.get(schema.type or "", ANY)


def _table(language: str) -> Dict[TypeKind, str]:
    try:
        return PROJECTIONS[language]
    except KeyError:
        raise UnsupportedLanguageError(language, PROJECTIONS.keys()) from None


def project(semantic: SemanticType, language: str) -> str:
    """Project a semantic type onto a target language's native type name."""
    table = _table(language)
    return table.get(semantic.kind, table[TypeKind.ANY])


def project_return(return_type: str, language: str) -> str:
    """
    Native result type for an operation's return_type.

    `void` stays void; any resolved body (schema name or generic object)
    projects to the language's raw/untyped result.
    """
    _table(language)
    no_body, with_body = RETURN_PROJECTIONS[language]
    return no_body if return_type == VOID else with_body


def supported_languages() -> list[str]:
    return sorted(PROJECTIONS.keys())


__all__ = [
    "ANY",
    "ARRAY",
    "BOOLEAN",
    "GENERIC_OBJECT",
    "NUMBER",
    "OBJECT",
    "PROJECTIONS",
    "RETURN_PROJECTIONS",
    "STRING",
    "SemanticType",
    "TypeKind",
    "VOID",
    "map_type",
    "project",
    "project_return",
    "supported_languages",
]
