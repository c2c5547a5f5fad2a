# speckit/emit/naming.py
"""
Identifier case conversion shared by every emitter.

Templates never convert case inline; emitters call these helpers when they
build template bindings.
"""

from __future__ import annotations

import keyword
import re
from typing import FrozenSet, List, Set

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_SEPARATORS = re.compile(r"[^0-9A-Za-z]+")
_NON_ALNUM = re.compile(r"[^0-9A-Za-z]")

JAVA_RESERVED: FrozenSet[str] = frozenset(
    {
        "abstract", "boolean", "break", "byte", "case", "catch", "char", "class",
        "const", "continue", "default", "do", "double", "else", "enum", "extends",
        "final", "finally", "float", "for", "goto", "if", "implements", "import",
        "instanceof", "int", "interface", "long", "native", "new", "package",
        "private", "protected", "public", "return", "short", "static", "super",
        "switch", "synchronized", "this", "throw", "throws", "transient", "try",
        "void", "volatile", "while",
    }
)

TYPESCRIPT_RESERVED: FrozenSet[str] = frozenset(
    {
        "break", "case", "catch", "class", "const", "continue", "debugger",
        "default", "delete", "do", "else", "enum", "export", "extends", "false",
        "finally", "for", "function", "if", "import", "in", "instanceof", "new",
        "null", "return", "super", "switch", "this", "throw", "true", "try",
        "typeof", "var", "void", "while", "with",
    }
)

PYTHON_RESERVED: FrozenSet[str] = frozenset(keyword.kwlist)


def split_words(name: str) -> List[str]:
    """Split camelCase, PascalCase, snake_case and kebab-case into words."""
    spaced = _ACRONYM_BOUNDARY.sub(r"\1 \2", name)
    spaced = _WORD_BOUNDARY.sub(r"\1 \2", spaced)
    return [w for w in _SEPARATORS.split(spaced) if w]


def to_snake_case(name: str) -> str:
    """listPets -> list_pets, getHTTPStatus -> get_http_status"""
    return "_".join(w.lower() for w in split_words(name))


def to_camel_case(name: str) -> str:
    """pet_id -> petId; an existing camelCase name is kept as is."""
    words = split_words(name)
    if not words:
        return ""
    first, rest = words[0], words[1:]
    return first[0].lower() + first[1:] + "".join(w[0].upper() + w[1:] for w in rest)


def to_pascal_case(name: str) -> str:
    camel = to_camel_case(name)
    return camel[:1].upper() + camel[1:]


def derive_class_name(title: str) -> str:
    """
    API class name from a contract title.

    Non-alphanumerics are stripped and the first character upper-cased:
    "Pet Store API" -> "PetStoreAPI". An empty result becomes "Default".
    """
    stripped = _NON_ALNUM.sub("", title or "")
    if not stripped:
        return "Default"
    return stripped[0].upper() + stripped[1:]


def safe_identifier(name: str, reserved: FrozenSet[str]) -> str:
    """Suffix an underscore when `name` collides with a reserved word."""
    if not name:
        return "_"
    if name[0].isdigit():
        name = f"_{name}"
    return f"{name}_" if name in reserved else name


def unique_identifier(identifier: str, taken: Set[str]) -> str:
    """Suffix underscores until `identifier` is not in `taken`, then claim it."""
    while identifier in taken:
        identifier += "_"
    taken.add(identifier)
    return identifier


__all__ = [
    "JAVA_RESERVED",
    "PYTHON_RESERVED",
    "TYPESCRIPT_RESERVED",
    "derive_class_name",
    "safe_identifier",
    "split_words",
    "to_camel_case",
    "to_pascal_case",
    "to_snake_case",
    "unique_identifier",
]
