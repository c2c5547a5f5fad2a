# speckit/planning/keywords.py
"""
Action keyword table for intent matching.

A category is detected when any of its keywords is a substring of the
lower-cased intent. Multi-word keywords ("get all") match as phrases.
Order matters only for reporting; detection is independent per category.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Mapping, Tuple

KEYWORD_TABLE_VERSION = 1


class ActionCategory(str, Enum):
    CREATE = "create"
    LIST = "list"
    GET = "get"
    UPDATE = "update"
    DELETE = "delete"


ACTION_KEYWORDS: Mapping[ActionCategory, Tuple[str, ...]] = {
    ActionCategory.CREATE: ("create", "add", "new", "make", "post"),
    ActionCategory.LIST: ("list", "get all", "fetch all", "show all", "all"),
    ActionCategory.GET: ("get", "fetch", "retrieve", "find", "show", "read"),
    ActionCategory.UPDATE: ("update", "modify", "edit", "change", "put", "patch"),
    ActionCategory.DELETE: ("delete", "remove", "destroy"),
}

# HTTP verbs each category selects; LIST is further restricted to collection paths
ACTION_METHODS: Dict[ActionCategory, Tuple[str, ...]] = {
    ActionCategory.CREATE: ("POST",),
    ActionCategory.LIST: ("GET",),
    ActionCategory.GET: ("GET",),
    ActionCategory.UPDATE: ("PUT", "PATCH"),
    ActionCategory.DELETE: ("DELETE",),
}


__all__ = [
    "ACTION_KEYWORDS",
    "ACTION_METHODS",
    "ActionCategory",
    "KEYWORD_TABLE_VERSION",
]
