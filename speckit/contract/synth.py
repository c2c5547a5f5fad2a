# speckit/contract/synth.py
"""
Contract synthesis from a short description.

Scans the description for known entity keywords (user, pet, order, ...)
and emits a CRUD contract for each one, plus a health endpoint and the
shared HealthStatus/Error schemas. When no entity is recognised a generic
"Resource" entity is used.

This is keyword lookup, not language understanding: "a shop selling
products to users" yields Product and User endpoints.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

import yaml

from speckit.logging.logger import get_logger
from speckit.logging.tags import CONTRACT

logger = get_logger(__name__)

OPENAPI_VERSION = "3.0.3"
DEFAULT_SERVER = {"url": "http://localhost:8080/api/v1", "description": "Local development server"}

# Fields never accepted in <Entity>Input schemas
SERVER_MANAGED_FIELDS = ("id", "createdAt", "updatedAt")


@dataclass(frozen=True)
class EntityProperty:
    name: str
    type: str
    required: bool = False
    description: str = ""


@dataclass(frozen=True)
class EntityTemplate:
    name: str
    plural: str
    properties: Tuple[EntityProperty, ...]


ENTITY_TEMPLATES: Dict[str, EntityTemplate] = {
    "user": EntityTemplate(
        "User",
        "users",
        (
            EntityProperty("id", "string", True),
            EntityProperty("email", "string", True),
            EntityProperty("name", "string", True),
            EntityProperty("createdAt", "string", description="ISO 8601 timestamp"),
        ),
    ),
    "pet": EntityTemplate(
        "Pet",
        "pets",
        (
            EntityProperty("id", "string", True),
            EntityProperty("name", "string", True),
            EntityProperty("status", "string", description="available, pending, sold"),
            EntityProperty("category", "string"),
        ),
    ),
    "order": EntityTemplate(
        "Order",
        "orders",
        (
            EntityProperty("id", "string", True),
            EntityProperty("status", "string", True),
            EntityProperty("total", "number"),
            EntityProperty("createdAt", "string"),
        ),
    ),
    "product": EntityTemplate(
        "Product",
        "products",
        (
            EntityProperty("id", "string", True),
            EntityProperty("name", "string", True),
            EntityProperty("price", "number", True),
            EntityProperty("description", "string"),
        ),
    ),
    "item": EntityTemplate(
        "Item",
        "items",
        (
            EntityProperty("id", "string", True),
            EntityProperty("name", "string", True),
            EntityProperty("type", "string"),
        ),
    ),
}

FALLBACK_ENTITY = EntityTemplate(
    "Resource",
    "resources",
    (
        EntityProperty("id", "string", True),
        EntityProperty("name", "string", True),
        EntityProperty("data", "object"),
    ),
)

TEMPLATES: Dict[str, Dict[str, Any]] = {
    "crud": {
        "openapi": OPENAPI_VERSION,
        "info": {"title": "CRUD API", "version": "1.0.0", "description": "A simple CRUD API template"},
        "paths": {},
        "components": {"schemas": {}},
    },
}


# =============================================================================
# Building Blocks
# =============================================================================


def _ref(name: str) -> Dict[str, str]:
    return {"$ref": f"#/components/schemas/{name}"}


def _json(schema: Dict[str, Any]) -> Dict[str, Any]:
    return {"application/json": {"schema": schema}}


def _id_param(entity: EntityTemplate, described: bool = False) -> Dict[str, Any]:
    param: Dict[str, Any] = {"name": "id", "in": "path", "required": True, "schema": {"type": "string"}}
    if described:
        param["description"] = f"{entity.name} ID"
    return param


def _not_found(entity: EntityTemplate) -> Dict[str, Any]:
    return {"description": f"{entity.name} not found", "content": _json(_ref("Error"))}


def find_entities(description: str) -> List[EntityTemplate]:
    """Entities whose keyword occurs in the description (table order)."""
    text = description.lower()
    found = [template for keyword, template in ENTITY_TEMPLATES.items() if keyword in text]
    return found or [FALLBACK_ENTITY]


def entity_paths(entity: EntityTemplate) -> Dict[str, Any]:
    """Collection and item paths with list/create/get/update/delete."""
    lower = entity.name.lower()
    tags = [entity.name]
    body = {"required": True, "content": _json(_ref(f"{entity.name}Input"))}

    collection = {
        "get": {
            "operationId": f"list{entity.name}s",
            "summary": f"List all {entity.plural}",
            "tags": tags,
            "parameters": [
                {
                    "name": "limit",
                    "in": "query",
                    "schema": {"type": "integer"},
                    "description": "Maximum number of items to return",
                },
                {
                    "name": "offset",
                    "in": "query",
                    "schema": {"type": "integer"},
                    "description": "Number of items to skip",
                },
            ],
            "responses": {
                "200": {
                    "description": f"List of {entity.plural}",
                    "content": _json({"type": "array", "items": _ref(entity.name)}),
                }
            },
        },
        "post": {
            "operationId": f"create{entity.name}",
            "summary": f"Create a new {lower}",
            "tags": tags,
            "requestBody": body,
            "responses": {
                "201": {"description": f"{entity.name} created", "content": _json(_ref(entity.name))},
                "400": {"description": "Invalid input", "content": _json(_ref("Error"))},
            },
        },
    }

    item = {
        "get": {
            "operationId": f"get{entity.name}",
            "summary": f"Get a {lower} by ID",
            "tags": tags,
            "parameters": [_id_param(entity, described=True)],
            "responses": {
                "200": {"description": f"{entity.name} found", "content": _json(_ref(entity.name))},
                "404": _not_found(entity),
            },
        },
        "put": {
            "operationId": f"update{entity.name}",
            "summary": f"Update a {lower}",
            "tags": tags,
            "parameters": [_id_param(entity)],
            "requestBody": body,
            "responses": {
                "200": {"description": f"{entity.name} updated", "content": _json(_ref(entity.name))},
                "404": _not_found(entity),
            },
        },
        "delete": {
            "operationId": f"delete{entity.name}",
            "summary": f"Delete a {lower}",
            "tags": tags,
            "parameters": [_id_param(entity)],
            "responses": {
                "204": {"description": f"{entity.name} deleted"},
                "404": _not_found(entity),
            },
        },
    }

    return {f"/{entity.plural}": collection, f"/{entity.plural}/{{id}}": item}


def entity_schemas(entity: EntityTemplate) -> Dict[str, Any]:
    """<Entity> and <Entity>Input (without server-managed fields) schemas."""
    properties: Dict[str, Any] = {}
    required: List[str] = []

    for prop in entity.properties:
        properties[prop.name] = {"type": prop.type}
        if prop.description:
            properties[prop.name]["description"] = prop.description
        if prop.required:
            required.append(prop.name)

    input_properties = {k: v for k, v in properties.items() if k not in SERVER_MANAGED_FIELDS}
    input_required = [r for r in required if r not in SERVER_MANAGED_FIELDS]

    return {
        entity.name: {"type": "object", "properties": properties, "required": required},
        f"{entity.name}Input": {
            "type": "object",
            "properties": copy.deepcopy(input_properties),
            "required": input_required,
        },
    }


# =============================================================================
# Public API
# =============================================================================


def synthesize_contract(description: str, project_name: str) -> Dict[str, Any]:
    """
    Build a contract document (raw mapping) from a description.

    Returns:
        Mapping ready for write_contract() or parse_contract()
    """
    entities = find_entities(description)
    logger.info(f"{CONTRACT} Synthesizing contract for: {[e.name for e in entities]}")

    paths: Dict[str, Any] = {}
    schemas: Dict[str, Any] = {}

    for entity in entities:
        paths.update(entity_paths(entity))
        schemas.update(entity_schemas(entity))

    paths["/health"] = {
        "get": {
            "operationId": "getHealth",
            "summary": "Health check endpoint",
            "tags": ["System"],
            "responses": {
                "200": {"description": "Service is healthy", "content": _json(_ref("HealthStatus"))}
            },
        }
    }

    schemas["HealthStatus"] = {
        "type": "object",
        "properties": {
            "status": {"type": "string", "enum": ["UP", "DOWN"]},
            "timestamp": {"type": "string", "format": "date-time"},
        },
        "required": ["status", "timestamp"],
    }
    schemas["Error"] = {
        "type": "object",
        "properties": {"code": {"type": "string"}, "message": {"type": "string"}},
        "required": ["code", "message"],
    }

    return {
        "openapi": OPENAPI_VERSION,
        "info": {"title": f"{project_name} API", "version": "1.0.0", "description": description},
        "servers": [dict(DEFAULT_SERVER)],
        "paths": paths,
        "components": {"schemas": schemas},
    }


def contract_from_template(template_name: str, project_name: str) -> Dict[str, Any]:
    """
    Copy a predefined template, titled for the project.

    Raises:
        KeyError: Unknown template name
    """
    if template_name not in TEMPLATES:
        raise KeyError(
            f"Unknown template: {template_name}. Available: {', '.join(sorted(TEMPLATES))}"
        )

    data = copy.deepcopy(TEMPLATES[template_name])
    data["info"]["title"] = f"{project_name} API"
    return data


def write_contract(data: Dict[str, Any], path: Union[str, Path]) -> Path:
    """Dump a contract mapping to YAML, creating parent directories."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)

    with target.open("w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, sort_keys=False, indent=2, width=float("inf"))

    return target


__all__ = [
    "ENTITY_TEMPLATES",
    "EntityProperty",
    "EntityTemplate",
    "FALLBACK_ENTITY",
    "TEMPLATES",
    "contract_from_template",
    "entity_paths",
    "entity_schemas",
    "find_entities",
    "synthesize_contract",
    "write_contract",
]
