# tests/conftest.py
"""
Shared fixtures for speckit tests.

Test Tiers:
===========
- tier1: Pure logic - contract parsing, emission, matching, guardrails (<10s)
         Run: pytest -m tier1
- tier2: Filesystem and CLI tests using tmp_path and CliRunner
         Run: pytest -m "tier1 or tier2"

Every test runs without network access; contract sync goes through
httpx.MockTransport.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

import pytest
import yaml

from speckit.contract.extractor import list_operations
from speckit.contract.loader import parse_contract
from speckit.core.paths import CONFIG_FILE, SpecKitPaths
from speckit.logging.logger import PACKAGE_LOGGER

TIER1_PATTERNS = [
    "test_types",
    "test_naming",
    "test_extractor",
    "test_emitters",
    "test_emit_registry",
    "test_matcher",
    "test_task_models",
    "test_guardrails",
    "test_guardrail_report",
    "test_synth",
    "test_logging",
]


def pytest_collection_modifyitems(items):
    """Tier 1 for pure logic modules, tier 2 for everything touching disk or the CLI."""
    for item in items:
        module = Path(str(item.fspath)).stem
        if module in TIER1_PATTERNS:
            item.add_marker(pytest.mark.tier1)
        else:
            item.add_marker(pytest.mark.tier2)


# =============================================================================
# Contract Fixtures
# =============================================================================

PET_STORE: Dict[str, Any] = {
    "openapi": "3.0.3",
    "info": {"title": "Pet Store API", "version": "1.0.0"},
    "servers": [{"url": "http://localhost:8080/api/v1"}],
    "paths": {
        "/pets": {
            "get": {
                "operationId": "listPets",
                "summary": "List pets",
                "tags": ["Pet"],
                "parameters": [
                    {"name": "limit", "in": "query", "schema": {"type": "integer"}},
                    {"name": "offset", "in": "query", "schema": {"type": "integer"}},
                ],
                "responses": {
                    "200": {
                        "description": "Pets",
                        "content": {
                            "application/json": {
                                "schema": {"type": "array", "items": {"$ref": "#/components/schemas/Pet"}}
                            }
                        },
                    }
                },
            },
            "post": {
                "operationId": "createPet",
                "summary": "Create a pet",
                "tags": ["Pet"],
                "requestBody": {
                    "required": True,
                    "content": {"application/json": {"schema": {"$ref": "#/components/schemas/Pet"}}},
                },
                "responses": {
                    "201": {
                        "description": "Created",
                        "content": {"application/json": {"schema": {"$ref": "#/components/schemas/Pet"}}},
                    }
                },
            },
        },
        "/pets/{id}": {
            "get": {
                "operationId": "getPet",
                "summary": "Fetch one pet by id",
                "tags": ["Pet"],
                "parameters": [
                    {"name": "id", "in": "path", "required": True, "schema": {"type": "string"}}
                ],
                "responses": {
                    "200": {
                        "description": "Found",
                        "content": {"application/json": {"schema": {"$ref": "#/components/schemas/Pet"}}},
                    }
                },
            },
            "delete": {
                "operationId": "deletePet",
                "summary": "Remove a pet",
                "tags": ["Pet"],
                "parameters": [
                    {"name": "id", "in": "path", "required": True, "schema": {"type": "string"}}
                ],
                "responses": {"204": {"description": "Deleted"}},
            },
        },
    },
    "components": {
        "schemas": {
            "Pet": {
                "type": "object",
                "required": ["id", "name"],
                "properties": {"id": {"type": "string"}, "name": {"type": "string"}},
            }
        }
    },
}


@pytest.fixture
def pet_store_data() -> Dict[str, Any]:
    """Raw pet store contract mapping (a fresh copy per test)."""
    return yaml.safe_load(yaml.safe_dump(PET_STORE, sort_keys=False))


@pytest.fixture
def pet_store_yaml(pet_store_data) -> str:
    return yaml.safe_dump(pet_store_data, sort_keys=False)


@pytest.fixture
def pet_store(pet_store_yaml):
    return parse_contract(pet_store_yaml)


@pytest.fixture
def pet_operations(pet_store):
    return list_operations(pet_store)


@pytest.fixture
def contract_file(tmp_path, pet_store_yaml) -> Path:
    path = tmp_path / "openapi.yaml"
    path.write_text(pet_store_yaml, encoding="utf-8")
    return path


# =============================================================================
# Project Fixtures
# =============================================================================


@pytest.fixture
def project(tmp_path, pet_store_yaml, monkeypatch) -> Path:
    """
    A speckit project in tmp_path: spec-kit.yaml + openapi.yaml, CWD inside it.
    """
    (tmp_path / "openapi.yaml").write_text(pet_store_yaml, encoding="utf-8")
    config = {
        "name": "petstore",
        "version": "1.0.0",
        "openapi": "openapi.yaml",
        "consumer": {"language": "python", "outputDir": "consumer"},
    }
    (tmp_path / CONFIG_FILE).write_text(yaml.safe_dump(config), encoding="utf-8")

    monkeypatch.chdir(tmp_path)
    SpecKitPaths.set_project_root(tmp_path)
    yield tmp_path
    SpecKitPaths.reset()


@pytest.fixture(autouse=True)
def _reset_paths():
    SpecKitPaths.reset()
    yield
    SpecKitPaths.reset()


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers the CLI attached to a runner's short-lived stderr."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
