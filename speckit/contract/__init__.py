# speckit/contract/__init__.py
"""
Contract handling: load, extract, map types, sync and synthesize.

Usage:
    from speckit.contract import load_contract, extract_operations

    document = load_contract("openapi.yaml")
    operations = extract_operations(document, {"listPets", "getPet"})
"""

from speckit.contract.extractor import (
    OperationDescriptor,
    ParamDescriptor,
    extract_operations,
    list_operations,
)
from speckit.contract.loader import load_contract, parse_contract
from speckit.contract.models import ContractDocument
from speckit.contract.types import SemanticType, TypeKind, map_type, project

__all__ = [
    "ContractDocument",
    "OperationDescriptor",
    "ParamDescriptor",
    "SemanticType",
    "TypeKind",
    "extract_operations",
    "list_operations",
    "load_contract",
    "map_type",
    "parse_contract",
    "project",
]
