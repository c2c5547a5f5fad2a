# speckit/core/__init__.py
"""
Core platform pieces shared by every speckit component.

- errors: exception hierarchy
- paths: project root discovery
- config: spec-kit.yaml schema and loading
- registry: auto-discovering plugin registry
- http: httpx client factory
"""

from speckit.core.errors import (
    ContractSyncError,
    EmptyOperationSetError,
    NotFoundError,
    ParseError,
    SpecKitError,
    TaskNotFoundError,
    UnsupportedLanguageError,
)

__all__ = [
    "ContractSyncError",
    "EmptyOperationSetError",
    "NotFoundError",
    "ParseError",
    "SpecKitError",
    "TaskNotFoundError",
    "UnsupportedLanguageError",
]
