# speckit/core/errors.py
"""
All exceptions for speckit.

Hierarchy:
    SpecKitError
    ├── NotFoundError - missing contract, plan or config file
    ├── ParseError - malformed contract or plan document
    ├── EmptyOperationSetError - contract or filter yields zero operations
    ├── UnsupportedLanguageError - no emitter/projection for a language
    ├── ContractSyncError - fetching a contract from a provider failed
    └── TaskNotFoundError - a plan has no task with the requested id

"Intent matched nothing" and guardrail violations are values, not errors.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Union


class SpecKitError(Exception):
    """Base error for speckit operations."""

    pass


class NotFoundError(SpecKitError, FileNotFoundError):
    """A required input file does not exist."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else None
        if path is not None:
            message = f"{message}: {path}"
        super().__init__(message)

    def __str__(self) -> str:
        return self.args[0]


class ParseError(SpecKitError, ValueError):
    """
    A document could not be parsed into the expected structure.

    The message embeds the underlying parser diagnostic; the original
    exception is kept as __cause__.
    """

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else None
        if path is not None:
            message = f"{message} (file: {path})"
        super().__init__(message)


class EmptyOperationSetError(SpecKitError):
    """Extraction produced no usable operations."""

    def __init__(self, operation_ids: Optional[Iterable[str]] = None):
        self.operation_ids = sorted(operation_ids) if operation_ids is not None else None
        if self.operation_ids is None:
            message = "No operations found in the contract"
        else:
            message = f"No operations in the contract match the filter: {self.operation_ids}"
        super().__init__(message)


class UnsupportedLanguageError(SpecKitError):
    """Emission or type projection requested for an unknown language."""

    def __init__(self, language: str, available: Iterable[str] = ()):
        self.language = language
        self.available = sorted(available)
        super().__init__(
            f"Unsupported language: {language!r}. Available: {self.available}"
        )


class ContractSyncError(SpecKitError):
    """Fetching a contract from a provider URL failed."""

    def __init__(
        self,
        message: str,
        url: str,
        status_code: Optional[int] = None,
    ):
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class TaskNotFoundError(SpecKitError):
    """A plan has no task with the requested id."""

    def __init__(self, task_id: str):
        self.task_id = task_id
        super().__init__(f"Task '{task_id}' not found in plan")


__all__ = [
    "SpecKitError",
    "NotFoundError",
    "ParseError",
    "EmptyOperationSetError",
    "UnsupportedLanguageError",
    "ContractSyncError",
    "TaskNotFoundError",
]
