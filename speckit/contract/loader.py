# speckit/contract/loader.py
"""
Contract document loading.

Reads a contract file (YAML or JSON - YAML is a superset) and validates it
into a ContractDocument. No network access and no schema validation beyond
structure: unknown keys are ignored.

Usage:
    from speckit.contract.loader import load_contract

    document = load_contract("openapi.yaml")
    print(document.info.title)
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError

from speckit.contract.models import ContractDocument
from speckit.core.errors import NotFoundError, ParseError
from speckit.logging.logger import get_logger
from speckit.logging.tags import CONTRACT

logger = get_logger(__name__)


def parse_contract(text: str, source: Optional[Union[str, Path]] = None) -> ContractDocument:
    """
    Parse contract text into a ContractDocument.

    Args:
        text: YAML or JSON document text
        source: Where the text came from (used in error messages)

    Raises:
        ParseError: Malformed YAML, non-mapping root, or invalid structure.
            The parser diagnostic is part of the message; the original
            exception is chained.
    """
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ParseError(f"Invalid contract syntax: {e}", path=source) from e

    if not isinstance(raw, dict):
        raise ParseError(
            f"Contract root must be a mapping, got {type(raw).__name__}", path=source
        )

    try:
        document = ContractDocument.model_validate(raw)
    except ValidationError as e:
        raise ParseError(f"Invalid contract structure: {e}", path=source) from e

    logger.debug(f"{CONTRACT} Parsed '{document.info.title}' ({len(document.paths)} path(s))")
    return document


def read_contract_text(path: Path) -> str:
    """Read contract text as UTF-8; undecodable bytes raise ParseError."""
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(f"Contract is not valid UTF-8: {e}", path=path) from e


def load_contract(path: Union[str, Path]) -> ContractDocument:
    """
    Load a contract document from disk.

    Raises:
        NotFoundError: If the file does not exist
        ParseError: If the document is malformed
    """
    p = Path(path)

    if not p.is_file():
        raise NotFoundError("Contract not found", path=p)

    text = read_contract_text(p)
    return parse_contract(text, source=p)


__all__ = ["load_contract", "parse_contract", "read_contract_text"]
