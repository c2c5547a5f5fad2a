# speckit/services/generation_service.py
"""Service layer for client generation: load -> extract -> emit -> scan -> write."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from speckit.contract.extractor import extract_operations
from speckit.contract.loader import load_contract
from speckit.contract.models import ContractDocument
from speckit.emit.base import EmitContext
from speckit.emit.registry import emit
from speckit.emit.writer import write_files
from speckit.guardrails.base import Violation
from speckit.guardrails.engine import GuardrailEngine
from speckit.logging.logger import get_logger
from speckit.logging.tags import EMIT

logger = get_logger(__name__)


@dataclass
class GenerationResult:
    """Outcome of one generation run."""

    language: str
    operation_ids: List[str]
    files: Dict[str, str]
    violations: List[Violation] = field(default_factory=list)
    written: List[Path] = field(default_factory=list)
    output_dir: Optional[Path] = None

    @property
    def passed(self) -> bool:
        return not self.violations


def build_context(
    document: ContractDocument,
    package_name: Optional[str] = None,
    base_path: Optional[str] = None,
) -> EmitContext:
    """EmitContext from the contract title, using its first server as base path."""
    if base_path is None and document.servers:
        base_path = document.servers[0].url
    return EmitContext.from_title(document.title, package_name=package_name, base_path=base_path)


class GenerationService:
    """
    Business logic for `speckit generate` and `speckit implement`.

    Guardrail violations never abort generation; they are returned next to
    the written files.
    """

    def __init__(self, engine: Optional[GuardrailEngine] = None):
        self.engine = engine or GuardrailEngine()

    def render(
        self,
        contract_path: Union[str, Path],
        language: str,
        operation_ids: Optional[Iterable[str]] = None,
        package_name: Optional[str] = None,
        base_path: Optional[str] = None,
    ) -> GenerationResult:
        """Emit and scan without touching the filesystem."""
        document = load_contract(contract_path)
        operations = extract_operations(document, operation_ids)
        context = build_context(document, package_name=package_name, base_path=base_path)

        files = emit(operations, language, context)
        violations = self.engine.scan(files)

        if violations:
            logger.warning(f"{EMIT} Generated {language} code has {len(violations)} guardrail violation(s)")

        return GenerationResult(
            language=language,
            operation_ids=[op.operation_id for op in operations],
            files=files,
            violations=violations,
        )

    def generate(
        self,
        contract_path: Union[str, Path],
        language: str,
        output_dir: Union[str, Path],
        operation_ids: Optional[Iterable[str]] = None,
        package_name: Optional[str] = None,
        base_path: Optional[str] = None,
        dry_run: bool = False,
    ) -> GenerationResult:
        """Emit, scan and (unless dry_run) write under output_dir."""
        result = self.render(
            contract_path,
            language,
            operation_ids=operation_ids,
            package_name=package_name,
            base_path=base_path,
        )
        result.output_dir = Path(output_dir)

        if not dry_run:
            result.written = write_files(result.files, result.output_dir)
            logger.info(f"{EMIT} Wrote {len(result.written)} {language} file(s) to {result.output_dir}")

        return result


__all__ = ["GenerationResult", "GenerationService", "build_context"]
