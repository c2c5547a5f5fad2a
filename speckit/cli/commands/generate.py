# speckit/cli/commands/generate.py
"""
Generate client code from the contract.

Usage:
    speckit generate                              # all operations, configured language
    speckit generate --language typescript
    speckit generate --operations listPets,getPet
    speckit generate --contract api.yaml --output out/ --dry-run
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from speckit.cli.context import CLIContext
from speckit.cli.ui import ui
from speckit.cli.utils import cli_errors, display_path, parse_operation_ids
from speckit.core.config import ConsumerSettings
from speckit.guardrails.report import format_report
from speckit.logging.logger import get_logger
from speckit.services.generation_service import GenerationService

logger = get_logger(__name__)


def command(
    language: Optional[str] = None,
    output: Optional[Path] = None,
    operations: Optional[str] = None,
    contract: Optional[Path] = None,
    dry_run: bool = False,
) -> None:
    with cli_errors():
        ctx = CLIContext.load(required=contract is None)
        defaults = ConsumerSettings()

        contract_path = contract or ctx.contract_path
        target = language or (ctx.language if ctx else defaults.language)
        output_dir = output or (ctx.output_dir if ctx else Path(defaults.output_dir))
        package_name = ctx.package_name if ctx else None

        ui.header("speckit generate", f"{target} client from {display_path(contract_path)}")

        result = GenerationService().generate(
            contract_path,
            target,
            output_dir,
            operation_ids=parse_operation_ids(operations),
            package_name=package_name,
            dry_run=dry_run,
        )

    ui.section("Operations")
    ui.bullets(result.operation_ids)

    ui.section("Files")
    for relative in result.files:
        ui.print(f"  {Path(output_dir) / relative}")

    if result.violations:
        ui.warning(f"{len(result.violations)} guardrail violation(s) in generated code")
        ui.plain(format_report(result.violations))

    if dry_run:
        ui.info("Dry run - no files written")
    else:
        ui.success(f"Generated {len(result.written)} file(s) in {display_path(Path(output_dir))}")
