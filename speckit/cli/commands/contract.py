# speckit/cli/commands/contract.py
"""
Draft a contract document from a short description.

Usage:
    speckit contract "a pet store with orders"
    speckit contract "inventory service" --name Inventory --output api.yaml
    speckit contract --template crud
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from speckit.cli.context import CLIContext
from speckit.cli.ui import ui
from speckit.cli.utils import cli_errors, display_path
from speckit.contract.extractor import list_operations
from speckit.contract.loader import load_contract
from speckit.contract.synth import contract_from_template, synthesize_contract, write_contract
from speckit.logging.logger import get_logger

logger = get_logger(__name__)


def command(
    description: Optional[str] = None,
    name: Optional[str] = None,
    output: Optional[Path] = None,
    template: Optional[str] = None,
) -> None:
    if not description and not template:
        ui.error("Provide a description or --template")
        raise typer.Exit(1)

    with cli_errors():
        ctx = CLIContext.load(required=False)
        project_name = name or (ctx.config.name if ctx else "My")
        destination = output or (ctx.contract_path if ctx else Path("openapi.yaml"))

        if template:
            try:
                data = contract_from_template(template, project_name)
            except KeyError as e:
                ui.error(str(e.args[0]))
                raise typer.Exit(1) from e
        else:
            data = synthesize_contract(description, project_name)

        path = write_contract(data, destination)
        operations = list_operations(load_contract(path))

    ui.success(f"Contract written to: {display_path(path)}")
    if operations:
        ui.section("Operations")
        ui.bullets(f"{op.method} {op.path_template}  {op.operation_id}" for op in operations)
