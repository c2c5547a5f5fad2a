# speckit/cli/commands/sync.py
"""
Refresh the project contract from the provider.

Usage:
    speckit sync --url http://localhost:8080/openapi.yaml
    speckit sync --file ../provider/openapi.yaml
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
from speckit.contract.sync import sync_contract
from speckit.logging.logger import get_logger

logger = get_logger(__name__)


def command(
    url: Optional[str] = None,
    file: Optional[Path] = None,
    output: Optional[Path] = None,
) -> None:
    if (url is None) == (file is None):
        ui.error("Provide exactly one of --url or --file")
        raise typer.Exit(1)

    with cli_errors():
        ctx = CLIContext.load(required=output is None)
        destination = output or ctx.contract_path

        ui.header("speckit sync", url or str(file))
        saved = sync_contract(destination, url=url, file=file)
        operations = list_operations(load_contract(saved))

    ui.success(f"Contract saved to: {display_path(saved)}")
    ui.info(f"{len(operations)} operation(s) available")
