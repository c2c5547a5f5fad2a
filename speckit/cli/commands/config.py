# speckit/cli/commands/config.py
"""
Configuration command.

Usage:
    speckit config           # Show current config
    speckit config --json    # Output as JSON
    speckit config --path    # Show config file path
"""

from __future__ import annotations

import json

import typer

from speckit.cli.context import CLIContext
from speckit.cli.ui import ui
from speckit.cli.utils import cli_errors
from speckit.logging.logger import get_logger

logger = get_logger(__name__)


def command(show_path: bool = False, as_json: bool = False) -> None:
    with cli_errors():
        ctx = CLIContext.load()

    if show_path:
        typer.echo(str(ctx.config_path))
        return

    if as_json:
        typer.echo(json.dumps(ctx.config.model_dump(by_alias=True), indent=2))
        return

    config = ctx.config
    ui.key_values(
        [
            ("Project", config.name),
            ("Version", config.version),
            ("Contract", config.openapi),
            ("Plan", config.plan),
            ("Language", config.consumer.language),
            ("Output", config.consumer.output_dir),
            ("Package", config.package_name or "-"),
        ],
        title=str(ctx.config_path),
    )
