# speckit/cli/commands/check.py
"""
Scan source files for network calls that bypass the generated client.

Usage:
    speckit check src/              # grouped report, exit 1 on violations
    speckit check src/ --json       # machine-readable violation list
    speckit check src/ --no-fail    # report only, always exit 0
"""

from __future__ import annotations

import json
from pathlib import Path

import typer

from speckit.cli.ui import ui
from speckit.guardrails.engine import GuardrailEngine
from speckit.guardrails.report import format_report, violations_to_dicts
from speckit.logging.logger import get_logger

logger = get_logger(__name__)


def command(path: Path, as_json: bool = False, no_fail: bool = False) -> None:
    violations = GuardrailEngine().scan_tree(path)

    if as_json:
        typer.echo(json.dumps(violations_to_dicts(violations), indent=2))
    else:
        ui.plain(format_report(violations))

    if violations and not no_fail:
        raise typer.Exit(1)
