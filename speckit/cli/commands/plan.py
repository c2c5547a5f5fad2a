# speckit/cli/commands/plan.py
"""
Create an implementation plan from natural-language intent.

Usage:
    speckit plan "create and list all pets"
    speckit plan "delete a pet" --output plans/delete.yaml
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from speckit.cli.context import CLIContext
from speckit.cli.ui import ui
from speckit.cli.utils import cli_errors, display_path
from speckit.logging.logger import get_logger
from speckit.planning.models import NoMatchResult
from speckit.services.plan_service import PlanService

logger = get_logger(__name__)


def command(intent: str, output: Optional[Path] = None) -> None:
    with cli_errors():
        ctx = CLIContext.load()
        plan_path = output or ctx.plan_path
        outcome = PlanService().plan(intent, ctx.contract_path, plan_path)

    if isinstance(outcome.result, NoMatchResult):
        ui.warning("No matching operations found in the contract")
        ui.info("Consider updating the contract to include the needed endpoints")
        ui.print(f"Intent: {intent}")
        ui.section("Available operations")
        ui.bullets(outcome.result.available)
        raise typer.Exit(0)

    task = outcome.result
    ui.header("Implementation Plan", f"Intent: {intent}")
    ui.print(f"1. [{task.status.value}] {task.title}")
    ui.print(f"   {task.description}")
    ui.print(f"   Operations: {', '.join(task.operations)}")
    ui.success(f"Plan saved to: {display_path(outcome.path, ctx.root)}")
    ui.info('Run "speckit implement" to generate code for these tasks')
