# speckit/cli/commands/implement.py
"""
Generate code for plan tasks.

Usage:
    speckit implement                   # first pending task
    speckit implement --all             # every pending task
    speckit implement --task task-123   # one task by id
    speckit implement --dry-run         # render and check, write nothing
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from speckit.cli.context import CLIContext
from speckit.cli.ui import ui
from speckit.cli.utils import cli_errors, display_path
from speckit.guardrails.report import format_report
from speckit.logging.logger import get_logger
from speckit.planning.models import TaskStatus
from speckit.planning.store import load_plan
from speckit.services.implement_service import ImplementService, select_tasks

logger = get_logger(__name__)

STATUS_ICONS = {
    TaskStatus.COMPLETED: "✓",
    TaskStatus.IN_PROGRESS: "●",
    TaskStatus.PENDING: "○",
}


def command(
    task: Optional[str] = None,
    all_pending: bool = False,
    plan: Optional[Path] = None,
    dry_run: bool = False,
) -> None:
    with cli_errors():
        ctx = CLIContext.load()
        plan_path = plan or ctx.plan_path

        current = load_plan(plan_path)
        if not select_tasks(current, task_id=task, all_pending=all_pending):
            ui.info("No pending tasks to implement")
            ui.section("Current plan status")
            for t in current.tasks:
                ui.print(f"  {STATUS_ICONS[t.status]} {t.title}")
            raise typer.Exit(0)

        try:
            result = ImplementService().implement(
                plan_path,
                ctx.contract_path,
                ctx.language,
                ctx.output_dir,
                task_id=task,
                all_pending=all_pending,
                dry_run=dry_run,
                package_name=ctx.package_name,
            )
        except ValueError as e:
            ui.error(str(e))
            raise typer.Exit(1) from e

    ui.header("speckit implement", f"{ctx.language} -> {display_path(ctx.output_dir, ctx.root)}")

    ui.section("Tasks")
    ui.bullets(t.title for t in result.tasks)

    for generation in result.generations:
        if generation.violations:
            ui.warning(f"{len(generation.violations)} guardrail violation(s) detected")
            ui.plain(format_report(generation.violations))

    if dry_run:
        ui.info("Dry run - no files written, plan unchanged")
        for generation in result.generations:
            ui.bullets(generation.files)
        return

    ui.success(f"Generated files in: {display_path(ctx.output_dir, ctx.root)}")

    if result.remaining:
        ui.info(f"{len(result.remaining)} task(s) remaining")
        ui.info('Run "speckit implement" again to continue')
    else:
        ui.success("All tasks completed!")
