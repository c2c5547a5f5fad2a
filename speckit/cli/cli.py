# speckit/cli/cli.py
"""
speckit CLI - Main application.

Commands:
    speckit generate     Generate client code from the contract
    speckit plan         Turn intent into an implementation plan
    speckit implement    Generate code for plan tasks
    speckit check        Scan sources for calls bypassing the client
    speckit sync         Refresh the contract from the provider
    speckit contract     Draft a contract from a description
    speckit config       View configuration

NOTE: Commands use lazy loading - imports only happen when a command is invoked.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from speckit.logging.logger import configure_logging

app = typer.Typer(
    name="speckit",
    help="speckit - contract-driven client generation. Start with: speckit generate",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging."),
) -> None:
    """Contract-driven client generation."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)


# =============================================================================
# LAZY COMMANDS
# =============================================================================
# Each command is a thin wrapper that imports the real implementation only when invoked.


@app.command("generate")
def generate(
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Target language."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output directory."),
    operations: Optional[str] = typer.Option(None, "--operations", help="Comma-separated operation ids."),
    contract: Optional[Path] = typer.Option(None, "--contract", "-c", help="Contract file."),
    dry_run: bool = typer.Option(False, "--dry-run", help="Render and check without writing."),
) -> None:
    """Generate client code from the contract."""
    from speckit.cli.commands import generate as mod

    mod.command(language=language, output=output, operations=operations, contract=contract, dry_run=dry_run)


@app.command("plan")
def plan(
    intent: str = typer.Argument(..., help="What you want to implement."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Plan file."),
) -> None:
    """Create an implementation plan from natural-language intent."""
    from speckit.cli.commands import plan as mod

    mod.command(intent=intent, output=output)


@app.command("implement")
def implement(
    task: Optional[str] = typer.Option(None, "--task", "-t", help="Implement one task by id."),
    all_pending: bool = typer.Option(False, "--all", "-a", help="Implement all pending tasks."),
    plan_file: Optional[Path] = typer.Option(None, "--plan", help="Plan file."),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show what would be generated."),
) -> None:
    """Generate code for plan tasks."""
    from speckit.cli.commands import implement as mod

    mod.command(task=task, all_pending=all_pending, plan=plan_file, dry_run=dry_run)


@app.command("check")
def check(
    path: Path = typer.Argument(Path("."), help="File or directory to scan."),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON."),
    no_fail: bool = typer.Option(False, "--no-fail", help="Exit 0 even with violations."),
) -> None:
    """Scan sources for network calls that bypass the generated client."""
    from speckit.cli.commands import check as mod

    mod.command(path=path, as_json=as_json, no_fail=no_fail)


@app.command("sync")
def sync(
    url: Optional[str] = typer.Option(None, "--url", "-u", help="Provider contract URL."),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Local contract file."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Destination file."),
) -> None:
    """Refresh the contract from the provider."""
    from speckit.cli.commands import sync as mod

    mod.command(url=url, file=file, output=output)


@app.command("contract")
def contract(
    description: Optional[str] = typer.Argument(None, help="Short description of the API."),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Project name for the title."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Destination file."),
    template: Optional[str] = typer.Option(None, "--template", help="Start from a template (crud)."),
) -> None:
    """Draft a contract document from a description."""
    from speckit.cli.commands import contract as mod

    mod.command(description=description, name=name, output=output, template=template)


@app.command("config")
def config(
    show_path: bool = typer.Option(False, "--path", "-p", help="Show config file path."),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON."),
) -> None:
    """View configuration."""
    from speckit.cli.commands import config as mod

    mod.command(show_path=show_path, as_json=as_json)


if __name__ == "__main__":
    app()
