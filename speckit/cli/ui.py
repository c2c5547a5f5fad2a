# speckit/cli/ui.py
"""
Shared UI helpers for CLI commands.

Usage:
    from speckit.cli.ui import ui

    ui.header("speckit generate", "Pet Store API")
    ui.success("Done!")

Dynamic text (paths, rule names like "[no-fetch]", operation ids) is
escaped before it reaches Rich markup.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

console = Console()


class UI:
    """Rich-backed output helpers with a consistent look across commands."""

    # -------------------------------------------------------------------------
    # Output Methods
    # -------------------------------------------------------------------------

    def print(self, msg: str, style: str = "") -> None:
        if style:
            console.print(f"[{style}]{escape(msg)}[/{style}]")
        else:
            console.print(escape(msg))

    def plain(self, text: str) -> None:
        """Print preformatted text without markup or highlighting."""
        console.print(text, markup=False, highlight=False, soft_wrap=True)

    def header(self, title: str, subtitle: str = "") -> None:
        """Print a command header in a fitted box."""
        content = f"[bold]{escape(title)}[/bold]"
        if subtitle:
            content += f"\n[dim]{escape(subtitle)}[/dim]"
        console.print(Panel.fit(content, border_style="blue"))

    def section(self, title: str) -> None:
        console.print(f"\n[bold cyan]{escape(title)}[/bold cyan]")

    def success(self, msg: str) -> None:
        console.print(f"[green]✓[/green] {escape(msg)}")

    def error(self, msg: str) -> None:
        console.print(f"[red]✗[/red] {escape(msg)}")

    def warning(self, msg: str, detail: str = "") -> None:
        detail_str = f" [dim]({escape(detail)})[/dim]" if detail else ""
        console.print(f"[yellow]⚠[/yellow] {escape(msg)}{detail_str}")

    def info(self, msg: str) -> None:
        console.print(f"[dim]{escape(msg)}[/dim]")

    def bullets(self, items: Iterable[str], indent: int = 2) -> None:
        pad = " " * indent
        for item in items:
            console.print(f"{pad}• {escape(item)}", soft_wrap=True)

    def table(self, columns: Sequence[str], rows: Iterable[Sequence[str]], title: str = "") -> None:
        table = Table(show_header=True, header_style="bold", title=title or None)
        for column in columns:
            table.add_column(column)
        for row in rows:
            table.add_row(*(escape(str(cell)) for cell in row))
        console.print(table)

    def key_values(self, pairs: Iterable[Sequence[str]], title: str = "") -> None:
        """Two-column key/value listing inside a panel."""
        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("Key", style="bold")
        table.add_column("Value", style="cyan")
        for key, value in pairs:
            table.add_row(escape(str(key)), escape(str(value)))
        console.print(Panel(table, title=f"[bold]{escape(title)}[/bold]" if title else None, border_style="blue"))


ui = UI()

__all__ = ["UI", "console", "ui"]
