"""Shared console helpers for ddd-skeleton.

Every notice the generator emits (success, skip, missing asset, I/O failure)
goes through the Rich console defined here, so commands report their outcome
as terminal output rather than through return values.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")


def print_info(message: str) -> None:
    """Print a dimmed informational message."""
    console.print(f"[dim]{escape(message)}[/dim]")


def print_summary_table(rows: dict[str, str], title: str) -> None:
    """Print what a command produced, one step per row."""
    table = Table(title=title, show_header=False, box=None)
    table.add_column(style="bold")
    table.add_column(overflow="fold")
    for step, outcome in rows.items():
        table.add_row(step, escape(outcome))
    console.print(table)
