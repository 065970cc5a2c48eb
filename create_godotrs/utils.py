"""Shared console helpers for create-godotrs.

All user-facing output goes through the Rich consoles defined here so the
scaffolding core itself stays silent.  Errors are written to stderr.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Path helpers
# ---------------------------------------------------------------------------


def relative_to_root(path: Path, root: Path) -> str:
    """Return *path* relative to *root* as a POSIX string.

    Falls back to the full path when *path* is not under *root*.

    Examples::

        relative_to_root(Path("/tmp/game/rust/Cargo.toml"), Path("/tmp/game"))
            -> "rust/Cargo.toml"
    """
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return str(path)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(escape(key), escape(str(value)))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]", soft_wrap=True)


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(
        f"[bold red]Error:[/bold red] {escape(message)}",
        highlight=False,
        soft_wrap=True,
    )
