"""Rich console singletons and output helpers."""

import json as json_mod

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

# Status messages to stderr so they don't pollute piped output
console = Console(stderr=True)

# Data output to stdout (pipeable to jq)
stdout_console = Console()


def print_err(msg: str) -> None:
    """Print an error message to stderr."""
    console.print(f"[red]✗[/red] {msg}")


def print_warn(msg: str) -> None:
    """Print a warning message to stderr."""
    console.print(f"[yellow]![/yellow] {msg}")


def output_result(data: dict, *, ctx: typer.Context, title: str = "") -> None:
    """Print result as JSON (stdout) or a Rich panel (stderr)."""
    if ctx.obj.get("json"):
        stdout_console.print_json(data=data)
    else:
        formatted = json_mod.dumps(data, indent=2, ensure_ascii=False, default=str)
        if title:
            console.print(Panel(formatted, title=title, border_style="blue"))
        else:
            console.print(formatted)


def output_table(rows: list[dict], *, ctx: typer.Context, title: str = "", columns: list[str] | None = None) -> None:
    """Print rows as a JSON array or a Rich table."""
    if ctx.obj.get("json"):
        stdout_console.print_json(data=rows)
        return

    if not rows:
        console.print("[dim]No documents[/dim]")
        return

    cols = columns or list(rows[0].keys())
    table = Table(title=title, show_lines=False)
    for col in cols:
        table.add_column(col)
    for row in rows:
        table.add_row(*["" if row.get(c) is None else str(row.get(c)) for c in cols])
    stdout_console.print(table)
