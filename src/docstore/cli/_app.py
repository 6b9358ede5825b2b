"""Root Typer application with global options."""

from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    no_args_is_help=True,
    rich_markup_mode="rich",
    pretty_exceptions_enable=False,
)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug-level logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Warnings and errors only"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON to stdout"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to store config YAML"),
    cloud: Optional[bool] = typer.Option(
        None,
        "--cloud/--local",
        help="Override the cloud availability signal",
    ),
):
    """Inspect where documents live and what the catalog contains."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["json"] = json_output
    ctx.obj["config"] = config
    ctx.obj["cloud"] = cloud
