"""Shared CLI helpers: logging setup and manager construction."""

import logging

import typer
from rich.logging import RichHandler

from docstore.errors import ConfigurationError
from docstore.startup import initialize
from docstore.storage import DocumentManager, StaticIdentity

from docstore.cli._console import console, print_err

logger = logging.getLogger(__name__)


def setup_logging(*, verbose: bool = False, quiet: bool = False) -> None:
    """Configure logging with Rich handler."""
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        markup=True,
        rich_tracebacks=True,
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_manager(ctx: typer.Context) -> DocumentManager:
    """Build the DocumentManager for this invocation from the global options.

    Exits with code 2 when the configuration or a startup check fails.
    """
    setup_logging(verbose=ctx.obj["verbose"], quiet=ctx.obj["quiet"])

    identity = None
    if ctx.obj.get("cloud") is not None:
        identity = StaticIdentity(ctx.obj["cloud"])

    try:
        return initialize(ctx.obj.get("config"), identity=identity)
    except ConfigurationError as e:
        print_err(str(e))
        raise typer.Exit(code=2)
