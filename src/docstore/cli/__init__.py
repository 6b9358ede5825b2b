"""CLI package - Typer-based inspection interface for the document store.

Usage:
    python -m docstore.cli --help
    python -m docstore.cli list --sort modified
"""

from docstore.cli._app import app

# Register command modules (side-effect imports)
import docstore.cli.cmd_location  # noqa: F401
import docstore.cli.cmd_documents  # noqa: F401

__all__ = ["app"]
