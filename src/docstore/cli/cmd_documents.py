"""Document commands - list, allocate names, show metadata."""

import typer

from docstore.cli._app import app
from docstore.cli._common import get_manager
from docstore.cli._console import output_result, output_table, print_err, print_warn, stdout_console
from docstore.errors import InvalidDocumentNameError
from docstore.storage import SortOrder


@app.command("list", help="List documents in the active location.")
def list_documents(
    ctx: typer.Context,
    sort: SortOrder = typer.Option(SortOrder.BY_NAME, "--sort", "-s", help="Sort by name or modification time"),
):
    """List managed documents, freshly scanned."""
    manager = get_manager(ctx)

    if not manager.active_root_available() and not ctx.obj["json"] and not ctx.obj["quiet"]:
        print_warn("No active documents location")

    rows = [entry.to_dict() for entry in manager.entries(sort)]
    output_table(
        rows,
        ctx=ctx,
        title=f"Documents ({len(rows)})",
        columns=["file_name", "modified_at", "size_bytes"],
    )


@app.command("available-name", help="Allocate a collision-free document name.")
def available_name(
    ctx: typer.Context,
    proposed: str = typer.Argument(..., help="Proposed name, without extension"),
):
    """Print PROPOSED, or the first free 'PROPOSED <n>'."""
    manager = get_manager(ctx)

    try:
        name = manager.available_name(proposed)
    except InvalidDocumentNameError as e:
        print_err(str(e))
        raise typer.Exit(code=2)

    if ctx.obj["json"]:
        output_result({"proposed": proposed, "available": name}, ctx=ctx)
    else:
        stdout_console.print(name, markup=False, highlight=False)


@app.command("info", help="Show creation date, modification date and size of a document.")
def info(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Document name, without extension"),
):
    """Show metadata for one document. Exit code 1 when it does not exist."""
    manager = get_manager(ctx)

    try:
        entry = manager.describe(name)
    except InvalidDocumentNameError as e:
        print_err(str(e))
        raise typer.Exit(code=2)

    if entry is None:
        print_err(f"Document not found: {name}")
        raise typer.Exit(code=1)

    output_result(entry.to_dict(), ctx=ctx, title=entry.file_name)
