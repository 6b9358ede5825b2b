"""Location command - show where documents currently live."""

import typer

from docstore.cli._app import app
from docstore.cli._common import get_manager
from docstore.cli._console import console, output_result


@app.command("where", help="Show the active storage root and related directories.")
def where(ctx: typer.Context):
    """Show the active root, cloud availability and cache directory."""
    manager = get_manager(ctx)

    cloud = manager.cloud_available()
    root = manager.active_root(cloud)
    app_group_dir = manager.app_group_dir

    data = {
        "cloud_available": cloud,
        "active_root": root.kind.value,
        "path": str(root.path) if root.path is not None else None,
        "extension": manager.extension,
        "cache_dir": str(manager.cache_dir),
        "app_group_dir": str(app_group_dir) if app_group_dir is not None else None,
    }

    if ctx.obj["json"]:
        output_result(data, ctx=ctx)
        return

    output_result(data, ctx=ctx, title="Document location")
    if not root.is_available:
        side = "cloud" if root.cloud_selected else "local"
        console.print(f"[yellow]![/yellow] No active root: the {side} documents directory is unavailable")
