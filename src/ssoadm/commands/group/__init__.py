"""Group management commands for ssoadm."""

import typer

from . import update
from .update import update_group

app = typer.Typer(help="Manage groups in the identity directory.")


@app.callback()
def group_callback():
    """Update group descriptions and memberships."""


app.command("update")(update_group)

__all__ = ["app", "update", "update_group"]
