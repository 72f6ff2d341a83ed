"""Note commands for the storage engine CLI."""

import typer

from . import create, forget, read, update

app = typer.Typer(help="Note commands")
app.add_typer(read.app, name="read")
app.add_typer(create.app, name="create")
app.add_typer(update.app, name="update")
app.add_typer(forget.app, name="forget")
