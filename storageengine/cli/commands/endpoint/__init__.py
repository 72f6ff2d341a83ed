"""Endpoint commands for the storage engine CLI."""

import typer

from . import set_endpoint, status

app = typer.Typer(help="Endpoint configuration commands")
app.add_typer(set_endpoint.app, name="set")
app.add_typer(status.app, name="status")
