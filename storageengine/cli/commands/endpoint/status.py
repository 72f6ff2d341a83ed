"""Status command for the endpoint configuration."""

from typing import Optional

import typer
from rich.console import Console

from storageengine.cli.utils import session

app = typer.Typer(help="Check that the configured endpoint is reachable")
console = Console()


@app.callback(invoke_without_command=True)
def main(
    endpoint: Optional[str] = typer.Option(None, help="Storage engine base URL"),
):
    """Probe the configured endpoint."""
    config = session.connect(session.resolve_endpoint(endpoint))
    console.print(f"[green]Reachable:[/green] [bold]{config.endpoint}[/bold]")
