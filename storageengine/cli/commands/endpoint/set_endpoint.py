"""Set command for the endpoint configuration."""

from typing import Optional

import typer
from rich.console import Console

from storageengine.cli.utils import session

app = typer.Typer(help="Probe and save the storage engine endpoint")
console = Console()


@app.callback(invoke_without_command=True)
def main(
    url: str = typer.Argument(..., help="Base URL of the storage engine"),
    timeout: Optional[float] = typer.Option(
        None, help="Request timeout in seconds to save alongside the endpoint"
    ),
):
    """Check that the endpoint answers, then save it."""
    session.connect(url, timeout=timeout)

    config = session.load_config()
    config["endpoint"] = url
    if timeout is not None:
        config["timeout"] = timeout
    session.save_config(config)

    console.print(f"Saved endpoint [bold]{url}[/bold]")
