"""Update command for notes."""

from typing import Optional

import typer
from rich.console import Console

from storageengine.cli.utils import session
from storageengine.exceptions import StorageEngineError

app = typer.Typer(
    help="Replace the content of an existing note",
    context_settings={"allow_interspersed_args": True},
)
console = Console()


@app.callback(invoke_without_command=True)
def main(
    note_id: str = typer.Argument(..., help="ID of the note"),
    note: str = typer.Option(..., help="New content of the note"),
    password: Optional[str] = typer.Option(None, help="Note password"),
    endpoint: Optional[str] = typer.Option(None, help="Storage engine base URL"),
):
    """Update a note in place."""
    config = session.connect(session.resolve_endpoint(endpoint))
    obj = config.new_object()

    try:
        obj.id = note_id
        obj.password = session.resolve_password(note_id, password)
        # refresh confirms the note exists and switches publish to the update route
        obj.refresh()
        obj.data = note
        obj.publish()
    except StorageEngineError as exc:
        session.fail(exc)

    console.print(f"Updated note [bold]{obj.id}[/bold]")
