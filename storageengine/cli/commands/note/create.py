"""Create command for notes."""

from typing import Optional

import typer
from rich.console import Console

from storageengine.cli.utils import session
from storageengine.exceptions import StorageEngineError

app = typer.Typer(help="Create a new note")
console = Console()


@app.callback(invoke_without_command=True)
def main(
    note: str = typer.Option(..., help="Content of the note"),
    note_id: Optional[str] = typer.Option(
        None, "--id", help="Requested ID; the server may assign another"
    ),
    password: Optional[str] = typer.Option(None, help="Note password"),
    save_password: bool = typer.Option(
        False, help="Save the password in keyring under the resulting ID"
    ),
    endpoint: Optional[str] = typer.Option(None, help="Storage engine base URL"),
):
    """Create a note and print the ID the server assigned."""
    config = session.connect(session.resolve_endpoint(endpoint))
    obj = config.new_object()

    try:
        if note_id:
            obj.id = note_id
        obj.password = session.resolve_password(note_id, password)
        obj.data = note
        obj.publish()
    except StorageEngineError as exc:
        session.fail(exc)

    if save_password:
        session.remember_password(obj.id, obj.password)
    console.print(f"Created note [bold]{obj.id}[/bold]")
