"""Read command for notes."""

from typing import Optional

import typer

from storageengine.cli.utils import session
from storageengine.exceptions import StorageEngineError

app = typer.Typer(
    help="Print the content of a note",
    context_settings={"allow_interspersed_args": True},
)


@app.callback(invoke_without_command=True)
def main(
    note_id: str = typer.Argument(..., help="ID of the note"),
    password: Optional[str] = typer.Option(None, help="Note password"),
    endpoint: Optional[str] = typer.Option(None, help="Storage engine base URL"),
):
    """Fetch a note and print it verbatim."""
    config = session.connect(session.resolve_endpoint(endpoint))
    note = config.new_object()

    try:
        note.id = note_id
        note.password = session.resolve_password(note_id, password)
        note.refresh()
    except StorageEngineError as exc:
        session.fail(exc)

    typer.echo(note.data)
