"""Forget command for notes."""

import typer
from rich.console import Console

from storageengine.utils import delete_password_in_keyring, password_exists_in_keyring

app = typer.Typer(help="Remove a saved note password from keyring")
console = Console()


@app.callback(invoke_without_command=True)
def main(
    note_id: str = typer.Argument(..., help="ID of the note"),
):
    """Delete the keyring entry for a note."""
    if not password_exists_in_keyring(note_id):
        console.print(f"[yellow]No saved password for[/yellow] [bold]{note_id}[/bold]")
        return

    delete_password_in_keyring(note_id)
    console.print(f"[green]Forgot password for[/green] [bold]{note_id}[/bold]")
