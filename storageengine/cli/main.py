#!/usr/bin/env python
"""Command line interface for the storage engine."""

import logging

import typer

from storageengine.cli.commands import endpoint, note

app = typer.Typer(help="Command Line Interface for the storage engine note service")

# Add command groups
app.add_typer(endpoint.app, name="endpoint")
app.add_typer(note.app, name="note")


@app.callback()
def callback(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log HTTP calls to stderr"
    ),
):
    """Read and publish notes on a storage engine."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
