"""Example of how to use the storage engine client."""

import argparse
import logging

import requests
from rich.console import Console
from rich.traceback import install

from storageengine import ClientConfig, StorageEngineError
from storageengine.utils import get_password


install(show_locals=True)

console = Console()


def main():
    """Main function."""
    logging.basicConfig(level=logging.INFO)

    parser = argparse.ArgumentParser(description="Storage engine example.")
    parser.add_argument("--endpoint", required=True, help="Storage engine base URL.")
    parser.add_argument("--id", default="", help="Requested note ID.")
    parser.add_argument("--note", required=True, help="Note content to publish.")
    args = parser.parse_args()

    config = ClientConfig(requests.Session(), args.endpoint)
    note = config.new_object()

    try:
        if args.id:
            note.id = args.id
        note.password = get_password(args.id or "new note")
        note.data = args.note
        note.publish()
        console.rule(f"Created {note.id}")
        note.refresh()
        console.print(note.data)
    except StorageEngineError as exc:
        logging.error("Round trip failed: %s", exc)


if __name__ == "__main__":
    main()
