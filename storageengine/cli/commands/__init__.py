"""Command modules for the storage engine CLI."""

from storageengine.cli.commands import endpoint, note

__all__ = ["endpoint", "note"]
