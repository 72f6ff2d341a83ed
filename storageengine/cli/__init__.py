"""Command line interface for the storage engine client."""
