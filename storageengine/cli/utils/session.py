"""Shared helpers for CLI commands: saved endpoint, passwords, connections."""

import json
import os
from pathlib import Path
from typing import Any, Dict, NoReturn, Optional

import typer
from rich.console import Console
from rich.panel import Panel

from storageengine.client import ClientConfig
from storageengine.config import ENDPOINT_ENV, Settings
from storageengine.exceptions import (
    StorageEngineAuthError,
    StorageEngineConfigError,
    StorageEngineError,
    StorageEngineRemoteError,
)
from storageengine.utils import (
    get_password_from_keyring,
    password_exists_in_keyring,
    store_password_in_keyring,
)

console = Console()

CONFIG_DIR_ENV = "STORAGEENGINE_CONFIG_DIR"


def config_dir() -> str:
    return os.path.expanduser(os.getenv(CONFIG_DIR_ENV, "~/.config/storageengine"))


def config_path() -> str:
    return os.path.join(config_dir(), "config.json")


def load_config() -> Dict[str, Any]:
    """Load configuration from file."""
    path = config_path()
    try:
        if os.path.exists(path):
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
    except (json.JSONDecodeError, OSError) as exc:
        console.print(f"[yellow]Warning:[/yellow] Could not load config file: {exc}")
    return {}


def save_config(config: Dict[str, Any]) -> None:
    """Save configuration to file."""
    path = config_path()
    try:
        Path(config_dir()).mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=2)
        os.chmod(path, 0o600)
    except OSError as exc:
        console.print(f"[yellow]Warning:[/yellow] Could not save config file: {exc}")


def resolve_endpoint(provided_endpoint: Optional[str] = None) -> str:
    """Pick the endpoint: option > environment > config file."""
    endpoint = (
        provided_endpoint or os.getenv(ENDPOINT_ENV) or load_config().get("endpoint")
    )
    if not endpoint:
        console.print("[bold red]Error:[/bold red] No endpoint configured")
        console.print(
            Panel(
                "Save one with `storageengine endpoint set URL`,\n"
                f"export {ENDPOINT_ENV}, or pass --endpoint.",
                title="Endpoint Required",
                border_style="red",
            )
        )
        raise typer.Exit(1)
    return endpoint


def connect(endpoint: str, timeout: Optional[float] = None) -> ClientConfig:
    """Probe ``endpoint`` and return a ClientConfig, exiting on failure."""
    if timeout is None:
        timeout = load_config().get("timeout")
    try:
        return Settings(endpoint=endpoint, timeout=timeout).connect()
    except StorageEngineConfigError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(1) from exc


def resolve_password(note_id: Optional[str], provided_password: Optional[str]) -> str:
    """Get password from provided value, keyring, or prompt."""
    if provided_password:
        return provided_password

    password = get_password_from_keyring(note_id) if note_id else None
    if not password:
        password = typer.prompt("Note password", hide_input=True)
    return password


def remember_password(note_id: str, password: str) -> None:
    """Store ``password`` for ``note_id``, replacing any saved entry."""
    if not note_id:
        return
    action = "Replaced" if password_exists_in_keyring(note_id) else "Saved"
    store_password_in_keyring(note_id, password)
    console.print(f"{action} password for [bold]{note_id}[/bold] in keyring")


def fail(exc: StorageEngineError) -> NoReturn:
    """Print ``exc`` and exit with status 1."""
    console.print(f"[bold red]Error:[/bold red] {exc}")
    if isinstance(exc, StorageEngineAuthError):
        console.print(
            Panel(
                "The storage engine rejected the password for this note.\n"
                "If a stale password is saved, remove it with\n"
                "`storageengine note forget ID` and try again.",
                title="Authentication Failed",
                border_style="red",
            )
        )
    elif isinstance(exc, StorageEngineRemoteError):
        console.print(f"Server answered with status {exc.status_code}")
    raise typer.Exit(1) from exc
