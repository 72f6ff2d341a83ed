"""Keyring helpers for note passwords, keyed by note id."""

from __future__ import annotations

import getpass
from typing import Optional

import keyring

KEYRING_SYSTEM = "storageengine"


def get_password(note_id: str, interactive: bool = True) -> Optional[str]:
    """Return the stored password for ``note_id``, prompting if none is stored."""
    password = get_password_from_keyring(note_id)
    if not password and interactive:
        password = getpass.getpass(f"Password for note {note_id}: ")
    return password or None


def get_password_from_keyring(note_id: str) -> Optional[str]:
    return keyring.get_password(KEYRING_SYSTEM, note_id)


def password_exists_in_keyring(note_id: str) -> bool:
    return get_password_from_keyring(note_id) is not None


def store_password_in_keyring(note_id: str, password: str) -> None:
    keyring.set_password(KEYRING_SYSTEM, note_id, password)


def delete_password_in_keyring(note_id: str) -> None:
    keyring.delete_password(KEYRING_SYSTEM, note_id)
