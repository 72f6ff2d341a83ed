"""
Wire envelopes for the storage engine routes.

    GET  /read         ReadRequest     -> ReadResponse
    POST /create       PublishRequest  -> PublishResponse
    PUT  /update/note  PublishRequest  -> PublishResponse

Field declaration order is the order on the wire; ``to_wire`` always emits
compact JSON so the request bytes are canonical.
"""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field


def _env_extra_mode(default: str = "ignore") -> str:
    """
    Determine the extra-mode from the environment.

    STORAGEENGINE_EXTRA: allow|forbid|ignore
    Convenience booleans: "true/1/on" -> forbid (strict), "false/0/off" -> ignore
    """
    raw = (os.getenv("STORAGEENGINE_EXTRA") or default).strip().lower()

    if raw in {"allow", "forbid", "ignore"}:
        return raw
    if raw in {"1", "true", "yes", "on", "strict"}:
        return "forbid"
    if raw in {"0", "false", "no", "off", "lenient"}:
        return "ignore"

    return default


_EXTRA = _env_extra_mode()


class StorageEngineModel(BaseModel):
    """
    Base model for every envelope.

    Unknown response fields are ignored by default; export
    STORAGEENGINE_EXTRA=forbid before import to catch server drift.
    """

    model_config = ConfigDict(extra=_EXTRA, populate_by_name=True)

    def to_wire(self) -> bytes:
        return self.model_dump_json(by_alias=True).encode("utf-8")


class ReadRequest(StorageEngineModel):
    id: str
    password: str = Field(..., alias="pass")


class ReadResponse(StorageEngineModel):
    id: str
    note: str


class PublishRequest(StorageEngineModel):
    """Body shared by the create and update routes."""

    id: str
    password: str = Field(..., alias="pass")
    note: str


class PublishResponse(StorageEngineModel):
    """The server echoes (or assigns) the record id."""

    id: str


__all__ = [
    "StorageEngineModel",
    "ReadRequest",
    "ReadResponse",
    "PublishRequest",
    "PublishResponse",
    "_env_extra_mode",
]
