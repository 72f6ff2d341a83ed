"""
Local handle for one remote note.

A handle starts in ``ObjectState.NEW``. The first successful ``refresh`` or
``publish`` moves it to ``ObjectState.UPSTREAM`` for good, after which
``publish`` always updates instead of creating.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Tuple

from .client import ClientConfig
from .exceptions import StorageEngineValidationError
from .models import PublishRequest, PublishResponse, ReadRequest, ReadResponse

LOGGER = logging.getLogger(__name__)


class ObjectState(Enum):
    NEW = "new"
    UPSTREAM = "upstream"


READ_ROUTE = ("GET", "/read")

# (method, route) used by publish, keyed by every handle state
PUBLISH_ROUTES: Dict[ObjectState, Tuple[str, str]] = {
    ObjectState.NEW: ("POST", "/create"),
    ObjectState.UPSTREAM: ("PUT", "/update/note"),
}


def _require_text(name: str, value: str) -> str:
    if not isinstance(value, str) or value == "":
        raise StorageEngineValidationError(f"{name} cannot be empty")
    return value


class StorageObject:
    """
    Mutable proxy for a note identified by an id/password pair.

    Not safe for concurrent use; give each caller its own handle.
    """

    def __init__(self, config: ClientConfig):
        if config is None:
            raise StorageEngineValidationError("client config cannot be None")
        self._config = config
        self._id = ""
        self._password = ""
        self._data = ""
        self._state = ObjectState.NEW

    # ------------------------------ Fields ----------------------------------

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def id(self) -> str:
        return self._id

    @id.setter
    def id(self, value: str) -> None:
        self._id = _require_text("id", value)

    @property
    def password(self) -> str:
        return self._password

    @password.setter
    def password(self, value: str) -> None:
        self._password = _require_text("password", value)

    @property
    def data(self) -> str:
        return self._data

    @data.setter
    def data(self, value: str) -> None:
        self._data = _require_text("data", value)

    @property
    def state(self) -> ObjectState:
        return self._state

    @property
    def is_upstream(self) -> bool:
        return self._state is ObjectState.UPSTREAM

    # ----------------------------- Round trips ------------------------------

    def refresh(self) -> "StorageObject":
        """
        Pull the current note into ``data``.

        The id echoed by the server is not applied; only ``publish`` adopts
        server ids.
        """
        if not self._id or not self._password:
            raise StorageEngineValidationError("id or password is empty")

        method, route = READ_ROUTE
        request = ReadRequest(id=self._id, password=self._password)
        response: ReadResponse = self._config.transport.exchange(
            method, route, request, ReadResponse
        )

        self._data = response.note
        self._mark_upstream()
        return self

    def publish(self) -> "StorageObject":
        """
        Push ``data`` upstream: create while NEW, update once UPSTREAM.

        ``id`` may be empty on create; the server-returned id always replaces
        the local one.
        """
        if not self._password or not self._data:
            raise StorageEngineValidationError("password or data is empty")

        method, route = PUBLISH_ROUTES[self._state]
        LOGGER.debug(
            "Publishing %s object via %s %s", self._state.value, method, route
        )
        request = PublishRequest(
            id=self._id, password=self._password, note=self._data
        )
        response: PublishResponse = self._config.transport.exchange(
            method, route, request, PublishResponse
        )

        if response.id != self._id:
            LOGGER.debug("Server assigned id %r (was %r)", response.id, self._id)
        self._id = response.id
        self._mark_upstream()
        return self

    def _mark_upstream(self) -> None:
        if self._state is not ObjectState.UPSTREAM:
            LOGGER.debug("Object %r is now upstream", self._id)
        self._state = ObjectState.UPSTREAM

    def __repr__(self) -> str:
        return (
            f"StorageObject(id={self._id!r}, state={self._state.value}, "
            f"endpoint={self._config.endpoint!r})"
        )
