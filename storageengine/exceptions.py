"""Library exceptions."""

from __future__ import annotations

from typing import Optional


class StorageEngineError(Exception):
    """Base storage engine error."""


class StorageEngineConfigError(StorageEngineError):
    """Endpoint is empty, unparseable, or failed the liveness probe."""


class StorageEngineValidationError(StorageEngineError, ValueError):
    """A required field or argument is empty."""


class StorageEngineTransportError(StorageEngineError):
    """The HTTP client raised while sending the request."""


class StorageEngineEmptyResponse(StorageEngineTransportError):
    """The HTTP client returned no response and no error."""


class StorageEngineRemoteError(StorageEngineError):
    """The service answered with a status other than 200."""

    def __init__(
        self, message: str, status_code: int, payload: Optional[object] = None
    ):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


class StorageEngineAuthError(StorageEngineRemoteError):
    """401/403: the password was rejected for this id."""


class StorageEngineNotFound(StorageEngineRemoteError):
    """404: no record with this id."""


class StorageEngineDecodeError(StorageEngineError):
    """A 200 body did not match the expected JSON envelope."""

    def __init__(self, message: str, payload: Optional[object] = None):
        super().__init__(message)
        self.payload = payload
