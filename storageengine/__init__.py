"""Client library for the storage engine note service."""

from .client import ClientConfig, HttpClient
from .config import Settings
from .exceptions import (
    StorageEngineAuthError,
    StorageEngineConfigError,
    StorageEngineDecodeError,
    StorageEngineEmptyResponse,
    StorageEngineError,
    StorageEngineNotFound,
    StorageEngineRemoteError,
    StorageEngineTransportError,
    StorageEngineValidationError,
)
from .objects import ObjectState, StorageObject

__all__ = [
    "ClientConfig",
    "HttpClient",
    "Settings",
    "StorageObject",
    "ObjectState",
    "StorageEngineError",
    "StorageEngineConfigError",
    "StorageEngineValidationError",
    "StorageEngineTransportError",
    "StorageEngineEmptyResponse",
    "StorageEngineRemoteError",
    "StorageEngineAuthError",
    "StorageEngineNotFound",
    "StorageEngineDecodeError",
]
