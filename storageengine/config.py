"""
Environment-driven settings for building a ClientConfig.

    STORAGE_ENGINE_ENDPOINT  base URL of the service (required)
    STORAGE_ENGINE_TIMEOUT   per-request timeout in seconds (optional)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

import requests

from .client import ClientConfig, HttpClient
from .exceptions import StorageEngineConfigError

ENDPOINT_ENV = "STORAGE_ENGINE_ENDPOINT"
TIMEOUT_ENV = "STORAGE_ENGINE_TIMEOUT"


@dataclass(frozen=True)
class Settings:
    endpoint: str
    # None leaves timeouts to the HTTP client
    timeout: Optional[float] = None

    @classmethod
    def from_env(cls) -> "Settings":
        """Create Settings from environment variables.

        Raises:
            StorageEngineConfigError: If the endpoint is missing or the
                timeout is not a number.
        """
        endpoint = os.getenv(ENDPOINT_ENV, "").strip().strip('"').strip("'")
        if not endpoint:
            raise StorageEngineConfigError(
                f"{ENDPOINT_ENV} environment variable is not set"
            )

        raw_timeout = os.getenv(TIMEOUT_ENV, "").strip()
        timeout: Optional[float] = None
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as exc:
                raise StorageEngineConfigError(
                    f"{TIMEOUT_ENV} must be a number, got {raw_timeout!r}"
                ) from exc

        return cls(endpoint=endpoint, timeout=timeout)

    def connect(self, http_client: Optional[HttpClient] = None) -> ClientConfig:
        """Probe the endpoint and return a ClientConfig (defaults to a requests.Session)."""
        return ClientConfig(
            http_client if http_client is not None else requests.Session(),
            self.endpoint,
            timeout=self.timeout,
        )
