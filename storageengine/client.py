"""
Connection configuration for a storage engine endpoint.

``ClientConfig`` validates the endpoint, probes it once, and then holds the
injected HTTP client for every ``StorageObject`` built from it. The HTTP
client is anything with a ``requests.Session``-style ``request`` method.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional, Protocol, Type, TypeVar

from pydantic import AnyHttpUrl, TypeAdapter, ValidationError

from .exceptions import (
    StorageEngineAuthError,
    StorageEngineConfigError,
    StorageEngineDecodeError,
    StorageEngineEmptyResponse,
    StorageEngineError,
    StorageEngineNotFound,
    StorageEngineRemoteError,
    StorageEngineTransportError,
)
from .models import StorageEngineModel

if TYPE_CHECKING:  # pragma: no cover - import for type checking only
    from .objects import StorageObject

LOGGER = logging.getLogger(__name__)

_HTTP_URL = TypeAdapter(AnyHttpUrl)

ResponseModel = TypeVar("ResponseModel", bound=StorageEngineModel)


class HttpClient(Protocol):
    """Send one HTTP request, return the response or raise."""

    def request(self, method: str, url: str, **kwargs: Any) -> Any: ...


# ------------------------------- Transport -----------------------------------


class _StorageEngineTransport:
    """
    Minimal HTTP transport:
      - JSON bodies sent as canonical bytes via `data=`
      - Only a 200 counts as success
      - `timeout` forwarded only when configured
    """

    def __init__(
        self, http_client: HttpClient, endpoint: str, timeout: Optional[float]
    ):
        self._http_client = http_client
        self._base_url = endpoint.rstrip("/")
        self._timeout = timeout

    def url_for(self, route: str) -> str:
        return f"{self._base_url}{route}"

    def send(self, method: str, url: str, body: Optional[bytes] = None) -> Any:
        kwargs: Dict[str, Any] = {}
        if body is not None:
            kwargs["data"] = body
            kwargs["headers"] = {"Content-Type": "application/json"}
        if self._timeout is not None:
            kwargs["timeout"] = self._timeout

        LOGGER.info("%s to %s", method, url)
        try:
            resp = self._http_client.request(method, url, **kwargs)
        except Exception as exc:
            LOGGER.error("%s to %s failed: %s", method, url, exc)
            raise StorageEngineTransportError(
                f"{method} {url} failed: {exc}"
            ) from exc
        if resp is None:
            LOGGER.error("%s to %s returned no response", method, url)
            raise StorageEngineEmptyResponse(f"{method} {url}: response is empty")

        code = getattr(resp, "status_code", 0)
        LOGGER.debug("%s to %s returned status %s", method, url, code)
        if code != 200:
            payload = getattr(resp, "text", None)
            LOGGER.error("%s to %s failed with code %s", method, url, code)
            if code in (401, 403):
                raise StorageEngineAuthError(
                    f"HTTP {code}: unauthorized", status_code=code, payload=payload
                )
            if code == 404:
                raise StorageEngineNotFound(
                    f"HTTP {code}: not found", status_code=code, payload=payload
                )
            raise StorageEngineRemoteError(
                f"HTTP {code}", status_code=code, payload=payload
            )
        return resp

    def exchange(
        self,
        method: str,
        route: str,
        request: StorageEngineModel,
        response_model: Type[ResponseModel],
    ) -> ResponseModel:
        url = self.url_for(route)
        resp = self.send(method, url, request.to_wire())
        body = getattr(resp, "content", None)
        try:
            return response_model.model_validate_json(body)
        except (ValueError, TypeError) as exc:
            LOGGER.error("Failed to decode %s response from %s", route, url)
            raise StorageEngineDecodeError(
                f"Invalid {response_model.__name__} from {route}", payload=body
            ) from exc


# ------------------------------ ClientConfig ---------------------------------


class ClientConfig:
    """
    Validated endpoint plus the HTTP client shared by every object handle.

    Construction performs exactly one GET against ``endpoint`` and requires a
    200. Nothing is re-verified afterwards. Read-only once built.
    """

    __slots__ = ("_http_client", "_endpoint", "_timeout", "_transport")

    def __init__(
        self,
        http_client: HttpClient,
        endpoint: str,
        *,
        timeout: Optional[float] = None,
    ):
        if not endpoint or not isinstance(endpoint, str):
            raise StorageEngineConfigError("endpoint cannot be empty")
        if http_client is None:
            raise StorageEngineConfigError("http client cannot be None")
        try:
            _HTTP_URL.validate_python(endpoint)
        except ValidationError as exc:
            raise StorageEngineConfigError(
                f"endpoint is not a valid http(s) URL: {endpoint!r}"
            ) from exc

        transport = _StorageEngineTransport(http_client, endpoint, timeout)
        try:
            transport.send("GET", endpoint)
        except StorageEngineError as exc:
            raise StorageEngineConfigError(
                f"endpoint {endpoint} is not reachable: {exc}"
            ) from exc

        self._http_client = http_client
        self._endpoint = endpoint
        self._timeout = timeout
        self._transport = transport
        LOGGER.debug("ClientConfig ready for %s", endpoint)

    @property
    def http_client(self) -> HttpClient:
        return self._http_client

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def timeout(self) -> Optional[float]:
        return self._timeout

    @property
    def transport(self) -> _StorageEngineTransport:
        return self._transport

    def new_object(self) -> "StorageObject":
        """Return an empty handle bound to this configuration."""
        from .objects import StorageObject

        return StorageObject(self)

    def __repr__(self) -> str:
        return f"ClientConfig(endpoint={self._endpoint!r})"
