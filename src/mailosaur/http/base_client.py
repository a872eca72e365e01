"""Base HTTP client for the Mailosaur API."""

from __future__ import annotations

import json
import logging
import threading
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import httpx

from ..errors import TransportError
from ..types import ClientConfig

logger = logging.getLogger("mailosaur")

if TYPE_CHECKING:
    from httpx._client import UseClientDefault

    # Per-call timeout: seconds, an httpx.Timeout, None to disable, or the client default.
    TimeoutTypes = float | httpx.Timeout | UseClientDefault | None


def encode_path_segment(value: str) -> str:
    """URL-encode a path segment for use in API URLs.

    Args:
        value: The value to encode.

    Returns:
        URL-encoded string safe for use in URL paths.
    """
    return quote(value, safe="")


def stringify_query_value(value: Any) -> str:
    """Render a query parameter value as a string.

    Booleans are written in JSON form ('true'/'false'); everything else
    uses ``str()``. Temporal values are not special-cased and must be
    formatted by the caller.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _json_default(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_json_body(body: Any) -> bytes:
    """Serialize a request body to compact JSON.

    Objects providing ``to_dict()`` are converted through it.

    Args:
        body: Any JSON-serializable value.

    Returns:
        UTF-8 encoded JSON.

    Raises:
        TypeError: If the value cannot be serialized.
        ValueError: If the value contains circular references or NaN.
    """
    return json.dumps(
        body, separators=(",", ":"), ensure_ascii=False, allow_nan=False, default=_json_default
    ).encode("utf-8")


class BaseApiClient:
    """Authenticated HTTP transport for the Mailosaur API.

    Issues exactly one request per call: no retries and no interpretation
    of the response status.

    Attributes:
        config: Client configuration.
    """

    def __init__(
        self, config: ClientConfig, *, transport: httpx.BaseTransport | None = None
    ) -> None:
        """Initialize the base API client.

        Args:
            config: Client configuration with API key and base URL.
            transport: Optional httpx transport (proxies, test doubles).
        """
        self.config = config
        self._transport = transport
        self._client: httpx.Client | None = None
        self._lock = threading.Lock()

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client.

        Returns:
            The HTTP client instance.
        """
        with self._lock:
            if self._client is None or self._client.is_closed:
                timeout = None if self.config.timeout is None else self.config.timeout / 1000
                self._client = httpx.Client(
                    auth=httpx.BasicAuth(self.config.api_key, ""),
                    timeout=httpx.Timeout(timeout),
                    transport=self._transport,
                )
            return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        with self._lock:
            if self._client is not None and not self._client.is_closed:
                self._client.close()
            self._client = None

    def call(
        self,
        method: str,
        path: str,
        params: Mapping[str, Any] | None = None,
        body: Any = None,
        *,
        timeout_seconds: TimeoutTypes = httpx.USE_CLIENT_DEFAULT,
    ) -> httpx.Response:
        """Make a single authenticated HTTP request.

        Args:
            method: HTTP method (GET, POST, DELETE, ...).
            path: API path relative to the base URL, without a leading slash.
            params: Query parameters. Values are stringified with
                ``stringify_query_value``.
            body: Value to send as a JSON body. None sends no body and no
                Content-Type header.
            timeout_seconds: Per-call timeout in seconds, overriding the client default.

        Returns:
            The HTTP response, whatever its status code.

        Raises:
            TransportError: If the request cannot be built or sent.
        """
        url = f"{self.config.base_url}/{path}"

        headers: dict[str, str] = {}
        content: bytes | None = None
        if body is not None:
            try:
                content = encode_json_body(body)
            except (TypeError, ValueError) as e:
                raise TransportError(method, path, f"could not encode request body: {e}") from e
            headers["Content-Type"] = "application/json"

        query = {key: stringify_query_value(value) for key, value in (params or {}).items()}

        logger.debug("Sending %s %s", method, url)
        try:
            response = self._get_client().request(
                method,
                url,
                params=query or None,
                content=content,
                headers=headers or None,
                timeout=timeout_seconds,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(method, path, str(e) or type(e).__name__) from e

        logger.debug("%s %s returned %d", method, url, response.status_code)
        return response
