"""MailosaurClient - Main entry point for the Mailosaur client."""

from __future__ import annotations

import os
import secrets
import string
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import httpx

from .constants import (
    DEFAULT_TIMEOUT_MS,
    ENV_API_KEY,
    ENV_BASE_URL,
    ENV_SERVER_ID,
    GENERATED_LOCAL_PART_LENGTH,
    SERVICE_URL,
    SMTP_HOST,
)
from .errors import ConfigurationError
from .http import MessageApiClient
from .types import (
    ClientConfig,
    Message,
    MessageListOptions,
    MessageSummary,
    SearchMessagesLookup,
)

if TYPE_CHECKING:
    from .http.base_client import TimeoutTypes

_LOCAL_PART_ALPHABET = string.ascii_lowercase + string.digits


class MailosaurClient:
    """Client for the Mailosaur email testing API.

    Every operation is scoped to the server (inbox) given at construction.
    Calls are synchronous and each issues exactly one HTTP request.

    Example:
        ```python
        with MailosaurClient(api_key="your-api-key", server_id="abc123") as client:
            for summary in client.list_messages():
                message = client.get_message(summary.id)
                print(message.subject)
            client.delete_messages()
        ```
    """

    def __init__(
        self,
        api_key: str,
        server_id: str,
        *,
        base_url: str = SERVICE_URL,
        timeout: int | None = DEFAULT_TIMEOUT_MS,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the Mailosaur client.

        Args:
            api_key: API key for authentication.
            server_id: Identifier of the server to operate on.
            base_url: Base URL for the API (trailing slash is ignored).
            timeout: HTTP request timeout in milliseconds, None to disable.
                Individual calls take ``timeout_seconds`` instead.
            transport: Optional httpx transport for the underlying HTTP client.
        """
        self._config = ClientConfig(
            api_key=api_key,
            server_id=server_id,
            base_url=base_url,
            timeout=timeout,
        )
        self._api_client = MessageApiClient(self._config, transport=transport)

    @classmethod
    def from_env(
        cls, environ: Mapping[str, str] | None = None, **kwargs: Any
    ) -> MailosaurClient:
        """Create a client from MAILOSAUR_* environment variables.

        Reads MAILOSAUR_API_KEY and MAILOSAUR_SERVER_ID, and MAILOSAUR_BASE_URL
        when set. Keyword arguments are passed through to the constructor.

        Args:
            environ: Mapping to read instead of ``os.environ``.

        Raises:
            ConfigurationError: If a required variable is missing or empty.
        """
        env = os.environ if environ is None else environ
        missing = [name for name in (ENV_API_KEY, ENV_SERVER_ID) if not env.get(name)]
        if missing:
            raise ConfigurationError(
                f"Missing required environment variable(s): {', '.join(missing)}"
            )
        if env.get(ENV_BASE_URL):
            kwargs.setdefault("base_url", env[ENV_BASE_URL])
        return cls(env[ENV_API_KEY], env[ENV_SERVER_ID], **kwargs)

    @property
    def config(self) -> ClientConfig:
        """The immutable client configuration."""
        return self._config

    @property
    def server_id(self) -> str:
        return self._config.server_id

    def __enter__(self) -> MailosaurClient:
        """Enter context manager."""
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit context manager."""
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._api_client.close()

    def generate_email_address(self) -> str:
        """Generate a random address that delivers into this client's server.

        Returns:
            An address of the form ``<random>.<server_id>@mailosaur.io``.
        """
        local = "".join(
            secrets.choice(_LOCAL_PART_ALPHABET) for _ in range(GENERATED_LOCAL_PART_LENGTH)
        )
        return f"{local}.{self._config.server_id}@{SMTP_HOST}"

    def call(
        self,
        method: str,
        path: str,
        params: Mapping[str, Any] | None = None,
        body: Any = None,
        *,
        timeout_seconds: TimeoutTypes = httpx.USE_CLIENT_DEFAULT,
    ) -> httpx.Response:
        """Make a raw authenticated request to the API.

        Useful for endpoints without a typed wrapper, or for inspecting the
        status code before decoding. See ``BaseApiClient.call``.
        """
        return self._api_client.call(
            method, path, params, body, timeout_seconds=timeout_seconds
        )

    def get_message(
        self, message_id: str, *, timeout_seconds: TimeoutTypes = httpx.USE_CLIENT_DEFAULT
    ) -> Message:
        """Get the full detail of a single message.

        Args:
            message_id: The message ID.
            timeout_seconds: Per-call timeout in seconds.

        Returns:
            The decoded message.

        Raises:
            TransportError: If the request could not be sent.
            DecodeError: If the response body could not be decoded.
        """
        return self._api_client.get_message(message_id, timeout_seconds=timeout_seconds)

    def delete_message(
        self, message_id: str, *, timeout_seconds: TimeoutTypes = httpx.USE_CLIENT_DEFAULT
    ) -> None:
        """Permanently delete a message.

        Args:
            message_id: The message ID.
            timeout_seconds: Per-call timeout in seconds.
        """
        self._api_client.delete_message(message_id, timeout_seconds=timeout_seconds)

    def list_messages(
        self,
        options: MessageListOptions | None = None,
        *,
        timeout_seconds: TimeoutTypes = httpx.USE_CLIENT_DEFAULT,
    ) -> list[MessageSummary]:
        """List messages held by the server.

        Args:
            options: Paging and received-after filters.
            timeout_seconds: Per-call timeout in seconds.

        Returns:
            Message summaries, newest first.
        """
        return self._api_client.list_messages(options, timeout_seconds=timeout_seconds)

    def delete_messages(
        self, *, timeout_seconds: TimeoutTypes = httpx.USE_CLIENT_DEFAULT
    ) -> None:
        """Permanently delete all messages held by the server."""
        self._api_client.delete_messages(timeout_seconds=timeout_seconds)

    def search_messages(
        self,
        lookup: SearchMessagesLookup,
        options: MessageListOptions | None = None,
        *,
        timeout_seconds: TimeoutTypes = httpx.USE_CLIENT_DEFAULT,
    ) -> list[MessageSummary]:
        """Search messages held by the server.

        Args:
            lookup: Search criteria.
            options: Paging and received-after filters.
            timeout_seconds: Per-call timeout in seconds.

        Returns:
            Matching message summaries.
        """
        return self._api_client.search_messages(
            lookup, options, timeout_seconds=timeout_seconds
        )
