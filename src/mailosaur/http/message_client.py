"""Message API client for the Mailosaur client."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

import httpx

from ..errors import DecodeError
from ..types import Message, MessageListOptions, MessageSummary, SearchMessagesLookup
from ..utils.message_utils import parse_message, parse_message_list
from .base_client import BaseApiClient, encode_path_segment

if TYPE_CHECKING:
    from .base_client import TimeoutTypes

T = TypeVar("T")


class MessageApiClient(BaseApiClient):
    """API client for message operations.

    Provides methods for retrieving, listing, searching and deleting the
    messages held by the configured server. Response status codes are not
    checked; every response body is handed to the JSON decoder.
    """

    def _decode(
        self, method: str, path: str, response: httpx.Response, parse: Callable[[Any], T]
    ) -> T:
        """Decode a JSON response body with the given parser.

        Raises:
            DecodeError: If the body is not JSON or has the wrong shape.
        """
        try:
            return parse(response.json())
        except (ValueError, TypeError, RecursionError) as e:
            # json.JSONDecodeError and UnicodeDecodeError are ValueErrors;
            # deeply nested bodies exhaust the decoder stack
            raise DecodeError(method, path, response.status_code, str(e)) from e

    def _server_params(self, options: MessageListOptions | None) -> dict[str, Any]:
        params: dict[str, Any] = {"server": self.config.server_id}
        if options is not None:
            options.apply(params)
        return params

    def get_message(
        self, message_id: str, *, timeout_seconds: TimeoutTypes = httpx.USE_CLIENT_DEFAULT
    ) -> Message:
        """Get the full detail of a single message.

        Args:
            message_id: The message ID.
            timeout_seconds: Per-call timeout in seconds, overriding the client default.

        Returns:
            The decoded message.
        """
        path = f"messages/{encode_path_segment(message_id)}"
        response = self.call("GET", path, timeout_seconds=timeout_seconds)
        return self._decode("GET", path, response, parse_message)

    def delete_message(
        self, message_id: str, *, timeout_seconds: TimeoutTypes = httpx.USE_CLIENT_DEFAULT
    ) -> None:
        """Permanently delete a message.

        Args:
            message_id: The message ID.
            timeout_seconds: Per-call timeout in seconds, overriding the client default.
        """
        path = f"messages/{encode_path_segment(message_id)}"
        self.call("DELETE", path, timeout_seconds=timeout_seconds)

    def list_messages(
        self,
        options: MessageListOptions | None = None,
        *,
        timeout_seconds: TimeoutTypes = httpx.USE_CLIENT_DEFAULT,
    ) -> list[MessageSummary]:
        """List the messages held by the configured server.

        Args:
            options: Paging and received-after filters.
            timeout_seconds: Per-call timeout in seconds, overriding the client default.

        Returns:
            Message summaries in server order (newest first).
        """
        params = self._server_params(options)
        response = self.call("GET", "messages", params, timeout_seconds=timeout_seconds)
        return self._decode("GET", "messages", response, parse_message_list)

    def delete_messages(
        self, *, timeout_seconds: TimeoutTypes = httpx.USE_CLIENT_DEFAULT
    ) -> None:
        """Permanently delete all messages held by the configured server.

        Args:
            timeout_seconds: Per-call timeout in seconds, overriding the client default.
        """
        params = {"server": self.config.server_id}
        self.call("DELETE", "messages", params, timeout_seconds=timeout_seconds)

    def search_messages(
        self,
        lookup: SearchMessagesLookup,
        options: MessageListOptions | None = None,
        *,
        timeout_seconds: TimeoutTypes = httpx.USE_CLIENT_DEFAULT,
    ) -> list[MessageSummary]:
        """Search the messages held by the configured server.

        Args:
            lookup: Search criteria; empty criteria are omitted from the body.
            options: Paging and received-after filters.
            timeout_seconds: Per-call timeout in seconds, overriding the client default.

        Returns:
            Matching message summaries in server order.
        """
        params = self._server_params(options)
        response = self.call(
            "POST", "messages/search", params, lookup, timeout_seconds=timeout_seconds
        )
        return self._decode("POST", "messages/search", response, parse_message_list)
