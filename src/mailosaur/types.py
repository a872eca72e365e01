"""Type definitions for the Mailosaur client."""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .constants import DEFAULT_TIMEOUT_MS, SERVICE_URL
from .utils.datetime_utils import format_rfc3339

# An email address entry as sent by the API, e.g. {"name": "...", "email": "..."}
Address = dict[str, str]


@dataclass(frozen=True)
class ClientConfig:
    """Configuration for MailosaurClient.

    Attributes:
        api_key: API key used as the HTTP basic auth username.
        server_id: Identifier of the server (inbox) all operations are scoped to.
        base_url: Base URL for the API. A trailing slash is stripped.
        timeout: HTTP request timeout in milliseconds, or None for no timeout.
    """

    api_key: str = field(repr=False)
    server_id: str
    base_url: str = SERVICE_URL
    timeout: int | None = DEFAULT_TIMEOUT_MS

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))


@dataclass(frozen=True)
class _BaseMessage:
    """Fields shared by full messages and message summaries."""

    id: str = ""
    server: str = ""
    from_: list[Address] = field(default_factory=list)
    to: list[Address] = field(default_factory=list)
    cc: list[Address] = field(default_factory=list)
    bcc: list[Address] = field(default_factory=list)
    received: datetime | None = None
    subject: str = ""
    summary: str = ""


@dataclass(frozen=True)
class Message(_BaseMessage):
    """An email or SMS received by a Mailosaur server.

    The content payloads are kept as the JSON values the API returned and
    are not interpreted by the client.

    Attributes:
        id: Unique message identifier.
        server: Identifier of the server that received the message.
        from_: Sender addresses.
        to: Recipient addresses.
        cc: Carbon-copy addresses.
        bcc: Blind carbon-copy addresses.
        received: When the message was received.
        subject: Message subject.
        summary: Short summary of the message content.
        attachments: Attachment payload.
        html: HTML content payload.
        text: Plain text content payload.
        metadata: Message metadata payload (headers and the like).
        hateos_links: Related resource links (``hateosLinks`` on the wire).
    """

    attachments: Any = None
    html: Any = None
    text: Any = None
    metadata: Any = None
    hateos_links: Any = None


@dataclass(frozen=True)
class MessageSummary(_BaseMessage):
    """A summarized message as returned by list and search.

    Attributes:
        attachments: Number of attachments on the message.
    """

    attachments: int = 0


@dataclass
class SearchMessagesLookup:
    """Criteria for searching messages.

    Empty criteria are left out of the request body.

    Attributes:
        sent_to: Full address the message was sent to.
        subject: Text the subject must contain.
        body: Text the body must contain.
    """

    sent_to: str | None = None
    subject: str | None = None
    body: str | None = None

    def to_dict(self) -> dict[str, str]:
        """Serialize to the API request body."""
        result: dict[str, str] = {}
        if self.body:
            result["body"] = self.body
        if self.subject:
            result["subject"] = self.subject
        if self.sent_to:
            result["sentTo"] = self.sent_to
        return result


@dataclass
class MessageListOptions:
    """Paging and time filters for listing and searching messages.

    Example:
        ```python
        options = MessageListOptions().set_page(2).set_items_per_page(50)
        client.list_messages(options)
        ```

    Attributes:
        page: Page of results to request.
        items_per_page: Number of results per page.
        received_after: Only return messages received after this time.
    """

    page: int | None = None
    items_per_page: int | None = None
    received_after: datetime | None = None

    def set_page(self, page: int) -> MessageListOptions:
        self.page = page
        return self

    def set_items_per_page(self, items_per_page: int) -> MessageListOptions:
        self.items_per_page = items_per_page
        return self

    def set_received_after(self, received_after: datetime) -> MessageListOptions:
        self.received_after = received_after
        return self

    def apply(self, params: MutableMapping[str, Any]) -> None:
        """Write the configured options into a query-parameter mapping.

        Args:
            params: Query parameters to update in place.
        """
        if self.page is not None:
            params["page"] = self.page
        if self.items_per_page is not None:
            params["itemsPerPage"] = self.items_per_page
        if self.received_after is not None:
            params["receivedAfter"] = format_rfc3339(self.received_after)
