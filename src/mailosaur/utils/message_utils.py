"""Message decoding utilities for the Mailosaur client."""

from __future__ import annotations

from typing import Any

from ..types import Address, Message, MessageSummary
from .datetime_utils import parse_iso_timestamp


def _expect_object(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise TypeError(f"expected {what} to be a JSON object, got {type(data).__name__}")
    return data


def _string_field(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"expected {key!r} to be a string, got {type(value).__name__}")
    return value


def parse_addresses(data: Any) -> list[Address]:
    """Parse a list of address objects.

    Args:
        data: The address list data, or None.

    Returns:
        List of address mappings; empty when no data.
    """
    if data is None:
        return []
    if not isinstance(data, list):
        raise TypeError(f"expected address list, got {type(data).__name__}")
    return [
        {str(k): "" if v is None else str(v) for k, v in _expect_object(item, "address").items()}
        for item in data
    ]


def _parse_base_fields(data: dict[str, Any]) -> dict[str, Any]:
    received = data.get("received")
    if received is not None and not isinstance(received, str):
        raise TypeError(f"expected 'received' to be a string, got {type(received).__name__}")
    return {
        "id": _string_field(data, "id"),
        "server": _string_field(data, "server"),
        "from_": parse_addresses(data.get("from")),
        "to": parse_addresses(data.get("to")),
        "cc": parse_addresses(data.get("cc")),
        "bcc": parse_addresses(data.get("bcc")),
        "received": parse_iso_timestamp(received) if received is not None else None,
        "subject": _string_field(data, "subject"),
        "summary": _string_field(data, "summary"),
    }


def parse_message(data: Any) -> Message:
    """Parse a full message from API data.

    Args:
        data: The decoded JSON message object.

    Returns:
        Message instance.

    Raises:
        TypeError: If the data does not have the shape of a message.
        ValueError: If the received timestamp is malformed.
    """
    data = _expect_object(data, "message")
    return Message(
        **_parse_base_fields(data),
        attachments=data.get("attachments"),
        html=data.get("html"),
        text=data.get("text"),
        metadata=data.get("metadata"),
        hateos_links=data.get("hateosLinks"),
    )


def parse_message_summary(data: Any) -> MessageSummary:
    """Parse a message summary from API data.

    Args:
        data: The decoded JSON summary object.

    Returns:
        MessageSummary instance.
    """
    data = _expect_object(data, "message summary")
    attachments = data.get("attachments")
    if attachments is None:
        attachments = 0
    elif isinstance(attachments, bool) or not isinstance(attachments, int):
        raise TypeError(
            f"expected 'attachments' to be an integer, got {type(attachments).__name__}"
        )
    return MessageSummary(**_parse_base_fields(data), attachments=attachments)


def parse_message_list(data: Any) -> list[MessageSummary]:
    """Unwrap a list/search response envelope.

    The API wraps results as ``{"items": [...]}``. A missing or null
    ``items`` field yields an empty list.

    Args:
        data: The decoded JSON response body.

    Returns:
        The message summaries in the order the server returned them.
    """
    data = _expect_object(data, "response")
    items = data.get("items")
    if items is None:
        return []
    if not isinstance(items, list):
        raise TypeError(f"expected 'items' to be a list, got {type(items).__name__}")
    return [parse_message_summary(item) for item in items]
