"""Error hierarchy for the Mailosaur client."""

from __future__ import annotations


class MailosaurError(Exception):
    """Base exception for all Mailosaur client errors."""

    pass


class ConfigurationError(MailosaurError):
    """Missing or invalid client configuration."""

    pass


class ApiError(MailosaurError):
    """A failed call to the Mailosaur API.

    HTTP status codes are not interpreted; this error is raised only for
    transport and decoding failures.

    Attributes:
        method: The HTTP method of the failed call.
        path: The API path of the failed call, relative to the base URL.
        message: Description of the failure.
    """

    def __init__(self, method: str, path: str, message: str) -> None:
        self.method = method
        self.path = path
        self.message = message
        super().__init__(f"{method} /{path}: {message}")


class TransportError(ApiError):
    """The request could not be built or sent (bad URL, connection, timeout, TLS)."""

    pass


class DecodeError(ApiError):
    """The response body was not valid JSON or did not have the expected shape.

    Attributes:
        status_code: HTTP status code of the undecodable response.
    """

    def __init__(self, method: str, path: str, status_code: int, message: str) -> None:
        self.status_code = status_code
        super().__init__(method, path, f"could not decode response ({status_code}): {message}")
