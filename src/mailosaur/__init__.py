"""Mailosaur Python client.

A Python client library for Mailosaur - hosted email and SMS testing.
Send mail to an address at your Mailosaur server, then query, search and
delete the received messages from your test suite.

Example:
    ```python
    from mailosaur import MailosaurClient, SearchMessagesLookup

    with MailosaurClient(api_key="your-api-key", server_id="abc123") as client:
        address = client.generate_email_address()
        # ... trigger the application under test to send mail to `address` ...
        results = client.search_messages(SearchMessagesLookup(sent_to=address))
        message = client.get_message(results[0].id)
        print(f"Received: {message.subject}")
    ```
"""

from .client import MailosaurClient
from .constants import DEFAULT_TIMEOUT_MS, SERVICE_URL, SMTP_HOST
from .errors import (
    ApiError,
    ConfigurationError,
    DecodeError,
    MailosaurError,
    TransportError,
)
from .types import (
    ClientConfig,
    Message,
    MessageListOptions,
    MessageSummary,
    SearchMessagesLookup,
)
from .utils import format_rfc3339

__version__ = "0.1.0"

__all__ = [
    # Main classes
    "MailosaurClient",
    # Constants
    "DEFAULT_TIMEOUT_MS",
    "SERVICE_URL",
    "SMTP_HOST",
    # Configuration
    "ClientConfig",
    "MessageListOptions",
    "SearchMessagesLookup",
    # Data types
    "Message",
    "MessageSummary",
    # Utilities
    "format_rfc3339",
    # Errors
    "MailosaurError",
    "ConfigurationError",
    "ApiError",
    "TransportError",
    "DecodeError",
    # Version
    "__version__",
]
