"""HTTP clients for the Mailosaur API.

- BaseApiClient: authenticated single-request transport
- MessageApiClient: message operations
"""

from .base_client import BaseApiClient, encode_json_body, encode_path_segment
from .message_client import MessageApiClient

__all__ = [
    "BaseApiClient",
    "MessageApiClient",
    "encode_json_body",
    "encode_path_segment",
]
