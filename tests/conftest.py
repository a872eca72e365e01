"""Shared fixtures: a recording HTTP test double and JSON test data."""

from __future__ import annotations

import uuid
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import httpx
import pytest

from mailosaur import MailosaurClient

TESTDATA_DIR = Path(__file__).parent / "testdata"
BASE_URL = "http://mailosaur.test"


def load_test_data(name: str) -> bytes:
    """Read a file from tests/testdata."""
    return (TESTDATA_DIR / name).read_bytes()


def random_id() -> str:
    """Random identifier usable as an API key, server id or message id."""
    return str(uuid.uuid4())


@dataclass
class StubResponse:
    """The response the recording server returns for every request."""

    status_code: int = 200
    body: bytes | None = None
    headers: dict[str, str] = field(default_factory=dict)


@dataclass
class ReceivedRequest:
    """A request captured by the recording server."""

    method: str
    url: httpx.URL
    headers: httpx.Headers
    body: bytes
    extensions: dict[str, Any]

    @property
    def path(self) -> str:
        return self.url.path

    @property
    def query(self) -> dict[str, str]:
        return dict(self.url.params)


class RecordingServer:
    """HTTP test double that records requests and replies with a fixed response."""

    def __init__(self, response: StubResponse) -> None:
        self.response = response
        self.requests: list[ReceivedRequest] = []
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(
            ReceivedRequest(
                method=request.method,
                url=request.url,
                headers=request.headers,
                body=request.read(),
                extensions=dict(request.extensions),
            )
        )
        return httpx.Response(
            self.response.status_code,
            content=self.response.body or b"",
            headers=self.response.headers,
        )

    @property
    def last(self) -> ReceivedRequest:
        assert self.requests, "no request was received"
        return self.requests[-1]


@dataclass
class ClientSetup:
    """A client wired to a recording server."""

    api_key: str
    server_id: str
    server: RecordingServer
    client: MailosaurClient


@pytest.fixture
def make_setup() -> Iterator[Callable[..., ClientSetup]]:
    """Factory building a client backed by a recording server."""
    created: list[MailosaurClient] = []

    def _make(
        status_code: int = 200,
        body: bytes | None = None,
        headers: dict[str, str] | None = None,
        **client_kwargs: Any,
    ) -> ClientSetup:
        server = RecordingServer(StubResponse(status_code, body, headers or {}))
        api_key = random_id()
        server_id = random_id()
        client_kwargs.setdefault("base_url", BASE_URL)
        client = MailosaurClient(api_key, server_id, transport=server.transport, **client_kwargs)
        created.append(client)
        return ClientSetup(api_key=api_key, server_id=server_id, server=server, client=client)

    yield _make

    for client in created:
        client.close()
