"""Shared fixtures for unit and feature tests."""

from __future__ import annotations

import json
import typing as typ

import httpx
import pytest

from github_activity import ActivityClientConfig, GitHubEventsClient

if typ.TYPE_CHECKING:
    import collections.abc as cabc

TEST_EVENTS_URL = "https://example.test/users/{username}/events"


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ambient tokens and femtologging configuration out of tests."""
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.delenv("GITHUB_ACTIVITY_LOG_LEVEL", raising=False)
    monkeypatch.delenv("GITHUB_ACTIVITY_EVENTS_URL", raising=False)
    monkeypatch.setattr(
        "github_activity.logging.basicConfig", lambda **_kwargs: None
    )


class FeedServer:
    """Scripted events feed served through ``httpx.MockTransport``."""

    def __init__(self) -> None:
        """Start with an empty 200 response."""
        self.status_code = 200
        self.body: bytes = b"[]"
        self.headers: dict[str, str] = {}
        self.requests: list[httpx.Request] = []
        self.error: Exception | None = None

    def respond_json(self, payload: object, status_code: int = 200) -> None:
        """Serve ``payload`` encoded as JSON."""
        self.status_code = status_code
        self.body = json.dumps(payload).encode("utf-8")

    def respond_raw(
        self,
        body: bytes,
        status_code: int,
        headers: dict[str, str] | None = None,
    ) -> None:
        """Serve a raw body with optional headers."""
        self.status_code = status_code
        self.body = body
        self.headers = headers or {}

    def handler(self, request: httpx.Request) -> httpx.Response:
        """Record the request and return the scripted response."""
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(
            status_code=self.status_code,
            headers=self.headers,
            content=self.body,
        )


@pytest.fixture
def feed_server() -> FeedServer:
    """Return a scripted feed server."""
    return FeedServer()


@pytest.fixture
def http_client(feed_server: FeedServer) -> cabc.Iterator[httpx.Client]:
    """Return an ``httpx.Client`` wired to the scripted feed server."""
    client = httpx.Client(transport=httpx.MockTransport(feed_server.handler))
    yield client
    client.close()


@pytest.fixture
def events_client(http_client: httpx.Client) -> GitHubEventsClient:
    """Return a feed client using the scripted transport."""
    return GitHubEventsClient(
        ActivityClientConfig(events_url=TEST_EVENTS_URL),
        http_client=http_client,
    )
