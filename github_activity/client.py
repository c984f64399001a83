"""HTTP client for the GitHub public events feed."""

from __future__ import annotations

import datetime as dt
import http
import re
import typing as typ

import httpx
import msgspec

from .config import ActivityClientConfig
from .errors import (
    GitHubAPIError,
    RateLimitedError,
    ResponseDecodeError,
    TransportError,
    UserNotFoundError,
)
from .logging import get_logger, log_debug
from .models import decode_events

if typ.TYPE_CHECKING:
    from types import TracebackType

    from .models import GitHubEvent

logger = get_logger(__name__)

_ERROR_BODY_LIMIT = 512
_RATE_LIMIT_REMAINING_HEADER = "X-RateLimit-Remaining"
_RATE_LIMIT_RESET_HEADER = "X-RateLimit-Reset"
_RESET_PATTERN = re.compile(r"[+-]?[0-9]+")


def _parse_reset_time(value: str | None) -> dt.datetime | None:
    """Convert a Unix-seconds reset header into an aware local datetime."""
    if not value or _RESET_PATTERN.fullmatch(value) is None:
        return None
    try:
        return dt.datetime.fromtimestamp(int(value), tz=dt.UTC).astimezone()
    except (OverflowError, OSError, ValueError):
        return None


def _status_line(response: httpx.Response) -> str:
    return f"{response.status_code} {response.reason_phrase}".rstrip()


def _body_excerpt(response: httpx.Response) -> str:
    excerpt = response.content[:_ERROR_BODY_LIMIT]
    return excerpt.decode("utf-8", errors="replace").strip()


def _is_rate_limited(response: httpx.Response) -> bool:
    return (
        response.status_code == http.HTTPStatus.FORBIDDEN
        and response.headers.get(_RATE_LIMIT_REMAINING_HEADER) == "0"
    )


class GitHubEventsClient:
    """Fetch a user's recent public events with a single GET request.

    Parameters
    ----------
    config
        Endpoint template, user agent and optional token.
    http_client
        Optional ``httpx.Client`` for testing. If not provided, the instance
        creates and owns its own client.

    """

    def __init__(
        self,
        config: ActivityClientConfig | None = None,
        *,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialise the client with configuration."""
        self._config = config or ActivityClientConfig()
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(follow_redirects=True)

    @property
    def config(self) -> ActivityClientConfig:
        """Return the configuration used by this client."""
        return self._config

    def close(self) -> None:
        """Close any owned HTTP resources."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> GitHubEventsClient:
        """Return the client for use in a ``with`` block."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        """Close owned resources on exit."""
        self.close()

    def fetch_events(self, username: str) -> list[GitHubEvent]:
        """Return the user's recent public events in feed order.

        Raises
        ------
        UserNotFoundError
            If the feed returns 404.
        RateLimitedError
            If the feed returns 403 with no remaining quota.
        GitHubAPIError
            For any other non-2xx response.
        TransportError
            If the request cannot be built or sent.
        ResponseDecodeError
            If a 2xx body is not a JSON array of events.

        """
        response = self._send(username)
        self._check_response(username, response)
        try:
            events = decode_events(response.content)
        except msgspec.DecodeError as exc:
            raise ResponseDecodeError.invalid_body(str(exc)) from exc
        log_debug(logger, "Decoded %d events for %s", len(events), username)
        return events

    def _send(self, username: str) -> httpx.Response:
        url = self._config.url_for(username)
        log_debug(logger, "GET %s", url)
        try:
            response = self._client.get(url, headers=self._config.headers())
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            raise TransportError.request_failed(str(exc)) from exc
        log_debug(logger, "GET %s -> %d", url, response.status_code)
        return response

    def _check_response(self, username: str, response: httpx.Response) -> None:
        if response.status_code == http.HTTPStatus.NOT_FOUND:
            log_debug(logger, "GitHub user %s not found", username)
            raise UserNotFoundError.for_user(username)

        if _is_rate_limited(response):
            reset_at = _parse_reset_time(
                response.headers.get(_RATE_LIMIT_RESET_HEADER)
            )
            log_debug(logger, "GitHub rate limit exhausted for %s", username)
            raise RateLimitedError.quota_exhausted(reset_at)

        if not response.is_success:
            log_debug(
                logger,
                "GitHub events request for %s failed with %d",
                username,
                response.status_code,
            )
            raise GitHubAPIError.http_error(
                response.status_code,
                _status_line(response),
                _body_excerpt(response),
            )


__all__ = ["GitHubEventsClient"]
