"""Errors raised while fetching the GitHub events feed."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import datetime as dt

# RFC 1123 layout with the local zone abbreviation.
_RESET_TIME_FORMAT = "%a, %d %b %Y %H:%M:%S %Z"


class ActivityFetchError(RuntimeError):
    """Base class for failures that abort an activity fetch."""


class UserNotFoundError(ActivityFetchError):
    """Raised when the feed returns 404 for the requested user."""

    def __init__(self, username: str) -> None:
        """Initialise with the username that could not be found."""
        self.username = username
        super().__init__("user not found")

    @classmethod
    def for_user(cls, username: str) -> UserNotFoundError:
        """Return an error for an unknown username."""
        return cls(username)


class RateLimitedError(ActivityFetchError):
    """Raised when the unauthenticated request quota is exhausted.

    Attributes
    ----------
    reset_at
        Local time at which the quota resets, when GitHub reported it.

    """

    def __init__(self, message: str, *, reset_at: dt.datetime | None = None) -> None:
        """Initialise with a message and optional reset time."""
        self.reset_at = reset_at
        super().__init__(message)

    @classmethod
    def quota_exhausted(cls, reset_at: dt.datetime | None = None) -> RateLimitedError:
        """Return an error for a 403 with no remaining quota."""
        msg = "rate limit exceeded; set GITHUB_TOKEN to increase limits"
        if reset_at is not None:
            msg = f"{msg} (resets at {reset_at.strftime(_RESET_TIME_FORMAT)})"
        return cls(msg, reset_at=reset_at)


class TransportError(ActivityFetchError):
    """Raised when the request cannot be built or sent."""

    @classmethod
    def request_failed(cls, detail: str) -> TransportError:
        """Return an error for a network or request construction failure."""
        return cls(f"request failed: {detail}")


class GitHubAPIError(ActivityFetchError):
    """Raised when GitHub returns any other non-2xx response."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        """Initialise with a message and optional HTTP status code."""
        self.status_code = status_code
        super().__init__(message)

    @classmethod
    def http_error(cls, status_code: int, status: str, body: str) -> GitHubAPIError:
        """Return an error carrying the status line and a body excerpt."""
        return cls(f"github api error: {status}: {body}", status_code=status_code)


class ResponseDecodeError(ActivityFetchError):
    """Raised when a 2xx body is not a JSON array of events."""

    @classmethod
    def invalid_body(cls, detail: str) -> ResponseDecodeError:
        """Return an error for an undecodable events payload."""
        return cls(f"decode failed: {detail}")
