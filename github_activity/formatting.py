"""Render feed events as one-line summaries.

Only a fixed set of event types is summarised. Anything else, and any event
whose payload does not match the shape its type requires, is reported as
not printable rather than raising.
"""

from __future__ import annotations

import typing as typ

import msgspec

from .logging import get_logger, log_debug
from .models import (
    ForkPayload,
    IssuesPayload,
    PullRequestPayload,
    PushPayload,
    WatchPayload,
)

if typ.TYPE_CHECKING:
    from .models import GitHubEvent

logger = get_logger(__name__)

T = typ.TypeVar("T")

_SKIP: tuple[str, bool] = ("", False)

SUPPORTED_EVENT_TYPES: frozenset[str] = frozenset(
    {
        "PushEvent",
        "IssuesEvent",
        "PullRequestEvent",
        "WatchEvent",
        "ForkEvent",
        "CreateEvent",
        "DeleteEvent",
        "ReleaseEvent",
        "PullRequestReviewCommentEvent",
        "IssueCommentEvent",
    }
)


def title_case(value: str) -> str:
    """Uppercase the first character and lowercase the rest.

    Examples
    --------
    >>> title_case("CLOSED")
    'Closed'
    >>> title_case("")
    ''

    """
    if not value:
        return value
    return value[:1].upper() + value[1:].lower()


def _decode_payload(event: GitHubEvent, payload_type: type[T]) -> T | None:
    try:
        return msgspec.json.decode(event.payload, type=payload_type)
    except msgspec.DecodeError as exc:
        log_debug(
            logger,
            "Skipping %s in %s with malformed payload: %s",
            event.type,
            event.repo_name,
            exc,
        )
        return None


def _format_push(event: GitHubEvent) -> tuple[str, bool]:
    payload = _decode_payload(event, PushPayload)
    if payload is None:
        return _SKIP
    return (f"Pushed {payload.size} commit(s) to {event.repo_name}", True)


def _format_issues(event: GitHubEvent) -> tuple[str, bool]:
    payload = _decode_payload(event, IssuesPayload)
    if payload is None:
        return _SKIP
    issue = payload.issue
    return (
        f'{title_case(payload.action)} an issue #{issue.number} "{issue.title}" '
        f"in {event.repo_name}",
        True,
    )


def _format_pull_request(event: GitHubEvent) -> tuple[str, bool]:
    payload = _decode_payload(event, PullRequestPayload)
    if payload is None:
        return _SKIP
    pr = payload.pull_request
    return (
        f'{title_case(payload.action)} a pull request #{pr.number} "{pr.title}" '
        f"in {event.repo_name}",
        True,
    )


def _format_watch(event: GitHubEvent) -> tuple[str, bool]:
    payload = _decode_payload(event, WatchPayload)
    if payload is None:
        return _SKIP
    if payload.action.lower() == "started":
        return (f"Starred {event.repo_name}", True)
    return (f"Watch event on {event.repo_name}", True)


def _format_fork(event: GitHubEvent) -> tuple[str, bool]:
    payload = _decode_payload(event, ForkPayload)
    if payload is None:
        return _SKIP
    target = (payload.forkee and payload.forkee.full_name) or event.repo_name
    return (f"Forked {event.repo_name} → {target}", True)


def format_event(event: GitHubEvent) -> tuple[str, bool]:
    """Return ``(line, True)`` for a printable event, else ``("", False)``.

    Parameters
    ----------
    event
        Decoded feed entry. Its payload is decoded here, according to its
        ``type`` tag.

    Returns
    -------
    tuple[str, bool]
        The summary line and whether the event is printable.

    """
    repo = event.repo_name
    match event.type:
        case "PushEvent":
            return _format_push(event)
        case "IssuesEvent":
            return _format_issues(event)
        case "PullRequestEvent":
            return _format_pull_request(event)
        case "WatchEvent":
            return _format_watch(event)
        case "ForkEvent":
            return _format_fork(event)
        case "CreateEvent":
            return (f"Created something in {repo}", True)
        case "DeleteEvent":
            return (f"Deleted something in {repo}", True)
        case "ReleaseEvent":
            return (f"Published or edited a release in {repo}", True)
        case "PullRequestReviewCommentEvent":
            return (f"Commented on a PR review in {repo}", True)
        case "IssueCommentEvent":
            return (f"Commented on an issue in {repo}", True)
        case _:
            return _SKIP


__all__ = ["SUPPORTED_EVENT_TYPES", "format_event", "title_case"]
