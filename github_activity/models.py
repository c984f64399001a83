"""Typed models for the GitHub public events feed.

The outer envelope is decoded eagerly while ``payload`` stays as raw JSON.
Each payload variant below is decoded only once the event's ``type`` tag has
selected it, so an odd payload never breaks decoding of the whole feed.
"""

from __future__ import annotations

import datetime as dt  # noqa: TC003 - msgspec resolves annotations at runtime

import msgspec


def _null_payload() -> msgspec.Raw:
    return msgspec.Raw(b"null")


class EventRepo(msgspec.Struct, frozen=True):
    """Repository reference attached to every event."""

    name: str = ""


class GitHubEvent(msgspec.Struct, frozen=True):
    """One entry from the events feed with an undecoded payload."""

    type: str = ""
    repo: EventRepo | None = None
    payload: msgspec.Raw = msgspec.field(default_factory=_null_payload)
    created_at: dt.datetime | None = None

    @property
    def repo_name(self) -> str:
        """Return the ``owner/name`` slug of the event's repository."""
        return self.repo.name if self.repo is not None else ""


class PushPayload(msgspec.Struct, frozen=True):
    """Payload for ``PushEvent``."""

    size: int = 0


class NumberedItem(msgspec.Struct, frozen=True):
    """Issue or pull request summary nested in a payload."""

    number: int = 0
    title: str = ""


class IssuesPayload(msgspec.Struct, frozen=True):
    """Payload for ``IssuesEvent``."""

    action: str = ""
    issue: NumberedItem = msgspec.field(default_factory=NumberedItem)


class PullRequestPayload(msgspec.Struct, frozen=True):
    """Payload for ``PullRequestEvent``."""

    action: str = ""
    pull_request: NumberedItem = msgspec.field(default_factory=NumberedItem)


class WatchPayload(msgspec.Struct, frozen=True):
    """Payload for ``WatchEvent``."""

    action: str = ""


class Forkee(msgspec.Struct, frozen=True):
    """Repository created by a fork."""

    full_name: str | None = None


class ForkPayload(msgspec.Struct, frozen=True):
    """Payload for ``ForkEvent``."""

    forkee: Forkee | None = None


def decode_events(body: bytes) -> list[GitHubEvent]:
    """Decode a feed response body into events, preserving feed order.

    A JSON ``null`` body decodes to an empty feed.

    Raises
    ------
    msgspec.DecodeError
        If the body is not a JSON array of event objects.

    """
    events = msgspec.json.decode(body, type=list[GitHubEvent] | None)
    return events or []


__all__ = [
    "EventRepo",
    "ForkPayload",
    "Forkee",
    "GitHubEvent",
    "IssuesPayload",
    "NumberedItem",
    "PullRequestPayload",
    "PushPayload",
    "WatchPayload",
    "decode_events",
]
