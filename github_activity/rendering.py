"""Select, format and print events from a decoded feed."""

from __future__ import annotations

import typing as typ

from .formatting import format_event

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import GitHubEvent

DEFAULT_LIMIT = 30
MIN_LIMIT = 1
MAX_LIMIT = 100
LINE_MARKER = "- "

NO_ACTIVITY_MESSAGE = "No recent public activity."
NO_PRINTABLE_MESSAGE = "No printable events found."


def clamp_limit(limit: int) -> int:
    """Clamp a requested event count to the supported range."""
    return max(MIN_LIMIT, min(MAX_LIMIT, limit))


def no_events_of_type_message(event_type: str) -> str:
    """Return the message shown when a type filter matches nothing."""
    return f'No events of type "{event_type}" found.'


def iter_lines(
    events: cabc.Iterable[GitHubEvent],
    *,
    event_type: str = "",
    limit: int = DEFAULT_LIMIT,
) -> cabc.Iterator[str]:
    """Yield summary lines in feed order, stopping after ``limit`` lines.

    Events whose tag differs from a non-empty ``event_type`` are skipped
    before formatting, as are events ``format_event`` cannot summarise.
    """
    limit = clamp_limit(limit)
    shown = 0
    for event in events:
        if event_type and event.type != event_type:
            continue
        line, ok = format_event(event)
        if not ok:
            continue
        yield line
        shown += 1
        if shown >= limit:
            return


def select_lines(
    events: cabc.Iterable[GitHubEvent],
    *,
    event_type: str = "",
    limit: int = DEFAULT_LIMIT,
) -> list[str]:
    """Return the summary lines :func:`render_activity` would print."""
    return list(iter_lines(events, event_type=event_type, limit=limit))


def render_activity(
    events: cabc.Sequence[GitHubEvent],
    out: typ.TextIO,
    *,
    event_type: str = "",
    limit: int = DEFAULT_LIMIT,
) -> int:
    """Print selected events to ``out`` and return how many were shown.

    Parameters
    ----------
    events
        Decoded feed entries in feed order.
    out
        Text stream receiving the output, normally ``sys.stdout``.
    event_type
        Exact event tag to keep, or an empty string for all types.
    limit
        Maximum number of lines to print, clamped to ``[1, 100]``.

    Returns
    -------
    int
        Number of event lines printed. Informational messages are not counted.

    """
    if not events:
        print(NO_ACTIVITY_MESSAGE, file=out)
        return 0

    shown = 0
    for line in iter_lines(events, event_type=event_type, limit=limit):
        print(f"{LINE_MARKER}{line}", file=out)
        shown += 1

    if shown == 0:
        if event_type:
            print(no_events_of_type_message(event_type), file=out)
        else:
            print(NO_PRINTABLE_MESSAGE, file=out)
    return shown


__all__ = [
    "DEFAULT_LIMIT",
    "MAX_LIMIT",
    "MIN_LIMIT",
    "NO_ACTIVITY_MESSAGE",
    "NO_PRINTABLE_MESSAGE",
    "clamp_limit",
    "iter_lines",
    "no_events_of_type_message",
    "render_activity",
    "select_lines",
]
