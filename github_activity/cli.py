"""Print a summary of a GitHub user's recent public activity."""

from __future__ import annotations

import argparse
import os
import sys
import typing as typ

from .client import GitHubEventsClient
from .config import ActivityClientConfig
from .errors import ActivityFetchError
from .formatting import SUPPORTED_EVENT_TYPES
from .logging import (
    DEFAULT_LOG_LEVEL,
    configure_logging,
    get_logger,
    log_debug,
    log_info,
    log_warning,
)
from .rendering import DEFAULT_LIMIT, MAX_LIMIT, MIN_LIMIT, clamp_limit, render_activity

if typ.TYPE_CHECKING:
    import httpx

logger = get_logger(__name__)

LOG_LEVEL_ENV_VAR = "GITHUB_ACTIVITY_LOG_LEVEL"
EXIT_OK = 0
EXIT_FAILURE = 1

_EXAMPLES = """\
Examples:
  github-activity torvalds
  github-activity --type=PushEvent --n=10 kamranahmedse
"""


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the ``github-activity`` command."""
    parser = argparse.ArgumentParser(
        prog="github-activity",
        description=__doc__,
        epilog=_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("username", help="GitHub username to look up")
    parser.add_argument(
        "--type",
        dest="event_type",
        default="",
        metavar="TYPE",
        help=(
            "Filter by event type (e.g., PushEvent, IssuesEvent). "
            "Leave blank for all."
        ),
    )
    parser.add_argument(
        "--n",
        dest="limit",
        type=int,
        default=DEFAULT_LIMIT,
        metavar="N",
        help=f"Max number of events to show ({MIN_LIMIT}-{MAX_LIMIT}).",
    )
    return parser


def _configure_logging() -> None:
    raw_level = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL)
    normalized, invalid = configure_logging(raw_level)
    if invalid:
        log_warning(
            logger,
            "Invalid %s %r, falling back to %s",
            LOG_LEVEL_ENV_VAR,
            raw_level,
            normalized,
        )


def main(
    argv: list[str] | None = None,
    *,
    http_client: httpx.Client | None = None,
) -> int:
    """Fetch and print a user's recent activity.

    Parameters
    ----------
    argv : list[str] | None, optional
        Command-line arguments. ``None`` defaults to ``sys.argv``.
    http_client : httpx.Client | None, optional
        Client used for the feed request. The caller keeps ownership.

    Returns
    -------
    int
        Exit code: 0 on success (including empty output), 1 when fetching or
        decoding fails. Usage errors exit with 2 via ``SystemExit``.

    """
    args = build_parser().parse_args(argv)
    _configure_logging()

    username: str = args.username
    event_type: str = args.event_type
    limit = clamp_limit(args.limit)
    if event_type and event_type not in SUPPORTED_EVENT_TYPES:
        log_info(logger, "Event type %r is never summarised", event_type)

    config = ActivityClientConfig.from_env()
    try:
        with GitHubEventsClient(config, http_client=http_client) as client:
            events = client.fetch_events(username)
    except ActivityFetchError as exc:
        log_debug(logger, "Fetching activity for %s failed: %s", username, exc)
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    shown = render_activity(events, sys.stdout, event_type=event_type, limit=limit)
    log_info(logger, "Showed %d of %d events for %s", shown, len(events), username)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
