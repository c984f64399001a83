"""Summarise a GitHub user's recent public activity."""

from __future__ import annotations

from .client import GitHubEventsClient
from .config import ActivityClientConfig
from .errors import (
    ActivityFetchError,
    GitHubAPIError,
    RateLimitedError,
    ResponseDecodeError,
    TransportError,
    UserNotFoundError,
)
from .formatting import SUPPORTED_EVENT_TYPES, format_event, title_case
from .models import GitHubEvent, decode_events
from .rendering import clamp_limit, render_activity, select_lines

__all__ = [
    "SUPPORTED_EVENT_TYPES",
    "ActivityClientConfig",
    "ActivityFetchError",
    "GitHubAPIError",
    "GitHubEvent",
    "GitHubEventsClient",
    "RateLimitedError",
    "ResponseDecodeError",
    "TransportError",
    "UserNotFoundError",
    "clamp_limit",
    "decode_events",
    "format_event",
    "render_activity",
    "select_lines",
    "title_case",
]
