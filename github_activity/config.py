"""Configuration for the GitHub events feed client."""

from __future__ import annotations

import dataclasses
import os

_DEFAULT_EVENTS_URL = "https://api.github.com/users/{username}/events"
_DEFAULT_USER_AGENT = "github-activity-cli/1.0"
TOKEN_ENV_VAR = "GITHUB_TOKEN"  # noqa: S105
EVENTS_URL_ENV_VAR = "GITHUB_ACTIVITY_EVENTS_URL"


@dataclasses.dataclass(frozen=True, slots=True)
class ActivityClientConfig:
    """Configuration for :class:`~github_activity.client.GitHubEventsClient`.

    Attributes
    ----------
    events_url
        Feed URL template; ``{username}`` is replaced per request.
    user_agent
        Value sent in the ``User-Agent`` header.
    token
        Optional bearer token. Requests are anonymous when unset.

    """

    events_url: str = _DEFAULT_EVENTS_URL
    user_agent: str = _DEFAULT_USER_AGENT
    token: str | None = None

    @classmethod
    def from_env(cls) -> ActivityClientConfig:
        """Build configuration from ``GITHUB_TOKEN`` and the events URL override."""
        token = os.environ.get(TOKEN_ENV_VAR, "").strip()
        events_url = os.environ.get(EVENTS_URL_ENV_VAR, "").strip()
        return cls(events_url=events_url or _DEFAULT_EVENTS_URL, token=token or None)

    def url_for(self, username: str) -> str:
        """Return the feed URL for ``username``."""
        return self.events_url.format(username=username)

    def headers(self) -> dict[str, str]:
        """Return the fixed request headers, including auth when configured."""
        headers = {"User-Agent": self.user_agent}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers
