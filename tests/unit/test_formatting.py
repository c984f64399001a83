"""Unit tests for event summary formatting."""

from __future__ import annotations

import pytest

from github_activity.formatting import SUPPORTED_EVENT_TYPES, format_event, title_case
from github_activity.models import GitHubEvent
from tests.helpers.github_events import decode_feed, make_event


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("CLOSED", "Closed"),
        ("opened", "Opened"),
        ("reOpened", "Reopened"),
        ("x", "X"),
        ("", ""),
    ],
)
def test_title_case(value: str, expected: str) -> None:
    """title_case uppercases the first character and lowercases the rest."""
    assert title_case(value) == expected


@pytest.mark.parametrize(
    ("event_type", "payload", "expected"),
    [
        pytest.param(
            "PushEvent",
            {"size": 3},
            "Pushed 3 commit(s) to alice/repo",
            id="push",
        ),
        pytest.param(
            "IssuesEvent",
            {"action": "opened", "issue": {"number": 42, "title": "Bug"}},
            'Opened an issue #42 "Bug" in alice/repo',
            id="issues",
        ),
        pytest.param(
            "IssuesEvent",
            {"action": "CLOSED", "issue": {"number": 7, "title": "Crash"}},
            'Closed an issue #7 "Crash" in alice/repo',
            id="issues_action_title_cased",
        ),
        pytest.param(
            "PullRequestEvent",
            {"action": "merged", "pull_request": {"number": 5, "title": "Fix"}},
            'Merged a pull request #5 "Fix" in alice/repo',
            id="pull_request",
        ),
        pytest.param(
            "WatchEvent",
            {"action": "started"},
            "Starred alice/repo",
            id="watch_started",
        ),
        pytest.param(
            "WatchEvent",
            {"action": "STARTED"},
            "Starred alice/repo",
            id="watch_started_case_insensitive",
        ),
        pytest.param(
            "WatchEvent",
            {"action": "stopped"},
            "Watch event on alice/repo",
            id="watch_other_action",
        ),
        pytest.param(
            "ForkEvent",
            {"forkee": {"full_name": "bob/repo-fork"}},
            "Forked alice/repo → bob/repo-fork",
            id="fork_with_forkee",
        ),
        pytest.param(
            "ForkEvent",
            {},
            "Forked alice/repo → alice/repo",
            id="fork_without_forkee",
        ),
        pytest.param(
            "ForkEvent",
            {"forkee": {"full_name": ""}},
            "Forked alice/repo → alice/repo",
            id="fork_with_empty_forkee_name",
        ),
        pytest.param(
            "CreateEvent", {}, "Created something in alice/repo", id="create"
        ),
        pytest.param(
            "DeleteEvent", {}, "Deleted something in alice/repo", id="delete"
        ),
        pytest.param(
            "ReleaseEvent",
            {},
            "Published or edited a release in alice/repo",
            id="release",
        ),
        pytest.param(
            "PullRequestReviewCommentEvent",
            {},
            "Commented on a PR review in alice/repo",
            id="pr_review_comment",
        ),
        pytest.param(
            "IssueCommentEvent",
            {},
            "Commented on an issue in alice/repo",
            id="issue_comment",
        ),
    ],
)
def test_format_event_supported_types(
    event_type: str, payload: dict[str, object], expected: str
) -> None:
    """Every supported tag renders its fixed template."""
    assert format_event(make_event(event_type, "alice/repo", payload)) == (
        expected,
        True,
    )


@pytest.mark.parametrize(
    "event_type", ["unknown-tag", "GollumEvent", "MemberEvent", ""]
)
def test_format_event_skips_unknown_types(event_type: str) -> None:
    """Unknown tags are not printable."""
    assert format_event(make_event(event_type, payload={"size": 1})) == ("", False)


@pytest.mark.parametrize(
    ("event_type", "payload"),
    [
        pytest.param("PushEvent", {"size": "three"}, id="push_size_not_int"),
        pytest.param("PushEvent", [1, 2], id="push_payload_not_object"),
        pytest.param(
            "IssuesEvent",
            {"action": "opened", "issue": {"number": "42", "title": "Bug"}},
            id="issues_number_not_int",
        ),
        pytest.param(
            "PullRequestEvent",
            {"action": 1, "pull_request": {"number": 1, "title": "x"}},
            id="pull_request_action_not_str",
        ),
        pytest.param("WatchEvent", {"action": 5}, id="watch_action_not_str"),
        pytest.param("ForkEvent", {"forkee": "bob/fork"}, id="fork_forkee_not_obj"),
    ],
)
def test_format_event_skips_malformed_payloads(
    event_type: str, payload: object
) -> None:
    """A payload that does not fit its tag skips the event instead of raising."""
    assert format_event(make_event(event_type, payload=payload)) == ("", False)


def test_format_event_skips_missing_payload() -> None:
    """An event with no payload at all is skipped for tags that need fields."""
    event = GitHubEvent(type="PushEvent")

    assert format_event(event) == ("", False)


def test_format_event_ignores_payload_for_fieldless_tags() -> None:
    """Tags that need no payload fields render even without a payload."""
    event = GitHubEvent(type="CreateEvent")

    assert format_event(event) == ("Created something in ", True)


def test_supported_event_types_are_all_printable() -> None:
    """Each supported tag formats with a well-formed payload."""
    payloads: dict[str, object] = {
        "PushEvent": {"size": 1},
        "IssuesEvent": {"action": "opened", "issue": {"number": 1, "title": "t"}},
        "PullRequestEvent": {
            "action": "opened",
            "pull_request": {"number": 1, "title": "t"},
        },
        "WatchEvent": {"action": "started"},
    }
    for event_type in SUPPORTED_EVENT_TYPES:
        event = make_event(event_type, payload=payloads.get(event_type))
        _line, ok = format_event(event)
        assert ok, f"Expected {event_type} to be printable"


@pytest.mark.parametrize(
    ("event_type", "payload", "expected"),
    [
        pytest.param(
            "PushEvent", {}, "Pushed 0 commit(s) to alice/repo", id="push_no_size"
        ),
        pytest.param(
            "WatchEvent", {}, "Watch event on alice/repo", id="watch_no_action"
        ),
        pytest.param(
            "IssuesEvent",
            {"action": "opened"},
            'Opened an issue #0 "" in alice/repo',
            id="issues_no_issue",
        ),
        pytest.param(
            "PullRequestEvent",
            {"pull_request": {"number": 8}},
            ' a pull request #8 "" in alice/repo',
            id="pull_request_no_action_or_title",
        ),
    ],
)
def test_format_event_uses_zero_values_for_absent_fields(
    event_type: str, payload: dict[str, object], expected: str
) -> None:
    """Absent payload fields render as empty values instead of skipping."""
    assert format_event(make_event(event_type, "alice/repo", payload)) == (
        expected,
        True,
    )


def test_format_event_without_repo_uses_empty_name() -> None:
    """A null repo reference renders with an empty repository name."""
    event = decode_feed([{"type": "CreateEvent", "repo": None}])[0]

    assert format_event(event) == ("Created something in ", True)
