"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta, timezone

import pytest

API = "https://api.github.com"

# Sunday 2025-01-05 00:00 UTC
FIRST_WEEK = int(datetime(2025, 1, 5, tzinfo=timezone.utc).timestamp())


def make_weeks(totals: list[int], start: int = FIRST_WEEK) -> list[dict]:
    """Commit-activity payload with one entry per total, a week apart."""
    step = int(timedelta(weeks=1).total_seconds())
    return [
        {"total": total, "week": start + i * step, "days": [total, 0, 0, 0, 0, 0, 0]}
        for i, total in enumerate(totals)
    ]


@pytest.fixture
def repo_payload() -> dict:
    return {
        "id": 1,
        "name": "repo",
        "full_name": "owner/repo",
        "owner": {
            "login": "owner",
            "avatar_url": "https://avatars.githubusercontent.com/u/1",
            "html_url": "https://github.com/owner",
        },
        "description": "A test repo",
        "stargazers_count": 120,
        "forks_count": 8,
        "open_issues_count": 3,
        "language": "TypeScript",
        "html_url": "https://github.com/owner/repo",
        "created_at": "2023-04-01T10:00:00Z",
        "updated_at": "2025-03-01T12:30:00Z",
        "default_branch": "main",
    }


@pytest.fixture
def contributors_payload() -> list[dict]:
    return [
        {
            "login": "alice",
            "avatar_url": "https://avatars.githubusercontent.com/u/2",
            "html_url": "https://github.com/alice",
            "contributions": 42,
            "type": "User",
        },
        {
            "login": "bob",
            "avatar_url": "https://avatars.githubusercontent.com/u/3",
            "html_url": "https://github.com/bob",
            "contributions": 17,
            "type": "User",
        },
    ]


@pytest.fixture
def weeks_payload() -> list[dict]:
    return make_weeks([1, 2, 3, 4, 5, 5, 5, 5, 10, 10, 10, 10])


@pytest.fixture
def languages_payload() -> dict:
    return {"TypeScript": 8000, "CSS": 2000}


@pytest.fixture
def fixed_now() -> datetime:
    # Wednesday; the current GitHub week started Sunday 2025-03-09
    return datetime(2025, 3, 12, 15, 45, tzinfo=timezone.utc)
