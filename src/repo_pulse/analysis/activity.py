"""Commit activity — weekly totals shaped for the activity chart."""

from datetime import datetime, timedelta, timezone
from typing import Optional

from repo_pulse.models import CommitData, RawCommitWeek

ACTIVITY_WINDOW = 12  # weeks shown on the chart

_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def month_label(week: int) -> str:
    """Unix seconds -> 'Mon YYYY' (UTC, English month names)."""
    dt = datetime.fromtimestamp(week, tz=timezone.utc)
    return f"{_MONTHS[dt.month - 1]} {dt.year}"


def format_commit_activity(weeks: list[RawCommitWeek]) -> tuple[CommitData, ...]:
    """Label each week and keep the most recent ACTIVITY_WINDOW, oldest first."""
    points = [CommitData(date=month_label(w.week), count=w.total) for w in weeks]
    return tuple(points[-ACTIVITY_WINDOW:])


def placeholder_commit_weeks(
    now: Optional[datetime] = None,
    count: int = ACTIVITY_WINDOW,
) -> list[RawCommitWeek]:
    """Zero-count weeks ending at the current week.

    Used when the commit activity endpoint is unavailable. GitHub weeks
    start on Sunday 00:00 UTC.
    """
    now = now or datetime.now(timezone.utc)
    today = now.astimezone(timezone.utc).replace(
        hour=0, minute=0, second=0, microsecond=0
    )
    week_start = today - timedelta(days=(today.weekday() + 1) % 7)
    return [
        RawCommitWeek(
            total=0,
            week=int((week_start - timedelta(weeks=offset)).timestamp()),
        )
        for offset in range(count - 1, -1, -1)
    ]
