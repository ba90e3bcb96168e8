"""Code metrics — display numbers derived from languages and commit activity."""

import math

from repo_pulse.models import CodeMetric, RawCommitWeek

# Placeholders: these need real code analysis, which is not performed.
# They are shown as-is and never derived from input.
CODE_QUALITY_SCORE = 85
CODE_QUALITY_CHANGE = 2
DOCUMENTATION_COVERAGE = 62
DOCUMENTATION_COVERAGE_CHANGE = 5

# Reported as the commit change when the previous period had no commits.
FIRST_PERIOD_CHANGE = 100

PERIOD_WEEKS = 4


def round_half_up(value: float) -> int:
    """Round .5 upwards, as browsers' Math.round does."""
    return math.floor(value + 0.5)


def commit_frequency(weeks: list[RawCommitWeek]) -> tuple[int, int]:
    """Return (recent commits, percentage change vs. the preceding period)."""
    totals = [w.total for w in weeks]
    recent = sum(totals[-PERIOD_WEEKS:])
    older = sum(totals[-2 * PERIOD_WEEKS:-PERIOD_WEEKS])
    if older > 0:
        change = round_half_up((recent - older) / older * 100)
    else:
        change = FIRST_PERIOD_CHANGE
    return recent, change


def calculate_code_metrics(
    languages: dict[str, int],
    weeks: list[RawCommitWeek],
) -> tuple[CodeMetric, ...]:
    """Build the dashboard metrics in their fixed display order."""
    total_bytes = sum(languages.values())

    # GitHub lists languages by size, so the first key is the primary one.
    primary = next(iter(languages), None)
    if primary is not None and total_bytes > 0:
        primary_share = round_half_up(languages[primary] / total_bytes * 100)
    else:
        primary_share = 0

    recent, change = commit_frequency(weeks)

    return (
        CodeMetric(name="Primary Language Usage", value=primary_share, change=0, unit="%"),
        CodeMetric(name="Languages Used", value=len(languages), change=0, unit=""),
        CodeMetric(name="Recent Commit Frequency", value=recent, change=change, unit="per month"),
        CodeMetric(name="Code Size", value=round_half_up(total_bytes / 1024), change=0, unit="KB"),
        CodeMetric(
            name="Code Quality Score",
            value=CODE_QUALITY_SCORE,
            change=CODE_QUALITY_CHANGE,
            unit="%",
        ),
        CodeMetric(
            name="Documentation Coverage",
            value=DOCUMENTATION_COVERAGE,
            change=DOCUMENTATION_COVERAGE_CHANGE,
            unit="%",
        ),
    )
