"""View-model assembly — pure merge of normalized data, no I/O."""

from repo_pulse.analysis.activity import format_commit_activity
from repo_pulse.analysis.metrics import calculate_code_metrics
from repo_pulse.models import (
    Contributor,
    RawCommitWeek,
    RawContributor,
    RawRepository,
    Repository,
    ViewModel,
)

NO_DESCRIPTION = "No description provided"
NO_LANGUAGE = "Not specified"


def normalize_repository(raw: RawRepository) -> Repository:
    return Repository(
        name=raw.name,
        owner=raw.owner.login,
        description=raw.description or NO_DESCRIPTION,
        stars=raw.stargazers_count,
        forks=raw.forks_count,
        issues=raw.open_issues_count,
        language=raw.language or NO_LANGUAGE,
        url=raw.html_url,
        created_at=raw.created_at,
        updated_at=raw.updated_at,
    )


def normalize_contributors(raw: list[RawContributor]) -> tuple[Contributor, ...]:
    """Reduce contributors to display fields, keeping the API's order."""
    return tuple(
        Contributor(
            name=c.login,
            avatar_url=c.avatar_url,
            contributions=c.contributions,
            url=c.html_url,
        )
        for c in raw
    )


def build_view_model(
    repository: RawRepository,
    contributors: list[RawContributor],
    languages: dict[str, int],
    weeks: list[RawCommitWeek],
) -> ViewModel:
    return ViewModel(
        repository=normalize_repository(repository),
        code_metrics=calculate_code_metrics(languages, weeks),
        commit_activity=format_commit_activity(weeks),
        contributors=normalize_contributors(contributors),
    )
