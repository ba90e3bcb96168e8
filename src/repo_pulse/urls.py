"""Repository URL validation and parsing."""

import re
from typing import Optional

from repo_pulse.errors import InvalidRepositoryURLError
from repo_pulse.models import RepositoryIdentifier

GITHUB_REPO_URL = re.compile(
    r"^https://github\.com/[\w-]+/[\w.-]+/?$", re.IGNORECASE | re.ASCII
)


def is_valid_repo_url(url: str) -> bool:
    return bool(GITHUB_REPO_URL.match(url))


def validate_repo_url(url: str) -> None:
    """Raise InvalidRepositoryURLError unless *url* is https://github.com/<owner>/<repo>."""
    if not is_valid_repo_url(url):
        raise InvalidRepositoryURLError(url)


def _segment(parts: list[str], index: int) -> Optional[str]:
    if 0 <= index < len(parts):
        return parts[index]
    return None


def parse_repo_url(url: str) -> RepositoryIdentifier:
    """Take the last two path segments as owner/repo.

    A trailing slash is ignored. Nothing is validated: missing segments
    come back as ``None`` and surface later as failed lookups.
    """
    parts = url.split("/")
    repo_index = len(parts) - 2 if parts[-1] == "" else len(parts) - 1
    return RepositoryIdentifier(
        owner=_segment(parts, repo_index - 1),
        repo=_segment(parts, repo_index),
    )
