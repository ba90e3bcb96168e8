"""Error taxonomy for repository analysis.

Every error here aborts the pipeline; ``str(error)`` is the message shown
to the user. Degraded soft-dependency calls are not errors and never
surface through this module.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Classification of an analysis failure."""

    INVALID_INPUT = "invalid_input"
    RATE_LIMITED = "rate_limited"
    NOT_FOUND = "not_found"
    UPSTREAM_ERROR = "upstream_error"


class RepoPulseError(Exception):
    """Base class for all repo-pulse failures."""

    kind: ErrorKind = ErrorKind.UPSTREAM_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidRepositoryURLError(RepoPulseError):
    kind = ErrorKind.INVALID_INPUT

    def __init__(self, url: str) -> None:
        super().__init__(
            "Please enter a valid GitHub repository URL "
            "(https://github.com/username/repository)"
        )
        self.url = url


class RateLimitedError(RepoPulseError):
    kind = ErrorKind.RATE_LIMITED

    def __init__(self, has_token: bool, reset_hint: str = "") -> None:
        if has_token:
            message = (
                "Access denied or rate limit exceeded. "
                "Your token may lack the permissions needed for this repository."
            )
        else:
            message = (
                "GitHub API rate limit exceeded (unauthenticated: 60 req/hour). "
                "Add a personal access token to get 5 000 req/hour."
            )
        if reset_hint:
            message = f"{message} {reset_hint}"
        super().__init__(message)
        self.has_token = has_token


class RepositoryNotFoundError(RepoPulseError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, owner: Optional[str], repo: Optional[str]) -> None:
        super().__init__(
            f"Repository '{owner}/{repo}' not found. "
            "Check the owner/repo name and try again."
        )
        self.owner = owner
        self.repo = repo


class UpstreamError(RepoPulseError):
    kind = ErrorKind.UPSTREAM_ERROR

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
