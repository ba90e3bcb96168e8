"""Data models for repo-pulse."""

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


# ── Request identity ──────────────────────────────────────────────────────

class RepositoryIdentifier(BaseModel):
    """Owner/repo pair extracted from a repository URL."""

    model_config = ConfigDict(frozen=True)

    owner: Optional[str] = None
    repo: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


# ── Raw GitHub payloads ───────────────────────────────────────────────────

class RawOwner(BaseModel):
    """Owner block embedded in a repository payload."""

    login: str
    avatar_url: str = ""
    html_url: str = ""


class RawRepository(BaseModel):
    """GET /repos/{owner}/{repo}"""

    name: str
    owner: RawOwner
    description: Optional[str] = None
    stargazers_count: int = 0
    forks_count: int = 0
    open_issues_count: int = 0
    language: Optional[str] = None
    html_url: str
    created_at: str
    updated_at: str
    default_branch: str = "main"


class RawContributor(BaseModel):
    """One entry of GET /repos/{owner}/{repo}/contributors."""

    login: str
    avatar_url: str = ""
    html_url: str = ""
    contributions: int = 0


class RawCommitWeek(BaseModel):
    """One entry of GET /repos/{owner}/{repo}/stats/commit_activity."""

    total: int = 0
    week: int  # unix seconds, start of the week (Sunday, UTC)
    days: list[int] = Field(default_factory=lambda: [0] * 7)


# ── Fetch outcome ─────────────────────────────────────────────────────────

class FetchResult(BaseModel, Generic[T]):
    """Outcome of a soft-dependency call: real data or its fallback."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    data: T
    degraded: bool = False
    reason: str = ""

    @classmethod
    def ok(cls, data: Any) -> "FetchResult":
        return cls(data=data)

    @classmethod
    def fallback(cls, data: Any, reason: str) -> "FetchResult":
        return cls(data=data, degraded=True, reason=reason)


# ── View model ────────────────────────────────────────────────────────────

class Repository(BaseModel):
    """Normalized repository card."""

    model_config = ConfigDict(frozen=True)

    name: str
    owner: str
    description: str
    stars: int
    forks: int
    issues: int
    language: str
    url: str
    created_at: str = Field(serialization_alias="createdAt")
    updated_at: str = Field(serialization_alias="updatedAt")


class CodeMetric(BaseModel):
    """A named display metric; ``change`` is a signed percentage."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: int
    change: Optional[int] = None
    unit: Optional[str] = None


class CommitData(BaseModel):
    """One point of the commit activity chart."""

    model_config = ConfigDict(frozen=True)

    date: str  # e.g. "Mar 2025"
    count: int


class Contributor(BaseModel):
    """Contributor reduced to display fields."""

    model_config = ConfigDict(frozen=True)

    name: str
    avatar_url: str = Field(serialization_alias="avatarUrl")
    contributions: int
    url: str


class ViewModel(BaseModel):
    """Everything the dashboard paints for one analysed repository."""

    model_config = ConfigDict(frozen=True)

    repository: Repository
    code_metrics: tuple[CodeMetric, ...] = Field(serialization_alias="codeMetrics")
    commit_activity: tuple[CommitData, ...] = Field(
        serialization_alias="commitActivity"
    )
    contributors: tuple[Contributor, ...]

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize with the dashboard's camelCase keys."""
        return self.model_dump_json(by_alias=True, indent=indent)
