"""GitHub data fetching via REST API."""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from repo_pulse.analysis.activity import placeholder_commit_weeks
from repo_pulse.errors import (
    RateLimitedError,
    RepositoryNotFoundError,
    UpstreamError,
)
from repo_pulse.models import FetchResult, RawCommitWeek, RawContributor, RawRepository

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"
CONTRIBUTORS_PAGE_SIZE = 5

_contributors_adapter = TypeAdapter(list[RawContributor])
_commit_weeks_adapter = TypeAdapter(list[RawCommitWeek])
_languages_adapter = TypeAdapter(dict[str, int])


class GitHubFetcher:
    """Fetches repository, contributor, activity and language data."""

    def __init__(self, token: Optional[str] = None, base_url: Optional[str] = None) -> None:
        self.token = token or None
        self.base_url = (base_url or DEFAULT_API_URL).rstrip("/")
        self._client: Optional[httpx.AsyncClient] = None

    # ── HTTP plumbing ─────────────────────────────────────────────────────

    @property
    def headers(self) -> dict[str, str]:
        h: dict[str, str] = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if self.token:
            h["Authorization"] = f"Bearer {self.token}"
        return h

    @property
    def has_token(self) -> bool:
        return self.token is not None

    async def _client_instance(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers=self.headers,
                timeout=30.0,
                follow_redirects=True,  # renamed or transferred repositories answer 301
            )
        return self._client

    async def _get(self, path: str, **kwargs) -> httpx.Response:  # type: ignore[no-untyped-def]
        client = await self._client_instance()
        return await client.get(path, **kwargs)

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    # ── Repository (hard dependency) ──────────────────────────────────────

    async def fetch_repository(self, owner: Optional[str], repo: Optional[str]) -> RawRepository:
        """Fetch repository details; any failure aborts the analysis."""
        try:
            resp = await self._get(f"/repos/{owner}/{repo}")
        except httpx.TransportError as e:
            raise UpstreamError(
                "Could not connect to GitHub. Check your internet connection."
            ) from e
        except httpx.RequestError as e:
            raise UpstreamError(f"Request to GitHub failed: {e}") from e

        if resp.status_code == 403:
            raise RateLimitedError(self.has_token, _reset_hint(resp))
        if resp.status_code == 404:
            raise RepositoryNotFoundError(owner, repo)
        if not resp.is_success:
            raise UpstreamError(
                f"GitHub API error ({resp.status_code}): {resp.reason_phrase}",
                status_code=resp.status_code,
            )

        try:
            return RawRepository.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            raise UpstreamError(
                f"Unexpected repository payload from GitHub for '{owner}/{repo}'.",
                status_code=resp.status_code,
            ) from e

    # ── Soft dependencies ─────────────────────────────────────────────────

    async def _fetch_or_fallback(
        self,
        label: str,
        path: str,
        parse: Callable[[Any], Any],
        fallback: Callable[[], Any],
        params: Optional[dict[str, str]] = None,
    ) -> FetchResult:
        """GET *path*; on any failure substitute ``fallback()`` instead of raising."""
        try:
            resp = await self._get(path, params=params)
        except httpx.RequestError as e:
            return _degraded(label, path, fallback(), f"request error: {e!r}")

        # 202 means GitHub is still computing statistics for this repo.
        if resp.status_code != 200:
            return _degraded(label, path, fallback(), f"HTTP {resp.status_code}")

        try:
            return FetchResult.ok(parse(resp.json()))
        except (ValueError, ValidationError) as e:
            return _degraded(label, path, fallback(), f"unexpected payload: {e}")

    async def fetch_contributors(
        self, owner: Optional[str], repo: Optional[str], limit: int = CONTRIBUTORS_PAGE_SIZE
    ) -> FetchResult:
        """Top contributors; empty list on failure."""
        return await self._fetch_or_fallback(
            "contributors",
            f"/repos/{owner}/{repo}/contributors",
            _contributors_adapter.validate_python,
            list,
            params={"per_page": str(limit)},
        )

    async def fetch_commit_activity(
        self,
        owner: Optional[str],
        repo: Optional[str],
        now: Optional[datetime] = None,
    ) -> FetchResult:
        """Weekly commit totals for the last year; zero-filled weeks on failure."""
        return await self._fetch_or_fallback(
            "commit activity",
            f"/repos/{owner}/{repo}/stats/commit_activity",
            _commit_weeks_adapter.validate_python,
            lambda: placeholder_commit_weeks(now),
        )

    async def fetch_languages(self, owner: Optional[str], repo: Optional[str]) -> FetchResult:
        """Bytes of code per language; empty map on failure."""
        return await self._fetch_or_fallback(
            "languages",
            f"/repos/{owner}/{repo}/languages",
            _languages_adapter.validate_python,
            dict,
        )


def _degraded(label: str, path: str, data: Any, reason: str) -> FetchResult:
    logger.warning("Using fallback for %s (%s): %s", label, path, reason)
    return FetchResult.fallback(data, reason)


def _reset_hint(resp: httpx.Response) -> str:
    """Describe when the rate limit resets, if GitHub says it is exhausted."""
    if resp.headers.get("x-ratelimit-remaining") != "0":
        return ""
    reset = resp.headers.get("x-ratelimit-reset", "")
    if not reset.isdigit():
        return ""
    reset_at = datetime.fromtimestamp(int(reset), tz=timezone.utc)
    return f"The limit resets at {reset_at:%H:%M} UTC."
