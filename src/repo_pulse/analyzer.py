"""Analysis pipeline.

Validates the repository URL, fetches the four GitHub resources and
assembles the dashboard's ViewModel.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from repo_pulse.analysis.view_model import build_view_model
from repo_pulse.fetcher import GitHubFetcher
from repo_pulse.models import ViewModel
from repo_pulse.urls import parse_repo_url, validate_repo_url

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Analyzer:
    """End-to-end analysis of one GitHub repository URL."""

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: Optional[str] = None,
        on_status: Optional[Callable[[str], None]] = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.token = token or None
        self._on_status = on_status or (lambda _: None)
        self._clock = clock
        self._fetcher = GitHubFetcher(token=self.token, base_url=base_url)

    async def __aenter__(self) -> "Analyzer":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    # ── Status helper ─────────────────────────────────────────────────────

    def _status(self, msg: str) -> None:
        self._on_status(msg)

    async def close(self) -> None:
        """Tear down resources."""
        await self._fetcher.close()

    # ── Full analysis ─────────────────────────────────────────────────────

    async def analyze(self, url: str) -> ViewModel:
        """Run the whole pipeline; raises RepoPulseError on hard failures."""
        url = url.strip()
        validate_repo_url(url)
        ident = parse_repo_url(url)
        owner, repo = ident.owner, ident.repo

        # 1. Repository details: everything else is pointless without them
        self._status(f"Fetching repository {ident.full_name} …")
        repository = await self._fetcher.fetch_repository(owner, repo)

        # 2. Soft dependencies, independent of each other
        self._status("Fetching contributors, commit activity and languages …")
        contributors, activity, languages = await asyncio.gather(
            self._fetcher.fetch_contributors(owner, repo),
            self._fetcher.fetch_commit_activity(owner, repo, now=self._clock()),
            self._fetcher.fetch_languages(owner, repo),
        )
        degraded = [
            name
            for name, result in (
                ("contributors", contributors),
                ("commit activity", activity),
                ("languages", languages),
            )
            if result.degraded
        ]
        if degraded:
            logger.info(
                "Analysis of %s continues with fallbacks for: %s",
                ident.full_name,
                ", ".join(degraded),
            )

        # 3. Metrics + view model
        self._status("Computing metrics …")
        return build_view_model(
            repository,
            contributors.data,
            languages.data,
            activity.data,
        )


async def analyze_repository(
    url: str,
    token: Optional[str] = None,
    base_url: Optional[str] = None,
) -> ViewModel:
    """Analyse *url* with a short-lived Analyzer."""
    async with Analyzer(token=token, base_url=base_url) as analyzer:
        return await analyzer.analyze(url)
