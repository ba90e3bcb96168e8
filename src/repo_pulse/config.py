"""Runtime configuration: API endpoint and the stored GitHub token.

Environment variables (a ``.env`` file is loaded by the CLI):

- ``GITHUB_TOKEN`` / ``GH_TOKEN``: fallback token when none is stored
- ``GITHUB_API_URL``: REST API root (default https://api.github.com)
- ``REPO_PULSE_CONFIG``: path of the settings file holding the token
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from repo_pulse.fetcher import DEFAULT_API_URL

logger = logging.getLogger(__name__)

TOKEN_KEY = "github-token"


def default_settings_path() -> Path:
    override = os.environ.get("REPO_PULSE_CONFIG")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "repo-pulse" / "settings.json"


def api_base_url() -> str:
    return os.environ.get("GITHUB_API_URL") or DEFAULT_API_URL


class TokenStore:
    """Persists the personal access token in a small JSON settings file."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = path or default_settings_path()

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable settings file %s: %s", self.path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # Created owner-only; chmod covers files that already existed.
        fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(json.dumps(data, indent=2))
        self.path.chmod(0o600)

    def load(self) -> Optional[str]:
        token = self._read().get(TOKEN_KEY)
        if isinstance(token, str) and token.strip():
            return token.strip()
        return None

    def save(self, token: str) -> None:
        """Store *token*; an empty value removes the stored token."""
        data = self._read()
        token = token.strip()
        if token:
            data[TOKEN_KEY] = token
        else:
            data.pop(TOKEN_KEY, None)
        self._write(data)

    def clear(self) -> None:
        self.save("")


def resolve_token(
    explicit: Optional[str] = None,
    store: Optional[TokenStore] = None,
) -> Optional[str]:
    """Explicit token, then the stored one, then GITHUB_TOKEN / GH_TOKEN."""
    if explicit:
        return explicit
    stored = (store or TokenStore()).load()
    if stored:
        return stored
    return os.environ.get("GITHUB_TOKEN") or os.environ.get("GH_TOKEN") or None
