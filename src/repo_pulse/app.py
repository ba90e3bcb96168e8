"""Main Textual TUI application for repo-pulse."""

from typing import Optional

from textual.app import App

from repo_pulse.analyzer import Analyzer
from repo_pulse.config import TokenStore, api_base_url, resolve_token
from repo_pulse.errors import RepoPulseError
from repo_pulse.models import ViewModel
from repo_pulse.screens.dashboard import DashboardScreen
from repo_pulse.screens.home import HomeScreen
from repo_pulse.screens.loading import LoadingScreen


class RepoPulseApp(App):
    """TUI dashboard for a GitHub repository."""

    TITLE = "Repo Pulse"
    SUB_TITLE = "Repository · Metrics · Activity · Contributors"

    CSS = """
    Screen {
        background: $background;
    }
    """

    BINDINGS = [
        ("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        token: Optional[str] = None,
        token_store: Optional[TokenStore] = None,
        **kwargs,  # type: ignore[no-untyped-def]
    ) -> None:
        super().__init__(**kwargs)
        self.explicit_token = token
        self.token_store = token_store or TokenStore()

    @property
    def token(self) -> Optional[str]:
        """Token used for the next analysis (re-read so dialog edits apply)."""
        return resolve_token(self.explicit_token, self.token_store)

    def on_mount(self) -> None:
        self.push_screen(HomeScreen())

    def run_analysis(self, url: str) -> None:
        """Kick off an analysis — called from HomeScreen."""
        loading = LoadingScreen(url)
        self.push_screen(loading)

        async def _do_work() -> None:
            analyzer = Analyzer(
                token=self.token,
                base_url=api_base_url(),
                on_status=lambda msg: self.call_from_thread(loading.add_step, msg),
            )
            try:
                result = await analyzer.analyze(url)
                self.call_from_thread(self._show_results, result, loading)
            except RepoPulseError as e:
                self.call_from_thread(loading.show_error, str(e))
            except Exception as e:
                self.call_from_thread(loading.show_error, f"Unexpected error: {e}")
            finally:
                await analyzer.close()

        self.run_worker(_do_work(), thread=True)

    def _show_results(self, result: ViewModel, loading: LoadingScreen) -> None:
        """Swap *loading* for the dashboard.

        Results are dropped when *loading* is no longer the active screen:
        the user went back, or a newer analysis replaced it.
        """
        if self.screen is not loading:
            return
        self.pop_screen()
        self.push_screen(DashboardScreen(result))
