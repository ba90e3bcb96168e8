"""Home screen — repository URL input and token management."""

from textual import on
from textual.app import ComposeResult
from textual.containers import Center, Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Input, Label, Static

from repo_pulse.screens.token import TokenScreen
from repo_pulse.urls import is_valid_repo_url


class HomeScreen(Screen):
    """Initial screen to collect the repository URL."""

    BINDINGS = [
        ("t", "edit_token", "API Token"),
    ]

    CSS = """
    HomeScreen {
        align: center middle;
    }
    #home-container {
        width: 76;
        height: auto;
        padding: 1 4;
        border: round $primary;
        background: $surface;
    }
    #title {
        text-align: center;
        text-style: bold;
        color: $accent;
    }
    #subtitle {
        text-align: center;
        color: $text-muted;
        margin-bottom: 2;
    }
    .field-label {
        margin-top: 1;
        color: $text;
    }
    #button-row {
        height: auto;
        margin-top: 2;
    }
    #analyze-btn {
        width: 1fr;
    }
    #token-btn {
        margin-left: 2;
    }
    #token-hint {
        color: $warning;
        margin-top: 1;
    }
    #error-label {
        color: $error;
        text-align: center;
        margin-top: 1;
    }
    """

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Center():
            with Vertical(id="home-container"):
                yield Static("📊  Repo Pulse", id="title")
                yield Static(
                    "Code metrics, commit patterns and contributors "
                    "for any GitHub repository",
                    id="subtitle",
                )
                yield Label("Repository URL:", classes="field-label")
                yield Input(
                    placeholder="https://github.com/username/repository",
                    id="repo-input",
                )
                with Horizontal(id="button-row"):
                    yield Button("▶  Analyze", id="analyze-btn", variant="primary")
                    yield Button("🔑 API Token", id="token-btn")
                yield Label("", id="token-hint")
                yield Label("", id="error-label")
        yield Footer()

    def on_mount(self) -> None:
        """Focus the URL input so paste works immediately."""
        self.query_one("#repo-input", Input).focus()
        self.refresh_token_hint()

    def refresh_token_hint(self) -> None:
        has_token = self.app.token is not None  # type: ignore[attr-defined]
        self.query_one("#token-hint", Label).update(
            ""
            if has_token
            else "GitHub has API rate limits. Add a personal access token "
                 "to increase your limit and access private repositories."
        )
        self.query_one("#token-btn", Button).label = (
            "🔑 Update Token" if has_token else "🔑 Add Token"
        )

    @on(Button.Pressed, "#analyze-btn")
    def start_analysis(self) -> None:
        url = self.query_one("#repo-input", Input).value.strip()
        error_label = self.query_one("#error-label", Label)

        if not is_valid_repo_url(url):
            error_label.update(
                "⚠  Enter a valid GitHub repository URL "
                "(https://github.com/username/repository)"
            )
            return
        error_label.update("")

        self.app.run_analysis(url)  # type: ignore[attr-defined]

    @on(Input.Submitted, "#repo-input")
    def submit_on_enter(self) -> None:
        self.start_analysis()

    @on(Button.Pressed, "#token-btn")
    def action_edit_token(self) -> None:
        self.app.push_screen(TokenScreen(), lambda _: self.refresh_token_hint())
