"""Token dialog — store or remove the GitHub personal access token."""

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Static


class TokenScreen(ModalScreen[bool]):
    """Modal dialog; dismisses with True when the stored token changed."""

    BINDINGS = [
        ("escape", "cancel", "Cancel"),
    ]

    CSS = """
    TokenScreen {
        align: center middle;
    }
    #token-dialog {
        width: 70;
        height: auto;
        padding: 1 3;
        border: round $accent;
        background: $surface;
    }
    #token-title {
        text-style: bold;
        margin-bottom: 1;
    }
    .hint {
        color: $text-muted;
        margin: 1 0;
    }
    #token-buttons {
        height: auto;
        align: right middle;
    }
    #save-btn {
        margin-left: 2;
    }
    """

    def compose(self) -> ComposeResult:
        store = self.app.token_store  # type: ignore[attr-defined]
        with Vertical(id="token-dialog"):
            yield Static("GitHub Personal Access Token", id="token-title")
            yield Label(
                "A token raises the API rate limit and gives access to private "
                "repositories. Create one at github.com/settings/tokens.",
                classes="hint",
            )
            yield Input(
                value=store.load() or "",
                placeholder="ghp_xxxxxxxxxxxxxxxxxxxx",
                password=True,
                id="token-input",
            )
            yield Label(
                f"Stored locally in {store.path}. Leave empty to remove it.",
                classes="hint",
            )
            with Horizontal(id="token-buttons"):
                yield Button("Cancel", id="cancel-btn")
                yield Button("Save Token", id="save-btn", variant="primary")

    @on(Button.Pressed, "#save-btn")
    @on(Input.Submitted, "#token-input")
    def save_token(self) -> None:
        token = self.query_one("#token-input", Input).value.strip()
        self.app.token_store.save(token)  # type: ignore[attr-defined]
        if token:
            self.app.notify("Your token has been saved locally.", title="GitHub token saved")
        else:
            self.app.notify("Your token has been removed.", title="GitHub token removed")
        self.dismiss(True)

    @on(Button.Pressed, "#cancel-btn")
    def action_cancel(self) -> None:
        self.dismiss(False)
