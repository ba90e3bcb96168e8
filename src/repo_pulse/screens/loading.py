"""Loading screen — pipeline steps of the running analysis."""

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Center, Vertical
from textual.screen import Screen
from textual.widgets import Footer, Header, Label, ProgressBar, Static

PIPELINE_STEPS = 3  # repository, soft dependencies, metrics


class LoadingScreen(Screen):
    """Lists each analysis step as it starts; shows the failure, if any.

    Updates arriving after the screen was left are ignored.
    """

    BINDINGS = [
        ("b", "go_back", "Back"),
    ]

    CSS = """
    LoadingScreen {
        align: center middle;
    }
    #analysis-panel {
        width: 76;
        height: auto;
        padding: 1 3;
        border: round $accent;
        background: $surface;
    }
    #analysis-url {
        text-style: bold;
        margin-bottom: 1;
    }
    #steps-bar {
        margin-bottom: 1;
    }
    #step-list {
        color: $text-muted;
    }
    #outcome {
        margin-top: 1;
        color: $error;
    }
    """

    def __init__(self, url: str, **kwargs) -> None:  # type: ignore[no-untyped-def]
        super().__init__(**kwargs)
        self.url = url
        self.steps: list[str] = []
        self.failed = False

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Center():
            with Vertical(id="analysis-panel"):
                yield Static(Text(f"📊  {self.url}"), id="analysis-url")
                yield ProgressBar(total=PIPELINE_STEPS, show_eta=False, id="steps-bar")
                yield Static("Starting …", id="step-list")
                yield Label("", id="outcome")
        yield Footer()

    def render_steps(self) -> Text:
        """Finished steps get a check mark; the running one an ellipsis."""
        lines = [f"✓ {step}" for step in self.steps[:-1]]
        if self.steps:
            marker = "✗" if self.failed else "…"
            lines.append(f"{marker} {self.steps[-1]}")
        return Text("\n".join(lines))

    def add_step(self, message: str) -> None:
        self.steps.append(message)
        if not self.is_current:
            return
        self.query_one("#step-list", Static).update(self.render_steps())
        self.query_one("#steps-bar", ProgressBar).update(progress=len(self.steps) - 1)

    def show_error(self, message: str) -> None:
        self.failed = True
        if not self.is_current:
            return
        self.query_one("#step-list", Static).update(self.render_steps())
        self.query_one("#outcome", Label).update(
            Text(f"❌ {message}\n\nPress b to go back and try again.")
        )

    def action_go_back(self) -> None:
        """Abandon this analysis; its result will not be shown."""
        self.app.pop_screen()
