"""Dashboard screen — repository card, metrics, commit activity, contributors."""

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import Screen
from textual.widgets import DataTable, Footer, Header, Label, Sparkline, Static

from repo_pulse.models import CodeMetric, ViewModel


def format_metric_value(metric: CodeMetric) -> str:
    if metric.unit:
        sep = "" if metric.unit == "%" else " "
        return f"{metric.value}{sep}{metric.unit}"
    return str(metric.value)


def format_metric_change(metric: CodeMetric) -> str:
    """Non-negative changes read as improvements, negative as regressions."""
    if metric.change is None:
        return ""
    if metric.change >= 0:
        return f"[green]▲ +{metric.change}%[/green]"
    return f"[red]▼ {metric.change}%[/red]"


class DashboardScreen(Screen):
    """Main results display for one analysed repository."""

    CSS = """
    DashboardScreen {
        layout: vertical;
    }
    #dashboard-header {
        height: 3;
        background: $primary;
        color: $text;
        text-align: center;
        padding: 1 2;
        text-style: bold;
    }
    .section-title {
        text-style: bold;
        margin: 1 0;
        color: $secondary;
    }
    .stat-card {
        border: round $primary-lighten-2;
        padding: 0 2;
        margin: 0 1 0 0;
        width: 1fr;
        height: 5;
        background: $surface;
    }
    .stat-value {
        text-style: bold;
        color: $accent;
    }
    #stat-row {
        height: auto;
    }
    #metrics-table, #contributors-table {
        height: auto;
        margin: 1 0;
    }
    #activity-sparkline {
        height: 6;
        margin: 1 0 0 0;
    }
    #activity-range {
        color: $text-muted;
    }
    """

    BINDINGS = [
        ("q", "quit", "Quit"),
        ("b", "go_back", "Back"),
    ]

    def __init__(self, data: ViewModel, **kwargs) -> None:  # type: ignore[no-untyped-def]
        super().__init__(**kwargs)
        self.data = data

    def compose(self) -> ComposeResult:
        repo = self.data.repository
        yield Header(show_clock=True)
        yield Static(f"  📊  {repo.owner}/{repo.name}  ", id="dashboard-header")

        with VerticalScroll():
            yield from self._compose_repository()
            yield from self._compose_metrics()
            yield from self._compose_activity()
            yield from self._compose_contributors()

        yield Footer()

    # ── Repository card ───────────────────────────────────────────────────

    def _compose_repository(self) -> ComposeResult:
        repo = self.data.repository
        yield Static("REPOSITORY", classes="section-title")
        yield Label(Text(repo.description))
        yield Label(
            f"{repo.url}  ·  Language: {repo.language}  ·  "
            f"Created {repo.created_at[:10]}  ·  Updated {repo.updated_at[:10]}"
        )
        with Horizontal(id="stat-row"):
            for title, value in (
                ("★ Stars", repo.stars),
                ("⑂ Forks", repo.forks),
                ("! Open Issues", repo.issues),
            ):
                with Vertical(classes="stat-card"):
                    yield Label(title)
                    yield Label(f"{value:,}", classes="stat-value")

    # ── Metrics ───────────────────────────────────────────────────────────

    def _compose_metrics(self) -> ComposeResult:
        yield Static("CODE METRICS", classes="section-title")
        table: DataTable = DataTable(id="metrics-table")
        table.add_columns("Metric", "Value", "Change")
        for metric in self.data.code_metrics:
            table.add_row(
                metric.name,
                format_metric_value(metric),
                format_metric_change(metric),
            )
        yield table

    # ── Commit activity ───────────────────────────────────────────────────

    def _compose_activity(self) -> ComposeResult:
        activity = self.data.commit_activity
        yield Static("COMMIT ACTIVITY", classes="section-title")
        if not activity:
            yield Label("No commit activity available.")
            return
        counts = [point.count for point in activity]
        yield Sparkline(counts, summary_function=max, id="activity-sparkline")
        yield Label(
            f"{activity[0].date} → {activity[-1].date}  ·  "
            f"{sum(counts)} commits over {len(counts)} weeks  ·  peak {max(counts)}/week",
            id="activity-range",
        )

    # ── Contributors ──────────────────────────────────────────────────────

    def _compose_contributors(self) -> ComposeResult:
        contributors = sorted(
            self.data.contributors, key=lambda c: -c.contributions
        )
        yield Static("TOP CONTRIBUTORS", classes="section-title")
        if not contributors:
            yield Label("Contributor data is not available for this repository.")
            return
        table: DataTable = DataTable(id="contributors-table")
        table.add_columns("Contributor", "Contributions", "Profile")
        for c in contributors:
            table.add_row(Text(f"@{c.name}"), str(c.contributions), Text(c.url))
        yield table

    def action_go_back(self) -> None:
        """Return to the home screen."""
        self.app.pop_screen()
