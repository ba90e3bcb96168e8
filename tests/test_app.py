"""Tests for the TUI screen flow."""

from unittest.mock import patch

import httpx
import pytest
import respx

from repo_pulse.analysis.view_model import build_view_model
from repo_pulse.app import RepoPulseApp
from repo_pulse.config import TokenStore
from repo_pulse.models import RawRepository
from repo_pulse.screens.dashboard import DashboardScreen
from repo_pulse.screens.home import HomeScreen
from repo_pulse.screens.loading import LoadingScreen

from conftest import API

URL = "https://github.com/owner/repo"


@pytest.fixture
def app(tmp_path):
    return RepoPulseApp(token="t", token_store=TokenStore(tmp_path / "settings.json"))


@pytest.fixture
def view_model(repo_payload):
    return build_view_model(RawRepository.model_validate(repo_payload), [], {}, [])


class TestShowResults:
    @pytest.mark.asyncio
    async def test_replaces_loading_screen(self, app, view_model):
        async with app.run_test() as pilot:
            loading = LoadingScreen(URL)
            await app.push_screen(loading)
            app._show_results(view_model, loading)
            await pilot.pause()

            assert isinstance(app.screen, DashboardScreen)
            await pilot.press("b")
            assert isinstance(app.screen, HomeScreen)

    @pytest.mark.asyncio
    async def test_dropped_after_going_back(self, app, view_model):
        async with app.run_test() as pilot:
            loading = LoadingScreen(URL)
            await app.push_screen(loading)
            await pilot.press("b")
            assert isinstance(app.screen, HomeScreen)

            app._show_results(view_model, loading)
            await pilot.pause()
            assert isinstance(app.screen, HomeScreen)
            assert len(app.screen_stack) == 2  # default screen + home

    @pytest.mark.asyncio
    async def test_dropped_when_superseded(self, app, view_model):
        async with app.run_test() as pilot:
            first = LoadingScreen(URL)
            await app.push_screen(first)
            second = LoadingScreen(URL + "2")
            await app.push_screen(second)

            app._show_results(view_model, first)
            await pilot.pause()
            assert app.screen is second


class TestLoadingScreen:
    @pytest.mark.asyncio
    async def test_steps_and_progress(self, app):
        async with app.run_test() as pilot:
            loading = LoadingScreen(URL)
            await app.push_screen(loading)
            loading.add_step("Fetching repository owner/repo …")
            loading.add_step("Computing metrics …")
            await pilot.pause()

            assert loading.render_steps().plain == (
                "✓ Fetching repository owner/repo …\n… Computing metrics …"
            )
            assert loading.query_one("#steps-bar").progress == 1

    @pytest.mark.asyncio
    async def test_failure_marks_last_step(self, app):
        async with app.run_test() as pilot:
            loading = LoadingScreen(URL)
            await app.push_screen(loading)
            loading.add_step("Fetching repository owner/repo …")
            loading.show_error("Repository not found")
            await pilot.pause()

            assert loading.failed
            assert loading.render_steps().plain == "✗ Fetching repository owner/repo …"

    @pytest.mark.asyncio
    async def test_updates_after_leaving_are_recorded_only(self, app):
        async with app.run_test() as pilot:
            loading = LoadingScreen(URL)
            await app.push_screen(loading)
            await pilot.press("b")

            loading.add_step("Computing metrics …")
            loading.show_error("late failure")
            await pilot.pause()

            assert loading.steps == ["Computing metrics …"]
            assert loading.failed
            assert isinstance(app.screen, HomeScreen)

    def test_no_steps(self):
        assert LoadingScreen(URL).render_steps().plain == ""


class TestRunAnalysis:
    @pytest.mark.asyncio
    @respx.mock
    async def test_success_shows_dashboard(self, app, repo_payload):
        respx.get(f"{API}/repos/owner/repo").mock(
            return_value=httpx.Response(200, json=repo_payload)
        )
        respx.get(url__startswith=f"{API}/repos/owner/repo/").mock(
            return_value=httpx.Response(500)
        )
        async with app.run_test() as pilot:
            app.run_analysis(URL)
            await app.workers.wait_for_complete()
            await pilot.pause()

            assert isinstance(app.screen, DashboardScreen)
            assert app.screen.data.repository.name == "repo"

    @pytest.mark.asyncio
    @respx.mock
    async def test_request_error_shown_on_loading_screen(self, app):
        respx.get(f"{API}/repos/owner/repo").mock(
            side_effect=httpx.TooManyRedirects("loop")
        )
        async with app.run_test() as pilot:
            app.run_analysis(URL)
            loading = app.screen
            await app.workers.wait_for_complete()
            await pilot.pause()

            assert app.screen is loading
            assert loading.failed

    @pytest.mark.asyncio
    async def test_unexpected_error_shown_on_loading_screen(self, app):
        with patch("repo_pulse.app.Analyzer.analyze", side_effect=RuntimeError("boom")):
            async with app.run_test() as pilot:
                app.run_analysis(URL)
                loading = app.screen
                await app.workers.wait_for_complete()
                await pilot.pause()

                assert isinstance(loading, LoadingScreen)
                assert loading.failed
