"""End-to-end tests for a browsing session with a mocked API."""

import asyncio
import threading
import time
from contextlib import asynccontextmanager
from unittest.mock import AsyncMock

import pytest

from codeforces_browser.application import BrowserOrchestrator
from codeforces_browser.application.orchestrator import BackgroundFetch
from codeforces_browser.config import Settings
from codeforces_browser.domain.exceptions import EmptyTagSelectionError, NetworkError
from codeforces_browser.infrastructure.schemas import ProblemsetResult, Submission
from codeforces_browser.services import ProblemService


@pytest.fixture
def api_client():
    client = AsyncMock()
    client.fetch_problemset_problems.return_value = ProblemsetResult.model_validate(
        {
            "problems": [
                {"contestId": 1, "index": "A", "name": "Easy One", "rating": 900},
                {"contestId": 2, "index": "B", "name": "Middle One", "rating": 1500},
                {"contestId": 3, "index": "C", "name": "Hard One", "rating": 1700},
            ],
            "problemStatistics": [
                {"contestId": 1, "index": "A", "solvedCount": 50},
                {"contestId": 2, "index": "B", "solvedCount": 10},
                {"contestId": 3, "index": "C", "solvedCount": 30},
            ],
        }
    )
    client.fetch_user_status.return_value = [
        Submission.model_validate({"problem": {"contestId": 1, "index": "A"}, "verdict": "OK"})
    ]
    return client


def make_orchestrator(api_client, terminal, **settings):
    @asynccontextmanager
    async def service_factory(config):
        yield ProblemService(api_client=api_client)

    return BrowserOrchestrator(
        settings=Settings(**settings),
        terminal=terminal,
        service_factory=service_factory,
    )


def test_typo_topics_filter_sort_and_quit(api_client, fake_terminal):
    terminal = fake_terminal(lines=["dp, grpahs", "1000 2000 d"], keys=["n", "q"])

    make_orchestrator(api_client, terminal).run()

    assert "dp -> dp" in terminal.text
    assert "grpahs -> graphs" in terminal.text
    api_client.fetch_problemset_problems.assert_awaited_once_with(["dp", "graphs"])
    api_client.fetch_user_status.assert_awaited_once_with("shauncodes")

    text = terminal.text
    assert "Easy One" not in text
    assert text.index("Hard One") < text.index("Middle One")
    assert "Page 1 of 1" in text
    # 'n' on the only page redraws the same page.
    assert terminal.frames == 2
    assert terminal.keys == []
    assert terminal.in_keystroke_mode is False


def test_invalid_criteria_are_asked_again(api_client, fake_terminal):
    terminal = fake_terminal(lines=["dp", "high low", "1000 2000"], keys=["q"])

    make_orchestrator(api_client, terminal).run()

    assert "Ratings must be integers" in terminal.text
    assert terminal.text.index("Middle One") < terminal.text.index("Hard One")


def test_empty_topics_are_rejected(api_client, fake_terminal):
    terminal = fake_terminal(lines=["  ,  "])

    with pytest.raises(EmptyTagSelectionError):
        make_orchestrator(api_client, terminal).run()

    api_client.fetch_problemset_problems.assert_not_awaited()


def test_empty_topics_allowed_when_configured(api_client, fake_terminal):
    terminal = fake_terminal(lines=["", "0 4000 a"], keys=["q"])

    make_orchestrator(api_client, terminal, allow_unfiltered=True).run()

    api_client.fetch_problemset_problems.assert_awaited_once_with([])
    assert "Easy One" in terminal.text


def test_fetch_failure_displays_nothing(api_client, fake_terminal):
    api_client.fetch_user_status.side_effect = NetworkError("connection refused")
    terminal = fake_terminal(lines=["dp", "1000 2000 d"], keys=["q"])

    with pytest.raises(NetworkError):
        make_orchestrator(api_client, terminal).run()

    assert terminal.frames == 0
    assert "Middle One" not in terminal.text


def test_no_matches_skips_navigation(api_client, fake_terminal):
    terminal = fake_terminal(lines=["dp", "3000 3500 a"], keys=["q"])

    make_orchestrator(api_client, terminal).run()

    assert "No problems matched" in terminal.text
    assert terminal.frames == 0
    assert terminal.keys == ["q"]


def test_navigation_runs_outside_any_event_loop(api_client, fake_terminal):
    class LoopCheckingTerminal(fake_terminal):
        loop_running_during_keys = []

        def read_key(self):
            try:
                asyncio.get_running_loop()
            except RuntimeError:
                self.loop_running_during_keys.append(False)
            else:
                self.loop_running_during_keys.append(True)
            return super().read_key()

    terminal = LoopCheckingTerminal(lines=["dp", "1000 2000 d"], keys=["n", "q"])

    make_orchestrator(api_client, terminal).run()

    # Ctrl-C only raises KeyboardInterrupt immediately when no loop owns SIGINT.
    assert terminal.loop_running_during_keys == [False, False]


def test_fetch_runs_while_criteria_are_typed(api_client, fake_terminal):
    fetch_started = threading.Event()
    original = api_client.fetch_problemset_problems.return_value

    async def recording_fetch(tags):
        fetch_started.set()
        return original

    api_client.fetch_problemset_problems.side_effect = recording_fetch

    class WaitingTerminal(fake_terminal):
        started_before_input = []

        def read_line(self, prompt):
            if prompt.startswith("Enter min"):
                self.started_before_input.append(fetch_started.wait(timeout=5))
            return super().read_line(prompt)

    terminal = WaitingTerminal(lines=["dp", "1000 2000 d"], keys=["q"])

    make_orchestrator(api_client, terminal).run()

    assert terminal.started_before_input == [True]
    assert "Hard One" in terminal.text


def test_interrupt_at_rating_prompt_cancels_the_fetch(api_client, fake_terminal):
    fetch_started = threading.Event()
    fetch_cancelled = threading.Event()

    async def never_finishes(tags):
        fetch_started.set()
        try:
            await asyncio.sleep(3600)
        except asyncio.CancelledError:
            fetch_cancelled.set()
            raise

    api_client.fetch_problemset_problems.side_effect = never_finishes

    class InterruptedTerminal(fake_terminal):
        def read_line(self, prompt):
            self.write(prompt)
            fetch_started.wait(timeout=5)
            raise KeyboardInterrupt

    started = time.monotonic()
    with pytest.raises(KeyboardInterrupt):
        make_orchestrator(api_client, InterruptedTerminal()).load(["dp"])

    assert time.monotonic() - started < 5
    assert fetch_cancelled.is_set()


class TestBackgroundFetch:
    def test_returns_the_result(self):
        async def fetch():
            await asyncio.sleep(0)
            return 42

        background = BackgroundFetch(fetch)
        background.start()

        assert background.result() == 42

    def test_raises_the_error(self):
        async def fetch():
            raise NetworkError("connection refused")

        background = BackgroundFetch(fetch)
        background.start()

        with pytest.raises(NetworkError):
            background.result()

    def test_cancel_before_the_loop_starts(self):
        calls = []

        async def fetch():
            calls.append("fetched")

        background = BackgroundFetch(fetch)
        background.cancel()
        background.start()

        with pytest.raises(asyncio.CancelledError):
            background.result()
        assert calls == []
