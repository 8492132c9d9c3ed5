"""Shared test fixtures."""

from contextlib import contextmanager

import pytest

from codeforces_browser.domain.exceptions import TerminalSizeError
from codeforces_browser.domain.models import Problem


class FakeTerminal:
    """Scripted terminal: pops keys and lines, records everything written."""

    def __init__(self, keys=(), lines=(), size=(120, 40)):
        self.keys = list(keys)
        self.lines = list(lines)
        self.terminal_size = size
        self.output: list[str] = []
        self.frames = 0
        self.in_keystroke_mode = False
        self.line_reads_in_keystroke_mode: list[bool] = []

    @property
    def text(self) -> str:
        return "".join(self.output)

    def write(self, text: str) -> None:
        self.output.append(text)

    def clear(self) -> None:
        self.frames += 1

    def size(self) -> tuple[int, int]:
        if self.terminal_size is None:
            raise TerminalSizeError("Error getting terminal size: not a tty")
        return self.terminal_size

    def read_key(self) -> str:
        if not self.keys:
            raise KeyboardInterrupt
        return self.keys.pop(0)

    def read_line(self, prompt: str) -> str:
        self.write(prompt)
        self.line_reads_in_keystroke_mode.append(self.in_keystroke_mode)
        if not self.lines:
            raise EOFError("Input closed")
        return self.lines.pop(0)

    @contextmanager
    def keystroke_mode(self):
        self.in_keystroke_mode = True
        try:
            yield
        finally:
            self.in_keystroke_mode = False

    @contextmanager
    def line_mode(self):
        resume = self.in_keystroke_mode
        self.in_keystroke_mode = False
        try:
            yield
        finally:
            self.in_keystroke_mode = resume


def make_problem(contest_id=1, index="A", rating=1500, solved_count=0, name=None) -> Problem:
    return Problem(
        contest_id=contest_id,
        index=index,
        name=name or f"Problem {contest_id}{index}",
        rating=rating,
        solved_count=solved_count,
    )


@pytest.fixture
def fake_terminal():
    return FakeTerminal


@pytest.fixture
def problem_factory():
    return make_problem
