"""POSIX terminal adapter: single-keystroke reads, line prompts and screen control."""

import os
import sys
import termios
import tty
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

from loguru import logger

from codeforces_browser.domain.exceptions import TerminalSizeError

CLEAR_SCREEN = "\033[2J\033[H"


class Terminal:
    """Console wrapper used by the navigator.

    Keystroke mode turns off canonical input and echo (cbreak) so a single
    key press is delivered without Enter. The original attributes are
    restored when the ``keystroke_mode`` block exits, however it exits.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self._saved_attrs: list | None = None

    @property
    def in_keystroke_mode(self) -> bool:
        return self._saved_attrs is not None

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def clear(self) -> None:
        self.write(CLEAR_SCREEN)

    def size(self) -> tuple[int, int]:
        try:
            size = os.get_terminal_size(self.stdout.fileno())
        except (OSError, ValueError) as e:
            raise TerminalSizeError(f"Error getting terminal size: {e}") from e
        return size.columns, size.lines

    def read_key(self) -> str:
        """Block until one character is available.

        End of input is reported as the interrupt character so callers
        treat it like Ctrl-C.
        """
        char = self.stdin.read(1)
        return char if char else "\x03"

    def read_line(self, prompt: str) -> str:
        self.write(prompt)
        line = self.stdin.readline()
        if not line:
            raise EOFError("Input closed")
        return line.rstrip("\n")

    def _enter_cbreak(self) -> None:
        if not self.stdin.isatty():
            logger.debug("stdin is not a terminal; keys will need Enter")
            return
        fd = self.stdin.fileno()
        self._saved_attrs = termios.tcgetattr(fd)
        tty.setcbreak(fd)
        # Ctrl-C is read as "\x03" instead of raising SIGINT.
        attrs = termios.tcgetattr(fd)
        attrs[3] &= ~termios.ISIG
        termios.tcsetattr(fd, termios.TCSADRAIN, attrs)

    def _restore(self) -> None:
        if self._saved_attrs is None:
            return
        termios.tcsetattr(self.stdin.fileno(), termios.TCSADRAIN, self._saved_attrs)
        self._saved_attrs = None

    @contextmanager
    def keystroke_mode(self) -> Iterator[None]:
        """Deliver keys one at a time for the duration of the block."""
        self._enter_cbreak()
        logger.debug("Entered keystroke mode")
        try:
            yield
        finally:
            self._restore()
            logger.debug("Restored line mode")

    @contextmanager
    def line_mode(self) -> Iterator[None]:
        """Temporarily restore canonical, echoing input inside keystroke mode."""
        resume = self.in_keystroke_mode
        self._restore()
        try:
            yield
        finally:
            if resume:
                self._enter_cbreak()
