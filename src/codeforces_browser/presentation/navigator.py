"""Interactive page navigation over a rendered problem table."""

from collections.abc import Sequence, Set

from loguru import logger

from codeforces_browser.domain.exceptions import TerminalSizeError
from codeforces_browser.domain.models import Problem
from codeforces_browser.domain.pagination import NavigationState, Paginator
from codeforces_browser.infrastructure.interfaces import TerminalProtocol

from .table import TableRenderer

HELP_LINE = "Press 'n' for next page, 'p' for previous page, 'j' to jump to a page, or 'q' to quit:"
JUMP_PROMPT = "Enter page number: "
INVALID_PAGE_MESSAGE = "Invalid page number. Press any key to continue.\n"


class PaginationController:
    """Drives a Paginator from keystrokes and redraws after every key.

    Runs on a single thread: each key read blocks until input arrives and
    nothing else touches the state meanwhile.
    """

    def __init__(
        self,
        problems: Sequence[Problem],
        solved: Set[str],
        terminal: TerminalProtocol,
        page_size: int,
        renderer: TableRenderer | None = None,
    ):
        self.problems = problems
        self.solved = solved
        self.terminal = terminal
        self.renderer = renderer or TableRenderer()
        self.paginator = Paginator(len(problems), page_size)

    @property
    def page(self) -> int:
        return self.paginator.page

    def draw(self) -> None:
        """Clear the screen and render the current page; skip the frame if the size is unknown."""
        try:
            size = self.terminal.size()
        except TerminalSizeError as e:
            logger.warning(f"Skipping frame: {e}")
            self.terminal.write(f"{e}\n")
            return

        self.terminal.clear()
        self.terminal.write(
            self.renderer.render(
                self.problems, self.solved, self.paginator.page, self.paginator.page_size, size
            )
        )
        self.terminal.write(f"\n{HELP_LINE}\n")

    def run(self) -> None:
        """Loop until the quit key or an interrupt."""
        logger.info(
            f"Browsing {len(self.problems)} problem(s) over {self.paginator.total_pages} page(s)"
        )
        with self.terminal.keystroke_mode():
            while self.paginator.state is not NavigationState.EXITING:
                self.draw()
                try:
                    key = self.terminal.read_key()
                except KeyboardInterrupt:
                    self.paginator.quit()
                    break

                state = self.paginator.handle_key(key)
                if state is NavigationState.JUMPING:
                    self._jump()

        logger.info("Navigation finished")

    def _jump(self) -> None:
        with self.terminal.line_mode():
            try:
                text = self.terminal.read_line(JUMP_PROMPT)
            except (EOFError, KeyboardInterrupt):
                self.paginator.quit()
                return
            accepted = self.paginator.complete_jump(text)
            if not accepted:
                self.terminal.write(INVALID_PAGE_MESSAGE)

        if not accepted:
            try:
                self.terminal.read_key()
            except KeyboardInterrupt:
                self.paginator.quit()
