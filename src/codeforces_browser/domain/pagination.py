"""Page navigation state machine.

The machine is pure: it only tracks the current page and the navigation
state. Reading keys, prompting and rendering belong to the controller in
``presentation.navigator``.
"""

import math
from enum import Enum

from loguru import logger

NEXT_KEY = "n"
PREVIOUS_KEY = "p"
JUMP_KEY = "j"
QUIT_KEY = "q"
INTERRUPT_KEY = "\x03"


class NavigationState(Enum):
    VIEWING = "viewing"
    JUMPING = "jumping"
    EXITING = "exiting"


def total_pages(total_items: int, page_size: int) -> int:
    return math.ceil(total_items / page_size)


class Paginator:
    """Tracks ``page`` (1-based) over ``total_items`` split into ``page_size`` pages.

    While at rest in VIEWING, ``1 <= page <= max(total_pages, 1)``.
    """

    def __init__(self, total_items: int, page_size: int):
        if page_size < 1:
            raise ValueError(f"Page size must be positive, got {page_size}")
        if total_items < 0:
            raise ValueError(f"Item count must not be negative, got {total_items}")
        self.total_items = total_items
        self.page_size = page_size
        self.page = 1
        self.state = NavigationState.VIEWING

    @property
    def total_pages(self) -> int:
        return total_pages(self.total_items, self.page_size)

    @property
    def page_start(self) -> int:
        return (self.page - 1) * self.page_size

    def next_page(self) -> None:
        if self.page * self.page_size < self.total_items:
            self.page += 1

    def previous_page(self) -> None:
        if self.page > 1:
            self.page -= 1

    def handle_key(self, key: str) -> NavigationState:
        """Apply a keystroke received while viewing and return the new state."""
        if self.state is NavigationState.EXITING:
            return self.state

        if key in (QUIT_KEY, INTERRUPT_KEY):
            self.quit()
        elif self.state is NavigationState.JUMPING:
            logger.debug(f"Ignoring key {key!r} while a jump is pending")
        elif key == NEXT_KEY:
            self.next_page()
        elif key == PREVIOUS_KEY:
            self.previous_page()
        elif key == JUMP_KEY:
            self.state = NavigationState.JUMPING
        return self.state

    def complete_jump(self, text: str) -> bool:
        """Finish a jump with the typed page number.

        Returns False and keeps the current page when ``text`` is not an
        integer in ``[1, total_pages]``. Either way the machine goes back
        to VIEWING.
        """
        if self.state is not NavigationState.JUMPING:
            raise RuntimeError("No jump in progress")
        self.state = NavigationState.VIEWING

        digits = text.strip()
        # int() alone would also take "+2", "1_0" and non-ASCII digits.
        if not (digits.isascii() and digits.isdecimal()):
            logger.debug(f"Rejected page number {text!r}")
            return False

        page = int(digits)
        if not 1 <= page <= self.total_pages:
            logger.debug(f"Page {page} outside 1..{self.total_pages}")
            return False

        self.page = page
        return True

    def quit(self) -> None:
        self.state = NavigationState.EXITING
