"""Text table rendering for one page of problems."""

from collections.abc import Sequence, Set

from codeforces_browser.domain.models import Problem
from codeforces_browser.domain.pagination import total_pages

RESET = "\033[0m"
BOLD_BLUE = "\033[1;34m"
BOLD_GREEN = "\033[1;32m"
BOLD_RED = "\033[1;31m"

# (low, high, color); bounds inclusive. Ratings outside every band use RESET.
RATING_BANDS: tuple[tuple[int, int, str], ...] = (
    (1000, 1199, "\033[1;90m"),  # grey
    (1200, 1399, "\033[1;32m"),  # green
    (1400, 1599, "\033[1;36m"),  # cyan
    (1600, 1899, "\033[1;34m"),  # blue
    (1900, 2099, "\033[1;35m"),  # pink
    (2100, 2299, "\033[1;33m"),  # orange
    (2300, 2399, "\033[38;5;208m"),  # dark orange
    (2400, 2599, "\033[1;31m"),  # red
)

CONTEST_WIDTH = 12
INDEX_WIDTH = 10
SOLVED_COUNT_WIDTH = 12
RATING_WIDTH = 12
SOLVED_WIDTH = 12
COLUMN_GAPS = 5
MIN_NAME_WIDTH = 10

# Header, blank line, page footer and help line.
CHROME_ROWS = 4

ELLIPSIS = "..."

PROBLEM_URL = "https://codeforces.com/contest/{contest_id}/problem/{index}"


def rating_color(rating: int) -> str:
    for low, high, color in RATING_BANDS:
        if low <= rating <= high:
            return color
    return RESET


def truncate(text: str, width: int) -> str:
    """Cut ``text`` to at most ``width`` characters, ending in an ellipsis when cut."""
    if len(text) <= width:
        return text
    if width <= len(ELLIPSIS):
        return ELLIPSIS[:width]
    return text[: width - len(ELLIPSIS)] + ELLIPSIS


def hyperlink(url: str, text: str) -> str:
    """Wrap ``text`` in an OSC 8 terminal hyperlink."""
    return f"\033]8;;{url}\033\\{text}\033]8;;\033\\"


def problem_url(problem: Problem) -> str:
    return PROBLEM_URL.format(contest_id=problem.contest_id, index=problem.index)


def name_width(terminal_width: int) -> int:
    fixed = CONTEST_WIDTH + INDEX_WIDTH + SOLVED_COUNT_WIDTH + RATING_WIDTH + SOLVED_WIDTH
    return max(terminal_width - (fixed + COLUMN_GAPS), MIN_NAME_WIDTH)


def available_rows(terminal_height: int) -> int:
    return max(terminal_height - CHROME_ROWS, 1)


def visible_range(total: int, page: int, page_size: int, terminal_height: int) -> range:
    """Indices of the rows shown for ``page``.

    Starts at the page boundary and is limited by the rows that fit on
    screen, the page size and the end of the list.
    """
    start = (page - 1) * page_size
    end = min(start + min(available_rows(terminal_height), page_size), total)
    return range(start, max(start, end))


class TableRenderer:
    """Formats a page of problems as an aligned, colored table.

    Output depends only on the arguments, so equal inputs render to
    identical text.
    """

    def render(
        self,
        problems: Sequence[Problem],
        solved: Set[str],
        page: int,
        page_size: int,
        terminal_size: tuple[int, int],
    ) -> str:
        width, height = terminal_size
        name_col = name_width(width)

        lines = [self.render_header(name_col)]
        for i in visible_range(len(problems), page, page_size, height):
            lines.append(self.render_row(problems[i], solved, name_col))
        lines.append("")
        lines.append(f"Page {page} of {max(total_pages(len(problems), page_size), 1)}")
        return "\n".join(lines) + "\n"

    def render_header(self, name_col: int) -> str:
        return (
            f"{BOLD_BLUE}{'Contest ID':<{CONTEST_WIDTH}} {'Problem':<{INDEX_WIDTH}} "
            f"{'Name':<{name_col}} {'Solved Count':<{SOLVED_COUNT_WIDTH}} "
            f"{'Rating':<{RATING_WIDTH}} {'Solved':<{SOLVED_WIDTH}}{RESET}"
        )

    def render_row(self, problem: Problem, solved: Set[str], name_col: int) -> str:
        if problem.key in solved:
            marker, marker_color = "Yes", BOLD_GREEN
        else:
            marker, marker_color = "No", BOLD_RED

        name = truncate(problem.name, name_col).ljust(name_col)
        return (
            f"{BOLD_GREEN}{problem.contest_id:<{CONTEST_WIDTH}}{RESET} "
            f"{BOLD_RED}{problem.index:<{INDEX_WIDTH}}{RESET} "
            f"{hyperlink(problem_url(problem), name)} "
            f"{problem.solved_count:<{SOLVED_COUNT_WIDTH}} "
            f"{rating_color(problem.rating)}{problem.rating:<{RATING_WIDTH}} "
            f"{marker_color}{marker}{RESET}"
        )
