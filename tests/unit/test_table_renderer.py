"""Unit tests for table rendering."""

import pytest

from codeforces_browser.presentation.table import (
    CHROME_ROWS,
    ELLIPSIS,
    RATING_BANDS,
    RESET,
    TableRenderer,
    available_rows,
    hyperlink,
    name_width,
    rating_color,
    truncate,
    visible_range,
)

GREY = "\033[1;90m"
GREEN = "\033[1;32m"
CYAN = "\033[1;36m"
BLUE = "\033[1;34m"
PINK = "\033[1;35m"
ORANGE = "\033[1;33m"
DARK_ORANGE = "\033[38;5;208m"
RED = "\033[1;31m"


@pytest.mark.parametrize(
    "rating, color",
    [
        (0, RESET),
        (800, RESET),
        (999, RESET),
        (1000, GREY),
        (1199, GREY),
        (1200, GREEN),
        (1399, GREEN),
        (1400, CYAN),
        (1599, CYAN),
        (1600, BLUE),
        (1899, BLUE),
        (1900, PINK),
        (2099, PINK),
        (2100, ORANGE),
        (2299, ORANGE),
        (2300, DARK_ORANGE),
        (2399, DARK_ORANGE),
        (2400, RED),
        (2599, RED),
        (2600, RESET),
        (3500, RESET),
    ],
)
def test_rating_band_boundaries(rating, color):
    assert rating_color(rating) == color


def test_rating_bands_are_contiguous():
    assert len(RATING_BANDS) == 8
    for (_, high, _), (next_low, _, _) in zip(RATING_BANDS, RATING_BANDS[1:]):
        assert next_low == high + 1
    for low, high, _ in RATING_BANDS:
        assert low <= high


@pytest.mark.parametrize(
    "text, width, expected",
    [
        ("short", 10, "short"),
        ("exactly10!", 10, "exactly10!"),
        ("a much longer name", 10, "a much..."),
        ("abcd", 3, "..."),
        ("abcd", 2, ".."),
    ],
)
def test_truncate(text, width, expected):
    result = truncate(text, width)
    assert result == expected
    assert len(result) <= width


def test_truncate_always_ends_with_ellipsis_when_cut():
    for width in range(4, 30):
        result = truncate("x" * 40, width)
        assert len(result) == width
        assert result.endswith(ELLIPSIS)


def test_name_width():
    assert name_width(80) == 17
    assert name_width(40) == 10
    assert name_width(200) == 137


def test_available_rows_has_a_floor_of_one():
    assert available_rows(40) == 40 - CHROME_ROWS
    assert available_rows(2) == 1
    assert available_rows(0) == 1


@pytest.mark.parametrize(
    "total, page, size, height, expected",
    [
        (45, 1, 20, 100, range(0, 20)),
        (45, 2, 20, 100, range(20, 40)),
        (45, 3, 20, 100, range(40, 45)),
        (45, 2, 20, 10, range(20, 26)),
        (45, 1, 20, 3, range(0, 1)),
        (2, 1, 20, 40, range(0, 2)),
    ],
)
def test_visible_range(total, page, size, height, expected):
    assert visible_range(total, page, size, height) == expected


def test_hyperlink_wraps_text():
    assert hyperlink("https://x", "Name") == "\033]8;;https://x\033\\Name\033]8;;\033\\"


class TestRender:
    @pytest.fixture
    def problems(self, problem_factory):
        return [problem_factory(i, "A", rating=1000 + i, solved_count=i) for i in range(1, 46)]

    def test_renders_one_row_per_visible_problem(self, problems):
        output = TableRenderer().render(problems, frozenset(), 2, 20, (120, 40))
        assert output.count("\033]8;;https://codeforces.com/contest/") == 20
        assert "https://codeforces.com/contest/21/problem/A" in output
        assert "https://codeforces.com/contest/20/problem/A" not in output
        assert output.rstrip().endswith("Page 2 of 3")

    def test_short_terminal_limits_rows(self, problems):
        output = TableRenderer().render(problems, frozenset(), 1, 20, (120, 8))
        assert output.count("\033]8;;https://") == 8 - CHROME_ROWS

    def test_solved_marker(self, problem_factory):
        rows = [problem_factory(1, "A"), problem_factory(2, "B")]
        output = TableRenderer().render(rows, frozenset({"1_A"}), 1, 20, (120, 40))
        first, second = output.splitlines()[1:3]
        assert "Yes" in first and "No" not in first
        assert "No" in second and "Yes" not in second

    def test_long_names_are_truncated_to_column(self, problem_factory):
        row = problem_factory(1, "A", name="N" * 200)
        output = TableRenderer().render([row], frozenset(), 1, 20, (80, 40))
        assert "N" * 14 + ELLIPSIS in output
        assert "N" * 15 not in output

    def test_header_present(self, problems):
        header = TableRenderer().render(problems, frozenset(), 1, 20, (120, 40)).splitlines()[0]
        for title in ("Contest ID", "Problem", "Name", "Solved Count", "Rating", "Solved"):
            assert title in header

    def test_rendering_is_idempotent(self, problems):
        renderer = TableRenderer()
        solved = frozenset({"3_A", "7_A"})
        first = renderer.render(problems, solved, 1, 20, (100, 30))
        second = renderer.render(problems, solved, 1, 20, (100, 30))
        assert first == second
