"""Filtering and sorting of fetched problems."""

from collections.abc import Iterable

from codeforces_browser.domain.exceptions import InvalidInputError
from codeforces_browser.domain.models import Problem, SearchCriteria, SortOrder


def filter_by_rating(problems: Iterable[Problem], min_rating: int, max_rating: int) -> list[Problem]:
    """Keep problems whose rating lies in ``[min_rating, max_rating]``, in input order."""
    return [p for p in problems if min_rating <= p.rating <= max_rating]


def sort_problems(problems: Iterable[Problem], order: SortOrder) -> list[Problem]:
    """Sort by rating, then solved count, both in the direction of ``order``.

    The sort is stable: fully tied problems keep their fetch order in
    either direction.
    """
    return sorted(
        problems,
        key=lambda p: (p.rating, p.solved_count),
        reverse=order is SortOrder.DESCENDING,
    )


def apply_criteria(problems: Iterable[Problem], criteria: SearchCriteria) -> list[Problem]:
    filtered = filter_by_rating(problems, criteria.min_rating, criteria.max_rating)
    return sort_problems(filtered, criteria.order)


def parse_criteria(line: str) -> SearchCriteria:
    """Parse ``"<min> <max> [a|d]"`` into search criteria."""
    tokens = line.split()
    if len(tokens) < 2:
        raise InvalidInputError("Expected '<min rating> <max rating> [a|d]'")

    try:
        min_rating, max_rating = int(tokens[0]), int(tokens[1])
    except ValueError as e:
        raise InvalidInputError(f"Ratings must be integers: {line.strip()!r}") from e

    if min_rating > max_rating:
        raise InvalidInputError(f"Min rating {min_rating} is above max rating {max_rating}")

    order = SortOrder.from_token(tokens[2]) if len(tokens) > 2 else SortOrder.ASCENDING
    return SearchCriteria(min_rating=min_rating, max_rating=max_rating, order=order)
