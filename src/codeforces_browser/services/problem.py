"""Service for retrieving problems and a user's solved set."""

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass

from loguru import logger

from codeforces_browser.domain.exceptions import StatisticsMismatchError
from codeforces_browser.domain.models import Problem, ProblemIdentifier, problem_key
from codeforces_browser.infrastructure.interfaces import APIClientProtocol
from codeforces_browser.infrastructure.schemas import ProblemsetResult, Submission

ACCEPTED_VERDICT = "OK"


@dataclass(frozen=True)
class ProblemCatalog:
    """Both retrieval results, available only once both have finished."""

    problems: list[Problem]
    solved: frozenset[str]


def merge_statistics(result: ProblemsetResult) -> list[Problem]:
    """Build problems with solved counts taken from the aligned statistics array.

    Raises:
        StatisticsMismatchError: If the arrays differ in length or an entry
            names a different problem than its counterpart.
    """
    problems, statistics = result.problems, result.problem_statistics
    if len(problems) != len(statistics):
        raise StatisticsMismatchError(
            f"Got {len(problems)} problems but {len(statistics)} statistics entries"
        )

    merged = []
    for position, (problem, stats) in enumerate(zip(problems, statistics)):
        expected = ProblemIdentifier(problem.contest_id, problem.index)
        actual = ProblemIdentifier(stats.contest_id, stats.index)
        if actual != expected:
            raise StatisticsMismatchError(
                f"Statistics entry {position} is for {actual}, expected {expected}"
            )
        merged.append(
            Problem(
                contest_id=problem.contest_id,
                index=problem.index,
                name=problem.name,
                type=problem.type,
                points=problem.points,
                rating=problem.rating,
                tags=tuple(problem.tags),
                solved_count=stats.solved_count,
            )
        )
    return merged


def solved_keys(submissions: Sequence[Submission]) -> frozenset[str]:
    """Keys of problems with at least one accepted submission."""
    return frozenset(
        problem_key(s.problem.contest_id, s.problem.index)
        for s in submissions
        if s.verdict == ACCEPTED_VERDICT and s.problem.contest_id is not None
    )


class ProblemService:
    """Service for managing Codeforces problem retrieval."""

    def __init__(self, *, api_client: APIClientProtocol):
        """Initialize service with dependencies."""
        self.api_client = api_client

    async def get_problems_by_tags(self, tags: Sequence[str]) -> list[Problem]:
        logger.debug(f"Getting problems via service for tags: {list(tags)}")
        result = await self.api_client.fetch_problemset_problems(tags)
        return merge_statistics(result)

    async def get_solved_problems(self, handle: str) -> frozenset[str]:
        logger.debug(f"Getting solved problems via service for {handle}")
        submissions = await self.api_client.fetch_user_status(handle)
        solved = solved_keys(submissions)
        logger.info(f"{handle} has solved {len(solved)} problem(s)")
        return solved

    async def get_catalog(self, tags: Sequence[str], handle: str) -> ProblemCatalog:
        """Run both retrievals in parallel and wait for both.

        The first failure cancels the other retrieval and propagates.
        """
        problems_task = asyncio.create_task(self.get_problems_by_tags(tags))
        solved_task = asyncio.create_task(self.get_solved_problems(handle))

        try:
            problems, solved = await asyncio.gather(problems_task, solved_task)
        except BaseException:
            for task in (problems_task, solved_task):
                task.cancel()
            raise

        logger.info(f"Fetched {len(problems)} problem(s) and {len(solved)} solved key(s)")
        return ProblemCatalog(problems=problems, solved=solved)
