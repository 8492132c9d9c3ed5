from dataclasses import dataclass, field

from .identifiers import problem_key


@dataclass(frozen=True)
class Problem:
    """Domain model for a Codeforces problem-set entry.

    ``rating`` is 0 for unrated problems. ``solved_count`` comes from the
    statistics array returned next to the problems and is fixed once the
    problem is built.
    """

    contest_id: int
    index: str
    name: str
    type: str = ""
    points: float | None = None
    rating: int = 0
    tags: tuple[str, ...] = field(default_factory=tuple)
    solved_count: int = 0

    @property
    def key(self) -> str:
        return problem_key(self.contest_id, self.index)
