"""Value objects for problem identification."""

from dataclasses import dataclass


def problem_key(contest_id: int, index: str) -> str:
    """Build the lookup key used by the solved set, e.g. ``1_A``."""
    return f"{contest_id}_{index}"


@dataclass(frozen=True)
class ProblemIdentifier:
    """Identifies a specific Codeforces problem."""

    contest_id: int
    index: str

    def __str__(self) -> str:
        """String representation."""
        return f"{self.contest_id}/{self.index}"
