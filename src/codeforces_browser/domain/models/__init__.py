"""Domain models package."""

from .criteria import SearchCriteria, SortOrder
from .identifiers import ProblemIdentifier, problem_key
from .problem import Problem

__all__ = [
    "Problem",
    "ProblemIdentifier",
    "SearchCriteria",
    "SortOrder",
    "problem_key",
]
