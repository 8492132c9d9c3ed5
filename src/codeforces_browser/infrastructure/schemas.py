"""Pydantic schemas for Codeforces API payloads."""

from pydantic import BaseModel, ConfigDict, Field


class _ApiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ApiProblem(_ApiModel):
    """Problem entry from ``problemset.problems``."""

    contest_id: int = Field(alias="contestId")
    index: str
    name: str
    type: str = ""
    points: float | None = None
    rating: int = 0
    tags: list[str] = Field(default_factory=list)


class ApiProblemStatistics(_ApiModel):
    """Statistics entry aligned by position with the problems array."""

    contest_id: int = Field(alias="contestId")
    index: str
    solved_count: int = Field(default=0, alias="solvedCount")


class ProblemsetResult(_ApiModel):
    problems: list[ApiProblem] = Field(default_factory=list)
    problem_statistics: list[ApiProblemStatistics] = Field(
        default_factory=list, alias="problemStatistics"
    )


class ProblemsetResponse(_ApiModel):
    status: str
    comment: str | None = None
    result: ProblemsetResult | None = None


class SubmissionProblem(_ApiModel):
    # Absent for some gym submissions.
    contest_id: int | None = Field(default=None, alias="contestId")
    index: str


class Submission(_ApiModel):
    """Submission entry from ``user.status``."""

    problem: SubmissionProblem
    verdict: str | None = None


class UserStatusResponse(_ApiModel):
    status: str
    comment: str | None = None
    result: list[Submission] | None = None
