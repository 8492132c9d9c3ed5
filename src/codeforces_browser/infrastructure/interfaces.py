"""Protocol interfaces for infrastructure adapters."""

from collections.abc import Sequence
from contextlib import AbstractContextManager
from typing import Any, Protocol

from .schemas import ProblemsetResult, Submission


class HTTPClientProtocol(Protocol):
    """Protocol for HTTP client."""

    async def get_json(self, url: str, params: dict[str, str] | None = None) -> Any:
        """Get decoded JSON from URL."""
        ...


class APIClientProtocol(Protocol):
    """Protocol for Codeforces API client."""

    async def fetch_problemset_problems(self, tags: Sequence[str]) -> ProblemsetResult:
        """Get problems (and their statistics) matching all given tags."""
        ...

    async def fetch_user_status(self, handle: str) -> list[Submission]:
        """Get every submission of a user."""
        ...


class TerminalProtocol(Protocol):
    """Protocol for the interactive terminal used by the navigator."""

    def write(self, text: str) -> None: ...

    def clear(self) -> None: ...

    def size(self) -> tuple[int, int]:
        """Return ``(columns, lines)``; raise TerminalSizeError if unknown."""
        ...

    def read_key(self) -> str: ...

    def read_line(self, prompt: str) -> str: ...

    def keystroke_mode(self) -> AbstractContextManager[None]: ...

    def line_mode(self) -> AbstractContextManager[None]: ...
