"""Runtime settings loaded from the environment (and an optional .env file)."""

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace

from dotenv import load_dotenv

from codeforces_browser.domain.exceptions import ConfigurationError

DEFAULT_API_URL = "https://codeforces.com/api"
DEFAULT_HANDLE = "shauncodes"
DEFAULT_PAGE_SIZE = 20
DEFAULT_TIMEOUT = 15.0
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Configuration for one browsing run."""

    handle: str = DEFAULT_HANDLE
    page_size: int = DEFAULT_PAGE_SIZE
    timeout: float = DEFAULT_TIMEOUT
    api_url: str = DEFAULT_API_URL
    allow_unfiltered: bool = False
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: str | None = None

    def __post_init__(self) -> None:
        if not self.handle:
            raise ConfigurationError("Handle must not be empty")
        if self.page_size < 1:
            raise ConfigurationError(f"Page size must be at least 1, got {self.page_size}")
        if self.timeout <= 0:
            raise ConfigurationError(f"Timeout must be positive, got {self.timeout}")
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level {self.log_level!r}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from ``CF_BROWSER_*`` variables.

        When ``environ`` is omitted, a ``.env`` file in the working
        directory is loaded first and ``os.environ`` is used.
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        return cls(
            handle=environ.get("CF_BROWSER_HANDLE", DEFAULT_HANDLE),
            page_size=_parse_number(environ, "CF_BROWSER_PAGE_SIZE", int, DEFAULT_PAGE_SIZE),
            timeout=_parse_number(environ, "CF_BROWSER_TIMEOUT", float, DEFAULT_TIMEOUT),
            api_url=environ.get("CF_BROWSER_API_URL", DEFAULT_API_URL).rstrip("/"),
            allow_unfiltered=environ.get("CF_BROWSER_ALLOW_UNFILTERED", "").lower() in _TRUE_VALUES,
            log_level=environ.get("CF_BROWSER_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
            log_file=environ.get("CF_BROWSER_LOG_FILE") or None,
        )

    def with_overrides(self, **overrides) -> "Settings":
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def _parse_number(environ: Mapping[str, str], name: str, kind: type, default):
    raw = environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return kind(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from e
