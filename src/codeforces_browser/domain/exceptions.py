"""Exception hierarchy for the problem browser."""


class CodeforcesBrowserError(Exception):
    """Base error for everything the browser reports to the user."""


class ConfigurationError(CodeforcesBrowserError):
    """Invalid setting in the environment or on the command line."""


class FetchError(CodeforcesBrowserError):
    """Retrieving data from the Codeforces API failed."""


class NetworkError(FetchError):
    """Transport failure or timeout while talking to the API."""


class APIStatusError(FetchError):
    """The API answered with a non-success status."""

    def __init__(self, url: str, status_text: str, status_code: int | None = None):
        self.url = url
        self.status_code = status_code
        self.status_text = status_text
        status = f"{status_code} {status_text}" if status_code is not None else status_text
        super().__init__(f"Request to {url} failed: {status}")


class PayloadError(FetchError):
    """Response body could not be decoded or did not match the expected schema."""


class StatisticsMismatchError(PayloadError):
    """Problem statistics are not aligned with the problem list."""


class EmptyTagSelectionError(CodeforcesBrowserError):
    """No tags were selected and unfiltered queries are disabled."""


class InvalidInputError(CodeforcesBrowserError, ValueError):
    """User input could not be parsed. Always recoverable."""


class TerminalSizeError(CodeforcesBrowserError):
    """The terminal size could not be determined."""
