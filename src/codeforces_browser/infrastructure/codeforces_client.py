"""Client for the Codeforces JSON API."""

from collections.abc import Sequence
from typing import TypeVar

from loguru import logger
from pydantic import BaseModel, ValidationError

from codeforces_browser.config import DEFAULT_API_URL
from codeforces_browser.domain.exceptions import APIStatusError, PayloadError

from .interfaces import HTTPClientProtocol
from .schemas import ProblemsetResponse, ProblemsetResult, Submission, UserStatusResponse

API_OK = "OK"

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class CodeforcesApiClient:
    """Fetch problem-set and submission data from ``codeforces.com/api``."""

    def __init__(self, http_client: HTTPClientProtocol, base_url: str = DEFAULT_API_URL):
        self.http_client = http_client
        self.base_url = base_url.rstrip("/")

    async def fetch_problemset_problems(self, tags: Sequence[str]) -> ProblemsetResult:
        """Fetch problems having all of ``tags`` (every problem when empty)."""
        url = f"{self.base_url}/problemset.problems"
        params = {"tags": ";".join(tags)} if tags else None
        logger.debug(f"Fetching problemset.problems for tags: {list(tags)}")

        response = await self._get(url, params, ProblemsetResponse)
        result = response.result or ProblemsetResult()
        logger.info(f"Fetched {len(result.problems)} problem(s)")
        return result

    async def fetch_user_status(self, handle: str) -> list[Submission]:
        """Fetch all submissions of ``handle``."""
        url = f"{self.base_url}/user.status"
        logger.debug(f"Fetching user.status for {handle}")

        response = await self._get(url, {"handle": handle}, UserStatusResponse)
        submissions = response.result or []
        logger.info(f"Fetched {len(submissions)} submission(s) for {handle}")
        return submissions

    async def _get(
        self, url: str, params: dict[str, str] | None, schema: type[ResponseT]
    ) -> ResponseT:
        payload = await self.http_client.get_json(url, params)

        try:
            response = schema.model_validate(payload)
        except ValidationError as e:
            logger.error(f"Unexpected payload shape from {url}: {e}")
            raise PayloadError(f"Unexpected response from {url}: {e}") from e

        if response.status != API_OK:
            comment = response.comment or response.status
            logger.error(f"API reported failure for {url}: {comment}")
            raise APIStatusError(url, comment)

        return response
