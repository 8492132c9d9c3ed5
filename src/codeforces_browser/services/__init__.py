from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from loguru import logger

from codeforces_browser.config import Settings
from codeforces_browser.services.problem import ProblemCatalog, ProblemService


@asynccontextmanager
async def create_problem_service(settings: Settings) -> AsyncGenerator[ProblemService, None]:
    """Provide a problem service with all dependencies; closes the HTTP client on exit."""
    from codeforces_browser.infrastructure.codeforces_client import CodeforcesApiClient
    from codeforces_browser.infrastructure.http_client import AsyncHTTPClient

    http_client = AsyncHTTPClient(timeout=settings.timeout)
    api_client = CodeforcesApiClient(http_client, base_url=settings.api_url)

    try:
        yield ProblemService(api_client=api_client)
    finally:
        await http_client.aclose()
        logger.debug("HTTP client closed")


__all__ = ["ProblemCatalog", "ProblemService", "create_problem_service"]
