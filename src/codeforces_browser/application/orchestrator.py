"""Orchestrator for one browsing session."""

import asyncio
import threading
from collections.abc import Awaitable, Callable
from contextlib import AbstractAsyncContextManager
from typing import Generic, TypeVar

from loguru import logger

from codeforces_browser.config import Settings
from codeforces_browser.domain.exceptions import EmptyTagSelectionError, InvalidInputError
from codeforces_browser.domain.models import SearchCriteria
from codeforces_browser.domain.processing import apply_criteria, parse_criteria
from codeforces_browser.domain.tags import TagResolver, selected_tags, split_topics
from codeforces_browser.infrastructure.interfaces import TerminalProtocol
from codeforces_browser.presentation import PaginationController, TableRenderer
from codeforces_browser.services import ProblemCatalog, ProblemService, create_problem_service

TOPICS_PROMPT = "Enter the topics (comma-separated):\n"
CRITERIA_PROMPT = "Enter min and max rating | Sort Order (a/d):\n"

T = TypeVar("T")

ServiceFactory = Callable[[Settings], AbstractAsyncContextManager[ProblemService]]


class BackgroundFetch(Generic[T]):
    """Runs a coroutine on a private event loop in a worker thread.

    The calling thread stays free for blocking terminal reads, so Ctrl-C
    there raises KeyboardInterrupt at once. ``cancel`` stops the coroutine
    and waits for its cleanup to finish.
    """

    def __init__(self, fetch: Callable[[], Awaitable[T]]):
        self._fetch = fetch
        self._lock = threading.Lock()
        self._loop: asyncio.AbstractEventLoop | None = None
        self._task: asyncio.Task | None = None
        self._cancelled = False
        self._result: T | None = None
        self._error: BaseException | None = None
        self._thread = threading.Thread(target=self._run, name="catalog-fetch", daemon=True)

    def start(self) -> None:
        self._thread.start()

    def _run(self) -> None:
        try:
            self._result = asyncio.run(self._main())
        except BaseException as e:
            self._error = e

    async def _main(self) -> T:
        with self._lock:
            if self._cancelled:
                raise asyncio.CancelledError
            self._loop = asyncio.get_running_loop()
            self._task = asyncio.current_task()
        return await self._fetch()

    def result(self) -> T:
        """Wait for the coroutine and return its value or raise its error."""
        self._thread.join()
        if self._error is not None:
            raise self._error
        return self._result

    def cancel(self) -> None:
        with self._lock:
            self._cancelled = True
            if self._loop is not None and self._task is not None:
                try:
                    self._loop.call_soon_threadsafe(self._task.cancel)
                except RuntimeError:
                    logger.debug("Fetch loop already closed")
        if self._thread.is_alive():
            self._thread.join()
        logger.debug("Background fetch cancelled")


class BrowserOrchestrator:
    """Coordinates topic resolution, retrieval, filtering and navigation.

    Only the retrieval runs inside an event loop, on a worker thread. Every
    prompt and keystroke read happens on the calling thread, where Ctrl-C
    raises KeyboardInterrupt straight away.
    """

    def __init__(
        self,
        *,
        settings: Settings,
        terminal: TerminalProtocol,
        service_factory: ServiceFactory = create_problem_service,
        resolver: TagResolver | None = None,
        renderer: TableRenderer | None = None,
    ):
        self.settings = settings
        self.terminal = terminal
        self.service_factory = service_factory
        self.resolver = resolver or TagResolver()
        self.renderer = renderer or TableRenderer()

    def ask_topics(self) -> list[str]:
        return split_topics(self.terminal.read_line(TOPICS_PROMPT))

    def ask_criteria(self) -> SearchCriteria:
        """Prompt until a valid ``min max [a|d]`` line is entered."""
        while True:
            line = self.terminal.read_line(CRITERIA_PROMPT)
            try:
                return parse_criteria(line)
            except InvalidInputError as e:
                self.terminal.write(f"{e}\n")

    def resolve_tags(self, topics: list[str]) -> list[str]:
        logger.info("Step 1: Resolving topics")
        resolution = self.resolver.resolve(topics)

        self.terminal.write("Fuzzy Matches:\n")
        for topic, tag in resolution.items():
            self.terminal.write(f"{topic} -> {tag}\n")

        tags = selected_tags(resolution)
        if not tags and not self.settings.allow_unfiltered:
            raise EmptyTagSelectionError(
                "No topics given; set CF_BROWSER_ALLOW_UNFILTERED=1 to browse the whole problem set"
            )
        return tags

    async def fetch_catalog(self, tags: list[str]) -> ProblemCatalog:
        async with self.service_factory(self.settings) as service:
            return await service.get_catalog(tags, self.settings.handle)

    def load(self, tags: list[str]) -> tuple[ProblemCatalog, SearchCriteria]:
        """Fetch in the background while the user types the criteria; wait for both."""
        logger.info("Step 2: Fetching problems and solved set")
        fetch = BackgroundFetch(lambda: self.fetch_catalog(tags))
        fetch.start()

        try:
            criteria = self.ask_criteria()
            catalog = fetch.result()
        except BaseException:
            fetch.cancel()
            raise

        return catalog, criteria

    def browse(self, catalog: ProblemCatalog, criteria: SearchCriteria) -> None:
        logger.info("Step 3: Filtering and sorting")
        problems = apply_criteria(catalog.problems, criteria)
        logger.info(
            f"{len(problems)} of {len(catalog.problems)} problem(s) rated "
            f"{criteria.min_rating}-{criteria.max_rating}"
        )
        if not problems:
            self.terminal.write("No problems matched the given rating range.\n")
            return

        logger.info("Step 4: Browsing")
        controller = PaginationController(
            problems,
            catalog.solved,
            self.terminal,
            self.settings.page_size,
            renderer=self.renderer,
        )
        controller.run()

    def run(self) -> None:
        tags = self.resolve_tags(self.ask_topics())
        catalog, criteria = self.load(tags)
        self.browse(catalog, criteria)
