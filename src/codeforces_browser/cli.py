"""CLI entry point for the Codeforces problem browser."""

import argparse
import sys

from loguru import logger

from codeforces_browser.application import BrowserOrchestrator
from codeforces_browser.config import Settings
from codeforces_browser.domain.exceptions import CodeforcesBrowserError
from codeforces_browser.infrastructure.terminal import Terminal


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Browse Codeforces problems by topic, rating and solved status",
    )
    parser.add_argument("--handle", help="Codeforces handle whose solved problems are marked")
    parser.add_argument("--page-size", type=int, help="Problems per page (default: 20)")
    parser.add_argument("--timeout", type=float, help="Network timeout in seconds (default: 15)")
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    return parser.parse_args(argv)


def configure_logging(settings: Settings) -> None:
    logger.remove()
    if settings.log_file:
        logger.add(settings.log_file, level=settings.log_level)
    else:
        logger.add(sys.stderr, level=settings.log_level)


def run(settings: Settings) -> None:
    orchestrator = BrowserOrchestrator(settings=settings, terminal=Terminal())
    orchestrator.run()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        settings = Settings.from_env().with_overrides(
            handle=args.handle,
            page_size=args.page_size,
            timeout=args.timeout,
            log_level="DEBUG" if args.verbose else None,
        )
    except CodeforcesBrowserError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    configure_logging(settings)
    logger.debug(f"Starting with handle={settings.handle} page_size={settings.page_size}")

    try:
        run(settings)
    except CodeforcesBrowserError as e:
        logger.error(f"Run failed: {e}")
        print(f"Error: {e}")
        return 1
    except (KeyboardInterrupt, EOFError):
        logger.info("Interrupted")

    return 0
