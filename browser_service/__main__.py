"""Command line entry point: open a URL and report what loaded."""

import argparse
import asyncio
import sys

from browser_service.browser import BrowserService
from browser_service.errors import BrowserError
from browser_service.models import NavigationOptions
from browser_service.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def non_negative_int(value: str) -> int:
    """Parse a timeout in milliseconds."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative: {number}")
    return number


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="browser-service",
        description="Load a page in a managed browser and print its title.",
    )
    parser.add_argument("url", help="URL to open")
    parser.add_argument("--selector", help="Selector to wait for after loading")
    parser.add_argument(
        "--wait-until",
        choices=["load", "domcontentloaded", "networkidle", "commit"],
        help="Load state to wait for (default: networkidle)",
    )
    parser.add_argument(
        "--timeout", type=non_negative_int, help="Timeout in milliseconds"
    )
    parser.add_argument(
        "--log-level", help="Log level, overriding BROWSER_LOG_LEVEL"
    )
    return parser.parse_args(argv)


async def run(args: argparse.Namespace, service: BrowserService) -> int:
    """Open the page, print its title, and return an exit code."""
    async with service:
        page = await service.get_page()
        await service.navigate_to(
            page,
            args.url,
            NavigationOptions(wait_until=args.wait_until, timeout=args.timeout),
        )

        if args.selector and not await service.wait_for_selector(
            page, args.selector, args.timeout
        ):
            logger.warning("Selector did not appear", selector=args.selector)
            return 1

        print(await page.title())
        return 0


def main(argv: list[str] | None = None, service: BrowserService | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)
    try:
        return asyncio.run(run(args, service or BrowserService()))
    except BrowserError as e:
        logger.error("Browser operation failed", error=e.message)
        return 2


if __name__ == "__main__":
    sys.exit(main())
