"""Browser session manager."""

from collections.abc import Callable
from types import TracebackType
from typing import Any

from playwright.async_api import Browser, BrowserContext, Page, Playwright, async_playwright

from browser_service.browser.launch import build_launch_options, build_page_options
from browser_service.config import settings
from browser_service.errors import BrowserError
from browser_service.models import (
    DEFAULT_WAIT_UNTIL,
    EXTRA_HTTP_HEADERS,
    BrowserConfig,
    NavigationOptions,
)
from browser_service.utils.logging import get_logger

logger = get_logger(__name__)

# Returns an object whose ``start()`` coroutine yields a running Playwright
DriverFactory = Callable[[], Any]


class BrowserService:
    """Owns a single browser instance and hands out configured pages."""

    def __init__(
        self,
        config: BrowserConfig | None = None,
        driver_factory: DriverFactory = async_playwright,
    ) -> None:
        self.config = config or BrowserConfig.from_settings(settings)
        self._driver_factory = driver_factory
        self._playwright: Playwright | None = None
        self._browser: Browser | BrowserContext | None = None

    @property
    def is_initialized(self) -> bool:
        """Whether a live browser is held."""
        return self._browser is not None

    @property
    def _disconnect_event(self) -> str:
        # Persistent contexts have no Browser object; they emit "close" instead
        return "close" if self.config.user_data_dir else "disconnected"

    async def initialize(self) -> None:
        """Launch the browser unless one is already running."""
        if self._browser is not None:
            return

        options = build_launch_options(self.config)
        logger.info(
            "Launching browser",
            headless=self.config.headless,
            channel=self.config.channel,
            user_data_dir=self.config.user_data_dir,
        )

        try:
            if self._playwright is None:
                self._playwright = await self._driver_factory().start()

            launcher = self._playwright.chromium
            browser: Browser | BrowserContext
            if self.config.user_data_dir:
                browser = await launcher.launch_persistent_context(**options)
            else:
                browser = await launcher.launch(**options)

            browser.on(self._disconnect_event, self._on_disconnected)
            self._browser = browser

        except Exception as e:
            await self._stop_driver()
            raise BrowserError.wrap("Failed to initialize browser", e) from e

        logger.info("Browser launched")

    async def get_page(self) -> Page:
        """
        Open a new page with viewport, user agent, timeout and headers applied.

        Returns:
            The new page

        Raises:
            BrowserError: If the browser is not initialized or the page
                cannot be created
        """
        if self._browser is None:
            raise BrowserError("Browser not initialized")

        try:
            if self.config.user_data_dir:
                page = await self._browser.new_page()
            else:
                page = await self._browser.new_page(**build_page_options(self.config))
            await self._setup_page(page)
        except Exception as e:
            raise BrowserError.wrap("Failed to create new page", e) from e

        logger.debug("Page created")
        return page

    async def _setup_page(self, page: Page) -> None:
        """Configure a page instance with default settings."""
        try:
            await page.set_viewport_size(self.config.viewport.model_dump())
            page.set_default_timeout(self.config.default_timeout)
            await page.set_extra_http_headers(dict(EXTRA_HTTP_HEADERS))
        except Exception as e:
            raise BrowserError.wrap("Failed to setup page", e) from e

    async def navigate_to(
        self,
        page: Page,
        url: str,
        options: NavigationOptions | None = None,
    ) -> None:
        """
        Navigate a page to a URL.

        Args:
            page: Page to navigate
            url: URL to load
            options: Optional load state and timeout overrides

        Raises:
            BrowserError: If navigation fails or times out
        """
        options = options or NavigationOptions()
        wait_until = options.wait_until or DEFAULT_WAIT_UNTIL
        timeout = options.timeout or self.config.default_timeout

        logger.info("Navigating", url=url, wait_until=wait_until, timeout=timeout)

        try:
            await page.goto(url, wait_until=wait_until, timeout=timeout)
        except Exception as e:
            raise BrowserError.wrap(f"Failed to navigate to {url}", e) from e

    async def wait_for_selector(
        self,
        page: Page,
        selector: str,
        timeout: int | None = None,
    ) -> bool:
        """
        Wait for an element matching a selector.

        Args:
            page: Page to search
            selector: Element selector
            timeout: Timeout in milliseconds; 0 or None uses the default

        Returns:
            True if the element appeared, False on timeout or any other error
        """
        try:
            await page.wait_for_selector(
                selector,
                state="attached",
                timeout=timeout or self.config.default_timeout,
            )
            return True
        except Exception as e:
            logger.debug("Selector not found", selector=selector, error=str(e))
            return False

    async def close(self) -> None:
        """Close the browser and stop the driver."""
        browser = self._browser
        if browser is not None:
            logger.info("Closing browser")

            # The close below emits the disconnect event; it is expected here
            browser.remove_listener(self._disconnect_event, self._on_disconnected)
            try:
                await browser.close()
            except Exception as e:
                browser.on(self._disconnect_event, self._on_disconnected)
                raise BrowserError.wrap("Failed to close browser", e) from e
            self._browser = None

        await self._stop_driver()

    async def _stop_driver(self) -> None:
        """Stop the Playwright driver if running."""
        playwright = self._playwright
        if playwright is None:
            return

        self._playwright = None
        try:
            await playwright.stop()
        except Exception as e:
            logger.error("Error stopping browser driver", error=str(e))

    def _on_disconnected(self, browser: Browser | BrowserContext) -> None:
        """Forget the browser after an unexpected disconnect."""
        if browser is not self._browser:
            logger.debug("Ignoring disconnect of a stale browser")
            return

        self._browser = None
        logger.warning("Browser disconnected unexpectedly")

    async def __aenter__(self) -> "BrowserService":
        await self.initialize()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()


# Global browser service instance
browser_service = BrowserService()
