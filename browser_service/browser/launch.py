"""Browser launch parameters."""

from typing import Any

from browser_service.models import DESKTOP_USER_AGENT, EXTRA_HTTP_HEADERS, BrowserConfig


def build_launch_args(config: BrowserConfig) -> list[str]:
    """Build Chrome command line arguments."""
    return [
        # Sandboxing is unavailable in most containers
        "--no-sandbox",
        "--disable-setuid-sandbox",
        # Window settings
        f"--window-size={config.window_width},{config.window_height}",
        # Performance
        "--disable-dev-shm-usage",
        # Hide navigator.webdriver
        "--disable-blink-features=AutomationControlled",
    ]


def build_launch_options(config: BrowserConfig) -> dict[str, Any]:
    """
    Build keyword arguments for the Playwright launcher.

    With a profile directory the result is meant for
    ``launch_persistent_context`` and also carries the context-level page
    defaults (viewport, user agent, headers), since a persistent context
    cannot be given them per page.

    Args:
        config: Browser configuration

    Returns:
        Keyword arguments for ``launch`` or ``launch_persistent_context``
    """
    options: dict[str, Any] = {
        "headless": config.headless,
        "args": build_launch_args(config),
    }
    if config.channel:
        options["channel"] = config.channel

    if config.user_data_dir:
        options["user_data_dir"] = config.user_data_dir
        options["viewport"] = config.viewport.model_dump()
        options["user_agent"] = DESKTOP_USER_AGENT
        options["extra_http_headers"] = dict(EXTRA_HTTP_HEADERS)

    return options


def build_page_options(config: BrowserConfig) -> dict[str, Any]:
    """Build keyword arguments for ``Browser.new_page``."""
    return {
        "viewport": config.viewport.model_dump(),
        "user_agent": DESKTOP_USER_AGENT,
    }
