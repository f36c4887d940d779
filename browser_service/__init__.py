"""Asynchronous browser session manager built on Playwright."""

from browser_service.browser import BrowserService, browser_service
from browser_service.errors import BrowserError
from browser_service.models import BrowserConfig, NavigationOptions

__version__ = "0.1.0"

__all__ = [
    "BrowserConfig",
    "BrowserError",
    "BrowserService",
    "NavigationOptions",
    "browser_service",
]
