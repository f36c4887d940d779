"""Data models for browser-service."""

from browser_service.models.browser import (
    DEFAULT_WAIT_UNTIL,
    DESKTOP_USER_AGENT,
    EXTRA_HTTP_HEADERS,
    BrowserConfig,
    NavigationOptions,
    Viewport,
    WaitUntil,
)

__all__ = [
    "DEFAULT_WAIT_UNTIL",
    "DESKTOP_USER_AGENT",
    "EXTRA_HTTP_HEADERS",
    "BrowserConfig",
    "NavigationOptions",
    "Viewport",
    "WaitUntil",
]
