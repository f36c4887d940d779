"""Browser management module."""

from browser_service.browser.launch import (
    build_launch_args,
    build_launch_options,
    build_page_options,
)
from browser_service.browser.service import BrowserService, browser_service

__all__ = [
    "BrowserService",
    "browser_service",
    "build_launch_args",
    "build_launch_options",
    "build_page_options",
]
