"""Shared fixtures for unit tests."""

import pytest

from browser_service.browser import BrowserService
from browser_service.models import BrowserConfig
from browser_service.utils.logging import setup_logging

from .fakes import FakeDriver


@pytest.fixture(scope="session", autouse=True)
def configure_logging() -> None:
    setup_logging()


@pytest.fixture
def driver() -> FakeDriver:
    return FakeDriver()


@pytest.fixture
def config() -> BrowserConfig:
    return BrowserConfig(
        headless=True,
        channel=None,
        window_width=1280,
        window_height=720,
        default_timeout=5000,
    )


@pytest.fixture
def service(config: BrowserConfig, driver: FakeDriver) -> BrowserService:
    return BrowserService(config=config, driver_factory=driver)
