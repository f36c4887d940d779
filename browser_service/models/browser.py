"""Browser configuration models."""

from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from browser_service.config import Settings

WaitUntil = Literal["load", "domcontentloaded", "networkidle", "commit"]

DEFAULT_WAIT_UNTIL: WaitUntil = "networkidle"

DESKTOP_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)

EXTRA_HTTP_HEADERS = {"Accept-Language": "en-US,en;q=0.9"}


class Viewport(BaseModel):
    """Page viewport size in CSS pixels."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(gt=0)
    height: int = Field(gt=0)


class BrowserConfig(BaseModel):
    """Configuration for the managed browser. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    headless: bool = True
    channel: str | None = Field(
        default="chrome", description="Browser channel; None uses bundled Chromium"
    )
    user_data_dir: str | None = Field(
        default=None, description="Profile directory; enables a persistent context"
    )
    window_width: int = Field(default=1920, gt=0)
    window_height: int = Field(default=1080, gt=0)
    default_timeout: int = Field(
        default=30000, gt=0, description="Default operation timeout in milliseconds"
    )

    @property
    def viewport(self) -> Viewport:
        """Viewport matching the browser window size."""
        return Viewport(width=self.window_width, height=self.window_height)

    @classmethod
    def from_settings(cls, settings: "Settings") -> "BrowserConfig":
        """Build a config from application settings."""
        return cls(
            headless=settings.headless,
            channel=settings.channel or None,
            user_data_dir=settings.chrome_user_data_dir or None,
            window_width=settings.window_width,
            window_height=settings.window_height,
            default_timeout=settings.default_timeout,
        )


class NavigationOptions(BaseModel):
    """Per-call navigation overrides."""

    wait_until: WaitUntil | None = Field(
        default=None, description="Load state to wait for; defaults to networkidle"
    )
    timeout: int | None = Field(
        default=None, ge=0, description="Timeout in milliseconds; 0 or None uses default"
    )
