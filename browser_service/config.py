"""Application configuration."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Browser settings
    headless: bool = True
    channel: str = "chrome"
    chrome_user_data_dir: str | None = None

    # Window settings
    window_width: int = 1920
    window_height: int = 1080

    # Timeouts (milliseconds)
    default_timeout: int = 30000

    # Logging
    log_level: str = "INFO"
    debug: bool = False

    class Config:
        env_prefix = "BROWSER_"
        env_file = ".env"


settings = Settings()
