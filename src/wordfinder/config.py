"""Configuration using pydantic-settings."""

from pydantic_settings import BaseSettings


class FinderSettings(BaseSettings):
    """Word finder configuration."""

    timeout: float = 10.0
    user_agent: str = "Mozilla/5.0 (compatible; SiteWordFinder/1.0)"
    settle_delay: float = 8.0
    consent_pause: float = 0.5
    snippet_context: int = 150
    browser: str = "chromium"
    browser_timeout: float = 30.0
    headless: bool = True
    screenshot_dir: str = "."

    model_config = {"env_prefix": "WORDFINDER_"}


settings = FinderSettings()
