from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="A11Y_", case_sensitive=False, populate_by_name=True)

    env: str = "dev"

    # Browser
    headless: bool = True
    window_width: int = 1920
    window_height: int = 1080
    use_driver_manager: bool = True  # False lets Selenium Manager locate chromedriver
    chrome_binary: str | None = None
    page_load_timeout_s: float = 30.0
    script_timeout_s: float = 60.0

    # Fixtures and artifacts
    fixtures_dir: Path = Path("tests/resources/html")
    artifacts_dir: Path = Path("axe-results")

    # axe-core
    axe_script: Path | None = None  # None uses the copy bundled with axe-selenium-python
    inject_frames: bool = True
    max_frame_depth: int = 5

    # Logging ("0" silent, "1" info, "2" debug)
    log_level: str = Field(default="0", validation_alias=AliasChoices("A11Y_LOG_LEVEL", "LOG_LEVEL"))
    log_file: str | None = Field(default=None, validation_alias=AliasChoices("A11Y_LOG_FILE", "LOG_FILE"))
    log_json: bool = False


settings = Settings()
