import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    APP_TITLE: str = "report-pager"

    PAGE_LEN: int = 5
    MAX_PAGE_LEN: int = 100

    LOG_LEVEL: str = "INFO"

    HOST: str = "127.0.0.1"
    PORT: int = 8000

    @property
    def log_level(self) -> int:
        level = logging.getLevelName((self.LOG_LEVEL or "").strip().upper())
        return level if isinstance(level, int) else logging.INFO


settings = Settings()
