import logging
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Defaults for the column helpers, loaded from environment variables and optionally .env (local).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -------------------------
    # Detection defaults (column helpers only; detect_outliers has its own signature defaults)
    # -------------------------
    default_crit: float = Field(4.0, alias="OUTLIER_DEFAULT_CRIT")
    drop_missing: bool = Field(False, alias="OUTLIER_DROP_MISSING")

    # -------------------------
    # Logging
    # -------------------------
    log_level: str = Field("WARNING", alias="OUTLIER_LOG_LEVEL")

    def model_post_init(self, __context) -> None:
        """
        Normalize the log level name so "debug" and "DEBUG" behave the same.
        """
        self.log_level = (self.log_level or "WARNING").strip().upper()


def load_settings() -> Settings:
    """Build a fresh Settings object from the current environment."""
    return Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Attach a basic handler at the configured level (settings.log_level by default)."""
    name = (level or settings.log_level).upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


settings = Settings()
