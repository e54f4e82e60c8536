"""Runtime settings for ibancountry.

Settings control logging and metrics only. Nothing here changes how an
address is classified; the country table is fixed in code.

Environment Variables:
- IBANCOUNTRY_LOG_LEVEL: Logging level (default: WARNING)
- IBANCOUNTRY_JSON_LOGS: Emit JSON log lines (default: false)
- IBANCOUNTRY_DEV_MODE: Colourful console logs (default: false)
- IBANCOUNTRY_METRICS_ENABLED: Record Prometheus metrics (default: true)
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """ibancountry settings.

    All settings can be overridden via environment variables with prefix
    IBANCOUNTRY_ or a ``.env`` file in the working directory.

    Example:
        >>> os.environ['IBANCOUNTRY_LOG_LEVEL'] = 'debug'
        >>> reload_settings().log_level
        'DEBUG'
    """

    model_config = SettingsConfigDict(
        env_prefix="IBANCOUNTRY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Minimum level for emitted log entries",
    )

    json_logs: bool = Field(
        default=False,
        description="Render logs as JSON lines (ignored when dev_mode is on)",
    )

    dev_mode: bool = Field(
        default=False,
        description="Render logs for humans with colours",
    )

    metrics_enabled: bool = Field(
        default=True,
        description="Record Prometheus metrics for classifications and table builds",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Re-read settings from the environment."""
    global _settings
    _settings = Settings()
    return _settings
