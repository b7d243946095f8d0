"""Configuration loading from environment variables and the .env file."""

from enum import Enum
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from trade_journal.instruments import catalog


class LogFormat(str, Enum):
    """Log output format."""

    JSON = "json"
    CONSOLE = "console"


class Settings(BaseSettings):
    """Application settings.

    Values come from the environment and the .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==================== Calculator defaults ====================
    default_account_size: float = Field(
        default=10_000.0,
        gt=0.0,
        description="Account size used when none is given",
    )
    default_risk_pct: float = Field(
        default=2.0,
        gt=0.0,
        le=100.0,
        description="Risk per trade (percent of account) used when none is given",
    )
    default_symbol: str = Field(
        default="EUR/USD",
        description="Instrument selected when none is given",
    )

    # ==================== Logging ====================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: LogFormat = Field(
        default=LogFormat.CONSOLE,
        description="Log output format",
    )

    # ==================== Storage ====================
    journal_dir: Path = Field(
        default=Path("data/journal"),
        description="Directory for saved trade records",
    )

    @field_validator("journal_dir", mode="before")
    @classmethod
    def parse_journal_dir(cls, v: str | Path) -> Path:
        """Coerce strings to Path."""
        return Path(v) if isinstance(v, str) else v

    @field_validator("default_symbol")
    @classmethod
    def check_default_symbol(cls, v: str) -> str:
        if catalog.lookup(v) is None:
            raise ValueError(f"unknown instrument symbol: {v}")
        return v

    def ensure_directories(self) -> None:
        """Create required directories."""
        self.journal_dir.mkdir(parents=True, exist_ok=True)


# Lazily initialized global settings
_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Reload settings from the environment."""
    global _settings
    _settings = Settings()
    return _settings
