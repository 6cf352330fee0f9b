"""Application configuration via pydantic-settings."""

import json
import re
from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from topflow.core.exceptions import ConfigurationError

DEFAULT_WATCHLIST: tuple[str, ...] = (
    "AAPL",
    "MSFT",
    "NVDA",
    "META",
    "AMZN",
    "AMD",
    "GOOGL",
    "TSLA",
)

# Ticker symbols as Twelve Data writes them, e.g. "BRK.B" or "BF-B"
_SYMBOL_PATTERN = re.compile(r"[A-Z0-9.\-]+")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        frozen=True,
    )

    # Core
    env: Literal["development", "production"] = Field(
        default="development", alias="TOPFLOW_ENV"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", alias="TOPFLOW_LOG_LEVEL"
    )

    # Twelve Data (quotes)
    twelve_data_api_key: SecretStr | None = Field(
        default=None,
        alias="TWELVE_DATA_API_KEY",
        description="Twelve Data API key embedded in every quote request",
    )
    exchange: str = Field(default="NASDAQ", alias="TOPFLOW_EXCHANGE")
    http_timeout: float = Field(default=30.0, gt=0, alias="TOPFLOW_HTTP_TIMEOUT")
    field_parser: Literal["scan", "json"] = Field(
        default="scan",
        alias="TOPFLOW_FIELD_PARSER",
        description="How numeric fields are read out of a quote payload",
    )

    # Discord (notifications)
    discord_webhook_url: SecretStr | None = Field(
        default=None,
        alias="DISCORD_WEBHOOK_URL",
        description="Discord webhook that receives the top flow alert",
    )

    # Scanning
    # NoDecode: the validator below accepts CSV as well as JSON arrays
    watchlist: Annotated[tuple[str, ...], NoDecode] = Field(
        default=DEFAULT_WATCHLIST, alias="TOPFLOW_WATCHLIST"
    )
    scan_interval_seconds: float = Field(
        default=1800.0,  # 30 minutes
        gt=0,
        allow_inf_nan=False,
        alias="TOPFLOW_SCAN_INTERVAL",
        description="Pause between the end of one scan cycle and the start of the next",
    )

    @field_validator("watchlist", mode="before")
    @classmethod
    def parse_watchlist(cls, v: str | list[str] | tuple[str, ...] | None) -> tuple[str, ...]:
        if v is None:
            return DEFAULT_WATCHLIST
        if isinstance(v, str):
            v = v.strip()
            if v.startswith("["):
                v = json.loads(v)
            else:
                v = [s.strip() for s in v.split(",") if s.strip()]
        symbols = tuple(s.strip().lstrip("$").upper() for s in v if s.strip())
        if not symbols:
            raise ValueError("Watchlist must contain at least one symbol")
        invalid = [s for s in symbols if not _SYMBOL_PATTERN.fullmatch(s)]
        if invalid:
            raise ValueError(f"Invalid watchlist symbols: {invalid!r}")
        return symbols

    def require_credentials(self) -> SecretStr:
        """Fail fast when a required secret is missing.

        Returns:
            The Twelve Data API key

        Raises:
            ConfigurationError: naming the first missing value
        """
        if self.twelve_data_api_key is None or not self.twelve_data_api_key.get_secret_value():
            raise ConfigurationError("Twelve Data API key not set (TWELVE_DATA_API_KEY)")
        if self.discord_webhook_url is None or not self.discord_webhook_url.get_secret_value():
            raise ConfigurationError("Discord webhook URL not set (DISCORD_WEBHOOK_URL)")
        return self.twelve_data_api_key

    @property
    def is_production(self) -> bool:
        return self.env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
