"""Configuration system using pydantic-settings with environment variable loading."""

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class AlphaVantageSettings(BaseSettings):
    """Alpha Vantage market-data API settings.

    The API key is an opaque value passed through to the query string unchanged.
    """

    model_config = SettingsConfigDict(env_prefix="ALPHAVANTAGE_")

    api_key: SecretStr = SecretStr("")
    base_url: str = "https://www.alphavantage.co/query"
    timeout_seconds: float = 10.0
    outputsize: str = "compact"  # ~100 most recent trading days


class DashboardSettings(BaseSettings):
    """Dashboard server configuration."""

    model_config = SettingsConfigDict(env_prefix="DASHBOARD_")

    host: str = "127.0.0.1"
    port: int = 8080


class AppSettings(BaseSettings):
    """Root application settings, composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    log_level: str = "INFO"
    alphavantage: AlphaVantageSettings = AlphaVantageSettings()
    dashboard: DashboardSettings = DashboardSettings()
