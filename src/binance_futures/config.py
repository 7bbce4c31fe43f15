"""Configuration system using pydantic-settings with environment variable loading."""

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SSL_URI = "https://fapi.binance.com"


class ExchangeSettings(BaseSettings):
    """Binance USD-M futures connection settings."""

    model_config = SettingsConfigDict(env_prefix="BINANCE_")

    api_key: SecretStr = SecretStr("")
    api_secret: SecretStr = SecretStr("")
    ssl_uri: str = DEFAULT_SSL_URI
    exchange_name: str = "Binance"
    exchange_description: str = "Binance Future Exchange."
    recv_window: int = 5000  # ms; Binance authenticates by timestamp + recvWindow


class ResilienceSettings(BaseSettings):
    """Rate-limit and timeout policy handed to the ccxt transport.

    Owned by whoever builds the client and passed in by reference, so two
    clients never share hidden state.
    """

    model_config = SettingsConfigDict(env_prefix="RESILIENCE_")

    enable_rate_limit: bool = True
    rate_limit_ms: int = 50  # min delay between requests when throttling
    request_timeout_ms: int = 10000


class AppSettings(BaseSettings):
    """Root application settings, composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    log_level: str = "INFO"
    exchange: ExchangeSettings = ExchangeSettings()
    resilience: ResilienceSettings = ResilienceSettings()
