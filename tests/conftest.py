"""Shared test fixtures for the Binance futures client."""

import copy

import pytest

from binance_futures.config import AppSettings, ExchangeSettings, ResilienceSettings

# ---------------------------------------------------------------------------
# Sample exchangeInfo payload (trimmed GET /fapi/v1/exchangeInfo response)
# ---------------------------------------------------------------------------

EXCHANGE_INFO = {
    "timezone": "UTC",
    "serverTime": 1700000000000,
    "symbols": [
        {
            "symbol": "BTCUSDT",
            "status": "TRADING",
            "baseAsset": "BTC",
            "quoteAsset": "USDT",
            "baseAssetPrecision": 8,
            "quotePrecision": 8,
            "orderTypes": ["LIMIT", "MARKET", "STOP", "TAKE_PROFIT"],
            "filters": [
                {
                    "filterType": "PRICE_FILTER",
                    "minPrice": "556.80",
                    "maxPrice": "4529764.00000000",
                    "tickSize": "0.01000000",
                },
                {
                    "filterType": "LOT_SIZE",
                    "minQty": "0.00010000",
                    "maxQty": "1000.00000000",
                    "stepSize": "0.00010000",
                },
                {"filterType": "MARKET_LOT_SIZE", "minQty": "0.001", "maxQty": "120", "stepSize": "0.001"},
                {"filterType": "MIN_NOTIONAL", "notional": "10.00000000"},
                {"filterType": "PERCENT_PRICE", "multiplierUp": "1.0500", "multiplierDown": "0.9500"},
            ],
        },
        {
            "symbol": "ETHUSDT",
            "status": "TRADING",
            "baseAsset": "ETH",
            "quoteAsset": "USDT",
            "baseAssetPrecision": 8,
            "quotePrecision": 6,
            "orderTypes": ["LIMIT", "STOP"],
            "filters": [
                {
                    "filterType": "LOT_SIZE",
                    "minQty": "0.00100000",
                    "maxQty": "10000.00000000",
                    "stepSize": "0.00100000",
                },
            ],
        },
        {
            "symbol": "LUNAUSDT",
            "status": "BREAK",
            "baseAsset": "LUNA",
            "quoteAsset": "BUSD",
            "baseAssetPrecision": 8,
            "quotePrecision": 8,
            "orderTypes": ["LIMIT", "MARKET"],
            "filters": [],
        },
    ],
}


@pytest.fixture
def exchange_info() -> dict:
    """A fresh deep copy of the sample exchangeInfo payload."""
    return copy.deepcopy(EXCHANGE_INFO)


@pytest.fixture
def exchange_settings() -> ExchangeSettings:
    """Exchange settings for testing."""
    return ExchangeSettings(
        api_key="test-key",  # type: ignore[arg-type]
        api_secret="test-secret",  # type: ignore[arg-type]
    )


@pytest.fixture
def resilience_settings() -> ResilienceSettings:
    return ResilienceSettings(rate_limit_ms=100, request_timeout_ms=5000)


@pytest.fixture
def mock_settings(
    exchange_settings: ExchangeSettings, resilience_settings: ResilienceSettings
) -> AppSettings:
    """Return AppSettings with test defaults (dummy API keys)."""
    return AppSettings(
        log_level="DEBUG",
        exchange=exchange_settings,
        resilience=resilience_settings,
    )
