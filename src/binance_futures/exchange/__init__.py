"""Exchange client layer -- Binance futures API integration via ccxt."""

from binance_futures.exchange.binance_futures_client import BinanceFuturesClient
from binance_futures.exchange.client import ExchangeClient
from binance_futures.exchange.types import RefreshResult

__all__ = ["BinanceFuturesClient", "ExchangeClient", "RefreshResult"]
