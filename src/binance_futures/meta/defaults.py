"""Venue-wide facts that Binance does not publish through exchangeInfo."""

from decimal import Decimal

TRADING_FEE = Decimal("0.1")  # Trading fee at Binance is 0.1 %
DEFAULT_PRECISION = 8  # ceiling for base and price precision

TRADING_STATUS = "TRADING"
MARKET_ORDER_TYPE = "MARKET"

PRICE_FILTER = "PRICE_FILTER"
LOT_SIZE = "LOT_SIZE"
MIN_NOTIONAL = "MIN_NOTIONAL"
