"""Binance USD-M futures client with a normalized instrument catalog."""

__version__ = "0.1.0"
