"""Instrument metadata normalization -- exchangeInfo to Catalog."""

from binance_futures.meta.catalog import build_catalog, build_catalog_from_payload
from binance_futures.meta.decimals import decimal_places, round_to_step
from binance_futures.meta.filters import resolve_filters
from binance_futures.meta.models import (
    Catalog,
    CurrencyPrecision,
    InstrumentConstraints,
    InstrumentPair,
)
from binance_futures.meta.raw import RawFilter, RawMetadataDocument, RawSymbol

__all__ = [
    "Catalog",
    "CurrencyPrecision",
    "InstrumentConstraints",
    "InstrumentPair",
    "RawFilter",
    "RawMetadataDocument",
    "RawSymbol",
    "build_catalog",
    "build_catalog_from_payload",
    "decimal_places",
    "resolve_filters",
    "round_to_step",
]
