"""Instrument catalog builder.

Turns a whole exchangeInfo document into a Catalog. Either every eligible
symbol is normalized or the build fails; a half-built catalog never
escapes this module.
"""

from collections.abc import Mapping
from typing import Any

from binance_futures.exceptions import MetadataInitializationFailed
from binance_futures.logging import get_logger
from binance_futures.meta import defaults
from binance_futures.meta.decimals import parse_precision
from binance_futures.meta.filters import resolve_filters
from binance_futures.meta.models import (
    Catalog,
    CurrencyPrecision,
    InstrumentConstraints,
    InstrumentPair,
)
from binance_futures.meta.raw import RawMetadataDocument

logger = get_logger(__name__)


def build_catalog(document: RawMetadataDocument) -> Catalog:
    """Normalize every TRADING symbol of the document.

    Non-trading symbols (BREAK, HALT, PENDING_TRADING, ...) are skipped.
    Currency precision comes from the symbol's raw asset precision fields,
    not from its filters, and is upserted on every touch.

    Raises:
        MetadataInitializationFailed: On any malformed symbol, with the
            original error chained.
    """
    instruments: dict[InstrumentPair, InstrumentConstraints] = {}
    currencies: dict[str, CurrencyPrecision] = {}
    skipped = 0

    for symbol in document.symbols:
        if symbol.status != defaults.TRADING_STATUS:
            skipped += 1
            logger.debug("symbol_skipped", symbol=symbol.symbol, status=symbol.status)
            continue

        try:
            base_scale = parse_precision(symbol.base_asset_precision, "baseAssetPrecision")
            counter_scale = parse_precision(symbol.quote_precision, "quotePrecision")
            constraints = resolve_filters(symbol.filters, symbol.order_types)
        except Exception as exc:
            raise MetadataInitializationFailed(f"{symbol.symbol}: {exc}") from exc

        pair = InstrumentPair(symbol.base_asset, symbol.quote_asset)
        if pair in instruments:
            logger.warning("duplicate_instrument_pair", pair=str(pair), symbol=symbol.symbol)
        instruments[pair] = constraints

        for code, scale in ((pair.base, base_scale), (pair.counter, counter_scale)):
            currencies[code] = CurrencyPrecision(scale=scale).merged_with(currencies.get(code))

    logger.info(
        "catalog_built",
        pairs=len(instruments),
        currencies=len(currencies),
        skipped=skipped,
    )
    return Catalog.freeze(instruments, currencies)


def build_catalog_from_payload(payload: Mapping[str, Any]) -> Catalog:
    """Parse a raw exchangeInfo JSON mapping and build its catalog."""
    try:
        document = RawMetadataDocument.from_dict(payload)
    except Exception as exc:
        raise MetadataInitializationFailed(str(exc)) from exc
    return build_catalog(document)
