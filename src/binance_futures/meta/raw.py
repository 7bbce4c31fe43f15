"""Venue-native exchangeInfo records, as delivered by GET /fapi/v1/exchangeInfo.

Numeric filter fields stay as the venue's strings here; they are only
turned into Decimals by the filter resolver. Parsing checks shape, not
numbers.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from binance_futures.exceptions import MalformedMetadata
from binance_futures.meta.defaults import TRADING_STATUS


def _require(payload: Mapping[str, Any], key: str, owner: str) -> Any:
    try:
        return payload[key]
    except KeyError:
        raise MalformedMetadata(f"{owner} is missing {key!r}") from None


def _as_mapping(value: Any, owner: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise MalformedMetadata(f"{owner} must be an object, got {type(value).__name__}")
    return value


def _as_list(value: Any, owner: str) -> list[Any]:
    if not isinstance(value, list):
        raise MalformedMetadata(f"{owner} must be a list, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class RawFilter:
    """One filter rule from a symbol's ``filters`` array.

    Only the fields of the three recognised kinds are kept; anything else
    the venue sends is dropped.
    """

    filter_type: str
    tick_size: str | None = None
    min_price: str | None = None
    max_price: str | None = None
    min_qty: str | None = None
    max_qty: str | None = None
    step_size: str | None = None
    min_notional: str | None = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "RawFilter":
        payload = _as_mapping(payload, "filter")
        # Futures name the MIN_NOTIONAL field "notional", spot "minNotional"
        min_notional = payload.get("minNotional", payload.get("notional"))
        return cls(
            filter_type=str(_require(payload, "filterType", "filter")),
            tick_size=payload.get("tickSize"),
            min_price=payload.get("minPrice"),
            max_price=payload.get("maxPrice"),
            min_qty=payload.get("minQty"),
            max_qty=payload.get("maxQty"),
            step_size=payload.get("stepSize"),
            min_notional=min_notional,
        )


@dataclass(frozen=True)
class RawSymbol:
    """A single venue symbol (e.g. BTCUSDT) with its filters.

    Only TRADING symbols are parsed strictly. Any other status keeps a
    best-effort record with no filters or order types.
    """

    symbol: str
    base_asset: str
    quote_asset: str
    status: str
    base_asset_precision: Any
    quote_precision: Any
    order_types: tuple[str, ...] = ()
    filters: tuple[RawFilter, ...] = ()

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "RawSymbol":
        payload = _as_mapping(payload, "symbol")
        name = str(payload.get("symbol", "<unnamed>"))
        owner = f"symbol {name}"
        # Futures payloads carry "status"; the delivery endpoint uses "contractStatus"
        status = payload.get("status", payload.get("contractStatus"))
        if status is None:
            raise MalformedMetadata(f"{owner} is missing 'status'")
        status = str(status)
        if status != TRADING_STATUS:
            # Never normalized, so only what diagnostics need is kept
            return cls(
                symbol=name,
                base_asset=str(payload.get("baseAsset", "")),
                quote_asset=str(payload.get("quoteAsset", "")),
                status=status,
                base_asset_precision=payload.get("baseAssetPrecision"),
                quote_precision=payload.get("quotePrecision"),
            )
        return cls(
            symbol=name,
            base_asset=str(_require(payload, "baseAsset", owner)),
            quote_asset=str(_require(payload, "quoteAsset", owner)),
            status=status,
            base_asset_precision=_require(payload, "baseAssetPrecision", owner),
            quote_precision=_require(payload, "quotePrecision", owner),
            order_types=tuple(
                str(t) for t in _as_list(payload.get("orderTypes", []), f"{owner} orderTypes")
            ),
            filters=tuple(
                RawFilter.from_dict(f)
                for f in _as_list(payload.get("filters", []), f"{owner} filters")
            ),
        )


@dataclass(frozen=True)
class RawMetadataDocument:
    """The deserialized exchangeInfo response."""

    symbols: tuple[RawSymbol, ...] = field(default_factory=tuple)
    timezone: str | None = None
    server_time: int | None = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "RawMetadataDocument":
        payload = _as_mapping(payload, "exchangeInfo")
        symbols = _as_list(_require(payload, "symbols", "exchangeInfo"), "exchangeInfo symbols")
        return cls(
            symbols=tuple(RawSymbol.from_dict(s) for s in symbols),
            timezone=payload.get("timezone"),
            server_time=payload.get("serverTime"),
        )
