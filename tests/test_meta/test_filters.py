"""Tests for the filter resolver."""

import itertools
from decimal import Decimal

import pytest

from binance_futures.exceptions import DuplicateFilter, MalformedDecimal
from binance_futures.meta.filters import resolve_filters
from binance_futures.meta.raw import RawFilter

PRICE = RawFilter(
    filter_type="PRICE_FILTER",
    tick_size="0.01000000",
    min_price="556.80",
    max_price="4529764.00000000",
)
LOT = RawFilter(
    filter_type="LOT_SIZE",
    min_qty="0.00100000",
    max_qty="1000.00000000",
    step_size="0.00100000",
)
NOTIONAL = RawFilter(filter_type="MIN_NOTIONAL", min_notional="10.00000000")
PERCENT = RawFilter(filter_type="PERCENT_PRICE")


class TestDefaults:
    """A symbol without filters keeps the precision ceiling and no bounds."""

    def test_no_filters(self) -> None:
        result = resolve_filters([], ["LIMIT"])
        assert result.base_precision == 8
        assert result.price_precision == 8
        assert result.min_amount is None
        assert result.max_amount is None
        assert result.step_size is None
        assert result.counter_min_amount is None
        assert result.counter_max_amount is None
        assert result.trading_fee == Decimal("0.1")

    def test_no_price_filter_leaves_price_untouched(self) -> None:
        result = resolve_filters([LOT, NOTIONAL], ["LIMIT"])
        assert result.price_precision == 8
        assert result.counter_max_amount is None


class TestPriceFilter:
    def test_tick_size_sets_price_precision(self) -> None:
        result = resolve_filters([PRICE], [])
        assert result.price_precision == 2

    def test_max_price_becomes_counter_max(self) -> None:
        result = resolve_filters([PRICE], [])
        assert result.counter_max_amount == Decimal("4529764")

    def test_precision_never_above_ceiling(self) -> None:
        tiny = RawFilter(filter_type="PRICE_FILTER", tick_size="0.0000000001", max_price="1")
        assert resolve_filters([tiny], []).price_precision == 8


class TestLotSize:
    def test_step_size_sets_base_precision(self) -> None:
        assert resolve_filters([LOT], []).base_precision == 3

    def test_bounds_are_stripped(self) -> None:
        result = resolve_filters([LOT], [])
        assert str(result.min_amount) == "0.001"
        assert result.max_amount == Decimal("1000")
        assert str(result.step_size) == "0.001"

    def test_malformed_step_size(self) -> None:
        bad = RawFilter(filter_type="LOT_SIZE", min_qty="1", max_qty="2", step_size="abc")
        with pytest.raises(MalformedDecimal):
            resolve_filters([bad], [])

    def test_missing_field_is_malformed(self) -> None:
        partial = RawFilter(filter_type="LOT_SIZE", step_size="0.1")
        with pytest.raises(MalformedDecimal, match="minQty"):
            resolve_filters([partial], [])


class TestMinNotional:
    def test_min_notional_becomes_counter_min(self) -> None:
        assert resolve_filters([NOTIONAL], []).counter_min_amount == Decimal("10")


class TestMarketOrders:
    def test_market_allowed(self) -> None:
        assert resolve_filters([], ["LIMIT", "MARKET"]).market_order_allowed is True

    def test_market_absent(self) -> None:
        assert resolve_filters([], ["LIMIT", "STOP_MARKET"]).market_order_allowed is False


class TestOrdering:
    def test_unknown_kinds_ignored(self) -> None:
        assert resolve_filters([PRICE, PERCENT, PERCENT], []) == resolve_filters([PRICE], [])

    def test_order_independent(self) -> None:
        results = {
            resolve_filters(list(perm), ["MARKET"])
            for perm in itertools.permutations([PRICE, LOT, NOTIONAL, PERCENT])
        }
        assert len(results) == 1

    def test_duplicate_kind_rejected(self) -> None:
        other_lot = RawFilter(filter_type="LOT_SIZE", min_qty="1", max_qty="2", step_size="1")
        with pytest.raises(DuplicateFilter, match="LOT_SIZE"):
            resolve_filters([LOT, other_lot], [])
