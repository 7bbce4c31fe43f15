"""Filter resolver: reduce one symbol's filter list into InstrumentConstraints.

Each recognised filter kind writes a disjoint set of fields, so the result
does not depend on the order the venue lists filters in. A repeated kind
would break that, so it is rejected.
"""

from collections.abc import Iterable

from binance_futures.exceptions import DuplicateFilter
from binance_futures.meta import defaults
from binance_futures.meta.decimals import decimal_places, parse_exact
from binance_futures.meta.models import InstrumentConstraints
from binance_futures.meta.raw import RawFilter

_RECOGNISED = frozenset({defaults.PRICE_FILTER, defaults.LOT_SIZE, defaults.MIN_NOTIONAL})


def resolve_filters(
    filters: Iterable[RawFilter],
    order_types: Iterable[str],
) -> InstrumentConstraints:
    """Compute normalized trading constraints from raw venue filters.

    Args:
        filters: The symbol's filters, in any order.
        order_types: The symbol's declared order types.

    Returns:
        Constraints with precision capped at DEFAULT_PRECISION and the
        venue-wide TRADING_FEE.

    Raises:
        MalformedDecimal: If a filter carries an invalid numeric field.
        DuplicateFilter: If PRICE_FILTER, LOT_SIZE or MIN_NOTIONAL repeats.
    """
    base_precision = defaults.DEFAULT_PRECISION
    price_precision = defaults.DEFAULT_PRECISION
    min_amount = max_amount = step_size = None
    counter_min_amount = counter_max_amount = None

    seen: set[str] = set()
    for raw in filters:
        kind = raw.filter_type
        if kind not in _RECOGNISED:
            continue
        if kind in seen:
            raise DuplicateFilter(kind)
        seen.add(kind)

        if kind == defaults.PRICE_FILTER:
            price_precision = min(price_precision, decimal_places(raw.tick_size, "tickSize"))
            counter_max_amount = parse_exact(raw.max_price, "maxPrice")
        elif kind == defaults.LOT_SIZE:
            base_precision = min(base_precision, decimal_places(raw.step_size, "stepSize"))
            min_amount = parse_exact(raw.min_qty, "minQty")
            max_amount = parse_exact(raw.max_qty, "maxQty")
            step_size = parse_exact(raw.step_size, "stepSize")
        else:
            counter_min_amount = parse_exact(raw.min_notional, "minNotional")

    return InstrumentConstraints(
        trading_fee=defaults.TRADING_FEE,
        min_amount=min_amount,
        max_amount=max_amount,
        counter_min_amount=counter_min_amount,
        counter_max_amount=counter_max_amount,
        base_precision=base_precision,
        price_precision=price_precision,
        step_size=step_size,
        market_order_allowed=defaults.MARKET_ORDER_TYPE in set(order_types),
    )
