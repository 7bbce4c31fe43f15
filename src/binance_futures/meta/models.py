"""Normalized instrument metadata.

CRITICAL: All quantities, prices and fees are Decimal. Never use float here.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType

from binance_futures.meta.decimals import round_to_step


@dataclass(frozen=True, order=True)
class InstrumentPair:
    """A tradable (base, counter) currency pair, e.g. BTC/USDT."""

    base: str
    counter: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "base", self.base.upper())
        object.__setattr__(self, "counter", self.counter.upper())

    @classmethod
    def parse(cls, text: str) -> "InstrumentPair":
        """Build a pair from its "BASE/COUNTER" rendering."""
        base, sep, counter = text.partition("/")
        if not sep or not base or not counter:
            raise ValueError(f"Invalid currency pair: {text!r}")
        return cls(base, counter)

    def __str__(self) -> str:
        return f"{self.base}/{self.counter}"


@dataclass(frozen=True)
class InstrumentConstraints:
    """Trading constraints for one instrument.

    Quantity bounds are in base currency, counter bounds in quote currency
    (notional). A bound is None when the venue sent no filter for it.
    """

    trading_fee: Decimal
    min_amount: Decimal | None
    max_amount: Decimal | None
    counter_min_amount: Decimal | None
    counter_max_amount: Decimal | None
    base_precision: int
    price_precision: int
    step_size: Decimal | None
    market_order_allowed: bool

    def round_amount(self, amount: Decimal) -> Decimal:
        """Round an order amount down onto the LOT_SIZE grid (or base precision).

        Not used by catalog building; order-sizing code calls it before
        submitting a quantity.
        """
        if self.step_size is not None and self.step_size > 0:
            return round_to_step(amount, self.step_size)
        return round_to_step(amount, Decimal(1).scaleb(-self.base_precision))


@dataclass(frozen=True)
class CurrencyPrecision:
    """Decimal precision of a bare currency as reported by the last symbol touching it."""

    scale: int
    # exchangeInfo has no withdrawal data; set by callers merging account/asset info
    withdrawal_fee: Decimal | None = None

    def merged_with(self, previous: "CurrencyPrecision | None") -> "CurrencyPrecision":
        """Upsert onto a previous entry: new scale wins, a known fee is kept."""
        if previous is None or self.withdrawal_fee is not None:
            return self
        return CurrencyPrecision(scale=self.scale, withdrawal_fee=previous.withdrawal_fee)


@dataclass(frozen=True)
class Catalog:
    """Published instrument catalog. Both maps are read-only views."""

    instruments: Mapping[InstrumentPair, InstrumentConstraints] = field(
        default_factory=lambda: MappingProxyType({})
    )
    currencies: Mapping[str, CurrencyPrecision] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def freeze(
        cls,
        instruments: dict[InstrumentPair, InstrumentConstraints],
        currencies: dict[str, CurrencyPrecision],
    ) -> "Catalog":
        """Wrap freshly built maps; the caller must drop its own references."""
        return cls(
            instruments=MappingProxyType(instruments),
            currencies=MappingProxyType(currencies),
        )

    @property
    def pairs(self) -> list[InstrumentPair]:
        return sorted(self.instruments)

    def __len__(self) -> int:
        return len(self.instruments)
