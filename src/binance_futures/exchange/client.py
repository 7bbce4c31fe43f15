"""Abstract exchange client interface.

Defines the contract sibling services (market data, account, trade) depend
on. Binance-specific details stay in the concrete implementation.
"""

from abc import ABC, abstractmethod

from binance_futures.exchange.types import RefreshResult
from binance_futures.meta.models import Catalog, CurrencyPrecision, InstrumentConstraints, InstrumentPair


class ExchangeClient(ABC):
    """Abstract base class for exchange API clients."""

    @abstractmethod
    async def connect(self) -> None:
        """Initialize the session and publish the first instrument catalog."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Clean up resources (CRITICAL for ccxt async)."""
        ...

    @abstractmethod
    async def fetch_exchange_info(self) -> dict:
        """Fetch the raw exchangeInfo document. No retry is done here."""
        ...

    @abstractmethod
    async def refresh_metadata(self) -> Catalog:
        """Rebuild the catalog and swap it in, raising on failure."""
        ...

    @abstractmethod
    async def try_refresh_metadata(self) -> RefreshResult:
        """Same as refresh_metadata, but report failure as a value."""
        ...

    @property
    @abstractmethod
    def catalog(self) -> Catalog | None:
        """The currently published catalog, or None before the first refresh."""
        ...

    @abstractmethod
    def get_instrument(self, pair: InstrumentPair | str) -> InstrumentConstraints:
        """Get trading constraints for a pair from the published catalog."""
        ...

    @abstractmethod
    def get_currency_precision(self, currency: str) -> CurrencyPrecision:
        """Get the precision entry for a currency from the published catalog."""
        ...
