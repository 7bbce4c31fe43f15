"""Binance USD-M futures client implementation via ccxt async.

Wraps ccxt.async_support.binanceusdm for transport, signing and rate
limiting, and owns the session's instrument catalog: it fetches
exchangeInfo, normalizes it, and publishes the result by swapping one
reference.
"""

import asyncio

import ccxt.async_support as ccxt_async

from binance_futures.config import DEFAULT_SSL_URI, ExchangeSettings, ResilienceSettings
from binance_futures.exceptions import MetadataInitializationFailed
from binance_futures.exchange.client import ExchangeClient
from binance_futures.exchange.types import RefreshResult
from binance_futures.logging import get_logger
from binance_futures.meta.catalog import build_catalog
from binance_futures.meta.models import Catalog, CurrencyPrecision, InstrumentConstraints, InstrumentPair
from binance_futures.meta.raw import RawMetadataDocument

logger = get_logger(__name__)


class BinanceFuturesClient(ExchangeClient):
    """Concrete Binance futures client using ccxt async."""

    def __init__(self, settings: ExchangeSettings, resilience: ResilienceSettings) -> None:
        self._settings = settings
        self._resilience = resilience

        config: dict = {
            "apiKey": settings.api_key.get_secret_value(),
            "secret": settings.api_secret.get_secret_value(),
            "enableRateLimit": resilience.enable_rate_limit,
            "rateLimit": resilience.rate_limit_ms,
            "timeout": resilience.request_timeout_ms,
            "options": {
                "recvWindow": settings.recv_window,
            },
        }

        # Point the futures endpoints at a different host (e.g. a proxy)
        if settings.ssl_uri.rstrip("/") != DEFAULT_SSL_URI:
            base = settings.ssl_uri.rstrip("/")
            config["urls"] = {
                "api": {
                    "fapiPublic": f"{base}/fapi/v1",
                    "fapiPrivate": f"{base}/fapi/v1",
                },
            }

        self._exchange = ccxt_async.binanceusdm(config)
        self._catalog: Catalog | None = None
        self._exchange_info: RawMetadataDocument | None = None
        self._refresh_lock = asyncio.Lock()

    @property
    def exchange(self) -> ccxt_async.binanceusdm:
        """Access the underlying ccxt exchange instance."""
        return self._exchange

    @property
    def resilience(self) -> ResilienceSettings:
        return self._resilience

    @property
    def catalog(self) -> Catalog | None:
        return self._catalog

    @property
    def exchange_info(self) -> RawMetadataDocument | None:
        """The raw document behind the published catalog."""
        return self._exchange_info

    @property
    def nonce_factory(self) -> None:
        raise NotImplementedError("Binance uses timestamp/recvwindow rather than a nonce")

    async def connect(self) -> None:
        """Initialize the session by publishing the first catalog."""
        logger.info("connecting_to_binance_futures", uri=self._settings.ssl_uri)
        catalog = await self.refresh_metadata()
        logger.info(
            "binance_futures_connected",
            exchange=self._settings.exchange_name,
            pair_count=len(catalog),
        )

    async def close(self) -> None:
        """Clean up ccxt async resources. CRITICAL: must be called to avoid resource leaks."""
        logger.info("closing_binance_futures_connection")
        await self._exchange.close()
        logger.info("binance_futures_connection_closed")

    async def fetch_exchange_info(self) -> dict:
        """Fetch GET /fapi/v1/exchangeInfo through ccxt's implicit API."""
        return await self._exchange.fapiPublicGetExchangeInfo()

    async def refresh_metadata(self) -> Catalog:
        """Fetch, normalize and publish a new catalog.

        Refreshes are serialized. On failure the previously published
        catalog stays in place.

        Raises:
            MetadataInitializationFailed: With stage "fetch" when the venue
                call fails and stage "build" when normalization fails.
        """
        async with self._refresh_lock:
            try:
                payload = await self.fetch_exchange_info()
            except Exception as exc:
                logger.error("metadata_refresh_failed", stage="fetch", exc_info=True)
                raise MetadataInitializationFailed(str(exc), stage="fetch") from exc

            try:
                document = RawMetadataDocument.from_dict(payload)
                catalog = build_catalog(document)
            except MetadataInitializationFailed:
                logger.error("metadata_refresh_failed", stage="build", exc_info=True)
                raise
            except Exception as exc:
                logger.error("metadata_refresh_failed", stage="build", exc_info=True)
                raise MetadataInitializationFailed(str(exc), stage="build") from exc

            self._exchange_info = document
            self._catalog = catalog
            logger.info("metadata_refreshed", pairs=len(catalog), currencies=len(catalog.currencies))
            return catalog

    async def try_refresh_metadata(self) -> RefreshResult:
        """Refresh and report the outcome as a RefreshResult instead of raising."""
        try:
            catalog = await self.refresh_metadata()
        except MetadataInitializationFailed as exc:
            return RefreshResult(error=exc)
        return RefreshResult(catalog=catalog)

    def get_instrument(self, pair: InstrumentPair | str) -> InstrumentConstraints:
        """Look up constraints for a pair ("BTC/USDT" or InstrumentPair)."""
        if isinstance(pair, str):
            pair = InstrumentPair.parse(pair)
        constraints = self._require_catalog().instruments.get(pair)
        if constraints is None:
            raise ValueError(f"Pair {pair} not found in instrument catalog")
        return constraints

    def get_currency_precision(self, currency: str) -> CurrencyPrecision:
        precision = self._require_catalog().currencies.get(currency.upper())
        if precision is None:
            raise ValueError(f"Currency {currency} not found in instrument catalog")
        return precision

    def _require_catalog(self) -> Catalog:
        if self._catalog is None:
            raise ValueError("Instrument catalog not loaded; call connect() first")
        return self._catalog
