"""Entry point: load settings, publish the instrument catalog, log a summary.

Component wiring order:
1. AppSettings (configuration)
2. Logging setup
3. ResilienceSettings handed to the client (no shared registry)
4. BinanceFuturesClient, connected once to fetch and normalize exchangeInfo
"""

import asyncio

from binance_futures.config import AppSettings
from binance_futures.exchange.binance_futures_client import BinanceFuturesClient
from binance_futures.logging import get_logger, setup_logging


async def run(settings: AppSettings | None = None) -> None:
    """Connect, log every published instrument at debug level, then close."""
    settings = settings or AppSettings()
    setup_logging(settings.log_level)
    logger = get_logger(__name__)

    client = BinanceFuturesClient(settings.exchange, settings.resilience)
    try:
        await client.connect()
        catalog = client.catalog
        for pair in catalog.pairs:
            constraints = catalog.instruments[pair]
            logger.debug(
                "instrument",
                pair=str(pair),
                base_precision=constraints.base_precision,
                price_precision=constraints.price_precision,
                min_amount=str(constraints.min_amount),
                step_size=str(constraints.step_size),
                min_notional=str(constraints.counter_min_amount),
                market=constraints.market_order_allowed,
            )
        logger.info(
            "catalog_summary",
            exchange=settings.exchange.exchange_name,
            pairs=len(catalog),
            currencies=len(catalog.currencies),
        )
    finally:
        await client.close()


def main() -> None:
    """Synchronous entry point."""
    asyncio.run(run())


if __name__ == "__main__":
    main()
