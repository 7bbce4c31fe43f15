"""Tests for the catalog entry point wiring."""

from unittest.mock import AsyncMock, patch

import pytest

from binance_futures import main as entry
from binance_futures.config import AppSettings
from binance_futures.exceptions import MetadataInitializationFailed


class TestRun:
    @pytest.mark.asyncio
    async def test_connects_and_closes(self, mock_settings: AppSettings, exchange_info: dict) -> None:
        with patch.object(
            entry.BinanceFuturesClient, "fetch_exchange_info", AsyncMock(return_value=exchange_info)
        ), patch.object(entry.BinanceFuturesClient, "close", AsyncMock()) as close:
            await entry.run(mock_settings)
        close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_closes_on_failure(self, mock_settings: AppSettings) -> None:
        with patch.object(
            entry.BinanceFuturesClient,
            "fetch_exchange_info",
            AsyncMock(side_effect=ConnectionError("down")),
        ), patch.object(entry.BinanceFuturesClient, "close", AsyncMock()) as close:
            with pytest.raises(MetadataInitializationFailed):
                await entry.run(mock_settings)
        close.assert_awaited_once()
