"""Custom exceptions for the Binance futures client.

Everything raised by the metadata pipeline lives here so the parsing,
catalog and exchange layers can share them without circular imports.
"""

from typing import Literal

RefreshStage = Literal["fetch", "build"]


class BinanceFuturesError(Exception):
    """Base exception for all client errors."""


class MalformedMetadata(BinanceFuturesError):
    """Raised when the venue's exchangeInfo document is structurally invalid."""


class MalformedDecimal(MalformedMetadata):
    """Raised when a numeric or precision field is not a valid literal."""

    def __init__(self, value: object, field: str | None = None) -> None:
        self.value = value
        self.field = field
        where = f" in {field}" if field else ""
        super().__init__(f"Malformed decimal{where}: {value!r}")


class DuplicateFilter(MalformedMetadata):
    """Raised when a symbol declares the same recognised filter kind twice."""

    def __init__(self, filter_type: str) -> None:
        self.filter_type = filter_type
        super().__init__(f"Duplicate {filter_type} filter")


class MetadataInitializationFailed(BinanceFuturesError):
    """Raised when a metadata refresh cannot produce a complete catalog.

    The original failure is chained as ``__cause__``. ``stage`` tells a
    transport/decode failure ("fetch") apart from a normalization
    failure ("build").
    """

    def __init__(self, message: str, stage: RefreshStage = "build") -> None:
        self.stage = stage
        super().__init__(f"Failed to initialize: {message}")
