"""Exchange-layer result types."""

from dataclasses import dataclass

from binance_futures.exceptions import MetadataInitializationFailed
from binance_futures.meta.models import Catalog


@dataclass(frozen=True)
class RefreshResult:
    """Outcome of one metadata refresh.

    Exactly one of ``catalog`` and ``error`` is set. ``error.stage`` says
    whether the fetch or the normalization failed.
    """

    catalog: Catalog | None = None
    error: MetadataInitializationFailed | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
