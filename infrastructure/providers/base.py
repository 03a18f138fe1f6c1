from datetime import date
from typing import Protocol, runtime_checkable

from domain.models.currency import ExchangeRate, RateSeries


@runtime_checkable
class RateSource(Protocol):
    """Capability interface for anything that can supply exchange rates.

    Implementations raise ProviderError on network, HTTP or payload failures.
    """

    @property
    def name(self) -> str: ...

    async def fetch_latest(self, base_currency: str) -> ExchangeRate: ...

    async def fetch_range(self, base_currency: str, start: date, end: date) -> RateSeries: ...

    async def close(self) -> None: ...
