"""Market price signal."""

from abc import ABC, abstractmethod


class MarketPriceOracle(ABC):
    """Provides the mean wholesale price per MWh."""

    @abstractmethod
    def mean_market_price(self) -> float:
        """Current mean market price per large-volume energy unit."""
        pass


class FixedMarketPriceOracle(MarketPriceOracle):
    """Oracle returning a settable constant, for wiring and tests."""

    def __init__(self, price: float) -> None:
        self._price = price

    def mean_market_price(self) -> float:
        return self._price

    def update(self, price: float) -> None:
        self._price = price
