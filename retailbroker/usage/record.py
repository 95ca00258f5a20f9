"""Smoothed per-capita usage record for one customer population.

The same record type backs both the long-run profile of a customer
(keyed by power type) and its behavior under one specific tariff (keyed
by tariff). Usage is stored per capita in a cyclic buffer with one slot
per tick offset, so a week-long buffer learns a weekly shape.
"""

from pydantic import BaseModel, ConfigDict, Field

from retailbroker.market.models import CustomerInfo
from retailbroker.observability.logging import get_logger
from retailbroker.observability.metrics import USAGE_UPDATES_SKIPPED

logger = get_logger(__name__)

DEFAULT_ALPHA = 0.3


class CustomerRecord(BaseModel):
    """Subscribed population and smoothed usage of one customer."""

    model_config = ConfigDict(validate_assignment=True)

    customer: CustomerInfo = Field(..., description="Customer this record tracks")
    subscribed_population: int = Field(default=0, description="Individuals currently counted")
    usage: list[float] = Field(..., min_length=1, description="Per-capita kWh per tick slot")
    alpha: float = Field(default=DEFAULT_ALPHA, gt=0.0, lt=1.0)

    @classmethod
    def empty(
        cls,
        customer: CustomerInfo,
        history_length: int,
        alpha: float = DEFAULT_ALPHA,
    ) -> "CustomerRecord":
        """Create a record with a zeroed usage buffer."""
        return cls(customer=customer, usage=[0.0] * history_length, alpha=alpha)

    @property
    def history_length(self) -> int:
        return len(self.usage)

    def slot(self, tick: int) -> int:
        """Buffer position for a tick; Python's % already floors."""
        return tick % len(self.usage)

    def signup(self, count: int) -> None:
        """Add subscribers, capped at the customer's total population."""
        self.subscribed_population = min(
            self.customer.population, self.subscribed_population + count
        )

    def withdraw(self, count: int) -> None:
        """Remove subscribers, never going below zero."""
        remaining = self.subscribed_population - count
        if remaining < 0:
            logger.warning(
                "withdraw_below_zero",
                customer=self.customer.name,
                subscribed=self.subscribed_population,
                withdrawn=count,
            )
            remaining = 0
        self.subscribed_population = remaining

    def produce_consume(self, kwh: float, tick: int) -> bool:
        """Fold one usage observation for the whole population into the buffer.

        The first write to a zero slot stores the per-capita value as is;
        later writes are exponentially smoothed. A zero slot is taken to
        mean "never written".

        Returns:
            False if the update was skipped because nobody is subscribed
        """
        if self.subscribed_population == 0:
            logger.warning(
                "usage_update_without_population",
                customer=self.customer.name,
                tick=tick,
                kwh=kwh,
            )
            USAGE_UPDATES_SKIPPED.labels(reason="zero_population").inc()
            return False

        index = self.slot(tick)
        per_capita = kwh / self.subscribed_population
        old = self.usage[index]
        if old == 0.0:
            self.usage[index] = per_capita
        else:
            self.usage[index] = self.alpha * per_capita + (1.0 - self.alpha) * old
        return True

    def get_usage(self, tick: int) -> float:
        """Expected usage of the subscribed population at a tick."""
        if tick < 0:
            logger.warning("negative_usage_index", customer=self.customer.name, tick=tick)
            tick = 0
        return self.usage[self.slot(tick)] * self.subscribed_population

    def snapshot(self) -> "CustomerRecord":
        """Independent copy; only the customer reference is shared."""
        return CustomerRecord(
            customer=self.customer,
            subscribed_population=self.subscribed_population,
            usage=list(self.usage),
            alpha=self.alpha,
        )
