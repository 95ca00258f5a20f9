"""Market domain models.

Customers and tariff specifications are owned by the market; the broker
core holds references to them and never mutates them.
"""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from retailbroker.market.enums import PowerType, TariffStatusCode


def utc_now() -> datetime:
    """Return current UTC time."""
    return datetime.now(UTC)


class MarketModel(BaseModel):
    """Base for immutable market entities."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class CustomerInfo(MarketModel):
    """A customer population as published by the market."""

    id: UUID = Field(default_factory=uuid4, description="Customer identifier")
    name: str = Field(..., min_length=1, description="Customer name")
    population: int = Field(..., ge=0, description="Total individuals in the population")
    power_type: PowerType = Field(..., description="Energy behavior of the population")


class Rate(MarketModel):
    """A single price component of a tariff.

    A fixed rate has only ``value``; ``min_value`` then equals ``value``.
    """

    value: float = Field(..., description="Price per kWh")
    min_value: float | None = Field(default=None, description="Lower bound for variable rates")
    max_curtailment: float = Field(
        default=0.0,
        ge=0.0,
        le=1.0,
        description="Maximum fraction of load the broker may curtail",
    )

    @property
    def minimum(self) -> float:
        """Lowest price this rate can charge."""
        return self.value if self.min_value is None else self.min_value


class TariffSpecification(MarketModel):
    """A priced offer published by a broker."""

    id: UUID = Field(default_factory=uuid4, description="Specification identifier")
    broker: str = Field(..., description="Owning broker identity")
    power_type: PowerType
    rates: tuple[Rate, ...] = Field(default_factory=tuple)
    periodic_payment: float = Field(default=0.0, description="Payment per tick")
    supersedes: tuple[UUID, ...] = Field(
        default_factory=tuple,
        description="Ids of specifications this one replaces",
    )

    @property
    def min_rate_value(self) -> float:
        """Minimum value of the first rate, 0.0 for a spec without rates."""
        if not self.rates:
            return 0.0
        return self.rates[0].minimum


class BalancingOrder(MarketModel):
    """Standing offer letting the system operator curtail a tariff's load."""

    id: UUID = Field(default_factory=uuid4)
    broker: str
    tariff_id: UUID
    exercise_ratio: float = Field(..., ge=0.0, le=1.0)
    price: float = Field(..., description="Payment per curtailed kWh")


class TariffStatus(MarketModel):
    """Market response to a tariff submission."""

    tariff_id: UUID
    broker: str
    status: TariffStatusCode = TariffStatusCode.SUCCESS
    message: str | None = None
    created_at: datetime = Field(default_factory=utc_now)
