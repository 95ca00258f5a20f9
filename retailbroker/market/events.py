"""Inbound market events.

Each event is delivered at most once; arrival order across event types
within a tick is unspecified.
"""

from typing import Literal
from uuid import UUID

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field

from retailbroker.market.enums import PowerType, TransactionType
from retailbroker.market.models import CustomerInfo, TariffSpecification, TariffStatus


class MarketEvent(BaseModel):
    """Base for inbound events."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    kind: str


class BootstrapUsage(MarketEvent):
    """Historical net usage of a customer population, oldest value first."""

    kind: Literal["bootstrap_usage"] = "bootstrap_usage"
    customer_name: str
    power_type: PowerType
    series: tuple[float, ...] = Field(default_factory=tuple)
    population: int | None = Field(
        default=None,
        ge=0,
        description="Population the series was measured over",
    )


class TariffAnnounced(MarketEvent):
    """A tariff specification published by any broker."""

    kind: Literal["tariff_announced"] = "tariff_announced"
    spec: TariffSpecification


class TariffStatusReport(MarketEvent):
    """Market acknowledgement of a tariff submission."""

    kind: Literal["tariff_status"] = "tariff_status"
    status: TariffStatus


class TariffTransaction(MarketEvent):
    """Subscription change or metered energy under one of our tariffs."""

    kind: Literal["tariff_transaction"] = "tariff_transaction"
    tx_type: TransactionType
    tariff: TariffSpecification | None
    customer: CustomerInfo
    kwh: float = 0.0
    customer_count: int = Field(default=0, ge=0)
    posted_time: AwareDatetime


class BalancingExercised(MarketEvent):
    """Notification that the operator exercised a balancing order."""

    kind: Literal["balancing_exercised"] = "balancing_exercised"
    kwh: float
    tariff_id: UUID | None = None
