"""Market domain: customers, tariffs, events, actions and collaborators."""

from retailbroker.market.actions import (
    Action,
    IssueBalancingOrder,
    PublishTariff,
    RevokeTariff,
)
from retailbroker.market.enums import PowerType, TariffStatusCode, TransactionType
from retailbroker.market.events import (
    BalancingExercised,
    BootstrapUsage,
    MarketEvent,
    TariffAnnounced,
    TariffStatusReport,
    TariffTransaction,
)
from retailbroker.market.models import (
    BalancingOrder,
    CustomerInfo,
    Rate,
    TariffSpecification,
    TariffStatus,
)

__all__ = [
    # Enums
    "PowerType",
    "TariffStatusCode",
    "TransactionType",
    # Models
    "BalancingOrder",
    "CustomerInfo",
    "Rate",
    "TariffSpecification",
    "TariffStatus",
    # Events
    "BalancingExercised",
    "BootstrapUsage",
    "MarketEvent",
    "TariffAnnounced",
    "TariffStatusReport",
    "TariffTransaction",
    # Actions
    "Action",
    "IssueBalancingOrder",
    "PublishTariff",
    "RevokeTariff",
]
