"""Usage estimation: smoothed customer records, profiles and subscriptions."""

from retailbroker.usage.ledger import SubscriptionLedger
from retailbroker.usage.profiles import UsageProfileStore
from retailbroker.usage.record import CustomerRecord

__all__ = [
    "CustomerRecord",
    "SubscriptionLedger",
    "UsageProfileStore",
]
