"""Per-tariff subscription records, one per (tariff, customer)."""

from collections.abc import Iterator
from uuid import UUID

from retailbroker.market.models import CustomerInfo, TariffSpecification
from retailbroker.observability.logging import get_logger
from retailbroker.observability.metrics import SUBSCRIPTION_RECORDS
from retailbroker.usage.profiles import UsageProfileStore
from retailbroker.usage.record import CustomerRecord

logger = get_logger(__name__)


class SubscriptionLedger:
    """Usage of each customer while subscribed to one of our tariffs.

    A subscription record starts as a copy of the customer's profile
    record and evolves independently afterwards, so the profile keeps the
    long-run estimate while customers move between tariffs. Revoking a
    tariff leaves its records in place.
    """

    def __init__(self, profiles: UsageProfileStore) -> None:
        self._profiles = profiles
        self._tariffs: dict[UUID, TariffSpecification] = {}
        self._subscriptions: dict[UUID, dict[UUID, CustomerRecord]] = {}

    def clear(self) -> None:
        # the gauge is shared by every ledger in the process
        SUBSCRIPTION_RECORDS.dec(self.record_count())
        self._tariffs.clear()
        self._subscriptions.clear()

    def register(self, spec: TariffSpecification) -> None:
        """Track a tariff with no subscribers yet."""
        self._tariffs.setdefault(spec.id, spec)
        self._subscriptions.setdefault(spec.id, {})

    def get(self, tariff_id: UUID, customer: CustomerInfo) -> CustomerRecord | None:
        """Get an existing subscription record."""
        return self._subscriptions.get(tariff_id, {}).get(customer.id)

    def get_or_create(
        self, spec: TariffSpecification, customer: CustomerInfo
    ) -> CustomerRecord:
        """Get a subscription record, seeding it from the profile if absent."""
        self.register(spec)
        by_customer = self._subscriptions[spec.id]
        record = by_customer.get(customer.id)
        if record is None:
            profile = self._profiles.get_or_create(spec.power_type, customer)
            record = profile.snapshot()
            by_customer[customer.id] = record
            SUBSCRIPTION_RECORDS.inc()
            logger.debug(
                "subscription_record_created",
                tariff_id=str(spec.id),
                customer=customer.name,
            )
        return record

    def tariff(self, tariff_id: UUID) -> TariffSpecification | None:
        return self._tariffs.get(tariff_id)

    def tariff_ids(self) -> list[UUID]:
        return list(self._subscriptions)

    def records(self, tariff_id: UUID | None = None) -> Iterator[CustomerRecord]:
        """Iterate subscription records, optionally for one tariff."""
        if tariff_id is not None:
            yield from self._subscriptions.get(tariff_id, {}).values()
            return
        for records in self._subscriptions.values():
            yield from records.values()

    def aggregate_usage(self, tick: int) -> float:
        """Net energy impact on the broker's balance at a tick.

        Customer consumption is a liability to the broker, hence the sign.
        """
        return -sum(record.get_usage(tick) for record in self.records())

    def record_count(self) -> int:
        return sum(len(records) for records in self._subscriptions.values())

    def is_empty(self) -> bool:
        return not self._subscriptions

    def __len__(self) -> int:
        return len(self._subscriptions)
