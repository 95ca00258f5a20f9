"""Long-run usage profiles, one record per (power type, customer)."""

from collections.abc import Iterator, Sequence
from uuid import UUID

from retailbroker.market.enums import PowerType
from retailbroker.market.models import CustomerInfo
from retailbroker.observability.logging import get_logger
from retailbroker.usage.record import DEFAULT_ALPHA, CustomerRecord

logger = get_logger(__name__)


class UsageProfileStore:
    """Keyed store of profile records.

    Records are created lazily on the first bootstrap or transaction that
    touches a (power type, customer) pair and live until clear().
    """

    def __init__(self, history_length: int, alpha: float = DEFAULT_ALPHA) -> None:
        self._history_length = history_length
        self._alpha = alpha
        self._profiles: dict[PowerType, dict[UUID, CustomerRecord]] = {}

    @property
    def history_length(self) -> int:
        return self._history_length

    def clear(self) -> None:
        self._profiles.clear()

    def get(self, power_type: PowerType, customer: CustomerInfo) -> CustomerRecord | None:
        """Get an existing profile record."""
        return self._profiles.get(power_type, {}).get(customer.id)

    def get_or_create(self, power_type: PowerType, customer: CustomerInfo) -> CustomerRecord:
        """Get a profile record, creating a zeroed one if absent."""
        by_customer = self._profiles.setdefault(power_type, {})
        record = by_customer.get(customer.id)
        if record is None:
            record = CustomerRecord.empty(customer, self._history_length, self._alpha)
            by_customer[customer.id] = record
            logger.debug(
                "profile_record_created",
                customer=customer.name,
                power_type=power_type.value,
            )
        return record

    def power_types(self) -> list[PowerType]:
        """Power types with at least one profile, in first-seen order."""
        return [pt for pt, records in self._profiles.items() if records]

    def records(self, power_type: PowerType | None = None) -> Iterator[CustomerRecord]:
        """Iterate profile records, optionally for one power type."""
        if power_type is not None:
            yield from self._profiles.get(power_type, {}).values()
            return
        for records in self._profiles.values():
            yield from records.values()

    def apply_bootstrap(
        self,
        customer: CustomerInfo,
        power_type: PowerType,
        series: Sequence[float],
        tick_offset: int,
        population: int | None = None,
    ) -> CustomerRecord:
        """Seed a profile from historical usage of the whole population.

        The series was measured over the full population, so the record
        normalizes with that population for the duration of the call and
        then goes back to its own subscribed population.
        """
        record = self.get_or_create(power_type, customer)
        saved = record.subscribed_population
        record.subscribed_population = (
            customer.population if population is None else population
        )
        try:
            for i, kwh in enumerate(series):
                record.produce_consume(kwh, tick_offset + i)
        finally:
            record.subscribed_population = saved

        logger.info(
            "bootstrap_applied",
            customer=customer.name,
            power_type=power_type.value,
            values=len(series),
            tick_offset=tick_offset,
        )
        return record

    def __len__(self) -> int:
        return sum(len(records) for records in self._profiles.values())
