"""Append-only index of competitor tariff specifications."""

from retailbroker.market.enums import PowerType
from retailbroker.market.models import TariffSpecification


class CompetingTariffIndex:
    """Foreign tariff specs grouped by power type, in arrival order.

    Repeated announcements of the same spec are kept as separate entries.
    """

    def __init__(self) -> None:
        self._by_power_type: dict[PowerType, list[TariffSpecification]] = {}

    def clear(self) -> None:
        self._by_power_type.clear()

    def record(self, spec: TariffSpecification) -> None:
        self._by_power_type.setdefault(spec.power_type, []).append(spec)

    def list_for(self, power_type: PowerType) -> tuple[TariffSpecification, ...]:
        return tuple(self._by_power_type.get(power_type, ()))

    def power_types(self) -> list[PowerType]:
        return list(self._by_power_type)

    def __len__(self) -> int:
        return sum(len(specs) for specs in self._by_power_type.values())
