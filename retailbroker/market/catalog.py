"""TariffCatalog abstract interface and in-memory implementation."""

from abc import ABC, abstractmethod
from uuid import UUID

from retailbroker.market.enums import PowerType
from retailbroker.market.models import BalancingOrder, TariffSpecification


class TariffCatalog(ABC):
    """Repository of tariff specifications and balancing orders.

    Holds the broker's own specs as well as any others it is told about.
    """

    @abstractmethod
    def add_specification(self, spec: TariffSpecification) -> None:
        """Store a specification, replacing any spec with the same id."""
        pass

    @abstractmethod
    def find_by_id(self, spec_id: UUID) -> TariffSpecification | None:
        """Get a specification by id."""
        pass

    @abstractmethod
    def find_by_broker(self, broker: str) -> list[TariffSpecification]:
        """List specifications owned by a broker, in insertion order."""
        pass

    @abstractmethod
    def find_by_power_type(self, power_type: PowerType) -> list[TariffSpecification]:
        """List specifications for a power type, in insertion order."""
        pass

    @abstractmethod
    def remove_specification(self, spec_id: UUID) -> bool:
        """Remove a specification. Returns False if it was unknown."""
        pass

    @abstractmethod
    def add_balancing_order(self, order: BalancingOrder) -> None:
        """Store a balancing order."""
        pass

    @abstractmethod
    def balancing_orders(self, tariff_id: UUID | None = None) -> list[BalancingOrder]:
        """List balancing orders, optionally for a single tariff."""
        pass


class InMemoryTariffCatalog(TariffCatalog):
    """In-memory implementation of TariffCatalog for testing and development."""

    def __init__(self) -> None:
        self._specs: dict[UUID, TariffSpecification] = {}
        self._orders: list[BalancingOrder] = []

    def add_specification(self, spec: TariffSpecification) -> None:
        self._specs[spec.id] = spec

    def find_by_id(self, spec_id: UUID) -> TariffSpecification | None:
        return self._specs.get(spec_id)

    def find_by_broker(self, broker: str) -> list[TariffSpecification]:
        return [spec for spec in self._specs.values() if spec.broker == broker]

    def find_by_power_type(self, power_type: PowerType) -> list[TariffSpecification]:
        return [spec for spec in self._specs.values() if spec.power_type == power_type]

    def remove_specification(self, spec_id: UUID) -> bool:
        return self._specs.pop(spec_id, None) is not None

    def add_balancing_order(self, order: BalancingOrder) -> None:
        self._orders.append(order)

    def balancing_orders(self, tariff_id: UUID | None = None) -> list[BalancingOrder]:
        if tariff_id is None:
            return list(self._orders)
        return [order for order in self._orders if order.tariff_id == tariff_id]
