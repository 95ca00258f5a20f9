"""CustomerDirectory abstract interface and in-memory implementation."""

from abc import ABC, abstractmethod

from retailbroker.market.enums import PowerType
from retailbroker.market.models import CustomerInfo


class CustomerDirectory(ABC):
    """Resolves customer populations by name and power type."""

    @abstractmethod
    def add(self, customer: CustomerInfo) -> None:
        """Register a customer population."""
        pass

    @abstractmethod
    def find(self, name: str, power_type: PowerType) -> CustomerInfo | None:
        """Get a customer by name and power type."""
        pass

    @abstractmethod
    def all(self) -> list[CustomerInfo]:
        """List every known customer."""
        pass


class InMemoryCustomerDirectory(CustomerDirectory):
    """In-memory implementation of CustomerDirectory."""

    def __init__(self, customers: list[CustomerInfo] | None = None) -> None:
        self._customers: dict[tuple[str, PowerType], CustomerInfo] = {}
        for customer in customers or []:
            self.add(customer)

    def add(self, customer: CustomerInfo) -> None:
        self._customers[(customer.name, customer.power_type)] = customer

    def find(self, name: str, power_type: PowerType) -> CustomerInfo | None:
        return self._customers.get((name, power_type))

    def all(self) -> list[CustomerInfo]:
        return list(self._customers.values())
