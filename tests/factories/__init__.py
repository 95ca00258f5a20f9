"""Test factories for creating test data."""

from tests.factories.market import CustomerFactory, TariffFactory, TransactionFactory

__all__ = [
    "CustomerFactory",
    "TariffFactory",
    "TransactionFactory",
]
