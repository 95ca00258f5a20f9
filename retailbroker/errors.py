"""Exception hierarchy for the broker core.

All domain exceptions inherit from RetailBrokerError. Inbound event
handlers raise these; PortfolioManager.handle() catches them so that one
bad event never blocks the rest of the tick.
"""


class RetailBrokerError(Exception):
    """Base exception for all broker core errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class CustomerNotFoundError(RetailBrokerError):
    """Raised when a customer cannot be resolved by name and power type."""

    def __init__(self, customer_name: str, power_type: str) -> None:
        super().__init__(
            f"Customer not found: name={customer_name} power_type={power_type}"
        )
        self.customer_name = customer_name
        self.power_type = power_type


class TariffNotFoundError(RetailBrokerError):
    """Raised when an event references no tariff specification at all."""


class UnsupportedEventError(RetailBrokerError):
    """Raised when no handler is registered for an inbound event type."""


class InvalidTimestampError(RetailBrokerError):
    """Raised when a timestamp cannot be placed on the tick grid."""
