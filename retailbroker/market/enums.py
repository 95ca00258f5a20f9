"""Enums for the market domain."""

from enum import Enum


class PowerType(str, Enum):
    """Energy behavior of a customer population.

    Each value belongs to one generic family (consumption, production or
    storage). Interruptible types accept curtailment by the broker.
    """

    CONSUMPTION = "consumption"
    INTERRUPTIBLE_CONSUMPTION = "interruptible_consumption"
    THERMAL_STORAGE_CONSUMPTION = "thermal_storage_consumption"
    PRODUCTION = "production"
    SOLAR_PRODUCTION = "solar_production"
    WIND_PRODUCTION = "wind_production"
    STORAGE = "storage"
    BATTERY_STORAGE = "battery_storage"
    ELECTRIC_VEHICLE = "electric_vehicle"

    @property
    def generic(self) -> "PowerType":
        """The family this power type belongs to."""
        return _GENERIC[self]

    @property
    def is_consumption(self) -> bool:
        return self.generic is PowerType.CONSUMPTION

    @property
    def is_production(self) -> bool:
        return self.generic is PowerType.PRODUCTION

    @property
    def is_storage(self) -> bool:
        return self.generic is PowerType.STORAGE

    @property
    def is_interruptible(self) -> bool:
        return self in (
            PowerType.INTERRUPTIBLE_CONSUMPTION,
            PowerType.THERMAL_STORAGE_CONSUMPTION,
        )


_GENERIC: dict[PowerType, PowerType] = {
    PowerType.CONSUMPTION: PowerType.CONSUMPTION,
    PowerType.INTERRUPTIBLE_CONSUMPTION: PowerType.CONSUMPTION,
    PowerType.THERMAL_STORAGE_CONSUMPTION: PowerType.CONSUMPTION,
    PowerType.PRODUCTION: PowerType.PRODUCTION,
    PowerType.SOLAR_PRODUCTION: PowerType.PRODUCTION,
    PowerType.WIND_PRODUCTION: PowerType.PRODUCTION,
    PowerType.STORAGE: PowerType.STORAGE,
    PowerType.BATTERY_STORAGE: PowerType.STORAGE,
    PowerType.ELECTRIC_VEHICLE: PowerType.STORAGE,
}


class TransactionType(str, Enum):
    """Kind of tariff transaction reported by the market."""

    SIGNUP = "signup"
    WITHDRAW = "withdraw"
    PRODUCE = "produce"
    CONSUME = "consume"
    PERIODIC = "periodic"
    PUBLISH = "publish"
    REVOKE = "revoke"


class TariffStatusCode(str, Enum):
    """Outcome the market reports for a tariff submission."""

    SUCCESS = "success"
    NO_SUCH_TARIFF = "no_such_tariff"
    NO_SUCH_UPDATE = "no_such_update"
    INVALID_TARIFF = "invalid_tariff"
    INVALID_UPDATE = "invalid_update"
    DUPLICATE_ID = "duplicate_id"
    ILLEGAL_OPERATION = "illegal_operation"
    UNSUPPORTED = "unsupported"
