"""Tests for market domain models and enums."""

from datetime import datetime, timedelta

import pytest
from pydantic import ValidationError

from retailbroker.market.actions import IssueBalancingOrder, PublishTariff
from retailbroker.market.enums import PowerType, TransactionType
from retailbroker.market.events import TariffTransaction
from retailbroker.market.models import CustomerInfo, Rate, TariffSpecification
from tests.factories import CustomerFactory, TariffFactory, TransactionFactory


class TestPowerType:
    """Tests for power type families."""

    @pytest.mark.parametrize(
        "power_type",
        [
            PowerType.CONSUMPTION,
            PowerType.INTERRUPTIBLE_CONSUMPTION,
            PowerType.THERMAL_STORAGE_CONSUMPTION,
        ],
    )
    def test_consumption_family(self, power_type) -> None:
        assert power_type.is_consumption
        assert not power_type.is_production

    def test_production_family(self) -> None:
        assert PowerType.WIND_PRODUCTION.is_production
        assert not PowerType.WIND_PRODUCTION.is_consumption

    def test_interruptible(self) -> None:
        assert PowerType.INTERRUPTIBLE_CONSUMPTION.is_interruptible
        assert not PowerType.CONSUMPTION.is_interruptible
        assert not PowerType.BATTERY_STORAGE.is_interruptible

    def test_storage_family(self) -> None:
        assert PowerType.ELECTRIC_VEHICLE.is_storage
        assert PowerType.ELECTRIC_VEHICLE.generic is PowerType.STORAGE


class TestRate:
    """Tests for Rate."""

    def test_fixed_rate_minimum_is_value(self) -> None:
        assert Rate(value=-0.1).minimum == -0.1

    def test_explicit_minimum(self) -> None:
        assert Rate(value=-0.1, min_value=-0.3).minimum == -0.3

    def test_curtailment_bounds(self) -> None:
        with pytest.raises(ValidationError):
            Rate(value=0.1, max_curtailment=1.5)


class TestTariffSpecification:
    """Tests for TariffSpecification."""

    def test_ids_are_unique(self) -> None:
        assert TariffFactory.create().id != TariffFactory.create().id

    def test_min_rate_value_uses_first_rate(self) -> None:
        spec = TariffSpecification(
            broker="me",
            power_type=PowerType.CONSUMPTION,
            rates=(Rate(value=-0.2), Rate(value=-0.5)),
        )
        assert spec.min_rate_value == -0.2

    def test_min_rate_value_without_rates(self) -> None:
        spec = TariffSpecification(broker="me", power_type=PowerType.CONSUMPTION)
        assert spec.min_rate_value == 0.0

    def test_immutable(self) -> None:
        spec = TariffFactory.create()
        with pytest.raises(ValidationError):
            spec.periodic_payment = 3.0

    def test_hashable(self) -> None:
        spec = TariffFactory.create()
        assert {spec: 1}[spec] == 1


class TestCustomerInfo:
    def test_negative_population_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CustomerInfo(name="x", population=-1, power_type=PowerType.CONSUMPTION)


class TestActions:
    def test_kind_discriminator(self) -> None:
        spec = TariffFactory.create()
        assert PublishTariff(spec=spec).kind == "publish_tariff"
        order = IssueBalancingOrder(spec=spec, exercise_ratio=0.5, payment_per_kwh=-0.01)
        assert order.kind == "issue_balancing_order"


class TestTariffTransaction:
    def test_naive_posted_time_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TariffTransaction(
                tx_type=TransactionType.CONSUME,
                tariff=TariffFactory.create(),
                customer=CustomerFactory.create(),
                kwh=1.0,
                posted_time=datetime(2009, 1, 1, 5),
            )

    def test_aware_posted_time_accepted(self) -> None:
        tx = TransactionFactory.create(tariff=None, customer=CustomerFactory.create(), tick=5)
        assert tx.posted_time.utcoffset() == timedelta(0)
