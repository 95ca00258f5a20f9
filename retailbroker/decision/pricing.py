"""Initial tariff pricing."""

from retailbroker.config.models.pricing import PricingConfig
from retailbroker.market.enums import PowerType
from retailbroker.market.models import Rate, TariffSpecification


def initial_rate_value(
    power_type: PowerType,
    market_price: float,
    config: PricingConfig,
) -> float:
    """Per-kWh rate for a new tariff.

    Args:
        power_type: Power type the tariff is offered for
        market_price: Mean market price per ``config.price_unit_kwh`` kWh
        config: Pricing constants

    Returns:
        Consumption types pay the marked-up market price plus fixed cost;
        every other type is paid twice the market price. Interruptible
        load gets a discount.
    """
    per_kwh = market_price / config.price_unit_kwh
    if power_type.is_consumption:
        rate = (per_kwh + config.fixed_per_kwh_cost) * (1.0 + config.margin)
    else:
        rate = -2.0 * per_kwh
    if power_type.is_interruptible:
        rate *= config.interruptible_discount
    return rate


def build_initial_tariff(
    broker: str,
    power_type: PowerType,
    market_price: float,
    config: PricingConfig,
) -> TariffSpecification:
    """Single flat-rate tariff with the default periodic payment."""
    rate = Rate(
        value=initial_rate_value(power_type, market_price, config),
        max_curtailment=config.curtailment_cap if power_type.is_interruptible else 0.0,
    )
    return TariffSpecification(
        broker=broker,
        power_type=power_type,
        rates=(rate,),
        periodic_payment=config.default_periodic_payment,
    )
