"""Initial tariff pricing configuration models."""

from pydantic import BaseModel, Field


class PricingConfig(BaseModel):
    """Constants used to price the initial tariff for each power type.

    Market prices arrive per MWh and are divided by ``price_unit_kwh``
    before the margin is applied.
    """

    margin: float = Field(default=0.5, description="Markup applied to consumption rates")
    fixed_per_kwh_cost: float = Field(
        default=-0.06,
        description="Fixed cost per kWh added to the market price",
    )
    default_periodic_payment: float = Field(
        default=-1.0,
        description="Periodic payment carried by newly created tariffs",
    )
    interruptible_discount: float = Field(
        default=0.7,
        gt=0.0,
        description="Rate multiplier for curtailable load",
    )
    curtailment_cap: float = Field(
        default=0.1,
        ge=0.0,
        le=1.0,
        description="Maximum curtailment ratio on interruptible rates",
    )
    price_unit_kwh: float = Field(
        default=1000.0,
        gt=0.0,
        description="kWh per market price unit",
    )
