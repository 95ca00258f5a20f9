"""Improvement rule configuration models.

Each rule fires on a single configured tick. The default trigger ticks
are:

    [rules.balancing_order]
    trigger_tick = 365

    [rules.supersede]
    trigger_tick = 367
"""

from pydantic import BaseModel, Field

from retailbroker.market.enums import PowerType


class BalancingOrderRuleConfig(BaseModel):
    """Balancing order injection for interruptible tariffs."""

    enabled: bool = Field(default=True, description="Enable the rule")
    trigger_tick: int = Field(default=365, ge=0, description="Tick on which the rule fires")
    exercise_ratio: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Fraction of curtailable load offered to the operator",
    )
    payment_multiplier: float = Field(
        default=0.9,
        description="Multiplier applied to the tariff's minimum rate value",
    )


class SupersedeRuleConfig(BaseModel):
    """Replace an own tariff with a repriced copy and revoke the original."""

    enabled: bool = Field(default=True, description="Enable the rule")
    trigger_tick: int = Field(default=367, ge=0, description="Tick on which the rule fires")
    power_type: PowerType = Field(
        default=PowerType.CONSUMPTION,
        description="Power type of the tariff to supersede",
    )
    periodic_payment_inflation: float = Field(
        default=1.1,
        description="Multiplier applied to the old periodic payment",
    )


class RulesConfig(BaseModel):
    """Ordered improvement rules run after the initial tariffs exist."""

    balancing_order: BalancingOrderRuleConfig = Field(
        default_factory=BalancingOrderRuleConfig,
        description="Balancing order injection rule",
    )
    supersede: SupersedeRuleConfig = Field(
        default_factory=SupersedeRuleConfig,
        description="Tariff supersede rule",
    )
