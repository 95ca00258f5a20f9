"""Configuration model exports.

    from retailbroker.config.models import PricingConfig, RulesConfig
"""

from retailbroker.config.models.clock import ClockConfig
from retailbroker.config.models.estimation import EstimationConfig
from retailbroker.config.models.observability import LoggingConfig, ObservabilityConfig
from retailbroker.config.models.pricing import PricingConfig
from retailbroker.config.models.rules import (
    BalancingOrderRuleConfig,
    RulesConfig,
    SupersedeRuleConfig,
)

__all__ = [
    # Clock
    "ClockConfig",
    # Estimation
    "EstimationConfig",
    # Observability
    "LoggingConfig",
    "ObservabilityConfig",
    # Pricing
    "PricingConfig",
    # Rules
    "BalancingOrderRuleConfig",
    "RulesConfig",
    "SupersedeRuleConfig",
]
