"""Tariff decision policy: initial pricing and tick-triggered rules."""

from retailbroker.decision.engine import TariffDecisionEngine
from retailbroker.decision.pricing import build_initial_tariff, initial_rate_value
from retailbroker.decision.result import DecisionResult, RuleOutcome
from retailbroker.decision.rules import (
    BalancingOrderRule,
    DecisionRule,
    PortfolioView,
    SupersedeRule,
    build_rules,
)

__all__ = [
    "BalancingOrderRule",
    "DecisionResult",
    "DecisionRule",
    "PortfolioView",
    "RuleOutcome",
    "SupersedeRule",
    "TariffDecisionEngine",
    "build_initial_tariff",
    "build_rules",
    "initial_rate_value",
]
