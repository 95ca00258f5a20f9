"""Tick-triggered improvement rules.

Each rule has a trigger predicate over the tick and produces actions
from the full portfolio state. Rules never raise for expected gaps in
the portfolio; they report them in their outcome instead.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from retailbroker.competition.index import CompetingTariffIndex
from retailbroker.config.models.rules import (
    BalancingOrderRuleConfig,
    RulesConfig,
    SupersedeRuleConfig,
)
from retailbroker.decision.result import RuleOutcome
from retailbroker.market.actions import IssueBalancingOrder, PublishTariff, RevokeTariff
from retailbroker.market.catalog import TariffCatalog
from retailbroker.market.enums import PowerType
from retailbroker.market.models import BalancingOrder, Rate, TariffSpecification
from retailbroker.observability.logging import get_logger
from retailbroker.usage.ledger import SubscriptionLedger
from retailbroker.usage.profiles import UsageProfileStore

logger = get_logger(__name__)


@dataclass(frozen=True)
class PortfolioView:
    """Everything a rule may read on one tick."""

    tick: int
    market_price: float
    broker: str
    catalog: TariffCatalog
    ledger: SubscriptionLedger
    profiles: UsageProfileStore
    competitors: CompetingTariffIndex

    def own_tariffs(self) -> list[TariffSpecification]:
        return self.catalog.find_by_broker(self.broker)


class DecisionRule(ABC):
    """A rule that fires on one configured tick."""

    name: str = "rule"

    def __init__(self, trigger_tick: int, enabled: bool = True) -> None:
        self.trigger_tick = trigger_tick
        self.enabled = enabled

    def applies(self, tick: int) -> bool:
        return self.enabled and tick == self.trigger_tick

    @abstractmethod
    def evaluate(self, view: PortfolioView) -> RuleOutcome:
        """Produce this rule's actions for the tick."""
        pass


class BalancingOrderRule(DecisionRule):
    """Offer curtailment of interruptible tariffs to the system operator."""

    name = "balancing_order"

    def __init__(self, config: BalancingOrderRuleConfig) -> None:
        super().__init__(config.trigger_tick, config.enabled)
        self._config = config

    def evaluate(self, view: PortfolioView) -> RuleOutcome:
        outcome = RuleOutcome(rule=self.name)
        for spec in view.own_tariffs():
            if spec.power_type != PowerType.INTERRUPTIBLE_CONSUMPTION:
                continue
            payment = self._config.payment_multiplier * spec.min_rate_value
            view.catalog.add_balancing_order(
                BalancingOrder(
                    broker=view.broker,
                    tariff_id=spec.id,
                    exercise_ratio=self._config.exercise_ratio,
                    price=payment,
                )
            )
            outcome.actions.append(
                IssueBalancingOrder(
                    spec=spec,
                    exercise_ratio=self._config.exercise_ratio,
                    payment_per_kwh=payment,
                )
            )
            logger.info(
                "balancing_order_issued",
                tariff_id=str(spec.id),
                exercise_ratio=self._config.exercise_ratio,
                payment_per_kwh=payment,
            )
        return outcome


class SupersedeRule(DecisionRule):
    """Replace the first own tariff of a power type with a repriced copy."""

    name = "supersede"

    def __init__(self, config: SupersedeRuleConfig) -> None:
        super().__init__(config.trigger_tick, config.enabled)
        self._config = config

    def evaluate(self, view: PortfolioView) -> RuleOutcome:
        outcome = RuleOutcome(rule=self.name)
        candidates = [
            spec for spec in view.own_tariffs()
            if spec.power_type == self._config.power_type
        ]
        if not candidates:
            message = f"No own {self._config.power_type.value} tariff to supersede"
            logger.error(
                "supersede_candidate_missing",
                power_type=self._config.power_type.value,
                tick=view.tick,
            )
            outcome.errors.append(message)
            return outcome

        old = candidates[0]
        rate_value = old.rates[0].value if old.rates else 0.0
        new = TariffSpecification(
            broker=view.broker,
            power_type=old.power_type,
            rates=(Rate(value=rate_value),),
            periodic_payment=old.periodic_payment * self._config.periodic_payment_inflation,
            supersedes=(old.id,),
        )
        view.catalog.add_specification(new)
        view.catalog.remove_specification(old.id)
        outcome.actions.append(PublishTariff(spec=new))
        outcome.actions.append(RevokeTariff(spec=old))
        logger.info(
            "tariff_superseded",
            old_tariff_id=str(old.id),
            new_tariff_id=str(new.id),
            periodic_payment=new.periodic_payment,
        )
        return outcome


def build_rules(config: RulesConfig) -> list[DecisionRule]:
    """Default rule set in firing order."""
    return [
        BalancingOrderRule(config.balancing_order),
        SupersedeRule(config.supersede),
    ]
