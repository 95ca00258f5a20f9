"""Tariff decision engine.

Runs once per tick after that tick's inbound events have been applied:
- with no tariffs in the subscription ledger, publish one initial tariff
  per known power type;
- otherwise run every improvement rule whose trigger matches the tick.
"""

from retailbroker.competition.index import CompetingTariffIndex
from retailbroker.config.models.pricing import PricingConfig
from retailbroker.decision.pricing import build_initial_tariff
from retailbroker.decision.result import DecisionResult, RuleOutcome
from retailbroker.decision.rules import DecisionRule, PortfolioView
from retailbroker.market.actions import PublishTariff
from retailbroker.market.catalog import TariffCatalog
from retailbroker.market.prices import MarketPriceOracle
from retailbroker.observability.logging import get_logger
from retailbroker.observability.metrics import DECISION_ERRORS
from retailbroker.usage.ledger import SubscriptionLedger
from retailbroker.usage.profiles import UsageProfileStore

logger = get_logger(__name__)


class TariffDecisionEngine:
    """Turn usage estimates and the market price into tariff actions."""

    def __init__(
        self,
        broker: str,
        profiles: UsageProfileStore,
        ledger: SubscriptionLedger,
        competitors: CompetingTariffIndex,
        catalog: TariffCatalog,
        market: MarketPriceOracle,
        pricing: PricingConfig | None = None,
        rules: list[DecisionRule] | None = None,
    ) -> None:
        """Initialize the decision engine.

        Args:
            broker: Our broker identity, used to find own tariffs
            profiles: Long-run usage profiles
            ledger: Per-tariff subscription records
            competitors: Foreign tariffs seen so far
            catalog: Tariff repository shared with event handling
            market: Source of the mean market price
            pricing: Initial tariff pricing constants
            rules: Improvement rules in firing order
        """
        self._broker = broker
        self._profiles = profiles
        self._ledger = ledger
        self._competitors = competitors
        self._catalog = catalog
        self._market = market
        self._pricing = pricing or PricingConfig()
        self._rules = rules or []

    @property
    def rules(self) -> list[DecisionRule]:
        return list(self._rules)

    def decide(self, tick: int) -> DecisionResult:
        """Run the decision phase for one tick."""
        if self._ledger.is_empty():
            result = DecisionResult(tick=tick, branch="initial")
            result.add(self.create_initial_tariffs())
        else:
            result = self.improve_tariffs(tick)

        logger.info(
            "decision_complete",
            tick=tick,
            branch=result.branch,
            actions=len(result.actions),
            errors=len(result.errors),
        )
        return result

    def create_initial_tariffs(self) -> RuleOutcome:
        """Publish one flat tariff per power type seen in the profiles."""
        outcome = RuleOutcome(rule="initial_tariffs")
        market_price = self._market.mean_market_price()
        for power_type in self._profiles.power_types():
            spec = build_initial_tariff(
                self._broker, power_type, market_price, self._pricing
            )
            self._ledger.register(spec)
            self._catalog.add_specification(spec)
            outcome.actions.append(PublishTariff(spec=spec))
            logger.info(
                "initial_tariff_created",
                tariff_id=str(spec.id),
                power_type=power_type.value,
                rate=spec.rates[0].value,
            )
        return outcome

    def improve_tariffs(self, tick: int) -> DecisionResult:
        """Run the improvement rules triggered on this tick."""
        result = DecisionResult(tick=tick, branch="improve")
        triggered = [rule for rule in self._rules if rule.applies(tick)]
        if not triggered:
            return result

        view = PortfolioView(
            tick=tick,
            market_price=self._market.mean_market_price(),
            broker=self._broker,
            catalog=self._catalog,
            ledger=self._ledger,
            profiles=self._profiles,
            competitors=self._competitors,
        )
        for rule in triggered:
            outcome = rule.evaluate(view)
            if outcome.errors:
                DECISION_ERRORS.labels(rule=rule.name).inc(len(outcome.errors))
            result.add(outcome)
        return result
