"""Portfolio manager - owns the broker's estimation state.

Applies inbound market events to the usage profiles, the subscription
ledger and the competitor index as they arrive, then runs the decision
engine once per tick and forwards its actions to the transport.

Every event is handled independently: a failure is logged and counted,
never propagated, so later events and the tick's decision phase proceed.
"""

from collections.abc import Callable, Iterable
from datetime import timedelta
from typing import Any

import structlog
from pydantic import BaseModel, ValidationError

from retailbroker.competition.index import CompetingTariffIndex
from retailbroker.config.settings import Settings
from retailbroker.decision.engine import TariffDecisionEngine
from retailbroker.decision.result import DecisionResult
from retailbroker.decision.rules import DecisionRule, build_rules
from retailbroker.errors import (
    CustomerNotFoundError,
    RetailBrokerError,
    TariffNotFoundError,
    UnsupportedEventError,
)
from retailbroker.market.catalog import InMemoryTariffCatalog, TariffCatalog
from retailbroker.market.clock import Clock, SimulationClock
from retailbroker.market.directory import CustomerDirectory, InMemoryCustomerDirectory
from retailbroker.market.enums import TransactionType
from retailbroker.market.events import (
    BalancingExercised,
    BootstrapUsage,
    MarketEvent,
    TariffAnnounced,
    TariffStatusReport,
    TariffTransaction,
)
from retailbroker.market.prices import MarketPriceOracle
from retailbroker.market.transport import BrokerTransport
from retailbroker.observability.logging import get_logger
from retailbroker.observability.metrics import (
    ACTIONS_EMITTED,
    EVENTS_HANDLED,
    USAGE_UPDATES_SKIPPED,
)
from retailbroker.usage.ledger import SubscriptionLedger
from retailbroker.usage.profiles import UsageProfileStore

logger = get_logger(__name__)


class PortfolioSnapshot(BaseModel):
    """Read-only summary of the manager's state for monitoring."""

    tick: int
    profile_power_types: list[str]
    profile_records: int
    subscribed_tariffs: int
    subscription_records: int
    competing_tariffs: int
    expected_net_usage: float


class PortfolioManager:
    """Single owner of the profile store, ledger and competitor index.

    One instance per running broker. Call initialize() before a
    simulation, handle() for each inbound event, and activate() once per
    tick after that tick's events.
    """

    def __init__(
        self,
        settings: Settings,
        market: MarketPriceOracle,
        transport: BrokerTransport,
        clock: Clock | None = None,
        catalog: TariffCatalog | None = None,
        directory: CustomerDirectory | None = None,
        rules: list[DecisionRule] | None = None,
    ) -> None:
        """Initialize the portfolio manager.

        Args:
            settings: Broker configuration
            market: Source of the mean market price
            transport: Channel that receives outbound actions
            clock: Tick clock (defaults to one built from settings.clock)
            catalog: Tariff repository (defaults to in-memory)
            directory: Customer directory (defaults to in-memory)
            rules: Improvement rules (defaults to settings.rules)
        """
        self._settings = settings
        self._transport = transport
        self._clock = clock or SimulationClock(
            epoch=settings.clock.epoch,
            tick_duration=timedelta(seconds=settings.clock.tick_duration_seconds),
        )
        self._catalog = catalog or InMemoryTariffCatalog()
        self._directory = directory or InMemoryCustomerDirectory()

        self.profiles = UsageProfileStore(
            history_length=settings.estimation.history_length,
            alpha=settings.estimation.alpha,
        )
        self.ledger = SubscriptionLedger(self.profiles)
        self.competitors = CompetingTariffIndex()

        self._engine = TariffDecisionEngine(
            broker=settings.broker_name,
            profiles=self.profiles,
            ledger=self.ledger,
            competitors=self.competitors,
            catalog=self._catalog,
            market=market,
            pricing=settings.pricing,
            rules=rules if rules is not None else build_rules(settings.rules),
        )

        self._handlers: dict[type[MarketEvent], Callable[[Any], None]] = {
            BootstrapUsage: self.handle_bootstrap,
            TariffAnnounced: self.handle_tariff_announced,
            TariffStatusReport: self.handle_tariff_status,
            TariffTransaction: self.handle_transaction,
            BalancingExercised: self.handle_balancing_exercised,
        }

    @property
    def broker_name(self) -> str:
        return self._settings.broker_name

    @property
    def engine(self) -> TariffDecisionEngine:
        return self._engine

    @property
    def catalog(self) -> TariffCatalog:
        return self._catalog

    @property
    def clock(self) -> Clock:
        return self._clock

    def initialize(self) -> None:
        """Clear all per-simulation state."""
        self.profiles.clear()
        self.ledger.clear()
        self.competitors.clear()
        logger.info("portfolio_initialized", broker=self.broker_name)

    # Inbound events

    def handle(self, event: MarketEvent) -> bool:
        """Apply one inbound event.

        Returns:
            True if the event was applied, False if handling failed
        """
        event_type = type(event).__name__
        try:
            handler = self._handlers.get(type(event))
            if handler is None:
                raise UnsupportedEventError(f"No handler for event type {event_type}")
            handler(event)
        except (RetailBrokerError, ValidationError) as e:
            logger.error("event_handling_failed", event_type=event_type, error=str(e))
            EVENTS_HANDLED.labels(event_type=event_type, outcome="failed").inc()
            return False

        EVENTS_HANDLED.labels(event_type=event_type, outcome="ok").inc()
        return True

    def handle_all(self, events: Iterable[MarketEvent]) -> int:
        """Apply events in order and return how many failed."""
        return sum(1 for event in events if not self.handle(event))

    def handle_bootstrap(self, event: BootstrapUsage) -> None:
        """Seed a customer's profile from historical usage.

        The series ends at the current tick.
        """
        customer = self._directory.find(event.customer_name, event.power_type)
        if customer is None:
            raise CustomerNotFoundError(event.customer_name, event.power_type.value)

        offset = self._clock.current_tick - len(event.series)
        self.profiles.apply_bootstrap(
            customer,
            event.power_type,
            event.series,
            offset,
            population=event.population,
        )

    def handle_tariff_announced(self, event: TariffAnnounced) -> None:
        spec = event.spec
        if spec.broker == self.broker_name:
            logger.info("own_tariff_announced", tariff_id=str(spec.id))
            return
        self.competitors.record(spec)
        logger.debug(
            "competing_tariff_recorded",
            tariff_id=str(spec.id),
            broker=spec.broker,
            power_type=spec.power_type.value,
        )

    def handle_tariff_status(self, event: TariffStatusReport) -> None:
        logger.info(
            "tariff_status",
            tariff_id=str(event.status.tariff_id),
            status=event.status.status.value,
            message=event.status.message,
        )

    def handle_transaction(self, event: TariffTransaction) -> None:
        """Update the subscription record a transaction refers to."""
        spec = event.tariff
        if spec is None:
            USAGE_UPDATES_SKIPPED.labels(reason="no_tariff").inc()
            raise TariffNotFoundError(
                f"{event.tx_type.value} transaction for {event.customer.name} has no tariff"
            )

        known = self._catalog.find_by_id(spec.id)
        if known is None:
            logger.error(
                "transaction_for_unknown_tariff",
                tx_type=event.tx_type.value,
                tariff_id=str(spec.id),
            )
        elif known != spec:
            logger.error("transaction_tariff_mismatch", tariff_id=str(spec.id))

        record = self.ledger.get_or_create(spec, event.customer)
        tx_type = event.tx_type
        if tx_type == TransactionType.SIGNUP:
            record.signup(event.customer_count)
        elif tx_type == TransactionType.WITHDRAW:
            record.withdraw(event.customer_count)
        elif tx_type in (TransactionType.PRODUCE, TransactionType.CONSUME):
            if event.customer_count != record.subscribed_population:
                logger.warning(
                    "population_mismatch",
                    customer=event.customer.name,
                    reported=event.customer_count,
                    tracked=record.subscribed_population,
                )
            record.produce_consume(event.kwh, self._clock.tick_for(event.posted_time))
        else:
            logger.debug("transaction_ignored", tx_type=tx_type.value)

    def handle_balancing_exercised(self, event: BalancingExercised) -> None:
        # Informational only; exercised curtailment does not change estimates.
        logger.info(
            "balancing_exercised",
            kwh=event.kwh,
            tariff_id=str(event.tariff_id) if event.tariff_id else None,
        )

    # Decision phase

    def activate(self, tick: int) -> DecisionResult:
        """Run the decision phase for a tick and send its actions in order."""
        with structlog.contextvars.bound_contextvars(tick=tick):
            result = self._engine.decide(tick)
            for action in result.actions:
                self._transport.send(action)
                ACTIONS_EMITTED.labels(kind=action.kind).inc()
        return result

    def collect_usage(self, tick: int) -> float:
        """Expected net energy of our subscribers at a tick."""
        return self.ledger.aggregate_usage(tick)

    def snapshot(self) -> PortfolioSnapshot:
        tick = self._clock.current_tick
        return PortfolioSnapshot(
            tick=tick,
            profile_power_types=[pt.value for pt in self.profiles.power_types()],
            profile_records=len(self.profiles),
            subscribed_tariffs=len(self.ledger),
            subscription_records=sum(1 for _ in self.ledger.records()),
            competing_tariffs=len(self.competitors),
            expected_net_usage=self.collect_usage(max(tick, 0)),
        )
