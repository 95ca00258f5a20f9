"""Prometheus metrics for the broker core.

Counters for inbound events, outbound actions, skipped usage updates and
decision rule errors, plus a gauge of subscription records summed over
every ledger in the process.
"""

from prometheus_client import Counter, Gauge

# Inbound event metrics
EVENTS_HANDLED = Counter(
    "retailbroker_events_handled_total",
    "Total number of inbound events processed",
    labelnames=["event_type", "outcome"],
)

# Outbound action metrics
ACTIONS_EMITTED = Counter(
    "retailbroker_actions_emitted_total",
    "Total number of tariff actions sent to the market",
    labelnames=["kind"],
)

# Estimation metrics
USAGE_UPDATES_SKIPPED = Counter(
    "retailbroker_usage_updates_skipped_total",
    "Usage updates dropped before reaching a record",
    labelnames=["reason"],
)

SUBSCRIPTION_RECORDS = Gauge(
    "retailbroker_subscription_records",
    "Number of (tariff, customer) subscription records tracked",
)

DECISION_ERRORS = Counter(
    "retailbroker_decision_errors_total",
    "Recoverable failures raised by decision rules",
    labelnames=["rule"],
)
