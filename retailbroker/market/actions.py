"""Outbound tariff lifecycle actions.

Superseding a tariff is expressed as a PublishTariff whose spec carries
the old id in ``supersedes``, followed by a RevokeTariff of the old spec.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict

from retailbroker.market.models import TariffSpecification


class TariffAction(BaseModel):
    """Base for actions sent to the market."""

    model_config = ConfigDict(frozen=True)

    kind: str
    spec: TariffSpecification


class PublishTariff(TariffAction):
    kind: Literal["publish_tariff"] = "publish_tariff"


class RevokeTariff(TariffAction):
    kind: Literal["revoke_tariff"] = "revoke_tariff"


class IssueBalancingOrder(TariffAction):
    kind: Literal["issue_balancing_order"] = "issue_balancing_order"
    exercise_ratio: float
    payment_per_kwh: float


Action = PublishTariff | RevokeTariff | IssueBalancingOrder
