"""Decision result models."""

from typing import Literal

from pydantic import BaseModel, Field

from retailbroker.market.actions import Action

DecisionBranch = Literal["initial", "improve"]


class RuleOutcome(BaseModel):
    """What a single rule produced on one tick."""

    rule: str
    actions: list[Action] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)


class DecisionResult(BaseModel):
    """Output of one decision phase.

    ``actions`` are in the order they must be sent. ``errors`` holds
    recoverable failures that made a rule skip its work.
    """

    tick: int
    branch: DecisionBranch
    actions: list[Action] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)
    rules_fired: list[str] = Field(default_factory=list)

    def add(self, outcome: RuleOutcome) -> None:
        self.rules_fired.append(outcome.rule)
        self.actions.extend(outcome.actions)
        self.errors.extend(outcome.errors)
