"""Simulation clock configuration models."""

from datetime import UTC, datetime

from pydantic import AwareDatetime, BaseModel, Field


class ClockConfig(BaseModel):
    """Maps absolute timestamps onto tick indexes."""

    epoch: AwareDatetime = Field(
        default=datetime(2009, 1, 1, tzinfo=UTC),
        description="Timestamp of tick 0",
    )
    tick_duration_seconds: int = Field(
        default=3600,
        gt=0,
        description="Length of one tick in seconds",
    )
