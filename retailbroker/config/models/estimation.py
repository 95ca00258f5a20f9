"""Usage estimation configuration models."""

from pydantic import BaseModel, Field


class EstimationConfig(BaseModel):
    """Smoothing and history settings for customer usage records.

    The history length is the size of the cyclic usage buffer, one slot
    per tick offset. The default covers one week of hourly ticks.
    """

    history_length: int = Field(
        default=168,
        gt=0,
        description="Number of tick slots in each cyclic usage buffer",
    )
    alpha: float = Field(
        default=0.3,
        gt=0.0,
        lt=1.0,
        description="Exponential smoothing weight given to new observations",
    )
