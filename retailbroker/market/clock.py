"""Tick clock: the current tick and timestamp-to-tick mapping."""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta

from retailbroker.errors import InvalidTimestampError


class Clock(ABC):
    """Source of the current tick index."""

    @property
    @abstractmethod
    def current_tick(self) -> int:
        """Index of the tick being processed."""
        pass

    @abstractmethod
    def tick_for(self, when: datetime) -> int:
        """Map an absolute timestamp onto a tick index.

        Raises:
            InvalidTimestampError: If the timestamp is naive
        """
        pass


class SimulationClock(Clock):
    """Clock with a fixed epoch and tick duration, advanced by the caller."""

    def __init__(
        self,
        epoch: datetime,
        tick_duration: timedelta,
        current_tick: int = 0,
    ) -> None:
        if tick_duration <= timedelta(0):
            raise ValueError("tick_duration must be positive")
        if epoch.utcoffset() is None:
            raise ValueError("epoch must be timezone-aware")
        self._epoch = epoch
        self._tick_duration = tick_duration
        self._current_tick = current_tick

    @property
    def current_tick(self) -> int:
        return self._current_tick

    def tick_for(self, when: datetime) -> int:
        if when.utcoffset() is None:
            raise InvalidTimestampError(f"Timestamp has no timezone: {when.isoformat()}")
        # floor division keeps timestamps before the epoch on negative ticks
        return (when - self._epoch) // self._tick_duration

    def time_of(self, tick: int) -> datetime:
        """Start timestamp of a tick."""
        return self._epoch + tick * self._tick_duration

    def advance(self, ticks: int = 1) -> int:
        """Move the clock forward and return the new current tick."""
        self._current_tick += ticks
        return self._current_tick

    def set_tick(self, tick: int) -> None:
        self._current_tick = tick
