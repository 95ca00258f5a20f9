"""Outbound channel for tariff actions."""

from abc import ABC, abstractmethod

from retailbroker.market.actions import Action


class BrokerTransport(ABC):
    """Delivers actions to the market."""

    @abstractmethod
    def send(self, action: Action) -> None:
        """Send one action."""
        pass


class RecordingTransport(BrokerTransport):
    """Transport that keeps every sent action in order."""

    def __init__(self) -> None:
        self.sent: list[Action] = []

    def send(self, action: Action) -> None:
        self.sent.append(action)

    def clear(self) -> None:
        self.sent.clear()
