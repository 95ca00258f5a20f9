"""Tariffs observed from competing brokers."""

from retailbroker.competition.index import CompetingTariffIndex

__all__ = ["CompetingTariffIndex"]
