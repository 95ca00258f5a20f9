"""Retail broker: usage estimation and tariff decisions for an energy broker.

Tracks per-customer usage profiles and per-tariff subscriptions from market
reports, and runs a tick-triggered policy that publishes, supersedes and
revokes tariffs.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
