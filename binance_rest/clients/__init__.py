"""Endpoint wrappers built on the core dispatcher."""

from .futures import FuturesClient
from .spot import SpotClient

__all__ = ["FuturesClient", "SpotClient"]
