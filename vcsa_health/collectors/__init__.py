"""Health collectors - appliance REST API clients."""

from .base import BaseCollector, CollectorError, ConfigError, ProbeError
from .vapi import VAPICollector

__all__ = [
    "BaseCollector",
    "CollectorError",
    "ConfigError",
    "ProbeError",
    "VAPICollector",
]
