"""Base collector interface and error types for health probes."""

from abc import ABC, abstractmethod
from typing import Optional

from ..data.models import HealthReport


class BaseCollector(ABC):
    """Abstract base class for health collectors.

    A collector talks to one management API and turns its answers into a
    HealthReport. Collectors raise CollectorError on any failure; they
    never decide the process exit code.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier used to tag log lines and errors (e.g., 'vapi')."""
        pass

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Human-readable name for the collected source."""
        pass

    @abstractmethod
    def collect(self, subcommand: str) -> HealthReport:
        """Query the endpoints selected by subcommand.

        Raises:
            CollectorError: If any request or response decode fails.
        """
        pass

    def close(self) -> None:
        """Release any resources held by the collector."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class ProbeError(Exception):
    """Base for every failure that ends a probe run as UNKNOWN."""


class ConfigError(ProbeError):
    """Raised when the probe inputs are missing or invalid."""


class CollectorError(ProbeError):
    """Exception raised when a collector fails to collect data."""

    def __init__(self, collector_name: str, message: str, cause: Optional[Exception] = None):
        self.collector_name = collector_name
        self.cause = cause
        super().__init__(f"[{collector_name}] {message}")
