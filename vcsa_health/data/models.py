"""Data models for appliance health checks.

This module defines the core data structures for representing a health
probe run:

1. ENDPOINTS
   - A fixed, ordered table of (name, path) descriptors
   - Names double as the values accepted by --subcommand

2. HEALTH VALUES
   - Raw strings reported by the appliance: green, orange, red
   - Anything else is kept verbatim and ends up as UNKNOWN

3. SEVERITIES
   - Monitoring labels with their process exit codes
   - OK, WARNING, CRITICAL, UNKNOWN
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


# =============================================================================
# Endpoint Table
# =============================================================================


ALL_ENDPOINTS = "all"


@dataclass(frozen=True)
class Endpoint:
    """A single appliance health resource."""

    name: str  # Identifier, also the subcommand that selects it
    path: str  # URL path appended to https://{host}


ENDPOINTS: Tuple[Endpoint, ...] = (
    Endpoint("mgmt", "/rest/appliance/health/applmgmt"),
    Endpoint("database", "/rest/appliance/health/database-storage"),
    Endpoint("load", "/rest/appliance/health/load"),
    Endpoint("storage", "/rest/appliance/health/storage"),
    Endpoint("swap", "/rest/appliance/health/swap"),
    Endpoint("system", "/rest/appliance/health/system"),
)


def select_endpoints(subcommand: str, endpoints: Tuple[Endpoint, ...] = ENDPOINTS) -> List[Endpoint]:
    """Return the endpoints a subcommand selects, in table order.

    "all" selects every endpoint. Any other value selects the endpoint
    with that exact name, or nothing at all.
    """
    if subcommand == ALL_ENDPOINTS:
        return list(endpoints)
    return [ep for ep in endpoints if ep.name == subcommand]


# =============================================================================
# Health Values and Severities
# =============================================================================


class HealthValue(str, Enum):
    """Health values the appliance reports for a subsystem."""

    GREEN = "green"
    ORANGE = "orange"
    RED = "red"


class Severity(str, Enum):
    """Monitoring severity printed as the first output line."""

    OK = "OK"
    WARNING = "WARNING"
    CRITICAL = "CRITICAL"
    UNKNOWN = "UNKNOWN"

    @property
    def exit_code(self) -> int:
        return _EXIT_CODES[self]


# CRITICAL and UNKNOWN share exit code 3.
_EXIT_CODES = {
    Severity.OK: 0,
    Severity.WARNING: 2,
    Severity.CRITICAL: 3,
    Severity.UNKNOWN: 3,
}

_SEVERITY_BY_STATUS = {
    HealthValue.GREEN.value: Severity.OK,
    HealthValue.ORANGE.value: Severity.WARNING,
    HealthValue.RED.value: Severity.CRITICAL,
}


def severity_for_status(status: Optional[str]) -> Optional[Severity]:
    """Map an overall status to its severity, or None if unrecognized."""
    if status is None:
        return None
    return _SEVERITY_BY_STATUS.get(status)


def promote_status(current: str, observed: str) -> str:
    """Fold one observed health value into the running overall status.

    green is replaced by whatever was observed, orange only by red, and
    every other status is final.
    """
    if current == HealthValue.GREEN.value:
        return observed
    if current == HealthValue.ORANGE.value and observed == HealthValue.RED.value:
        return observed
    return current


# =============================================================================
# Results
# =============================================================================


@dataclass
class EndpointHealth:
    """Health value observed for one endpoint."""

    endpoint: Endpoint
    value: str

    @property
    def message(self) -> str:
        return f"{self.endpoint.name} is {self.value}"


@dataclass
class HealthReport:
    """Ordered endpoint results from one probe run."""

    results: List[EndpointHealth] = field(default_factory=list)

    def add(self, result: EndpointHealth) -> None:
        self.results.append(result)

    @property
    def messages(self) -> List[str]:
        return [r.message for r in self.results]

    @property
    def overall_status(self) -> Optional[str]:
        """Overall status after folding every result, None if nothing was queried."""
        if not self.results:
            return None
        status = HealthValue.GREEN.value
        for result in self.results:
            status = promote_status(status, result.value)
        return status

    @property
    def severity(self) -> Optional[Severity]:
        return severity_for_status(self.overall_status)


@dataclass
class ProbeOutcome:
    """Final monitoring result: severity plus the lines printed under it."""

    severity: Severity
    messages: List[str] = field(default_factory=list)
    detail: str = ""  # Reason text, used only for UNKNOWN

    @classmethod
    def unknown(cls, detail: str) -> "ProbeOutcome":
        return cls(severity=Severity.UNKNOWN, detail=detail)

    @classmethod
    def from_report(cls, report: HealthReport) -> "ProbeOutcome":
        severity = report.severity
        if severity is None:
            return cls.unknown("overall status is missing!")
        return cls(severity=severity, messages=report.messages)

    @property
    def exit_code(self) -> int:
        return self.severity.exit_code

    def render(self) -> str:
        if self.severity is Severity.UNKNOWN:
            return f"{Severity.UNKNOWN.value}: {self.detail}"
        return "\n".join([f"{self.severity.value}:"] + self.messages)
