"""Data layer - endpoint table, health values, severities, and results."""

from .models import (
    ALL_ENDPOINTS,
    ENDPOINTS,
    Endpoint,
    EndpointHealth,
    HealthReport,
    HealthValue,
    ProbeOutcome,
    Severity,
    promote_status,
    select_endpoints,
    severity_for_status,
)

__all__ = [
    "ALL_ENDPOINTS",
    "ENDPOINTS",
    "Endpoint",
    "EndpointHealth",
    "HealthReport",
    "HealthValue",
    "ProbeOutcome",
    "Severity",
    "promote_status",
    "select_endpoints",
    "severity_for_status",
]
