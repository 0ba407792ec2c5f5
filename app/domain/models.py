"""Typed domain models shared across runtime layers.

This module provides the health-check vocabulary used by probes, the
aggregator and the reporting surfaces.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping


class ProbeStatus(str, Enum):
    """Tri-state status reported by every check."""

    PASS = "pass"
    WARN = "warn"
    FAIL = "fail"


class OverallStatus(str, Enum):
    """Reduced verdict over all checks."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of one dependency check.

    Attributes:
        status: Tri-state check status.
        message: Short description suitable for operators.
        latency_ms: Elapsed wall-clock time of the check, recorded even on failure.
        details: Optional structured diagnostics payload.
    """

    status: ProbeStatus
    message: str
    latency_ms: float = 0.0
    details: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        if self.latency_ms < 0:
            raise ValueError("latency_ms must be >= 0")

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "status": self.status.value,
            "message": self.message,
            "latency_ms": round(self.latency_ms, 2),
        }
        if self.details is not None:
            payload["details"] = dict(self.details)
        return payload


@dataclass(frozen=True)
class HealthMetrics:
    """Timing metrics of one health aggregate.

    Attributes:
        response_time_ms: Time from the start of the check sequence to aggregation.
        uptime_ms: Time since process start.
    """

    response_time_ms: float
    uptime_ms: float

    def to_dict(self) -> dict[str, float]:
        return {"response_time_ms": round(self.response_time_ms, 2), "uptime_ms": round(self.uptime_ms, 2)}


@dataclass(frozen=True)
class HealthAggregate:
    """Terminal value of one health check invocation.

    Attributes:
        overall_status: Verdict derived from `checks` by the aggregator.
        checks: Check results keyed by check name, including `overall`.
        metrics: Timing metrics.
    """

    overall_status: OverallStatus
    checks: Mapping[str, ProbeResult] = field(default_factory=dict)
    metrics: HealthMetrics = field(default_factory=lambda: HealthMetrics(response_time_ms=0.0, uptime_ms=0.0))
