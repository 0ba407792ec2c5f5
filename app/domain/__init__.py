"""Domain models used across application layer boundaries."""

from .models import HealthAggregate, HealthMetrics, OverallStatus, ProbeResult, ProbeStatus

__all__ = ["HealthAggregate", "HealthMetrics", "OverallStatus", "ProbeResult", "ProbeStatus"]
