"""Deterministic reduction of check results into one health verdict."""

from __future__ import annotations

import time
from types import MappingProxyType
from typing import Callable, Final, Iterable, Mapping

from app.domain import HealthAggregate, HealthMetrics, OverallStatus, ProbeResult, ProbeStatus

OVERALL_CHECK_NAME: Final[str] = "overall"
ALL_SYSTEMS_OPERATIONAL: Final[str] = "All systems operational"
NOT_CHECKED_CRITICAL_ERROR: Final[str] = "Not checked - critical error"

HEALTH_STATUS_CODES: Final[Mapping[OverallStatus, int]] = MappingProxyType(
    {
        OverallStatus.HEALTHY: 200,
        OverallStatus.DEGRADED: 200,
        OverallStatus.UNHEALTHY: 503,
    }
)

_OVERALL_TO_PROBE_STATUS: Final[Mapping[OverallStatus, ProbeStatus]] = MappingProxyType(
    {
        OverallStatus.HEALTHY: ProbeStatus.PASS,
        OverallStatus.DEGRADED: ProbeStatus.WARN,
        OverallStatus.UNHEALTHY: ProbeStatus.FAIL,
    }
)


def health_determine_overall_status(checks: Mapping[str, ProbeResult]) -> OverallStatus:
    """Reduce check statuses with fail > warn > pass precedence.

    An existing `overall` entry is ignored.

    Args:
        checks: Check results keyed by name.

    Returns:
        OverallStatus: `unhealthy` on any fail, else `degraded` on any warn, else `healthy`.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    statuses = {result.status for name, result in checks.items() if name != OVERALL_CHECK_NAME}
    if ProbeStatus.FAIL in statuses:
        return OverallStatus.UNHEALTHY
    if ProbeStatus.WARN in statuses:
        return OverallStatus.DEGRADED
    return OverallStatus.HEALTHY


def health_build_overall_check(checks: Mapping[str, ProbeResult]) -> ProbeResult:
    """Synthesize the `overall` entry mirroring the reduced status.

    Args:
        checks: Check results keyed by name.

    Returns:
        ProbeResult: Overall entry listing failing, else warning checks.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    overall_status = health_determine_overall_status(checks)
    failed_checks = _health_describe_checks(checks, ProbeStatus.FAIL)
    warning_checks = _health_describe_checks(checks, ProbeStatus.WARN)

    message = ALL_SYSTEMS_OPERATIONAL
    if failed_checks:
        message = f"Failed checks: {', '.join(failed_checks)}"
    elif warning_checks:
        message = f"Warning checks: {', '.join(warning_checks)}"

    return ProbeResult(
        status=_OVERALL_TO_PROBE_STATUS[overall_status],
        message=message,
        details={"failed_checks": failed_checks, "warning_checks": warning_checks},
    )


def health_aggregate_checks(
    checks: Mapping[str, ProbeResult],
    started_at: float,
    process_started_at: float,
    clock: Callable[[], float] = time.monotonic,
) -> HealthAggregate:
    """Combine completed check results into one health aggregate.

    Args:
        checks: Completed check results keyed by name.
        started_at: Monotonic timestamp when the caller began the check sequence.
        process_started_at: Monotonic timestamp of process start.
        clock: Monotonic clock in seconds.

    Returns:
        HealthAggregate: Verdict, checks including `overall`, and timing metrics.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    probe_checks = {name: result for name, result in checks.items() if name != OVERALL_CHECK_NAME}
    aggregated_checks: dict[str, ProbeResult] = dict(probe_checks)
    aggregated_checks[OVERALL_CHECK_NAME] = health_build_overall_check(probe_checks)
    return HealthAggregate(
        overall_status=health_determine_overall_status(probe_checks),
        checks=aggregated_checks,
        metrics=_health_build_metrics(started_at, process_started_at, clock),
    )


def health_build_critical_aggregate(
    check_names: Iterable[str],
    started_at: float,
    process_started_at: float,
    clock: Callable[[], float] = time.monotonic,
) -> HealthAggregate:
    """Build the aggregate reported when the check sequence itself crashed.

    Args:
        check_names: Names of the checks that were not completed.
        started_at: Monotonic timestamp when the caller began the check sequence.
        process_started_at: Monotonic timestamp of process start.
        clock: Monotonic clock in seconds.

    Returns:
        HealthAggregate: Unhealthy aggregate whose every entry reports `fail`.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    not_checked = ProbeResult(status=ProbeStatus.FAIL, message=NOT_CHECKED_CRITICAL_ERROR)
    checks: dict[str, ProbeResult] = {name: not_checked for name in check_names if name != OVERALL_CHECK_NAME}
    overall_status = health_determine_overall_status(checks) if checks else OverallStatus.UNHEALTHY
    checks[OVERALL_CHECK_NAME] = not_checked
    return HealthAggregate(
        overall_status=overall_status,
        checks=checks,
        metrics=_health_build_metrics(started_at, process_started_at, clock),
    )


def health_status_code(overall_status: OverallStatus) -> int:
    return HEALTH_STATUS_CODES[overall_status]


def _health_describe_checks(checks: Mapping[str, ProbeResult], status: ProbeStatus) -> list[str]:
    return [
        f"{name}: {result.message}"
        for name, result in checks.items()
        if name != OVERALL_CHECK_NAME and result.status == status
    ]


def _health_build_metrics(started_at: float, process_started_at: float, clock: Callable[[], float]) -> HealthMetrics:
    now = clock()
    return HealthMetrics(
        response_time_ms=max(0.0, (now - started_at) * 1000.0),
        uptime_ms=max(0.0, (now - process_started_at) * 1000.0),
    )
