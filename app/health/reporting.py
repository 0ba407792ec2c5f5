"""Structured payloads and plain-text reports for health and setup surfaces."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Final

from app.config import (
    ENVIRONMENT_DESCRIPTORS,
    ConfigurationValidationResult,
    EnvironmentDescriptor,
    EnvironmentReaderPort,
)
from app.domain import HealthAggregate, ProbeStatus

from .aggregator import OVERALL_CHECK_NAME

HEALTH_STATUS_HEADER: Final[str] = "X-Health-Status"
RESPONSE_TIME_HEADER: Final[str] = "X-Response-Time"
MASKED_VALUE: Final[str] = "***configured***"

_STATUS_MARKERS: Final[dict[ProbeStatus, str]] = {
    ProbeStatus.PASS: "[PASS]",
    ProbeStatus.WARN: "[WARN]",
    ProbeStatus.FAIL: "[FAIL]",
}


def health_build_payload(
    aggregate: HealthAggregate,
    environment_name: str,
    version: str,
    timestamp: datetime,
) -> dict[str, Any]:
    """Serialize a health aggregate for the HTTP endpoint.

    Args:
        aggregate: Aggregated health verdict.
        environment_name: Deployment environment label.
        version: Application version label.
        timestamp: Moment the payload was produced.

    Returns:
        dict[str, Any]: JSON-friendly payload.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return {
        "status": aggregate.overall_status.value,
        "timestamp": timestamp.isoformat(),
        "version": version,
        "environment": environment_name,
        "checks": {name: result.to_dict() for name, result in aggregate.checks.items()},
        "metrics": aggregate.metrics.to_dict(),
    }


def health_build_response_headers(aggregate: HealthAggregate) -> dict[str, str]:
    return {
        "Cache-Control": "no-cache, no-store, must-revalidate",
        HEALTH_STATUS_HEADER: aggregate.overall_status.value,
        RESPONSE_TIME_HEADER: str(round(aggregate.metrics.response_time_ms)),
    }


def config_build_environment_status(
    environment_reader: EnvironmentReaderPort,
    validation: ConfigurationValidationResult,
    descriptors: tuple[EnvironmentDescriptor, ...] = ENVIRONMENT_DESCRIPTORS,
) -> dict[str, Any]:
    """Build the per-key status table shown by the setup wizard.

    Values are never echoed; configured keys show a masked marker.

    Args:
        environment_reader: Source of configuration values.
        validation: Validation result for the same source.
        descriptors: Registry to report on.

    Returns:
        dict[str, Any]: Counts, issues and per-key details.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    configured_keys = set(validation.configured_keys)
    required_descriptors = [descriptor for descriptor in descriptors if descriptor.required]
    details = []
    for descriptor in descriptors:
        is_configured = descriptor.name in configured_keys
        details.append(
            {
                "name": descriptor.name,
                "category": descriptor.category.value,
                "required": descriptor.required,
                "description": descriptor.description,
                "is_configured": is_configured,
                "value": MASKED_VALUE if is_configured and environment_reader.config_read(descriptor.name) else None,
            }
        )

    return {
        "is_valid": validation.is_valid,
        "strictness": validation.strictness.value,
        "total_keys": len(descriptors),
        "required_keys": len(required_descriptors),
        "configured_keys": len(validation.configured_keys),
        "missing_required_keys": list(validation.missing_required_keys),
        "errors": [issue.message for issue in validation.errors],
        "warnings": [issue.message for issue in validation.warnings],
        "details": details,
    }


def config_render_validation_report(
    validation: ConfigurationValidationResult,
    descriptors: tuple[EnvironmentDescriptor, ...] = ENVIRONMENT_DESCRIPTORS,
) -> str:
    """Render a configuration validation result as console text.

    Args:
        validation: Validation result.
        descriptors: Registry used to describe missing keys.

    Returns:
        str: Multi-line report.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    descriptions = {descriptor.name: descriptor.description for descriptor in descriptors}
    lines = ["Environment Variable Validation Results", "=" * 40]
    if validation.is_valid:
        lines.append("All required environment variables are configured")
    else:
        lines.append("Environment validation failed")

    if validation.configured_keys:
        lines.append("")
        lines.append(f"Configured variables ({len(validation.configured_keys)}):")
        lines.extend(f"  - {name}" for name in validation.configured_keys)

    if validation.missing_required_keys:
        lines.append("")
        lines.append(f"Missing variables ({len(validation.missing_required_keys)}):")
        lines.extend(
            f"  - {name} - {descriptions.get(name, 'Required')}" for name in validation.missing_required_keys
        )

    if validation.errors:
        lines.append("")
        lines.append(f"Errors ({len(validation.errors)}):")
        lines.extend(f"  - {issue.message}" for issue in validation.errors)

    if validation.warnings:
        lines.append("")
        lines.append(f"Warnings ({len(validation.warnings)}):")
        lines.extend(f"  - {issue.message}" for issue in validation.warnings)

    lines.append("=" * 40)
    return "\n".join(lines)


def health_render_console_report(
    aggregate: HealthAggregate,
    validation: ConfigurationValidationResult | None = None,
) -> str:
    """Render a health aggregate, optionally preceded by the validation report.

    Args:
        aggregate: Aggregated health verdict.
        validation: Optional configuration validation result.

    Returns:
        str: Multi-line setup report.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    lines: list[str] = []
    if validation is not None:
        lines.append(config_render_validation_report(validation))
        lines.append("")

    lines.append("Setup Validation Report")
    lines.append(f"Overall Status: {aggregate.overall_status.value.upper()}")
    lines.append("")
    for name, result in aggregate.checks.items():
        if name == OVERALL_CHECK_NAME:
            continue
        lines.append(f"  {_STATUS_MARKERS[result.status]} {name}: {result.message} ({result.latency_ms:.0f}ms)")

    overall_result = aggregate.checks.get(OVERALL_CHECK_NAME)
    if overall_result is not None:
        lines.append("")
        lines.append(overall_result.message)
    lines.append(
        f"Response time: {aggregate.metrics.response_time_ms:.0f}ms, uptime: {aggregate.metrics.uptime_ms:.0f}ms"
    )
    return "\n".join(lines)
