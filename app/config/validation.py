"""Configuration validation against the descriptor registry."""

from __future__ import annotations

from typing import Final
from urllib.parse import urlparse

from .interfaces import (
    ConfigurationValidationResult,
    DescriptorCategory,
    EnvironmentDescriptor,
    EnvironmentReaderPort,
    IssueSeverity,
    Strictness,
    ValidationIssue,
)
from .registry import ENVIRONMENT_DESCRIPTORS

PRODUCTION_ENVIRONMENT_NAME: Final[str] = "production"
_LOCAL_HOSTNAMES: Final[frozenset[str]] = frozenset({"localhost", "127.0.0.1", "::1", "0.0.0.0"})
_REDIRECT_URI_KEY: Final[str] = "AZURE_REDIRECT_URI"


def config_resolve_strictness(environment_name: str | None) -> Strictness:
    """Map a deployment environment label to a validation strictness.

    Args:
        environment_name: Environment label such as `production` or `development`.

    Returns:
        Strictness: `strict` for production, `lenient` otherwise.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if (environment_name or "").strip().lower() == PRODUCTION_ENVIRONMENT_NAME:
        return Strictness.STRICT
    return Strictness.LENIENT


def config_validate_environment(
    environment_reader: EnvironmentReaderPort,
    strictness: Strictness,
    descriptors: tuple[EnvironmentDescriptor, ...] = ENVIRONMENT_DESCRIPTORS,
) -> ConfigurationValidationResult:
    """Validate every registered key against the given environment.

    Missing required keys are errors under `strict` and warnings under
    `lenient`; they are listed in `missing_required_keys` either way.
    Missing optional keys produce no issue. Present values that fail their
    format rule produce warnings. Under `strict`, a redirect URI pointing at
    a local host is an error.

    Args:
        environment_reader: Source of configuration values.
        strictness: Validation mode chosen by the caller.
        descriptors: Registry to validate against.

    Returns:
        ConfigurationValidationResult: Issues and key classification.

    Raises:
        ValueError: Raised when environment_reader is None.
    """

    if environment_reader is None:
        raise ValueError("environment_reader must not be None")

    errors: list[ValidationIssue] = []
    warnings: list[ValidationIssue] = []
    missing_required_keys: list[str] = []
    configured_keys: list[str] = []
    configured_values: dict[str, str] = {}

    for descriptor in descriptors:
        value = _config_normalize_value(environment_reader.config_read(descriptor.name))
        if value is None:
            if descriptor.required:
                missing_required_keys.append(descriptor.name)
                issue = ValidationIssue(
                    severity=IssueSeverity.ERROR if strictness == Strictness.STRICT else IssueSeverity.WARNING,
                    subject=descriptor.name,
                    message=f"missing required configuration: {descriptor.name}",
                )
                (errors if issue.severity == IssueSeverity.ERROR else warnings).append(issue)
            continue

        configured_keys.append(descriptor.name)
        configured_values[descriptor.name] = value
        if descriptor.format_validator is None:
            continue
        format_message = descriptor.format_validator(value)
        if format_message is not None:
            warnings.append(
                ValidationIssue(
                    severity=IssueSeverity.WARNING,
                    subject=descriptor.name,
                    message=f"{descriptor.name}: {format_message}",
                )
            )

    warnings.extend(_config_check_partial_category(descriptors, configured_values, DescriptorCategory.IDENTITY_PROVIDER))
    if strictness == Strictness.STRICT:
        errors.extend(_config_check_production_rules(configured_values))

    return ConfigurationValidationResult(
        strictness=strictness,
        errors=tuple(errors),
        warnings=tuple(warnings),
        missing_required_keys=tuple(missing_required_keys),
        configured_keys=tuple(configured_keys),
    )


def _config_normalize_value(raw_value: str | None) -> str | None:
    if raw_value is None:
        return None
    stripped_value = raw_value.strip()
    return stripped_value or None


def _config_check_partial_category(
    descriptors: tuple[EnvironmentDescriptor, ...],
    configured_values: dict[str, str],
    category: DescriptorCategory,
) -> list[ValidationIssue]:
    """Warn when an optional feature has some but not all of its keys set."""

    optional_names = [
        descriptor.name for descriptor in descriptors if descriptor.category == category and not descriptor.required
    ]
    present_names = [name for name in optional_names if name in configured_values]
    missing_names = [name for name in optional_names if name not in configured_values]
    if not present_names or not missing_names:
        return []
    return [
        ValidationIssue(
            severity=IssueSeverity.WARNING,
            subject=category.value,
            message=f"{category.value} not fully configured, feature disabled until set: {', '.join(missing_names)}",
        )
    ]


def _config_check_production_rules(configured_values: dict[str, str]) -> list[ValidationIssue]:
    redirect_uri = configured_values.get(_REDIRECT_URI_KEY)
    if redirect_uri is None:
        return []
    hostname = (urlparse(redirect_uri).hostname or "").lower()
    if hostname not in _LOCAL_HOSTNAMES:
        return []
    return [
        ValidationIssue(
            severity=IssueSeverity.ERROR,
            subject=_REDIRECT_URI_KEY,
            message=f"{_REDIRECT_URI_KEY}: redirect URI must not point at localhost in production",
        )
    ]
