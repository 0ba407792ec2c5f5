"""Typed contracts for configuration descriptors and validation results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Protocol


class DescriptorCategory(str, Enum):
    """Semantic area a configuration key belongs to."""

    GENERAL = "general"
    IDENTITY_PROVIDER = "identity-provider"
    DATABASE = "database"


class IssueSeverity(str, Enum):
    """Severity of one validation issue."""

    ERROR = "error"
    WARNING = "warning"


class Strictness(str, Enum):
    """Validation mode for missing required configuration.

    `strict` treats a missing required key as an error (production gating);
    `lenient` reports it as a warning so the setup wizard stays usable.
    """

    LENIENT = "lenient"
    STRICT = "strict"


FormatValidator = Callable[[str], "str | None"]


@dataclass(frozen=True)
class EnvironmentDescriptor:
    """Static metadata for one configuration key.

    Attributes:
        name: Unique environment variable name.
        category: Semantic category of the key.
        required: Whether absence is a configuration error.
        description: Operator-facing explanation of the key.
        format_validator: Optional pure check returning an issue message or None.
        example_value: Placeholder used when rendering the env template.
    """

    name: str
    category: DescriptorCategory
    required: bool
    description: str
    format_validator: FormatValidator | None = None
    example_value: str = ""


@dataclass(frozen=True)
class ValidationIssue:
    """One configuration problem found during a validation pass.

    Attributes:
        severity: Issue severity.
        subject: Descriptor name or logical area.
        message: Human-readable explanation.
    """

    severity: IssueSeverity
    subject: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"severity": self.severity.value, "subject": self.subject, "message": self.message}


@dataclass(frozen=True)
class ConfigurationValidationResult:
    """Aggregate produced by one configuration validation pass.

    Attributes:
        strictness: Mode used for this pass.
        errors: Error-severity issues in discovery order.
        warnings: Warning-severity issues in discovery order.
        missing_required_keys: Required descriptor names without a value.
        configured_keys: Descriptor names with a value.
    """

    strictness: Strictness
    errors: tuple[ValidationIssue, ...]
    warnings: tuple[ValidationIssue, ...]
    missing_required_keys: tuple[str, ...]
    configured_keys: tuple[str, ...]

    @property
    def is_valid(self) -> bool:
        """Return True when no error-severity issue was produced."""

        return len(self.errors) == 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-friendly dictionary.

        Returns:
            dict[str, Any]: Validation payload.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        return {
            "is_valid": self.is_valid,
            "strictness": self.strictness.value,
            "errors": [issue.to_dict() for issue in self.errors],
            "warnings": [issue.to_dict() for issue in self.warnings],
            "missing_required_keys": list(self.missing_required_keys),
            "configured_keys": list(self.configured_keys),
        }


class EnvironmentReaderPort(Protocol):
    """Port for reading one configuration value by key name."""

    def config_read(self, name: str) -> str | None:
        """Return the current value for a key.

        Args:
            name: Environment variable name.

        Returns:
            str | None: Raw value, or None when absent.

        Raises:
            RuntimeError: Raised when the backing source cannot be read.
        """
