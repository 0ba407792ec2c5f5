"""Error classification predicates and named retry policy presets.

Presets are plain data over `RetryOptions`; adding a policy means adding a
table entry, not a new retry algorithm.
"""

from __future__ import annotations

import asyncio
from dataclasses import replace
from enum import Enum
from types import MappingProxyType
from typing import Any, Final, Mapping

from .interfaces import RetryOptions

_NETWORK_ERROR_TYPE_TOKENS: Final[tuple[str, ...]] = (
    "networkerror",
    "timeout",
    "connecterror",
    "connectionerror",
    "transporterror",
)
_NETWORK_ERROR_MESSAGE_TOKENS: Final[tuple[str, ...]] = (
    "network",
    "timeout",
    "timed out",
    "connection",
    "econnreset",
    "enotfound",
    "econnrefused",
    "etimedout",
    "temporary",
    "service unavailable",
    "bad gateway",
    "gateway timeout",
)
_AUTH_TOKEN_ERROR_MARKERS: Final[tuple[str, ...]] = ("JWT_EXPIRED", "INVALID_JWT", "TOKEN_REFRESH_FAILED")
# PGRST301: connection error, PGRST116: connection timeout
_DATABASE_TRANSIENT_MARKERS: Final[tuple[str, ...]] = ("JWT_EXPIRED", "PGRST301", "PGRST116")


class RetryPolicyName(str, Enum):
    """Closed set of named retry presets."""

    NETWORK_TRANSIENT = "network-transient"
    AUTH_TOKEN_EXPIRED = "auth-token-expired"
    GENERIC_CRITICAL = "generic-critical"
    DATABASE_TRANSIENT = "database-transient"


def retry_is_network_error(error: BaseException) -> bool:
    """Return whether an error looks like a transient network failure.

    Args:
        error: Error raised by a failed attempt.

    Returns:
        bool: True for timeouts, connection failures and gateway-style HTTP errors.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if isinstance(error, (ConnectionError, TimeoutError, asyncio.TimeoutError)):
        return True

    type_names = [error_type.__name__.lower() for error_type in type(error).__mro__]
    if any(token in type_name for type_name in type_names for token in _NETWORK_ERROR_TYPE_TOKENS):
        return True

    message = str(error).lower()
    return any(token in message for token in _NETWORK_ERROR_MESSAGE_TOKENS)


def retry_is_auth_token_error(error: BaseException) -> bool:
    """Return whether an error reports an expired or refreshable auth token.

    Args:
        error: Error raised by a failed attempt.

    Returns:
        bool: True when the message carries a known token marker.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    message = str(error).upper()
    return any(marker in message for marker in _AUTH_TOKEN_ERROR_MARKERS)


def retry_is_database_transient_error(error: BaseException) -> bool:
    """Return whether a database error is worth retrying.

    Errors carrying a boolean `transient` attribute were already classified
    by the database adapter and are not re-inspected.

    Args:
        error: Error raised by a failed attempt.

    Returns:
        bool: True for network failures and known transient database markers.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    transient = getattr(error, "transient", None)
    if isinstance(transient, bool):
        return transient
    if retry_is_network_error(error):
        return True
    message = str(error).upper()
    return any(marker in message for marker in _DATABASE_TRANSIENT_MARKERS)


RETRY_POLICIES: Final[Mapping[RetryPolicyName, RetryOptions]] = MappingProxyType(
    {
        RetryPolicyName.NETWORK_TRANSIENT: RetryOptions(
            max_attempts=3,
            base_delay_ms=1000.0,
            retry_condition=retry_is_network_error,
        ),
        RetryPolicyName.AUTH_TOKEN_EXPIRED: RetryOptions(
            max_attempts=2,
            base_delay_ms=500.0,
            retry_condition=retry_is_auth_token_error,
        ),
        RetryPolicyName.GENERIC_CRITICAL: RetryOptions(
            max_attempts=5,
            base_delay_ms=2000.0,
            max_delay_ms=30000.0,
            retry_condition=retry_is_network_error,
        ),
        RetryPolicyName.DATABASE_TRANSIENT: RetryOptions(
            max_attempts=3,
            base_delay_ms=1000.0,
            retry_condition=retry_is_database_transient_error,
        ),
    }
)


def retry_get_policy(policy_name: RetryPolicyName | str, **overrides: Any) -> RetryOptions:
    """Return a named retry preset, optionally with field overrides.

    Args:
        policy_name: Preset name or its string value.
        **overrides: `RetryOptions` fields replacing preset values; `None` values are ignored.

    Returns:
        RetryOptions: Preset copy with overrides applied.

    Raises:
        ValueError: Raised when the policy name is unknown or overrides are invalid.
    """

    resolved_name = RetryPolicyName(policy_name)
    applied_overrides = {key: value for key, value in overrides.items() if value is not None}
    return replace(RETRY_POLICIES[resolved_name], **applied_overrides)
