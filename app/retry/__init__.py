"""Retry engine package for bounded exponential backoff."""

from .engine import retry_calculate_delay_ms, retry_execute
from .interfaces import RetryOptions, RetryOutcome, retry_always
from .policies import (
	RETRY_POLICIES,
	RetryPolicyName,
	retry_get_policy,
	retry_is_auth_token_error,
	retry_is_database_transient_error,
	retry_is_network_error,
)

__all__ = [
	"RETRY_POLICIES",
	"RetryOptions",
	"RetryOutcome",
	"RetryPolicyName",
	"retry_always",
	"retry_calculate_delay_ms",
	"retry_execute",
	"retry_get_policy",
	"retry_is_auth_token_error",
	"retry_is_database_transient_error",
	"retry_is_network_error",
]
