"""Live dependency probes producing tri-state check results.

Every probe runs its work through the retry engine, measures latency around
the whole check and converts any exception into a result. Probes never raise.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Awaitable, Callable, Final, Mapping

from app.adapters import IdentityProviderHttpError, IdentityProviderPort, SupabaseAuthPort, SupabaseHttpError
from app.config import ConfigurationValidationResult, EnvironmentReaderPort, Strictness, config_validate_environment
from app.db import DatabaseHealthPort, DatabaseHealthQueryResult
from app.domain import ProbeResult, ProbeStatus
from app.retry import RETRY_POLICIES, RetryOptions, RetryPolicyName, retry_execute

logger = logging.getLogger(__name__)

CHECK_CONFIGURATION: Final[str] = "configuration"
CHECK_SUPABASE: Final[str] = "supabase"
CHECK_IDENTITY_PROVIDER: Final[str] = "identity-provider"
CHECK_DATABASE: Final[str] = "database"
PROBE_CHECK_NAMES: Final[tuple[str, ...]] = (
    CHECK_CONFIGURATION,
    CHECK_SUPABASE,
    CHECK_IDENTITY_PROVIDER,
    CHECK_DATABASE,
)


async def health_probe_configuration(
    environment_reader: EnvironmentReaderPort,
    strictness: Strictness,
    retry_options: RetryOptions | None = None,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> ProbeResult:
    """Validate configuration and map the result to a check status.

    No issues map to `pass`, warnings only to `warn` and any error to `fail`.

    Args:
        environment_reader: Source of configuration values.
        strictness: Validation strictness.
        retry_options: Retry options; defaults to the generic-critical preset.
        sleep: Awaitable sleep used between attempts.

    Returns:
        ProbeResult: Configuration check result.

    Raises:
        RuntimeError: This probe does not raise runtime errors.
    """

    started_at = time.perf_counter()

    async def _validate() -> ConfigurationValidationResult:
        return config_validate_environment(environment_reader=environment_reader, strictness=strictness)

    try:
        outcome = await retry_execute(
            _validate,
            options=retry_options or RETRY_POLICIES[RetryPolicyName.GENERIC_CRITICAL],
            sleep=sleep,
        )
        if not outcome.success or outcome.value is None:
            return _health_probe_result(
                ProbeStatus.FAIL,
                "Configuration check failed",
                started_at,
                details=_health_error_details(outcome.error, outcome.attempts),
            )

        validation = outcome.value
        details = validation.to_dict()
        if not validation.is_valid:
            missing_label = ", ".join(validation.missing_required_keys)
            message = "Configuration validation failed"
            if missing_label:
                message = f"{message}: missing required configuration: {missing_label}"
            return _health_probe_result(ProbeStatus.FAIL, message, started_at, details=details)
        if validation.warnings:
            return _health_probe_result(
                ProbeStatus.WARN,
                f"Configuration is valid with {len(validation.warnings)} warning(s)",
                started_at,
                details=details,
            )
        return _health_probe_result(ProbeStatus.PASS, "Configuration is valid", started_at, details=details)
    except Exception as error:  # pylint: disable=broad-exception-caught
        logger.exception("Configuration probe raised unexpectedly")
        return _health_probe_result(
            ProbeStatus.FAIL,
            "Configuration check failed",
            started_at,
            details=_health_error_details(error),
        )


async def health_probe_supabase(
    supabase_service: SupabaseAuthPort,
    retry_options: RetryOptions | None = None,
    timeout_seconds: float = 5.0,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> ProbeResult:
    """Check that the Supabase auth service answers its health endpoint.

    A missing URL or anon key degrades (`warn`); an unreachable or erroring
    auth service fails.

    Args:
        supabase_service: Supabase auth capability.
        retry_options: Retry options; defaults to the network-transient preset.
        timeout_seconds: Per-attempt timeout for the health request.
        sleep: Awaitable sleep used between attempts.

    Returns:
        ProbeResult: Supabase check result.

    Raises:
        RuntimeError: This probe does not raise runtime errors.
    """

    started_at = time.perf_counter()
    try:
        if not supabase_service.supabase_is_configured():
            return _health_probe_result(ProbeStatus.WARN, "Supabase authentication disabled", started_at)

        async def _fetch_auth_health() -> dict[str, Any]:
            return await asyncio.wait_for(
                supabase_service.supabase_fetch_auth_health(timeout_seconds=timeout_seconds),
                timeout=timeout_seconds,
            )

        outcome = await retry_execute(
            _fetch_auth_health,
            options=retry_options or RETRY_POLICIES[RetryPolicyName.NETWORK_TRANSIENT],
            sleep=sleep,
        )
        if not outcome.success:
            logger.warning("Supabase auth health failed after %s attempt(s): %s", outcome.attempts, outcome.error)
            details = _health_error_details(outcome.error, outcome.attempts)
            if isinstance(outcome.error, SupabaseHttpError):
                details["status_code"] = outcome.error.status_code
            return _health_probe_result(ProbeStatus.FAIL, "Supabase connection failed", started_at, details=details)

        return _health_probe_result(
            ProbeStatus.PASS,
            "Supabase connection healthy",
            started_at,
            details={**supabase_service.supabase_describe(), "attempts": outcome.attempts},
        )
    except Exception as error:  # pylint: disable=broad-exception-caught
        logger.exception("Supabase probe raised unexpectedly")
        return _health_probe_result(
            ProbeStatus.FAIL,
            "Supabase check failed",
            started_at,
            details=_health_error_details(error),
        )


async def health_probe_identity_provider(
    identity_provider: IdentityProviderPort,
    retry_options: RetryOptions | None = None,
    timeout_seconds: float = 5.0,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> ProbeResult:
    """Check identity-provider configuration and discovery reachability.

    A disabled feature or an unreachable provider degrades (`warn`) because
    other sign-in paths keep working; malformed local configuration fails.

    Args:
        identity_provider: Identity-provider capability.
        retry_options: Retry options; defaults to the network-transient preset.
        timeout_seconds: Per-attempt timeout for the discovery fetch.
        sleep: Awaitable sleep used between attempts.

    Returns:
        ProbeResult: Identity-provider check result.

    Raises:
        RuntimeError: This probe does not raise runtime errors.
    """

    started_at = time.perf_counter()
    try:
        if not identity_provider.idp_is_configured():
            return _health_probe_result(ProbeStatus.WARN, "Identity provider authentication disabled", started_at)

        provider_details = identity_provider.idp_describe()
        configuration_errors = identity_provider.idp_validate_configuration()
        if configuration_errors:
            return _health_probe_result(
                ProbeStatus.FAIL,
                "Identity provider configuration invalid",
                started_at,
                details={"errors": list(configuration_errors), **provider_details},
            )

        async def _fetch_discovery_document() -> dict[str, Any]:
            return await asyncio.wait_for(
                identity_provider.idp_fetch_discovery_document(timeout_seconds=timeout_seconds),
                timeout=timeout_seconds,
            )

        outcome = await retry_execute(
            _fetch_discovery_document,
            options=retry_options or RETRY_POLICIES[RetryPolicyName.NETWORK_TRANSIENT],
            sleep=sleep,
        )
        if not outcome.success:
            logger.warning("Identity provider discovery failed after %s attempt(s): %s", outcome.attempts, outcome.error)
            details = _health_error_details(outcome.error, outcome.attempts)
            if isinstance(outcome.error, IdentityProviderHttpError):
                details["status_code"] = outcome.error.status_code
            return _health_probe_result(
                ProbeStatus.WARN,
                "Identity provider discovery document not reachable",
                started_at,
                details={**details, **provider_details},
            )

        discovery_document = outcome.value or {}
        return _health_probe_result(
            ProbeStatus.PASS,
            "Identity provider configuration healthy",
            started_at,
            details={"issuer": discovery_document.get("issuer"), "attempts": outcome.attempts, **provider_details},
        )
    except Exception as error:  # pylint: disable=broad-exception-caught
        logger.exception("Identity provider probe raised unexpectedly")
        return _health_probe_result(
            ProbeStatus.FAIL,
            "Identity provider check failed",
            started_at,
            details=_health_error_details(error),
        )


async def health_probe_database(
    database_service: DatabaseHealthPort,
    retry_options: RetryOptions | None = None,
    timeout_seconds: float = 5.0,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> ProbeResult:
    """Run one bounded read query and map the outcome to a check status.

    Args:
        database_service: Database health capability.
        retry_options: Retry options; defaults to the database-transient preset.
        timeout_seconds: Per-attempt timeout for the query.
        sleep: Awaitable sleep used between attempts.

    Returns:
        ProbeResult: Database check result.

    Raises:
        RuntimeError: This probe does not raise runtime errors.
    """

    started_at = time.perf_counter()
    try:
        if not database_service.db_is_configured():
            return _health_probe_result(ProbeStatus.WARN, "Database not configured", started_at)

        target_label = database_service.db_connection_label()

        async def _run_health_query() -> DatabaseHealthQueryResult:
            return await asyncio.wait_for(
                asyncio.to_thread(database_service.db_run_health_query),
                timeout=timeout_seconds,
            )

        outcome = await retry_execute(
            _run_health_query,
            options=retry_options or RETRY_POLICIES[RetryPolicyName.DATABASE_TRANSIENT],
            sleep=sleep,
        )
        if not outcome.success or outcome.value is None:
            logger.warning("Database health query failed after %s attempt(s): %s", outcome.attempts, outcome.error)
            return _health_probe_result(
                ProbeStatus.FAIL,
                "Database connection failed",
                started_at,
                details={**_health_error_details(outcome.error, outcome.attempts), "target": target_label},
            )

        query_result = outcome.value
        return _health_probe_result(
            ProbeStatus.PASS,
            "Database connection healthy",
            started_at,
            details={
                "table": query_result.table_name,
                "row_count": query_result.row_count,
                "attempts": outcome.attempts,
                "target": target_label,
            },
        )
    except Exception as error:  # pylint: disable=broad-exception-caught
        logger.exception("Database probe raised unexpectedly")
        return _health_probe_result(
            ProbeStatus.FAIL,
            "Database check failed",
            started_at,
            details=_health_error_details(error),
        )


def _health_probe_result(
    status: ProbeStatus,
    message: str,
    started_at: float,
    details: Mapping[str, Any] | None = None,
) -> ProbeResult:
    latency_ms = max(0.0, (time.perf_counter() - started_at) * 1000.0)
    return ProbeResult(status=status, message=message, latency_ms=latency_ms, details=details)


def _health_error_details(error: BaseException | None, attempts: int | None = None) -> dict[str, Any]:
    details: dict[str, Any] = {
        "error": str(error) if error is not None else "unknown error",
        "error_type": type(error).__name__ if error is not None else None,
    }
    if attempts is not None:
        details["attempts"] = attempts
    return details
