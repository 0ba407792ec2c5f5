"""Health-check service composing probes, aggregation and context."""

from __future__ import annotations

import asyncio
import logging

from app.config import ConfigurationValidationResult, Strictness, config_validate_environment
from app.domain import HealthAggregate, ProbeResult

from .aggregator import health_aggregate_checks, health_build_critical_aggregate
from .context import HealthRuntimeContext
from .probes import (
    CHECK_CONFIGURATION,
    CHECK_DATABASE,
    CHECK_IDENTITY_PROVIDER,
    CHECK_SUPABASE,
    PROBE_CHECK_NAMES,
    health_probe_configuration,
    health_probe_database,
    health_probe_identity_provider,
    health_probe_supabase,
)

logger = logging.getLogger(__name__)


class UnknownCheckError(KeyError):
    """Raised when a check name is not one of the known probes."""


class HealthCheckService:
    """Entry point for full health checks and individually callable probes."""

    def __init__(self, context: HealthRuntimeContext):
        """Initialize health-check service.

        Args:
            context: Runtime dependencies and clocks.

        Raises:
            ValueError: Raised when context is None.
        """

        if context is None:
            raise ValueError("context must not be None")
        self._context = context

    @property
    def context(self) -> HealthRuntimeContext:
        return self._context

    def health_validate_configuration(self, strictness: Strictness | None = None) -> ConfigurationValidationResult:
        """Run the configuration validator without wrapping it into a probe result.

        Args:
            strictness: Optional strictness override; defaults to the context strictness.

        Returns:
            ConfigurationValidationResult: Validation result.

        Raises:
            ValueError: Raised when the environment reader is missing.
        """

        return config_validate_environment(
            environment_reader=self._context.environment_reader,
            strictness=strictness or self._context.strictness,
        )

    async def health_check_configuration(self, strictness: Strictness | None = None) -> ProbeResult:
        return await health_probe_configuration(
            environment_reader=self._context.environment_reader,
            strictness=strictness or self._context.strictness,
            retry_options=self._context.configuration_retry_options,
            sleep=self._context.sleep,
        )

    async def health_check_supabase(self) -> ProbeResult:
        return await health_probe_supabase(
            supabase_service=self._context.supabase_service,
            retry_options=self._context.network_retry_options,
            timeout_seconds=self._context.probe_timeout_seconds,
            sleep=self._context.sleep,
        )

    async def health_check_identity_provider(self) -> ProbeResult:
        return await health_probe_identity_provider(
            identity_provider=self._context.identity_provider,
            retry_options=self._context.network_retry_options,
            timeout_seconds=self._context.probe_timeout_seconds,
            sleep=self._context.sleep,
        )

    async def health_check_database(self) -> ProbeResult:
        return await health_probe_database(
            database_service=self._context.database_service,
            retry_options=self._context.database_retry_options,
            timeout_seconds=self._context.probe_timeout_seconds,
            sleep=self._context.sleep,
        )

    async def health_check_named(self, check_name: str, strictness: Strictness | None = None) -> ProbeResult:
        """Run one probe selected by its check name.

        Args:
            check_name: One of `configuration`, `supabase`, `identity-provider`, `database`.
            strictness: Optional strictness override for the configuration probe.

        Returns:
            ProbeResult: Result of the selected probe.

        Raises:
            UnknownCheckError: Raised when the check name is unknown.
        """

        if check_name == CHECK_CONFIGURATION:
            return await self.health_check_configuration(strictness=strictness)
        if check_name == CHECK_SUPABASE:
            return await self.health_check_supabase()
        if check_name == CHECK_IDENTITY_PROVIDER:
            return await self.health_check_identity_provider()
        if check_name == CHECK_DATABASE:
            return await self.health_check_database()
        raise UnknownCheckError(f"unknown check: {check_name}; expected one of {', '.join(PROBE_CHECK_NAMES)}")

    async def health_run_all(self) -> HealthAggregate:
        """Run every probe concurrently and aggregate once all complete.

        Returns:
            HealthAggregate: Aggregated verdict with timing metrics.

        Raises:
            Exception: Propagates programming errors from the check sequence itself.
        """

        started_at = self._context.clock()
        configuration_result, supabase_result, identity_provider_result, database_result = await asyncio.gather(
            self.health_check_configuration(),
            self.health_check_supabase(),
            self.health_check_identity_provider(),
            self.health_check_database(),
        )
        aggregate = health_aggregate_checks(
            checks={
                CHECK_CONFIGURATION: configuration_result,
                CHECK_SUPABASE: supabase_result,
                CHECK_IDENTITY_PROVIDER: identity_provider_result,
                CHECK_DATABASE: database_result,
            },
            started_at=started_at,
            process_started_at=self._context.process_started_at,
            clock=self._context.clock,
        )
        logger.info(
            "Health check completed: status=%s response_time_ms=%.1f",
            aggregate.overall_status.value,
            aggregate.metrics.response_time_ms,
        )
        return aggregate

    def health_build_critical_aggregate(self, started_at: float) -> HealthAggregate:
        return health_build_critical_aggregate(
            check_names=PROBE_CHECK_NAMES,
            started_at=started_at,
            process_started_at=self._context.process_started_at,
            clock=self._context.clock,
        )
