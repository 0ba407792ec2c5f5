"""Application bootstrap wiring for runtime context and dependency assembly."""

import logging

from fastapi import FastAPI
from sqlalchemy.exc import ArgumentError, NoSuchModuleError

from app.adapters import AzureIdentityProviderAdapter, SupabaseAuthHealthAdapter
from app.api import create_api_application
from app.config import (
    AppSettings,
    EnvironmentReaderPort,
    Strictness,
    config_create_environment_reader,
    config_load_settings,
    config_resolve_strictness,
)
from app.db import (
    DatabaseHealthPort,
    SQLAlchemyDatabaseHealthService,
    UnavailableDatabaseHealthService,
    db_create_engine,
)
from app.health import HealthCheckService, HealthRuntimeContext
from app.retry import RetryPolicyName, retry_get_policy

logger = logging.getLogger(__name__)


def bootstrap_split_database_timeouts(probe_timeout_seconds: float) -> tuple[float, int]:
    """Split the probe timeout between connection setup and the health query.

    The database probe stops waiting after `probe_timeout_seconds`, but its
    worker thread keeps running until the driver gives up. Splitting the
    budget keeps that thread bounded by the same deadline.

    Args:
        probe_timeout_seconds: Per-attempt timeout of the database probe.

    Returns:
        tuple[float, int]: Connect timeout in seconds and statement timeout in milliseconds.

    Raises:
        ValueError: Raised when the probe timeout is not positive.
    """

    if probe_timeout_seconds <= 0:
        raise ValueError("probe_timeout_seconds must be > 0")
    half_budget_seconds = probe_timeout_seconds / 2
    return half_budget_seconds, max(1, int(half_budget_seconds * 1000))


def bootstrap_create_database_service(settings: AppSettings) -> DatabaseHealthPort:
    """Build the database health capability from settings.

    A missing URL yields an unconfigured service; a URL the engine factory
    rejects yields a configured service whose every query fails.

    Args:
        settings: Validated runtime settings.

    Returns:
        DatabaseHealthPort: Database health capability.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if settings.database_url is None:
        return UnavailableDatabaseHealthService(is_configured=False)

    connect_timeout_seconds, statement_timeout_ms = bootstrap_split_database_timeouts(
        settings.health_probe_timeout_seconds
    )
    try:
        engine = db_create_engine(
            database_url=settings.database_url,
            connect_timeout_seconds=connect_timeout_seconds,
        )
    except (ArgumentError, NoSuchModuleError, ValueError) as error:
        logger.warning("Database engine could not be created: %s", error)
        return UnavailableDatabaseHealthService(is_configured=True, reason=f"invalid database URL: {error}")

    return SQLAlchemyDatabaseHealthService(
        engine=engine,
        table_name=settings.health_query_table,
        statement_timeout_ms=statement_timeout_ms,
    )


def bootstrap_create_health_context(
    settings: AppSettings,
    environment_reader: EnvironmentReaderPort | None = None,
    strictness: Strictness | None = None,
) -> HealthRuntimeContext:
    """Assemble the health runtime context from settings.

    Args:
        settings: Validated runtime settings.
        environment_reader: Optional reader; defaults to dotenv files merged under process variables.
        strictness: Optional strictness; defaults to the one implied by the environment name.

    Returns:
        HealthRuntimeContext: Context with adapters and retry presets.

    Raises:
        ValueError: Raised when settings values are inconsistent.
    """

    identity_provider = AzureIdentityProviderAdapter(
        client_id=settings.azure_client_id,
        tenant_id=settings.azure_tenant_id,
        authority=settings.azure_authority,
        redirect_uri=settings.azure_redirect_uri,
        discovery_path=settings.azure_discovery_path,
    )
    retry_overrides = {
        "max_attempts": settings.health_retry_attempts,
        "base_delay_ms": settings.health_retry_base_delay_ms,
    }
    return HealthRuntimeContext(
        environment_name=settings.environment_name,
        version=settings.application_version,
        strictness=strictness or config_resolve_strictness(settings.environment_name),
        environment_reader=environment_reader or config_create_environment_reader(),
        identity_provider=identity_provider,
        database_service=bootstrap_create_database_service(settings),
        supabase_service=SupabaseAuthHealthAdapter(
            url=settings.supabase_url,
            anon_key=settings.supabase_anon_key,
            service_role_key=settings.supabase_service_role_key,
        ),
        probe_timeout_seconds=settings.health_probe_timeout_seconds,
        network_retry_options=retry_get_policy(RetryPolicyName.NETWORK_TRANSIENT, **retry_overrides),
        database_retry_options=retry_get_policy(RetryPolicyName.DATABASE_TRANSIENT, **retry_overrides),
        configuration_retry_options=retry_get_policy(RetryPolicyName.GENERIC_CRITICAL, max_attempts=1),
    )


def bootstrap_create_health_service(
    settings: AppSettings | None = None,
    strictness: Strictness | None = None,
) -> HealthCheckService:
    """Build the health-check service for HTTP and CLI surfaces.

    Args:
        settings: Optional settings; loaded from the environment when omitted.
        strictness: Optional strictness override.

    Returns:
        HealthCheckService: Fully wired service.

    Raises:
        SettingsLoadError: Raised when runtime settings are invalid.
    """

    resolved_settings = settings or config_load_settings()
    return HealthCheckService(
        context=bootstrap_create_health_context(resolved_settings, strictness=strictness),
    )


def bootstrap_create_application() -> FastAPI:
    """Assemble the runtime application after loading settings.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    return create_api_application(health_service=bootstrap_create_health_service())
