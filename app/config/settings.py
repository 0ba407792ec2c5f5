"""Typed runtime settings with dotenv support and startup validation."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for API runtime and health-check configuration.

    Environment variable names map directly to field names in uppercase.
    Example: `database_url` reads from `DATABASE_URL`.

    Integration keys (Supabase, Azure AD, database) are optional here so the
    service can start with incomplete configuration; their presence and
    format are judged by the registry validator instead.

    Attributes:
        environment_name: Runtime environment label.
        application_host: Host interface for web server binding.
        application_port: Web server port.
        application_version: Version label reported by the health endpoint.
        log_level: Root logging level name; unknown names fall back to INFO
            and are reported by the configuration check instead.
        database_url: PostgreSQL DSN for the Supabase database.
        supabase_url: Supabase project URL.
        supabase_anon_key: Supabase public (anon) API key.
        supabase_service_role_key: Supabase service-role API key.
        azure_client_id: Azure AD application (client) id.
        azure_tenant_id: Azure AD tenant id.
        azure_authority: Azure AD authority URL.
        azure_redirect_uri: Azure AD redirect URI.
        azure_discovery_path: Path appended to the authority for the discovery document.
        health_probe_timeout_seconds: Per-attempt timeout for network-bound probes.
        health_retry_attempts: Optional override of probe retry attempt count.
        health_retry_base_delay_ms: Optional override of probe retry base delay.
        health_query_table: Table queried by the database probe.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment_name: str = Field(default="development")
    application_host: str = Field(default="0.0.0.0")
    application_port: int = Field(default=8000, ge=1, le=65535)
    application_version: str = Field(default="1.0.0", min_length=1)
    log_level: str = Field(default="INFO")
    database_url: str | None = Field(default=None)
    supabase_url: str | None = Field(default=None)
    supabase_anon_key: str | None = Field(default=None)
    supabase_service_role_key: str | None = Field(default=None)
    azure_client_id: str | None = Field(default=None)
    azure_tenant_id: str | None = Field(default=None)
    azure_authority: str | None = Field(default=None)
    azure_redirect_uri: str | None = Field(default=None)
    azure_discovery_path: str = Field(default="/v2.0/.well-known/openid-configuration", min_length=1)
    health_probe_timeout_seconds: float = Field(default=5.0, gt=0, le=30)
    health_retry_attempts: int | None = Field(default=None, ge=1, le=10)
    health_retry_base_delay_ms: float | None = Field(default=None, ge=0)
    health_query_table: str = Field(default="users", min_length=1)

    @field_validator(
        "database_url",
        "supabase_url",
        "supabase_anon_key",
        "supabase_service_role_key",
        "azure_client_id",
        "azure_tenant_id",
        "azure_authority",
        "azure_redirect_uri",
    )
    @classmethod
    def _validate_optional_string(cls, value: str | None) -> str | None:
        if value is None:
            return None
        stripped_value = value.strip()
        return stripped_value or None

    @field_validator("environment_name")
    @classmethod
    def _validate_environment_name(cls, value: str) -> str:
        stripped_value = value.strip().lower()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            return "INFO"
        return normalized_value

    @field_validator("health_query_table")
    @classmethod
    def _validate_table_name(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value.replace("_", "").replace(".", "").isalnum():
            raise ValueError("health_query_table must be a plain table name")
        return stripped_value


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
