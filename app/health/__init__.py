"""Health-check package: probes, aggregation, service and reporting."""

from .aggregator import (
	ALL_SYSTEMS_OPERATIONAL,
	HEALTH_STATUS_CODES,
	NOT_CHECKED_CRITICAL_ERROR,
	OVERALL_CHECK_NAME,
	health_aggregate_checks,
	health_build_critical_aggregate,
	health_build_overall_check,
	health_determine_overall_status,
	health_status_code,
)
from .context import PROCESS_STARTED_MONOTONIC, HealthRuntimeContext
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
from .reporting import (
	HEALTH_STATUS_HEADER,
	RESPONSE_TIME_HEADER,
	config_build_environment_status,
	config_render_validation_report,
	health_build_payload,
	health_build_response_headers,
	health_render_console_report,
)
from .service import HealthCheckService, UnknownCheckError

__all__ = [
	"ALL_SYSTEMS_OPERATIONAL",
	"CHECK_CONFIGURATION",
	"CHECK_DATABASE",
	"CHECK_IDENTITY_PROVIDER",
	"CHECK_SUPABASE",
	"HEALTH_STATUS_CODES",
	"HEALTH_STATUS_HEADER",
	"HealthCheckService",
	"HealthRuntimeContext",
	"NOT_CHECKED_CRITICAL_ERROR",
	"OVERALL_CHECK_NAME",
	"PROBE_CHECK_NAMES",
	"PROCESS_STARTED_MONOTONIC",
	"RESPONSE_TIME_HEADER",
	"UnknownCheckError",
	"config_build_environment_status",
	"config_render_validation_report",
	"health_aggregate_checks",
	"health_build_critical_aggregate",
	"health_build_overall_check",
	"health_build_payload",
	"health_build_response_headers",
	"health_determine_overall_status",
	"health_probe_configuration",
	"health_probe_database",
	"health_probe_identity_provider",
	"health_probe_supabase",
	"health_render_console_report",
	"health_status_code",
]
