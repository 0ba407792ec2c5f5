"""Configuration package for runtime settings, key registry and validation."""

from .environment import MappingEnvironmentReader, ProcessEnvironmentReader, config_create_environment_reader
from .interfaces import (
	ConfigurationValidationResult,
	DescriptorCategory,
	EnvironmentDescriptor,
	EnvironmentReaderPort,
	IssueSeverity,
	Strictness,
	ValidationIssue,
)
from .registry import (
	ENVIRONMENT_DESCRIPTORS,
	config_format_azure_authority,
	config_format_database_url,
	config_format_guid,
	config_format_http_url,
	config_format_jwt,
	config_format_log_level,
	config_format_redirect_uri,
	config_format_supabase_url,
	config_registry_descriptors_by_category,
	config_registry_get_descriptor,
	config_render_env_template,
)
from .settings import AppSettings, SettingsLoadError, config_load_settings
from .validation import PRODUCTION_ENVIRONMENT_NAME, config_resolve_strictness, config_validate_environment

__all__ = [
	"AppSettings",
	"ConfigurationValidationResult",
	"DescriptorCategory",
	"ENVIRONMENT_DESCRIPTORS",
	"EnvironmentDescriptor",
	"EnvironmentReaderPort",
	"IssueSeverity",
	"MappingEnvironmentReader",
	"PRODUCTION_ENVIRONMENT_NAME",
	"ProcessEnvironmentReader",
	"SettingsLoadError",
	"Strictness",
	"ValidationIssue",
	"config_create_environment_reader",
	"config_format_azure_authority",
	"config_format_database_url",
	"config_format_guid",
	"config_format_http_url",
	"config_format_jwt",
	"config_format_log_level",
	"config_format_redirect_uri",
	"config_format_supabase_url",
	"config_load_settings",
	"config_registry_descriptors_by_category",
	"config_registry_get_descriptor",
	"config_render_env_template",
	"config_resolve_strictness",
	"config_validate_environment",
]
