"""Adapter layer package for identity-provider and Supabase integration boundaries."""

from .azure_identity import AzureIdentityProviderAdapter
from .identity_errors import (
	IdentityProviderConfigurationError,
	IdentityProviderConnectionError,
	IdentityProviderError,
	IdentityProviderHttpError,
	IdentityProviderResponseError,
	IdentityProviderTimeoutError,
)
from .interfaces import IdentityProviderPort, SupabaseAuthPort
from .supabase_auth import SupabaseAuthHealthAdapter
from .supabase_errors import (
	SupabaseConfigurationError,
	SupabaseConnectionError,
	SupabaseError,
	SupabaseHttpError,
	SupabaseResponseError,
	SupabaseTimeoutError,
)

__all__ = [
	"AzureIdentityProviderAdapter",
	"IdentityProviderConfigurationError",
	"IdentityProviderConnectionError",
	"IdentityProviderError",
	"IdentityProviderHttpError",
	"IdentityProviderPort",
	"IdentityProviderResponseError",
	"IdentityProviderTimeoutError",
	"SupabaseAuthHealthAdapter",
	"SupabaseAuthPort",
	"SupabaseConfigurationError",
	"SupabaseConnectionError",
	"SupabaseError",
	"SupabaseHttpError",
	"SupabaseResponseError",
	"SupabaseTimeoutError",
]
