"""Typed interfaces for adapter-layer responsibilities."""

from typing import Any, Protocol


class IdentityProviderPort(Protocol):
    """Port for the external identity provider used by SSO."""

    def idp_is_configured(self) -> bool:
        """Return whether the identity-provider feature is switched on.

        Returns:
            bool: True when every identity-provider setting has a value.

        Raises:
            RuntimeError: Raised when configuration metadata is unavailable.
        """

    def idp_validate_configuration(self) -> list[str]:
        """Validate the static shape of local identity-provider settings.

        Returns:
            list[str]: Configuration error messages; empty when valid.

        Raises:
            RuntimeError: Raised when configuration metadata is unavailable.
        """

    def idp_describe(self) -> dict[str, Any]:
        """Return non-secret configuration details for diagnostics.

        Returns:
            dict[str, Any]: Diagnostics payload.

        Raises:
            RuntimeError: Raised when configuration metadata is unavailable.
        """

    async def idp_fetch_discovery_document(self, timeout_seconds: float) -> dict[str, Any]:
        """Fetch the provider's OpenID discovery document once.

        Args:
            timeout_seconds: Request timeout for this single attempt.

        Returns:
            dict[str, Any]: Parsed discovery document.

        Raises:
            ConnectionError: Raised when the provider cannot be reached.
            TimeoutError: Raised when the request exceeds its timeout.
            RuntimeError: Raised for non-success status or malformed document.
        """


class SupabaseAuthPort(Protocol):
    """Port for the Supabase auth service health endpoint."""

    def supabase_is_configured(self) -> bool:
        """Return whether Supabase authentication is switched on.

        Returns:
            bool: True when both the project URL and the anon key have a value.

        Raises:
            RuntimeError: Raised when configuration metadata is unavailable.
        """

    def supabase_describe(self) -> dict[str, Any]:
        """Return non-secret configuration details for diagnostics.

        Returns:
            dict[str, Any]: Diagnostics payload with the project URL and service-role presence.

        Raises:
            RuntimeError: Raised when configuration metadata is unavailable.
        """

    async def supabase_fetch_auth_health(self, timeout_seconds: float) -> dict[str, Any]:
        """Call the auth service health endpoint once.

        Args:
            timeout_seconds: Request timeout for this single attempt.

        Returns:
            dict[str, Any]: Parsed health payload.

        Raises:
            ConnectionError: Raised when Supabase cannot be reached.
            TimeoutError: Raised when the request exceeds its timeout.
            RuntimeError: Raised for non-success status or malformed body.
        """
