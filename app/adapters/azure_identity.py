"""Azure AD identity-provider adapter for configuration checks and discovery."""

from __future__ import annotations

from typing import Any, Final
from urllib.parse import urlparse

import httpx

from .identity_errors import (
    IdentityProviderConfigurationError,
    IdentityProviderConnectionError,
    IdentityProviderHttpError,
    IdentityProviderResponseError,
    IdentityProviderTimeoutError,
)
from .interfaces import IdentityProviderPort


class AzureIdentityProviderAdapter(IdentityProviderPort):
    """Adapter for Azure AD settings validation and OpenID discovery fetch."""

    _USER_AGENT: Final[str] = "mdm-hub-health/1.0 (Python/httpx)"
    _DEFAULT_DISCOVERY_PATH: Final[str] = "/v2.0/.well-known/openid-configuration"

    def __init__(
        self,
        client_id: str | None,
        tenant_id: str | None,
        authority: str | None,
        redirect_uri: str | None,
        discovery_path: str = _DEFAULT_DISCOVERY_PATH,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize Azure AD adapter.

        Args:
            client_id: Application (client) id.
            tenant_id: Directory (tenant) id.
            authority: Authority URL, e.g. `https://login.microsoftonline.com/<tenant>`.
            redirect_uri: OAuth redirect URI.
            discovery_path: Path appended to the authority for the discovery document.
            transport: Optional httpx transport used instead of the network.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when discovery_path is blank.
        """

        normalized_discovery_path = discovery_path.strip()
        if not normalized_discovery_path:
            raise ValueError("discovery_path must not be blank")

        self._client_id = (client_id or "").strip()
        self._tenant_id = (tenant_id or "").strip()
        self._authority = (authority or "").strip().rstrip("/")
        self._redirect_uri = (redirect_uri or "").strip()
        self._discovery_path = "/" + normalized_discovery_path.lstrip("/")
        self._transport = transport

    def idp_is_configured(self) -> bool:
        return all((self._client_id, self._tenant_id, self._authority, self._redirect_uri))

    def idp_validate_configuration(self) -> list[str]:
        """Validate required Azure AD settings and URL shapes.

        Returns:
            list[str]: Error messages; empty when configuration is usable.

        Raises:
            RuntimeError: This implementation does not raise runtime errors.
        """

        errors: list[str] = []
        if not self._client_id:
            errors.append("AZURE_CLIENT_ID is required")
        if not self._tenant_id:
            errors.append("AZURE_TENANT_ID is required")
        if not self._authority:
            errors.append("AZURE_AUTHORITY is required")
        elif not self._adapter_is_absolute_url(self._authority, schemes=("https",)):
            errors.append("AZURE_AUTHORITY is not a valid https URL")
        if not self._redirect_uri:
            errors.append("AZURE_REDIRECT_URI is required")
        elif not self._adapter_is_absolute_url(self._redirect_uri, schemes=("http", "https")):
            errors.append("AZURE_REDIRECT_URI is not a valid URL")
        return errors

    def idp_describe(self) -> dict[str, Any]:
        return {
            "client_id": "Set" if self._client_id else "Missing",
            "tenant_id": self._tenant_id or None,
            "authority": self._authority or None,
            "redirect_uri": self._redirect_uri or None,
        }

    def idp_discovery_url(self) -> str:
        """Return the discovery document URL derived from the authority.

        Returns:
            str: Absolute discovery document URL.

        Raises:
            IdentityProviderConfigurationError: Raised when the authority is missing.
        """

        if not self._authority:
            raise IdentityProviderConfigurationError("AZURE_AUTHORITY is required")
        return f"{self._authority}{self._discovery_path}"

    async def idp_fetch_discovery_document(self, timeout_seconds: float) -> dict[str, Any]:
        """Fetch and parse the OpenID discovery document with one HTTP GET.

        Args:
            timeout_seconds: Request timeout in seconds.

        Returns:
            dict[str, Any]: Parsed discovery document containing `issuer`.

        Raises:
            IdentityProviderConfigurationError: Raised when the authority is missing.
            IdentityProviderTimeoutError: Raised when the request times out.
            IdentityProviderConnectionError: Raised for transport failures.
            IdentityProviderHttpError: Raised for non-2xx responses.
            IdentityProviderResponseError: Raised when the body is not a discovery document.
        """

        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0")

        discovery_url = self.idp_discovery_url()
        try:
            async with httpx.AsyncClient(
                timeout=timeout_seconds,
                transport=self._transport,
                headers={"Accept": "application/json", "User-Agent": self._USER_AGENT},
            ) as client:
                response = await client.get(discovery_url)
        except httpx.TimeoutException as error:
            raise IdentityProviderTimeoutError("identity provider discovery request timed out") from error
        except httpx.TransportError as error:
            raise IdentityProviderConnectionError(f"identity provider connection failed: {error}") from error

        if not response.is_success:
            raise IdentityProviderHttpError(
                f"identity provider returned HTTP {response.status_code} {response.reason_phrase}".strip(),
                status_code=response.status_code,
                reason_phrase=response.reason_phrase,
            )

        try:
            document = response.json()
        except ValueError as error:
            raise IdentityProviderResponseError("discovery document is not valid JSON") from error
        if not isinstance(document, dict) or not document.get("issuer"):
            raise IdentityProviderResponseError("discovery document missing issuer")
        return document

    @staticmethod
    def _adapter_is_absolute_url(value: str, schemes: tuple[str, ...]) -> bool:
        parsed_url = urlparse(value)
        return parsed_url.scheme in schemes and bool(parsed_url.netloc)
