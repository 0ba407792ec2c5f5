"""Supabase auth adapter for the project health endpoint."""

from __future__ import annotations

from typing import Any, Final

import httpx

from .interfaces import SupabaseAuthPort
from .supabase_errors import (
    SupabaseConfigurationError,
    SupabaseConnectionError,
    SupabaseHttpError,
    SupabaseResponseError,
    SupabaseTimeoutError,
)


class SupabaseAuthHealthAdapter(SupabaseAuthPort):
    """Adapter that reaches `{SUPABASE_URL}/auth/v1/health` with the anon key."""

    _USER_AGENT: Final[str] = "mdm-hub-health/1.0 (Python/httpx)"
    _HEALTH_PATH: Final[str] = "/auth/v1/health"

    def __init__(
        self,
        url: str | None,
        anon_key: str | None,
        service_role_key: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize Supabase adapter.

        Args:
            url: Supabase project URL.
            anon_key: Public (anon) API key sent as `apikey` and bearer token.
            service_role_key: Service-role key; only its presence is reported.
            transport: Optional httpx transport used instead of the network.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: This initializer does not raise value errors.
        """

        self._url = (url or "").strip().rstrip("/")
        self._anon_key = (anon_key or "").strip()
        self._has_service_role = bool((service_role_key or "").strip())
        self._transport = transport

    def supabase_is_configured(self) -> bool:
        return bool(self._url and self._anon_key)

    def supabase_describe(self) -> dict[str, Any]:
        return {"url": self._url or None, "has_service_role": self._has_service_role}

    async def supabase_fetch_auth_health(self, timeout_seconds: float) -> dict[str, Any]:
        """Fetch the auth health payload with one HTTP GET.

        Args:
            timeout_seconds: Request timeout in seconds.

        Returns:
            dict[str, Any]: Parsed health payload.

        Raises:
            SupabaseConfigurationError: Raised when the URL or anon key is missing.
            SupabaseTimeoutError: Raised when the request times out.
            SupabaseConnectionError: Raised for transport failures.
            SupabaseHttpError: Raised for non-2xx responses.
            SupabaseResponseError: Raised when the body is not a JSON object.
        """

        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0")
        if not self.supabase_is_configured():
            raise SupabaseConfigurationError("SUPABASE_URL and SUPABASE_ANON_KEY are required")

        try:
            async with httpx.AsyncClient(
                timeout=timeout_seconds,
                transport=self._transport,
                headers={
                    "Accept": "application/json",
                    "User-Agent": self._USER_AGENT,
                    "apikey": self._anon_key,
                    "Authorization": f"Bearer {self._anon_key}",
                },
            ) as client:
                response = await client.get(f"{self._url}{self._HEALTH_PATH}")
        except httpx.TimeoutException as error:
            raise SupabaseTimeoutError("supabase auth health request timed out") from error
        except httpx.TransportError as error:
            raise SupabaseConnectionError(f"supabase connection failed: {error}") from error

        if not response.is_success:
            raise SupabaseHttpError(
                f"supabase returned HTTP {response.status_code} {response.reason_phrase}".strip(),
                status_code=response.status_code,
                reason_phrase=response.reason_phrase,
            )

        try:
            payload = response.json()
        except ValueError as error:
            raise SupabaseResponseError("supabase auth health response is not valid JSON") from error
        if not isinstance(payload, dict):
            raise SupabaseResponseError("supabase auth health response is not a JSON object")
        return payload
