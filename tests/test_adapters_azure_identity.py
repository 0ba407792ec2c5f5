"""Regression tests for the Azure AD identity-provider adapter."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from app.adapters import (
    AzureIdentityProviderAdapter,
    IdentityProviderConfigurationError,
    IdentityProviderConnectionError,
    IdentityProviderHttpError,
    IdentityProviderResponseError,
    IdentityProviderTimeoutError,
)

_TENANT_ID = "66666666-7777-8888-9999-000000000000"
_AUTHORITY = f"https://login.microsoftonline.com/{_TENANT_ID}"


def _build_adapter(handler, **overrides) -> AzureIdentityProviderAdapter:
    """Build a fully configured adapter backed by a mock transport.

    Args:
        handler: Mock transport request handler.
        **overrides: Constructor argument overrides.

    Returns:
        AzureIdentityProviderAdapter: Adapter under test.

    Raises:
        ValueError: Raised when constructor arguments are invalid.
    """

    arguments = {
        "client_id": "11111111-2222-3333-4444-555555555555",
        "tenant_id": _TENANT_ID,
        "authority": _AUTHORITY,
        "redirect_uri": "https://hub.example.com/auth/callback",
        "transport": httpx.MockTransport(handler),
    }
    arguments.update(overrides)
    return AzureIdentityProviderAdapter(**arguments)


def test_azure_identity_fetch_discovery_document_returns_parsed_document() -> None:
    """Request the v2.0 discovery document and return it when it carries an issuer.

    Returns:
        None: Assertions validate request and parsed response.

    Raises:
        AssertionError: Raised when request or parsing is incorrect.
    """

    requested_urls: list[str] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        requested_urls.append(str(request.url))
        assert request.headers["Accept"] == "application/json"
        return httpx.Response(200, json={"issuer": f"{_AUTHORITY}/v2.0", "jwks_uri": "https://keys"})

    adapter = _build_adapter(_handler)

    document = asyncio.run(adapter.idp_fetch_discovery_document(timeout_seconds=2.0))

    assert document["issuer"] == f"{_AUTHORITY}/v2.0"
    assert requested_urls == [f"{_AUTHORITY}/v2.0/.well-known/openid-configuration"]


def test_azure_identity_fetch_discovery_document_maps_http_status_to_typed_error() -> None:
    """Raise an HTTP error carrying the upstream status code.

    Returns:
        None: Assertions validate HTTP error mapping.

    Raises:
        AssertionError: Raised when HTTP errors are not mapped.
    """

    adapter = _build_adapter(lambda request: httpx.Response(404))

    with pytest.raises(IdentityProviderHttpError) as error_info:
        asyncio.run(adapter.idp_fetch_discovery_document(timeout_seconds=2.0))

    assert error_info.value.status_code == 404
    assert "HTTP 404" in str(error_info.value)


def test_azure_identity_fetch_discovery_document_maps_transport_failures() -> None:
    """Map httpx timeouts and connect errors onto project-native exceptions.

    Returns:
        None: Assertions validate transport error mapping.

    Raises:
        AssertionError: Raised when transport failures leak httpx types.
    """

    def _timeout_handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("read timed out", request=request)

    def _connect_handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("name resolution failed", request=request)

    with pytest.raises(IdentityProviderTimeoutError):
        asyncio.run(_build_adapter(_timeout_handler).idp_fetch_discovery_document(timeout_seconds=2.0))
    with pytest.raises(IdentityProviderConnectionError):
        asyncio.run(_build_adapter(_connect_handler).idp_fetch_discovery_document(timeout_seconds=2.0))


def test_azure_identity_fetch_discovery_document_rejects_malformed_bodies() -> None:
    """Reject non-JSON bodies and documents without an issuer.

    Returns:
        None: Assertions validate response contract checks.

    Raises:
        AssertionError: Raised when malformed documents are accepted.
    """

    invalid_json_adapter = _build_adapter(lambda request: httpx.Response(200, text="<html>sign in</html>"))
    missing_issuer_adapter = _build_adapter(lambda request: httpx.Response(200, json={"jwks_uri": "https://keys"}))

    with pytest.raises(IdentityProviderResponseError, match="not valid JSON"):
        asyncio.run(invalid_json_adapter.idp_fetch_discovery_document(timeout_seconds=2.0))
    with pytest.raises(IdentityProviderResponseError, match="missing issuer"):
        asyncio.run(missing_issuer_adapter.idp_fetch_discovery_document(timeout_seconds=2.0))


def test_azure_identity_validate_configuration_reports_missing_and_malformed_values() -> None:
    """List one message per missing or malformed setting.

    Returns:
        None: Assertions validate configuration checks.

    Raises:
        AssertionError: Raised when configuration errors are not reported.
    """

    unused_handler = lambda request: httpx.Response(500)  # noqa: E731
    partial_adapter = _build_adapter(unused_handler, tenant_id=None, authority="login.microsoftonline.com/x")
    empty_adapter = _build_adapter(unused_handler, client_id="", tenant_id="", authority="", redirect_uri="")

    assert partial_adapter.idp_is_configured() is False
    assert partial_adapter.idp_validate_configuration() == [
        "AZURE_TENANT_ID is required",
        "AZURE_AUTHORITY is not a valid https URL",
    ]
    assert empty_adapter.idp_is_configured() is False
    assert len(empty_adapter.idp_validate_configuration()) == 4
    assert empty_adapter.idp_describe()["client_id"] == "Missing"

    with pytest.raises(IdentityProviderConfigurationError):
        empty_adapter.idp_discovery_url()
