"""Project-native typed exceptions for identity-provider adapter failures."""

from __future__ import annotations


class IdentityProviderError(Exception):
    """Base exception for identity-provider adapter failures."""


class IdentityProviderConfigurationError(IdentityProviderError, ValueError):
    """Local identity-provider configuration is missing or malformed."""


class IdentityProviderConnectionError(IdentityProviderError, ConnectionError):
    """Transport-level connectivity failure while reaching the identity provider."""


class IdentityProviderTimeoutError(IdentityProviderError, TimeoutError):
    """Identity-provider request exceeded its timeout."""


class IdentityProviderHttpError(IdentityProviderError, RuntimeError):
    """Identity provider answered with a non-success HTTP status.

    Attributes:
        status_code: HTTP status code returned upstream.
        reason_phrase: HTTP reason phrase returned upstream.
    """

    def __init__(self, message: str, status_code: int, reason_phrase: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.reason_phrase = reason_phrase


class IdentityProviderResponseError(IdentityProviderError, RuntimeError):
    """Discovery document response violated the expected contract."""
