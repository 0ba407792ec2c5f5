"""Project-native typed exceptions for Supabase auth adapter failures."""

from __future__ import annotations


class SupabaseError(Exception):
    """Base exception for Supabase adapter failures."""


class SupabaseConfigurationError(SupabaseError, ValueError):
    """Supabase URL or API key is missing."""


class SupabaseConnectionError(SupabaseError, ConnectionError):
    """Transport-level connectivity failure while reaching Supabase."""


class SupabaseTimeoutError(SupabaseError, TimeoutError):
    """Supabase request exceeded its timeout."""


class SupabaseHttpError(SupabaseError, RuntimeError):
    """Supabase auth service answered with a non-success HTTP status.

    Attributes:
        status_code: HTTP status code returned upstream.
        reason_phrase: HTTP reason phrase returned upstream.
    """

    def __init__(self, message: str, status_code: int, reason_phrase: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.reason_phrase = reason_phrase


class SupabaseResponseError(SupabaseError, RuntimeError):
    """Auth health response body was not a JSON object."""
