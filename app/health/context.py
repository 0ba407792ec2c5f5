"""Explicit runtime context shared by health probes and the aggregator."""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Awaitable, Callable, Final

from app.adapters import IdentityProviderPort, SupabaseAuthPort
from app.config import EnvironmentReaderPort, Strictness
from app.db import DatabaseHealthPort
from app.retry import RETRY_POLICIES, RetryOptions, RetryPolicyName

# Captured once on first import; read-only afterwards.
PROCESS_STARTED_MONOTONIC: Final[float] = time.monotonic()


def _health_utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class HealthRuntimeContext:
    """Dependencies and clocks for one service instance.

    Attributes:
        environment_name: Deployment environment label.
        version: Application version label.
        strictness: Validation strictness used by the configuration probe.
        environment_reader: Source of configuration values.
        identity_provider: Identity-provider capability.
        database_service: Database health capability.
        supabase_service: Supabase auth capability.
        probe_timeout_seconds: Per-attempt timeout for network-bound probes.
        network_retry_options: Retry options for the Supabase and identity-provider probes.
        database_retry_options: Retry options for the database probe.
        configuration_retry_options: Retry options for the configuration probe.
        process_started_at: Monotonic timestamp of process start.
        clock: Monotonic clock in seconds.
        wall_clock: UTC wall clock used for payload timestamps.
        sleep: Awaitable sleep used between retry attempts.
    """

    environment_name: str
    version: str
    strictness: Strictness
    environment_reader: EnvironmentReaderPort
    identity_provider: IdentityProviderPort
    database_service: DatabaseHealthPort
    supabase_service: SupabaseAuthPort
    probe_timeout_seconds: float = 5.0
    network_retry_options: RetryOptions = field(
        default_factory=lambda: RETRY_POLICIES[RetryPolicyName.NETWORK_TRANSIENT]
    )
    database_retry_options: RetryOptions = field(
        default_factory=lambda: RETRY_POLICIES[RetryPolicyName.DATABASE_TRANSIENT]
    )
    configuration_retry_options: RetryOptions = field(
        default_factory=lambda: RETRY_POLICIES[RetryPolicyName.GENERIC_CRITICAL]
    )
    process_started_at: float = PROCESS_STARTED_MONOTONIC
    clock: Callable[[], float] = time.monotonic
    wall_clock: Callable[[], datetime] = _health_utc_now
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep

    def __post_init__(self) -> None:
        if self.probe_timeout_seconds <= 0:
            raise ValueError("probe_timeout_seconds must be > 0")
