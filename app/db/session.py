"""Database engine factory utilities.

This module centralizes database connectivity primitives to enforce the db-layer
boundary for all SQLAlchemy usage.
"""

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url


def db_create_engine(database_url: str, connect_timeout_seconds: float = 5.0) -> Engine:
    """Create the SQLAlchemy engine for health-check database access.

    Args:
        database_url: SQLAlchemy database URL.
        connect_timeout_seconds: Connection establishment timeout for PostgreSQL drivers.

    Returns:
        Engine: Configured SQLAlchemy engine.

    Raises:
        ValueError: Raised when the database URL is blank or timeout is not positive.
    """

    if not database_url.strip():
        raise ValueError("database_url must not be blank")
    if connect_timeout_seconds <= 0:
        raise ValueError("connect_timeout_seconds must be > 0")

    connect_args: dict[str, object] = {}
    if make_url(database_url).get_backend_name() == "postgresql":
        connect_args["connect_timeout"] = max(1, int(connect_timeout_seconds))

    return create_engine(database_url, pool_pre_ping=True, connect_args=connect_args)
