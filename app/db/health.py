"""Database health service implementations for connectivity checks."""

from typing import Final

from sqlalchemy import Engine, literal_column, select, table, text
from sqlalchemy.exc import DBAPIError, DisconnectionError, OperationalError, SQLAlchemyError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

from .interfaces import DatabaseHealthError, DatabaseHealthPort, DatabaseHealthQueryResult, DatabaseTransientError

_TRANSIENT_OPERATIONAL_TOKENS: Final[tuple[str, ...]] = (
    "connection",
    "could not connect",
    "server closed",
    "timeout",
    "timed out",
    "canceling statement",
    "database is locked",
)


def db_is_transient_failure(error: SQLAlchemyError) -> bool:
    """Return whether a SQLAlchemy failure may clear up on a later attempt.

    Connectivity loss, pool exhaustion and statement or connect timeouts are
    transient. Missing tables, bad credentials and SQL errors are not.

    Args:
        error: Error raised while running the health query.

    Returns:
        bool: True when retrying is worthwhile.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if isinstance(error, (DisconnectionError, PoolTimeoutError)):
        return True
    if isinstance(error, DBAPIError) and error.connection_invalidated:
        return True
    if isinstance(error, OperationalError):
        message = str(error.orig if error.orig is not None else error).lower()
        if "authentication failed" in message or "password" in message:
            return False
        return any(token in message for token in _TRANSIENT_OPERATIONAL_TOKENS)
    return False


class SQLAlchemyDatabaseHealthService(DatabaseHealthPort):
    """Database health service backed by a bounded read query on a known table."""

    def __init__(self, engine: Engine, table_name: str = "users", statement_timeout_ms: int = 5000):
        """Initialize database health service.

        Args:
            engine: SQLAlchemy engine used for connectivity checks.
            table_name: Table read by the health query, optionally `schema.table`.
            statement_timeout_ms: PostgreSQL statement timeout for the health query.

        Raises:
            ValueError: Raised when engine is None, table name is blank or timeout is not positive.
        """

        if engine is None:
            raise ValueError("engine must not be None")
        if not table_name.strip():
            raise ValueError("table_name must not be blank")
        if statement_timeout_ms <= 0:
            raise ValueError("statement_timeout_ms must be > 0")
        self._engine = engine
        self._table_name = table_name.strip()
        self._statement_timeout_ms = int(statement_timeout_ms)

    def db_is_configured(self) -> bool:
        return True

    def db_connection_label(self) -> str:
        """Return the target database URL for diagnostics.

        Returns:
            str: Rendered engine URL string with the password hidden.

        Raises:
            RuntimeError: Raised if URL rendering fails.
        """

        return self._engine.url.render_as_string(hide_password=True)

    def db_run_health_query(self) -> DatabaseHealthQueryResult:
        """Read at most one row from the health table.

        Returns:
            DatabaseHealthQueryResult: Table name and returned row count.

        Raises:
            DatabaseHealthError: Raised when connectivity or the query fails.
        """

        schema_name, _, bare_table_name = self._table_name.rpartition(".")
        health_table = table(bare_table_name, schema=schema_name or None)
        statement = select(literal_column("1")).select_from(health_table).limit(1)
        try:
            with self._engine.connect() as connection:
                if self._engine.dialect.name == "postgresql":
                    connection.execute(text(f"SET LOCAL statement_timeout = {self._statement_timeout_ms}"))
                rows = connection.execute(statement).all()
        except SQLAlchemyError as error:
            message = f"database health query failed: {error.__class__.__name__}: {error}"
            if db_is_transient_failure(error):
                raise DatabaseTransientError(message) from error
            raise DatabaseHealthError(message) from error
        return DatabaseHealthQueryResult(table_name=self._table_name, row_count=len(rows))


class UnavailableDatabaseHealthService(DatabaseHealthPort):
    """Database health service used when no engine could be built.

    Covers both a missing database URL (`is_configured=False`) and a URL the
    engine factory rejected (`is_configured=True`, every query fails).
    """

    def __init__(self, is_configured: bool = False, reason: str = "database is not configured"):
        self._is_configured = is_configured
        self._reason = reason

    def db_is_configured(self) -> bool:
        return self._is_configured

    def db_connection_label(self) -> str:
        return "invalid database URL" if self._is_configured else "not configured"

    def db_run_health_query(self) -> DatabaseHealthQueryResult:
        raise DatabaseHealthError(self._reason)
