"""Typed interfaces for database-layer services.

All SQL access must remain in the db package and its submodules.
"""

from dataclasses import dataclass
from typing import Protocol


class DatabaseHealthError(RuntimeError):
    """Raised when the database health query cannot be completed.

    Attributes:
        transient: Whether a later attempt may succeed; read by retry predicates.
    """

    transient: bool = False


class DatabaseTransientError(DatabaseHealthError, ConnectionError):
    """Raised when connectivity to the database failed or timed out."""

    transient = True


@dataclass(frozen=True)
class DatabaseHealthQueryResult:
    """Outcome of one bounded read-only health query.

    Attributes:
        table_name: Table the query read from.
        row_count: Number of rows returned (0 or 1).
    """

    table_name: str
    row_count: int


class DatabaseHealthPort(Protocol):
    """Port definition for database connectivity verification."""

    def db_is_configured(self) -> bool:
        """Return whether a database connection is configured.

        Returns:
            bool: True when a database URL was provided.

        Raises:
            RuntimeError: Raised when configuration metadata is unavailable.
        """

    def db_connection_label(self) -> str:
        """Return a stable label for the active database connection target.

        Returns:
            str: Database target label for diagnostics, without credentials.

        Raises:
            RuntimeError: Raised when connection metadata is unavailable.
        """

    def db_run_health_query(self) -> DatabaseHealthQueryResult:
        """Execute one minimal read-only query against a known table.

        Returns:
            DatabaseHealthQueryResult: Query outcome.

        Raises:
            DatabaseHealthError: Raised when the database cannot be queried.
        """
