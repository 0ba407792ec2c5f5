"""Database layer package for all SQL connectivity boundaries."""

from .health import SQLAlchemyDatabaseHealthService, UnavailableDatabaseHealthService, db_is_transient_failure
from .interfaces import DatabaseHealthError, DatabaseHealthPort, DatabaseHealthQueryResult, DatabaseTransientError
from .session import db_create_engine

__all__ = [
	"DatabaseHealthError",
	"DatabaseHealthPort",
	"DatabaseHealthQueryResult",
	"DatabaseTransientError",
	"SQLAlchemyDatabaseHealthService",
	"UnavailableDatabaseHealthService",
	"db_create_engine",
	"db_is_transient_failure",
]
