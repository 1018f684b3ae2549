"""Exception hierarchy shared by the DuckDB and Kuzu adapters."""


class DatabaseError(Exception):
    """Base class for database connection, query and configuration errors."""

    pass


class ConfigurationError(DatabaseError):
    """Bad or missing database path or home directory."""

    pass


class DatabaseNotFoundError(ConfigurationError):
    """The database path does not exist."""

    pass


class DatabaseConnectionError(DatabaseError):
    """Opening the database or the liveness check failed."""

    pass


class QueryError(DatabaseError):
    """Execution failed against an established connection."""

    pass


class NoConnectionError(QueryError):
    """A query was issued while no connection is configured."""

    pass


class SerializationError(DatabaseError):
    """A response could not be encoded."""

    pass


class RequestValidationError(DatabaseError):
    """Tool arguments did not match the request model."""

    pass
