"""Connection client lifecycle shared by the DuckDB and Kuzu backends.

A client owns exactly one backend connection. ``open`` validates the path,
connects and runs a liveness check; a client that fails the liveness check
is closed before the error propagates, so callers never receive a
half-open connection.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Self

from mcp_tools.errors import (
    ConfigurationError,
    DatabaseConnectionError,
    DatabaseNotFoundError,
)

logger = logging.getLogger(__name__)

MEMORY_PATH = ":memory:"


def validate_db_path(db_path: str) -> None:
    """Check that a database path exists (the in-memory sentinel always passes).

    Raises:
        DatabaseNotFoundError: If the path does not exist.
        ConfigurationError: If the path cannot be accessed.
    """
    if db_path == MEMORY_PATH:
        return
    try:
        Path(db_path).stat()
    except FileNotFoundError:
        raise DatabaseNotFoundError(f"database file does not exist: {db_path}") from None
    except OSError as e:
        raise ConfigurationError(f"cannot access database file: {e}") from e


class ConnectionClient(ABC):
    """A single live connection to one database."""

    dialect: str = "unknown"

    # Exceptions raised by the backend driver
    driver_errors: tuple[type[Exception], ...] = ()

    # Whether opening a missing path creates a new database
    creates_missing: bool = False

    def __init__(self, db_path: str, read_only: bool = False) -> None:
        self._db_path = db_path
        self._read_only = read_only
        self._closed = False

    @classmethod
    def open(cls, db_path: str, read_only: bool = False) -> Self:
        """Open and ping a connection.

        Raises:
            DatabaseNotFoundError: If the database path does not exist.
            ConfigurationError: If the database path cannot be accessed.
            DatabaseConnectionError: If opening or the liveness check fails.
        """
        if read_only or not cls.creates_missing:
            validate_db_path(db_path)

        client = cls(db_path, read_only)
        try:
            client._connect()
        except cls.driver_errors as e:
            raise DatabaseConnectionError(f"failed to open database: {e}") from e

        try:
            client._ping()
        except cls.driver_errors as e:
            client.close()
            raise DatabaseConnectionError(f"failed to connect to database: {e}") from e

        logger.info(
            f"Opened {cls.dialect} database {db_path}" + (" (read-only)" if read_only else "")
        )
        return client

    @property
    def db_path(self) -> str:
        return self._db_path

    @property
    def read_only(self) -> bool:
        return self._read_only

    @property
    def open_read_only(self) -> bool:
        """Whether the read-only marker applies (never for in-memory databases)."""
        return self._read_only and self._db_path != MEMORY_PATH

    @property
    @abstractmethod
    def is_connected(self) -> bool: ...

    @abstractmethod
    def _connect(self) -> None: ...

    @abstractmethod
    def _ping(self) -> None: ...

    @abstractmethod
    def _disconnect(self) -> None: ...

    def close(self) -> None:
        """Close the connection. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        try:
            self._disconnect()
        except self.driver_errors as e:
            logger.warning(f"Error closing {self.dialect} database {self._db_path}: {e}")
        else:
            logger.debug(f"Closed {self.dialect} database {self._db_path}")

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
