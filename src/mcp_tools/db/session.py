"""Session state: the one live connection, home directory and read-only flag.

A ``SessionStore`` is created once per server and handed to every tool
handler. Reconfiguration takes the lock exclusively; reads and in-flight
queries (via ``connection()``) share it, so a connection is never closed
underneath a running query.
"""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from mcp_tools.db.client import ConnectionClient
from mcp_tools.db.locks import ReadWriteLock
from mcp_tools.errors import ConfigurationError, NoConnectionError

logger = logging.getLogger(__name__)

ClientT = TypeVar("ClientT", bound=ConnectionClient)

NO_CONNECTION_MESSAGE = (
    "No database connection. Use the 'configure' tool first to connect to a database."
)


class SessionState(str, Enum):
    """Lifecycle of a session. ``CLOSED`` is terminal."""

    UNCONFIGURED = "unconfigured"
    CONFIGURED = "configured"
    RECONFIGURED = "reconfigured"
    CLOSED = "closed"


@dataclass(frozen=True)
class SessionSnapshot:
    """Consistent view of the session fields, read under one lock acquisition."""

    db_path: str
    home_dir: str
    read_only: bool
    configured: bool
    connected: bool
    state: SessionState


class SessionStore(Generic[ClientT]):
    """Mutable session state guarded by a reader/writer lock.

    Args:
        opener: Opens a client for ``(db_path, read_only)``, typically
            ``DuckDBClient.open`` or ``KuzuClient.open``.
    """

    def __init__(self, opener: Callable[[str, bool], ClientT]) -> None:
        self._opener = opener
        self._lock = ReadWriteLock()
        self._client: ClientT | None = None
        self._db_path = ""
        self._home_dir = ""
        self._read_only = False
        self._configured = False
        self._state = SessionState.UNCONFIGURED

    def configure(
        self, db_path: str = "", home_dir: str = "", read_only: bool = False
    ) -> SessionSnapshot:
        """Replace the connection and/or set the home directory.

        When ``db_path`` is given the current connection is closed first. If
        the new one fails to open the session is left without a connection,
        but ``home_dir`` and ``read_only`` are still recorded.

        Returns:
            The session state as left by this call.

        Raises:
            ConfigurationError: If the session is closed or the path is invalid.
            DatabaseConnectionError: If the new connection cannot be opened.
        """
        with self._lock.write_locked():
            if self._state is SessionState.CLOSED:
                raise ConfigurationError("session is closed")

            try:
                if db_path:
                    self._close_client()
                    self._client = self._opener(db_path, read_only)
                    self._db_path = db_path
            finally:
                if home_dir:
                    self._home_dir = home_dir
                self._read_only = read_only
                self._configured = True
                self._state = (
                    SessionState.CONFIGURED
                    if self._state is SessionState.UNCONFIGURED
                    else SessionState.RECONFIGURED
                )

            logger.info(
                f"Session {self._state.value}: db_path={self._db_path or '-'} "
                f"home_dir={self._home_dir or '-'} read_only={read_only}"
            )
            return self._snapshot()

    def _close_client(self) -> None:
        if self._client is not None:
            client, self._client = self._client, None
            self._db_path = ""
            client.close()

    def _snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            db_path=self._db_path,
            home_dir=self._home_dir,
            read_only=self._read_only,
            configured=self._configured,
            connected=self._client is not None,
            state=self._state,
        )

    def snapshot(self) -> SessionSnapshot:
        """Read every session field under a single shared lock."""
        with self._lock.read_locked():
            return self._snapshot()

    @contextmanager
    def connection(self) -> Iterator[ClientT]:
        """Borrow the live client for the duration of a query.

        Raises:
            NoConnectionError: If no connection is configured.
        """
        with self._lock.read_locked():
            if self._client is None:
                raise NoConnectionError(NO_CONNECTION_MESSAGE)
            yield self._client

    @property
    def client(self) -> ClientT | None:
        with self._lock.read_locked():
            return self._client

    @property
    def home_dir(self) -> str:
        with self._lock.read_locked():
            return self._home_dir

    @property
    def db_path(self) -> str:
        with self._lock.read_locked():
            return self._db_path

    @property
    def read_only(self) -> bool:
        with self._lock.read_locked():
            return self._read_only

    @property
    def configured(self) -> bool:
        with self._lock.read_locked():
            return self._configured

    @property
    def has_connection(self) -> bool:
        with self._lock.read_locked():
            return self._client is not None

    @property
    def state(self) -> SessionState:
        with self._lock.read_locked():
            return self._state

    def close(self) -> None:
        """Close the connection and end the session. Idempotent."""
        with self._lock.write_locked():
            self._close_client()
            if self._state is not SessionState.CLOSED:
                self._state = SessionState.CLOSED
                logger.info("Session closed")
