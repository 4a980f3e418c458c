"""Execution gateway backed by a single aiosqlite connection.

SQLite uses the same ``?`` placeholder style the builder renders, so a
:class:`AiosqliteGateway` can be handed straight to ``Statement.run``::

    async with AiosqliteGateway("app.db") as gateway:
        rows = await sql.select("id").from_("users").where("active", 1).run(gateway)
"""

from enum import Enum, auto
from typing import Any, Final, Optional

from fluentsql.exceptions import GatewayError, MissingDependencyError
from fluentsql.utils.logging import get_logger, statement_fields

try:
    import aiosqlite
except ImportError as e:  # pragma: no cover
    raise MissingDependencyError("aiosqlite") from e

__all__ = ("AiosqliteGateway", "GatewayState")

logger = get_logger("adapters.aiosqlite")

MEMORY_DATABASE: Final[str] = ":memory:"
FOREIGN_KEYS_SQL: Final[str] = "PRAGMA foreign_keys = ON"


class GatewayState(Enum):
    """Lifecycle of the underlying connection."""

    CONNECTING = auto()
    CONNECTED = auto()
    ERROR = auto()
    CLOSED = auto()


class AiosqliteGateway:
    """Run ``(query, params)`` pairs on one aiosqlite connection.

    The connection is opened lazily on the first query (or explicitly with :meth:`connect`)
    in autocommit mode. Calling the gateway returns the fetched rows as dictionaries;
    statements that return no rows yield an empty list and record :attr:`last_rowcount`.
    Driver errors are logged and re-raised unchanged.
    """

    __slots__ = ("_closed", "_connection", "connection_config", "database", "last_rowcount", "state")

    def __init__(self, database: str = MEMORY_DATABASE, **connection_config: Any) -> None:
        """Initialize the gateway.

        Args:
            database: Path of the SQLite database file, or ``:memory:``.
            **connection_config: Extra keyword arguments passed to ``aiosqlite.connect``
                (``timeout``, ``detect_types``, ``uri``, ...).
        """
        self.database = database
        self.connection_config: dict[str, Any] = {"isolation_level": None, **connection_config}
        self.state = GatewayState.CLOSED
        self.last_rowcount = -1
        self._connection: Optional[aiosqlite.Connection] = None
        self._closed = False

    @property
    def connection(self) -> "Optional[aiosqlite.Connection]":
        """The live connection, if one is open."""
        return self._connection

    async def connect(self) -> "aiosqlite.Connection":
        """Open the connection if it is not already open.

        Raises:
            GatewayError: If the gateway has been closed.

        Returns:
            The open aiosqlite connection.
        """
        if self._closed:
            msg = "Gateway has been closed and cannot reconnect."
            raise GatewayError(msg)
        if self._connection is not None:
            return self._connection

        self.state = GatewayState.CONNECTING
        try:
            connection = await aiosqlite.connect(self.database, **self.connection_config)
            await connection.execute(FOREIGN_KEYS_SQL)
        except Exception:
            self.state = GatewayState.ERROR
            logger.exception("Failed to connect to SQLite database %s", self.database)
            raise
        self._connection = connection
        self.state = GatewayState.CONNECTED
        logger.debug("Connected to SQLite database %s", self.database)
        return connection

    async def close(self) -> None:
        """Close the connection. The gateway cannot be reused afterwards."""
        try:
            if self._connection is not None:
                await self._connection.close()
                logger.debug("Closed SQLite database %s", self.database)
        finally:
            self._connection = None
            self._closed = True
            self.state = GatewayState.CLOSED

    async def __aenter__(self) -> "AiosqliteGateway":
        await self.connect()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    async def __call__(self, query: str, params: "list[Any]") -> "list[dict[str, Any]]":
        """Execute one statement.

        Args:
            query: SQL text with ``?`` placeholders.
            params: Values bound to the placeholders, in order.

        Returns:
            Rows as dictionaries keyed by column name.
        """
        connection = await self.connect()
        try:
            async with connection.execute(query, params) as cursor:
                if cursor.description is None:
                    self.last_rowcount = cursor.rowcount
                    self.state = GatewayState.CONNECTED
                    return []
                column_names = [column[0] for column in cursor.description]
                rows = await cursor.fetchall()
                self.last_rowcount = len(rows)
                self.state = GatewayState.CONNECTED
                return [dict(zip(column_names, row)) for row in rows]
        except aiosqlite.Error:
            self.state = GatewayState.ERROR
            logger.exception(
                "Statement failed: %s", query, extra=statement_fields(database=self.database, parameter_count=len(params))
            )
            raise
