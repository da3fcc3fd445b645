"""Async SQLAlchemy engine over the jobs database.

``Database`` is the process-wide storage context: it is created once at
start-up, handed to the repository, and lends exactly one pooled
connection per store operation. A borrowed connection always goes back
to the pool, whether the operation succeeds, fails or is cancelled.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from sqlalchemy import event
from sqlalchemy.engine import ExceptionContext
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine
from sqlalchemy.pool import AsyncAdaptedQueuePool, Pool

logger = logging.getLogger(__name__)


class DatabaseClosedError(RuntimeError):
    """Raised when a connection is requested from a closed database."""


def _casefold(value: str | None) -> str | None:
    return value.casefold() if value is not None else None


def _on_connect(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()
    # SQLite's own lower() and LIKE only fold ASCII letters
    dbapi_connection.create_function("casefold", 1, _casefold, deterministic=True)


def _interrupt_on_cancel(context: ExceptionContext) -> None:
    """Stop the statement still running on the driver's worker thread.

    A cancelled task leaves its statement running; SQLAlchemy then closes
    the connection, and that close would wait for the statement to finish.
    """
    if context.connection is None:
        return
    if not isinstance(context.original_exception, asyncio.CancelledError):
        return
    dbapi_connection = context.connection.connection.dbapi_connection
    dbapi_connection.run_async(lambda driver: driver.interrupt())
    logger.debug("Interrupted statement after cancellation")


def create_engine(
    db_path: Path | str,
    *,
    pool_size: int = 5,
    pool_recycle: float = 1800.0,
    pool_timeout: float = 30.0,
) -> AsyncEngine:
    """Create an aiosqlite-backed engine with a bounded connection pool.

    Args:
        db_path: Path to the SQLite database file.
        pool_size: Maximum number of open connections. No overflow.
        pool_recycle: Seconds after which a connection is replaced
            on its next checkout.
        pool_timeout: Seconds to wait for a free connection before
            ``sqlalchemy.exc.TimeoutError`` is raised.

    Returns:
        The configured engine.
    """
    if pool_size < 1:
        raise ValueError("pool_size must be at least 1")

    engine = create_async_engine(
        f"sqlite+aiosqlite:///{db_path}",
        poolclass=AsyncAdaptedQueuePool,
        pool_size=pool_size,
        max_overflow=0,
        pool_recycle=pool_recycle,
        pool_timeout=pool_timeout,
    )
    event.listen(engine.sync_engine, "connect", _on_connect)
    event.listen(engine.sync_engine, "handle_error", _interrupt_on_cancel)
    return engine


class Database:
    """Storage context wrapping an async engine.

    Every borrow can be bounded by ``timeout``: on expiry the running
    statement is interrupted, the connection is discarded and
    ``TimeoutError`` is raised.
    """

    def __init__(
        self,
        db_path: Path | str,
        *,
        pool_size: int = 5,
        pool_recycle: float = 1800.0,
        pool_timeout: float = 30.0,
        timeout: float | None = None,
    ):
        """Initialize the database context.

        Args:
            db_path: Path to the SQLite database file.
            pool_size: Maximum number of open connections.
            pool_recycle: Maximum connection age in seconds.
            pool_timeout: Seconds to wait for a free connection.
            timeout: Optional bound, in seconds, on each borrow.
        """
        self.db_path = Path(db_path)
        self.timeout = timeout
        self.engine = create_engine(
            self.db_path,
            pool_size=pool_size,
            pool_recycle=pool_recycle,
            pool_timeout=pool_timeout,
        )
        self._closed = False

    @property
    def pool(self) -> Pool:
        return self.engine.pool

    @property
    def closed(self) -> bool:
        return self._closed

    async def open(self) -> Database:
        """Prepare the database for use, creating its directory."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._closed = False
        return self

    async def close(self) -> None:
        """Close every pooled connection and stop lending new ones."""
        self._closed = True
        await self.engine.dispose()
        logger.debug("Database %s closed", self.db_path)

    async def __aenter__(self) -> Database:
        return await self.open()

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    @asynccontextmanager
    async def connect(self) -> AsyncGenerator[AsyncConnection, None]:
        """Borrow a connection for one read.

        Uncommitted work is rolled back when the connection is returned.

        Raises:
            DatabaseClosedError: If the database has been closed.
            TimeoutError: If the borrow outlives ``timeout``.
        """
        self._check_open()
        async with asyncio.timeout(self.timeout):
            async with self.engine.connect() as conn:
                yield conn

    @asynccontextmanager
    async def begin(self) -> AsyncGenerator[AsyncConnection, None]:
        """Borrow a connection inside a transaction committed on success."""
        self._check_open()
        async with asyncio.timeout(self.timeout):
            async with self.engine.begin() as conn:
                yield conn

    def _check_open(self) -> None:
        if self._closed:
            raise DatabaseClosedError(f"Database {self.db_path} is closed")
