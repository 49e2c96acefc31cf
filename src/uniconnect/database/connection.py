"""
asyncpg pool shared by every repository in uniconnect.
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional

import asyncpg
from asyncpg import Connection, Pool, Record

from ..config.settings import AppSettings
from ..core.exceptions.domain import StorageFailureError

logger = logging.getLogger(__name__)

HEALTH_CHECK_TIMEOUT = 2.0  # seconds

STORE_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError)


class DatabaseManager:
    """Owns the connection pool.
    
    Repositories call the query helpers, which borrow a pooled connection per
    statement, or open ``transaction()`` to run several statements on one
    connection. The pool is opened lazily on first use.
    """
    
    def __init__(self, database_url: str, application_name: str = "uniconnect-backend", **pool_config):
        """Initialize DatabaseManager.
        
        Args:
            database_url: Postgres DSN
            application_name: Reported to Postgres as application_name
            **pool_config: Overrides for ``asyncpg.create_pool``
        """
        if not database_url:
            raise ValueError("Database URL is required")
        self.dsn = database_url
        self.application_name = application_name
        self.pool_config = {
            "min_size": 1,
            "max_size": 10,
            "max_inactive_connection_lifetime": 300,
            "command_timeout": 60,
            **pool_config
        }
        self._pool: Optional[Pool] = None
    
    @classmethod
    def from_settings(cls, settings: AppSettings) -> "DatabaseManager":
        return cls(
            settings.database_url,
            application_name=settings.app_name,
            min_size=settings.db_pool_min_size,
            max_size=settings.db_pool_max_size,
            command_timeout=settings.db_command_timeout,
        )
    
    async def create_pool(self) -> Pool:
        """Open the pool if it is not open yet."""
        if self._pool is None:
            self._pool = await asyncpg.create_pool(
                self.dsn,
                server_settings={"application_name": self.application_name},
                **self.pool_config
            )
            logger.info(
                f"Database pool open (min={self.pool_config['min_size']}, max={self.pool_config['max_size']})"
            )
        return self._pool
    
    async def close_pool(self) -> None:
        if self._pool is not None:
            pool, self._pool = self._pool, None
            await pool.close()
            logger.info("Database pool closed")
    
    @asynccontextmanager
    async def connection(self) -> AsyncIterator[Connection]:
        """Borrow a pooled connection. Driver and network errors become ``StorageFailureError``."""
        try:
            pool = await self.create_pool()
            async with pool.acquire() as conn:
                yield conn
        except STORE_ERRORS as e:
            logger.error(f"Database operation failed: {type(e).__name__}: {e}")
            raise StorageFailureError("Storage is unavailable") from e
    
    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[Connection]:
        """One connection inside one transaction; rolled back on error."""
        async with self.connection() as conn:
            async with conn.transaction():
                yield conn
    
    async def execute(self, query: str, *args) -> str:
        async with self.connection() as conn:
            return await conn.execute(query, *args)
    
    async def fetch(self, query: str, *args) -> List[Record]:
        async with self.connection() as conn:
            return await conn.fetch(query, *args)
    
    async def fetchrow(self, query: str, *args) -> Optional[Record]:
        async with self.connection() as conn:
            return await conn.fetchrow(query, *args)
    
    async def health_check(self) -> bool:
        """Round-trip ``SELECT 1`` now. Nothing is cached between calls."""
        try:
            async with self.connection() as conn:
                return await conn.fetchval("SELECT 1", timeout=HEALTH_CHECK_TIMEOUT) == 1
        except StorageFailureError as e:
            logger.warning(f"Database health check failed: {type(e).__name__}: {e}")
            return False
