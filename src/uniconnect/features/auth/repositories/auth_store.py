"""Postgres unit of work for the auth subsystem."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from ....database.connection import DatabaseManager
from ...users.repositories.identity_repository import IdentityRepository
from ...users.repositories.user_repository import UserRepository
from ..entities.protocols import AuthRepositories, AuthStoreProtocol
from .session_repository import SessionRepository


class PostgresAuthStore(AuthStoreProtocol):
    """Hands out repositories that share one connection and transaction.

    Store failures surface as ``StorageFailureError`` from ``DatabaseManager``.
    """
    
    def __init__(self, database: DatabaseManager):
        self.database = database
    
    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[AuthRepositories]:
        async with self.database.transaction() as conn:
            yield AuthRepositories(
                users=UserRepository(conn),
                identities=IdentityRepository(conn),
                sessions=SessionRepository(conn),
            )
    
    async def health_check(self) -> bool:
        return await self.database.health_check()
