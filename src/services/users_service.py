"""
User store - persistence for user records behind a single async interface
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Dict, Any, Optional

import asyncpg

from config.settings import STORE_BACKEND
from database.connection import get_db_pool
from services.base_service import ServiceResult, RESOURCE_NOT_FOUND, DATABASE_ERROR

logger = logging.getLogger(__name__)

# InterfaceError covers client-side argument errors such as DataError
DB_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, RuntimeError)

class UserStore(ABC):
    """Create/read/list operations for users. Failures come back as ServiceResult, never raised."""

    @abstractmethod
    async def create(self, name: str, email: str) -> ServiceResult:
        """Persist a new user and return it with its assigned id"""

    @abstractmethod
    async def get_by_id(self, user_id: int) -> ServiceResult:
        """Look up a single user; RESOURCE_NOT_FOUND when absent"""

    @abstractmethod
    async def get_all(self) -> ServiceResult:
        """All users in insertion order"""

    async def ping(self) -> bool:
        return True


class InMemoryUserStore(UserStore):
    """Process-local store; ids start at 1"""

    def __init__(self):
        self._users: Dict[int, Dict[str, Any]] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()

    async def create(self, name: str, email: str) -> ServiceResult:
        async with self._lock:
            user = {"id": self._next_id, "name": name, "email": email}
            self._users[self._next_id] = user
            self._next_id += 1
        logger.info(f"Created user {user['id']} in memory store")
        return ServiceResult.ok([dict(user)])

    async def get_by_id(self, user_id: int) -> ServiceResult:
        user = self._users.get(user_id)
        if user is None:
            return ServiceResult.failure(f"User {user_id} not found", RESOURCE_NOT_FOUND)
        return ServiceResult.ok([dict(user)])

    async def get_all(self) -> ServiceResult:
        return ServiceResult.ok([dict(user) for user in self._users.values()])


class PostgresUserStore(UserStore):
    """Store backed by the shared asyncpg pool"""

    def _pool(self):
        pool = get_db_pool()
        if pool is None:
            raise RuntimeError("Database pool is not initialized")
        return pool

    async def create(self, name: str, email: str) -> ServiceResult:
        try:
            async with self._pool().acquire() as conn:
                row = await conn.fetchrow(
                    "INSERT INTO users (name, email) VALUES ($1, $2) RETURNING id, name, email",
                    name, email
                )
            logger.info(f"Created user {row['id']}")
            return ServiceResult.ok([dict(row)])
        except DB_ERRORS as e:
            logger.error(f"Create operation failed for users: {e}", exc_info=True)
            return ServiceResult.failure(f"Database operation failed: {e}", DATABASE_ERROR)

    async def get_by_id(self, user_id: int) -> ServiceResult:
        try:
            async with self._pool().acquire() as conn:
                row = await conn.fetchrow(
                    "SELECT id, name, email FROM users WHERE id = $1",
                    user_id
                )
        except DB_ERRORS as e:
            logger.error(f"Read operation failed for user {user_id}: {e}", exc_info=True)
            return ServiceResult.failure(f"Database operation failed: {e}", DATABASE_ERROR)

        if row is None:
            return ServiceResult.failure(f"User {user_id} not found", RESOURCE_NOT_FOUND)
        return ServiceResult.ok([dict(row)])

    async def get_all(self) -> ServiceResult:
        try:
            async with self._pool().acquire() as conn:
                rows = await conn.fetch("SELECT id, name, email FROM users ORDER BY id")
            return ServiceResult.ok([dict(row) for row in rows])
        except DB_ERRORS as e:
            logger.error(f"List operation failed for users: {e}", exc_info=True)
            return ServiceResult.failure(f"Database operation failed: {e}", DATABASE_ERROR)

    async def ping(self) -> bool:
        try:
            async with self._pool().acquire() as conn:
                await conn.fetchval("SELECT 1")
            return True
        except DB_ERRORS as e:
            logger.warning(f"Database ping failed: {e}")
            return False


def build_user_store(backend: str) -> UserStore:
    if backend == "postgres":
        return PostgresUserStore()
    if backend == "memory":
        return InMemoryUserStore()
    raise ValueError(f"Unknown store backend: {backend}")


# Global store instance
_user_store: Optional[UserStore] = None

def get_user_store() -> UserStore:
    """Get the global user store instance"""
    global _user_store
    if _user_store is None:
        _user_store = build_user_store(STORE_BACKEND)
    return _user_store
