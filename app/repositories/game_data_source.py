"""
GameDataSource - read-only view over the game collections.

The services only see these protocols, so they can be tested with in-memory
fakes. MongoGameDataSource is the real implementation on top of the
repositories; any PyMongo failure surfaces as DataSourceError.
"""

import logging
from typing import Awaitable, Optional, Protocol, TypeVar

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from app.models.arena import Arena
from app.models.round import Round, ResolvedRound, EliminationLogEntry
from app.models.user import UserIdentity
from app.repositories.arena_repository import ArenaRepository
from app.repositories.elimination_log_repository import EliminationLogRepository
from app.repositories.round_repository import RoundRepository
from app.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DataSourceError(Exception):
    """Raised when the underlying storage cannot be read."""
    pass


class LeaderboardDataSource(Protocol):
    async def list_resolved_rounds(self) -> list[ResolvedRound]: ...

    async def list_elimination_logs(self) -> list[EliminationLogEntry]: ...

    async def find_users_by_ids(self, user_ids: list[str]) -> list[UserIdentity]: ...


class ArenaDataSource(Protocol):
    async def get_arena(self, arena_id: str) -> Optional[Arena]: ...

    async def list_arena_rounds(self, arena_id: str) -> list[Round]: ...

    async def list_eliminations_for_rounds(self, round_ids: list[str]) -> list[EliminationLogEntry]: ...


class MongoGameDataSource:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.round_repo = RoundRepository(db)
        self.elimination_repo = EliminationLogRepository(db)
        self.user_repo = UserRepository(db)
        self.arena_repo = ArenaRepository(db)

    async def _read(self, what: str, query: Awaitable[T]) -> T:
        try:
            return await query
        except PyMongoError as e:
            logger.error(f"❌ Failed to read {what}: {e}")
            raise DataSourceError(f"Could not read {what}") from e

    # ============================================
    # 📌 Leaderboard
    # ============================================

    async def list_resolved_rounds(self) -> list[ResolvedRound]:
        return await self._read("resolved rounds", self.round_repo.list_resolved())

    async def list_elimination_logs(self) -> list[EliminationLogEntry]:
        return await self._read("elimination logs", self.elimination_repo.list_all())

    async def find_users_by_ids(self, user_ids: list[str]) -> list[UserIdentity]:
        return await self._read("users", self.user_repo.find_by_ids(user_ids))

    # ============================================
    # 📌 Arenas
    # ============================================

    async def get_arena(self, arena_id: str) -> Optional[Arena]:
        return await self._read("arena", self.arena_repo.get_by_id(arena_id))

    async def list_arena_rounds(self, arena_id: str) -> list[Round]:
        return await self._read("arena rounds", self.round_repo.list_by_arena(arena_id))

    async def list_eliminations_for_rounds(self, round_ids: list[str]) -> list[EliminationLogEntry]:
        return await self._read("elimination logs", self.elimination_repo.list_by_rounds(round_ids))
