"""
EliminationLogRepository - MongoDB access for elimination_logs collection.

Logs carry user_id and round_id. Newer documents also store arena_id; older
ones get it resolved through their round.
"""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.models.round import EliminationLogEntry
from app.repositories.round_repository import RoundRepository

logger = logging.getLogger(__name__)


class EliminationLogRepository:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db["elimination_logs"]
        self.round_repo = RoundRepository(db)

    async def list_all(self) -> list[EliminationLogEntry]:
        """Every elimination, with its arena resolved."""
        docs = await self.collection.find(
            {},
            {"user_id": 1, "round_id": 1, "arena_id": 1}
        ).to_list(length=None)

        return await self._to_entries(docs)

    async def list_by_rounds(self, round_ids: list[str]) -> list[EliminationLogEntry]:
        """Eliminations that happened in any of the given rounds."""
        if not round_ids:
            return []

        docs = await self.collection.find(
            {"round_id": {"$in": round_ids}},
            {"user_id": 1, "round_id": 1, "arena_id": 1}
        ).to_list(length=None)

        return await self._to_entries(docs)

    async def _to_entries(self, docs: list[dict]) -> list[EliminationLogEntry]:
        # Una sola query extra para todos los logs sin arena_id (no N+1)
        missing = sorted({
            str(doc["round_id"]) for doc in docs
            if not doc.get("arena_id") and doc.get("round_id") is not None
        })
        arena_by_round = await self.round_repo.get_arena_ids(missing)

        entries = []
        for doc in docs:
            if doc.get("user_id") is None:
                logger.warning(f"Skipping elimination log {doc.get('_id')} without user_id")
                continue

            round_id: Optional[str] = str(doc["round_id"]) if doc.get("round_id") is not None else None
            arena_id = doc.get("arena_id") or arena_by_round.get(round_id)

            # La ronda ya no existe: no hay arena a la que atribuirlo
            if not arena_id:
                continue

            entries.append(EliminationLogEntry(
                user_id=str(doc["user_id"]),
                round_id=round_id,
                arena_id=str(arena_id),
            ))

        return entries
