"""
RoundRepository - MongoDB access for rounds collection.

Documents that lack the fields a consumer needs (arena_id, a valid round
shape) are skipped with a warning instead of failing the whole read.
"""

import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pydantic import ValidationError

from app.models.round import Round, ResolvedRound, RESOLVED_STATE

logger = logging.getLogger(__name__)


class RoundRepository:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db["rounds"]

    async def list_resolved(self) -> list[ResolvedRound]:
        """All rounds in RESOLVED state, projected to arena + metadata."""
        docs = await self.collection.find(
            {"state": RESOLVED_STATE},
            {"arena_id": 1, "metadata": 1}
        ).to_list(length=None)

        rounds = []
        for doc in docs:
            if doc.get("arena_id") is None:
                logger.warning(f"Skipping resolved round {doc.get('_id')} without arena_id")
                continue
            rounds.append(ResolvedRound(arena_id=str(doc["arena_id"]), metadata=doc.get("metadata")))

        return rounds

    async def list_by_arena(self, arena_id: str) -> list[Round]:
        """Rounds of an arena, ordered by round number."""
        docs = await self.collection.find(
            {"arena_id": arena_id}
        ).sort("round_number", 1).to_list(length=None)

        rounds = []
        for doc in docs:
            try:
                rounds.append(Round(**{**doc, "_id": str(doc.get("_id"))}))
            except ValidationError:
                logger.warning(f"Skipping malformed round {doc.get('_id')} of arena {arena_id}")

        return rounds

    async def get_arena_ids(self, round_ids: list[str]) -> dict[str, str]:
        """Map round_id -> arena_id for the given rounds (one bulk query)."""
        if not round_ids:
            return {}

        docs = await self.collection.find(
            {"_id": {"$in": round_ids}},
            {"arena_id": 1}
        ).to_list(length=None)

        return {
            str(doc["_id"]): str(doc["arena_id"])
            for doc in docs
            if doc.get("arena_id") is not None
        }
