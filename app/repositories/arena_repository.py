"""
ArenaRepository - MongoDB access for arenas collection.
"""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.models.arena import Arena


class ArenaRepository:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db["arenas"]

    async def get_by_id(self, arena_id: str) -> Optional[Arena]:
        """Get arena by ID."""
        doc = await self.collection.find_one({"_id": arena_id})
        return Arena(**doc) if doc else None
