"""
UserRepository - MongoDB access for users collection.
"""

import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.models.user import UserIdentity

logger = logging.getLogger(__name__)


class UserRepository:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db["users"]

    async def find_by_ids(self, user_ids: list[str]) -> list[UserIdentity]:
        """
        Bulk lookup. Unknown IDs are simply absent from the result, and so
        are users without a wallet address (they cannot be shown).
        """
        if not user_ids:
            return []

        docs = await self.collection.find(
            {"_id": {"$in": user_ids}},
            {"wallet_address": 1}
        ).to_list(length=None)

        users = []
        for doc in docs:
            wallet = doc.get("wallet_address")
            if not isinstance(wallet, str):
                logger.warning(f"Skipping user {doc.get('_id')} without wallet_address")
                continue
            users.append(UserIdentity(id=str(doc["_id"]), wallet_address=wallet))

        return users
