"""
Dependencies de FastAPI para inyectar BD, fuentes de datos y cache
"""

from typing import Annotated

from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.config import get_settings
from app.database import get_database
from app.repositories.game_data_source import MongoGameDataSource
from app.services.cache_service import CacheService

settings = get_settings()

# Una sola cache por proceso; los tests la reemplazan con dependency_overrides
response_cache = CacheService(
    enabled=settings.cache_enabled,
    default_ttl=settings.leaderboard_cache_ttl_seconds,
)


async def get_data_source(
    db: Annotated[AsyncIOMotorDatabase, Depends(get_database)]
) -> MongoGameDataSource:
    """Fuente de datos de solo lectura sobre rounds, eliminaciones, users y arenas"""
    return MongoGameDataSource(db)


def get_cache() -> CacheService:
    return response_cache


# Alias de tipos para que se vea mas limpio en los endpoints
GameData = Annotated[MongoGameDataSource, Depends(get_data_source)]
Cache = Annotated[CacheService, Depends(get_cache)]
