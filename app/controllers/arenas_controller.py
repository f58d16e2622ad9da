"""
Controlador de arenas - Estadísticas en vivo de una arena
"""

from fastapi import APIRouter, HTTPException, status

from app.core.config import get_settings
from app.core.dependencies import Cache, GameData
from app.models.arena import ArenaStats
from app.services.arena_stats_service import ArenaNotFoundError, ArenaStatsService
from app.services.cache_service import arena_stats_cache_key


router = APIRouter(prefix="/api/arenas", tags=["arenas"])


@router.get("/{arena_id}/stats", response_model=ArenaStats)
async def get_arena_stats(
    arena_id: str,
    source: GameData,
    cache: Cache
):
    """
    Obtener las estadísticas de una arena.

    Cacheado unos segundos: el estado cambia con cada ronda.
    """
    stats_service = ArenaStatsService(source)

    async def build_stats() -> dict:
        stats = await stats_service.get_arena_stats(arena_id)
        return stats.model_dump(by_alias=True, mode="json")

    try:
        return await cache.get_or_set(
            arena_stats_cache_key(arena_id),
            build_stats,
            ttl=get_settings().arena_stats_cache_ttl_seconds,
        )
    except ArenaNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
