"""
Controlador de leaderboard - Endpoint de clasificación

El ranking se recalcula en cada request desde las rondas resueltas y los
logs de eliminación. Las páginas se guardan en la cache de respuestas por
(limit, offset) durante unos segundos.
"""

from typing import Optional

from fastapi import APIRouter, Query

from app.core.config import get_settings
from app.core.dependencies import Cache, GameData
from app.models.leaderboard import LeaderboardPage
from app.services.cache_service import leaderboard_cache_key
from app.services.cursor import decode_cursor
from app.services.leaderboard_service import DEFAULT_LIMIT, MAX_LIMIT, LeaderboardService


router = APIRouter(prefix="/api/leaderboard", tags=["leaderboard"])


@router.get("", response_model=LeaderboardPage)
async def get_leaderboard(
    source: GameData,
    cache: Cache,
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT, description="Players per page"),
    cursor: Optional[str] = Query(None, description="Opaque cursor from a previous page")
):
    """
    Obtener una página del leaderboard, ordenado por yield total.

    Empate en yield: gana quien tenga más arenas ganadas.
    Un cursor inválido se trata como la primera página.
    """
    leaderboard_service = LeaderboardService(source)

    async def build_page() -> dict:
        page = await leaderboard_service.get_leaderboard(limit, cursor)
        return page.model_dump(by_alias=True)

    return await cache.get_or_set(
        leaderboard_cache_key(limit, decode_cursor(cursor)),
        build_page,
        ttl=get_settings().leaderboard_cache_ttl_seconds,
    )
