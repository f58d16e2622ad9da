"""
Configuración de la app cargada desde variables de entorno (.env)

Todo lo que varía entre desarrollo/producción va aquí
"""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # MongoDB - rounds, elimination_logs, arenas y users viven aquí
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db_name: str = "survival_arena"  # Nombre de la base de datos

    # App
    app_env: str = "development"  # o "production"
    debug: bool = False
    log_level: str = "INFO"

    # CORS - de dónde pueden venir los requests
    cors_origins: str = "http://localhost:3000"  # URLs separadas por coma

    # ==================== Cache de respuestas ====================
    # El leaderboard se recalcula completo en cada request, así que
    # las respuestas se guardan un rato por (limit, cursor)
    cache_enabled: bool = True
    leaderboard_cache_ttl_seconds: int = 30  # Se actualiza al terminar partidas
    arena_stats_cache_ttl_seconds: int = 15  # El estado de la arena cambia por ronda

    class Config:
        env_file = ".env"  # Lee desde el archivo .env
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignora campos extras del .env que no estén en el modelo


@lru_cache()
def get_settings() -> Settings:
    """Retorna la instancia de configuración (cacheada para no releerla)"""
    return Settings()
