from .round_repository import RoundRepository
from .elimination_log_repository import EliminationLogRepository
from .user_repository import UserRepository
from .arena_repository import ArenaRepository
from .game_data_source import MongoGameDataSource, DataSourceError

__all__ = [
    "RoundRepository",
    "EliminationLogRepository",
    "UserRepository",
    "ArenaRepository",
    "MongoGameDataSource",
    "DataSourceError",
]
