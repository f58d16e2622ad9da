from .user import UserIdentity
from .round import Round, ResolvedRound, EliminationLogEntry, RoundMetadata
from .arena import Arena, ArenaStats
from .leaderboard import PlayerAccumulator, PlayerStats, LeaderboardPage

__all__ = [
    "UserIdentity",
    "Round",
    "ResolvedRound",
    "EliminationLogEntry",
    "RoundMetadata",
    "Arena",
    "ArenaStats",
    "PlayerAccumulator",
    "PlayerStats",
    "LeaderboardPage",
]
