"""
ArenaStatsService - Live snapshot of a single arena.
"""

from datetime import datetime, timezone

from app.models.arena import ArenaStats
from app.models.round import RESOLVED_STATE, parse_round_metadata
from app.repositories.game_data_source import ArenaDataSource


class ArenaStatsServiceError(Exception):
    """Base exception for arena stats errors."""
    pass


class ArenaNotFoundError(ArenaStatsServiceError):
    """Raised when the arena does not exist."""
    pass


class ArenaStatsService:
    def __init__(self, source: ArenaDataSource):
        self.source = source

    async def get_arena_stats(self, arena_id: str) -> ArenaStats:
        """
        Compute the arena's current stats.

        - player_count: players who made a choice in the first round
        - survivor_count: player_count minus distinct eliminated users
        - current_pot: sum of stakes in the latest round
        - yield_accrued: oracle yield summed over resolved rounds
        - status: latest round state, lower-cased ("pending" with no rounds)
        """
        arena = await self.source.get_arena(arena_id)
        if not arena:
            raise ArenaNotFoundError(f"Arena with ID {arena_id} not found")

        rounds = await self.source.list_arena_rounds(arena_id)
        eliminations = await self.source.list_eliminations_for_rounds([r.id for r in rounds])

        arena_meta = arena.metadata if isinstance(arena.metadata, dict) else {}
        entry_fee = arena_meta.get("minStake") or 0
        if isinstance(entry_fee, bool) or not isinstance(entry_fee, (int, float)):
            entry_fee = 0

        first = parse_round_metadata(rounds[0].metadata) if rounds else None
        latest = parse_round_metadata(rounds[-1].metadata) if rounds else None

        player_count = len(first.player_choices) if first else 0
        eliminated = {e.user_id for e in eliminations}

        yield_accrued = sum(
            parse_round_metadata(r.metadata).oracle_yield
            for r in rounds
            if r.state == RESOLVED_STATE
        )

        return ArenaStats(
            arena_id=arena_id,
            current_pot=sum(c.stake for c in latest.player_choices) if latest else 0.0,
            player_count=player_count,
            survivor_count=max(0, player_count - len(eliminated)),
            current_round=rounds[-1].round_number if rounds else 0,
            entry_fee=entry_fee,
            yield_accrued=yield_accrued,
            status=rounds[-1].state.lower() if rounds else "pending",
            last_updated=datetime.now(timezone.utc),
        )
