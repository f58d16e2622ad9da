"""
LeaderboardService - Calculates and serves leaderboard data in real-time.

The ranking is rebuilt from the resolved rounds and the elimination logs on
every call (the response cache sits in front of it, see CacheService):

    rounds + eliminations -> per-user accumulators -> identity join -> rank

Each step below is a pure function; the service only does the I/O.
"""

import asyncio
import logging
from typing import Iterable, Optional

from app.models.leaderboard import LeaderboardPage, PlayerAccumulator, PlayerStats
from app.models.round import EliminationLogEntry, ResolvedRound, parse_round_metadata
from app.models.user import UserIdentity
from app.repositories.game_data_source import LeaderboardDataSource
from app.services.cursor import decode_cursor, encode_cursor

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 20
MAX_LIMIT = 100


def _accumulator(accumulators: dict[str, PlayerAccumulator], user_id: str) -> PlayerAccumulator:
    acc = accumulators.get(user_id)
    if acc is None:
        acc = accumulators[user_id] = PlayerAccumulator(user_id=user_id)
    return acc


def aggregate_player_stats(
    rounds: Iterable[ResolvedRound],
    eliminations: Iterable[EliminationLogEntry],
) -> dict[str, PlayerAccumulator]:
    """
    Build per-user accumulators from resolved rounds and elimination logs.

    Rounds: every player choice adds the round's arena to the user's
    participation and counts one round; every payout adds to total yield
    (payout-only users are tracked too). Eliminations: the arena goes into
    both participation and eliminated sets, and one elimination is counted.
    """
    accumulators: dict[str, PlayerAccumulator] = {}

    for round_ in rounds:
        metadata = parse_round_metadata(round_.metadata)

        for choice in metadata.player_choices:
            acc = _accumulator(accumulators, choice.user_id)
            acc.arenas_participated.add(round_.arena_id)
            acc.rounds_participated += 1

        for payout in metadata.payouts:
            acc = _accumulator(accumulators, payout.user_id)
            acc.total_yield += payout.amount

    for elimination in eliminations:
        acc = _accumulator(accumulators, elimination.user_id)
        # La metadata de la ronda puede no traer playerChoices
        acc.arenas_participated.add(elimination.arena_id)
        acc.arenas_eliminated_in.add(elimination.arena_id)
        acc.elimination_count += 1

    return accumulators


def join_identities(
    accumulators: dict[str, PlayerAccumulator],
    users: Iterable[UserIdentity],
) -> list[PlayerStats]:
    """
    Attach wallet addresses to accumulated stats.

    Users missing from the identity store are dropped (orphaned game
    records). Returned entries are unranked (rank=0).
    """
    user_map = {user.id: user for user in users}

    players = []
    for user_id, acc in accumulators.items():
        user = user_map.get(user_id)
        if user is None:
            continue

        players.append(PlayerStats(
            id=user_id,
            wallet_address=user.wallet_address,
            total_yield=acc.total_yield,
            arenas_won=acc.arenas_won,
            survival_streak=acc.survival_streak,
        ))

    orphaned = len(accumulators) - len(players)
    if orphaned:
        logger.debug(f"Dropped {orphaned} orphaned player record(s)")

    return players


def rank_players(players: Iterable[PlayerStats]) -> list[PlayerStats]:
    """
    Sort by total yield desc, then arenas won desc, then user ID, and assign
    1-based contiguous ranks. Exact ties still get distinct ranks.
    """
    ordered = sorted(players, key=lambda p: (-p.total_yield, -p.arenas_won, p.id))
    return [p.model_copy(update={"rank": idx + 1}) for idx, p in enumerate(ordered)]


def paginate(
    ranked: list[PlayerStats],
    limit: int,
    cursor: Optional[str] = None,
) -> LeaderboardPage:
    """Slice [offset, offset + limit) and point next_cursor past it if more remain."""
    offset = decode_cursor(cursor)
    end = offset + limit

    return LeaderboardPage(
        players=ranked[offset:end],
        next_cursor=encode_cursor(end) if end < len(ranked) else None,
    )


class LeaderboardService:
    def __init__(self, source: LeaderboardDataSource):
        self.source = source

    async def build_ranked_players(self) -> list[PlayerStats]:
        """Full ranked roster. All-or-nothing: any read failure propagates."""
        rounds, eliminations = await asyncio.gather(
            self.source.list_resolved_rounds(),
            self.source.list_elimination_logs(),
        )

        accumulators = aggregate_player_stats(rounds, eliminations)
        if not accumulators:
            return []

        users = await self.source.find_users_by_ids(sorted(accumulators))
        ranked = rank_players(join_identities(accumulators, users))

        logger.debug(
            f"Leaderboard rebuilt: {len(rounds)} rounds, "
            f"{len(eliminations)} eliminations, {len(ranked)} players"
        )
        return ranked

    async def get_leaderboard(
        self,
        limit: int = DEFAULT_LIMIT,
        cursor: Optional[str] = None,
    ) -> LeaderboardPage:
        """One page of the leaderboard, starting at the cursor's offset."""
        ranked = await self.build_ranked_players()
        return paginate(ranked, limit, cursor)
