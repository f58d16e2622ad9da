"""
Rounds y eliminaciones tal como se leen de la BD.

La metadata de una ronda es un dict sin esquema fijo (lo escribe el flujo de
resolución), así que se decodifica con parse_round_metadata, que nunca falla.
"""

import math
from typing import Any, Optional
from pydantic import BaseModel, Field


RESOLVED_STATE = "RESOLVED"


class PlayerChoice(BaseModel):
    user_id: str
    choice: Optional[str] = None
    stake: float = 0.0


class Payout(BaseModel):
    user_id: str
    amount: float = 0.0


class RoundMetadata(BaseModel):
    """Metadata de ronda ya normalizada: todo opcional, todo con default"""

    player_choices: list[PlayerChoice] = Field(default_factory=list)
    payouts: list[Payout] = Field(default_factory=list)
    oracle_yield: float = 0.0


class Round(BaseModel):
    id: str = Field(..., alias="_id")
    arena_id: str
    round_number: int = 0
    state: str = "OPEN"
    metadata: Any = None  # bag sin esquema, ver parse_round_metadata

    class Config:
        populate_by_name = True


class ResolvedRound(BaseModel):
    """Proyección mínima de una ronda resuelta que consume el leaderboard"""

    arena_id: str
    metadata: Any = None  # bag sin esquema, ver parse_round_metadata


class EliminationLogEntry(BaseModel):
    user_id: str
    round_id: Optional[str] = None
    arena_id: str


def _as_number(value: Any) -> float:
    # bool es subclase de int, no cuenta como número aquí; NaN/inf tampoco
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    try:
        number = float(value)
    except OverflowError:
        return 0.0
    return number if math.isfinite(number) else 0.0


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


def parse_round_metadata(raw: Any) -> RoundMetadata:
    """
    Decode the loosely-typed metadata bag of a round.

    Missing or malformed fields default to empty/zero. Entries without a
    string userId are skipped. Never raises.
    """
    if not isinstance(raw, dict):
        return RoundMetadata()

    choices = []
    for entry in _as_list(raw.get("playerChoices")):
        if not isinstance(entry, dict) or not isinstance(entry.get("userId"), str):
            continue
        choice = entry.get("choice")
        choices.append(PlayerChoice(
            user_id=entry["userId"],
            choice=choice if isinstance(choice, str) else None,
            stake=_as_number(entry.get("stake")),
        ))

    payouts = []
    resolution = raw.get("resolution")
    if isinstance(resolution, dict):
        for entry in _as_list(resolution.get("payouts")):
            if not isinstance(entry, dict) or not isinstance(entry.get("userId"), str):
                continue
            payouts.append(Payout(
                user_id=entry["userId"],
                amount=_as_number(entry.get("amount")),
            ))

    return RoundMetadata(
        player_choices=choices,
        payouts=payouts,
        oracle_yield=_as_number(raw.get("oracleYield")),
    )
