from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PlayerAccumulator(BaseModel):
    """Acumulador por usuario, se construye de cero en cada request"""

    user_id: str
    total_yield: float = 0.0
    arenas_participated: set[str] = Field(default_factory=set)
    arenas_eliminated_in: set[str] = Field(default_factory=set)
    rounds_participated: int = 0
    elimination_count: int = 0

    @property
    def arenas_won(self) -> int:
        # "Ganada" = participó y nunca fue eliminado en esa arena
        return len(self.arenas_participated - self.arenas_eliminated_in)

    @property
    def survival_streak(self) -> int:
        return max(0, self.rounds_participated - self.elimination_count)


class PlayerStats(BaseModel):
    """Entrada del leaderboard (resultado agregado)"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    id: str
    rank: int = 0  # 0 = todavía sin rankear
    wallet_address: str
    total_yield: float
    arenas_won: int
    survival_streak: int


class LeaderboardPage(BaseModel):
    """Una página del leaderboard y el cursor a la siguiente (si hay)"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    players: list[PlayerStats]
    next_cursor: Optional[str] = None
