from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Arena(BaseModel):
    id: str = Field(..., alias="_id")
    metadata: Optional[dict[str, Any]] = None

    class Config:
        populate_by_name = True


class ArenaStats(BaseModel):
    """Foto del estado actual de una arena"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    arena_id: str
    current_pot: float
    player_count: int
    survivor_count: int
    current_round: int
    entry_fee: float
    yield_accrued: float
    status: str
    last_updated: datetime
