from pydantic import BaseModel, Field


class UserIdentity(BaseModel):
    """Identidad pública de un jugador (solo lo que muestra el leaderboard)"""

    id: str = Field(..., alias="_id")
    wallet_address: str

    class Config:
        populate_by_name = True
