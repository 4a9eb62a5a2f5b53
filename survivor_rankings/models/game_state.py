from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


GAME_STATE_ID = "current"


class GameState(BaseModel):
    """Estado de la temporada: historial de eliminaciones y semana actual"""

    id: str = Field(GAME_STATE_ID, alias="_id")

    # IDs de concursantes en orden de eliminación (el primero salió primero)
    eliminations: list[int] = Field(default_factory=list)
    current_week: int = 1

    updated_at: Optional[datetime] = None

    class Config:
        populate_by_name = True
