from datetime import datetime
from pydantic import BaseModel, Field


class UserRanking(BaseModel):
    """
    Predicción completa de un usuario.

    rankings va del primer eliminado (posición 0) al ganador (última posición).
    Solo existe una por usuario: reenviar reemplaza la anterior.
    """

    user_id: str
    user_name: str
    rankings: list[int]
    submitted_at: datetime

    class Config:
        populate_by_name = True


class UserRankingCreate(BaseModel):
    """Lo que envía el usuario al guardar su predicción"""

    user_id: str = Field(..., min_length=1)
    user_name: str = Field(..., min_length=1, max_length=80)
    rankings: list[int]
