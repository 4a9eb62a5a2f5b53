"""
Controlador del juego - Estado actual de la temporada
"""

from fastapi import APIRouter
from pydantic import BaseModel

from survivor_rankings.core.dependencies import Database
from survivor_rankings.services.game_service import GameService


router = APIRouter(prefix="/game", tags=["game"])


class GameSummaryResponse(BaseModel):
    """Resumen de la temporada."""
    eliminations: list[int]
    current_week: int
    eliminated_count: int
    remaining_count: int
    players_count: int


@router.get("", response_model=GameSummaryResponse)
async def get_game(db: Database):
    """
    Obtener el estado de la temporada: eliminaciones, semana y jugadores.
    """
    game_service = GameService(db)
    return GameSummaryResponse(**await game_service.get_summary())
