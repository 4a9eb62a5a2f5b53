"""
Controlador de Admin - Registrar eliminaciones y reiniciar la temporada
"""

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from survivor_rankings.core.dependencies import Database
from survivor_rankings.models.game_state import GameState
from survivor_rankings.services.game_service import (
    GameService,
    ContestantNotFoundError,
    EliminationNotFoundError
)


router = APIRouter(prefix="/admin", tags=["admin"])


# ============================================
# REQUEST / RESPONSE SCHEMAS
# ============================================

class AddEliminationRequest(BaseModel):
    """Request para registrar una eliminación"""
    contestant_id: int


class GameStateResponse(BaseModel):
    """Estado del juego tras el cambio"""
    eliminations: list[int]
    current_week: int


def _to_response(state: GameState) -> GameStateResponse:
    return GameStateResponse(
        eliminations=state.eliminations,
        current_week=state.current_week
    )


# ============================================
# ELIMINATION ENDPOINTS
# ============================================

@router.post("/eliminations", response_model=GameStateResponse)
async def add_elimination(request: AddEliminationRequest, db: Database):
    """
    Registrar la siguiente eliminación.

    Si el concursante ya estaba eliminado no cambia nada.
    """
    game_service = GameService(db)

    try:
        state = await game_service.add_elimination(request.contestant_id)
    except ContestantNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )

    return _to_response(state)


@router.delete("/eliminations/{contestant_id}", response_model=GameStateResponse)
async def remove_elimination(contestant_id: int, db: Database):
    """
    Deshacer una eliminación (por ejemplo, si se registró por error).
    """
    game_service = GameService(db)

    try:
        state = await game_service.remove_elimination(contestant_id)
    except EliminationNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )

    return _to_response(state)


# ============================================
# RESET
# ============================================

@router.post("/reset", response_model=GameStateResponse)
async def reset_game(db: Database):
    """
    Reiniciar la temporada: borra eliminaciones y todas las predicciones.
    """
    game_service = GameService(db)
    state = await game_service.reset_game()

    return _to_response(state)
