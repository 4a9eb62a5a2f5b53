"""
Controlador de concursantes - Roster de la temporada con su estado
"""

from fastapi import APIRouter, HTTPException, status

from survivor_rankings.core.dependencies import Database
from survivor_rankings.models.contestant import ContestantStatus
from survivor_rankings.services.game_service import GameService, ContestantNotFoundError


router = APIRouter(prefix="/contestants", tags=["contestants"])


@router.get("", response_model=list[ContestantStatus])
async def list_contestants(db: Database):
    """
    Obtener todos los concursantes, marcando quién está eliminado y en qué orden.
    """
    game_service = GameService(db)
    return await game_service.list_contestants()


@router.get("/{contestant_id}", response_model=ContestantStatus)
async def get_contestant(contestant_id: int, db: Database):
    """
    Obtener un concursante por ID.
    """
    game_service = GameService(db)

    try:
        return await game_service.get_contestant(contestant_id)
    except ContestantNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
