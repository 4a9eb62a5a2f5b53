"""
Controlador de leaderboard - Endpoints de clasificación

La clasificación no se guarda: se recalcula en cada request a partir del
historial de eliminaciones y las predicciones.
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel

from survivor_rankings.core.config import get_settings
from survivor_rankings.core.dependencies import Database
from survivor_rankings.models.leaderboard import LeaderboardEntry, ScoreBreakdown
from survivor_rankings.services.leaderboard_service import LeaderboardService


router = APIRouter(prefix="/leaderboard", tags=["leaderboard"])


class LeaderboardEntryResponse(BaseModel):
    """Entrada del leaderboard (usuario, predicción y puntos)."""
    rank: int
    user_id: str
    user_name: str
    rankings: list[int]
    submitted_at: datetime
    score: int
    breakdown: ScoreBreakdown


class LeaderboardResponse(BaseModel):
    """Leaderboard con las entradas y el contexto con el que se calculó."""
    entries: list[LeaderboardEntryResponse]
    eliminations: list[int]
    eliminations_count: int
    current_week: int


def _to_response(entry: LeaderboardEntry) -> LeaderboardEntryResponse:
    return LeaderboardEntryResponse(
        rank=entry.rank,
        user_id=entry.user_id,
        user_name=entry.user_name,
        rankings=entry.rankings,
        submitted_at=entry.submitted_at,
        score=entry.score,
        breakdown=entry.breakdown
    )


@router.get("", response_model=LeaderboardResponse)
async def get_leaderboard(
    db: Database,
    limit: Optional[int] = Query(None, ge=1, le=500)
):
    """
    Obtener el leaderboard actual, ordenado por puntos.

    Empates: gana quien envió su predicción primero.
    """
    if limit is None:
        limit = get_settings().leaderboard_default_limit

    leaderboard_service = LeaderboardService(db)
    state, entries = await leaderboard_service.get_leaderboard(limit)

    return LeaderboardResponse(
        entries=[_to_response(e) for e in entries],
        eliminations=state.eliminations,
        eliminations_count=len(state.eliminations),
        current_week=state.current_week
    )


@router.get("/{user_id}", response_model=LeaderboardEntryResponse)
async def get_user_position(user_id: str, db: Database):
    """
    Obtener la posición de un usuario en el leaderboard.
    """
    leaderboard_service = LeaderboardService(db)
    entry = await leaderboard_service.get_user_position(user_id)

    if not entry:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User {user_id} is not on the leaderboard"
        )

    return _to_response(entry)
