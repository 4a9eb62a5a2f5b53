"""
Controlador de rankings - Endpoints para guardar y consultar predicciones
"""

from datetime import datetime

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from survivor_rankings.core.dependencies import Database
from survivor_rankings.models.leaderboard import ScoreBreakdown
from survivor_rankings.models.ranking import UserRanking, UserRankingCreate
from survivor_rankings.services.game_service import GameService
from survivor_rankings.services.ranking_service import RankingService, RankingNotFoundError
from survivor_rankings.services.scoring_service import InvalidPredictionError


router = APIRouter(prefix="/rankings", tags=["rankings"])


class RankingResponse(BaseModel):
    """Predicción guardada de un usuario."""
    user_id: str
    user_name: str
    rankings: list[int]
    submitted_at: datetime


class RankingDetailResponse(RankingResponse):
    """Predicción con su puntuación actual."""
    score: int
    breakdown: ScoreBreakdown


class RankingTemplateResponse(BaseModel):
    """Orden inicial sugerido para una predicción nueva."""
    rankings: list[int]


def _to_response(ranking: UserRanking) -> RankingResponse:
    return RankingResponse(
        user_id=ranking.user_id,
        user_name=ranking.user_name,
        rankings=ranking.rankings,
        submitted_at=ranking.submitted_at
    )


@router.post("", response_model=RankingResponse, status_code=status.HTTP_201_CREATED)
async def submit_ranking(ranking_data: UserRankingCreate, db: Database):
    """
    Guardar la predicción de un usuario.

    Si el usuario ya tenía una, se reemplaza.
    La predicción debe incluir a todos los concursantes exactamente una vez.
    """
    ranking_service = RankingService(db)

    try:
        ranking = await ranking_service.submit_ranking(ranking_data)
    except InvalidPredictionError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    return _to_response(ranking)


@router.get("", response_model=list[RankingResponse])
async def list_rankings(db: Database):
    """
    Obtener todas las predicciones guardadas.
    """
    ranking_service = RankingService(db)
    rankings = await ranking_service.get_all_rankings()

    return [_to_response(r) for r in rankings]


@router.get("/template", response_model=RankingTemplateResponse)
async def get_ranking_template(db: Database):
    """
    Obtener el orden inicial para armar una predicción.

    Los ya eliminados van primero (en su orden real), luego el resto.
    """
    game_service = GameService(db)
    return RankingTemplateResponse(rankings=await game_service.default_prediction())


@router.get("/{user_id}", response_model=RankingDetailResponse)
async def get_ranking(user_id: str, db: Database):
    """
    Obtener la predicción de un usuario con su desglose de puntos.
    """
    ranking_service = RankingService(db)

    try:
        ranking, breakdown = await ranking_service.get_ranking_with_breakdown(user_id)
    except RankingNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )

    return RankingDetailResponse(
        user_id=ranking.user_id,
        user_name=ranking.user_name,
        rankings=ranking.rankings,
        submitted_at=ranking.submitted_at,
        score=breakdown.total,
        breakdown=breakdown
    )


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_ranking(user_id: str, db: Database):
    """
    Borrar la predicción de un usuario.
    """
    ranking_service = RankingService(db)

    try:
        await ranking_service.delete_ranking(user_id)
    except RankingNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
