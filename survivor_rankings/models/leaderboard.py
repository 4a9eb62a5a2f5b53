from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class EliminationResult(BaseModel):
    """Cómo puntuó una eliminación concreta frente a la predicción"""

    contestant_id: int
    actual_position: int
    predicted_position: Optional[int] = None  # None si la predicción no lo incluye
    difference: Optional[int] = None
    points: int = 0


class ScoreBreakdown(BaseModel):
    """Desglose de puntos de una predicción (la única fuente de verdad del tiering)"""

    exact_matches: int = 0
    one_off: int = 0
    two_off: int = 0
    misses: int = 0

    exact_match_points: int = 0
    one_off_points: int = 0
    two_off_points: int = 0

    elimination_points: int = 0
    final_three_bonus: int = 0
    final_three_candidates: list[int] = Field(default_factory=list)

    total: int = 0

    eliminations: list[EliminationResult] = Field(default_factory=list)


class LeaderboardEntry(BaseModel):
    """Entrada en la tabla de clasificación (se recalcula en cada petición)"""

    rank: int
    user_id: str
    user_name: str
    rankings: list[int]
    submitted_at: datetime

    score: int
    breakdown: ScoreBreakdown

    class Config:
        populate_by_name = True
