"""
Scoring - Puntúa predicciones de orden de eliminación y arma el leaderboard.

Sistema de puntos (por cada eliminación, según la distancia entre la posición
predicha y la real):
- 5 puntos: posición exacta
- 3 puntos: a una posición
- 1 punto: a dos posiciones
- 0 puntos: tres o más

Bonus final three: +3 por cada uno de los últimos min(3, restantes)
concursantes de la predicción que siga en juego.

Todo aquí es puro: el historial y las predicciones llegan como parámetros y
nunca se modifican.
"""

import logging
from datetime import datetime, timezone
from typing import Iterable, Optional, Sequence

from survivor_rankings.models.leaderboard import EliminationResult, LeaderboardEntry, ScoreBreakdown
from survivor_rankings.models.ranking import UserRanking

logger = logging.getLogger(__name__)

# Distancia -> puntos. Cualquier otra distancia vale 0
TIER_POINTS = {0: 5, 1: 3, 2: 1}

FINAL_THREE_SIZE = 3
FINAL_THREE_BONUS = 3


class ScoringError(Exception):
    """Base exception for scoring errors."""
    pass


class InvalidPredictionError(ScoringError):
    """Raised when a prediction is not a permutation of the roster."""
    pass


def points_for_difference(difference: int) -> int:
    """Puntos por una eliminación a `difference` posiciones de la predicción"""
    return TIER_POINTS.get(difference, 0)


def validate_prediction(prediction: Sequence[int], roster_ids: Iterable[int]) -> None:
    """
    Check that a prediction ranks every contestant of the roster exactly once.

    Raises InvalidPredictionError when the length differs from the roster
    size, an id is not part of the roster, or an id appears twice.
    """
    roster = set(roster_ids)

    if len(prediction) != len(roster):
        raise InvalidPredictionError(
            f"Prediction must rank all {len(roster)} contestants, got {len(prediction)}"
        )

    seen = set()
    for contestant_id in prediction:
        if contestant_id not in roster:
            raise InvalidPredictionError(f"Unknown contestant {contestant_id}")
        if contestant_id in seen:
            raise InvalidPredictionError(f"Contestant {contestant_id} appears more than once")
        seen.add(contestant_id)


def final_three_candidates(
    prediction: Sequence[int],
    eliminations: Sequence[int],
    roster_size: Optional[int] = None
) -> list[int]:
    """
    Tail of the prediction that is eligible for the final three bonus.

    The window is the last min(3, remaining) entries of the whole prediction,
    where remaining = roster size - eliminations so far.
    """
    total = len(prediction) if roster_size is None else roster_size
    window = min(FINAL_THREE_SIZE, total - len(eliminations))

    if window <= 0:
        return []

    return list(prediction[-window:])


def score_breakdown(
    prediction: Sequence[int],
    eliminations: Sequence[int],
    roster_size: Optional[int] = None
) -> ScoreBreakdown:
    """
    Calcular el desglose completo de puntos de una predicción.

    Args:
        prediction: IDs del primer eliminado al ganador
        eliminations: historial real, en orden de eliminación
        roster_size: N; por defecto len(prediction)

    Returns:
        ScoreBreakdown con conteos por tier, bonus y total
    """
    # Primera aparición de cada ID (mismo criterio que indexOf)
    predicted_positions: dict[int, int] = {}
    for position, contestant_id in enumerate(prediction):
        predicted_positions.setdefault(contestant_id, position)

    breakdown = ScoreBreakdown()

    for actual_position, contestant_id in enumerate(eliminations):
        predicted_position = predicted_positions.get(contestant_id)

        if predicted_position is None:
            breakdown.misses += 1
            breakdown.eliminations.append(EliminationResult(
                contestant_id=contestant_id,
                actual_position=actual_position,
            ))
            continue

        difference = abs(predicted_position - actual_position)
        points = points_for_difference(difference)

        if difference == 0:
            breakdown.exact_matches += 1
            breakdown.exact_match_points += points
        elif difference == 1:
            breakdown.one_off += 1
            breakdown.one_off_points += points
        elif difference == 2:
            breakdown.two_off += 1
            breakdown.two_off_points += points
        else:
            breakdown.misses += 1

        breakdown.elimination_points += points
        breakdown.eliminations.append(EliminationResult(
            contestant_id=contestant_id,
            actual_position=actual_position,
            predicted_position=predicted_position,
            difference=difference,
            points=points,
        ))

    # Bonus: solo cuenta quien sigue en juego, aunque caiga en la ventana
    eliminated = set(eliminations)
    candidates = final_three_candidates(prediction, eliminations, roster_size)
    breakdown.final_three_candidates = candidates
    breakdown.final_three_bonus = sum(
        FINAL_THREE_BONUS for contestant_id in candidates if contestant_id not in eliminated
    )

    breakdown.total = breakdown.elimination_points + breakdown.final_three_bonus
    return breakdown


def score(
    prediction: Sequence[int],
    eliminations: Sequence[int],
    roster_size: Optional[int] = None
) -> int:
    """Puntos totales de una predicción frente al historial actual"""
    return score_breakdown(prediction, eliminations, roster_size).total


def _submission_key(submitted_at: datetime) -> datetime:
    # Mongo devuelve datetimes naive (UTC); los normalizo para poder compararlos
    if submitted_at.tzinfo is None:
        return submitted_at.replace(tzinfo=timezone.utc)
    return submitted_at


def build_leaderboard(
    predictions: Sequence[UserRanking],
    eliminations: Sequence[int],
    roster_ids: Optional[Sequence[int]] = None
) -> list[LeaderboardEntry]:
    """
    Score every prediction against the same history and rank them.

    Ordering:
    1. score (descending)
    2. submitted_at (ascending) - earliest submission wins a tie
    3. input order (the sort is stable)

    When roster_ids is given each prediction is validated first; an invalid
    one is logged and left out so it does not take the others down with it.
    """
    roster_size = len(roster_ids) if roster_ids is not None else None
    scored: list[tuple[UserRanking, ScoreBreakdown]] = []

    for ranking in predictions:
        if roster_ids is not None:
            try:
                validate_prediction(ranking.rankings, roster_ids)
            except InvalidPredictionError as e:
                logger.warning(f"Skipping prediction of user {ranking.user_id}: {e}")
                continue

        scored.append((ranking, score_breakdown(ranking.rankings, eliminations, roster_size)))

    scored.sort(key=lambda item: (-item[1].total, _submission_key(item[0].submitted_at)))

    return [
        LeaderboardEntry(
            rank=idx + 1,
            user_id=ranking.user_id,
            user_name=ranking.user_name,
            rankings=list(ranking.rankings),
            submitted_at=ranking.submitted_at,
            score=breakdown.total,
            breakdown=breakdown,
        )
        for idx, (ranking, breakdown) in enumerate(scored)
    ]
