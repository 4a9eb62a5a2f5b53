"""
RankingService - Business logic for user predictions.

Handles validation and last-write-wins resubmission.
"""

import logging
from datetime import datetime, timezone

from motor.motor_asyncio import AsyncIOMotorDatabase

from survivor_rankings.models.contestant import ROSTER_IDS, ROSTER_SIZE
from survivor_rankings.models.leaderboard import ScoreBreakdown
from survivor_rankings.models.ranking import UserRanking, UserRankingCreate
from survivor_rankings.repositories.game_state_repository import GameStateRepository
from survivor_rankings.repositories.ranking_repository import RankingRepository
from survivor_rankings.services.scoring_service import score_breakdown, validate_prediction

logger = logging.getLogger(__name__)


class RankingServiceError(Exception):
    """Base exception for ranking service errors."""
    pass


class RankingNotFoundError(RankingServiceError):
    """Raised when a user has not submitted a prediction."""
    pass


class RankingService:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.ranking_repo = RankingRepository(db)
        self.game_repo = GameStateRepository(db)

    async def submit_ranking(self, ranking_data: UserRankingCreate) -> UserRanking:
        """
        Save a user's prediction, replacing any previous one.

        Raises InvalidPredictionError if the prediction is not a permutation
        of the whole roster.
        """
        validate_prediction(ranking_data.rankings, ROSTER_IDS)

        ranking = UserRanking(
            user_id=ranking_data.user_id,
            user_name=ranking_data.user_name.strip(),
            rankings=ranking_data.rankings,
            submitted_at=datetime.now(timezone.utc)
        )

        saved = await self.ranking_repo.save(ranking)
        logger.info(f"Prediction saved for user {saved.user_id}")
        return saved

    async def get_ranking(self, user_id: str) -> UserRanking:
        ranking = await self.ranking_repo.get_by_user_id(user_id)
        if not ranking:
            raise RankingNotFoundError(f"No prediction found for user {user_id}")
        return ranking

    async def get_all_rankings(self) -> list[UserRanking]:
        return await self.ranking_repo.get_all()

    async def get_ranking_with_breakdown(self, user_id: str) -> tuple[UserRanking, ScoreBreakdown]:
        """Get a prediction together with its score against the current history."""
        ranking = await self.get_ranking(user_id)
        state = await self.game_repo.get()

        return ranking, score_breakdown(ranking.rankings, state.eliminations, ROSTER_SIZE)

    async def delete_ranking(self, user_id: str) -> None:
        deleted = await self.ranking_repo.delete(user_id)
        if not deleted:
            raise RankingNotFoundError(f"No prediction found for user {user_id}")
