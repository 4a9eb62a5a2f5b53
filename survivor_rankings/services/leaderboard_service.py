"""
LeaderboardService - Calculates and serves leaderboard data in real-time.

Scores are never stored: every request loads a snapshot of the elimination
history and the predictions and hands them to the scoring functions.
"""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from survivor_rankings.models.contestant import ROSTER_IDS
from survivor_rankings.models.game_state import GameState
from survivor_rankings.models.leaderboard import LeaderboardEntry
from survivor_rankings.repositories.game_state_repository import GameStateRepository
from survivor_rankings.repositories.ranking_repository import RankingRepository
from survivor_rankings.services.scoring_service import build_leaderboard


class LeaderboardService:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.game_repo = GameStateRepository(db)
        self.ranking_repo = RankingRepository(db)

    async def get_leaderboard(
        self,
        limit: Optional[int] = 100
    ) -> tuple[GameState, list[LeaderboardEntry]]:
        """
        Get the full leaderboard against the current elimination history.

        Returns the state snapshot used so callers can show the context
        (eliminations, week) the scores were computed for.
        """
        state = await self.game_repo.get()
        rankings = await self.ranking_repo.get_all()

        entries = build_leaderboard(rankings, state.eliminations, ROSTER_IDS)
        if limit is not None:
            entries = entries[:limit]

        return state, entries

    async def get_user_position(self, user_id: str) -> Optional[LeaderboardEntry]:
        """
        Get a user's entry (with rank) in the leaderboard.

        Returns None if the user has no valid prediction.
        """
        _, entries = await self.get_leaderboard(limit=None)

        for entry in entries:
            if entry.user_id == user_id:
                return entry

        return None
