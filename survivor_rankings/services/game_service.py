"""
GameService - Business logic for the season state.

Handles the roster, recording/undoing eliminations and resetting the season.
"""

import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

from survivor_rankings.models.contestant import CONTESTANTS, ROSTER_SIZE, ContestantStatus, get_contestant
from survivor_rankings.models.game_state import GameState
from survivor_rankings.repositories.game_state_repository import GameStateRepository
from survivor_rankings.repositories.ranking_repository import RankingRepository

logger = logging.getLogger(__name__)


class GameServiceError(Exception):
    """Base exception for game service errors."""
    pass


class ContestantNotFoundError(GameServiceError):
    """Raised when a contestant id is not part of the roster."""
    pass


class EliminationNotFoundError(GameServiceError):
    """Raised when undoing an elimination that was never recorded."""
    pass


def contestant_statuses(eliminations: list[int]) -> list[ContestantStatus]:
    """Roster annotated with who is out and in which order (1 = first out)"""
    order = {contestant_id: idx + 1 for idx, contestant_id in enumerate(eliminations)}

    return [
        ContestantStatus(
            **contestant.model_dump(),
            eliminated=contestant.id in order,
            elimination_order=order.get(contestant.id)
        )
        for contestant in CONTESTANTS
    ]


class GameService:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.game_repo = GameStateRepository(db)
        self.ranking_repo = RankingRepository(db)

    async def get_state(self) -> GameState:
        return await self.game_repo.get()

    async def get_summary(self) -> dict:
        """
        Resumen de la temporada.

        Retorna: {
            "eliminations": [3, 7],
            "current_week": 3,
            "eliminated_count": 2,
            "remaining_count": 16,
            "players_count": 5
        }
        """
        state = await self.game_repo.get()
        players = await self.ranking_repo.count()

        return {
            "eliminations": state.eliminations,
            "current_week": state.current_week,
            "eliminated_count": len(state.eliminations),
            "remaining_count": ROSTER_SIZE - len(state.eliminations),
            "players_count": players,
        }

    async def list_contestants(self) -> list[ContestantStatus]:
        state = await self.game_repo.get()
        return contestant_statuses(state.eliminations)

    async def get_contestant(self, contestant_id: int) -> ContestantStatus:
        if get_contestant(contestant_id) is None:
            raise ContestantNotFoundError(f"Contestant {contestant_id} not found")

        statuses = await self.list_contestants()
        return next(s for s in statuses if s.id == contestant_id)

    async def default_prediction(self) -> list[int]:
        """
        Starting order for a new prediction.

        Contestants already out go first, in the order they left; everyone
        still in the game follows in roster order.
        """
        state = await self.game_repo.get()
        eliminated = set(state.eliminations)
        active = [c.id for c in CONTESTANTS if c.id not in eliminated]
        return [*state.eliminations, *active]

    async def add_elimination(self, contestant_id: int) -> GameState:
        """
        Record the next elimination.

        Recording a contestant that is already out is a no-op.
        """
        if get_contestant(contestant_id) is None:
            raise ContestantNotFoundError(f"Contestant {contestant_id} not found")

        added = await self.game_repo.add_elimination(contestant_id)
        if added:
            logger.info(f"Contestant {contestant_id} eliminated")
        else:
            logger.info(f"Contestant {contestant_id} was already eliminated, nothing to do")

        return await self.game_repo.get()

    async def remove_elimination(self, contestant_id: int) -> GameState:
        """Undo an elimination; later eliminations move up one position."""
        removed = await self.game_repo.remove_elimination(contestant_id)
        if not removed:
            raise EliminationNotFoundError(f"Contestant {contestant_id} is not eliminated")

        logger.info(f"Elimination of contestant {contestant_id} removed")
        return await self.game_repo.get()

    async def reset_game(self) -> GameState:
        """Wipe eliminations and every submitted prediction."""
        deleted = await self.ranking_repo.delete_all()
        state = await self.game_repo.reset()

        logger.warning(f"Game reset: {deleted} predictions deleted")
        return state
