from .game_state_repository import GameStateRepository
from .ranking_repository import RankingRepository

__all__ = [
    "GameStateRepository",
    "RankingRepository",
]
