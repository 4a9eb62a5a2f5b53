from .contestant import Contestant, ContestantStatus, CONTESTANTS, ROSTER_IDS, ROSTER_SIZE, get_contestant
from .game_state import GameState
from .ranking import UserRanking, UserRankingCreate
from .leaderboard import EliminationResult, ScoreBreakdown, LeaderboardEntry

__all__ = [
    "Contestant",
    "ContestantStatus",
    "CONTESTANTS",
    "ROSTER_IDS",
    "ROSTER_SIZE",
    "get_contestant",
    "GameState",
    "UserRanking",
    "UserRankingCreate",
    "EliminationResult",
    "ScoreBreakdown",
    "LeaderboardEntry",
]
