"""
Unit tests for GameService
"""

import pytest

from survivor_rankings.models.contestant import ROSTER_SIZE
from survivor_rankings.services.game_service import (
    GameService,
    ContestantNotFoundError,
    EliminationNotFoundError,
    contestant_statuses,
)


class TestContestantStatuses:
    """Roster annotation is pure, no database needed."""

    def test_statuses_mark_elimination_order(self):
        statuses = {s.id: s for s in contestant_statuses([5, 2])}

        assert len(statuses) == ROSTER_SIZE
        assert statuses[5].eliminated is True
        assert statuses[5].elimination_order == 1
        assert statuses[2].elimination_order == 2
        assert statuses[1].eliminated is False
        assert statuses[1].elimination_order is None


class TestGameService:
    """Test suite for GameService business logic."""

    @pytest.mark.asyncio
    async def test_add_elimination(self, test_db):
        service = GameService(test_db)

        state = await service.add_elimination(5)

        assert state.eliminations == [5]
        assert state.current_week == 2

    @pytest.mark.asyncio
    async def test_add_elimination_unknown_contestant(self, test_db):
        service = GameService(test_db)

        with pytest.raises(ContestantNotFoundError):
            await service.add_elimination(99)

    @pytest.mark.asyncio
    async def test_add_elimination_already_eliminated(self, test_db):
        service = GameService(test_db)
        await service.add_elimination(5)

        state = await service.add_elimination(5)

        assert state.eliminations == [5]
        assert state.current_week == 2

    @pytest.mark.asyncio
    async def test_remove_elimination(self, test_db):
        service = GameService(test_db)
        await service.add_elimination(5)
        await service.add_elimination(8)

        state = await service.remove_elimination(5)

        assert state.eliminations == [8]
        assert state.current_week == 2

    @pytest.mark.asyncio
    async def test_remove_elimination_not_eliminated(self, test_db):
        service = GameService(test_db)

        with pytest.raises(EliminationNotFoundError):
            await service.remove_elimination(5)

    @pytest.mark.asyncio
    async def test_get_contestant(self, test_db):
        service = GameService(test_db)
        await service.add_elimination(14)

        contestant = await service.get_contestant(14)

        assert contestant.name == "Anika Dhar"
        assert contestant.eliminated is True
        assert contestant.elimination_order == 1

    @pytest.mark.asyncio
    async def test_get_contestant_not_found(self, test_db):
        service = GameService(test_db)

        with pytest.raises(ContestantNotFoundError):
            await service.get_contestant(0)

    @pytest.mark.asyncio
    async def test_default_prediction_puts_eliminated_first(self, test_db):
        service = GameService(test_db)
        await service.add_elimination(9)
        await service.add_elimination(3)

        prediction = await service.default_prediction()

        assert prediction[:2] == [9, 3]
        assert sorted(prediction) == list(range(1, ROSTER_SIZE + 1))
        assert prediction[2:5] == [1, 2, 4]

    @pytest.mark.asyncio
    async def test_summary(self, test_db, make_ranking, roster_order):
        service = GameService(test_db)
        await service.ranking_repo.save(make_ranking("ana", roster_order))
        await service.add_elimination(1)

        summary = await service.get_summary()

        assert summary == {
            "eliminations": [1],
            "current_week": 2,
            "eliminated_count": 1,
            "remaining_count": ROSTER_SIZE - 1,
            "players_count": 1,
        }

    @pytest.mark.asyncio
    async def test_reset_game_clears_everything(self, test_db, make_ranking, roster_order):
        service = GameService(test_db)
        await service.ranking_repo.save(make_ranking("ana", roster_order))
        await service.add_elimination(1)

        state = await service.reset_game()

        assert state.eliminations == []
        assert state.current_week == 1
        assert await service.ranking_repo.count() == 0
