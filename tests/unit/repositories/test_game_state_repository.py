"""
Unit tests for GameStateRepository
"""

import pytest

from survivor_rankings.repositories.game_state_repository import GameStateRepository


class TestGameStateRepository:
    """Test suite for GameStateRepository database operations."""

    @pytest.mark.asyncio
    async def test_get_initial_state(self, test_db):
        """Nothing stored yet: empty history, week 1."""
        repo = GameStateRepository(test_db)

        state = await repo.get()

        assert state.eliminations == []
        assert state.current_week == 1

    @pytest.mark.asyncio
    async def test_add_elimination_appends_and_advances_week(self, test_db):
        repo = GameStateRepository(test_db)

        assert await repo.add_elimination(7) is True
        assert await repo.add_elimination(3) is True

        state = await repo.get()
        assert state.eliminations == [7, 3]
        assert state.current_week == 3
        assert state.updated_at is not None

    @pytest.mark.asyncio
    async def test_add_elimination_twice_is_noop(self, test_db):
        repo = GameStateRepository(test_db)
        await repo.add_elimination(7)

        assert await repo.add_elimination(7) is False

        state = await repo.get()
        assert state.eliminations == [7]
        assert state.current_week == 2

    @pytest.mark.asyncio
    async def test_remove_elimination_keeps_order(self, test_db):
        repo = GameStateRepository(test_db)
        for contestant_id in (4, 9, 12):
            await repo.add_elimination(contestant_id)

        assert await repo.remove_elimination(9) is True

        state = await repo.get()
        assert state.eliminations == [4, 12]
        assert state.current_week == 3

    @pytest.mark.asyncio
    async def test_remove_unknown_elimination(self, test_db):
        repo = GameStateRepository(test_db)
        await repo.add_elimination(4)

        assert await repo.remove_elimination(5) is False

        state = await repo.get()
        assert state.eliminations == [4]
        assert state.current_week == 2

    @pytest.mark.asyncio
    async def test_week_never_drops_below_one(self, test_db):
        repo = GameStateRepository(test_db)
        await repo.add_elimination(4)
        await test_db["game_state"].update_one({"_id": "current"}, {"$set": {"current_week": 1}})

        await repo.remove_elimination(4)

        state = await repo.get()
        assert state.current_week == 1

    @pytest.mark.asyncio
    async def test_reset(self, test_db):
        repo = GameStateRepository(test_db)
        await repo.add_elimination(1)
        await repo.add_elimination(2)

        await repo.reset()

        state = await repo.get()
        assert state.eliminations == []
        assert state.current_week == 1
