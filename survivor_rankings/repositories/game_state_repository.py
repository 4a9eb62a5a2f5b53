"""
🎯 GameStateRepository - Estado de la temporada en un único documento

En vez de leer-modificar-guardar todo el estado, cada cambio es un update
atómico sobre el documento "current".
"""

from datetime import datetime, timezone
from motor.motor_asyncio import AsyncIOMotorDatabase

from survivor_rankings.models.game_state import GameState, GAME_STATE_ID


class GameStateRepository:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db["game_state"]

    async def _ensure_exists(self):
        """Crea el documento con el estado inicial si todavía no existe"""
        await self.collection.update_one(
            {"_id": GAME_STATE_ID},
            {"$setOnInsert": {"eliminations": [], "current_week": 1, "updated_at": None}},
            upsert=True
        )

    # ============================================
    # 📌 READ
    # ============================================

    async def get(self) -> GameState:
        """Snapshot del estado actual (estado inicial si nunca se guardó)"""
        doc = await self.collection.find_one({"_id": GAME_STATE_ID})
        return GameState(**doc) if doc else GameState()

    # ============================================
    # 📌 UPDATE
    # ============================================

    async def add_elimination(self, contestant_id: int) -> bool:
        """
        Agrega una eliminación al final del historial y avanza la semana

        Retorna False si el concursante ya estaba eliminado (no cambia nada)
        """
        await self._ensure_exists()

        result = await self.collection.update_one(
            {"_id": GAME_STATE_ID, "eliminations": {"$ne": contestant_id}},
            {
                "$push": {"eliminations": contestant_id},
                "$inc": {"current_week": 1},
                "$set": {"updated_at": datetime.now(timezone.utc)}
            }
        )
        return result.modified_count > 0

    async def remove_elimination(self, contestant_id: int) -> bool:
        """
        Quita una eliminación del historial y retrocede la semana (mínimo 1)

        Retorna False si el concursante no estaba eliminado
        """
        result = await self.collection.update_one(
            {"_id": GAME_STATE_ID, "eliminations": contestant_id},
            {
                "$pull": {"eliminations": contestant_id},
                "$inc": {"current_week": -1},
                "$set": {"updated_at": datetime.now(timezone.utc)}
            }
        )

        if result.modified_count == 0:
            return False

        await self.collection.update_one(
            {"_id": GAME_STATE_ID, "current_week": {"$lt": 1}},
            {"$set": {"current_week": 1}}
        )
        return True

    async def reset(self) -> GameState:
        """Vuelve al estado inicial: sin eliminaciones, semana 1"""
        state = GameState(updated_at=datetime.now(timezone.utc))

        await self.collection.replace_one(
            {"_id": GAME_STATE_ID},
            state.model_dump(by_alias=True),
            upsert=True
        )
        return state
