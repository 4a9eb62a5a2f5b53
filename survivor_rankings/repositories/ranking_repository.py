"""
🎯 RankingRepository - CRUD para las predicciones de los usuarios

Una predicción por usuario: el _id del documento es el user_id, así que
reenviar reemplaza la anterior (last write wins).
"""

from typing import Optional
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING

from survivor_rankings.models.ranking import UserRanking


class RankingRepository:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db["rankings"]

    # ============================================
    # 📌 CREATE / REPLACE
    # ============================================

    async def save(self, ranking: UserRanking) -> UserRanking:
        """
        Guarda la predicción de un usuario, reemplazando la que tuviera
        """
        doc = ranking.model_dump()
        doc["_id"] = ranking.user_id

        await self.collection.replace_one({"_id": ranking.user_id}, doc, upsert=True)
        return ranking

    # ============================================
    # 📌 READ
    # ============================================

    async def get_by_user_id(self, user_id: str) -> Optional[UserRanking]:
        """Obtiene la predicción de un usuario"""
        doc = await self.collection.find_one({"_id": user_id})
        return UserRanking(**doc) if doc else None

    async def get_all(self) -> list[UserRanking]:
        """
        Obtiene todas las predicciones, de la más antigua a la más nueva

        Ese orden es el que usa el leaderboard para desempatar
        """
        cursor = self.collection.find().sort([
            ("submitted_at", ASCENDING),
            ("_id", ASCENDING)
        ])
        docs = await cursor.to_list(length=None)
        return [UserRanking(**doc) for doc in docs]

    async def count(self) -> int:
        return await self.collection.count_documents({})

    # ============================================
    # 📌 DELETE
    # ============================================

    async def delete(self, user_id: str) -> bool:
        result = await self.collection.delete_one({"_id": user_id})
        return result.deleted_count > 0

    async def delete_all(self) -> int:
        """Borra todas las predicciones (reset de la temporada)"""
        result = await self.collection.delete_many({})
        return result.deleted_count
