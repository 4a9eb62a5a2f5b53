"""
Controlador de salud - Endpoint de comprobación del servicio
"""

import logging

from fastapi import APIRouter
from pydantic import BaseModel
from pymongo.errors import PyMongoError

from survivor_rankings.database import Database
from survivor_rankings.models.contestant import ROSTER_SIZE

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Respuesta del chequeo de estado."""
    status: str
    database: str
    roster_size: int


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Endpoint de verificación de estado.

    Si hay cliente de MongoDB hace un ping; si falla, la API sigue
    respondiendo pero reporta la base como "unreachable".
    """
    if Database.db is None:
        db_status = "disconnected"
    else:
        try:
            await Database.db.command("ping")
            db_status = "connected"
        except PyMongoError as e:
            logger.error(f"❌ MongoDB ping failed: {e}")
            db_status = "unreachable"

    return HealthResponse(
        status="ok" if db_status == "connected" else "degraded",
        database=db_status,
        roster_size=ROSTER_SIZE
    )
