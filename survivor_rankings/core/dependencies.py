"""
Dependencies de FastAPI para inyeccion de BD
"""

from typing import Annotated

from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from survivor_rankings.database import get_database


# Alias de tipos para que se vea mas limpio en los endpoints
Database = Annotated[AsyncIOMotorDatabase, Depends(get_database)]
