"""
Entry point de la API
"""

import logging
import re
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware

from survivor_rankings.core.config import get_settings
from survivor_rankings.core.logging_config import configure_logging
from survivor_rankings.database import Database, create_indexes

from survivor_rankings.controllers.health_controller import router as health_router
from survivor_rankings.controllers.contestants_controller import router as contestants_router
from survivor_rankings.controllers.rankings_controller import router as rankings_router
from survivor_rankings.controllers.leaderboard_controller import router as leaderboard_router
from survivor_rankings.controllers.game_controller import router as game_router
from survivor_rankings.controllers.admin_controller import router as admin_router

settings = get_settings()
configure_logging(settings)

logger = logging.getLogger(__name__)

# Parse CORS origins
CORS_ORIGINS = [origin.strip() for origin in settings.cors_origins.split(",")]
CORS_ORIGIN_REGEX = re.compile(r"https://.*\.vercel\.app") if settings.app_env == "production" else None


def is_allowed_origin(origin: str) -> bool:
    """Check if origin is allowed by explicit list or regex pattern."""
    if not origin:
        return False
    if origin in CORS_ORIGINS:
        return True
    if CORS_ORIGIN_REGEX and CORS_ORIGIN_REGEX.match(origin):
        return True
    return False


class CORSMiddleware(BaseHTTPMiddleware):
    """
    CORS middleware that answers OPTIONS preflight before routing.

    The frontend (drag-and-drop ranking, admin panel) lives on another origin.
    """

    async def dispatch(self, request: Request, call_next):
        origin = request.headers.get("origin", "")

        # Preflight: se responde sin pasar por los routers
        if request.method == "OPTIONS":
            if is_allowed_origin(origin):
                return Response(
                    status_code=200,
                    headers={
                        "Access-Control-Allow-Origin": origin,
                        "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
                        "Access-Control-Allow-Headers": "Content-Type, Accept, Origin, X-Requested-With",
                        "Access-Control-Max-Age": "86400",  # Cache preflight for 24 hours
                    }
                )
            logger.warning(f"Rejected preflight from origin {origin!r}")
            return Response(status_code=403, content="Origin not allowed")

        response = await call_next(request)

        if is_allowed_origin(origin):
            response.headers["Access-Control-Allow-Origin"] = origin

        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    await Database.connect()
    await create_indexes()
    yield
    await Database.disconnect()

# Creo la app
app = FastAPI(
    title="Survivor Rankings API",
    description="Predicciones del orden de eliminación y leaderboard de la temporada",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(CORSMiddleware)

# Agrego todos los routers de los controllers al app
app.include_router(health_router)
app.include_router(contestants_router)
app.include_router(rankings_router)
app.include_router(leaderboard_router)
app.include_router(game_router)
app.include_router(admin_router)


@app.get("/")
async def root():
    # Endpoint raíz, sirve para verificar que la API está levantada
    return {
        "name": "Survivor Rankings API",
        "version": "1.0.0",
        "docs": "/docs"  # Link a la documentación interactiva de Swagger
    }
