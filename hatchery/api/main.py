"""
FastAPI main application.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .dependencies import get_game_tables
from .routes import eggs, battle, fusion, data

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Broken tables raise ConfigurationError here and stop the server
    tables = get_game_tables()
    logger.info("Engine ready with egg types: %s", ", ".join(tables.eggs))
    yield


app = FastAPI(
    title="Hatchery Engine API",
    description="Egg hatching, battle and fusion engine for the creature game",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(eggs.router, prefix="/api/eggs", tags=["Eggs"])
app.include_router(battle.router, prefix="/api/battle", tags=["Battle"])
app.include_router(fusion.router, prefix="/api/fusion", tags=["Fusion"])
app.include_router(data.router, prefix="/api/data", tags=["Data"])


@app.get("/")
async def root():
    """API status check."""
    return {
        "status": "ok",
        "name": "Hatchery Engine API",
        "version": "1.0.0",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
