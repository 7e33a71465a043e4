"""
AFH Hunting Engine API - FastAPI application.

Provides endpoints for:
- Hunt creation (10-step hunting model) and hunt history
- Playbook generation and retrieval per sub-channel
- Health checks
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hunting_engine import __version__
from hunting_engine.api.common.errors import register_exception_handlers
from hunting_engine.api.hunting.routes import health, hunts, playbooks
from hunting_engine.config import API_HOST, API_PORT, get_cors_origins
from hunting_engine.infrastructure.storage.mongo.base_client import (
    close_mongo_client,
    get_mongo_client,
)
from hunting_engine.infrastructure.storage.mongo.hunting_db_beanie import init_beanie_hunting_db
from hunting_engine.logger import logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for FastAPI.

    Startup: Initialize MongoDB/Beanie
    Shutdown: Close the MongoDB client
    """
    logger.info("[api] Initializing MongoDB/Beanie...")
    try:
        await init_beanie_hunting_db(get_mongo_client())
        logger.info("[api] MongoDB/Beanie initialized")
    except Exception:
        logger.exception("[api] Failed to initialize MongoDB")
        raise

    yield

    logger.info("[api] Shutting down...")
    await close_mongo_client()
    logger.info("[api] MongoDB connection closed")


app = FastAPI(
    title="AFH Hunting Engine API",
    description="API for the 10-step hunting model business development platform",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(health.router)
app.include_router(hunts.router)
app.include_router(playbooks.router)


@app.get("/")
async def root():
    """Root endpoint with service information."""
    return {
        "service": "AFH Hunting Engine API",
        "version": __version__,
        "endpoints": {
            "health": "/health",
            "hunts": {
                "create": "POST /api/hunts",
                "list": "GET /api/hunts",
                "get": "GET /api/hunts/{hunt_id}",
                "delete": "DELETE /api/hunts/{hunt_id}",
            },
            "playbooks": {
                "generate": "POST /api/playbooks/{sub_channel}",
                "get": "GET /api/playbooks/{sub_channel}",
                "list": "GET /api/playbooks",
            },
            "docs": "/docs",
        },
    }


def main() -> None:
    import uvicorn

    uvicorn.run(app, host=API_HOST, port=API_PORT)


if __name__ == "__main__":
    main()
