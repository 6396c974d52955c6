"""
JSON Diff Backend - FastAPI Application Entry Point
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routers import compare, export, preferences
from services.config_manager import ConfigManager

logger = logging.getLogger("jsondiff")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup and shutdown logic"""
    config_manager = ConfigManager.get_instance()
    logging.basicConfig(
        level=config_manager.get("logLevel", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logger.info("[Backend] Starting JSON Diff Backend...")
    logger.info("[Backend] ConfigManager initialized (%s)", config_manager.config_file)

    yield
    logger.info("[Backend] Shutting down JSON Diff Backend...")


app = FastAPI(
    title="JSON Diff Backend",
    description="Structural and character-level JSON comparison with export",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware for the browser UI shell
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(compare.router, prefix="/api/compare", tags=["compare"])
app.include_router(export.router, prefix="/api/export", tags=["export"])
app.include_router(preferences.router, prefix="/api/preferences", tags=["preferences"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "jsondiff-backend"}


if __name__ == "__main__":
    import uvicorn

    server = ConfigManager.get_instance().get("server", {})
    uvicorn.run(app, host=server.get("host", "0.0.0.0"), port=server.get("port", 8000))
