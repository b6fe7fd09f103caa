"""
FastAPI application entry point.

Sets up logging, middleware and the consolidated API router.
"""

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load environment variables first
load_dotenv()

# Import configuration
from .config import get_settings, configure_logging

# Import consolidated API router
from .routes import router as api_router

# Get settings instance
settings = get_settings()
configure_logging(settings)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Community boards with cursor pagination and comments",
    version=settings.app_version,
    debug=settings.debug
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Ensure the schema exists on startup (run Alembic migrations on an empty database)
@app.on_event("startup")
def _ensure_database_initialized():
    from pathlib import Path
    from sqlalchemy import inspect
    from .config.database import engine
    inspector = inspect(engine)
    if not inspector.get_table_names():
        logger.info("Database empty. Running Alembic upgrade head...")
        from alembic.config import Config
        from alembic import command
        cfg = Config(str(Path(__file__).resolve().parent / "alembic.ini"))
        command.upgrade(cfg, "head")
        logger.info("Alembic migration completed.")

# Include routers
app.include_router(api_router)  # All API routes from consolidated router

# Root endpoint
@app.get("/")
def read_root():
    """Health check endpoint."""
    return {
        "message": "Community backend is running!",
        "version": settings.app_version,
        "environment": settings.environment
    }
