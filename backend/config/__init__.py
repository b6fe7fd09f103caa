"""
Configuration management module.
"""
from .settings import Settings, get_settings, reload_settings
from .database import engine, SessionLocal, Base
from .logging_config import configure_logging
from .dependencies import (
    get_sessionmaker,
    get_board_service,
    get_comment_service,
)

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    "reload_settings",
    # Database
    "engine",
    "SessionLocal",
    "Base",
    # Logging
    "configure_logging",
    # Dependencies
    "get_sessionmaker",
    "get_board_service",
    "get_comment_service",
]
