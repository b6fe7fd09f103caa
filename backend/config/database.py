from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from .settings import Settings, get_settings


def build_engine(settings: Settings) -> Engine:
    """Create the engine for ``settings.database_url``."""
    url = settings.database_url
    if url.startswith("sqlite"):
        # Request handlers run on FastAPI's threadpool
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(
        url,
        pool_size=settings.pool_size,
        max_overflow=settings.max_overflow,
        pool_pre_ping=settings.pool_pre_ping,
        pool_recycle=3600,
    )


engine = build_engine(get_settings())
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

from ..domains.shared.db_base import Base  # noqa: E402
