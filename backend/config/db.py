from sqlalchemy.orm import sessionmaker
from backend.config.database import SessionLocal

def get_sessionmaker() -> sessionmaker:
    """Get the sessionmaker for creating new sessions in UoW."""
    return SessionLocal
