from typing import Protocol
from sqlalchemy.orm import Session


class UnitOfWork(Protocol):
    """Unit of Work protocol defining the interface for transactional operations."""
    session: Session
    
    def commit(self) -> None:
        """Commit the current transaction."""
        ...
    
    def rollback(self) -> None:
        """Rollback the current transaction."""
        ...
    
    def flush(self) -> None:
        """Flush pending changes to the database without committing."""
        ...


class SqlAlchemyUoW:
    """SQLAlchemy implementation of the Unit of Work pattern.

    One instance wraps exactly one transaction. A read-write unit commits when
    the block exits cleanly; a read-only unit always rolls back. Any exception
    rolls the transaction back and propagates unchanged.
    """
    
    def __init__(self, session_factory, read_only: bool = False):
        """
        Initialize the Unit of Work with a session factory.
        
        Args:
            session_factory: A callable that returns a new SQLAlchemy session
            read_only: Never commit; discard whatever the block did
        """
        self._session_factory = session_factory
        self.read_only = read_only
        self.session: Session = None
    
    def __enter__(self):
        """Enter the context manager and create a new session."""
        self.session = self._session_factory()
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit the context manager, committing or rolling back as needed."""
        try:
            if exc_type or self.read_only:
                self.rollback()
            else:
                try:
                    self.commit()
                except Exception:
                    self.rollback()
                    raise
        finally:
            if self.session:
                self.session.close()
    
    def commit(self):
        """Commit the current transaction."""
        if self.read_only:
            raise RuntimeError("Cannot commit a read-only unit of work")
        self.session.commit()
    
    def rollback(self):
        """Rollback the current transaction."""
        if self.session:
            self.session.rollback()
    
    def flush(self):
        """Flush pending changes to the database without committing."""
        self.session.flush()
