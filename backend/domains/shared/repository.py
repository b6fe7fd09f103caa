from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Optional, Type
from sqlalchemy.orm import Session


T = TypeVar('T')


class BaseRepository(ABC, Generic[T]):
    """Data access for one aggregate type, keyed by integer ID."""

    @abstractmethod
    def get(self, id: int) -> Optional[T]:
        ...

    @abstractmethod
    def add(self, entity: T) -> T:
        ...

    @abstractmethod
    def delete(self, entity: T) -> None:
        ...

    @abstractmethod
    def exists(self, id: int) -> bool:
        ...


class SqlAlchemyRepository(BaseRepository[T]):
    """Repository over a session owned by the caller's unit of work.

    Writes are flushed, never committed, so generated IDs are available
    immediately while the transaction boundary stays with the caller.
    """

    def __init__(self, session: Session, model_class: Type[T]):
        self.session = session
        self.model_class = model_class

    def get(self, id: int) -> Optional[T]:
        return self.session.get(self.model_class, id)

    def add(self, entity: T) -> T:
        self.session.add(entity)
        self.session.flush()
        return entity

    def delete(self, entity: T) -> None:
        """Delete an entity; dependent rows follow the model's cascade rules."""
        self.session.delete(entity)
        self.session.flush()

    def exists(self, id: int) -> bool:
        query = self.session.query(self.model_class).filter(self.model_class.id == id)
        return self.session.query(query.exists()).scalar()
