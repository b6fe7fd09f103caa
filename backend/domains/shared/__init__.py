from .uow import UnitOfWork, SqlAlchemyUoW
from .repository import BaseRepository, SqlAlchemyRepository
from .exceptions import CommunityException, NotFoundException, UnauthorizedException

__all__ = [
    # Unit of Work
    "UnitOfWork",
    "SqlAlchemyUoW",
    # Repository
    "BaseRepository",
    "SqlAlchemyRepository",
    # Exceptions
    "CommunityException",
    "NotFoundException",
    "UnauthorizedException",
]
