from .models import Board, BoardImage, CategoryBoard, SortType
from .exceptions import BoardNotFoundException, UnauthorizedBoardAccessException

__all__ = [
    # Models
    "Board",
    "BoardImage",
    "CategoryBoard",
    "SortType",
    # Exceptions
    "BoardNotFoundException",
    "UnauthorizedBoardAccessException",
]
