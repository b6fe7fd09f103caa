from typing import Protocol, Optional, List
from sqlalchemy.orm import Session, joinedload, selectinload
from sqlalchemy import desc

from backend.domains.board.models import Board
from backend.domains.shared.repository import SqlAlchemyRepository


class BoardRepository(Protocol):
    """Protocol for Board repository operations."""
    
    def get(self, id: int) -> Optional[Board]:
        """Get a board by ID."""
        ...
    
    def get_with_details(self, id: int) -> Optional[Board]:
        """Get a board with its owner and images eagerly loaded."""
        ...
    
    def add(self, board: Board) -> Board:
        """Persist a new board and assign its ID."""
        ...
    
    def delete(self, board: Board) -> None:
        """Delete a board together with its images and comments."""
        ...
    
    def list_latest(self, limit: int) -> List[Board]:
        """First page of boards, newest first."""
        ...
    
    def list_latest_before(self, cursor_id: int, limit: int) -> List[Board]:
        """Boards with an ID below the cursor, newest first."""
        ...


class SqlAlchemyBoardRepository(SqlAlchemyRepository[Board]):
    """SQLAlchemy implementation of BoardRepository.

    Listing is keyset-paginated on the board ID. IDs grow with creation
    time, so boards inserted while a client is paging always land above any
    cursor already handed out and never shift the pages that follow.
    """

    def __init__(self, session: Session):
        """Initialize with a SQLAlchemy session."""
        super().__init__(session, Board)

    def _latest_query(self):
        return self.session.query(Board).options(
            joinedload(Board.member),
            selectinload(Board.images)
        ).order_by(
            desc(Board.created_at),
            desc(Board.id)
        )
    
    def get_with_details(self, id: int) -> Optional[Board]:
        """Get a board with its owner and images eagerly loaded."""
        return self.session.query(Board).options(
            joinedload(Board.member),
            selectinload(Board.images)
        ).filter(Board.id == id).first()
    
    def list_latest(self, limit: int) -> List[Board]:
        """First page of boards, newest first."""
        return self._latest_query().limit(limit).all()
    
    def list_latest_before(self, cursor_id: int, limit: int) -> List[Board]:
        """Boards with an ID below the cursor, newest first."""
        return self._latest_query().filter(
            Board.id < cursor_id
        ).limit(limit).all()
