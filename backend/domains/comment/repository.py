from typing import Protocol, Optional, List
from sqlalchemy.orm import Session, joinedload

from backend.domains.comment.models import Comment
from backend.domains.shared.repository import SqlAlchemyRepository


class CommentRepository(Protocol):
    """Protocol for Comment repository operations."""
    
    def get(self, id: int) -> Optional[Comment]:
        """Get a comment by ID."""
        ...
    
    def get_by_board(self, board_id: int) -> List[Comment]:
        """Get all comments for a board, oldest first."""
        ...


class SqlAlchemyCommentRepository(SqlAlchemyRepository[Comment]):
    """SQLAlchemy implementation of CommentRepository."""
    
    def __init__(self, session: Session):
        """Initialize with a SQLAlchemy session."""
        super().__init__(session, Comment)

    def get(self, id: int) -> Optional[Comment]:
        """Get a comment by ID with its author loaded."""
        return self.session.query(Comment).options(
            joinedload(Comment.member)
        ).filter(Comment.id == id).first()
    
    def get_by_board(self, board_id: int) -> List[Comment]:
        """Get all comments for a board, oldest first."""
        return self.session.query(Comment).filter(
            Comment.board_id == board_id
        ).options(
            joinedload(Comment.member)
        ).order_by(Comment.created_at, Comment.id).all()
