from typing import Protocol, Optional
from sqlalchemy.orm import Session

from backend.domains.member.models import Member
from backend.domains.shared.repository import SqlAlchemyRepository


class MemberRepository(Protocol):
    """Protocol for Member lookups needed by the community domains."""
    
    def get(self, id: int) -> Optional[Member]:
        """Get a member by ID."""
        ...
    
    def get_by_email(self, email: str) -> Optional[Member]:
        """Get a member by email address."""
        ...


class SqlAlchemyMemberRepository(SqlAlchemyRepository[Member]):
    """SQLAlchemy implementation of MemberRepository."""
    
    def __init__(self, session: Session):
        """Initialize with a SQLAlchemy session."""
        super().__init__(session, Member)
    
    def get_by_email(self, email: str) -> Optional[Member]:
        """Get a member by email address."""
        return self.session.query(Member).filter(
            Member.email == email
        ).first()
