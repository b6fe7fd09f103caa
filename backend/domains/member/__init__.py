from .models import Member
from .repository import MemberRepository, SqlAlchemyMemberRepository
from .exceptions import MemberNotFoundException

__all__ = [
    "Member",
    "MemberRepository",
    "SqlAlchemyMemberRepository",
    "MemberNotFoundException",
]
