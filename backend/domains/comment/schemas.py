"""Comment domain schemas."""

from pydantic import BaseModel

from backend.domains.comment.models import Comment
from backend.domains.shared.schemas import KSTTimezoneBase


class CommentCreateRequest(BaseModel):
    board_id: int
    member_id: int
    content: str

class CommentUpdateRequest(BaseModel):
    member_id: int
    content: str

class CommentResponse(KSTTimezoneBase):
    id: int
    board_id: int
    member_id: int
    nickname: str
    content: str

    @classmethod
    def of(cls, comment: Comment) -> "CommentResponse":
        return cls(
            id=comment.id,
            board_id=comment.board_id,
            member_id=comment.member_id,
            nickname=comment.member.nickname,
            content=comment.content,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )
