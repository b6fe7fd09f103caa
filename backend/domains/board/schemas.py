"""Board domain schemas."""

from pydantic import BaseModel, ConfigDict, field_validator
from typing import Optional, List
import datetime

from backend.domains.board.models import Board, CategoryBoard
from backend.domains.shared.schemas import KSTTimezoneBase, to_kst, to_utc


# --- Requests ---
class BoardCreateRequest(BaseModel):
    member_id: int
    title: str
    content: str
    category: CategoryBoard
    deadline: datetime.datetime
    images: List[str] = []  # Image storage paths, in display order

    @field_validator('deadline')
    @classmethod
    def deadline_in_utc(cls, v: datetime.datetime) -> datetime.datetime:
        return to_utc(v)

class BoardUpdateRequest(BaseModel):
    member_id: int
    title: Optional[str] = None
    content: Optional[str] = None
    category: Optional[CategoryBoard] = None
    deadline: Optional[datetime.datetime] = None
    images: Optional[List[str]] = None  # Replaces the whole image set when given

    @field_validator('deadline')
    @classmethod
    def deadline_in_utc(cls, v: Optional[datetime.datetime]) -> Optional[datetime.datetime]:
        if v is None:
            return None
        return to_utc(v)


# --- Responses ---
class BoardImageResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    path: str

class BoardCreateResponse(BaseModel):
    board_id: int

class BoardGetResponse(KSTTimezoneBase):
    id: int
    member_id: int
    nickname: str
    title: str
    content: str
    category: CategoryBoard
    deadline: datetime.datetime
    images: List[BoardImageResponse] = []

    @field_validator('deadline')
    @classmethod
    def deadline_in_kst(cls, v: datetime.datetime) -> datetime.datetime:
        # Stored values come back naive from SQLite; they are UTC
        return to_kst(v)

    @classmethod
    def of(cls, board: Board) -> "BoardGetResponse":
        return cls(
            id=board.id,
            member_id=board.member_id,
            nickname=board.member.nickname,
            title=board.title,
            content=board.content,
            category=board.category,
            deadline=board.deadline,
            images=[BoardImageResponse.model_validate(image) for image in board.images],
            created_at=board.created_at,
            updated_at=board.updated_at,
        )

class BoardSearchResponse(BaseModel):
    boards: List[BoardGetResponse]
    has_next: bool
    next_cursor_id: Optional[int] = None
