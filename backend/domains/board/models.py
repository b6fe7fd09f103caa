import enum
from typing import Iterable, Optional
from datetime import datetime

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text, Enum
from sqlalchemy.orm import relationship
from backend.domains.shared.db_base import Base
from backend.domains.shared.timestamps import timestamp_columns


class CategoryBoard(str, enum.Enum):
    VOTE = "VOTE"  # "buy it or not" poll on a single item
    CHOICE = "CHOICE"  # pick one out of several items


class SortType(str, enum.Enum):
    LATEST = "LATEST"


class Board(Base):
    __tablename__ = "boards"

    id = Column(Integer, primary_key=True, index=True)
    member_id = Column(Integer, ForeignKey("members.id"), nullable=False, index=True)
    title = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    category = Column(Enum(CategoryBoard, name="category_board"), nullable=False)
    deadline = Column(DateTime(timezone=True), nullable=False)
    created_at, updated_at = timestamp_columns()

    member = relationship("Member")
    images = relationship(
        "BoardImage",
        back_populates="board",
        cascade="all, delete-orphan",
        order_by="BoardImage.id",
    )
    comments = relationship("Comment", back_populates="board", cascade="all, delete-orphan")

    def is_owned_by(self, member_id: int) -> bool:
        return self.member_id == member_id

    def replace_images(self, paths: Iterable[str]) -> None:
        # Orphaned images are deleted on flush
        self.images = [BoardImage(path=path) for path in paths]

    def update(
        self,
        title: Optional[str] = None,
        content: Optional[str] = None,
        category: Optional[CategoryBoard] = None,
        deadline: Optional[datetime] = None,
        image_paths: Optional[Iterable[str]] = None,
    ) -> list:
        """Apply the given fields in place and return the names that changed."""
        changed = []
        if title is not None:
            self.title = title
            changed.append("title")
        if content is not None:
            self.content = content
            changed.append("content")
        if category is not None:
            self.category = category
            changed.append("category")
        if deadline is not None:
            self.deadline = deadline
            changed.append("deadline")
        if image_paths is not None:
            self.replace_images(image_paths)
            changed.append("images")
        return changed


class BoardImage(Base):
    __tablename__ = "board_images"

    id = Column(Integer, primary_key=True, index=True)
    board_id = Column(Integer, ForeignKey("boards.id", ondelete="CASCADE"), nullable=False, index=True)
    path = Column(String, nullable=False)
    created_at, updated_at = timestamp_columns()

    board = relationship("Board", back_populates="images")

    def update_path(self, path: str) -> None:
        self.path = path
