from sqlalchemy import Column, Integer, ForeignKey, Text
from sqlalchemy.orm import relationship
from backend.domains.shared.db_base import Base
from backend.domains.shared.timestamps import timestamp_columns

class Comment(Base):
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, index=True)
    board_id = Column(Integer, ForeignKey("boards.id", ondelete="CASCADE"), nullable=False, index=True)
    member_id = Column(Integer, ForeignKey("members.id"), nullable=False)
    content = Column(Text, nullable=False)
    created_at, updated_at = timestamp_columns()

    board = relationship("Board", back_populates="comments")
    member = relationship("Member")

    def is_owned_by(self, member_id: int) -> bool:
        return self.member_id == member_id
