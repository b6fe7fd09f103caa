from sqlalchemy import Column, Integer, String
from backend.domains.shared.db_base import Base
from backend.domains.shared.timestamps import timestamp_columns

class Member(Base):
    __tablename__ = "members"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    nickname = Column(String, nullable=False)
    created_at, updated_at = timestamp_columns()
