"""Created/updated timestamp columns shared by every community table.

Models embed the pair by unpacking ``timestamp_columns()`` in their class
body instead of inheriting from a common base entity.
"""

from datetime import datetime, timezone
from typing import Tuple

from sqlalchemy import Column, DateTime


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def timestamp_columns() -> Tuple[Column, Column]:
    """Return fresh ``(created_at, updated_at)`` columns for a model."""
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=True, onupdate=utcnow)
    return created_at, updated_at
