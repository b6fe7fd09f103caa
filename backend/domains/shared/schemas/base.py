"""Base schemas shared across domains."""

from pydantic import BaseModel, ConfigDict, field_serializer
import datetime
from typing import Optional

UTC_ZONE = datetime.timezone.utc
# Fixed offset; Korea has no daylight saving time
KST_ZONE = datetime.timezone(datetime.timedelta(hours=9), "KST")


def to_utc(dt: datetime.datetime) -> datetime.datetime:
    """Normalize to an aware UTC value; naive input is taken to be UTC already."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC_ZONE)
    return dt.astimezone(UTC_ZONE)


def to_kst(dt: datetime.datetime) -> datetime.datetime:
    """Interpret naive values as UTC (SQLite drops tzinfo) and convert to KST."""
    return to_utc(dt).astimezone(KST_ZONE)


# --- Base Schemas for Reusability ---
class KSTTimezoneBase(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    created_at: datetime.datetime
    updated_at: Optional[datetime.datetime] = None

    @field_serializer('created_at')
    def serialize_created_at(self, dt: datetime.datetime) -> datetime.datetime:
        return to_kst(dt)
    
    @field_serializer('updated_at')
    def serialize_updated_at(self, dt: Optional[datetime.datetime]) -> Optional[datetime.datetime]:
        if dt is None:
            return None
        return to_kst(dt)
