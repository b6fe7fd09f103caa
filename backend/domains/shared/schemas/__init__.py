"""Shared schemas across domains."""

from .base import KSTTimezoneBase, UTC_ZONE, KST_ZONE, to_kst, to_utc

__all__ = [
    # Base schemas
    'KSTTimezoneBase',
    'UTC_ZONE',
    'KST_ZONE',
    'to_kst',
    'to_utc',
]
