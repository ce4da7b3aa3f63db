"""
Wine catalog layer.

Responsibilities:
- Define the WineRecord schema and its sensory vocabularies.
- Sanitise AI-estimated wines into valid records.
- Hold per-restaurant wine lists in memory for the HTTP layer.
"""
from .models import (
    APPROVED_FLAVORS,
    SENSORY_FIELDS,
    BodyWeight,
    Intensity,
    Sweetness,
    WineRecord,
    WineType,
)
from .sanitize import sanitize_wine, sanitize_wines

__all__ = [
    "APPROVED_FLAVORS",
    "SENSORY_FIELDS",
    "BodyWeight",
    "Intensity",
    "Sweetness",
    "WineRecord",
    "WineType",
    "sanitize_wine",
    "sanitize_wines",
]
