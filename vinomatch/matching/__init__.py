"""
Wine/preference matching.

Responsibilities:
- Accept a diner's preference vector (type, structure, sweetness, flavors, price).
- Score each wine with per-dimension partial credit.
- Hard-filter by wine type, apply the acceptance threshold and result cap.
- Return ranked matches ready for API serialisation.
"""
from .config import DEFAULT_MATCH_CONFIG, MatchConfig
from .models import MatchRequest, MatchResponse, PreferenceVector, PriceRange, WineMatch
from .scorer import find_matches, rank_wines, score_wine

__all__ = [
    "DEFAULT_MATCH_CONFIG",
    "MatchConfig",
    "MatchRequest",
    "MatchResponse",
    "PreferenceVector",
    "PriceRange",
    "WineMatch",
    "find_matches",
    "rank_wines",
    "score_wine",
]
