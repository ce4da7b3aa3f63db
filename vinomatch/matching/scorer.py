from __future__ import annotations

import logging

from ..catalog.models import WineRecord
from .config import DEFAULT_MATCH_CONFIG, MatchConfig
from .models import MatchResponse, PreferenceVector, WineMatch, WineTypePreference

logger = logging.getLogger(__name__)

# Credit for a near-miss on a categorical dimension. Wine type is the one
# dimension that gets none.
PARTIAL_CREDIT = 0.5


def _categorical(preferred: object, actual: object) -> float:
    return 1.0 if preferred == actual else PARTIAL_CREDIT


def _type_matches(preferred: WineTypePreference, wine: WineRecord) -> bool:
    return wine.type is not None and wine.type.value == preferred.value


def _dimension_scores(preferences: PreferenceVector, wine: WineRecord) -> list[float]:
    """Return one score in [0, 1] per dimension the preferences specify."""
    scores: list[float] = []

    if preferences.acidity is not None:
        scores.append(_categorical(preferences.acidity, wine.acidity))

    if preferences.tannins is not None:
        scores.append(_categorical(preferences.tannins, wine.tannins))

    if preferences.body_weight is not None:
        scores.append(_categorical(preferences.body_weight, wine.body_weight))

    if preferences.flavor_notes:
        wine_flavors = set(wine.flavor_profile)
        matched = sum(1 for f in preferences.flavor_notes if f in wine_flavors)
        scores.append(matched / len(preferences.flavor_notes))

    if preferences.sweetness is not None:
        scores.append(_categorical(preferences.sweetness, wine.sweetness_level))

    if preferences.price_range is not None:
        low, high = preferences.price_range.min, preferences.price_range.max
        scores.append(1.0 if low <= wine.price <= high else PARTIAL_CREDIT)

    if preferences.wine_type != WineTypePreference.any:
        scores.append(1.0 if _type_matches(preferences.wine_type, wine) else 0.0)

    return scores


def score_wine(preferences: PreferenceVector, wine: WineRecord) -> float:
    """Mean of the per-dimension scores; 0.0 when no dimension is specified."""
    scores = _dimension_scores(preferences, wine)
    if not scores:
        return 0.0
    return sum(scores) / len(scores)


def rank_wines(
    preferences: PreferenceVector,
    catalog: list[WineRecord],
    config: MatchConfig = DEFAULT_MATCH_CONFIG,
) -> list[WineMatch]:
    """
    Score a catalog and return the best matches.

    Steps:
    - Hard-filter to the preferred wine type, if one is set.
    - Score every remaining wine and drop those below the threshold.
    - Sort by score, highest first, keeping catalog order among ties.
    - Truncate to the result cap.
    """
    if preferences.wine_type != WineTypePreference.any:
        candidates = [w for w in catalog if _type_matches(preferences.wine_type, w)]
    else:
        candidates = list(catalog)

    scored = [(wine, score_wine(preferences, wine)) for wine in candidates]
    kept = [pair for pair in scored if pair[1] >= config.threshold]
    kept.sort(key=lambda pair: pair[1], reverse=True)
    top = kept[: config.max_results]

    logger.debug(
        "Ranked %d wines (%d after type filter): %d above %.2f, returning %d",
        len(catalog), len(candidates), len(kept), config.threshold, len(top),
    )

    return [
        WineMatch.model_validate({**wine.model_dump(), "match_score": score})
        for wine, score in top
    ]


def find_matches(
    restaurant_id: str,
    preferences: PreferenceVector,
    catalog: list[WineRecord],
    config: MatchConfig = DEFAULT_MATCH_CONFIG,
) -> MatchResponse:
    matches = rank_wines(preferences, catalog, config)
    inconclusive = not preferences.specified_dimensions()
    if inconclusive:
        logger.info("No preference dimensions given for restaurant %s", restaurant_id)
    return MatchResponse(
        restaurant_id=restaurant_id,
        user_preferences=preferences,
        matches=matches,
        total_matches=len(matches),
        inconclusive=inconclusive,
    )
