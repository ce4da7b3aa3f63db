from __future__ import annotations

import logging
from typing import Any

from .models import (
    APPROVED_FLAVORS,
    SENSORY_FIELDS,
    BodyWeight,
    Intensity,
    Sweetness,
    WineRecord,
    WineType,
)

logger = logging.getLogger(__name__)

# Fallbacks used when the estimator returns something off-vocabulary.
_SENSORY_DEFAULTS: dict[str, tuple[type, str]] = {
    "acidity": (Intensity, Intensity.medium.value),
    "tannins": (Intensity, Intensity.low.value),
    "bodyWeight": (BodyWeight, BodyWeight.medium.value),
    "sweetnessLevel": (Sweetness, Sweetness.dry.value),
}


def _allowed(enum_cls: type, value: Any) -> bool:
    return value in [member.value for member in enum_cls]


def sanitize_wine(
    raw: dict[str, Any],
    approved_flavors: tuple[str, ...] = APPROVED_FLAVORS,
) -> WineRecord:
    """
    Coerce an AI-estimated wine dict into a valid WineRecord.

    Sensory fields outside their vocabulary fall back to defaults, flavors are
    restricted to the approved list and ``lowConfidence`` to sensory field
    names. Identity and price fields pass through untouched.
    """
    data = dict(raw)

    for field, (enum_cls, default) in _SENSORY_DEFAULTS.items():
        if not _allowed(enum_cls, data.get(field)):
            data[field] = default

    flavors = data.get("flavorProfile")
    data["flavorProfile"] = (
        [f for f in flavors if f in approved_flavors] if isinstance(flavors, list) else []
    )

    flagged = data.get("lowConfidence")
    data["lowConfidence"] = (
        [f for f in flagged if f in SENSORY_FIELDS] if isinstance(flagged, list) else []
    )

    if data.get("type") is not None and not _allowed(WineType, data["type"]):
        logger.debug("Dropping unknown wine type %r", data["type"])
        data["type"] = None

    return WineRecord.model_validate(data)


def sanitize_wines(
    raw_wines: list[dict[str, Any]],
    approved_flavors: tuple[str, ...] = APPROVED_FLAVORS,
) -> list[WineRecord]:
    return [sanitize_wine(w, approved_flavors) for w in raw_wines]
