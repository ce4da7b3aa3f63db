from __future__ import annotations

import logging
import re
import unicodedata
from typing import Any

from ..catalog.models import WineRecord
from .config import DEFAULT_RECONCILE_CONFIG, ReconcileConfig
from .models import AddedWine, ChangedWine, FieldChange, MenuDiff, RemovedWine, UnchangedWine

logger = logging.getLogger(__name__)

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]")


def _normalize(value: str | None) -> str:
    """Lowercase, fold accents, drop everything that is not a-z or 0-9."""
    decomposed = unicodedata.normalize("NFKD", value or "")
    ascii_only = decomposed.encode("ascii", "ignore").decode("ascii")
    return _NON_ALNUM_RE.sub("", ascii_only.lower())


def wine_key(wine: WineRecord) -> str:
    """
    Identity of a wine across two uploads of the same menu.

    Built from producer, varietal and type only, so two vintages of the same
    wine share a key. Wines without those fields (legacy ``name`` records)
    collapse onto a low-specificity key and may collide.
    """
    wine_type = wine.type.value if wine.type is not None else None
    return "|".join(_normalize(v) for v in (wine.producer, wine.varietal, wine_type))


def _as_text(value: Any) -> str:
    if not value:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return str(value)


def field_changes(
    existing: WineRecord,
    incoming: WineRecord,
    config: ReconcileConfig = DEFAULT_RECONCILE_CONFIG,
) -> list[FieldChange]:
    """Compare the configured fields as text; return the ones that differ."""
    old = existing.model_dump(mode="json", by_alias=True)
    new = incoming.model_dump(mode="json", by_alias=True)
    changes: list[FieldChange] = []
    for field in config.compare_fields:
        old_val = _as_text(old.get(field))
        new_val = _as_text(new.get(field))
        if old_val != new_val:
            changes.append(FieldChange(field=field, old_val=old_val, new_val=new_val))
    return changes


def reconcile_menus(
    existing: list[WineRecord],
    incoming: list[WineRecord],
    config: ReconcileConfig = DEFAULT_RECONCILE_CONFIG,
) -> MenuDiff:
    """
    Classify an incoming wine list against the stored one.

    Every incoming wine lands in exactly one of added / changed / unchanged.
    Every stored wine whose key no incoming wine shares lands in removed.
    Nothing is written; the caller decides which entries to apply.
    """
    existing_by_key: dict[str, WineRecord] = {}
    for wine in existing:
        existing_by_key[wine_key(wine)] = wine

    diff = MenuDiff()
    incoming_keys: set[str] = set()

    for wine in incoming:
        key = wine_key(wine)
        incoming_keys.add(key)
        match = existing_by_key.get(key)
        if match is None:
            diff.added.append(AddedWine(wine=wine))
            continue

        changes = field_changes(match, wine, config)
        if changes:
            diff.changed.append(
                ChangedWine(wine=wine, existing_wine=match, field_changes=changes)
            )
        else:
            diff.unchanged.append(UnchangedWine(wine=wine, existing_wine=match))

    for wine in existing:
        if wine_key(wine) not in incoming_keys:
            diff.removed.append(RemovedWine(wine=wine))

    summary = diff.summary()
    logger.info(
        "Menu diff: %d added, %d changed, %d unchanged, %d removed",
        summary.added, summary.changed, summary.unchanged, summary.removed,
    )
    return diff
