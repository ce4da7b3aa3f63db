from __future__ import annotations

import logging
import uuid

from ..menu.models import MenuOperation, OperationAction
from .models import WineRecord

logger = logging.getLogger(__name__)

# restaurant_id -> wine_id -> wine, insertion ordered
_catalogs: dict[str, dict[str, WineRecord]] = {}


class UnknownWineError(KeyError):
    """Raised when an operation names a wine id the restaurant does not have."""


def get_wines(restaurant_id: str) -> list[WineRecord]:
    return list(_catalogs.get(restaurant_id, {}).values())


def add_wine(restaurant_id: str, wine: WineRecord) -> WineRecord:
    wine_id = uuid.uuid4().hex
    stored = wine.model_copy(update={"wine_id": wine_id})
    _catalogs.setdefault(restaurant_id, {})[wine_id] = stored
    return stored


def update_wine(restaurant_id: str, wine_id: str, wine: WineRecord) -> WineRecord:
    catalog = _catalogs.get(restaurant_id, {})
    if wine_id not in catalog:
        raise UnknownWineError(wine_id)
    stored = wine.model_copy(update={"wine_id": wine_id})
    catalog[wine_id] = stored
    return stored


def delete_wine(restaurant_id: str, wine_id: str) -> None:
    catalog = _catalogs.get(restaurant_id, {})
    if wine_id not in catalog:
        raise UnknownWineError(wine_id)
    del catalog[wine_id]


def apply_operations(restaurant_id: str, operations: list[MenuOperation]) -> int:
    """Apply reviewed menu operations; all ids are checked before anything is written."""
    live_ids = set(_catalogs.get(restaurant_id, {}))
    for op in operations:
        if op.action == OperationAction.add:
            continue
        if op.wine_id not in live_ids:
            raise UnknownWineError(op.wine_id)
        if op.action == OperationAction.delete:
            live_ids.discard(op.wine_id)

    for op in operations:
        if op.action == OperationAction.add:
            add_wine(restaurant_id, op.wine)
        elif op.action == OperationAction.update:
            update_wine(restaurant_id, op.wine_id, op.wine)
        else:
            delete_wine(restaurant_id, op.wine_id)

    logger.info(
        "Applied %d menu operations for restaurant %s", len(operations), restaurant_id,
    )
    return len(operations)


def clear_catalogs() -> None:
    _catalogs.clear()
