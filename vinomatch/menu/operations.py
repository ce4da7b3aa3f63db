from __future__ import annotations

import logging

from .models import MenuDiff, MenuOperation, OperationAction

logger = logging.getLogger(__name__)


def build_operations(diff: MenuDiff) -> list[MenuOperation]:
    """
    Turn the entries a reviewer left ``included`` into store operations.

    Order is adds, then updates, then deletes. Unchanged entries produce nothing.
    Updates and deletes need the stored wine's id; entries whose stored wine
    has none are skipped with a warning.
    """
    operations: list[MenuOperation] = []

    for entry in diff.added:
        if entry.included:
            operations.append(MenuOperation(action=OperationAction.add, wine=entry.wine))

    for entry in diff.changed:
        if not entry.included:
            continue
        if not entry.existing_wine.wine_id:
            logger.warning("Skipping update of %s: stored wine has no id",
                           entry.existing_wine.display_name)
            continue
        operations.append(MenuOperation(
            action=OperationAction.update,
            wine_id=entry.existing_wine.wine_id,
            wine=entry.wine,
        ))

    for entry in diff.removed:
        if not entry.included:
            continue
        if not entry.wine.wine_id:
            logger.warning("Skipping delete of %s: stored wine has no id",
                           entry.wine.display_name)
            continue
        operations.append(MenuOperation(
            action=OperationAction.delete,
            wine_id=entry.wine.wine_id,
        ))

    return operations
