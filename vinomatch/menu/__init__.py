"""
Menu reconciliation.

Responsibilities:
- Match an incoming wine list against the stored one by a fuzzy identity key.
- Classify each wine as added, changed, unchanged or removed.
- Describe changed wines field by field, ignoring AI-estimated sensory fields.
- Turn the entries a reviewer keeps into add / update / delete operations.
"""
from .config import DEFAULT_RECONCILE_CONFIG, ReconcileConfig
from .models import (
    AddedWine,
    ChangedWine,
    DiffEntry,
    DiffSummary,
    FieldChange,
    MenuDiff,
    MenuOperation,
    OperationAction,
    RemovedWine,
    UnchangedWine,
)
from .operations import build_operations
from .reconcile import field_changes, reconcile_menus, wine_key

__all__ = [
    "DEFAULT_RECONCILE_CONFIG",
    "AddedWine",
    "ChangedWine",
    "DiffEntry",
    "DiffSummary",
    "FieldChange",
    "MenuDiff",
    "MenuOperation",
    "OperationAction",
    "ReconcileConfig",
    "RemovedWine",
    "UnchangedWine",
    "build_operations",
    "field_changes",
    "reconcile_menus",
    "wine_key",
]
