from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ReconcileConfig:
    # Factual fields the restaurant controls. AI-estimated sensory fields are
    # left out: re-running the estimator on the same menu gives different values.
    compare_fields: tuple[str, ...] = ("year", "region", "price", "type")


DEFAULT_RECONCILE_CONFIG = ReconcileConfig()
