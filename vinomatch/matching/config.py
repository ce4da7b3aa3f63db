from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class MatchConfig:
    threshold: float = float(os.getenv("MATCH_THRESHOLD", "0.6"))
    max_results: int = int(os.getenv("MATCH_MAX_RESULTS", "8"))


DEFAULT_MATCH_CONFIG = MatchConfig()
