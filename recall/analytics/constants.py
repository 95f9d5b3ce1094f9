"""
Constants for retention analytics.
"""

from __future__ import annotations

from typing import Final


HEALTHY_THRESHOLD: Final[float] = 0.7   # Retention at or above this is healthy
AT_RISK_THRESHOLD: Final[float] = 0.4   # Below healthy but at or above this is at risk

SKIP_DAYS: Final[dict[str, int]] = {
    "today": 0,
    "skip1": 1,
    "skip3": 3,
    "skip7": 7,
}

SNAPSHOT_COLUMNS: Final[list[str]] = [
    "item_id",
    "state",
    "stability",
    "difficulty",
    "elapsed_days",
    "retrievability",
    "category",
    "due",
    "is_due",
]
