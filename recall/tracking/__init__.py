"""
Tracking package exports.
"""

from recall.tracking.recall_tracker import (
    DifficultyLabel,
    ItemStats,
    RecallAttempt,
    RecallTracker,
)

__all__ = [
    "DifficultyLabel",
    "ItemStats",
    "RecallAttempt",
    "RecallTracker",
]
