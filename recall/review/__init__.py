"""
Review package exports.
"""

from recall.review.history import DEFAULT_HISTORY_SIZE, ModeHistory, SessionModeLog
from recall.review.modes import (
    MODE_UNLOCK_KEYS,
    MODE_WEIGHTS,
    RECENCY_PENALTY,
    ModeWeight,
    RetrievalMode,
)
from recall.review.selector import select_mode

__all__ = [
    "DEFAULT_HISTORY_SIZE",
    "ModeHistory",
    "SessionModeLog",
    "MODE_UNLOCK_KEYS",
    "MODE_WEIGHTS",
    "RECENCY_PENALTY",
    "ModeWeight",
    "RetrievalMode",
    "select_mode",
]
