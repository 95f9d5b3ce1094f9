"""
Retrieval modes and their selection weights.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

from recall.scheduling.constants import LifecycleState


class RetrievalMode(str, Enum):
    """Presentation variant for one showing of an item."""
    STANDARD = "standard"    # Prompt -> answer
    REVERSED = "reversed"    # Answer -> prompt
    TEACH = "teach"          # Explain the item as if teaching it
    CONNECT = "connect"      # Relate the item to another known item
    GENERATE = "generate"    # Produce the answer from a partial cue


@dataclass(frozen=True)
class ModeWeight:
    mode: RetrievalMode
    base_weight: float


# Canonical order: cumulative partitions are always built in this sequence
MODE_WEIGHTS: Final[tuple[ModeWeight, ...]] = (
    ModeWeight(RetrievalMode.STANDARD, 40.0),
    ModeWeight(RetrievalMode.REVERSED, 20.0),
    ModeWeight(RetrievalMode.TEACH, 15.0),
    ModeWeight(RetrievalMode.CONNECT, 10.0),
    ModeWeight(RetrievalMode.GENERATE, 15.0),
)

TOTAL_BASE_WEIGHT: Final[float] = 100.0

# Each use of a mode in the item's recent history multiplies its weight by this
RECENCY_PENALTY: Final[float] = 0.7

# Identical trailing session entries that trigger the variety exclusion
VARIETY_WINDOW: Final[int] = 3

ELIGIBLE_MODES: Final[dict[LifecycleState, frozenset[RetrievalMode]]] = {
    LifecycleState.NEW: frozenset({RetrievalMode.STANDARD}),
    LifecycleState.RELEARNING: frozenset({RetrievalMode.STANDARD}),
    LifecycleState.LEARNING: frozenset({
        RetrievalMode.STANDARD,
        RetrievalMode.REVERSED,
        RetrievalMode.GENERATE,
    }),
    LifecycleState.REVIEW: frozenset(RetrievalMode),
}

# Standard is always available and has no unlock key
MODE_UNLOCK_KEYS: Final[dict[RetrievalMode, str]] = {
    RetrievalMode.REVERSED: "reversed_mode",
    RetrievalMode.TEACH: "teach_mode",
    RetrievalMode.CONNECT: "connect_mode",
    RetrievalMode.GENERATE: "generate_mode",
}
