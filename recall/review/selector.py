"""
Retrieval Mode Selector

Weighted random choice of the presentation variant for an item.

Selection steps:
1. Restrict modes by lifecycle state (New/Relearning -> Standard only)
2. Drop optional modes that are not unlocked
3. Session variety: exclude a mode that filled the last 3 session slots
4. Recency penalty: weight * RECENCY_PENALTY ** (uses in the item's history)
5. Draw from cumulative partitions in canonical order

Randomness is injected as a callable returning floats in [0, 1).
"""

from __future__ import annotations

import logging
from typing import AbstractSet, Callable, Iterable, Optional, Sequence

from recall.review.history import DEFAULT_HISTORY_SIZE
from recall.review.modes import (
    ELIGIBLE_MODES,
    MODE_UNLOCK_KEYS,
    MODE_WEIGHTS,
    RECENCY_PENALTY,
    VARIETY_WINDOW,
    ModeWeight,
    RetrievalMode,
)
from recall.scheduling.constants import LifecycleState


logger = logging.getLogger(__name__)

RandomSource = Callable[[], float]


def eligible_weights(
    lifecycle_state: LifecycleState,
    unlocked: Optional[AbstractSet[str]] = None,
    weights: Sequence[ModeWeight] = MODE_WEIGHTS
) -> list[ModeWeight]:
    """
    Mode weights allowed for an item in `lifecycle_state`, in canonical order.

    When `unlocked` is given, modes with an unlock key outside it are dropped.
    """
    allowed = ELIGIBLE_MODES[LifecycleState(lifecycle_state)]
    pool = [w for w in weights if w.mode in allowed]
    if unlocked is not None:
        pool = [
            w for w in pool
            if w.mode not in MODE_UNLOCK_KEYS or MODE_UNLOCK_KEYS[w.mode] in unlocked
        ]
    return pool


def apply_session_variety(
    pool: list[ModeWeight],
    session_modes: Sequence[RetrievalMode]
) -> list[ModeWeight]:
    """
    Exclude the mode that filled the last VARIETY_WINDOW session slots.

    The exclusion is skipped when it would leave no mode at all.
    """
    if len(session_modes) < VARIETY_WINDOW:
        return pool

    trailing = set(session_modes[-VARIETY_WINDOW:])
    if len(trailing) != 1:
        return pool

    repeated = trailing.pop()
    filtered = [w for w in pool if w.mode != repeated]
    return filtered if filtered else pool


def effective_weights(
    pool: Sequence[ModeWeight],
    item_modes: Sequence[RetrievalMode]
) -> list[tuple[RetrievalMode, float]]:
    """Base weights discounted by how often each mode was recently used for the item."""
    return [
        (w.mode, w.base_weight * RECENCY_PENALTY ** item_modes.count(w.mode))
        for w in pool
    ]


def select_mode(
    lifecycle_state: LifecycleState,
    item_modes: Iterable[RetrievalMode],
    session_modes: Iterable[RetrievalMode],
    rng: RandomSource,
    unlocked: Optional[AbstractSet[str]] = None
) -> RetrievalMode:
    """
    Choose the retrieval mode for the next presentation of an item.

    Args:
        lifecycle_state: Item's lifecycle phase
        item_modes: Item's recent modes, oldest first
        session_modes: Session's recent modes across all items, oldest first
        rng: Uniform random source on [0, 1)
        unlocked: Optional set of unlock keys; None means every mode is available

    Returns:
        A mode from the restricted, variety-filtered eligible set
    """
    # Only the latest window counts, however long the caller's history is
    item_history = list(item_modes)[-DEFAULT_HISTORY_SIZE:]
    session_history = list(session_modes)

    pool = eligible_weights(lifecycle_state, unlocked)
    pool = apply_session_variety(pool, session_history)

    # Standard is the only mode left: no draw needed
    if len(pool) == 1:
        return pool[0].mode

    weighted = effective_weights(pool, item_history)
    total_weight = sum(weight for _, weight in weighted)
    roll = rng() * total_weight

    cumulative = 0.0
    for mode, weight in weighted:
        cumulative += weight
        if roll < cumulative:
            logger.debug("Selected %s (roll %.3f of %.3f)", mode.value, roll, total_weight)
            return mode

    # Floating-point edge: roll landed on the upper bound
    return weighted[-1][0]
