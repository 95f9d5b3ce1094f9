"""Legacy SM-2 scheduling for items that predate the memory model."""

from __future__ import annotations

import logging
import math
from datetime import datetime, timedelta

from recall.scheduling.constants import (
    LEGACY_FIRST_INTERVAL,
    LEGACY_INITIAL_EASE,
    LEGACY_MIN_EASE,
    LEGACY_QUALITY,
    LEGACY_SECOND_INTERVAL,
    AnswerQuality,
)
from recall.scheduling.models import LegacyScheduleState


logger = logging.getLogger(__name__)


def initialize_legacy_schedule(item_id: str, now: datetime) -> LegacyScheduleState:
    return LegacyScheduleState(
        item_id=item_id,
        ease_factor=LEGACY_INITIAL_EASE,
        interval_days=0,
        repetitions=0,
        next_review_at=now,
    )


def update_legacy_schedule(
    state: LegacyScheduleState,
    grade: AnswerQuality,
    now: datetime
) -> LegacyScheduleState:
    """Return the next schedule using the classic SM-2 update."""
    quality = LEGACY_QUALITY[grade]

    ease_factor = state.ease_factor + 0.1 - (5 - quality) * (0.08 + (5 - quality) * 0.02)
    if ease_factor < LEGACY_MIN_EASE:
        ease_factor = LEGACY_MIN_EASE

    if quality >= 3:
        repetitions = state.repetitions + 1
        if repetitions == 1:
            interval = LEGACY_FIRST_INTERVAL
        elif repetitions == 2:
            interval = LEGACY_SECOND_INTERVAL
        else:
            interval = max(1, math.floor(state.interval_days * ease_factor + 0.5))  # half-up
    else:
        repetitions = 0
        interval = LEGACY_FIRST_INTERVAL

    logger.debug(
        "Legacy item %s graded %s: interval %d -> %d days, ease %.2f",
        state.item_id, grade.value, state.interval_days, interval, ease_factor,
    )

    return LegacyScheduleState(
        item_id=state.item_id,
        ease_factor=ease_factor,
        interval_days=interval,
        repetitions=repetitions,
        next_review_at=now + timedelta(days=interval),
    )


def is_legacy_due(state: LegacyScheduleState, now: datetime) -> bool:
    return now >= state.next_review_at
