from __future__ import annotations

from datetime import datetime, timezone

import pytest

from recall.scheduling import (
    AnswerQuality,
    LifecycleState,
    ScheduleState,
    initialize_schedule,
    update_schedule,
)


FIXED_NOW = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


def warm_to_review(item_id: str = "card-1", retention: float = 0.9) -> ScheduleState:
    """Grade Correct at each due date until the item reaches Review."""
    state = initialize_schedule(item_id, FIXED_NOW)
    at = FIXED_NOW
    for _ in range(10):
        state = update_schedule(state, AnswerQuality.CORRECT, retention, at)
        at = state.due
        if state.state == LifecycleState.REVIEW:
            break
    assert state.state == LifecycleState.REVIEW
    return state


@pytest.fixture
def review_state() -> ScheduleState:
    return warm_to_review()
