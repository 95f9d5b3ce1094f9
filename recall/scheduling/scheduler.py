"""
Scheduler - Primary Memory-Model Scheduling

Pure scheduling and state updates (no storage, no clock, no randomness).

Main workflow:
1. Caller loads the item's ScheduleState (or initializes a new one)
2. Caller presents the item and obtains a grade
3. update_schedule() returns the next state
4. Caller persists the returned state

"now" is always supplied by the caller so that replays of the same inputs
reproduce the same outputs.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from recall.scheduling import memory_model
from recall.scheduling.constants import (
    D_INITIAL,
    S_MIN,
    AnswerQuality,
    ConfidenceLevel,
    LifecycleState,
    Outcome,
)
from recall.scheduling.models import ScheduleState, TargetRetention


logger = logging.getLogger(__name__)

_CONFIDENCE_GRADE = {
    ConfidenceLevel.GUESS: AnswerQuality.PARTIAL,
    ConfidenceLevel.KNEW: AnswerQuality.CORRECT,
    ConfidenceLevel.INSTANT: AnswerQuality.PERFECT,
}


def effective_grade(
    quality: AnswerQuality,
    confidence: ConfidenceLevel | None = None
) -> AnswerQuality:
    """
    Combine an answer grade with the learner's confidence.

    Failures and partial answers are never upgraded; a correct answer is
    re-graded by how sure the learner was.
    """
    if not quality.is_success or quality == AnswerQuality.PARTIAL:
        return quality
    if confidence is None:
        return quality
    return _CONFIDENCE_GRADE[confidence]


def initialize_schedule(item_id: str, now: datetime) -> ScheduleState:
    """
    Schedule for an item that has never been graded.

    The item starts in New with minimal stability and is due immediately.
    """
    return ScheduleState(
        item_id=item_id,
        difficulty=D_INITIAL,
        stability=S_MIN,
        repetitions=0,
        lapses=0,
        state=LifecycleState.NEW,
        due=now,
        last_review=None,
    )


def elapsed_days(state: ScheduleState, now: datetime) -> float:
    """Days between the last graded attempt and `now` (0 for new items)."""
    if state.last_review is None:
        return 0.0
    return (now - state.last_review).total_seconds() / 86400.0


def retrievability(state: ScheduleState, now: datetime) -> float:
    """Current recall probability; new items report 1.0."""
    if state.state == LifecycleState.NEW:
        return 1.0
    return memory_model.calculate_retrievability(state.stability, elapsed_days(state, now))


def update_schedule(
    state: ScheduleState,
    grade: AnswerQuality,
    target_retention: TargetRetention | float,
    now: datetime
) -> ScheduleState:
    """
    Apply one graded attempt and return the next schedule.

    Args:
        state: Current schedule (use initialize_schedule for a fresh item)
        grade: Recall quality of this attempt
        target_retention: Recall probability to hold at the due date
        now: Time of the attempt; becomes last_review

    Returns:
        New ScheduleState with due strictly after last_review

    Raises:
        ValueError: if a float target_retention is outside the supported range
    """
    retention = TargetRetention.coerce(target_retention)
    outcome = memory_model.outcome_of(grade)
    is_new_item = state.state == LifecycleState.NEW

    if outcome == Outcome.SUCCESS:
        r_before = retrievability(state, now)
        stability = memory_model.update_stability_on_success(
            state.stability, r_before, state.difficulty, grade, is_new_item
        )
        repetitions = state.repetitions + 1
        lapses = state.lapses
    else:
        stability = memory_model.update_stability_on_failure(state.stability)
        # A lapse from Review keeps its repetition history
        repetitions = state.repetitions if state.state == LifecycleState.REVIEW else 0
        lapses = state.lapses + 1

    difficulty = memory_model.update_difficulty(state.difficulty, grade)
    lifecycle = memory_model.next_lifecycle_state(state.state, outcome, repetitions)

    interval = memory_model.interval_for_retention(stability, retention.value)
    due = now + timedelta(days=interval)

    logger.debug(
        "Item %s graded %s: %s -> %s, S %.3f -> %.3f, next in %.2f days",
        state.item_id, grade.value, state.state.value, lifecycle.value,
        state.stability, stability, interval,
    )

    return ScheduleState(
        item_id=state.item_id,
        difficulty=difficulty,
        stability=stability,
        repetitions=repetitions,
        lapses=lapses,
        state=lifecycle,
        due=due,
        last_review=now,
    )


def is_due(state: ScheduleState, now: datetime) -> bool:
    return now >= state.due
