from __future__ import annotations

import math
from datetime import datetime, timedelta

import pytest

from recall.scheduling import (
    AnswerQuality,
    LegacyScheduleState,
    LegacyStrategy,
    initialize_legacy_schedule,
    is_legacy_due,
    update_legacy_schedule,
)


def test_initial_legacy_schedule(now: datetime) -> None:
    state = initialize_legacy_schedule("card-1", now)

    assert state.ease_factor == 2.5
    assert state.interval_days == 0
    assert state.repetitions == 0
    assert is_legacy_due(state, now)


def test_correct_streak_follows_sm2_intervals(now: datetime) -> None:
    state = initialize_legacy_schedule("card-1", now)

    first = update_legacy_schedule(state, AnswerQuality.CORRECT, now)
    assert (first.repetitions, first.interval_days) == (1, 1)
    assert first.next_review_at == now + timedelta(days=1)

    second = update_legacy_schedule(first, AnswerQuality.CORRECT, first.next_review_at)
    assert (second.repetitions, second.interval_days) == (2, 6)

    third = update_legacy_schedule(second, AnswerQuality.CORRECT, second.next_review_at)
    assert third.repetitions == 3
    assert third.interval_days == math.floor(6 * third.ease_factor + 0.5)
    assert third.interval_days > 6
    assert third.next_review_at == second.next_review_at + timedelta(days=third.interval_days)


def test_wrong_after_streak_resets(now: datetime) -> None:
    state = initialize_legacy_schedule("card-1", now)
    for _ in range(4):
        state = update_legacy_schedule(state, AnswerQuality.PERFECT, now)

    failed = update_legacy_schedule(state, AnswerQuality.WRONG, now)
    assert failed.repetitions == 0
    assert failed.interval_days == 1
    assert failed.ease_factor < state.ease_factor


def test_ease_factor_never_drops_below_floor(now: datetime) -> None:
    state = initialize_legacy_schedule("card-1", now)
    for _ in range(20):
        state = update_legacy_schedule(state, AnswerQuality.WRONG, now)
        assert state.ease_factor >= 1.3

    assert state.ease_factor == 1.3


def test_ease_factor_changes_by_grade(now: datetime) -> None:
    state = initialize_legacy_schedule("card-1", now)

    assert update_legacy_schedule(state, AnswerQuality.PERFECT, now).ease_factor > 2.5
    assert update_legacy_schedule(state, AnswerQuality.CORRECT, now).ease_factor == pytest.approx(2.5)
    assert update_legacy_schedule(state, AnswerQuality.PARTIAL, now).ease_factor < 2.5


def test_partial_counts_as_success(now: datetime) -> None:
    state = update_legacy_schedule(
        initialize_legacy_schedule("card-1", now), AnswerQuality.PARTIAL, now
    )
    assert state.repetitions == 1
    assert state.interval_days == 1


def test_is_legacy_due_boundaries(now: datetime) -> None:
    state = update_legacy_schedule(
        initialize_legacy_schedule("card-1", now), AnswerQuality.CORRECT, now
    )

    assert not is_legacy_due(state, now)
    assert not is_legacy_due(state, state.next_review_at - timedelta(seconds=1))
    assert is_legacy_due(state, state.next_review_at)


def test_legacy_strategy_matches_functions(now: datetime) -> None:
    strategy = LegacyStrategy()
    state = strategy.initialize("card-1", now)
    updated = strategy.update(state, AnswerQuality.CORRECT, now)

    assert updated == update_legacy_schedule(state, AnswerQuality.CORRECT, now)
    assert strategy.is_due(updated, updated.next_review_at)


@pytest.mark.parametrize(
    ("grade", "expected_ease"),
    [
        (AnswerQuality.PERFECT, 2.6),
        (AnswerQuality.CORRECT, 2.5),
        (AnswerQuality.PARTIAL, 2.36),
        (AnswerQuality.WRONG, 1.96),
        (AnswerQuality.TIMEOUT, 1.7),
    ],
)
def test_ease_after_one_grade(now: datetime, grade: AnswerQuality, expected_ease: float) -> None:
    state = update_legacy_schedule(initialize_legacy_schedule("card-1", now), grade, now)

    assert state.ease_factor == pytest.approx(expected_ease)


def test_timeout_resets_streak(now: datetime) -> None:
    state = initialize_legacy_schedule("card-1", now)
    for _ in range(3):
        state = update_legacy_schedule(state, AnswerQuality.CORRECT, now)

    timed_out = update_legacy_schedule(state, AnswerQuality.TIMEOUT, now)
    assert timed_out.repetitions == 0
    assert timed_out.interval_days == 1


def test_interval_rounds_half_up(now: datetime) -> None:
    # 6 days * 2.25 ease = 13.5 days
    state = LegacyScheduleState(
        item_id="card-1", ease_factor=2.25, interval_days=6, repetitions=2, next_review_at=now
    )
    updated = update_legacy_schedule(state, AnswerQuality.CORRECT, now)

    assert updated.ease_factor == pytest.approx(2.25)
    assert updated.interval_days == 14
