from __future__ import annotations

import json
from datetime import datetime, timedelta

import pytest
from pydantic import ValidationError

from recall.review import RetrievalMode
from recall.scheduling import (
    AnswerQuality,
    LegacyScheduleState,
    LifecycleState,
    ScheduleState,
    initialize_legacy_schedule,
    initialize_schedule,
    update_legacy_schedule,
    update_schedule,
)


def test_enum_tokens_are_fixed_lowercase() -> None:
    assert [q.value for q in AnswerQuality] == ["perfect", "correct", "partial", "wrong", "timeout"]
    assert [m.value for m in RetrievalMode] == ["standard", "reversed", "teach", "connect", "generate"]
    assert AnswerQuality("timeout") is AnswerQuality.TIMEOUT
    assert RetrievalMode("teach") is RetrievalMode.TEACH

    with pytest.raises(ValueError):
        AnswerQuality("meh")


def test_schedule_state_json_round_trip_gives_identical_updates(review_state: ScheduleState) -> None:
    restored = ScheduleState.from_json(review_state.to_json())
    assert restored == review_state

    at = review_state.due + timedelta(hours=7, microseconds=123)
    for grade in AnswerQuality:
        baseline = update_schedule(review_state, grade, 0.87, at)
        replayed = update_schedule(restored, grade, 0.87, at)
        assert replayed.to_json() == baseline.to_json()
        assert replayed.stability == baseline.stability
        assert replayed.difficulty == baseline.difficulty


def test_schedule_state_dict_is_plain_data(now: datetime) -> None:
    state = update_schedule(initialize_schedule("card-1", now), AnswerQuality.CORRECT, 0.9, now)
    data = state.to_dict()

    assert data["state"] == "learning"
    assert isinstance(data["due"], str)
    assert json.loads(json.dumps(data)) == data
    assert ScheduleState.from_dict(data) == state


def test_new_state_round_trips_without_last_review(now: datetime) -> None:
    state = initialize_schedule("card-1", now)
    restored = ScheduleState.from_dict(state.to_dict())

    assert restored.last_review is None
    assert restored.state == LifecycleState.NEW


def test_legacy_state_round_trip(now: datetime) -> None:
    state = initialize_legacy_schedule("card-1", now)
    for grade in (AnswerQuality.CORRECT, AnswerQuality.PERFECT, AnswerQuality.PARTIAL):
        state = update_legacy_schedule(state, grade, now)

    restored = LegacyScheduleState.from_json(state.to_json())
    assert restored == state

    baseline = update_legacy_schedule(state, AnswerQuality.CORRECT, now)
    replayed = update_legacy_schedule(restored, AnswerQuality.CORRECT, now)
    assert replayed.to_json() == baseline.to_json()


@pytest.mark.parametrize(
    "override",
    [
        {"stability": 0.0},
        {"stability": -1.0},
        {"difficulty": 11.0},
        {"state": "mastered"},
        {"repetitions": -1},
    ],
)
def test_malformed_payload_is_rejected(review_state: ScheduleState, override: dict) -> None:
    data = review_state.to_dict() | override
    with pytest.raises(ValidationError):
        ScheduleState.from_dict(data)


def test_due_must_follow_last_review(review_state: ScheduleState) -> None:
    data = review_state.to_dict()
    data["due"] = data["last_review"]
    with pytest.raises(ValidationError):
        ScheduleState.from_dict(data)
