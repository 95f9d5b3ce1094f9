"""
Memory Model - Forgetting Curve and State Updates

Pure functions behind the primary scheduler.

Key concepts:
- Stability (S): elapsed time (days) at which recall probability falls to 0.9
- Difficulty (D): inherent hardness of the item (1-10 scale)
- Retrievability (R): probability of successful recall after t days

Forgetting curve (power law):
    R(t, S) = (1 + t / (9 * S)) ^ -1

R decreases monotonically in t and increases monotonically in S.
"""

from __future__ import annotations

from recall.scheduling.constants import (
    ALPHA,
    BASE_GAIN,
    D_MAX,
    D_MIN,
    DECAY_FACTOR,
    DIFFICULTY_STEP,
    GRADUATION_REPETITIONS,
    INITIAL_STABILITY,
    K,
    LAPSE_FRACTION,
    MAX_INTERVAL_DAYS,
    MIN_INTERVAL_DAYS,
    S_MAX,
    S_MIN,
    SPACING_FLOOR,
    AnswerQuality,
    LifecycleState,
    Outcome,
)


def calculate_retrievability(stability: float, elapsed_days: float) -> float:
    """
    Recall probability after `elapsed_days` for an item with `stability`.

    Negative elapsed time (clock skew) is treated as zero. Without a
    positive stability there is no curve and recall is 0.
    """
    if stability <= 0:
        return 0.0
    if elapsed_days <= 0:
        return 1.0
    return 1.0 / (1.0 + elapsed_days / (DECAY_FACTOR * stability))


def interval_for_retention(stability: float, target_retention: float) -> float:
    """
    Solve R(t, S) = target_retention for t, in days.

    Inverting the curve gives t = 9 * S * (1 / R - 1): a lower target
    retention yields a longer interval. The result is clamped to
    [MIN_INTERVAL_DAYS, MAX_INTERVAL_DAYS].
    """
    interval = DECAY_FACTOR * stability * (1.0 / target_retention - 1.0)
    return max(MIN_INTERVAL_DAYS, min(MAX_INTERVAL_DAYS, interval))


def update_stability_on_success(
    stability: float,
    retrievability: float,
    difficulty: float,
    grade: AnswerQuality,
    is_new_item: bool = False
) -> float:
    """
    Stability after a successful recall (Partial, Correct or Perfect).

    Formula:
        ΔS = K * S * base_gain(grade) * f(D) * (SPACING_FLOOR + 1 - R)
        f(D) = 1 / (1 + ALPHA * (D - 1))

    - (1 - R) rewards well-spaced success
    - SPACING_FLOOR keeps ΔS positive for an immediate re-review
    - f(D) slows growth for hard items

    A new item takes the per-grade initial stability instead, never less
    than what it already had.
    """
    if not grade.is_success:
        raise ValueError("Use update_stability_on_failure for failed grades")

    if is_new_item:
        return min(S_MAX, max(stability, INITIAL_STABILITY[grade]))

    f_d = 1.0 / (1.0 + ALPHA * (difficulty - D_MIN))
    delta_s = K * stability * BASE_GAIN[grade] * f_d * (SPACING_FLOOR + 1.0 - retrievability)

    return min(S_MAX, stability + delta_s)


def update_stability_on_failure(stability: float) -> float:
    """
    Stability after a failed recall (Wrong or Timeout).

    The memory collapses to LAPSE_FRACTION of its prior value, floored at S_MIN.
    """
    return max(S_MIN, stability * LAPSE_FRACTION)


def update_difficulty(difficulty: float, grade: AnswerQuality) -> float:
    """
    Step difficulty toward D_MIN on success and toward D_MAX on failure.

    Returns a value clipped to [D_MIN, D_MAX].
    """
    new_difficulty = difficulty + DIFFICULTY_STEP[grade]
    return max(D_MIN, min(D_MAX, new_difficulty))


# ---- Lifecycle ----

# Every (state, outcome) pair has exactly one target. Learning successes
# stay in Learning here; graduation is applied by next_lifecycle_state.
_TRANSITIONS: dict[tuple[LifecycleState, Outcome], LifecycleState] = {
    (LifecycleState.NEW, Outcome.SUCCESS): LifecycleState.LEARNING,
    (LifecycleState.NEW, Outcome.FAILURE): LifecycleState.LEARNING,
    (LifecycleState.LEARNING, Outcome.SUCCESS): LifecycleState.LEARNING,
    (LifecycleState.LEARNING, Outcome.FAILURE): LifecycleState.LEARNING,
    (LifecycleState.REVIEW, Outcome.SUCCESS): LifecycleState.REVIEW,
    (LifecycleState.REVIEW, Outcome.FAILURE): LifecycleState.RELEARNING,
    (LifecycleState.RELEARNING, Outcome.SUCCESS): LifecycleState.REVIEW,
    (LifecycleState.RELEARNING, Outcome.FAILURE): LifecycleState.RELEARNING,
}


def outcome_of(grade: AnswerQuality) -> Outcome:
    return Outcome.SUCCESS if grade.is_success else Outcome.FAILURE


def next_lifecycle_state(
    state: LifecycleState,
    outcome: Outcome,
    repetitions: int
) -> LifecycleState:
    """
    Lifecycle phase after a graded attempt.

    Args:
        state: Phase before the attempt
        outcome: Success or failure
        repetitions: Repetition count after the attempt

    Returns:
        Phase after the attempt; Learning graduates to Review once
        `repetitions` reaches GRADUATION_REPETITIONS.
    """
    target = _TRANSITIONS[(state, outcome)]
    if (
        state == LifecycleState.LEARNING
        and outcome == Outcome.SUCCESS
        and repetitions >= GRADUATION_REPETITIONS
    ):
        return LifecycleState.REVIEW
    return target
