"""
Scheduling Constants and Parameters

All tunable parameters for the memory model and the legacy SM-2 scheduler
in one place. These are product-tuning values; the tests only pin the
monotonicity and reachability properties they must satisfy.
"""

from enum import Enum


# ---- Grades ----

class AnswerQuality(str, Enum):
    """Recall quality for one attempt, best to worst."""
    PERFECT = "perfect"
    CORRECT = "correct"
    PARTIAL = "partial"
    WRONG = "wrong"
    TIMEOUT = "timeout"

    @property
    def is_success(self) -> bool:
        return self in (AnswerQuality.PERFECT, AnswerQuality.CORRECT, AnswerQuality.PARTIAL)


class ConfidenceLevel(str, Enum):
    """Self-reported confidence attached to a correct answer."""
    GUESS = "guess"
    KNEW = "knew"
    INSTANT = "instant"


class LifecycleState(str, Enum):
    """Coarse memorization phase of an item."""
    NEW = "new"
    LEARNING = "learning"
    REVIEW = "review"
    RELEARNING = "relearning"


class Outcome(str, Enum):
    """Grade class used by the lifecycle transition table."""
    SUCCESS = "success"
    FAILURE = "failure"


# ---- Target Retention ----

DEFAULT_RETENTION = 0.90
RETENTION_MIN = 0.70
RETENTION_MAX = 0.97


# ---- Memory State Bounds ----

S_MIN = 0.1      # Minimum stability (days), also the stability of a new item
S_MAX = 36500.0  # Upper bound on stability (about 100 years)
D_MIN = 1.0      # Minimum difficulty
D_MAX = 10.0     # Maximum difficulty
D_INITIAL = 5.0  # Difficulty of a never-graded item


# ---- Forgetting Curve ----
# R(t) = (1 + t / (DECAY_FACTOR * S)) ^ -1, so R(S) = 0.9

DECAY_FACTOR = 9.0

MIN_INTERVAL_DAYS = 1.0 / 1440.0  # one minute
MAX_INTERVAL_DAYS = 36500.0


# ---- Stability Updates ----

# Stability assigned by the first successful grade of a new item
INITIAL_STABILITY = {
    AnswerQuality.PARTIAL: 0.4,
    AnswerQuality.CORRECT: 1.2,
    AnswerQuality.PERFECT: 3.5,
}

K = 3.0              # Stability learning rate
ALPHA = 0.15         # Difficulty penalty on stability gains
SPACING_FLOOR = 0.25 # Minimum spacing reward, so early successes still grow S

# Multiplier for stability increase on success
BASE_GAIN = {
    AnswerQuality.PARTIAL: 0.5,
    AnswerQuality.CORRECT: 1.0,
    AnswerQuality.PERFECT: 1.8,
}

LAPSE_FRACTION = 0.2  # Share of stability kept after a failure


# ---- Difficulty Updates ----

DIFFICULTY_STEP = {
    AnswerQuality.PERFECT: -0.60,
    AnswerQuality.CORRECT: -0.20,
    AnswerQuality.PARTIAL: -0.05,
    AnswerQuality.WRONG: +1.00,
    AnswerQuality.TIMEOUT: +1.00,
}


# ---- Lifecycle ----

GRADUATION_REPETITIONS = 2  # Consecutive successes needed to leave Learning


# ---- Legacy SM-2 ----

LEGACY_INITIAL_EASE = 2.5
LEGACY_MIN_EASE = 1.3
LEGACY_FIRST_INTERVAL = 1
LEGACY_SECOND_INTERVAL = 6

LEGACY_QUALITY = {
    AnswerQuality.TIMEOUT: 0,
    AnswerQuality.WRONG: 1,
    AnswerQuality.PARTIAL: 3,
    AnswerQuality.CORRECT: 4,
    AnswerQuality.PERFECT: 5,
}
