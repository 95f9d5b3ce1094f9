"""
Scheduling - Spaced Repetition Engine

Decides when each item is next presented and how its memory state evolves
from each graded attempt.

This package implements:
- A memory model with a power-law forgetting curve: R = (1 + t / 9S)^-1
- Interval solving for a caller-chosen target retention
- An explicit New / Learning / Review / Relearning lifecycle
- A legacy SM-2 scheduler kept as an independent strategy

Quick start:
    from recall import scheduling

    state = scheduling.initialize_schedule("card-1", now)
    state = scheduling.update_schedule(state, scheduling.AnswerQuality.CORRECT, 0.9, now)
"""

# Core scheduler API
from recall.scheduling.scheduler import (
    effective_grade,
    elapsed_days,
    initialize_schedule,
    is_due,
    retrievability,
    update_schedule,
)

# Legacy SM-2 API
from recall.scheduling.legacy import (
    initialize_legacy_schedule,
    is_legacy_due,
    update_legacy_schedule,
)

# Strategies
from recall.scheduling.strategy import (
    LegacyStrategy,
    MemoryModelStrategy,
    ScheduleStrategy,
)

# Models
from recall.scheduling.models import (
    LegacyScheduleState,
    ScheduleState,
    TargetRetention,
)

# Enums and parameters
from recall.scheduling.constants import (
    AnswerQuality,
    ConfidenceLevel,
    LifecycleState,
    Outcome,
    DEFAULT_RETENTION,
    RETENTION_MIN,
    RETENTION_MAX,
    S_MIN,
    D_MIN,
    D_MAX,
)

# Memory model math (for analytics and advanced usage)
from recall.scheduling.memory_model import (
    calculate_retrievability,
    interval_for_retention,
    next_lifecycle_state,
)


__all__ = [
    # Core algorithm
    "initialize_schedule",
    "update_schedule",
    "is_due",
    "retrievability",
    "elapsed_days",
    "effective_grade",

    # Legacy
    "initialize_legacy_schedule",
    "update_legacy_schedule",
    "is_legacy_due",

    # Strategies
    "ScheduleStrategy",
    "MemoryModelStrategy",
    "LegacyStrategy",

    # Models
    "ScheduleState",
    "LegacyScheduleState",
    "TargetRetention",

    # Enums
    "AnswerQuality",
    "ConfidenceLevel",
    "LifecycleState",
    "Outcome",

    # Parameters
    "DEFAULT_RETENTION",
    "RETENTION_MIN",
    "RETENTION_MAX",
    "S_MIN",
    "D_MIN",
    "D_MAX",

    # Memory model
    "calculate_retrievability",
    "interval_for_retention",
    "next_lifecycle_state",
]
