"""
Pydantic models for per-item schedule state.

Both models are frozen value objects: the schedulers return new instances
instead of mutating their input, and every field is a plain scalar or a
timestamp so records can cross any storage boundary unchanged.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from recall.scheduling.constants import (
    D_INITIAL,
    D_MAX,
    D_MIN,
    DEFAULT_RETENTION,
    LEGACY_INITIAL_EASE,
    LEGACY_MIN_EASE,
    RETENTION_MAX,
    RETENTION_MIN,
    S_MIN,
    LifecycleState,
)


@dataclass(frozen=True)
class TargetRetention:
    """
    Recall probability the scheduler aims for at the due date.

    Construction is the validation boundary: anything outside the
    supported operating range is rejected here, never inside the math.
    """
    value: float = DEFAULT_RETENTION

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise ValueError(f"Target retention must be a number, got {self.value!r}")
        if math.isnan(self.value):
            raise ValueError("Target retention must not be NaN")
        if not RETENTION_MIN <= self.value <= RETENTION_MAX:
            raise ValueError(
                f"Target retention {self.value} is outside "
                f"[{RETENTION_MIN}, {RETENTION_MAX}]"
            )

    @classmethod
    def coerce(cls, value: TargetRetention | float) -> TargetRetention:
        if isinstance(value, TargetRetention):
            return value
        return cls(value)


class ScheduleState(BaseModel):
    """Memory-model schedule for one learning item."""
    model_config = ConfigDict(frozen=True)

    item_id: str = Field(..., description="Identifier of the owning item")
    difficulty: float = Field(D_INITIAL, ge=D_MIN, le=D_MAX)
    stability: float = Field(S_MIN, gt=0, description="Forgetting-curve scale in days")
    repetitions: int = Field(0, ge=0, description="Consecutive successes in the current phase")
    lapses: int = Field(0, ge=0)
    state: LifecycleState = LifecycleState.NEW
    due: datetime
    last_review: Optional[datetime] = None

    @model_validator(mode="after")
    def _due_after_last_review(self) -> ScheduleState:
        if self.last_review is not None and self.due <= self.last_review:
            raise ValueError("due must be strictly after last_review")
        return self

    def to_dict(self) -> dict:
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> ScheduleState:
        return cls.model_validate(data)

    def to_json(self) -> str:
        return self.model_dump_json()

    @classmethod
    def from_json(cls, payload: str) -> ScheduleState:
        return cls.model_validate_json(payload)


class LegacyScheduleState(BaseModel):
    """SM-2 schedule kept for decks that predate the memory model."""
    model_config = ConfigDict(frozen=True)

    item_id: str
    ease_factor: float = Field(LEGACY_INITIAL_EASE, ge=LEGACY_MIN_EASE)
    interval_days: int = Field(0, ge=0)
    repetitions: int = Field(0, ge=0)
    next_review_at: datetime

    def to_dict(self) -> dict:
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> LegacyScheduleState:
        return cls.model_validate(data)

    def to_json(self) -> str:
        return self.model_dump_json()

    @classmethod
    def from_json(cls, payload: str) -> LegacyScheduleState:
        return cls.model_validate_json(payload)
