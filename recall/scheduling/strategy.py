"""
Scheduler strategies sharing one initialize/update/is_due contract.

The caller picks a strategy per deck; the primary memory model and the
legacy SM-2 model never share code paths.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, TypeVar

from recall.scheduling import legacy, scheduler
from recall.scheduling.constants import AnswerQuality
from recall.scheduling.models import (
    LegacyScheduleState,
    ScheduleState,
    TargetRetention,
)


StateT = TypeVar("StateT")


class ScheduleStrategy(Protocol[StateT]):
    def initialize(self, item_id: str, now: datetime) -> StateT: ...

    def update(self, state: StateT, grade: AnswerQuality, now: datetime) -> StateT: ...

    def is_due(self, state: StateT, now: datetime) -> bool: ...


class MemoryModelStrategy:
    """Primary scheduler bound to one target retention."""

    def __init__(self, target_retention: TargetRetention | float = TargetRetention()):
        self.target_retention = TargetRetention.coerce(target_retention)

    def initialize(self, item_id: str, now: datetime) -> ScheduleState:
        return scheduler.initialize_schedule(item_id, now)

    def update(self, state: ScheduleState, grade: AnswerQuality, now: datetime) -> ScheduleState:
        return scheduler.update_schedule(state, grade, self.target_retention, now)

    def is_due(self, state: ScheduleState, now: datetime) -> bool:
        return scheduler.is_due(state, now)


class LegacyStrategy:
    """SM-2 scheduler; has no retention parameter."""

    def initialize(self, item_id: str, now: datetime) -> LegacyScheduleState:
        return legacy.initialize_legacy_schedule(item_id, now)

    def update(
        self,
        state: LegacyScheduleState,
        grade: AnswerQuality,
        now: datetime
    ) -> LegacyScheduleState:
        return legacy.update_legacy_schedule(state, grade, now)

    def is_due(self, state: LegacyScheduleState, now: datetime) -> bool:
        return legacy.is_legacy_due(state, now)
