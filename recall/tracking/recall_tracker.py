"""
In-memory recall counters per item.

Feeds presentation ordering (weakest items first, difficulty labels); the
scheduler never reads it.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from recall.scheduling.constants import AnswerQuality


EASY_ACCURACY = 0.90
MEDIUM_ACCURACY = 0.60
MASTERY_MIN_ATTEMPTS = 10
MASTERY_ACCURACY = 0.90


class DifficultyLabel(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass
class ItemStats:
    total_attempts: int = 0
    correct_count: int = 0
    consecutive_correct: int = 0
    best_streak: int = 0
    total_response_time: float = 0.0

    @property
    def accuracy(self) -> float:
        if self.total_attempts == 0:
            return 0.0
        return self.correct_count / self.total_attempts


@dataclass(frozen=True)
class RecallAttempt:
    item_id: str
    correct: bool
    response_time: float
    quality: AnswerQuality
    was_timed: bool = False
    timestamp: Optional[datetime] = None


class RecallTracker:
    """Accumulates raw attempt counters; all other views derive from them."""

    def __init__(self):
        self._stats: dict[str, ItemStats] = {}
        self._attempts: dict[str, list[RecallAttempt]] = {}

    def record_attempt(
        self,
        item_id: str,
        correct: bool,
        response_time: float = 0.0,
        quality: Optional[AnswerQuality] = None,
        was_timed: bool = False,
        timestamp: Optional[datetime] = None
    ) -> None:
        """
        Record one attempt.

        Totals only grow; a miss resets the current streak but not the best one.
        """
        if quality is None:
            quality = AnswerQuality.CORRECT if correct else AnswerQuality.WRONG

        stats = self._stats.setdefault(item_id, ItemStats())
        stats.total_attempts += 1
        stats.total_response_time += response_time

        if correct:
            stats.correct_count += 1
            stats.consecutive_correct += 1
            stats.best_streak = max(stats.best_streak, stats.consecutive_correct)
        else:
            stats.consecutive_correct = 0

        self._attempts.setdefault(item_id, []).append(
            RecallAttempt(
                item_id=item_id,
                correct=correct,
                response_time=response_time,
                quality=quality,
                was_timed=was_timed,
                timestamp=timestamp,
            )
        )

    def get_accuracy(self, item_id: str) -> float:
        stats = self._stats.get(item_id)
        return stats.accuracy if stats else 0.0

    def get_difficulty_label(self, item_id: str) -> Optional[DifficultyLabel]:
        """Easy at >= 90% accuracy, Medium at >= 60%, else Hard; None before any attempt."""
        stats = self._stats.get(item_id)
        if stats is None or stats.total_attempts == 0:
            return None
        if stats.accuracy >= EASY_ACCURACY:
            return DifficultyLabel.EASY
        if stats.accuracy >= MEDIUM_ACCURACY:
            return DifficultyLabel.MEDIUM
        return DifficultyLabel.HARD

    def get_average_response_time(self, item_id: str) -> float:
        stats = self._stats.get(item_id)
        if stats is None or stats.total_attempts == 0:
            return 0.0
        return stats.total_response_time / stats.total_attempts

    def get_streak(self, item_id: str) -> int:
        stats = self._stats.get(item_id)
        return stats.consecutive_correct if stats else 0

    def get_best_streak(self, item_id: str) -> int:
        stats = self._stats.get(item_id)
        return stats.best_streak if stats else 0

    def get_attempts(self, item_id: str) -> list[RecallAttempt]:
        return list(self._attempts.get(item_id, []))

    def get_stats(self, item_id: str) -> Optional[ItemStats]:
        stats = self._stats.get(item_id)
        if stats is None:
            return None
        return ItemStats(**vars(stats))

    def get_all_item_ids(self) -> list[str]:
        return list(self._stats)

    def get_weakest(self, n: int) -> list[str]:
        """
        The `n` lowest-accuracy items with at least one attempt.

        Ties keep first-seen order.
        """
        if n <= 0:
            return []
        attempted = [
            (item_id, stats) for item_id, stats in self._stats.items()
            if stats.total_attempts > 0
        ]
        attempted.sort(key=lambda pair: pair[1].accuracy)
        return [item_id for item_id, _ in attempted[:n]]

    def get_mastered_count(self) -> int:
        return sum(
            1 for stats in self._stats.values()
            if stats.total_attempts >= MASTERY_MIN_ATTEMPTS and stats.accuracy > MASTERY_ACCURACY
        )
