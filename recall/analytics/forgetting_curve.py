"""
Forgetting-curve analytics over schedule states.

Predicts retention decay and quantifies the cost of skipping reviews, using
the same power-law curve as the scheduler.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

import pandas as pd

from recall.analytics.constants import (
    AT_RISK_THRESHOLD,
    HEALTHY_THRESHOLD,
    SKIP_DAYS,
    SNAPSHOT_COLUMNS,
)
from recall.analytics.types import RetentionCategory, RetentionSummary, SkipCostForecast
from recall.scheduling import ScheduleState, calculate_retrievability, elapsed_days, is_due, retrievability


def retention_forecast(
    stability: float,
    days_since_review: float,
    days_to_forecast: int
) -> pd.Series:
    """
    Predicted retention for each of the next `days_to_forecast` days.

    The index is the number of days ahead (1..n).
    """
    if days_to_forecast <= 0:
        return pd.Series(dtype="float64", name="retention")

    days_ahead = range(1, days_to_forecast + 1)
    values = [
        calculate_retrievability(stability, max(0.0, days_since_review) + day)
        for day in days_ahead
    ]
    return pd.Series(values, index=pd.Index(days_ahead, name="days_ahead"), name="retention")


def categorize_retention(value: float) -> RetentionCategory:
    if value >= HEALTHY_THRESHOLD:
        return "healthy"
    if value >= AT_RISK_THRESHOLD:
        return "at_risk"
    return "critical"


def schedule_snapshot_df(states: Iterable[ScheduleState], now: datetime) -> pd.DataFrame:
    """
    One row per reviewed item with its current retrievability and category.

    Items that were never graded have no forgetting curve yet and are skipped.
    """
    rows = []
    for state in states:
        if state.last_review is None:
            continue
        r_value = retrievability(state, now)
        rows.append({
            "item_id": state.item_id,
            "state": state.state.value,
            "stability": state.stability,
            "difficulty": state.difficulty,
            "elapsed_days": elapsed_days(state, now),
            "retrievability": r_value,
            "category": categorize_retention(r_value),
            "due": state.due,
            "is_due": is_due(state, now),
        })

    if not rows:
        return pd.DataFrame(columns=SNAPSHOT_COLUMNS)
    return pd.DataFrame(rows, columns=SNAPSHOT_COLUMNS)


def retention_summary(states: Iterable[ScheduleState], now: datetime) -> RetentionSummary:
    """Count reviewed items per retention category."""
    snapshot = schedule_snapshot_df(states, now)
    if snapshot.empty:
        return RetentionSummary(healthy=0, at_risk=0, critical=0)

    counts = snapshot["category"].value_counts()
    return RetentionSummary(
        healthy=int(counts.get("healthy", 0)),
        at_risk=int(counts.get("at_risk", 0)),
        critical=int(counts.get("critical", 0)),
    )


def skip_cost_forecast(stability: float, days_since_review: float) -> SkipCostForecast:
    """Retention percentages if the next review happens today or 1, 3, 7 days later."""
    base = max(0.0, days_since_review)
    values = {
        label: calculate_retrievability(stability, base + skip) * 100.0
        for label, skip in SKIP_DAYS.items()
    }
    return SkipCostForecast(**values)
