"""
Analytics package exports.
"""

from recall.analytics.constants import AT_RISK_THRESHOLD, HEALTHY_THRESHOLD
from recall.analytics.forgetting_curve import (
    categorize_retention,
    retention_forecast,
    retention_summary,
    schedule_snapshot_df,
    skip_cost_forecast,
)
from recall.analytics.types import RetentionCategory, RetentionSummary, SkipCostForecast

__all__ = [
    "AT_RISK_THRESHOLD",
    "HEALTHY_THRESHOLD",
    "categorize_retention",
    "retention_forecast",
    "retention_summary",
    "schedule_snapshot_df",
    "skip_cost_forecast",
    "RetentionCategory",
    "RetentionSummary",
    "SkipCostForecast",
]
