"""
Types for retention analytics.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


RetentionCategory = Literal["healthy", "at_risk", "critical"]


@dataclass(frozen=True)
class RetentionSummary:
    """
    Item counts per retention category.
    """
    healthy: int
    at_risk: int
    critical: int

    @property
    def total(self) -> int:
        return self.healthy + self.at_risk + self.critical


@dataclass(frozen=True)
class SkipCostForecast:
    """
    Retention (percent) today and after skipping 1, 3 or 7 more days.
    """
    today: float
    skip1: float
    skip3: float
    skip7: float
