"""
Configuration helpers for the recall engine.

Only the outer application wiring reads settings; the scheduling and
selection functions take every parameter explicitly.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from recall.review.history import DEFAULT_HISTORY_SIZE
from recall.scheduling.constants import DEFAULT_RETENTION
from recall.scheduling.models import TargetRetention


MAX_HISTORY_SIZE = 50
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


@dataclass(frozen=True)
class EngineSettings:
    """Engine settings loaded from environment variables."""

    desired_retention: TargetRetention
    mode_history_size: int
    log_level: str

    @classmethod
    def from_env(cls) -> EngineSettings:
        """Construct settings from the environment (and a .env file if present)."""
        load_dotenv()

        raw_retention = os.getenv("RECALL_DESIRED_RETENTION", str(DEFAULT_RETENTION))
        try:
            desired_retention = TargetRetention(float(raw_retention))
        except ValueError as exc:
            raise RuntimeError(
                f"RECALL_DESIRED_RETENTION is invalid ({raw_retention!r}): {exc}"
            ) from exc

        try:
            mode_history_size = int(
                os.getenv("RECALL_MODE_HISTORY_SIZE", str(DEFAULT_HISTORY_SIZE))
            )
        except ValueError as exc:
            raise RuntimeError("RECALL_MODE_HISTORY_SIZE must be an integer.") from exc
        if mode_history_size < 1 or mode_history_size > MAX_HISTORY_SIZE:
            raise RuntimeError(
                f"RECALL_MODE_HISTORY_SIZE must be between 1 and {MAX_HISTORY_SIZE}."
            )

        log_level = os.getenv("RECALL_LOG_LEVEL", "INFO").upper()

        return cls(
            desired_retention=desired_retention,
            mode_history_size=mode_history_size,
            log_level=log_level,
        )


def configure_logging(log_level: str) -> None:
    """Set up process-wide logging; called by the application, never by the engine."""
    logging.basicConfig(format=LOG_FORMAT, level=log_level)
