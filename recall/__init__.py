"""
Recall - spaced-repetition scheduling core for Realm of Recall.

Subpackages:
- recall.scheduling: memory-model and legacy SM-2 schedulers
- recall.review: retrieval-mode selection
- recall.tracking: per-item recall counters
- recall.analytics: forgetting-curve forecasts
"""

__version__ = "0.3.1"
