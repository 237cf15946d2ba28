"""Preference Applier - auto-repair of specs with learned rules."""

from .applier import (
    AppliedRule,
    ApplicationResult,
    LearningStats,
    PreferenceApplier,
)

__all__ = [
    "AppliedRule",
    "ApplicationResult",
    "LearningStats",
    "PreferenceApplier",
]
