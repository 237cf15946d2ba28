"""Correction Store - corrections log, learned-rule extraction and persistence."""

from .keys import element_key, transition_key
from .extraction import (
    ExtractedRule,
    MaxScaleRule,
    PreferredTransitionRule,
    ScaleIsolationRule,
    TimingRule,
    extract_rule,
    merge_rule,
)
from .repository import (
    PreferenceRepository,
    InMemoryPreferenceRepository,
    FileBasedPreferenceRepository,
)
from .store import CorrectionStore, update_learning_metadata
from .report import generate_learning_report

__all__ = [
    "element_key",
    "transition_key",
    "ExtractedRule",
    "MaxScaleRule",
    "PreferredTransitionRule",
    "ScaleIsolationRule",
    "TimingRule",
    "extract_rule",
    "merge_rule",
    "PreferenceRepository",
    "InMemoryPreferenceRepository",
    "FileBasedPreferenceRepository",
    "CorrectionStore",
    "update_learning_metadata",
    "generate_learning_report",
]
