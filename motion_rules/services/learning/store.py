"""
Correction Store - records user corrections and keeps the learned-rule projection.

Every mutation is read-modify-write of the whole document: load, apply the
change, save everything back. Writers inside one process are serialized by
a lock. Writers in separate processes are NOT coordinated and the last one
wins, so a host that shares one document between processes must serialize
access itself.
"""

from collections import Counter
from threading import RLock
from typing import Any, Dict, Optional, Union

from motion_rules.core import get_logger
from motion_rules.models import (
    Correction,
    CorrectionInput,
    LearningMetadata,
    PreferenceDocument,
    Size,
    ValidatedRules,
    utc_now_iso,
)

from .extraction import extract_rule, merge_rule
from .keys import element_key
from .repository import PreferenceRepository

logger = get_logger(__name__, component="correction_store")


def update_learning_metadata(document: PreferenceDocument) -> LearningMetadata:
    """Recompute aggregate statistics from the correction log"""
    meta = document.learning_metadata

    issue_counts = Counter(c.issue_type.value for c in document.corrections)
    # Counter keeps first-seen order, so ties go to the earliest issue type
    most_common = issue_counts.most_common(1)
    meta.most_common_issue = most_common[0][0] if most_common else "none"

    meta.success_rate = (
        1 - (meta.total_corrections / meta.total_generations)
        if meta.total_generations > 0
        else 0
    )
    return meta


class CorrectionStore:
    """Append-only correction log plus the ValidatedRules derived from it."""

    def __init__(self, repository: PreferenceRepository):
        self.repository = repository
        self._lock = RLock()

    def load(self) -> PreferenceDocument:
        return self.repository.load()

    def validated_rules(self) -> ValidatedRules:
        return self.repository.load().validated_rules

    def record_correction(self, correction: Union[CorrectionInput, Dict[str, Any]]) -> Correction:
        """
        Record a user correction and learn from it.

        Args:
            correction: Correction fields from the feedback-capture step

        Returns:
            The stored Correction with its assigned id and timestamp
        """
        if not isinstance(correction, CorrectionInput):
            correction = CorrectionInput.model_validate(correction)

        with self._lock:
            document = self.repository.load()

            rule = extract_rule(correction)
            learned_rule = correction.learned_rule or (rule.describe() if rule else "none")

            stored = Correction(
                **correction.model_dump(exclude={"learned_rule"}),
                id=f"correction-{len(document.corrections) + 1:03d}",
                timestamp=utc_now_iso(),
                learned_rule=learned_rule,
            )

            document.corrections.append(stored)
            document.learning_metadata.total_corrections += 1

            if rule:
                merge_rule(document.validated_rules, rule)

            update_learning_metadata(document)
            document.last_updated = utc_now_iso()
            self.repository.save(document)

        logger.info(
            "Correction recorded",
            extra={
                "correction_id": stored.id,
                "issue_type": stored.issue_type.value,
                "rule_extracted": rule is not None,
            },
        )
        return stored

    def record_generation(self) -> LearningMetadata:
        """Count one generation run; feeds the success rate."""
        with self._lock:
            document = self.repository.load()
            document.learning_metadata.total_generations += 1
            meta = update_learning_metadata(document)
            document.last_updated = utc_now_iso()
            self.repository.save(document)
        return meta

    def find_matching_rule(
        self,
        element_type: str,
        size: Union[Size, Dict[str, float]],
        rule_type: str,
    ) -> Optional[Any]:
        """Direct key lookup of a learned rule; no fuzzy matching."""
        if rule_type != "max_scale":
            return None
        if isinstance(size, dict):
            size = Size.model_validate(size)
        rules = self.validated_rules()
        return rules.max_scales_by_element.get(element_key(element_type, size.width, size.height))

    def get_learned_rules(self, kind: str) -> Dict[str, Any]:
        """All learned rules of one category"""
        rules = self.validated_rules()
        if kind == "max_scales":
            return dict(rules.max_scales_by_element)
        if kind == "transitions":
            return dict(rules.preferred_transitions)
        if kind == "timing":
            return dict(rules.timing_preferences)
        if kind == "scale_isolation":
            if not rules.enforce_scale_isolation:
                return {}
            return {
                "enforce": True,
                "max_levels_with_scale": rules.max_levels_with_scale,
            }
        return {}

    def reset(self) -> PreferenceDocument:
        """Discard all learning and persist a fresh document"""
        with self._lock:
            document = PreferenceDocument()
            self.repository.save(document)
        logger.warning("Correction store reset")
        return document
