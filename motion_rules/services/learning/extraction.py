"""
Learned-rule extraction.

Each correction yields at most one rule. The rule payloads are a closed set
of variants and merge_rule() is the single place they are folded into the
ValidatedRules projection.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from motion_rules.core import get_logger
from motion_rules.models import CorrectionInput, IssueType, ValidatedRules

from .keys import element_key, transition_key

logger = get_logger(__name__, component="rule_extraction")


@dataclass(frozen=True)
class MaxScaleRule:
    """Largest scale an element of a given type and size can take without cropping"""
    key: str
    max_scale: float

    def describe(self) -> str:
        return f"max_scale[{self.key}]={self.max_scale}"


@dataclass(frozen=True)
class PreferredTransitionRule:
    key: str
    transition: str

    def describe(self) -> str:
        return f"preferred_transition[{self.key}]={self.transition}"


@dataclass(frozen=True)
class TimingRule:
    parameters: Dict[str, Any] = field(default_factory=dict)

    def describe(self) -> str:
        return "timing_preferences=" + ",".join(sorted(self.parameters))


@dataclass(frozen=True)
class ScaleIsolationRule:
    max_levels_with_scale: int = 1

    def describe(self) -> str:
        return f"enforce_scale_isolation(max_levels_with_scale={self.max_levels_with_scale})"


ExtractedRule = Union[MaxScaleRule, PreferredTransitionRule, TimingRule, ScaleIsolationRule]


def extract_rule(correction: CorrectionInput) -> Optional[ExtractedRule]:
    """
    Derive a reusable rule from a correction.

    Corrections missing the context their issue type needs are still valid
    audit records; they simply produce no rule.
    """
    original = correction.original_parameters
    corrected = correction.corrected_parameters

    if correction.issue_type == IssueType.CROP:
        context = correction.element_context
        scale = corrected.get("scale")
        if context and context.size and scale:
            key = element_key(context.type, context.size.width, context.size.height)
            return MaxScaleRule(key=key, max_scale=float(scale))

    elif correction.issue_type == IssueType.TRANSITION_TYPE:
        source = original.get("transition_from")
        target = original.get("transition_to")
        transition = corrected.get("transition_type")
        if source and target and transition:
            return PreferredTransitionRule(key=transition_key(source, target), transition=transition)

    elif correction.issue_type == IssueType.TIMING:
        if corrected.get("duration") or corrected.get("delay"):
            return TimingRule(parameters=dict(corrected))

    elif correction.issue_type == IssueType.COMPOUND_SCALING:
        return ScaleIsolationRule(max_levels_with_scale=1)

    logger.debug(
        "No rule extracted from correction",
        extra={"issue_type": correction.issue_type.value},
    )
    return None


def merge_rule(rules: ValidatedRules, rule: ExtractedRule) -> ValidatedRules:
    """Fold an extracted rule into the projection (in place) and return it"""
    if isinstance(rule, MaxScaleRule):
        rules.max_scales_by_element[rule.key] = rule.max_scale
    elif isinstance(rule, PreferredTransitionRule):
        rules.preferred_transitions[rule.key] = rule.transition
    elif isinstance(rule, TimingRule):
        rules.timing_preferences.update(rule.parameters)
    elif isinstance(rule, ScaleIsolationRule):
        rules.enforce_scale_isolation = True
        rules.max_levels_with_scale = rule.max_levels_with_scale
    else:
        raise TypeError(f"Unknown learned rule payload: {type(rule).__name__}")
    return rules
