"""
Rule Enforcer - one verdict over base and learned rules.

Base rules come from the static catalog and are always critical. Learned
rules come from the Correction Store and are critical, except dead space
between scenes which is only a warning. Recommendations never block.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Tuple

from motion_rules.core import get_logger
from motion_rules.models import AnimationSpec, ValidatedRules
from motion_rules.services.learning import CorrectionStore, element_key
from motion_rules.services.rules import VELOCITY_BLUR_THRESHOLD, evaluate_base_rules

logger = get_logger(__name__, component="rule_enforcer")

BASE_RULE_FIX = "See the base animation rules checklist"
INSTANT_ENTRIES = {"none", "instant"}

# exit_type of one scene -> (entry_transition the next scene should use, direction wording)
REPLACEMENT_ENTRIES: Dict[str, Tuple[str, str]] = {
    "wipe-up": ("slide-up-from-bottom", "enter from bottom (slide-up-from-bottom) to replace {prev} exiting upward"),
    "wipe-down": ("slide-down-from-top", "enter from top (slide-down-from-top) to replace {prev} exiting downward"),
    "wipe-left": ("wipe-right", "enter from right (wipe-right) to replace {prev} exiting left"),
    "wipe-right": ("wipe-left", "enter from left (wipe-left) to replace {prev} exiting right"),
}


class Severity(str, Enum):
    CRITICAL = "critical"  # blocks generation
    WARNING = "warning"  # surfaced, never blocks


@dataclass(frozen=True)
class Violation:
    """A single rule breach with a location and an actionable fix"""
    rule: str
    severity: Severity
    location: str
    issue: str
    fix: str

    @property
    def is_critical(self) -> bool:
        return self.severity == Severity.CRITICAL


@dataclass
class EnforcementResult:
    """Aggregated verdict of one enforcement run"""
    valid: bool
    violations: List[Violation] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)  # Non-blocking
    must_fix: List[str] = field(default_factory=list)  # One line per critical violation
    recommendations: List[str] = field(default_factory=list)  # Advisory only

    @property
    def critical_violations(self) -> List[Violation]:
        return [v for v in self.violations if v.is_critical]

    @property
    def critical_count(self) -> int:
        return len(self.critical_violations)


class RuleEnforcer:
    """Checks a spec against the rule catalog and the learned rules of a store."""

    def __init__(self, store: CorrectionStore):
        self.store = store

    def enforce_all(self, spec: AnimationSpec) -> EnforcementResult:
        """
        Enforce base rules and learned rules together.

        Args:
            spec: The assembled animation spec

        Returns:
            EnforcementResult; valid only when neither layer has a critical violation
        """
        base = evaluate_base_rules(spec)
        learned = self.enforce_learned_rules(spec)

        base_violations = [
            Violation(
                rule=rule_id,
                severity=Severity.CRITICAL,
                location="animation",
                issue=message,
                fix=BASE_RULE_FIX,
            )
            for rule_id, message in zip(base.failed_rules, base.violations)
        ]

        result = EnforcementResult(
            valid=base.valid and learned.valid,
            violations=base_violations + learned.violations,
            warnings=learned.warnings,
            must_fix=list(base.violations) + learned.must_fix,
            recommendations=learned.recommendations,
        )

        logger.info(
            "Spec enforced",
            extra={
                "valid": result.valid,
                "critical": result.critical_count,
                "warnings": len(result.warnings),
                "recommendations": len(result.recommendations),
            },
        )
        return result

    def enforce_learned_rules(self, spec: AnimationSpec) -> EnforcementResult:
        """Enforce only the rules learned from corrections."""
        rules = self.store.validated_rules()
        result = EnforcementResult(valid=True)

        self._check_entry_transitions(spec, result)
        self._check_motion_blur(spec, result)
        if rules.enforce_scale_isolation:
            self._check_scale_isolation(spec, result)
        self._check_max_scales(spec, rules, result)
        self._check_dead_space(spec, result)
        self._recommend_replacement_directions(spec, result)

        result.valid = result.critical_count == 0
        return result

    def can_generate(self, spec: AnimationSpec) -> bool:
        """Quick gate: True when the spec has no critical violation in either layer"""
        return self.enforce_all(spec).valid

    # ── Learned checks ───────────────────────────────────────────────────

    def _check_entry_transitions(self, spec: AnimationSpec, result: EnforcementResult) -> None:
        for scene in spec.scenes:
            if not scene.entry_transition or scene.entry_transition in INSTANT_ENTRIES:
                result.violations.append(Violation(
                    rule="every_scene_must_have_entry_transition",
                    severity=Severity.CRITICAL,
                    location=scene.name,
                    issue="Scene has no entry transition (will pop in)",
                    fix="Add entry_transition: 'slide-up', 'wipe-left' or 'scale-in'",
                ))
                result.must_fix.append(f"{scene.name}: Add entry transition")

    def _check_motion_blur(self, spec: AnimationSpec, result: EnforcementResult) -> None:
        for scene in spec.scenes:
            if scene.has_motion_blur:
                continue
            for element in scene.elements:
                if element.velocity and element.velocity > VELOCITY_BLUR_THRESHOLD:
                    result.violations.append(Violation(
                        rule="motion_blur_required_for_fast_movement",
                        severity=Severity.CRITICAL,
                        location=f"{scene.name}/{element.type}",
                        issue=f"Velocity {element.velocity}px/frame requires motion blur",
                        fix="Set has_motion_blur on the scene or apply calculate_motion_blur(velocity)",
                    ))
                    result.must_fix.append(
                        f"{scene.name}: Add motion blur (velocity: {element.velocity}px/frame)"
                    )

    def _check_scale_isolation(self, spec: AnimationSpec, result: EnforcementResult) -> None:
        for scene in spec.scenes:
            for element in scene.elements:
                if element.has_non_identity_scale:
                    result.violations.append(Violation(
                        rule="scale_isolation",
                        severity=Severity.CRITICAL,
                        location=f"{scene.name}/{element.type}",
                        issue=f"Element has scale {element.scale}x - risks compound scaling",
                        fix="Remove element scale, apply scale at scene/shot level only",
                    ))
                    result.must_fix.append(
                        f"{scene.name}/{element.type}: Remove scale (use shot-level scale only)"
                    )

    def _check_max_scales(
        self,
        spec: AnimationSpec,
        rules: ValidatedRules,
        result: EnforcementResult,
    ) -> None:
        max_scales = rules.max_scales_by_element
        if not max_scales:
            return
        for scene in spec.scenes:
            for element in scene.elements:
                learned_max = max_scales.get(element_key(element.type, element.width, element.height))
                if learned_max and element.scale and element.scale > learned_max:
                    result.violations.append(Violation(
                        rule="max_safe_scale",
                        severity=Severity.CRITICAL,
                        location=f"{scene.name}/{element.type}",
                        issue=f"Scale {element.scale}x exceeds learned max {learned_max}x (will crop)",
                        fix=f"Reduce scale to {learned_max}x or smaller",
                    ))
                    result.must_fix.append(f"{scene.name}/{element.type}: Cap scale at {learned_max}x")

    def _check_dead_space(self, spec: AnimationSpec, result: EnforcementResult) -> None:
        for current, following in zip(spec.scenes, spec.scenes[1:]):
            gap = following.start_frame - current.end_frame
            if gap > 0:
                result.violations.append(Violation(
                    rule="no_dead_space",
                    severity=Severity.WARNING,
                    location=f"{current.name} -> {following.name}",
                    issue=f"Gap of {gap} frames between scenes (dead space)",
                    fix=f"Start {following.name} at frame {current.end_frame} or earlier for transition overlap",
                ))
                result.warnings.append(f"{gap} frame gap between {current.name} and {following.name}")

    def _recommend_replacement_directions(self, spec: AnimationSpec, result: EnforcementResult) -> None:
        for current, following in zip(spec.scenes, spec.scenes[1:]):
            pairing = REPLACEMENT_ENTRIES.get(current.exit_type or "")
            if not pairing:
                continue
            expected_entry, wording = pairing
            if following.entry_transition != expected_entry:
                result.recommendations.append(
                    f"{following.name} should " + wording.format(prev=current.name)
                )
