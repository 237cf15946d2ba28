"""
Preference Applier - best-effort repair of a spec with learned rules.

The input spec is never mutated; apply() works on a deep copy and returns
both along with a log of every rule that fired. Applying the result again
fires nothing.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from motion_rules.core import get_logger
from motion_rules.models import AnimationSpec, Element, Scene, ValidatedRules
from motion_rules.services.learning import CorrectionStore, element_key, transition_key

logger = get_logger(__name__, component="preference_applier")

COMPOUND_SCALE_RISK = 1.1


@dataclass
class AppliedRule:
    """One change made to the spec, with before/after values"""
    rule_type: str  # "max_scale", "scale_isolation", "transition"
    rule_name: str
    applied_to: str
    original_value: Any
    new_value: Any
    reason: str


@dataclass
class ApplicationResult:
    original: AnimationSpec
    modified: AnimationSpec
    applied_rules: List[AppliedRule] = field(default_factory=list)
    prevented_issues: List[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.applied_rules)


@dataclass
class LearningStats:
    total_rules: int
    rules_by_type: Dict[str, int]
    confidence_distribution: Dict[str, int]
    most_useful_rule: str


class PreferenceApplier:
    """Rewrites out-of-bound parameters using the rules a CorrectionStore has learned."""

    def __init__(self, store: CorrectionStore):
        self.store = store

    def apply(self, spec: AnimationSpec) -> ApplicationResult:
        """
        Apply all learned rules to a copy of the spec.

        Per element: learned max scale clamp, then scale isolation, then
        timing preferences. Per scene: preferred exit transition toward the
        next scene.

        Args:
            spec: The assembled animation spec (left untouched)

        Returns:
            ApplicationResult with the original, the modified copy and the change log
        """
        rules = self.store.validated_rules()
        modified = spec.model_copy(deep=True)
        result = ApplicationResult(original=spec, modified=modified)

        for scene in modified.scenes:
            # Sibling checks look at the scene as it was before this pass
            original_scales = [element.scale for element in scene.elements]
            for index, element in enumerate(scene.elements):
                self._apply_max_scale(scene, element, rules, result)
                if rules.enforce_scale_isolation:
                    self._apply_scale_isolation(scene, index, element, original_scales, result)
                self._apply_timing_preferences(scene, element, rules, result)

        for scene, following in zip(modified.scenes, modified.scenes[1:]):
            self._apply_preferred_transition(scene, following, rules, result)

        logger.info(
            "Learned preferences applied",
            extra={
                "applied_rules": len(result.applied_rules),
                "prevented_issues": len(result.prevented_issues),
            },
        )
        return result

    def _apply_max_scale(
        self,
        scene: Scene,
        element: Element,
        rules: ValidatedRules,
        result: ApplicationResult,
    ) -> None:
        key = element_key(element.type, element.width, element.height)
        max_scale = rules.max_scales_by_element.get(key)
        if not max_scale or not element.scale or element.scale <= max_scale:
            return

        result.applied_rules.append(AppliedRule(
            rule_type="max_scale",
            rule_name=key,
            applied_to=f"{scene.name}/{element.type}",
            original_value=element.scale,
            new_value=max_scale,
            reason="Learned max safe scale from previous crop issue",
        ))
        element.scale = max_scale
        result.prevented_issues.append(f"Prevented crop in {scene.name}/{element.type}")

    def _apply_scale_isolation(
        self,
        scene: Scene,
        index: int,
        element: Element,
        original_scales: List[Optional[float]],
        result: ApplicationResult,
    ) -> None:
        sibling_has_scale = any(scale for i, scale in enumerate(original_scales) if i != index)
        if not (sibling_has_scale and element.has_non_identity_scale):
            return

        result.applied_rules.append(AppliedRule(
            rule_type="scale_isolation",
            rule_name="enforce_scale_isolation",
            applied_to=f"{scene.name}/{element.type}",
            original_value=element.scale,
            new_value=None,
            reason="Scale isolation - removed element-level scale to prevent compound scaling",
        ))
        element.scale = None
        result.prevented_issues.append(f"Prevented compound scaling in {scene.name}/{element.type}")

    def _apply_timing_preferences(
        self,
        scene: Scene,
        element: Element,
        rules: ValidatedRules,
        result: ApplicationResult,
    ) -> None:
        # Elements carry no timing properties yet, so learned timing has nothing to act on
        return None

    def _apply_preferred_transition(
        self,
        scene: Scene,
        following: Scene,
        rules: ValidatedRules,
        result: ApplicationResult,
    ) -> None:
        key = transition_key(scene.name, following.name)
        preferred = rules.preferred_transitions.get(key)
        if not preferred or preferred == scene.exit_type:
            return

        result.applied_rules.append(AppliedRule(
            rule_type="transition",
            rule_name=key,
            applied_to=scene.name,
            original_value=scene.exit_type,
            new_value=preferred,
            reason="Learned transition preference from user feedback",
        ))
        scene.exit_type = preferred

    def suggest_improvements(self, spec: AnimationSpec) -> List[str]:
        """Advisory notes for elements that match known problem patterns"""
        rules = self.store.validated_rules()
        suggestions: List[str] = []

        for scene in spec.scenes:
            for index, element in enumerate(scene.elements):
                max_scale = rules.max_scales_by_element.get(
                    element_key(element.type, element.width, element.height)
                )
                if max_scale and (not element.scale or element.scale > max_scale):
                    suggestions.append(
                        f"Element {element.type} in {scene.name}: "
                        f"Recommend max scale {max_scale}x based on past crop issues"
                    )

                if element.scale and element.scale > COMPOUND_SCALE_RISK:
                    siblings = scene.elements[:index] + scene.elements[index + 1:]
                    if any(sibling.has_scale for sibling in siblings):
                        suggestions.append(
                            f"Element {element.type} in {scene.name}: "
                            "Risk of compound scaling - consider removing element-level scale"
                        )

        return suggestions

    def learning_stats(self) -> LearningStats:
        document = self.store.load()

        rules_by_type: Dict[str, int] = {}
        confidence_distribution = {"high": 0, "medium": 0, "low": 0}
        for correction in document.corrections:
            issue = correction.issue_type.value
            rules_by_type[issue] = rules_by_type.get(issue, 0) + 1
            confidence_distribution[correction.confidence.value] += 1

        return LearningStats(
            total_rules=len(document.corrections),
            rules_by_type=rules_by_type,
            confidence_distribution=confidence_distribution,
            most_useful_rule=document.learning_metadata.most_reliable_rule,
        )
