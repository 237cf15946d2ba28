"""
Base Animation Rules - always enforced

Professional standards that apply to every animation regardless of what has
been learned from user corrections. The table is data; evaluate_base_rules()
is the only evaluation entry point. Every failure is critical.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from motion_rules.core import get_logger
from motion_rules.models import AnimationSpec

from .duration import (
    DEFAULT_FRAMES_PER_SCENE,
    FRAMES_PER_TRANSITION,
    MAX_FRAMES_PER_SCENE,
    MIN_FRAMES_PER_SCENE,
    calculate_scene_based_duration,
)

logger = get_logger(__name__, component="rule_catalog")

BASE_RULES_VERSION = "1.0.0"

NO_OVERLAP_COMPONENT = "NoOverlapScene"
VELOCITY_BLUR_THRESHOLD = 3  # units per frame

BASE_ANIMATION_RULES = {
    "version": BASE_RULES_VERSION,
    "typography": {
        "default_font_stack": (
            "'-apple-system', 'BlinkMacSystemFont', 'Segoe UI', 'Roboto', 'Oxygen', "
            "'Ubuntu', 'Cantarell', 'Fira Sans', 'Droid Sans', 'Helvetica Neue', sans-serif"
        ),
        "never_use_serif_unless_requested": True,
        "min_font_sizes_1920x1080": {"headline": 48, "body": 24, "caption": 18},
        "letter_spacing": {"headline": "-0.02em", "body": "0em"},
    },
    "components": {
        "must_use_no_overlap_scene": True,
        "no_overlap_component": NO_OVERLAP_COMPONENT,
        "must_have_continuous_motion": True,
        "must_use_unified_transforms": True,
        "must_enforce_scale_isolation": True,
        "forbidden_patterns": [
            "opacity-only-transitions",
            "element-level-scale",
            "static-holds",
        ],
    },
    "motion_blur": {
        "velocity_threshold_px_per_frame": VELOCITY_BLUR_THRESHOLD,
        "blur_factor": 0.1,
        "max_blur": 10,
        "apply_during": ["entry", "exit"],
        "never_during": ["hold"],
        "automatic": True,
    },
    "duration": {
        "use_formula": True,
        "frames_per_scene": DEFAULT_FRAMES_PER_SCENE,
        "min_frames_per_scene": MIN_FRAMES_PER_SCENE,
        "max_frames_per_scene": MAX_FRAMES_PER_SCENE,
        "frames_per_transition": FRAMES_PER_TRANSITION,
        "never_arbitrary": True,
    },
    "transitions": {
        "every_scene_must_have_entry": True,
        "must_have_movement_component": True,
        "overlap_for_smooth_flow": 15,
        # Gaps are reported by the learned layer, at warning severity
        "no_dead_space": True,
    },
    "scaling": {
        "shot_level_only": True,
        "validate_compound": True,
        "max_safe_scale_factor": 0.95,  # min(viewport / element) * factor
    },
    "spacing": {
        "container_padding_min": 80,
        "section_margin_min": 60,
        "grid_gap_min": 25,
    },
    "colors": {
        "tech_default": {
            "primary": "#0a0a0a",
            "accent": "#10b981",
            "text": "#f0f6fc",
            "grid": "#3a3a3a",
        },
        "contrast_ratio_min": 7.0,
    },
}

SERIF_FAMILIES = {
    "serif",
    "times",
    "times new roman",
    "georgia",
    "garamond",
    "palatino",
    "palatino linotype",
    "baskerville",
    "book antiqua",
    "cambria",
    "merriweather",
    "playfair display",
    "didot",
    "bodoni",
}


@dataclass
class BaseRuleResult:
    """Outcome of evaluating the base catalog against one spec"""
    valid: bool
    violations: List[str] = field(default_factory=list)
    failed_rules: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class BaseRuleCheck:
    rule_id: str
    check: Callable[[AnimationSpec], Optional[str]]


def is_serif_font(font: str) -> bool:
    """Whether a CSS font-family list names a serif family"""
    for family in font.split(","):
        name = family.strip().strip("'\"").lower()
        if not name:
            continue
        if name in SERIF_FAMILIES:
            return True
        if "serif" in name and "sans" not in name:
            return True
    return False


def calculate_motion_blur(velocity: float) -> float:
    """Blur amount for an element moving at `velocity` units/frame"""
    rules = BASE_ANIMATION_RULES["motion_blur"]
    if velocity <= rules["velocity_threshold_px_per_frame"]:
        return 0.0
    return min(velocity * rules["blur_factor"], rules["max_blur"])


def _check_typography(spec: AnimationSpec) -> Optional[str]:
    # An undeclared font renders with the default sans-serif stack
    if spec.font and is_serif_font(spec.font) and not spec.explicitly_requested_serif:
        return "FONT: Using serif font without explicit request. Use sans-serif by default."
    return None


def _check_no_overlap_container(spec: AnimationSpec) -> Optional[str]:
    if not all(scene.component == NO_OVERLAP_COMPONENT for scene in spec.scenes):
        return f"STRUCTURE: Must use {NO_OVERLAP_COMPONENT} component for all scenes"
    return None


def _check_continuous_motion(spec: AnimationSpec) -> Optional[str]:
    if any(not scene.continuous_motion for scene in spec.scenes):
        return "MOTION: Scenes have static holds. Continuous motion required"
    return None


def _check_element_scale(spec: AnimationSpec) -> Optional[str]:
    if any(element.has_non_identity_scale for scene in spec.scenes for element in scene.elements):
        return "SCALE: Element-level scaling detected. Scale at shot level only"
    return None


def _check_motion_blur(spec: AnimationSpec) -> Optional[str]:
    for scene in spec.scenes:
        if scene.has_motion_blur:
            continue
        if any((element.velocity or 0) > VELOCITY_BLUR_THRESHOLD for element in scene.elements):
            return (
                "MOTION BLUR: Fast movement without blur. "
                f"Apply when velocity > {VELOCITY_BLUR_THRESHOLD}px/frame"
            )
    return None


def _check_duration(spec: AnimationSpec) -> Optional[str]:
    if spec.duration is None:
        return None
    expected = calculate_scene_based_duration(spec.scene_count, spec.frames_per_scene)
    if spec.duration != expected.total_frames:
        return (
            f"DURATION: Using arbitrary duration ({spec.duration} frames). "
            f"Scene formula gives {expected.formula}"
        )
    return None


BASE_RULE_CHECKS: List[BaseRuleCheck] = [
    BaseRuleCheck("base.typography", _check_typography),
    BaseRuleCheck("base.no_overlap_container", _check_no_overlap_container),
    BaseRuleCheck("base.continuous_motion", _check_continuous_motion),
    BaseRuleCheck("base.scale_isolation", _check_element_scale),
    BaseRuleCheck("base.motion_blur", _check_motion_blur),
    BaseRuleCheck("base.formula_duration", _check_duration),
]


def evaluate_base_rules(spec: AnimationSpec) -> BaseRuleResult:
    """
    Evaluate the fixed professional-standards table against a spec.

    Checks are independent; each contributes at most one message.

    Args:
        spec: The animation spec to check

    Returns:
        BaseRuleResult; valid is True only when no check failed
    """
    result = BaseRuleResult(valid=True)

    for rule in BASE_RULE_CHECKS:
        message = rule.check(spec)
        if message:
            result.violations.append(message)
            result.failed_rules.append(rule.rule_id)

    result.valid = not result.violations
    logger.debug(
        "Base rules evaluated",
        extra={"failed_rules": result.failed_rules, "scene_count": spec.scene_count},
    )
    return result
