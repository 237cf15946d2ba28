"""Rule Catalog - fixed professional standards and the duration formula."""

from .catalog import (
    BASE_ANIMATION_RULES,
    BASE_RULES_VERSION,
    BASE_RULE_CHECKS,
    NO_OVERLAP_COMPONENT,
    VELOCITY_BLUR_THRESHOLD,
    BaseRuleResult,
    calculate_motion_blur,
    evaluate_base_rules,
    is_serif_font,
)
from .duration import (
    DEFAULT_FRAMES_PER_SCENE,
    FRAMES_PER_TRANSITION,
    MAX_FRAMES_PER_SCENE,
    MIN_FRAMES_PER_SCENE,
    DurationBreakdown,
    calculate_scene_based_duration,
    clamp_frames_per_scene,
    is_formula_duration,
)

__all__ = [
    "BASE_ANIMATION_RULES",
    "BASE_RULES_VERSION",
    "BASE_RULE_CHECKS",
    "NO_OVERLAP_COMPONENT",
    "VELOCITY_BLUR_THRESHOLD",
    "BaseRuleResult",
    "calculate_motion_blur",
    "evaluate_base_rules",
    "is_serif_font",
    "DEFAULT_FRAMES_PER_SCENE",
    "FRAMES_PER_TRANSITION",
    "MAX_FRAMES_PER_SCENE",
    "MIN_FRAMES_PER_SCENE",
    "DurationBreakdown",
    "calculate_scene_based_duration",
    "clamp_frames_per_scene",
    "is_formula_duration",
]
