"""
Pydantic schemas for the values crossing the engine boundary
"""

from .animation import Element, Scene, AnimationSpec
from .corrections import (
    IssueType,
    Confidence,
    Size,
    ElementContext,
    CorrectionInput,
    Correction,
    ValidatedRules,
    LearningMetadata,
    PreferenceDocument,
    utc_now_iso,
)
from .templates import (
    TemplateCategory,
    AspectRatio,
    Platform,
    TemplateComplexity,
    CharacterCount,
    AnimationTemplate,
)

__all__ = [
    "Element",
    "Scene",
    "AnimationSpec",
    "IssueType",
    "Confidence",
    "Size",
    "ElementContext",
    "CorrectionInput",
    "Correction",
    "ValidatedRules",
    "LearningMetadata",
    "PreferenceDocument",
    "utc_now_iso",
    "TemplateCategory",
    "AspectRatio",
    "Platform",
    "TemplateComplexity",
    "CharacterCount",
    "AnimationTemplate",
]
