"""
Correction store schemas

Corrections are append-only audit records; ValidatedRules is the projection
derived from them. Both live in one persisted PreferenceDocument.
"""

from datetime import datetime, UTC
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from motion_rules.config import PREFERENCES_VERSION


def utc_now_iso() -> str:
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")


class IssueType(str, Enum):
    """Kind of problem a human corrected."""

    CROP = "crop"
    TRANSITION_TYPE = "transition_type"
    TIMING = "timing"
    COMPOUND_SCALING = "compound_scaling"
    # Logged for audit only, no rule is extracted from these
    OVERLAP = "overlap"
    POSITIONING = "positioning"
    COLOR = "color"
    TYPOGRAPHY = "typography"
    OTHER = "other"


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Size(BaseModel):
    width: float = Field(ge=0)
    height: float = Field(ge=0)


class ElementContext(BaseModel):
    """Element the correction was made on; keys size-specific rules"""
    type: str
    size: Optional[Size] = None


class CorrectionInput(BaseModel):
    """Fields supplied by the feedback-capture step"""
    issue_type: IssueType
    issue_description: str = ""
    original_parameters: Dict[str, Any] = Field(default_factory=dict)
    corrected_parameters: Dict[str, Any] = Field(default_factory=dict)
    learned_rule: Optional[str] = None
    confidence: Confidence = Confidence.MEDIUM
    element_context: Optional[ElementContext] = None


class Correction(CorrectionInput):
    """A recorded correction. Never mutated after creation."""
    model_config = ConfigDict(frozen=True)

    id: str
    timestamp: str
    learned_rule: str = "none"


class ValidatedRules(BaseModel):
    """Rules derived from corrections, keyed by category"""
    max_scales_by_element: Dict[str, float] = Field(default_factory=dict)
    preferred_transitions: Dict[str, str] = Field(default_factory=dict)
    timing_preferences: Dict[str, Any] = Field(default_factory=dict)
    enforce_scale_isolation: bool = False
    max_levels_with_scale: Optional[int] = None


class LearningMetadata(BaseModel):
    total_corrections: int = 0
    total_generations: int = 0
    success_rate: float = 0.0
    most_common_issue: str = "none"
    most_reliable_rule: str = "none"


class PreferenceDocument(BaseModel):
    """The whole persisted correction store, read and written as one unit"""
    version: str = PREFERENCES_VERSION
    created: str = Field(default_factory=utc_now_iso)
    last_updated: str = Field(default_factory=utc_now_iso)
    corrections: List[Correction] = Field(default_factory=list)
    validated_rules: ValidatedRules = Field(default_factory=ValidatedRules)
    element_type_mappings: Dict[str, Any] = Field(default_factory=dict)
    learning_metadata: LearningMetadata = Field(default_factory=LearningMetadata)
