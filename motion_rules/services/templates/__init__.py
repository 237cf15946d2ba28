"""Template Selector - request analysis, weighted scoring and the template registry."""

from .detectors import (
    DEFAULT_DETECTORS,
    RequestDetectors,
    UserRequest,
    analyze_user_request,
    detect_aspect_ratio,
    detect_energy,
    detect_platform,
    detect_professionalism,
    extract_request_keywords,
)
from .selector import (
    ScoreBreakdown,
    TemplateMatch,
    filter_by_category,
    filter_by_platform,
    get_categories,
    get_template_by_id,
    keyword_matches,
    score_breakdown,
    score_template,
    select_templates,
)
from .registry import FileBasedTemplateRegistry, TemplateStats

__all__ = [
    "DEFAULT_DETECTORS",
    "RequestDetectors",
    "UserRequest",
    "analyze_user_request",
    "detect_aspect_ratio",
    "detect_energy",
    "detect_platform",
    "detect_professionalism",
    "extract_request_keywords",
    "ScoreBreakdown",
    "TemplateMatch",
    "filter_by_category",
    "filter_by_platform",
    "get_categories",
    "get_template_by_id",
    "keyword_matches",
    "score_breakdown",
    "score_template",
    "select_templates",
    "FileBasedTemplateRegistry",
    "TemplateStats",
]
