"""
Template Selector - weighted ranking of a template library against a request.

Score = keyword 50% + content 30% + platform 20% + style 10%, plus a flat
bonus when two or more template keywords match. Each component is a
fraction in [0, 1], but the weights add up to 1.1 and the bonus sits on
top, so totals above 1 are normal. Scores are left unbounded for ranking
and only clamped by TemplateMatch.display_score.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from motion_rules.core import get_logger
from motion_rules.models import AnimationTemplate, Platform, TemplateCategory

from .detectors import DEFAULT_DETECTORS, RequestDetectors, UserRequest, analyze_user_request

logger = get_logger(__name__, component="template_selector")

KEYWORD_WEIGHT = 0.5
CONTENT_WEIGHT = 0.3
PLATFORM_WEIGHT = 0.2
STYLE_WEIGHT = 0.1

MULTI_KEYWORD_BONUS = 0.15
MULTI_KEYWORD_THRESHOLD = 2
ASPECT_ONLY_PLATFORM_SCORE = 0.7
STEM_LENGTH = 4
ENERGY_MISMATCH = 4


@dataclass(frozen=True)
class ScoreBreakdown:
    keyword: float
    keyword_bonus: float
    content: float
    platform: float
    style: float
    matched_keywords: List[str] = field(default_factory=list)

    @property
    def weighted(self) -> float:
        """Weighted components before the bonus"""
        return (
            self.keyword * KEYWORD_WEIGHT
            + self.content * CONTENT_WEIGHT
            + self.platform * PLATFORM_WEIGHT
            + self.style * STYLE_WEIGHT
        )

    @property
    def total(self) -> float:
        return self.weighted + self.keyword_bonus


@dataclass
class TemplateMatch:
    template: AnimationTemplate
    score: float
    reason: str
    matched_keywords: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    breakdown: Optional[ScoreBreakdown] = None

    @property
    def display_score(self) -> float:
        """Score clamped to [0, 1] for percentage display"""
        return max(0.0, min(1.0, self.score))


def keyword_matches(template_keyword: str, user_keyword: str) -> bool:
    """Exact, substring in either direction, or shared 4-character stem"""
    if user_keyword == template_keyword:
        return True
    if user_keyword in template_keyword or template_keyword in user_keyword:
        return True
    return (
        len(user_keyword) >= STEM_LENGTH
        and len(template_keyword) >= STEM_LENGTH
        and user_keyword.startswith(template_keyword[:STEM_LENGTH])
    )


def matched_template_keywords(template: AnimationTemplate, user_keywords: Sequence[str]) -> List[str]:
    return [
        keyword for keyword in template.keywords
        if any(keyword_matches(keyword, user_keyword) for user_keyword in user_keywords)
    ]


def score_breakdown(template: AnimationTemplate, request: UserRequest) -> ScoreBreakdown:
    matched = matched_template_keywords(template, request.keywords)
    keyword_score = len(matched) / len(template.keywords) if template.keywords else 0.0
    bonus = MULTI_KEYWORD_BONUS if len(matched) >= MULTI_KEYWORD_THRESHOLD else 0.0

    if request.has_data and template.data_visualization:
        content_score = 1.0
    elif not request.has_data and not template.data_visualization:
        content_score = 0.5
    else:
        content_score = 0.0

    if request.platform and request.platform in template.platforms:
        platform_score = 1.0
    elif request.aspect_ratio and template.aspect_ratio == request.aspect_ratio:
        platform_score = ASPECT_ONLY_PLATFORM_SCORE
    else:
        platform_score = 0.0

    energy_similarity = 1 - abs(request.energy - template.energy) / 10
    professional_similarity = 1 - abs(request.professional - template.professional) / 10
    style_score = (energy_similarity + professional_similarity) / 2

    return ScoreBreakdown(
        keyword=keyword_score,
        keyword_bonus=bonus,
        content=content_score,
        platform=platform_score,
        style=style_score,
        matched_keywords=matched,
    )


def score_template(template: AnimationTemplate, request: UserRequest) -> float:
    return score_breakdown(template, request).total


def _style_name(professional: int) -> str:
    if professional > 7:
        return "professional"
    if professional < 4:
        return "casual"
    return "balanced"


def _energy_name(energy: int) -> str:
    return "energetic" if energy > 7 else "calm"


def generate_match_reason(
    template: AnimationTemplate,
    request: UserRequest,
    score: float,
    matched_keywords: List[str],
) -> str:
    reasons = []

    if matched_keywords:
        reasons.append(f"Matches keywords: {', '.join(matched_keywords[:3])}")

    if request.platform and request.platform in template.platforms:
        reasons.append(f"Optimized for {request.platform.value}")

    if request.has_data and template.data_visualization:
        reasons.append("Includes data visualization")

    if abs(request.professional - template.professional) < 2:
        reasons.append(f"{_style_name(template.professional)} style matches your request")

    return ". ".join(reasons) or f"{template.name} ({score * 100:.0f}% match)"


def generate_warnings(template: AnimationTemplate, request: UserRequest) -> List[str]:
    warnings = []

    if request.aspect_ratio and template.aspect_ratio != request.aspect_ratio:
        warnings.append(
            f"Template is {template.aspect_ratio.value}, you requested {request.aspect_ratio.value}"
        )

    if request.platform and request.platform not in template.platforms:
        if template.platforms:
            warnings.append(
                f"Template optimized for {template.platforms[0].value}, not {request.platform.value}"
            )
        else:
            warnings.append(f"Template is not optimized for {request.platform.value}")

    if abs(request.energy - template.energy) > ENERGY_MISMATCH:
        warnings.append(
            f"Template is {_energy_name(template.energy)}, you want {_energy_name(request.energy)}"
        )

    return warnings


def select_templates(
    templates: Sequence[AnimationTemplate],
    prompt: str,
    top_n: int = 3,
    detectors: RequestDetectors = DEFAULT_DETECTORS,
) -> List[TemplateMatch]:
    """
    Rank templates against a free-text request.

    Args:
        templates: The template library
        prompt: The user's request
        top_n: How many matches to return
        detectors: Request analysis strategies

    Returns:
        Up to top_n TemplateMatch values, best first; ties keep library order
    """
    request = analyze_user_request(prompt, detectors)

    matches = []
    for template in templates:
        breakdown = score_breakdown(template, request)
        score = breakdown.total
        matches.append(TemplateMatch(
            template=template,
            score=score,
            reason=generate_match_reason(template, request, score, breakdown.matched_keywords),
            matched_keywords=breakdown.matched_keywords,
            warnings=generate_warnings(template, request),
            breakdown=breakdown,
        ))

    matches.sort(key=lambda match: match.score, reverse=True)

    logger.debug(
        "Templates ranked",
        extra={
            "candidates": len(matches),
            "platform": request.platform.value if request.platform else None,
            "top": [match.template.id for match in matches[:top_n]],
        },
    )
    return matches[:top_n]


def get_template_by_id(templates: Sequence[AnimationTemplate], template_id: str) -> Optional[AnimationTemplate]:
    return next((t for t in templates if t.id == template_id), None)


def filter_by_category(templates: Sequence[AnimationTemplate], category: TemplateCategory) -> List[AnimationTemplate]:
    return [t for t in templates if t.category == category]


def filter_by_platform(templates: Sequence[AnimationTemplate], platform: Platform) -> List[AnimationTemplate]:
    return [t for t in templates if platform in t.platforms]


def get_categories(templates: Sequence[AnimationTemplate]) -> List[TemplateCategory]:
    """Distinct categories in first-seen order"""
    return list(dict.fromkeys(t.category for t in templates))
