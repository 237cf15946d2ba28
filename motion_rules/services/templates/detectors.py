"""
Request analysis for template selection.

Detectors are plain functions over the prompt; RequestDetectors bundles them
so a different classifier can replace any one of them.
"""

import re
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from motion_rules.models import AspectRatio, Platform

STOP_WORDS = {"a", "an", "the", "for", "to", "of", "and", "or", "but", "in", "on", "at", "with"}

# Checked in order; the first match wins
PLATFORM_PATTERNS = [
    (Platform.YOUTUBE, re.compile(r"\b(youtube|yt)\b", re.IGNORECASE)),
    (Platform.INSTAGRAM, re.compile(r"\b(instagram|insta|ig)\b", re.IGNORECASE)),
    (Platform.TIKTOK, re.compile(r"\b(tiktok|tik tok)\b", re.IGNORECASE)),
    (Platform.LINKEDIN, re.compile(r"\b(linkedin)\b", re.IGNORECASE)),
    (Platform.TWITTER, re.compile(r"\b(twitter|x\.com)\b", re.IGNORECASE)),
    (Platform.FACEBOOK, re.compile(r"\b(facebook|fb)\b", re.IGNORECASE)),
]

ASPECT_RATIO_PATTERNS = [
    (AspectRatio.VERTICAL, re.compile(r"\b(vertical|portrait|9:16|story|reel|short)\b", re.IGNORECASE)),
    (AspectRatio.SQUARE, re.compile(r"\b(square|1:1)\b", re.IGNORECASE)),
    (AspectRatio.LANDSCAPE, re.compile(r"\b(horizontal|landscape|16:9)\b", re.IGNORECASE)),
    (AspectRatio.PORTRAIT, re.compile(r"\b(4:5)\b", re.IGNORECASE)),
]

PLATFORM_ASPECT_RATIOS = {
    Platform.INSTAGRAM: AspectRatio.VERTICAL,
    Platform.TIKTOK: AspectRatio.VERTICAL,
    Platform.YOUTUBE: AspectRatio.LANDSCAPE,
}

HIGH_ENERGY_PATTERN = re.compile(r"\b(energetic|fast|quick|exciting|dynamic|bold|powerful|intense)\b", re.IGNORECASE)
LOW_ENERGY_PATTERN = re.compile(r"\b(calm|slow|smooth|gentle|peaceful|minimal|subtle|quiet)\b", re.IGNORECASE)

CORPORATE_PATTERN = re.compile(
    r"\b(professional|corporate|business|enterprise|investor|quarterly|formal)\b", re.IGNORECASE
)
CASUAL_PATTERN = re.compile(r"\b(fun|playful|casual|quirky|whimsical|creative|artistic)\b", re.IGNORECASE)

DATA_PATTERN = re.compile(
    r"\b(chart|graph|metric|number|stat|data|result|growth|revenue|performance)\b", re.IGNORECASE
)

HIGH_ENERGY, LOW_ENERGY, DEFAULT_ENERGY = 8, 3, 5
CORPORATE, CASUAL, DEFAULT_PROFESSIONALISM = 9, 3, 6


def extract_request_keywords(prompt: str) -> List[str]:
    keywords = []
    for word in prompt.lower().split():
        if len(word) <= 2 or word in STOP_WORDS:
            continue
        cleaned = re.sub(r"\W", "", word)
        if cleaned:
            keywords.append(cleaned)
    return keywords


def detect_platform(prompt: str) -> Optional[Platform]:
    for platform, pattern in PLATFORM_PATTERNS:
        if pattern.search(prompt):
            return platform
    return None


def detect_aspect_ratio(prompt: str, platform: Optional[Platform] = None) -> Optional[AspectRatio]:
    """Explicit wording first, then the platform's native format"""
    for aspect_ratio, pattern in ASPECT_RATIO_PATTERNS:
        if pattern.search(prompt):
            return aspect_ratio
    return PLATFORM_ASPECT_RATIOS.get(platform)


def detect_energy(prompt: str) -> int:
    if HIGH_ENERGY_PATTERN.search(prompt):
        return HIGH_ENERGY
    if LOW_ENERGY_PATTERN.search(prompt):
        return LOW_ENERGY
    return DEFAULT_ENERGY


def detect_professionalism(prompt: str) -> int:
    if CORPORATE_PATTERN.search(prompt):
        return CORPORATE
    if CASUAL_PATTERN.search(prompt):
        return CASUAL
    return DEFAULT_PROFESSIONALISM


def detect_data_need(prompt: str) -> bool:
    return bool(DATA_PATTERN.search(prompt))


@dataclass(frozen=True)
class RequestDetectors:
    keywords: Callable[[str], List[str]] = extract_request_keywords
    platform: Callable[[str], Optional[Platform]] = detect_platform
    aspect_ratio: Callable[[str, Optional[Platform]], Optional[AspectRatio]] = detect_aspect_ratio
    energy: Callable[[str], int] = detect_energy
    professionalism: Callable[[str], int] = detect_professionalism
    has_data: Callable[[str], bool] = detect_data_need


DEFAULT_DETECTORS = RequestDetectors()


@dataclass
class UserRequest:
    """Matching criteria extracted from a free-text request"""
    original_prompt: str
    keywords: List[str] = field(default_factory=list)
    platform: Optional[Platform] = None
    aspect_ratio: Optional[AspectRatio] = None
    energy: int = DEFAULT_ENERGY  # 1=calm, 10=energetic
    professional: int = DEFAULT_PROFESSIONALISM  # 1=playful, 10=corporate
    has_data: bool = False
    duration: Optional[int] = None  # requested frames, when stated


def analyze_user_request(prompt: str, detectors: RequestDetectors = DEFAULT_DETECTORS) -> UserRequest:
    lowered = prompt.lower()
    platform = detectors.platform(lowered)
    return UserRequest(
        original_prompt=prompt,
        keywords=detectors.keywords(lowered),
        platform=platform,
        aspect_ratio=detectors.aspect_ratio(lowered, platform),
        energy=detectors.energy(lowered),
        professional=detectors.professionalism(lowered),
        has_data=detectors.has_data(prompt),
    )
