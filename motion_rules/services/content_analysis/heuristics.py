"""
Keyword and regex heuristics for content features.

Each heuristic is a plain function so a different classifier can be plugged
in through ContentHeuristics without touching the analyzer.
"""

import re
from collections import Counter
from dataclasses import dataclass
from typing import Callable, Dict, List

HIGH_ENERGY_WORDS = [
    "fast", "quick", "rapid", "action", "dynamic", "power", "explosive",
    "exciting", "intense", "aggressive", "bold", "dramatic", "impact",
]

LOW_ENERGY_WORDS = [
    "calm", "gentle", "smooth", "soft", "subtle", "quiet", "peaceful",
    "elegant", "graceful", "slow", "relaxed", "minimal", "simple",
]

BASE_ENERGY = 0.5
ENERGY_STEP = 0.1
MIN_ENERGY = 0.3
MAX_ENERGY = 0.8

CODE_PATTERN = re.compile(r"```|code|function|class|const|import")
LIST_PATTERN = re.compile(r"\n-|\n\d\.|\n\*")

FEATURE_PATTERNS = {
    "has_technical_content": re.compile(r"code|API|function|class|developer|technical|software", re.IGNORECASE),
    "has_list_content": re.compile(r"features|benefits|steps|\n-|\n\d\.", re.IGNORECASE),
    "has_code_examples": re.compile(r"```|function|const|import|export|class", re.IGNORECASE),
    "has_questions": re.compile(r"\?|how to|what is|why|when", re.IGNORECASE),
    "has_call_to_action": re.compile(r"start|try|get|download|sign up|learn more|contact", re.IGNORECASE),
}

MAX_KEYWORDS = 10


def count_words(text: str) -> int:
    return len(text.split())


def detect_energy(text: str) -> float:
    """Energy in [0.3, 0.8]; each distinct listed word found moves it by 0.1"""
    lowered = text.lower()
    high = sum(1 for word in HIGH_ENERGY_WORDS if word in lowered)
    low = sum(1 for word in LOW_ENERGY_WORDS if word in lowered)
    energy = BASE_ENERGY + high * ENERGY_STEP - low * ENERGY_STEP
    return round(max(MIN_ENERGY, min(MAX_ENERGY, energy)), 2)


def estimate_complexity(text: str, scene_count: int) -> str:
    word_count = count_words(text)
    has_code = bool(CODE_PATTERN.search(text))
    has_list = bool(LIST_PATTERN.search(text))

    if scene_count == 1 and word_count < 50 and not has_code and not has_list:
        return "simple"
    if scene_count > 4 or word_count > 200 or (has_code and has_list):
        return "complex"
    return "medium"


def extract_features(text: str) -> Dict[str, bool]:
    return {name: bool(pattern.search(text)) for name, pattern in FEATURE_PATTERNS.items()}


def extract_keywords(text: str) -> List[str]:
    """Top words longer than three characters, most frequent first"""
    words = re.sub(r"[^\w\s]", "", text.lower()).split()
    # most_common() is a stable sort, so equal counts keep first-seen order
    frequency = Counter(word for word in words if len(word) > 3)
    return [word for word, _ in frequency.most_common(MAX_KEYWORDS)]


@dataclass(frozen=True)
class ContentHeuristics:
    """Strategy bundle used by the analyzer"""
    energy: Callable[[str], float] = detect_energy
    complexity: Callable[[str, int], str] = estimate_complexity
    features: Callable[[str], Dict[str, bool]] = extract_features
    keywords: Callable[[str], List[str]] = extract_keywords


DEFAULT_HEURISTICS = ContentHeuristics()
