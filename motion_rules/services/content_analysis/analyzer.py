"""
Content Analyzer - pure feature extraction from raw text.

No models, no I/O: keyword lists and regexes decide energy, complexity and
feature flags, and the duration comes from the scene formula.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from motion_rules.config import DEFAULT_FPS
from motion_rules.core import get_logger
from motion_rules.services.rules import DurationBreakdown, calculate_scene_based_duration

from .heuristics import DEFAULT_HEURISTICS, ContentHeuristics, count_words

logger = get_logger(__name__, component="content_analyzer")

NARRATION_WPM = 60
READING_WPM = 180
VISUAL_PROCESSING_OVERHEAD = 1.3
MIN_ESTIMATED_MS = 2000
MAX_ESTIMATED_MS = 60000

SCENE_DURATION_OVERHEAD = 1.5
MIN_SCENE_MS = 2000
MAX_SCENE_MS = 8000
CLIMAX_POSITION = 0.7


@dataclass
class ContentAnalysis:
    energy: float
    complexity: str  # "simple", "medium" or "complex"
    features: Dict[str, bool]
    estimated_duration_ms: float  # narration-pace estimate; calculated_duration is authoritative
    calculated_duration: DurationBreakdown
    scene_count: int
    reading_time_seconds: float
    keywords: List[str] = field(default_factory=list)


@dataclass
class SceneAnalysis:
    scene_index: int
    content: str
    energy: float
    similarity_to_next: float
    recommended_duration: int  # frames
    scene_role: str  # "intro", "body", "climax" or "outro"


def estimate_duration_ms(word_count: int) -> float:
    reading_ms = word_count / NARRATION_WPM * 60 * 1000
    return max(MIN_ESTIMATED_MS, min(MAX_ESTIMATED_MS, reading_ms * VISUAL_PROCESSING_OVERHEAD))


def analyze_content(
    text: str,
    scene_count: int = 1,
    heuristics: ContentHeuristics = DEFAULT_HEURISTICS,
) -> ContentAnalysis:
    """
    Analyze content for motion graphics generation.

    Args:
        text: Raw content of the whole animation
        scene_count: Number of scenes the content is split into
        heuristics: Strategy functions for energy, complexity, features and keywords

    Returns:
        ContentAnalysis with the formula-based duration for scene_count
    """
    word_count = count_words(text)

    analysis = ContentAnalysis(
        energy=heuristics.energy(text),
        complexity=heuristics.complexity(text, scene_count),
        features=heuristics.features(text),
        estimated_duration_ms=estimate_duration_ms(word_count),
        calculated_duration=calculate_scene_based_duration(scene_count),
        scene_count=scene_count,
        reading_time_seconds=word_count / READING_WPM * 60,
        keywords=heuristics.keywords(text),
    )

    logger.debug(
        "Content analyzed",
        extra={
            "energy": analysis.energy,
            "complexity": analysis.complexity,
            "word_count": word_count,
            "total_frames": analysis.calculated_duration.total_frames,
        },
    )
    return analysis


def calculate_similarity(first: str, second: str) -> float:
    """Jaccard similarity of the two texts' lower-cased word sets"""
    words_a = set(first.lower().split())
    words_b = set(second.lower().split())
    union = words_a | words_b
    if not union:
        return 0.0
    return len(words_a & words_b) / len(union)


def estimate_scene_duration(text: str, fps: int = DEFAULT_FPS) -> int:
    """Recommended scene length in frames, between 2 and 8 seconds"""
    reading_ms = count_words(text) / NARRATION_WPM * 60 * 1000
    duration_ms = max(MIN_SCENE_MS, min(MAX_SCENE_MS, reading_ms * SCENE_DURATION_OVERHEAD))
    return round(duration_ms / 1000 * fps)


def detect_scene_role(index: int, total: int) -> str:
    if index == 0:
        return "intro"
    if index == total - 1:
        return "outro"
    if index == int(total * CLIMAX_POSITION):
        return "climax"
    return "body"


def analyze_scenes(
    scenes: Sequence[str],
    heuristics: ContentHeuristics = DEFAULT_HEURISTICS,
) -> List[SceneAnalysis]:
    results = []
    for index, text in enumerate(scenes):
        following = scenes[index + 1] if index + 1 < len(scenes) else None
        results.append(SceneAnalysis(
            scene_index=index,
            content=text,
            energy=heuristics.energy(text),
            similarity_to_next=calculate_similarity(text, following) if following is not None else 0.0,
            recommended_duration=estimate_scene_duration(text),
            scene_role=detect_scene_role(index, len(scenes)),
        ))
    return results
