"""Content Analyzer - energy, complexity, features and duration from raw text."""

from .heuristics import (
    ContentHeuristics,
    DEFAULT_HEURISTICS,
    HIGH_ENERGY_WORDS,
    LOW_ENERGY_WORDS,
    detect_energy,
    estimate_complexity,
    extract_features,
    extract_keywords,
)
from .analyzer import (
    ContentAnalysis,
    SceneAnalysis,
    analyze_content,
    analyze_scenes,
    calculate_similarity,
    detect_scene_role,
    estimate_duration_ms,
    estimate_scene_duration,
)

__all__ = [
    "ContentHeuristics",
    "DEFAULT_HEURISTICS",
    "HIGH_ENERGY_WORDS",
    "LOW_ENERGY_WORDS",
    "detect_energy",
    "estimate_complexity",
    "extract_features",
    "extract_keywords",
    "ContentAnalysis",
    "SceneAnalysis",
    "analyze_content",
    "analyze_scenes",
    "calculate_similarity",
    "detect_scene_role",
    "estimate_duration_ms",
    "estimate_scene_duration",
]
