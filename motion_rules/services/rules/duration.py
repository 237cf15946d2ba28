"""
Scene-based duration formula

    total_frames = scenes * frames_per_scene + (scenes - 1) * frames_per_transition

frames_per_scene is clamped to [60, 90] (2-3 s at 30fps: below that text is
unreadable, above it attention drops) and every transition takes 15 frames.
This is the only accepted way to derive an animation's total duration.
"""

from dataclasses import dataclass

from motion_rules.config import DEFAULT_FPS

MIN_FRAMES_PER_SCENE = 60
MAX_FRAMES_PER_SCENE = 90
DEFAULT_FRAMES_PER_SCENE = 75
FRAMES_PER_TRANSITION = 15


@dataclass(frozen=True)
class DurationBreakdown:
    """Result of the duration formula"""
    total_frames: int
    total_seconds: float
    scene_frames: int
    transition_frames: int
    scene_count: int
    frames_per_scene: int
    transition_count: int
    formula: str


def clamp_frames_per_scene(frames_per_scene: int) -> int:
    return max(MIN_FRAMES_PER_SCENE, min(MAX_FRAMES_PER_SCENE, frames_per_scene))


def calculate_scene_based_duration(
    scene_count: int,
    frames_per_scene: int = DEFAULT_FRAMES_PER_SCENE,
    fps: int = DEFAULT_FPS,
) -> DurationBreakdown:
    """
    Calculate total animation duration from the number of scenes.

    Args:
        scene_count: Number of scenes (values below 1 count as 1)
        frames_per_scene: Requested frames per scene, clamped to [60, 90]
        fps: Frame rate used for the seconds conversion

    Returns:
        DurationBreakdown with frame totals and a printable formula

    Example:
        >>> calculate_scene_based_duration(3).total_frames
        255
    """
    scene_count = max(1, scene_count)
    frames_per_scene = clamp_frames_per_scene(frames_per_scene)

    transition_count = scene_count - 1
    scene_frames = scene_count * frames_per_scene
    transition_frames = transition_count * FRAMES_PER_TRANSITION
    total_frames = scene_frames + transition_frames
    total_seconds = total_frames / fps

    formula = (
        f"({scene_count} scenes × {frames_per_scene} frames) + "
        f"({transition_count} transitions × {FRAMES_PER_TRANSITION} frames) = "
        f"{total_frames} frames ({total_seconds:.1f}s @ {fps}fps)"
    )

    return DurationBreakdown(
        total_frames=total_frames,
        total_seconds=total_seconds,
        scene_frames=scene_frames,
        transition_frames=transition_frames,
        scene_count=scene_count,
        frames_per_scene=frames_per_scene,
        transition_count=transition_count,
        formula=formula,
    )


def is_formula_duration(duration: int, scene_count: int, frames_per_scene: int) -> bool:
    """Whether a declared duration is exactly what the formula produces"""
    return duration == calculate_scene_based_duration(scene_count, frames_per_scene).total_frames
