"""
Animation spec schemas

The unit the rule layers validate: an ordered list of scenes, each owning a
flat list of elements. Produced by the external spec-assembly step.
"""

from pydantic import BaseModel, Field
from typing import List, Optional


class Element(BaseModel):
    """A visual element inside exactly one scene"""
    type: str  # free-form tag, e.g. "text_block", "code_editor"
    width: float = Field(ge=0)
    height: float = Field(ge=0)
    scale: Optional[float] = None
    velocity: Optional[float] = None  # units per frame
    translate_x: Optional[float] = None
    translate_y: Optional[float] = None
    rotate: Optional[float] = None
    content: Optional[str] = None

    @property
    def has_scale(self) -> bool:
        """Whether any scale value is set (1.0 included)"""
        return bool(self.scale)

    @property
    def has_non_identity_scale(self) -> bool:
        return bool(self.scale) and self.scale != 1.0


class Scene(BaseModel):
    """One shot of the animation"""
    name: str
    start_frame: int = 0
    end_frame: int = 0
    entry_transition: Optional[str] = None  # "slide-up", "wipe-left", ... ; "none"/"instant" pop in
    exit_type: Optional[str] = None
    has_motion_blur: bool = False
    component: Optional[str] = None  # container abstraction, e.g. "NoOverlapScene"
    continuous_motion: bool = False
    content: Optional[str] = None
    elements: List[Element] = Field(default_factory=list)


class AnimationSpec(BaseModel):
    """A proposed animation, checked before generation is accepted"""
    id: Optional[str] = None
    scenes: List[Scene] = Field(default_factory=list)
    font: Optional[str] = None
    explicitly_requested_serif: bool = False
    duration: Optional[int] = None  # total frames
    frames_per_scene: int = 75  # value the duration formula was run with

    @property
    def scene_count(self) -> int:
        return len(self.scenes)
