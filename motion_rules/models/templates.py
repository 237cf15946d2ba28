"""
Template catalog schemas

Templates are authored outside the engine; the engine only reads and ranks
them. Style attributes are 1-10 scales.
"""

from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, Field


class TemplateCategory(str, Enum):
    BUSINESS = "business"
    SOCIAL = "social"
    TECH = "tech"
    EDUCATION = "education"
    CREATIVE = "creative"


class AspectRatio(str, Enum):
    LANDSCAPE = "16:9"
    VERTICAL = "9:16"
    SQUARE = "1:1"
    PORTRAIT = "4:5"


class Platform(str, Enum):
    YOUTUBE = "youtube"
    INSTAGRAM = "instagram"
    TIKTOK = "tiktok"
    LINKEDIN = "linkedin"
    TWITTER = "twitter"
    FACEBOOK = "facebook"


class TemplateComplexity(str, Enum):
    SIMPLE = "simple"
    MODERATE = "moderate"
    COMPLEX = "complex"


class CharacterCount(str, Enum):
    NONE = "none"
    MINIMAL = "minimal"
    MULTIPLE = "multiple"


class AnimationTemplate(BaseModel):
    """A catalog entry the selector ranks against free-text requests"""
    # Identity
    id: str
    name: str
    category: TemplateCategory
    description: str = ""

    # Matching data
    keywords: List[str] = Field(default_factory=list)

    # Technical specifications
    default_duration: int = 450  # frames
    aspect_ratio: AspectRatio = AspectRatio.LANDSCAPE
    complexity: TemplateComplexity = TemplateComplexity.MODERATE

    # Content characteristics
    text_heavy: bool = False
    data_visualization: bool = False
    character_count: CharacterCount = CharacterCount.NONE

    # Style attributes
    energy: int = Field(default=5, ge=1, le=10)  # 1=calm, 10=energetic
    professional: int = Field(default=5, ge=1, le=10)  # 1=playful, 10=corporate
    colorfulness: int = Field(default=5, ge=1, le=10)

    # Platform optimization
    platforms: List[Platform] = Field(default_factory=list)

    # Customization interface
    required_fields: List[str] = Field(default_factory=list)
    optional_fields: List[str] = Field(default_factory=list)
    example_data: Dict[str, Any] = Field(default_factory=dict)

    # Opaque reference to the implementation artifact
    component_path: str = ""

    created_at: str = ""
    version: str = "1.0.0"
    author: str = ""
