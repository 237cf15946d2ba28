"""
Use Cases - engine operations behind request/response objects

Usage:
    from motion_rules.services.use_cases import AnimationReviewUseCase, AnimationReviewRequest
"""

from .base import UseCase
from .review import (
    AnimationReviewRequest,
    AnimationReviewResponse,
    AnimationReviewUseCase,
)

__all__ = [
    "UseCase",
    "AnimationReviewRequest",
    "AnimationReviewResponse",
    "AnimationReviewUseCase",
]
