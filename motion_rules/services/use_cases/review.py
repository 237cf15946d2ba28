"""
Animation review use case.

Runs the engine's control flow over an already-assembled spec:
    - Analyzes the content and each scene
    - Computes the formula duration for the spec's scenes
    - Ranks templates, unless one was chosen up front
    - Optionally repairs the spec with learned preferences
    - Enforces base and learned rules on the result
    - Counts the run as a generation in the Correction Store

Classes:
    AnimationReviewRequest: Input for one review
    AnimationReviewResponse: Every intermediate result plus the report
    AnimationReviewUseCase: Main use case implementation
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from motion_rules.core import (
    LogTimer,
    TemplateNotFoundError,
    clear_context,
    get_logger,
    set_request_id,
    set_spec_id,
)
from motion_rules.models import AnimationSpec, AnimationTemplate, LearningMetadata
from motion_rules.services.content_analysis import (
    ContentAnalysis,
    SceneAnalysis,
    analyze_content,
    analyze_scenes,
)
from motion_rules.services.enforcement import (
    EnforcementResult,
    RuleEnforcer,
    generate_enforcement_report,
)
from motion_rules.services.learning import CorrectionStore
from motion_rules.services.preferences import ApplicationResult, PreferenceApplier
from motion_rules.services.rules import DurationBreakdown, calculate_scene_based_duration
from motion_rules.services.templates import TemplateMatch, get_template_by_id, select_templates

from .base import UseCase

logger = get_logger(__name__, component="animation_review")


@dataclass
class AnimationReviewRequest:
    """
    Request object for one review.

    Attributes:
        spec: The assembled animation spec
        prompt: The user's free-text request, used for template ranking
        content: Full text of the animation; defaults to the scenes' content joined
        template_id: Pre-chosen template; skips ranking when set
        apply_preferences: Repair the spec with learned rules before enforcing
        top_n: How many template matches to return
        request_id: Correlation id for logs
    """
    spec: AnimationSpec
    prompt: str = ""
    content: Optional[str] = None
    template_id: Optional[str] = None
    apply_preferences: bool = True
    top_n: int = 3
    request_id: Optional[str] = None


@dataclass
class AnimationReviewResponse:
    content_analysis: ContentAnalysis
    scene_analyses: List[SceneAnalysis]
    duration: DurationBreakdown
    enforcement: EnforcementResult
    report: str
    learning_metadata: LearningMetadata
    reviewed_spec: AnimationSpec  # the spec that was enforced
    template_matches: List[TemplateMatch] = field(default_factory=list)
    selected_template: Optional[AnimationTemplate] = None
    application: Optional[ApplicationResult] = None

    @property
    def can_generate(self) -> bool:
        return self.enforcement.valid


class AnimationReviewUseCase(UseCase[AnimationReviewRequest, AnimationReviewResponse]):
    """
    Use case for reviewing a spec before generation.

    Error Handling:
        - TemplateNotFoundError when template_id names no template in the library
        - StorageError when the generation count cannot be persisted
        Rule violations are reported in the response, never raised.

    Correlation ids bound by execute are cleared when it returns.
    """

    def __init__(self, store: CorrectionStore, templates: Sequence[AnimationTemplate] = ()):
        self.store = store
        self.templates = list(templates)
        self.enforcer = RuleEnforcer(store)
        self.applier = PreferenceApplier(store)

    def execute(self, request: AnimationReviewRequest) -> AnimationReviewResponse:
        if request.request_id:
            set_request_id(request.request_id)
        if request.spec.id:
            set_spec_id(request.spec.id)
        try:
            return self._review(request)
        finally:
            clear_context()

    def _review(self, request: AnimationReviewRequest) -> AnimationReviewResponse:
        with LogTimer(logger, "animation review"):
            spec = request.spec
            scene_texts = [scene.content or "" for scene in spec.scenes]
            content = request.content if request.content is not None else "\n".join(scene_texts)

            content_analysis = analyze_content(content, max(spec.scene_count, 1))
            scene_analyses = analyze_scenes(scene_texts)
            duration = calculate_scene_based_duration(spec.scene_count, spec.frames_per_scene)

            matches: List[TemplateMatch] = []
            if request.template_id:
                selected = get_template_by_id(self.templates, request.template_id)
                if selected is None:
                    raise TemplateNotFoundError(f'Template "{request.template_id}" not found')
            else:
                matches = select_templates(self.templates, request.prompt, request.top_n)
                selected = matches[0].template if matches else None

            application = None
            reviewed = spec
            if request.apply_preferences:
                application = self.applier.apply(spec)
                reviewed = application.modified

            enforcement = self.enforcer.enforce_all(reviewed)
            metadata = self.store.record_generation()

        logger.info(
            "Animation reviewed",
            extra={
                "valid": enforcement.valid,
                "template": selected.id if selected else None,
                "applied_rules": len(application.applied_rules) if application else 0,
            },
        )

        return AnimationReviewResponse(
            content_analysis=content_analysis,
            scene_analyses=scene_analyses,
            duration=duration,
            enforcement=enforcement,
            report=generate_enforcement_report(enforcement),
            learning_metadata=metadata,
            reviewed_spec=reviewed,
            template_matches=matches,
            selected_template=selected,
            application=application,
        )
