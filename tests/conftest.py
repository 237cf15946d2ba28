"""
Shared fixtures: an in-memory correction store, spec builders and a small
template library.
"""

import logging
import logging.handlers

import pytest

from motion_rules.core import clear_context
from motion_rules.models import (
    AnimationSpec,
    AnimationTemplate,
    AspectRatio,
    Element,
    Platform,
    Scene,
    TemplateCategory,
)
from motion_rules.services.learning import CorrectionStore, InMemoryPreferenceRepository


@pytest.fixture(autouse=True)
def reset_log_context():
    """Correlation ids must not leak between tests"""
    yield
    clear_context()


@pytest.fixture
def restore_root_logger():
    """Drop handlers installed by setup_logging; pytest re-adds its own per phase"""
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if type(handler) in (logging.StreamHandler, logging.handlers.RotatingFileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def store():
    return CorrectionStore(InMemoryPreferenceRepository())


@pytest.fixture
def make_scene():
    """Build a scene that passes every rule unless overridden"""
    def _make(name, start=0, end=75, elements=None, **overrides):
        fields = dict(
            name=name,
            start_frame=start,
            end_frame=end,
            entry_transition="slide-up",
            component="NoOverlapScene",
            continuous_motion=True,
            elements=elements or [],
        )
        fields.update(overrides)
        return Scene(**fields)
    return _make


@pytest.fixture
def make_spec(make_scene):
    """Build a three-scene spec that passes every rule; scene overrides by index"""
    def _make(scene_overrides=None, **spec_overrides):
        scene_overrides = scene_overrides or {}
        names = ["Intro", "Features", "Outro"]
        contents = ["Welcome to our product", "Here are the key features", "Get started today"]
        scenes = [
            make_scene(
                name,
                start=index * 75,
                end=(index + 1) * 75,
                **{"content": contents[index], **scene_overrides.get(index, {})},
            )
            for index, name in enumerate(names)
        ]
        fields = dict(id="spec-001", scenes=scenes, font="Inter, sans-serif", duration=255)
        fields.update(spec_overrides)
        return AnimationSpec(**fields)
    return _make


@pytest.fixture
def compliant_spec(make_spec):
    return make_spec()


@pytest.fixture
def text_block():
    def _make(scale=None, **overrides):
        return Element(type="text_block", width=800, height=200, scale=scale, **overrides)
    return _make


@pytest.fixture
def template_library():
    return [
        AnimationTemplate(
            id="corporate-quarterly",
            name="Quarterly Report",
            category=TemplateCategory.BUSINESS,
            keywords=["quarterly", "report", "revenue", "chart"],
            aspect_ratio=AspectRatio.LANDSCAPE,
            data_visualization=True,
            energy=3,
            professional=9,
            platforms=[Platform.LINKEDIN, Platform.YOUTUBE],
        ),
        AnimationTemplate(
            id="youtube-explainer",
            name="Explainer",
            category=TemplateCategory.EDUCATION,
            keywords=["explainer", "tutorial", "education", "product"],
            aspect_ratio=AspectRatio.LANDSCAPE,
            energy=5,
            professional=6,
            platforms=[Platform.YOUTUBE],
        ),
        AnimationTemplate(
            id="tiktok-product-demo",
            name="Product Demo Reel",
            category=TemplateCategory.SOCIAL,
            keywords=["product", "demo", "launch", "app"],
            aspect_ratio=AspectRatio.VERTICAL,
            energy=8,
            professional=5,
            platforms=[Platform.TIKTOK, Platform.INSTAGRAM],
        ),
    ]
