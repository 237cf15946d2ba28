"""
Tests for the boundary schemas
"""

import pytest
from pydantic import ValidationError

from motion_rules.models import (
    AnimationSpec,
    AnimationTemplate,
    AspectRatio,
    Element,
    PreferenceDocument,
    TemplateCategory,
)


class TestElement:
    """Test suite for Element"""

    def test_negative_width_rejected(self):
        with pytest.raises(ValidationError):
            Element(type="text_block", width=-1, height=200)

    def test_scale_flags(self):
        assert Element(type="logo", width=10, height=10).has_scale is False
        assert Element(type="logo", width=10, height=10, scale=1.0).has_scale is True
        assert Element(type="logo", width=10, height=10, scale=1.0).has_non_identity_scale is False
        assert Element(type="logo", width=10, height=10, scale=1.2).has_non_identity_scale is True


class TestAnimationSpec:
    """Test suite for AnimationSpec"""

    def test_scene_count(self, compliant_spec):
        assert compliant_spec.scene_count == 3
        assert AnimationSpec().scene_count == 0

    def test_defaults(self):
        spec = AnimationSpec()
        assert spec.frames_per_scene == 75
        assert spec.duration is None
        assert spec.explicitly_requested_serif is False


class TestAnimationTemplate:
    """Test suite for AnimationTemplate"""

    def test_energy_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            AnimationTemplate(id="t", name="T", category=TemplateCategory.TECH, energy=11)

    def test_parses_wire_values(self):
        template = AnimationTemplate.model_validate({
            "id": "reel",
            "name": "Reel",
            "category": "social",
            "aspect_ratio": "9:16",
            "platforms": ["tiktok"],
        })
        assert template.aspect_ratio == AspectRatio.VERTICAL
        assert template.category == TemplateCategory.SOCIAL


class TestPreferenceDocument:
    """Test suite for PreferenceDocument"""

    def test_fresh_document_is_empty(self):
        document = PreferenceDocument()
        assert document.corrections == []
        assert document.validated_rules.max_scales_by_element == {}
        assert document.validated_rules.enforce_scale_isolation is False
        assert document.learning_metadata.total_corrections == 0
        assert document.learning_metadata.most_common_issue == "none"
