"""
Tests for the Rule Enforcer
"""

import pytest

from motion_rules.models import CorrectionInput, IssueType
from motion_rules.services.enforcement import RuleEnforcer, Severity


@pytest.fixture
def enforcer(store):
    return RuleEnforcer(store)


def _learn_max_scale(store, scale=1.3):
    store.record_correction(CorrectionInput(
        issue_type=IssueType.CROP,
        corrected_parameters={"scale": scale},
        element_context={"type": "text_block", "size": {"width": 800, "height": 200}},
    ))


class TestEnforceAll:
    """Test suite for RuleEnforcer.enforce_all"""

    def test_compliant_spec(self, enforcer, compliant_spec):
        result = enforcer.enforce_all(compliant_spec)

        assert result.valid is True
        assert result.violations == []
        assert result.must_fix == []
        assert enforcer.can_generate(compliant_spec) is True

    @pytest.mark.parametrize("entry", [None, "none", "instant"])
    def test_missing_entry_transition(self, enforcer, make_spec, entry):
        result = enforcer.enforce_all(make_spec({1: {"entry_transition": entry}}))

        assert result.valid is False
        assert any("Features" in item for item in result.must_fix)
        violation = result.violations[0]
        assert violation.rule == "every_scene_must_have_entry_transition"
        assert violation.severity == Severity.CRITICAL
        assert violation.location == "Features"

    def test_fast_element_without_blur(self, enforcer, make_spec, text_block):
        result = enforcer.enforce_all(make_spec({0: {"elements": [text_block(velocity=12)]}}))

        assert result.valid is False
        learned = [v for v in result.violations if v.rule == "motion_blur_required_for_fast_movement"]
        assert len(learned) == 1
        assert learned[0].is_critical
        assert learned[0].location == "Intro/text_block"
        assert "12" in learned[0].issue

    def test_fast_element_with_blur(self, enforcer, make_spec, text_block):
        spec = make_spec({0: {"elements": [text_block(velocity=12)], "has_motion_blur": True}})
        assert enforcer.enforce_all(spec).valid is True

    def test_base_violations_become_critical(self, enforcer, make_spec):
        result = enforcer.enforce_all(make_spec(font="Georgia, serif"))

        assert result.valid is False
        violation = result.violations[0]
        assert violation.rule == "base.typography"
        assert violation.severity == Severity.CRITICAL
        assert violation.location == "animation"
        assert result.must_fix[0].startswith("FONT:")

    def test_can_generate_includes_base_rules(self, enforcer, make_spec):
        assert enforcer.can_generate(make_spec(duration=999)) is False

    def test_valid_counts_both_layers(self, enforcer, make_spec):
        result = enforcer.enforce_all(make_spec({2: {"entry_transition": None}}, font="Georgia"))

        assert [v.rule for v in result.violations] == [
            "base.typography",
            "every_scene_must_have_entry_transition",
        ]
        assert result.critical_count == 2
        assert len(result.must_fix) == 2


class TestLearnedRules:
    """Test suite for checks driven by learned rules"""

    def test_scale_isolation_only_when_learned(self, enforcer, store, make_spec, text_block):
        spec = make_spec({0: {"elements": [text_block(scale=1.2)]}})
        assert not any(v.rule == "scale_isolation" for v in enforcer.enforce_learned_rules(spec).violations)

        store.record_correction(CorrectionInput(issue_type=IssueType.COMPOUND_SCALING))
        result = enforcer.enforce_learned_rules(spec)

        assert result.valid is False
        assert [v.rule for v in result.violations] == ["scale_isolation"]
        assert result.must_fix == ["Intro/text_block: Remove scale (use shot-level scale only)"]

    def test_identity_scale_passes_isolation(self, enforcer, store, make_spec, text_block):
        store.record_correction(CorrectionInput(issue_type=IssueType.COMPOUND_SCALING))
        assert enforcer.enforce_learned_rules(make_spec({0: {"elements": [text_block(scale=1.0)]}})).valid is True

    def test_learned_max_scale_exceeded(self, enforcer, store, make_spec, text_block):
        _learn_max_scale(store)
        result = enforcer.enforce_learned_rules(make_spec({0: {"elements": [text_block(scale=1.5)]}}))

        assert result.valid is False
        violation = result.violations[0]
        assert violation.rule == "max_safe_scale"
        assert "will crop" in violation.issue
        assert violation.fix == "Reduce scale to 1.3x or smaller"

    def test_learned_max_scale_respected(self, enforcer, store, make_spec, text_block):
        _learn_max_scale(store)
        assert enforcer.enforce_learned_rules(make_spec({0: {"elements": [text_block(scale=1.3)]}})).valid is True

    def test_learned_rules_skip_base_checks(self, enforcer, make_spec):
        assert enforcer.enforce_learned_rules(make_spec(font="Georgia")).valid is True


class TestDeadSpace:
    """Test suite for inter-scene gaps"""

    def test_gap_is_warning_only(self, enforcer, make_spec):
        result = enforcer.enforce_all(make_spec({1: {"start_frame": 90, "end_frame": 165}}))

        assert result.valid is True
        assert result.warnings == ["15 frame gap between Intro and Features"]
        gap = [v for v in result.violations if v.rule == "no_dead_space"]
        assert len(gap) == 1
        assert gap[0].severity == Severity.WARNING
        assert result.must_fix == []

    def test_overlapping_scenes_have_no_gap(self, enforcer, make_spec):
        result = enforcer.enforce_all(make_spec({1: {"start_frame": 60}}))
        assert result.warnings == []


class TestRecommendations:
    """Test suite for exit/entry pairing recommendations"""

    def test_wipe_up_pairs_with_slide_up_from_bottom(self, enforcer, make_spec):
        result = enforcer.enforce_all(make_spec({0: {"exit_type": "wipe-up"}}))

        assert result.valid is True
        assert result.recommendations == [
            "Features should enter from bottom (slide-up-from-bottom) to replace Intro exiting upward"
        ]

    def test_matching_pair_has_no_recommendation(self, enforcer, make_spec):
        spec = make_spec({0: {"exit_type": "wipe-up"}, 1: {"entry_transition": "slide-up-from-bottom"}})
        assert enforcer.enforce_all(spec).recommendations == []

    def test_wipe_left_pairs_with_wipe_right(self, enforcer, make_spec):
        result = enforcer.enforce_all(make_spec({1: {"exit_type": "wipe-left"}}))
        assert result.recommendations == [
            "Outro should enter from right (wipe-right) to replace Features exiting left"
        ]

    def test_last_scene_exit_ignored(self, enforcer, make_spec):
        assert enforcer.enforce_all(make_spec({2: {"exit_type": "wipe-up"}})).recommendations == []
