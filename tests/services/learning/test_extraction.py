"""
Tests for learned-rule extraction and merging
"""

import logging

import pytest

from motion_rules.models import CorrectionInput, IssueType, ValidatedRules
from motion_rules.services.learning import (
    MaxScaleRule,
    PreferredTransitionRule,
    ScaleIsolationRule,
    TimingRule,
    extract_rule,
    merge_rule,
)


def _crop(**overrides):
    fields = dict(
        issue_type=IssueType.CROP,
        original_parameters={"scale": 1.4},
        corrected_parameters={"scale": 1.19},
        element_context={"type": "code_editor", "size": {"width": 1500, "height": 850}},
    )
    fields.update(overrides)
    return CorrectionInput(**fields)


class TestExtractRule:
    """Test suite for extract_rule"""

    def test_crop_yields_max_scale(self):
        rule = extract_rule(_crop())
        assert rule == MaxScaleRule(key="code_editor_1500x850", max_scale=1.19)
        assert rule.describe() == "max_scale[code_editor_1500x850]=1.19"

    def test_crop_without_size(self):
        assert extract_rule(_crop(element_context={"type": "code_editor"})) is None

    def test_crop_without_context(self):
        assert extract_rule(_crop(element_context=None)) is None

    def test_crop_without_corrected_scale(self):
        assert extract_rule(_crop(corrected_parameters={})) is None

    def test_transition_type(self):
        correction = CorrectionInput(
            issue_type=IssueType.TRANSITION_TYPE,
            original_parameters={"transition_from": "Intro", "transition_to": "Features"},
            corrected_parameters={"transition_type": "wipe-left"},
        )
        assert extract_rule(correction) == PreferredTransitionRule(key="Intro_to_Features", transition="wipe-left")

    def test_transition_type_missing_target(self):
        correction = CorrectionInput(
            issue_type=IssueType.TRANSITION_TYPE,
            original_parameters={"transition_from": "Intro"},
            corrected_parameters={"transition_type": "wipe-left"},
        )
        assert extract_rule(correction) is None

    def test_timing_with_duration(self):
        correction = CorrectionInput(
            issue_type=IssueType.TIMING,
            corrected_parameters={"duration": 20, "easing": "ease-out"},
        )
        assert extract_rule(correction) == TimingRule(parameters={"duration": 20, "easing": "ease-out"})

    def test_timing_without_duration_or_delay(self):
        correction = CorrectionInput(issue_type=IssueType.TIMING, corrected_parameters={"easing": "linear"})
        assert extract_rule(correction) is None

    def test_compound_scaling_ignores_payload(self):
        correction = CorrectionInput(issue_type=IssueType.COMPOUND_SCALING)
        assert extract_rule(correction) == ScaleIsolationRule(max_levels_with_scale=1)

    def test_logged_only_issue_type(self, caplog):
        correction = CorrectionInput(issue_type=IssueType.OVERLAP, issue_description="Title overlaps logo")

        with caplog.at_level(logging.DEBUG, logger="motion_rules.services.learning.extraction"):
            assert extract_rule(correction) is None

        assert any(r.getMessage() == "No rule extracted from correction" for r in caplog.records)


class TestMergeRule:
    """Test suite for merge_rule"""

    def test_each_variant(self):
        rules = ValidatedRules()

        merge_rule(rules, MaxScaleRule(key="text_block_800x200", max_scale=1.3))
        merge_rule(rules, PreferredTransitionRule(key="Intro_to_Features", transition="wipe-left"))
        merge_rule(rules, TimingRule(parameters={"delay": 5}))
        merge_rule(rules, ScaleIsolationRule())

        assert rules.max_scales_by_element == {"text_block_800x200": 1.3}
        assert rules.preferred_transitions == {"Intro_to_Features": "wipe-left"}
        assert rules.timing_preferences == {"delay": 5}
        assert rules.enforce_scale_isolation is True
        assert rules.max_levels_with_scale == 1

    def test_later_rule_overwrites_key(self):
        rules = ValidatedRules()
        merge_rule(rules, MaxScaleRule(key="text_block_800x200", max_scale=1.3))
        merge_rule(rules, MaxScaleRule(key="text_block_800x200", max_scale=1.2))
        assert rules.max_scales_by_element["text_block_800x200"] == 1.2

    def test_timing_merges(self):
        rules = ValidatedRules()
        merge_rule(rules, TimingRule(parameters={"delay": 5}))
        merge_rule(rules, TimingRule(parameters={"duration": 20}))
        assert rules.timing_preferences == {"delay": 5, "duration": 20}

    def test_unknown_payload(self):
        with pytest.raises(TypeError):
            merge_rule(ValidatedRules(), {"max_scale": 1.2})
