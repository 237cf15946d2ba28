"""
Tests for composite rule keys
"""

from motion_rules.services.learning import element_key, transition_key


class TestElementKey:
    """Test suite for element_key"""

    def test_format(self):
        assert element_key("text_block", 800, 200) == "text_block_800x200"

    def test_integral_floats_match_ints(self):
        assert element_key("text_block", 800.0, 200.0) == element_key("text_block", 800, 200)

    def test_fractional_size_kept(self):
        assert element_key("logo", 120.5, 60) == "logo_120.5x60"


class TestTransitionKey:
    """Test suite for transition_key"""

    def test_format(self):
        assert transition_key("Intro", "Features") == "Intro_to_Features"
