"""
Tests for engine settings
"""

from pathlib import Path

from motion_rules.config import (
    PREFERENCES_PATH,
    TEMPLATE_REGISTRY_PATH,
    get_settings,
    parse_bool_env,
)
from motion_rules.services.use_cases import AnimationReviewRequest, AnimationReviewUseCase


class TestGetSettings:
    """Test suite for get_settings"""

    def test_defaults(self, monkeypatch):
        for name in (
            "MOTION_RULES_PREFERENCES_PATH",
            "MOTION_RULES_TEMPLATE_REGISTRY_PATH",
            "MOTION_RULES_LOG_LEVEL",
            "MOTION_RULES_LOG_JSON",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = get_settings()

        assert settings.preferences_path == PREFERENCES_PATH
        assert settings.template_registry_path == TEMPLATE_REGISTRY_PATH
        assert settings.log_level == "INFO"
        assert settings.log_json is False

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("MOTION_RULES_PREFERENCES_PATH", str(tmp_path / "prefs.json"))
        monkeypatch.setenv("MOTION_RULES_TEMPLATE_REGISTRY_PATH", str(tmp_path / "registry.json"))
        monkeypatch.setenv("MOTION_RULES_LOG_LEVEL", "debug")
        monkeypatch.setenv("MOTION_RULES_LOG_JSON", "true")

        settings = get_settings()

        assert settings.preferences_path == Path(tmp_path / "prefs.json")
        assert settings.template_registry_path == Path(tmp_path / "registry.json")
        assert settings.log_level == "DEBUG"
        assert settings.log_json is True

    def test_default_paths_live_under_data_dir(self):
        assert PREFERENCES_PATH.parent.parent.name == "data"
        assert TEMPLATE_REGISTRY_PATH.name == "template-registry.json"


class TestParseBoolEnv:
    """Test suite for parse_bool_env"""

    def test_truthy_values(self, monkeypatch):
        for value in ("1", "true", "YES", " on "):
            monkeypatch.setenv("MOTION_RULES_FLAG", value)
            assert parse_bool_env("MOTION_RULES_FLAG") is True

    def test_falsy_value(self, monkeypatch):
        monkeypatch.setenv("MOTION_RULES_FLAG", "off")
        assert parse_bool_env("MOTION_RULES_FLAG", default=True) is False

    def test_missing_uses_default(self, monkeypatch):
        monkeypatch.delenv("MOTION_RULES_FLAG", raising=False)
        assert parse_bool_env("MOTION_RULES_FLAG", default=True) is True


class TestEngineIgnoresEnvironment:
    """Engine services never resolve paths from the environment"""

    def test_review_does_not_touch_configured_paths(self, monkeypatch, tmp_path, store, template_library, compliant_spec):
        preferences = tmp_path / "env-preferences.json"
        registry = tmp_path / "env-registry.json"
        monkeypatch.setenv("MOTION_RULES_PREFERENCES_PATH", str(preferences))
        monkeypatch.setenv("MOTION_RULES_TEMPLATE_REGISTRY_PATH", str(registry))

        AnimationReviewUseCase(store, template_library).execute(AnimationReviewRequest(spec=compliant_spec))

        assert get_settings().preferences_path == preferences
        assert not preferences.exists()
        assert not registry.exists()
