"""
Engine settings

Values an embedding host may override through MOTION_RULES_* environment
variables (or a .env file). Engine services never read the environment
themselves; hosts pass these values into repositories explicitly.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from .paths import PREFERENCES_PATH, TEMPLATE_REGISTRY_PATH


def parse_bool_env(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class EngineSettings:
    """Resolved engine settings"""
    preferences_path: Path
    template_registry_path: Path
    log_level: str = "INFO"
    log_json: bool = False


def get_settings() -> EngineSettings:
    """Build settings from the environment, falling back to package defaults

    Environment variables:
        MOTION_RULES_PREFERENCES_PATH: Correction store document
        MOTION_RULES_TEMPLATE_REGISTRY_PATH: Template library document
        MOTION_RULES_LOG_LEVEL: Logging level name
        MOTION_RULES_LOG_JSON: "true" for structured JSON logs
    """
    preferences_path = os.getenv("MOTION_RULES_PREFERENCES_PATH")
    registry_path = os.getenv("MOTION_RULES_TEMPLATE_REGISTRY_PATH")

    return EngineSettings(
        preferences_path=Path(preferences_path) if preferences_path else PREFERENCES_PATH,
        template_registry_path=Path(registry_path) if registry_path else TEMPLATE_REGISTRY_PATH,
        log_level=os.getenv("MOTION_RULES_LOG_LEVEL", "INFO").upper(),
        log_json=parse_bool_env("MOTION_RULES_LOG_JSON"),
    )
