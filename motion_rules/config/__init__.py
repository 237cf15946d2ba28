"""
Engine configuration and settings

get_settings() is a helper for embedding hosts: it resolves MOTION_RULES_*
variables into paths and logging options. No engine service or use case
calls it; repositories and registries only ever receive explicit paths.
"""

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

from .paths import (
    PACKAGE_DIR,
    PROJECT_DIR,
    DATA_DIR,
    PREFERENCES_PATH,
    TEMPLATE_REGISTRY_PATH,
)
from .constants import (
    PREFERENCES_VERSION,
    TEMPLATE_REGISTRY_VERSION,
    DEFAULT_FPS,
)
from .settings import EngineSettings, get_settings, parse_bool_env

__all__ = [
    "PACKAGE_DIR",
    "PROJECT_DIR",
    "DATA_DIR",
    "PREFERENCES_PATH",
    "TEMPLATE_REGISTRY_PATH",
    "PREFERENCES_VERSION",
    "TEMPLATE_REGISTRY_VERSION",
    "DEFAULT_FPS",
    "EngineSettings",
    "get_settings",
    "parse_bool_env",
]
