"""
Paths configuration

Default locations for the persisted documents. Nothing is created at import
time; repositories create their parent directory on first save.
"""

from pathlib import Path

PACKAGE_DIR = Path(__file__).parent.parent
PROJECT_DIR = PACKAGE_DIR.parent
DATA_DIR = PROJECT_DIR / "data"
PREFERENCES_PATH = DATA_DIR / "preferences" / "user-preferences.json"
TEMPLATE_REGISTRY_PATH = DATA_DIR / "templates" / "template-registry.json"

__all__ = ["PACKAGE_DIR", "PROJECT_DIR", "DATA_DIR", "PREFERENCES_PATH", "TEMPLATE_REGISTRY_PATH"]
