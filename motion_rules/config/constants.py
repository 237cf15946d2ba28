"""
Constants configuration

Document versions and the frame rate every frame count is expressed in.
"""

PREFERENCES_VERSION = "1.0.0"
TEMPLATE_REGISTRY_VERSION = "1.0.0"

# All frame counts in specs and templates assume this rate
DEFAULT_FPS = 30

__all__ = [
    "PREFERENCES_VERSION",
    "TEMPLATE_REGISTRY_VERSION",
    "DEFAULT_FPS",
]
