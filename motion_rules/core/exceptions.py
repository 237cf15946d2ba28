"""
Core Exceptions
Standardized base exceptions for the engine.
"""

class MotionRulesError(Exception):
    """Base exception for all engine errors."""
    pass

class StorageError(MotionRulesError):
    """Raised when a persisted document cannot be written."""
    pass

class TemplateRegistryError(MotionRulesError):
    """Base exception for template registry errors."""
    pass

class DuplicateTemplateError(TemplateRegistryError):
    """A template with the same id is already registered."""
    pass

class TemplateNotFoundError(TemplateRegistryError):
    """No template is registered under the requested id."""
    pass
