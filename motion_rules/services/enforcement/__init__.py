"""Rule Enforcer - base + learned checks combined into one verdict."""

from .enforcer import (
    Severity,
    Violation,
    EnforcementResult,
    RuleEnforcer,
)
from .report import generate_enforcement_report

__all__ = [
    "Severity",
    "Violation",
    "EnforcementResult",
    "RuleEnforcer",
    "generate_enforcement_report",
]
