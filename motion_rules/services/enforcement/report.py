"""
Formatting for enforcement reports.
"""

from .enforcer import EnforcementResult


def generate_enforcement_report(result: EnforcementResult) -> str:
    """Markdown report; lists what must be fixed before generating."""
    output = ["# Rule Enforcement Report", ""]

    if result.valid:
        output.append("**ALL CRITICAL RULES PASSED**")
        output.append("")
    else:
        output.append(f"**{result.critical_count} CRITICAL VIOLATIONS**")
        output.append("")
        output.append("**MUST FIX BEFORE GENERATING:**")
        for i, fix in enumerate(result.must_fix, 1):
            output.append(f"{i}. {fix}")
        output.append("")

    if result.violations:
        output.append("## Violations")
        output.append("")
        for i, violation in enumerate(result.violations, 1):
            tag = "CRITICAL" if violation.is_critical else "WARNING"
            output.append(f"### [{tag}] Violation {i}: {violation.rule}")
            output.append(f"**Location**: {violation.location}")
            output.append(f"**Issue**: {violation.issue}")
            output.append(f"**Fix**: {violation.fix}")
            output.append("")

    if result.warnings:
        output.append("## Warnings")
        output.append("")
        for warning in result.warnings:
            output.append(f"- {warning}")
        output.append("")

    if result.recommendations:
        output.append("## Recommendations")
        output.append("")
        for recommendation in result.recommendations:
            output.append(f"- {recommendation}")
        output.append("")

    return "\n".join(output)
