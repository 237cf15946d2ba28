"""
Learning report formatting.
"""

from motion_rules.models import PreferenceDocument


def generate_learning_report(document: PreferenceDocument, recent: int = 5) -> str:
    """Markdown summary of what has been learned, for user review."""
    meta = document.learning_metadata
    rules = document.validated_rules

    lines = [
        "# Preference Learning Report",
        "",
        f"**Total Corrections**: {meta.total_corrections}",
        f"**Total Generations**: {meta.total_generations}",
        f"**Success Rate**: {meta.success_rate * 100:.1f}%",
        f"**Most Common Issue**: {meta.most_common_issue}",
        f"**Most Reliable Rule**: {meta.most_reliable_rule}",
        "",
        "## Learned Rules",
        "",
    ]

    if rules.max_scales_by_element:
        lines.append("### Maximum Safe Scales")
        for key, scale in rules.max_scales_by_element.items():
            lines.append(f"- **{key}**: {scale}x")
        lines.append("")

    if rules.preferred_transitions:
        lines.append("### Preferred Transitions")
        for key, transition in rules.preferred_transitions.items():
            lines.append(f"- **{key}**: {transition}")
        lines.append("")

    if rules.enforce_scale_isolation:
        lines.append("### Scale Isolation")
        lines.append(f"- Enforced, max levels with scale: {rules.max_levels_with_scale}")
        lines.append("")

    lines.append("## Recent Corrections")
    lines.append("")
    for correction in reversed(document.corrections[-recent:]):
        lines.append(f"### {correction.id} ({correction.timestamp.split('T')[0]})")
        lines.append(f"- **Issue**: {correction.issue_description}")
        lines.append(f"- **Learned**: {correction.learned_rule}")
        lines.append(f"- **Confidence**: {correction.confidence.value}")
        lines.append("")

    return "\n".join(lines)
