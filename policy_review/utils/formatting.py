"""Report formatting for console and Markdown output."""

from typing import List

from ..models import PolicyReport, Severity


SEVERITY_EMOJI = {
    "critical": "🔴",
    "high": "🟠",
    "medium": "🟡",
    "low": "🟢",
}

CATEGORY_EMOJI = {
    "security": "🔒",
    "compliance": "⚖️",
    "data-protection": "📊",
    "audit": "📋",
    "regulatory": "🏛️",
}

DISCLAIMER = [
    "This is a demonstration of the bank policy review feature.",
    "In a real implementation, this would be integrated with your code review system.",
    "The system would automatically scan pull requests and generate these reports.",
]


def get_severity_emoji(severity: str) -> str:
    return SEVERITY_EMOJI.get(severity, "⚪")


def get_category_emoji(category: str) -> str:
    return CATEGORY_EMOJI.get(category, "📝")


def format_console_report(report: PolicyReport, show_code: bool = True) -> str:
    """
    Format a policy report as console text.

    Args:
        report: Report to format
        show_code: Include the offending code line for each violation

    Returns:
        Formatted report string
    """
    summary = report.summary
    lines = [
        "🏦 Bank Policy Review Demo",
        "",
        "📊 Policy Review Results:",
        f"Total violations: {summary.total}",
        f"Critical: {summary.critical}",
        f"High: {summary.high}",
        f"Medium: {summary.medium}",
        f"Low: {summary.low}",
        f"Passed: {'✅ YES' if report.passed else '❌ NO'}",
        "",
        "📋 Violations by Category:",
    ]

    for category, count in summary.by_category.items():
        lines.append(f"- {get_category_emoji(category)} {category}: {count}")
    lines.append("")

    lines.append("🔍 Detailed Violations:")
    for index, violation in enumerate(report.violations, start=1):
        emoji = get_severity_emoji(violation.severity)
        lines.append(f"{index}. {emoji} {violation.rule.name} (Line {violation.line_number})")
        lines.append(f"   Message: {violation.message}")
        lines.append(f"   Remediation: {violation.remediation}")
        if show_code:
            lines.append(f"   Code: {violation.code.strip()}")
        lines.append("")

    lines.append("💡 Recommendations:")
    for recommendation in report.recommendations:
        lines.append(f"- {recommendation}")
    lines.append("")

    lines.append(f"Overall Status: {'✅ PASSED' if report.passed else '❌ FAILED'}")
    lines.append("")
    if report.passed:
        lines.append("✅ This code passes the bank policy review!")
    else:
        lines.append(
            "⚠️  This code would fail a bank policy review due to critical "
            "or high-priority violations."
        )
        lines.append("Please address the violations above before proceeding.")

    lines.append("")
    lines.append("---")
    lines.extend(DISCLAIMER)

    return "\n".join(lines)


def format_markdown_report(report: PolicyReport) -> str:
    """Format a policy report as a Markdown review summary."""
    summary = report.summary
    status = "✅ PASSED" if report.passed else "❌ FAILED"
    body_parts: List[str] = [f"## Bank Policy Review: {status}\n"]

    if not report.violations:
        body_parts.append("No policy violations found.\n")
    else:
        body_parts.append(f"Found **{summary.total}** violations:\n")
        body_parts.append(f"- Critical: {summary.critical}")
        body_parts.append(f"- High: {summary.high}")
        body_parts.append(f"- Medium: {summary.medium}")
        body_parts.append(f"- Low: {summary.low}")
        if summary.unrecognized:
            body_parts.append(f"- Unrecognized severity: {summary.unrecognized}")

        for severity in Severity:
            matching = [v for v in report.violations if v.severity == severity.value]
            if not matching:
                continue
            emoji = get_severity_emoji(severity.value)
            body_parts.append(f"\n### {emoji} {severity.value.upper()} ({len(matching)})\n")
            for violation in matching:
                body_parts.append(
                    f"- **{violation.rule.id} {violation.rule.name}** (line {violation.line_number}) - "
                    f"{violation.message}"
                )

    if report.recommendations:
        body_parts.append("\n### Recommendations\n")
        for recommendation in report.recommendations:
            body_parts.append(f"- {recommendation}")

    body_parts.append("\n\n---\n*" + " ".join(DISCLAIMER) + "*")

    return "\n".join(body_parts)
