"""Tests for console and Markdown report formatting."""

from policy_review.pipeline import generate_policy_report
from policy_review.rules import DEMO_VIOLATIONS
from policy_review.models import PolicyRule, Violation
from policy_review.utils import (
    get_severity_emoji,
    get_category_emoji,
    format_console_report,
    format_markdown_report,
)


class TestEmoji:
    """Tests for emoji lookups."""

    def test_known_severity(self):
        assert get_severity_emoji("critical") == "🔴"
        assert get_severity_emoji("low") == "🟢"

    def test_unknown_severity_falls_back(self):
        assert get_severity_emoji("blocker") == "⚪"

    def test_known_category(self):
        assert get_category_emoji("audit") == "📋"

    def test_unknown_category_falls_back(self):
        assert get_category_emoji("missing input validation") == "📝"


class TestConsoleReport:
    """Tests for format_console_report."""

    def test_failed_demo_report(self):
        """Given the demo report, should show counts, details and failure notice."""
        # Given
        report = generate_policy_report(DEMO_VIOLATIONS)

        # When
        text = format_console_report(report)

        # Then
        assert text.startswith("🏦 Bank Policy Review Demo")
        assert "Total violations: 5" in text
        assert "Critical: 2" in text
        assert "Passed: ❌ NO" in text
        assert "- 🔒 security: 3" in text
        assert "1. 🔴 Hardcoded Credentials (Line 7)" in text
        assert "   Code: password: 'admin123', // BANK_002: Hardcoded credentials detected" in text
        assert "Overall Status: ❌ FAILED" in text
        assert "Please address the violations above before proceeding." in text
        assert text.endswith("The system would automatically scan pull requests and generate these reports.")

    def test_passed_report(self):
        """Given no violations, should show the pass notice."""
        # When
        text = format_console_report(generate_policy_report([]))

        # Then
        assert "Passed: ✅ YES" in text
        assert "Overall Status: ✅ PASSED" in text
        assert "✅ This code passes the bank policy review!" in text
        assert "Please address" not in text

    def test_hide_code(self):
        text = format_console_report(generate_policy_report(DEMO_VIOLATIONS), show_code=False)

        assert "Code:" not in text
        assert "Remediation: Use parameterized queries or ORM libraries" in text

    def test_recommendations_listed_in_order(self):
        report = generate_policy_report(DEMO_VIOLATIONS)

        text = format_console_report(report)

        positions = [text.index(f"- {rec}") for rec in report.recommendations]
        assert positions == sorted(positions)


class TestMarkdownReport:
    """Tests for format_markdown_report."""

    def test_groups_by_severity(self):
        """Given the demo report, should group violations under severity headings."""
        # When
        body = format_markdown_report(generate_policy_report(DEMO_VIOLATIONS))

        # Then
        assert body.startswith("## Bank Policy Review: ❌ FAILED")
        assert "Found **5** violations:" in body
        assert "### 🔴 CRITICAL (2)" in body
        assert "### 🟠 HIGH (2)" in body
        assert "### 🟡 MEDIUM (1)" in body
        assert "LOW" not in body
        assert "- **BANK_003 SQL Injection Risk** (line 29)" in body
        assert "### Recommendations" in body

    def test_clean_review(self):
        body = format_markdown_report(generate_policy_report([]))

        assert body.startswith("## Bank Policy Review: ✅ PASSED")
        assert "No policy violations found." in body
        assert "### Recommendations" not in body

    def test_reports_unrecognized_severity(self):
        rule = PolicyRule(id="X_001", name="Odd Rule", severity="blocker", category="compliance")
        violation = Violation(rule=rule, line_number=3, code="", message="m", remediation="r")

        body = format_markdown_report(generate_policy_report([violation]))

        assert "- Unrecognized severity: 1" in body
