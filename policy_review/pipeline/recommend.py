"""Recommendation generation from review summary counts."""

from typing import List

from ..models import ReviewSummary, Category


CRITICAL_RECOMMENDATION = "🔴 CRITICAL: Address all critical security violations immediately"
HIGH_RECOMMENDATION = "🟠 HIGH: Review and fix high-priority security issues"
MEDIUM_RECOMMENDATION = "🟡 MEDIUM: Consider addressing medium-priority issues"

# Checked in this order; first matching category comes first in the report
CATEGORY_RECOMMENDATIONS = [
    (Category.DATA_PROTECTION.value, "📊 Data Protection: Implement proper data handling and encryption"),
    (Category.AUDIT.value, "📋 Audit: Add comprehensive audit logging for financial operations"),
    (Category.SECURITY.value, "🔒 Security: Review and fix security vulnerabilities"),
]


def build_recommendations(summary: ReviewSummary) -> List[str]:
    """
    Build the ordered recommendation list for a summary.

    Severity recommendations come first (critical, high, medium), followed
    by category recommendations (data-protection, audit, security). Each
    one is added at most once, and only when its count is non-zero.

    Args:
        summary: Aggregated review counts

    Returns:
        List of recommendation strings
    """
    recommendations = []

    if summary.critical > 0:
        recommendations.append(CRITICAL_RECOMMENDATION)
    if summary.high > 0:
        recommendations.append(HIGH_RECOMMENDATION)
    if summary.medium > 0:
        recommendations.append(MEDIUM_RECOMMENDATION)

    for category, recommendation in CATEGORY_RECOMMENDATIONS:
        if summary.by_category.get(category, 0) > 0:
            recommendations.append(recommendation)

    return recommendations
