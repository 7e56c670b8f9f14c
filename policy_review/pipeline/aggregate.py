"""Report aggregation: turn a list of violations into a policy report."""

from typing import Dict, Iterable, Optional

from ..models import Severity, Violation, ReviewSummary, PolicyReport
from ..utils import get_logger
from .recommend import build_recommendations


logger = get_logger(__name__)


def summarize_violations(violations: Iterable[Violation]) -> ReviewSummary:
    """
    Count violations by severity and category.

    Severities are matched exactly against the known levels. A violation
    with any other severity still counts toward the total and its
    category, but lands in ``unrecognized`` instead of a severity bucket.
    """
    violations = list(violations)

    severity_counts = {severity: 0 for severity in Severity}
    unrecognized = 0
    by_category: Dict[str, int] = {}

    for violation in violations:
        severity = Severity.from_value(violation.severity)
        if severity is None:
            unrecognized += 1
            logger.warning(
                f"Unrecognized severity '{violation.severity}' for rule "
                f"{violation.rule.id} (line {violation.line_number})"
            )
        else:
            severity_counts[severity] += 1

        by_category[violation.category] = by_category.get(violation.category, 0) + 1

    return ReviewSummary(
        total=len(violations),
        critical=severity_counts[Severity.CRITICAL],
        high=severity_counts[Severity.HIGH],
        medium=severity_counts[Severity.MEDIUM],
        low=severity_counts[Severity.LOW],
        unrecognized=unrecognized,
        category_counts=tuple(by_category.items()),
    )


def generate_policy_report(violations: Optional[Iterable[Violation]]) -> PolicyReport:
    """
    Generate a policy report from a sequence of violations.

    The review passes only when there are no critical and no high
    violations. Medium and low violations never affect the verdict.

    Args:
        violations: Violations to report on (may be empty)

    Returns:
        PolicyReport with summary, verdict and recommendations

    Raises:
        ValueError: If violations is None
    """
    if violations is None:
        raise ValueError("Violation list required. Pass an empty list for a clean review.")

    violations = tuple(violations)
    summary = summarize_violations(violations)
    passed = summary.critical == 0 and summary.high == 0
    recommendations = tuple(build_recommendations(summary))

    logger.debug(
        f"Summary: total={summary.total}, critical={summary.critical}, "
        f"high={summary.high}, medium={summary.medium}, low={summary.low}, "
        f"unrecognized={summary.unrecognized}"
    )

    return PolicyReport(
        violations=violations,
        summary=summary,
        passed=passed,
        recommendations=recommendations,
    )
