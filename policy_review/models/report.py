"""Data models for the aggregated policy report."""

from dataclasses import dataclass
from typing import Dict, Tuple

from .violation import Violation


@dataclass(frozen=True)
class ReviewSummary:
    """Aggregate counts derived from a set of violations."""
    total: int = 0
    critical: int = 0
    high: int = 0
    medium: int = 0
    low: int = 0
    unrecognized: int = 0   # Severity outside critical/high/medium/low
    category_counts: Tuple[Tuple[str, int], ...] = ()  # (category, count) in first-seen order

    @property
    def by_category(self) -> Dict[str, int]:
        """Category to count mapping (a fresh copy on every access)."""
        return dict(self.category_counts)

    @property
    def blocking(self) -> int:
        """Number of violations that fail the review."""
        return self.critical + self.high


@dataclass(frozen=True)
class PolicyReport:
    """Full output bundle of a policy review."""
    violations: Tuple[Violation, ...]
    summary: ReviewSummary
    passed: bool
    recommendations: Tuple[str, ...] = ()

    @property
    def status(self) -> str:
        return "PASSED" if self.passed else "FAILED"
