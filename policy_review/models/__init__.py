"""Data models for bank policy review."""

from .violation import Severity, Category, PolicyRule, Violation
from .report import ReviewSummary, PolicyReport

__all__ = [
    "Severity",
    "Category",
    "PolicyRule",
    "Violation",
    "ReviewSummary",
    "PolicyReport",
]
