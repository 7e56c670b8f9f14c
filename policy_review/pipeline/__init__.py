"""Report pipeline for policy review."""

from .aggregate import generate_policy_report, summarize_violations
from .recommend import build_recommendations

__all__ = [
    "generate_policy_report",
    "summarize_violations",
    "build_recommendations",
]
