"""Data models for policy rules and violations."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Severity(Enum):
    """Violation severity levels."""
    CRITICAL = "critical"   # Must be fixed before review can pass
    HIGH = "high"           # Blocks the review as well
    MEDIUM = "medium"       # Worth fixing, does not block
    LOW = "low"             # Informational

    @classmethod
    def from_value(cls, value: str) -> Optional["Severity"]:
        """Return the matching severity, or None for an unknown value."""
        for severity in cls:
            if severity.value == value:
                return severity
        return None


class Category(Enum):
    """Known rule categories. Rules may use categories outside this set."""
    SECURITY = "security"
    COMPLIANCE = "compliance"
    DATA_PROTECTION = "data-protection"
    AUDIT = "audit"
    REGULATORY = "regulatory"


@dataclass(frozen=True)
class PolicyRule:
    """Static definition of a bank policy check."""
    id: str
    name: str
    severity: str   # Severity value
    category: str   # Category value or any other string


@dataclass(frozen=True)
class Violation:
    """A single reported instance of a rule being broken."""
    rule: PolicyRule
    line_number: int
    code: str
    message: str
    remediation: str

    @property
    def severity(self) -> str:
        return self.rule.severity

    @property
    def category(self) -> str:
        return self.rule.category
