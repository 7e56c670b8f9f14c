"""Bank policy rules and the demo violation set."""

from typing import Dict, List

from .models import PolicyRule, Violation


BANK_RULES: Dict[str, PolicyRule] = {
    rule.id: rule
    for rule in [
        PolicyRule(id="BANK_001", name="Personal Data Exposure", severity="critical", category="data-protection"),
        PolicyRule(id="BANK_002", name="Hardcoded Credentials", severity="critical", category="security"),
        PolicyRule(id="BANK_003", name="SQL Injection Risk", severity="high", category="security"),
        PolicyRule(id="BANK_005", name="Missing Input Validation", severity="medium", category="security"),
        PolicyRule(id="BANK_006", name="Audit Trail Missing", severity="high", category="audit"),
    ]
}


# Simulated findings against the bundled example file; never produced by analysis
DEMO_VIOLATIONS: List[Violation] = [
    Violation(
        rule=BANK_RULES["BANK_002"],
        line_number=7,
        code="  password: 'admin123', // BANK_002: Hardcoded credentials detected",
        message="Hardcoded credentials detected - security risk",
        remediation="Use environment variables, secure vaults, or configuration management",
    ),
    Violation(
        rule=BANK_RULES["BANK_001"],
        line_number=16,
        code="  console.log(`Processing customer: ${customer.ssn}`) // BANK_001: Personal data exposure",
        message="Potential exposure of sensitive financial data detected",
        remediation="Use encryption, masking, or secure data handling practices",
    ),
    Violation(
        rule=BANK_RULES["BANK_003"],
        line_number=29,
        code="  const query = `SELECT * FROM users WHERE id = ${userId}` // BANK_003: SQL injection risk",
        message="Potential SQL injection vulnerability detected",
        remediation="Use parameterized queries or ORM libraries",
    ),
    Violation(
        rule=BANK_RULES["BANK_006"],
        line_number=48,
        code="function transferMoney(fromAccount: string, toAccount: string, amount: number) {",
        message="Financial operation detected without audit logging",
        remediation="Implement comprehensive audit logging for all financial operations",
    ),
    Violation(
        rule=BANK_RULES["BANK_005"],
        line_number=40,
        code="  const amount = req.body.amount // BANK_005: Missing input validation",
        message="User input used without validation",
        remediation="Implement proper input validation and sanitization",
    ),
]
