"""Compatibility score — 100 minus weighted penalties, clamped to [0, 100]."""

from __future__ import annotations

from typing import Dict, List

from buildcheck.models.results import (
    CompatibilityIssue,
    IssueType,
    LimitViolation,
    Severity,
    ViolationSeverity,
)

MAX_SCORE = 100

ISSUE_PENALTIES: Dict[Severity, int] = {
    Severity.CRITICAL: 30,
    Severity.WARNING: 10,
    Severity.INFO: 2,
}

VIOLATION_PENALTIES: Dict[ViolationSeverity, int] = {
    ViolationSeverity.ERROR: 25,
    ViolationSeverity.WARNING: 10,
}

# "Not yet configured" is not a defect of the build.
UNSCORED_ISSUE_TYPES = {IssueType.MISSING_PART}


def issue_penalty(issue: CompatibilityIssue) -> int:
    if issue.type in UNSCORED_ISSUE_TYPES:
        return 0
    return ISSUE_PENALTIES[issue.severity]


def violation_penalty(violation: LimitViolation) -> int:
    return VIOLATION_PENALTIES[violation.severity]


def compute_score(
    issues: List[CompatibilityIssue],
    violations: List[LimitViolation],
) -> int:
    """Adding an issue or violation never raises the score."""
    penalty = sum(issue_penalty(i) for i in issues)
    penalty += sum(violation_penalty(v) for v in violations)
    return max(0, min(MAX_SCORE, MAX_SCORE - penalty))
