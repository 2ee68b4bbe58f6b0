"""Constraint validator — usage vs. physical limits, and price vs. budget.

Slot, connector and expansion overflow make a build physically impossible
(``error``). Fan-mount overflow and budget overflow still leave a buildable
machine (``warning``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from buildcheck.models.results import (
    LimitViolation,
    PhysicalLimits,
    SlotUsage,
    ViolationSeverity,
    ViolationType,
)


# ──────────────────────────────────────────────
# Resource Rules
# ──────────────────────────────────────────────


@dataclass(frozen=True)
class ResourceRule:
    """One ``used > max`` comparison."""

    label: str
    used_field: str
    max_field: str
    type: ViolationType
    severity: ViolationSeverity


# Evaluation (and output) order.
RESOURCE_RULES: List[ResourceRule] = [
    ResourceRule(
        "M.2 slots", "m2_slots_used", "max_m2_slots",
        ViolationType.SLOT_OVERFLOW, ViolationSeverity.ERROR,
    ),
    ResourceRule(
        "SATA connectors", "sata_connectors_used", "max_sata_connectors",
        ViolationType.SLOT_OVERFLOW, ViolationSeverity.ERROR,
    ),
    ResourceRule(
        "Memory slots", "memory_slot_used", "max_memory_slots",
        ViolationType.SLOT_OVERFLOW, ViolationSeverity.ERROR,
    ),
    ResourceRule(
        "Fan mounts", "fan_mounts_used", "max_fan_mounts",
        ViolationType.SLOT_OVERFLOW, ViolationSeverity.WARNING,
    ),
    ResourceRule(
        "Expansion slots", "expansion_slots_used", "max_expansion_slots",
        ViolationType.SLOT_OVERFLOW, ViolationSeverity.ERROR,
    ),
    ResourceRule(
        "Power connectors", "power_connectors_used", "max_power_connectors",
        ViolationType.POWER_SHORTAGE, ViolationSeverity.ERROR,
    ),
]


# ──────────────────────────────────────────────
# Validation
# ──────────────────────────────────────────────


def validate_constraints(
    usage: SlotUsage,
    limits: PhysicalLimits,
    total_price: int,
    budget: Optional[int] = None,
) -> List[LimitViolation]:
    """Return every capacity / budget violation, in rule order."""
    violations: List[LimitViolation] = []

    for rule in RESOURCE_RULES:
        used = getattr(usage, rule.used_field)
        maximum = getattr(limits, rule.max_field)
        if used > maximum:
            violations.append(
                LimitViolation(
                    type=rule.type,
                    message=f"{rule.label} exceeded ({used}/{maximum})",
                    severity=rule.severity,
                )
            )

    # A budget of 0 / None means "no budget set".
    if budget and total_price > budget:
        violations.append(
            LimitViolation(
                type=ViolationType.BUDGET_EXCEEDED,
                message=f"Budget exceeded ({total_price:,}/{budget:,})",
                severity=ViolationSeverity.WARNING,
            )
        )

    return violations


def is_valid(violations: List[LimitViolation]) -> bool:
    """True iff no violation has severity ``error``."""
    return not any(v.severity == ViolationSeverity.ERROR for v in violations)
