"""CPU / GPU performance tier table for the balance heuristic.

A part's tier comes from its ``performanceTier`` spec when given,
otherwise from its price. Each tier maps to a relative performance score.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from buildcheck.models.parts import CPUPart, GPUPart, PerformanceTier

# ──────────────────────────────────────────────
# Tier Table
# ──────────────────────────────────────────────

TIER_SCORES: dict[PerformanceTier, int] = {
    PerformanceTier.ENTRY: 50,
    PerformanceTier.MAINSTREAM: 70,
    PerformanceTier.HIGH_END: 85,
    PerformanceTier.FLAGSHIP: 95,
}

# (minimum price, tier), highest first.
CPU_PRICE_TIERS: List[Tuple[int, PerformanceTier]] = [
    (80000, PerformanceTier.FLAGSHIP),
    (50000, PerformanceTier.HIGH_END),
    (25000, PerformanceTier.MAINSTREAM),
    (0, PerformanceTier.ENTRY),
]

GPU_PRICE_TIERS: List[Tuple[int, PerformanceTier]] = [
    (150000, PerformanceTier.FLAGSHIP),
    (80000, PerformanceTier.HIGH_END),
    (40000, PerformanceTier.MAINSTREAM),
    (0, PerformanceTier.ENTRY),
]

# Score gaps (exclusive) that flag an imbalance.
SEVERE_GAP = 20
MILD_GAP = 10

_TIER_ORDER = list(TIER_SCORES)


def _tier_by_price(price: int, table: List[Tuple[int, PerformanceTier]]) -> PerformanceTier:
    for minimum, tier in table:
        if price >= minimum:
            return tier
    return PerformanceTier.ENTRY


def cpu_tier(cpu: CPUPart) -> PerformanceTier:
    return cpu.specifications.performance_tier or _tier_by_price(cpu.price, CPU_PRICE_TIERS)


def gpu_tier(gpu: GPUPart) -> PerformanceTier:
    return gpu.specifications.performance_tier or _tier_by_price(gpu.price, GPU_PRICE_TIERS)


def tier_score(tier: PerformanceTier) -> int:
    return TIER_SCORES[tier]


def next_tier(tier: PerformanceTier) -> Optional[PerformanceTier]:
    """The tier one step above, or None at the top."""
    idx = _TIER_ORDER.index(tier)
    if idx + 1 < len(_TIER_ORDER):
        return _TIER_ORDER[idx + 1]
    return None
