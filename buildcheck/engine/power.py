"""Power draw estimation for the PSU adequacy check."""

from __future__ import annotations

import math
from typing import Dict, Optional

from buildcheck.models.configuration import Configuration
from buildcheck.models.parts import Part, PartCategory

# Draw (W) assumed when a part declares neither powerConsumption nor tdp.
DEFAULT_POWER_DRAW: Dict[str, float] = {
    PartCategory.CPU.value: 65,
    PartCategory.GPU.value: 150,
    PartCategory.MOTHERBOARD.value: 25,
    PartCategory.MEMORY.value: 3,
    PartCategory.STORAGE.value: 5,
    PartCategory.COOLER.value: 15,
    PartCategory.CASE.value: 0,
    PartCategory.OTHER.value: 3,
}

# Externally powered or the supply itself.
NON_CONSUMING = {PartCategory.PSU.value, PartCategory.MONITOR.value}

# Case fans, USB devices, LEDs, onboard network.
SYSTEM_BASELINE_WATTS = 16

# PSU should exceed the estimated draw by this fraction.
RECOMMENDED_MARGIN = 0.2
PSU_ROUNDING_WATTS = 50


def part_power_draw(part: Part) -> float:
    """Estimated draw of a single part."""
    if part.category in NON_CONSUMING:
        return 0.0
    specs = part.specifications
    if specs.power_consumption is not None:
        return float(specs.power_consumption)
    tdp: Optional[float] = getattr(specs, "tdp", None)
    if tdp is not None:
        return float(tdp)
    return float(DEFAULT_POWER_DRAW.get(part.category, 0))


def estimate_power_draw(configuration: Configuration) -> float:
    """Sum of every selected part's draw plus the system baseline."""
    return sum(part_power_draw(p) for p in configuration.all_parts()) + SYSTEM_BASELINE_WATTS


def recommended_psu_wattage(draw: float) -> int:
    """Draw plus margin, rounded up to the next 50 W."""
    target = draw * (1 + RECOMMENDED_MARGIN)
    return int(math.ceil(target / PSU_ROUNDING_WATTS) * PSU_ROUNDING_WATTS)
