"""Slot usage accounting — how much of each physical resource is consumed.

Always recomputed from the whole configuration; nothing is carried over
between calls.
"""

from __future__ import annotations

from buildcheck.models.configuration import Configuration
from buildcheck.models.parts import StorageInterface, StoragePart
from buildcheck.models.results import SlotUsage

# Interfaces are matched exactly. Anything else (including a missing
# interface) counts toward neither M.2 nor SATA.
M2_INTERFACES = {StorageInterface.NVME.value}
SATA_INTERFACES = {StorageInterface.SATA.value, StorageInterface.SATA3.value}

# Estimated connectors per selected device (no per-part connector data).
CPU_POWER_CONNECTORS = 1
GPU_POWER_CONNECTORS = 2
EXPANSION_POWER_CONNECTORS = 1


def _interface(storage: StoragePart) -> str:
    return storage.specifications.interface or ""


def compute_slot_usage(configuration: Configuration) -> SlotUsage:
    """Count M.2, SATA, memory, fan, expansion and power connector usage."""
    core = configuration.core
    extra = configuration.additional

    m2_used = sum(1 for s in extra.storage if _interface(s) in M2_INTERFACES)
    sata_used = sum(1 for s in extra.storage if _interface(s) in SATA_INTERFACES)

    memory_used = (1 if core.memory is not None else 0) + len(extra.memory)

    # Heuristic: 1 for the CPU, 2 for the GPU, 1 per expansion card.
    power_used = (
        (CPU_POWER_CONNECTORS if core.cpu is not None else 0)
        + (GPU_POWER_CONNECTORS if core.gpu is not None else 0)
        + EXPANSION_POWER_CONNECTORS * len(extra.expansion)
    )

    return SlotUsage(
        m2_slots_used=m2_used,
        sata_connectors_used=sata_used,
        memory_slot_used=memory_used,
        fan_mounts_used=len(extra.fans),
        expansion_slots_used=len(extra.expansion),
        power_connectors_used=power_used,
    )
