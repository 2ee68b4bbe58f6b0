"""Reference physical spec tables — chipsets and case types."""

from __future__ import annotations

from typing import Dict

from buildcheck.catalog.specs import CasePhysicalSpec, MotherboardPhysicalSpec

# Bump whenever a table below changes (invalidates cached evaluations).
CATALOG_VERSION = "2024.1"


# ──────────────────────────────────────────────
# Motherboards — keyed by chipset id
# ──────────────────────────────────────────────

MOTHERBOARD_SPECS: Dict[str, MotherboardPhysicalSpec] = {
    "Z790": MotherboardPhysicalSpec(
        chipset="Z790", socket="LGA1700", form_factor="ATX",
        m2_slots=4, sata_connectors=6, memory_slots=4,
        expansion_slots=7, max_memory_capacity=128,
    ),
    "Z690": MotherboardPhysicalSpec(
        chipset="Z690", socket="LGA1700", form_factor="ATX",
        m2_slots=3, sata_connectors=6, memory_slots=4,
        expansion_slots=7, max_memory_capacity=128,
    ),
    "X670E": MotherboardPhysicalSpec(
        chipset="X670E", socket="AM5", form_factor="ATX",
        m2_slots=4, sata_connectors=8, memory_slots=4,
        expansion_slots=7, max_memory_capacity=128,
    ),
    "B650": MotherboardPhysicalSpec(
        chipset="B650", socket="AM5", form_factor="ATX",
        m2_slots=2, sata_connectors=4, memory_slots=4,
        expansion_slots=5, max_memory_capacity=128,
    ),
    "B660M": MotherboardPhysicalSpec(
        chipset="B660", socket="LGA1700", form_factor="micro-ATX",
        m2_slots=2, sata_connectors=4, memory_slots=4,
        expansion_slots=4, max_memory_capacity=128,
    ),
    "X670E-I": MotherboardPhysicalSpec(
        chipset="X670E", socket="AM5", form_factor="mini-ITX",
        m2_slots=2, sata_connectors=2, memory_slots=2,
        expansion_slots=1, max_memory_capacity=64,
    ),
}


# ──────────────────────────────────────────────
# Cases — keyed by case type id
# ──────────────────────────────────────────────

CASE_SPECS: Dict[str, CasePhysicalSpec] = {
    "full-tower-premium": CasePhysicalSpec(
        case_type="full-tower-premium",
        form_factors=["E-ATX", "ATX", "micro-ATX", "mini-ITX"],
        max_gpu_length=420, max_cpu_cooler_height=190,
        max_psu_length=250, max_fan_mounts=9,
    ),
    "mid-tower-standard": CasePhysicalSpec(
        case_type="mid-tower-standard",
        form_factors=["ATX", "micro-ATX", "mini-ITX"],
        max_gpu_length=350, max_cpu_cooler_height=165,
        max_psu_length=200, max_fan_mounts=5,
    ),
    "micro-atx-compact": CasePhysicalSpec(
        case_type="micro-atx-compact",
        form_factors=["micro-ATX", "mini-ITX"],
        max_gpu_length=280, max_cpu_cooler_height=155,
        max_psu_length=160, max_fan_mounts=4,
    ),
    "mini-itx-ultra": CasePhysicalSpec(
        case_type="mini-itx-ultra",
        form_factors=["mini-ITX"],
        max_gpu_length=240, max_cpu_cooler_height=130,
        max_psu_length=140, max_fan_mounts=2,
    ),
    "gaming-rgb-tower": CasePhysicalSpec(
        case_type="gaming-rgb-tower",
        form_factors=["ATX", "micro-ATX", "mini-ITX"],
        max_gpu_length=380, max_cpu_cooler_height=170,
        max_psu_length=220, max_fan_mounts=8,
    ),
    "silent-mid-tower": CasePhysicalSpec(
        case_type="silent-mid-tower",
        form_factors=["ATX", "micro-ATX", "mini-ITX"],
        max_gpu_length=340, max_cpu_cooler_height=180,
        max_psu_length=200, max_fan_mounts=5,
    ),
}
