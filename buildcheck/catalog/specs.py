"""Physical specification models returned by catalog lookups."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class MotherboardPhysicalSpec(BaseModel):
    """Board capacities keyed by chipset id."""

    model_config = ConfigDict(frozen=True)

    chipset: str
    socket: Optional[str] = None
    form_factor: str = "ATX"
    m2_slots: int = Field(ge=0)
    sata_connectors: int = Field(ge=0)
    memory_slots: int = Field(ge=0)
    expansion_slots: int = Field(ge=0)
    max_memory_capacity: int = Field(default=0, ge=0)  # GB
    is_default: bool = False


class CasePhysicalSpec(BaseModel):
    """Chassis clearances and mounts keyed by case type id."""

    model_config = ConfigDict(frozen=True)

    case_type: str
    form_factors: List[str] = Field(default_factory=list)
    max_gpu_length: float = Field(ge=0)  # mm
    max_cpu_cooler_height: float = Field(ge=0)  # mm
    max_psu_length: float = Field(ge=0)  # mm
    max_fan_mounts: int = Field(ge=0)
    is_default: bool = False


# ──────────────────────────────────────────────
# Defaults (nothing selected, or id unknown)
# ──────────────────────────────────────────────

DEFAULT_MOTHERBOARD_SPEC = MotherboardPhysicalSpec(
    chipset="Generic",
    form_factor="ATX",
    m2_slots=2,
    sata_connectors=4,
    memory_slots=4,
    expansion_slots=5,
    max_memory_capacity=64,
    is_default=True,
)

DEFAULT_CASE_SPEC = CasePhysicalSpec(
    case_type="generic",
    form_factors=["ATX", "micro-ATX", "mini-ITX"],
    max_gpu_length=320,
    max_cpu_cooler_height=160,
    max_psu_length=180,
    max_fan_mounts=4,
    is_default=True,
)

# Power connectors are not modelled per part; this ceiling is fixed.
DEFAULT_MAX_POWER_CONNECTORS = 8
