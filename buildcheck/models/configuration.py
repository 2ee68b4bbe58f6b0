"""Build configuration snapshot — core slots, additional parts, budget."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from buildcheck.models.parts import (
    CasePart,
    CoolerPart,
    CPUPart,
    GPUPart,
    MemoryPart,
    MotherboardPart,
    Part,
    PSUPart,
    StoragePart,
)


# ──────────────────────────────────────────────
# Core / Additional Components
# ──────────────────────────────────────────────


class CoreComponents(BaseModel):
    """At most one part per core slot.

    Absence is an explicit ``None``. Each slot is typed to its category,
    so a list or a part of the wrong category is rejected at validation.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    cpu: Optional[CPUPart] = None
    motherboard: Optional[MotherboardPart] = None
    memory: Optional[MemoryPart] = None
    gpu: Optional[GPUPart] = None
    psu: Optional[PSUPart] = None
    case: Optional[CasePart] = None
    cooler: Optional[CoolerPart] = None

    def selected(self) -> List[Part]:
        """Selected core parts in slot order."""
        slots = (
            self.cpu,
            self.motherboard,
            self.memory,
            self.gpu,
            self.psu,
            self.case,
            self.cooler,
        )
        return [p for p in slots if p is not None]


class AdditionalComponents(BaseModel):
    """Zero-or-many parts per additional category. Order carries no meaning."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    storage: List[StoragePart] = Field(default_factory=list)
    memory: List[MemoryPart] = Field(default_factory=list)
    fans: List[Part] = Field(default_factory=list)
    monitors: List[Part] = Field(default_factory=list)
    accessories: List[Part] = Field(default_factory=list)
    expansion: List[Part] = Field(default_factory=list)

    def all_parts(self) -> List[Part]:
        return [
            *self.storage,
            *self.memory,
            *self.fans,
            *self.monitors,
            *self.accessories,
            *self.expansion,
        ]


# ──────────────────────────────────────────────
# Configuration
# ──────────────────────────────────────────────


class Configuration(BaseModel):
    """Input contract for the engine — one immutable build snapshot."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    core: CoreComponents = Field(default_factory=CoreComponents)
    additional: AdditionalComponents = Field(default_factory=AdditionalComponents)
    budget: Optional[int] = Field(default=None, ge=0, description="Budget ceiling")

    def all_parts(self) -> List[Part]:
        """Every selected part, core slots first."""
        return [*self.core.selected(), *self.additional.all_parts()]

    @property
    def total_price(self) -> int:
        return sum(p.price for p in self.all_parts())

    @property
    def is_empty(self) -> bool:
        return not self.all_parts()
