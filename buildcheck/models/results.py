"""Derived snapshots and the engine's result contract.

PhysicalLimits, SlotUsage and CompatibilityResult are views over a
Configuration. They are rebuilt on every evaluation and never mutated.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


# ──────────────────────────────────────────────
# Enums
# ──────────────────────────────────────────────


class Severity(str, Enum):
    """Severity of a compatibility issue."""

    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"


class IssueType(str, Enum):
    """Closed set of compatibility issue kinds."""

    SOCKET_MISMATCH = "socket_mismatch"
    MEMORY_INCOMPATIBLE = "memory_incompatible"
    POWER_INSUFFICIENT = "power_insufficient"
    SIZE_CONFLICT = "size_conflict"
    CONNECTOR_MISSING = "connector_missing"
    MISSING_PART = "missing_part"
    PERFORMANCE_BOTTLENECK = "performance_bottleneck"


class ViolationType(str, Enum):
    """Closed set of capacity violation kinds."""

    SLOT_OVERFLOW = "slot_overflow"
    POWER_SHORTAGE = "power_shortage"
    PHYSICAL_INCOMPATIBLE = "physical_incompatible"
    BUDGET_EXCEEDED = "budget_exceeded"


class ViolationSeverity(str, Enum):
    WARNING = "warning"
    ERROR = "error"


class LimitSource(str, Enum):
    """Where a half of PhysicalLimits came from."""

    CATALOG = "catalog"
    DEFAULT = "default"


# ──────────────────────────────────────────────
# Derived Snapshots
# ──────────────────────────────────────────────


class PhysicalLimits(BaseModel):
    """Capacity ceilings derived from motherboard + case."""

    model_config = ConfigDict(frozen=True)

    max_m2_slots: int = Field(ge=0)
    max_sata_connectors: int = Field(ge=0)
    max_memory_slots: int = Field(ge=0)
    max_fan_mounts: int = Field(ge=0)
    max_gpu_length: float = Field(ge=0)
    max_cpu_cooler_height: float = Field(ge=0)
    max_psu_length: float = Field(ge=0)
    max_expansion_slots: int = Field(ge=0)
    max_power_connectors: int = Field(ge=0)
    max_memory_capacity: int = Field(default=0, ge=0)  # GB
    supported_form_factors: List[str] = Field(default_factory=list)

    motherboard_source: LimitSource = LimitSource.DEFAULT
    case_source: LimitSource = LimitSource.DEFAULT


class SlotUsage(BaseModel):
    """Current consumption of each resource in PhysicalLimits' domain."""

    model_config = ConfigDict(frozen=True)

    m2_slots_used: int = 0
    sata_connectors_used: int = 0
    memory_slot_used: int = 0
    fan_mounts_used: int = 0
    expansion_slots_used: int = 0
    power_connectors_used: int = 0


# ──────────────────────────────────────────────
# Findings
# ──────────────────────────────────────────────


class CompatibilityIssue(BaseModel):
    """A logical/electrical/physical incompatibility between parts."""

    model_config = ConfigDict(frozen=True)

    id: str
    type: IssueType
    severity: Severity
    message: str
    affected_parts: List[str] = Field(default_factory=list)
    solution: Optional[str] = None
    category: str


class CompatibilityWarning(BaseModel):
    """Advisory note — not scored (catalog fallback, near-limit clearance)."""

    model_config = ConfigDict(frozen=True)

    id: str
    message: str
    recommendation: str = ""
    priority: Literal["high", "medium", "low"] = "medium"


class LimitViolation(BaseModel):
    """A resource-capacity breach."""

    model_config = ConfigDict(frozen=True)

    type: ViolationType
    message: str
    severity: ViolationSeverity


# ──────────────────────────────────────────────
# Per-check Details
# ──────────────────────────────────────────────


class SocketCompatibility(BaseModel):
    model_config = ConfigDict(frozen=True)

    compatible: bool = True
    cpu_socket: Optional[str] = None
    motherboard_socket: Optional[str] = None
    message: str = ""


class MemoryCompatibility(BaseModel):
    model_config = ConfigDict(frozen=True)

    compatible: bool = True
    memory_types: List[str] = Field(default_factory=list)
    supported_types: List[str] = Field(default_factory=list)
    total_capacity: Optional[int] = None  # GB
    max_capacity: Optional[int] = None  # GB
    message: str = ""


class PowerCompatibility(BaseModel):
    model_config = ConfigDict(frozen=True)

    compatible: bool = True
    total_draw: float = 0.0
    psu_wattage: Optional[float] = None
    recommended_wattage: int = 0
    headroom_percent: Optional[float] = None
    message: str = ""


class PhysicalCompatibility(BaseModel):
    model_config = ConfigDict(frozen=True)

    compatible: bool = True
    conflicts: List[str] = Field(default_factory=list)
    near_limits: List[str] = Field(default_factory=list)
    message: str = ""


class PerformanceCompatibility(BaseModel):
    model_config = ConfigDict(frozen=True)

    balanced: bool = True
    cpu_tier: Optional[str] = None
    gpu_tier: Optional[str] = None
    bottleneck: Literal["cpu", "gpu", "balanced", "unknown"] = "unknown"
    severity: Literal["none", "mild", "severe"] = "none"
    message: str = ""


class CompatibilityDetails(BaseModel):
    """Per-check breakdown."""

    model_config = ConfigDict(frozen=True)

    cpu_socket: SocketCompatibility = Field(default_factory=SocketCompatibility)
    memory_type: MemoryCompatibility = Field(default_factory=MemoryCompatibility)
    power: PowerCompatibility = Field(default_factory=PowerCompatibility)
    physical_fit: PhysicalCompatibility = Field(default_factory=PhysicalCompatibility)
    performance: PerformanceCompatibility = Field(
        default_factory=PerformanceCompatibility
    )


# ──────────────────────────────────────────────
# Reports
# ──────────────────────────────────────────────


class LimitReport(BaseModel):
    """Limits, usage and violations for one configuration."""

    model_config = ConfigDict(frozen=True)

    physical_limits: PhysicalLimits
    slot_usage: SlotUsage
    violations: List[LimitViolation] = Field(default_factory=list)
    is_valid: bool = True


class CompatibilityResult(BaseModel):
    """The single contract consumers depend on."""

    model_config = ConfigDict(frozen=True)

    is_compatible: bool
    issues: List[CompatibilityIssue] = Field(default_factory=list)
    warnings: List[CompatibilityWarning] = Field(default_factory=list)
    score: int = Field(ge=0, le=100)
    details: CompatibilityDetails = Field(default_factory=CompatibilityDetails)

    is_valid: bool = True
    violations: List[LimitViolation] = Field(default_factory=list)
    physical_limits: PhysicalLimits
    slot_usage: SlotUsage
    total_power_draw: float = 0.0

    @property
    def critical_issues(self) -> List[CompatibilityIssue]:
        return [i for i in self.issues if i.severity == Severity.CRITICAL]
