"""Pydantic models for parts, configurations, and compatibility results."""

from buildcheck.models.configuration import (
    AdditionalComponents,
    Configuration,
    CoreComponents,
)
from buildcheck.models.parts import (
    BasePart,
    CasePart,
    CaseSpecs,
    CoolerPart,
    CoolerSpecs,
    CPUPart,
    CPUSpecs,
    GPUPart,
    GPUSpecs,
    MemoryPart,
    MemorySpecs,
    MonitorPart,
    MotherboardPart,
    MotherboardSpecs,
    OtherPart,
    Part,
    PartCategory,
    PartSpecs,
    PerformanceTier,
    PSUPart,
    PSUSpecs,
    StorageInterface,
    StoragePart,
    StorageSpecs,
    parse_part,
)
from buildcheck.models.results import (
    CompatibilityDetails,
    CompatibilityIssue,
    CompatibilityResult,
    CompatibilityWarning,
    IssueType,
    LimitReport,
    LimitSource,
    LimitViolation,
    MemoryCompatibility,
    PerformanceCompatibility,
    PhysicalCompatibility,
    PhysicalLimits,
    PowerCompatibility,
    Severity,
    SlotUsage,
    SocketCompatibility,
    ViolationSeverity,
    ViolationType,
)

__all__ = [
    # Parts & enums
    "BasePart",
    "CasePart",
    "CaseSpecs",
    "CoolerPart",
    "CoolerSpecs",
    "CPUPart",
    "CPUSpecs",
    "GPUPart",
    "GPUSpecs",
    "MemoryPart",
    "MemorySpecs",
    "MonitorPart",
    "MotherboardPart",
    "MotherboardSpecs",
    "OtherPart",
    "Part",
    "PartCategory",
    "PartSpecs",
    "PerformanceTier",
    "PSUPart",
    "PSUSpecs",
    "StorageInterface",
    "StoragePart",
    "StorageSpecs",
    "parse_part",
    # Configuration
    "AdditionalComponents",
    "Configuration",
    "CoreComponents",
    # Results
    "CompatibilityDetails",
    "CompatibilityIssue",
    "CompatibilityResult",
    "CompatibilityWarning",
    "IssueType",
    "LimitReport",
    "LimitSource",
    "LimitViolation",
    "MemoryCompatibility",
    "PerformanceCompatibility",
    "PhysicalCompatibility",
    "PhysicalLimits",
    "PowerCompatibility",
    "Severity",
    "SlotUsage",
    "SocketCompatibility",
    "ViolationSeverity",
    "ViolationType",
]
