"""Part catalog vocabulary — categories, typed specifications, and parts.

A Part is a tagged union keyed by ``category``. Each variant carries a
specification model typed for the fields the compatibility checks read,
while unknown keys pass through untouched (``extra="allow"``).
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic.alias_generators import to_camel


# ──────────────────────────────────────────────
# Enums — Shared Vocabulary
# ──────────────────────────────────────────────


class PartCategory(str, Enum):
    """Closed set of part categories."""

    CPU = "cpu"
    MOTHERBOARD = "motherboard"
    MEMORY = "memory"
    STORAGE = "storage"
    GPU = "gpu"
    PSU = "psu"
    CASE = "case"
    COOLER = "cooler"
    MONITOR = "monitor"
    OTHER = "other"


class StorageInterface(str, Enum):
    """Storage interface values recognised by slot accounting."""

    NVME = "NVMe"
    SATA = "SATA"
    SATA3 = "SATA3"


class PerformanceTier(str, Enum):
    """Coarse performance class used by the balance check."""

    ENTRY = "entry"
    MAINSTREAM = "mainstream"
    HIGH_END = "high-end"
    FLAGSHIP = "flagship"


def _as_list(value: Any) -> Any:
    """Accept a bare string where a list of strings is expected."""
    if isinstance(value, str):
        return [value]
    return value


# ──────────────────────────────────────────────
# Specification Models (one per category)
# ──────────────────────────────────────────────


class PartSpecs(BaseModel):
    """Common base for per-category specifications.

    Keys may be given in catalog camelCase (``maxGpuLength``) or as the
    snake_case field name. Extra keys are kept for forward compatibility.
    """

    model_config = ConfigDict(
        extra="allow",
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    power_consumption: Optional[float] = Field(default=None, ge=0)


class CPUSpecs(PartSpecs):
    socket: Optional[str] = None
    tdp: Optional[float] = Field(default=None, ge=0)
    performance_tier: Optional[PerformanceTier] = None


class MotherboardSpecs(PartSpecs):
    socket: Optional[str] = None
    chipset: Optional[str] = None
    memory_type: List[str] = Field(default_factory=list)
    form_factor: Optional[str] = None

    @field_validator("memory_type", mode="before")
    @classmethod
    def _coerce_memory_type(cls, v: Any) -> Any:
        return _as_list(v)


class MemorySpecs(PartSpecs):
    type: Optional[str] = None
    capacity: Optional[int] = Field(default=None, ge=0)  # GB per stick
    sticks: Optional[int] = Field(default=None, ge=1)


class StorageSpecs(PartSpecs):
    interface: Optional[str] = None


class GPUSpecs(PartSpecs):
    length: Optional[float] = Field(default=None, ge=0)  # mm
    tdp: Optional[float] = Field(default=None, ge=0)
    performance_tier: Optional[PerformanceTier] = None


class PSUSpecs(PartSpecs):
    wattage: Optional[float] = Field(default=None, ge=0)
    length: Optional[float] = Field(default=None, ge=0)  # mm


class CaseSpecs(PartSpecs):
    case_type: Optional[str] = None
    form_factor: List[str] = Field(default_factory=list)
    max_gpu_length: Optional[float] = Field(default=None, ge=0)
    max_cpu_cooler_height: Optional[float] = Field(default=None, ge=0)
    max_psu_length: Optional[float] = Field(default=None, ge=0)

    @field_validator("form_factor", mode="before")
    @classmethod
    def _coerce_form_factor(cls, v: Any) -> Any:
        return _as_list(v)


class CoolerSpecs(PartSpecs):
    height: Optional[float] = Field(default=None, ge=0)  # mm
    sockets: List[str] = Field(default_factory=list)

    @field_validator("sockets", mode="before")
    @classmethod
    def _coerce_sockets(cls, v: Any) -> Any:
        return _as_list(v)


class MonitorSpecs(PartSpecs):
    pass


class OtherSpecs(PartSpecs):
    pass


# ──────────────────────────────────────────────
# Part Variants
# ──────────────────────────────────────────────


class BasePart(BaseModel):
    """Identity shared by every catalog part. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    manufacturer: str = ""
    price: int = Field(default=0, ge=0)


class CPUPart(BasePart):
    category: Literal["cpu"] = "cpu"
    specifications: CPUSpecs = Field(default_factory=CPUSpecs)


class MotherboardPart(BasePart):
    category: Literal["motherboard"] = "motherboard"
    specifications: MotherboardSpecs = Field(default_factory=MotherboardSpecs)


class MemoryPart(BasePart):
    category: Literal["memory"] = "memory"
    specifications: MemorySpecs = Field(default_factory=MemorySpecs)


class StoragePart(BasePart):
    category: Literal["storage"] = "storage"
    specifications: StorageSpecs = Field(default_factory=StorageSpecs)


class GPUPart(BasePart):
    category: Literal["gpu"] = "gpu"
    specifications: GPUSpecs = Field(default_factory=GPUSpecs)


class PSUPart(BasePart):
    category: Literal["psu"] = "psu"
    specifications: PSUSpecs = Field(default_factory=PSUSpecs)


class CasePart(BasePart):
    category: Literal["case"] = "case"
    specifications: CaseSpecs = Field(default_factory=CaseSpecs)


class CoolerPart(BasePart):
    category: Literal["cooler"] = "cooler"
    specifications: CoolerSpecs = Field(default_factory=CoolerSpecs)


class MonitorPart(BasePart):
    category: Literal["monitor"] = "monitor"
    specifications: MonitorSpecs = Field(default_factory=MonitorSpecs)


class OtherPart(BasePart):
    category: Literal["other"] = "other"
    specifications: OtherSpecs = Field(default_factory=OtherSpecs)


Part = Annotated[
    Union[
        CPUPart,
        MotherboardPart,
        MemoryPart,
        StoragePart,
        GPUPart,
        PSUPart,
        CasePart,
        CoolerPart,
        MonitorPart,
        OtherPart,
    ],
    Field(discriminator="category"),
]

_PART_ADAPTER: TypeAdapter[Part] = TypeAdapter(Part)


def parse_part(data: Any) -> Part:
    """Validate a raw mapping into the Part variant named by its category."""
    return _PART_ADAPTER.validate_python(data)
