"""Physical limits resolver — capacity ceilings from motherboard + case."""

from __future__ import annotations

from typing import Optional

from buildcheck.catalog.lookup import CatalogLookup
from buildcheck.catalog.specs import DEFAULT_MAX_POWER_CONNECTORS
from buildcheck.models.parts import CasePart, MotherboardPart
from buildcheck.models.results import LimitSource, PhysicalLimits


def resolve_physical_limits(
    motherboard: Optional[MotherboardPart],
    case: Optional[CasePart],
    catalog: CatalogLookup,
) -> PhysicalLimits:
    """Derive a PhysicalLimits snapshot for the selected board and case.

    The motherboard is looked up by ``specifications.chipset`` and the case
    by ``specifications.caseType``. Absent parts and unknown ids fall back
    to the catalog defaults, never to zero. Clearances and form factors
    declared on the case part itself override the looked-up values.
    Same inputs, same limits.
    """
    chipset = motherboard.specifications.chipset if motherboard else None
    case_specs = case.specifications if case else None
    case_type = case_specs.case_type if case_specs else None

    board = catalog.lookup_motherboard_spec(chipset)
    chassis = catalog.lookup_case_spec(case_type)

    def _clearance(field: str) -> float:
        declared = getattr(case_specs, field, None) if case_specs else None
        return declared if declared is not None else getattr(chassis, field)

    form_factors = (case_specs.form_factor if case_specs else None) or chassis.form_factors

    return PhysicalLimits(
        max_m2_slots=board.m2_slots,
        max_sata_connectors=board.sata_connectors,
        max_memory_slots=board.memory_slots,
        max_fan_mounts=chassis.max_fan_mounts,
        max_gpu_length=_clearance("max_gpu_length"),
        max_cpu_cooler_height=_clearance("max_cpu_cooler_height"),
        max_psu_length=_clearance("max_psu_length"),
        max_expansion_slots=board.expansion_slots,
        max_power_connectors=DEFAULT_MAX_POWER_CONNECTORS,
        max_memory_capacity=board.max_memory_capacity,
        supported_form_factors=list(form_factors),
        motherboard_source=LimitSource.DEFAULT if board.is_default else LimitSource.CATALOG,
        case_source=LimitSource.DEFAULT if chassis.is_default else LimitSource.CATALOG,
    )
