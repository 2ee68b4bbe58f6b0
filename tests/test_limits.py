"""Tests for the physical limits resolver and slot usage accounting."""

from buildcheck.catalog import StaticCatalog
from buildcheck.engine.limits import resolve_physical_limits
from buildcheck.engine.usage import compute_slot_usage
from buildcheck.models import (
    CasePart,
    Configuration,
    LimitSource,
    MotherboardPart,
    parse_part,
)


def _make(category: str, id: str = "p1", **specs):
    return parse_part(
        {"id": id, "name": f"Test {category}", "category": category, "price": 1000,
         "specifications": specs}
    )


def _config(core: dict | None = None, **additional) -> Configuration:
    return Configuration(core=core or {}, additional=additional)


# ──────────────────────────────────────────────
# Physical Limits
# ──────────────────────────────────────────────


class TestResolvePhysicalLimits:
    def test_nothing_selected_uses_defaults(self):
        limits = resolve_physical_limits(None, None, StaticCatalog())
        assert limits.max_m2_slots == 2
        assert limits.max_sata_connectors == 4
        assert limits.max_memory_slots == 4
        assert limits.max_expansion_slots == 5
        assert limits.max_fan_mounts == 4
        assert limits.max_gpu_length == 320
        assert limits.max_cpu_cooler_height == 160
        assert limits.max_psu_length == 180
        assert limits.max_power_connectors == 8
        assert limits.motherboard_source == LimitSource.DEFAULT
        assert limits.case_source == LimitSource.DEFAULT

    def test_unknown_chipset_and_case_equal_defaults(self):
        board = _make("motherboard", chipset="H310")
        case = _make("case", caseType="shoebox")
        catalog = StaticCatalog()
        assert resolve_physical_limits(board, case, catalog) == resolve_physical_limits(
            None, None, catalog
        )

    def test_known_parts_use_catalog(self):
        board = _make("motherboard", chipset="Z790")
        case = _make("case", caseType="full-tower-premium")
        limits = resolve_physical_limits(board, case, StaticCatalog())
        assert limits.max_m2_slots == 4
        assert limits.max_sata_connectors == 6
        assert limits.max_expansion_slots == 7
        assert limits.max_fan_mounts == 9
        assert limits.max_gpu_length == 420
        assert "E-ATX" in limits.supported_form_factors
        assert limits.motherboard_source == LimitSource.CATALOG
        assert limits.case_source == LimitSource.CATALOG

    def test_board_without_chipset_uses_default(self):
        board = MotherboardPart(id="mb", name="Mystery board")
        limits = resolve_physical_limits(board, None, StaticCatalog())
        assert limits.motherboard_source == LimitSource.DEFAULT

    def test_declared_case_clearances_override_catalog(self):
        case = _make(
            "case", caseType="mini-itx-ultra", maxGpuLength=335,
            maxPsuLength=160, formFactor=["micro-ATX"],
        )
        limits = resolve_physical_limits(None, case, StaticCatalog())
        assert limits.max_gpu_length == 335
        assert limits.max_psu_length == 160
        assert limits.max_cpu_cooler_height == 130
        assert limits.supported_form_factors == ["micro-ATX"]
        assert limits.case_source == LimitSource.CATALOG

    def test_declared_clearance_on_unknown_case(self):
        case = _make("case", maxCpuCoolerHeight=172)
        limits = resolve_physical_limits(None, case, StaticCatalog())
        assert limits.max_cpu_cooler_height == 172
        assert limits.max_gpu_length == 320

    def test_board_memory_capacity(self):
        board = _make("motherboard", chipset="X670E-I")
        assert resolve_physical_limits(board, None, StaticCatalog()).max_memory_capacity == 64

    def test_deterministic(self):
        board = _make("motherboard", chipset="B650")
        case = CasePart(id="c", name="Case", specifications={"caseType": "mini-itx-ultra"})
        catalog = StaticCatalog()
        assert resolve_physical_limits(board, case, catalog) == resolve_physical_limits(
            board, case, catalog
        )


# ──────────────────────────────────────────────
# Slot Usage
# ──────────────────────────────────────────────


class TestSlotUsage:
    def test_empty_configuration(self):
        usage = compute_slot_usage(Configuration())
        assert usage.m2_slots_used == 0
        assert usage.sata_connectors_used == 0
        assert usage.memory_slot_used == 0
        assert usage.power_connectors_used == 0

    def test_storage_interfaces(self):
        config = _config(storage=[
            _make("storage", "s1", interface="NVMe"),
            _make("storage", "s2", interface="NVMe"),
            _make("storage", "s3", interface="SATA"),
            _make("storage", "s4", interface="SATA3"),
        ])
        usage = compute_slot_usage(config)
        assert usage.m2_slots_used == 2
        assert usage.sata_connectors_used == 2

    def test_unknown_or_missing_interface_counts_nowhere(self):
        config = _config(storage=[
            _make("storage", "s1"),
            _make("storage", "s2", interface="PCIe"),
            _make("storage", "s3", interface="nvme"),
        ])
        usage = compute_slot_usage(config)
        assert usage.m2_slots_used == 0
        assert usage.sata_connectors_used == 0

    def test_memory_counts_base_and_extra(self):
        config = _config(
            {"memory": _make("memory", "m0")},
            memory=[_make("memory", "m1"), _make("memory", "m2")],
        )
        assert compute_slot_usage(config).memory_slot_used == 3

    def test_extra_memory_without_base(self):
        config = _config(memory=[_make("memory", "m1")])
        assert compute_slot_usage(config).memory_slot_used == 1

    def test_fans_and_expansion(self):
        config = _config(
            fans=[_make("other", f"f{i}") for i in range(3)],
            expansion=[_make("other", "x1"), _make("other", "x2")],
        )
        usage = compute_slot_usage(config)
        assert usage.fan_mounts_used == 3
        assert usage.expansion_slots_used == 2

    def test_power_connector_estimate(self):
        config = _config(
            {"cpu": _make("cpu"), "gpu": _make("gpu")},
            expansion=[_make("other", "x1")],
        )
        assert compute_slot_usage(config).power_connectors_used == 4

    def test_recomputed_from_scratch(self):
        with_storage = _config(storage=[_make("storage", interface="NVMe")])
        assert compute_slot_usage(with_storage).m2_slots_used == 1
        assert compute_slot_usage(Configuration()).m2_slots_used == 0
