"""Tests for part, configuration and result models."""

import pytest
from pydantic import ValidationError

from buildcheck.models import (
    CasePart,
    Configuration,
    CoreComponents,
    CPUPart,
    CPUSpecs,
    MotherboardSpecs,
    OtherPart,
    PerformanceTier,
    StoragePart,
    parse_part,
)


def _make(category: str, id: str = "p1", price: int = 10000, **specs):
    """Quick raw part dict (specs given in catalog camelCase)."""
    return {
        "id": id,
        "name": f"Test {category}",
        "manufacturer": "Acme",
        "category": category,
        "price": price,
        "specifications": specs,
    }


# ──────────────────────────────────────────────
# Parts
# ──────────────────────────────────────────────


class TestParts:
    def test_category_selects_variant(self):
        assert isinstance(parse_part(_make("cpu", socket="AM5")), CPUPart)
        assert isinstance(parse_part(_make("case")), CasePart)
        assert isinstance(parse_part(_make("other")), OtherPart)

    def test_unknown_category_rejected(self):
        with pytest.raises(ValidationError):
            parse_part(_make("toaster"))

    def test_camel_case_specs(self):
        part = parse_part(_make("case", maxGpuLength=350, caseType="mid-tower-standard"))
        assert part.specifications.max_gpu_length == 350
        assert part.specifications.case_type == "mid-tower-standard"

    def test_snake_case_specs(self):
        specs = MotherboardSpecs.model_validate({"form_factor": "ATX", "memory_type": ["DDR5"]})
        assert specs.form_factor == "ATX"
        assert specs.memory_type == ["DDR5"]

    def test_single_string_becomes_list(self):
        specs = MotherboardSpecs.model_validate({"memoryType": "DDR4"})
        assert specs.memory_type == ["DDR4"]

    def test_unknown_spec_keys_pass_through(self):
        specs = CPUSpecs.model_validate({"socket": "AM5", "cores": 8})
        assert specs.socket == "AM5"
        assert specs.model_extra == {"cores": 8}

    def test_board_slot_counts_pass_through(self):
        specs = MotherboardSpecs.model_validate({"chipset": "B650", "m2Slots": 3, "memorySlots": 4})
        assert specs.model_extra == {"m2Slots": 3, "memorySlots": 4}

    def test_performance_tier_parsed(self):
        part = parse_part(_make("gpu", performanceTier="high-end"))
        assert part.specifications.performance_tier == PerformanceTier.HIGH_END

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            parse_part(_make("cpu", price=-1))

    def test_parts_are_immutable(self):
        part = parse_part(_make("cpu"))
        with pytest.raises(ValidationError):
            part.price = 1

    def test_missing_specifications_default_empty(self):
        part = StoragePart(id="s1", name="Drive")
        assert part.specifications.interface is None
        assert part.category == "storage"


# ──────────────────────────────────────────────
# Configuration
# ──────────────────────────────────────────────


class TestConfiguration:
    def test_empty_configuration(self):
        config = Configuration()
        assert config.is_empty
        assert config.total_price == 0
        assert config.core.cpu is None

    def test_total_price_covers_core_and_additional(self):
        config = Configuration.model_validate({
            "core": {"cpu": _make("cpu", price=30000)},
            "additional": {"storage": [_make("storage", "s1", 8000), _make("storage", "s2", 6000)]},
        })
        assert config.total_price == 44000
        assert len(config.all_parts()) == 3

    def test_core_parts_listed_first(self):
        config = Configuration.model_validate({
            "core": {"gpu": _make("gpu", "g1"), "cpu": _make("cpu", "c1")},
            "additional": {"fans": [_make("other", "f1")]},
        })
        assert [p.id for p in config.all_parts()] == ["c1", "g1", "f1"]

    def test_core_slot_rejects_wrong_category(self):
        with pytest.raises(ValidationError):
            Configuration.model_validate({"core": {"cpu": _make("gpu")}})

    def test_core_slot_rejects_multiple_parts(self):
        with pytest.raises(ValidationError):
            Configuration.model_validate(
                {"core": {"cpu": [_make("cpu", "c1"), _make("cpu", "c2")]}}
            )

    def test_unknown_core_slot_rejected(self):
        with pytest.raises(ValidationError):
            CoreComponents.model_validate({"fan": _make("other")})

    def test_additional_storage_must_be_storage(self):
        with pytest.raises(ValidationError):
            Configuration.model_validate({"additional": {"storage": [_make("gpu")]}})

    def test_negative_budget_rejected(self):
        with pytest.raises(ValidationError):
            Configuration(budget=-5)
