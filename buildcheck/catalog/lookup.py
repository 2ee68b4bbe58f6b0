"""Catalog lookup — maps chipset / case type ids to physical specs.

Lookups never raise. An absent, unknown, or failing lookup resolves to a
documented conservative default flagged ``is_default=True``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from buildcheck.catalog.data import CASE_SPECS, CATALOG_VERSION, MOTHERBOARD_SPECS
from buildcheck.catalog.specs import (
    DEFAULT_CASE_SPEC,
    DEFAULT_MOTHERBOARD_SPEC,
    CasePhysicalSpec,
    MotherboardPhysicalSpec,
)

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────
# Abstract Lookup
# ──────────────────────────────────────────────


class CatalogLookup(ABC):
    """Read-only catalog interface consumed by the engine.

    Subclass this and implement ``_find_motherboard`` / ``_find_case``.
    The engine only calls the public ``lookup_*`` methods, which add the
    default fallback. ``version`` must change whenever the data does, so
    cached evaluations can be invalidated.
    """

    def __init__(self, version: str = "1") -> None:
        self.version = version

    @abstractmethod
    def _find_motherboard(self, chipset_id: str) -> Optional[MotherboardPhysicalSpec]:
        """Return the spec for a chipset id, or None if unknown."""
        ...

    @abstractmethod
    def _find_case(self, case_type_id: str) -> Optional[CasePhysicalSpec]:
        """Return the spec for a case type id, or None if unknown."""
        ...

    def lookup_motherboard_spec(
        self, chipset_id: Optional[str]
    ) -> MotherboardPhysicalSpec:
        if not chipset_id:
            return DEFAULT_MOTHERBOARD_SPEC
        try:
            spec = self._find_motherboard(chipset_id)
        except Exception as e:
            logger.warning("Motherboard lookup failed for %s: %s", chipset_id, e)
            return DEFAULT_MOTHERBOARD_SPEC
        if spec is None:
            logger.debug("Unknown chipset %s — using default limits", chipset_id)
            return DEFAULT_MOTHERBOARD_SPEC
        return spec

    def lookup_case_spec(self, case_type_id: Optional[str]) -> CasePhysicalSpec:
        if not case_type_id:
            return DEFAULT_CASE_SPEC
        try:
            spec = self._find_case(case_type_id)
        except Exception as e:
            logger.warning("Case lookup failed for %s: %s", case_type_id, e)
            return DEFAULT_CASE_SPEC
        if spec is None:
            logger.debug("Unknown case type %s — using default limits", case_type_id)
            return DEFAULT_CASE_SPEC
        return spec


# ──────────────────────────────────────────────
# In-memory Catalog
# ──────────────────────────────────────────────


class StaticCatalog(CatalogLookup):
    """Dict-backed catalog. Ships with the reference tables by default."""

    def __init__(
        self,
        motherboards: Optional[Dict[str, MotherboardPhysicalSpec]] = None,
        cases: Optional[Dict[str, CasePhysicalSpec]] = None,
        version: str = CATALOG_VERSION,
    ) -> None:
        super().__init__(version=version)
        self._motherboards = dict(MOTHERBOARD_SPECS if motherboards is None else motherboards)
        self._cases = dict(CASE_SPECS if cases is None else cases)

    def _find_motherboard(self, chipset_id: str) -> Optional[MotherboardPhysicalSpec]:
        return self._motherboards.get(chipset_id)

    def _find_case(self, case_type_id: str) -> Optional[CasePhysicalSpec]:
        return self._cases.get(case_type_id)

    @property
    def chipsets(self) -> List[str]:
        return sorted(self._motherboards)

    @property
    def case_types(self) -> List[str]:
        return sorted(self._cases)
