"""Catalog lookup for motherboard and case physical specifications."""

from buildcheck.catalog.lookup import CatalogLookup, StaticCatalog
from buildcheck.catalog.specs import (
    DEFAULT_CASE_SPEC,
    DEFAULT_MAX_POWER_CONNECTORS,
    DEFAULT_MOTHERBOARD_SPEC,
    CasePhysicalSpec,
    MotherboardPhysicalSpec,
)

__all__ = [
    "CatalogLookup",
    "StaticCatalog",
    "CasePhysicalSpec",
    "MotherboardPhysicalSpec",
    "DEFAULT_CASE_SPEC",
    "DEFAULT_MAX_POWER_CONNECTORS",
    "DEFAULT_MOTHERBOARD_SPEC",
]
