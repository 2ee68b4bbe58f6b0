"""BuildCheck — PC build configuration constraint and compatibility engine."""

from buildcheck.catalog.lookup import CatalogLookup, StaticCatalog
from buildcheck.engine.aggregator import (
    InvalidConfigurationError,
    check_limits,
    evaluate,
)
from buildcheck.models.configuration import Configuration
from buildcheck.models.results import CompatibilityResult

__version__ = "0.1.0"

__all__ = [
    "CatalogLookup",
    "CompatibilityResult",
    "Configuration",
    "InvalidConfigurationError",
    "StaticCatalog",
    "check_limits",
    "evaluate",
]
