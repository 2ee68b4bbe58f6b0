"""Configuration aggregator — the single evaluation entry point.

Composes the resolver, slot accountant, constraint validator,
compatibility checks and scoring into one CompatibilityResult.
Pure: no I/O, no shared state, safe to call on every keystroke.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Union

from pydantic import ValidationError

from buildcheck.catalog.lookup import CatalogLookup
from buildcheck.engine.compatibility import run_compatibility_checks
from buildcheck.engine.constraints import is_valid, validate_constraints
from buildcheck.engine.limits import resolve_physical_limits
from buildcheck.engine.scoring import compute_score
from buildcheck.engine.usage import compute_slot_usage
from buildcheck.models.configuration import Configuration
from buildcheck.models.results import (
    CompatibilityResult,
    CompatibilityWarning,
    LimitReport,
    LimitSource,
    PhysicalLimits,
    Severity,
)

logger = logging.getLogger(__name__)


class InvalidConfigurationError(ValueError):
    """Input does not have the shape of a Configuration."""

    def __init__(self, message: str, errors: List[Any] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


def coerce_configuration(
    configuration: Union[Configuration, Mapping[str, Any]],
) -> Configuration:
    """Accept a Configuration or a plain mapping; reject anything malformed."""
    if isinstance(configuration, Configuration):
        return configuration
    if not isinstance(configuration, Mapping):
        raise InvalidConfigurationError(
            f"Expected a configuration mapping, got {type(configuration).__name__}"
        )
    try:
        return Configuration.model_validate(configuration)
    except ValidationError as e:
        raise InvalidConfigurationError(
            f"Invalid configuration: {e.error_count()} validation error(s)",
            errors=e.errors(include_url=False),
        ) from e


def _catalog_notes(
    configuration: Configuration, limits: PhysicalLimits
) -> List[CompatibilityWarning]:
    """Info notes for selected parts whose limits fell back to defaults."""
    notes: List[CompatibilityWarning] = []
    board = configuration.core.motherboard
    if board is not None and limits.motherboard_source == LimitSource.DEFAULT:
        chipset = board.specifications.chipset or "unspecified"
        notes.append(
            CompatibilityWarning(
                id="motherboard_limits_default",
                message=f"Chipset {chipset} is not in the catalog; default slot limits applied",
                recommendation="Verify M.2, SATA and memory slot counts manually",
                priority="low",
            )
        )
    case = configuration.core.case
    if case is not None and limits.case_source == LimitSource.DEFAULT:
        case_type = case.specifications.case_type or "unspecified"
        notes.append(
            CompatibilityWarning(
                id="case_limits_default",
                message=f"Case type {case_type} is not in the catalog; default clearance limits applied",
                recommendation="Verify GPU length and cooler height clearance manually",
                priority="low",
            )
        )
    return notes


# ──────────────────────────────────────────────
# Public API
# ──────────────────────────────────────────────


def check_limits(
    configuration: Union[Configuration, Mapping[str, Any]],
    catalog: CatalogLookup,
) -> LimitReport:
    """Limits, usage and capacity/budget violations only."""
    config = coerce_configuration(configuration)
    limits = resolve_physical_limits(config.core.motherboard, config.core.case, catalog)
    usage = compute_slot_usage(config)
    violations = validate_constraints(usage, limits, config.total_price, config.budget)
    return LimitReport(
        physical_limits=limits,
        slot_usage=usage,
        violations=violations,
        is_valid=is_valid(violations),
    )


def evaluate(
    configuration: Union[Configuration, Mapping[str, Any]],
    catalog: CatalogLookup,
) -> CompatibilityResult:
    """Evaluate one configuration snapshot against a catalog.

    Args:
        configuration: A Configuration, or a mapping with the same shape.
        catalog: Read-only catalog used to resolve physical limits.

    Returns:
        CompatibilityResult. Incompatibilities are reported in it, never raised.

    Raises:
        InvalidConfigurationError: If a mapping fails validation.
    """
    config = coerce_configuration(configuration)

    report = check_limits(config, catalog)
    checks = run_compatibility_checks(config, report.physical_limits)

    warnings = _catalog_notes(config, report.physical_limits) + checks.warnings
    score = compute_score(checks.issues, report.violations)
    compatible = not any(i.severity == Severity.CRITICAL for i in checks.issues)

    logger.debug(
        "Evaluated %d part(s): score=%d compatible=%s valid=%s issues=%d violations=%d",
        len(config.all_parts()),
        score,
        compatible,
        report.is_valid,
        len(checks.issues),
        len(report.violations),
    )

    return CompatibilityResult(
        is_compatible=compatible,
        issues=checks.issues,
        warnings=warnings,
        score=score,
        details=checks.details,
        is_valid=report.is_valid,
        violations=report.violations,
        physical_limits=report.physical_limits,
        slot_usage=report.slot_usage,
        total_power_draw=checks.details.power.total_draw,
    )
