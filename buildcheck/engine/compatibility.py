"""Hardware compatibility checks — socket, memory, power, fit, balance.

Each check is independent and yields at most one issue. When a part the
check needs is not selected yet, the issue is an ``info``-level
``missing_part`` ("not yet configured"), never an incompatibility.
Missing specification fields never fail a check; they become unscored
advisory notes instead.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence, Tuple

from buildcheck.engine.power import estimate_power_draw, recommended_psu_wattage
from buildcheck.engine.tiers import (
    MILD_GAP,
    SEVERE_GAP,
    cpu_tier,
    gpu_tier,
    next_tier,
    tier_score,
)
from buildcheck.models.configuration import Configuration, CoreComponents
from buildcheck.models.parts import BasePart, MemoryPart
from buildcheck.models.results import (
    CompatibilityDetails,
    CompatibilityIssue,
    CompatibilityWarning,
    IssueType,
    LimitSource,
    MemoryCompatibility,
    PerformanceCompatibility,
    PhysicalCompatibility,
    PhysicalLimits,
    PowerCompatibility,
    Severity,
    SocketCompatibility,
)

# Power: PSU should exceed draw by 20 %.
POWER_WARNING_RATIO = 1.2

# Clearance fractions above which a fitting part gets a "tight fit" note.
GPU_NEAR_LIMIT = 0.9
COOLER_NEAR_LIMIT = 0.95


# ──────────────────────────────────────────────
# Result Types
# ──────────────────────────────────────────────


@dataclass
class CheckOutcome:
    """Result of one check: optional issue, per-check detail, notes."""

    issue: Optional[CompatibilityIssue]
    detail: Any
    notes: List[CompatibilityWarning] = field(default_factory=list)


@dataclass
class CompatibilityReport:
    """Combined output of all five checks."""

    issues: List[CompatibilityIssue] = field(default_factory=list)
    warnings: List[CompatibilityWarning] = field(default_factory=list)
    details: CompatibilityDetails = field(default_factory=CompatibilityDetails)


# ──────────────────────────────────────────────
# Helpers
# ──────────────────────────────────────────────


def _normalize_socket(socket: str) -> str:
    """'LGA 1700', 'Socket AM5' → 'LGA1700', 'AM5'."""
    s = re.sub(r"\s+", "", socket).upper()
    return s.removeprefix("SOCKET")


def _normalize_memory_type(memory_type: str) -> str:
    """'ddr5-6000' → 'DDR5'."""
    return memory_type.strip().upper().split("-")[0]


_FORM_FACTOR_ALIASES = {
    "MATX": "MICRO-ATX",
    "MICROATX": "MICRO-ATX",
    "ITX": "MINI-ITX",
    "MINIITX": "MINI-ITX",
    "EATX": "E-ATX",
}


def _normalize_form_factor(form_factor: str) -> str:
    s = re.sub(r"\s+", "", form_factor).upper()
    return _FORM_FACTOR_ALIASES.get(s.replace("-", ""), s)


def _missing_part(
    check: str, category: str, missing: Sequence[str]
) -> CompatibilityIssue:
    names = " and ".join(missing)
    return CompatibilityIssue(
        id=f"missing_{check.replace(' ', '_')}",
        type=IssueType.MISSING_PART,
        severity=Severity.INFO,
        message=f"Select a {names} to run the {check} check",
        affected_parts=list(missing),
        solution=f"Add a {names} to the configuration",
        category=category,
    )


def _absent(*slots: Tuple[str, Optional[BasePart]]) -> List[str]:
    return [name for name, part in slots if part is None]


def _note(id: str, message: str, recommendation: str = "", priority: str = "low") -> CompatibilityWarning:
    return CompatibilityWarning(
        id=id, message=message, recommendation=recommendation, priority=priority
    )


# ──────────────────────────────────────────────
# Individual Checks
# ──────────────────────────────────────────────


def _cooler_socket_notes(core: CoreComponents) -> List[CompatibilityWarning]:
    """High-priority note when the cooler's socket list omits the CPU socket."""
    cpu, cooler = core.cpu, core.cooler
    if cpu is None or cooler is None:
        return []
    cpu_socket = cpu.specifications.socket
    sockets = cooler.specifications.sockets
    if not cpu_socket or not sockets:
        return []
    if _normalize_socket(cpu_socket) in {_normalize_socket(s) for s in sockets}:
        return []
    return [
        _note(
            "cooler_socket_unsupported",
            f"CPU cooler does not list socket {cpu_socket} (supports: {', '.join(sockets)})",
            "Choose a cooler with a matching mounting kit",
            "high",
        )
    ]


def check_socket(core: CoreComponents) -> CheckOutcome:
    """CPU.socket == Motherboard.socket"""
    notes = _cooler_socket_notes(core)
    missing = _absent(("cpu", core.cpu), ("motherboard", core.motherboard))
    if missing:
        return CheckOutcome(
            _missing_part("socket", "Socket compatibility", missing),
            SocketCompatibility(message="Waiting for CPU and motherboard selection"),
            notes,
        )

    cpu, board = core.cpu, core.motherboard
    cpu_socket = cpu.specifications.socket
    board_socket = board.specifications.socket

    if not cpu_socket or not board_socket:
        message = "Socket data unavailable, could not verify"
        notes.append(_note("socket_unknown", message, "Check the socket on both parts"))
        detail = SocketCompatibility(
            cpu_socket=cpu_socket, motherboard_socket=board_socket, message=message
        )
        return CheckOutcome(None, detail, notes)

    if _normalize_socket(cpu_socket) == _normalize_socket(board_socket):
        detail = SocketCompatibility(
            cpu_socket=cpu_socket,
            motherboard_socket=board_socket,
            message=f"Socket {cpu_socket} matches",
        )
        return CheckOutcome(None, detail, notes)

    message = (
        f"CPU socket ({cpu_socket}) does not match "
        f"motherboard socket ({board_socket})"
    )
    detail = SocketCompatibility(
        compatible=False,
        cpu_socket=cpu_socket,
        motherboard_socket=board_socket,
        message=message,
    )
    issue = CompatibilityIssue(
        id="cpu_socket_mismatch",
        type=IssueType.SOCKET_MISMATCH,
        severity=Severity.CRITICAL,
        message=message,
        affected_parts=[cpu.id, board.id],
        solution=f"Choose a {cpu_socket} motherboard or a {board_socket} CPU",
        category="Socket compatibility",
    )
    return CheckOutcome(issue, detail, notes)


def _total_capacity(modules: Sequence[MemoryPart]) -> Optional[int]:
    """capacity × sticks summed over modules that declare a capacity."""
    sized = [m for m in modules if m.specifications.capacity is not None]
    if not sized:
        return None
    return sum(m.specifications.capacity * (m.specifications.sticks or 1) for m in sized)


def check_memory(configuration: Configuration, limits: PhysicalLimits) -> CheckOutcome:
    """Memory type IN Motherboard.memoryType, total capacity <= board maximum"""
    core = configuration.core
    modules = [m for m in (core.memory, *configuration.additional.memory) if m is not None]
    missing = _absent(("motherboard", core.motherboard))
    if not modules:
        missing.insert(0, "memory")
    if missing:
        return CheckOutcome(
            _missing_part("memory", "Memory compatibility", missing),
            MemoryCompatibility(message="Waiting for memory and motherboard selection"),
        )

    board = core.motherboard
    supported = list(board.specifications.memory_type)
    types = [m.specifications.type for m in modules if m.specifications.type]
    total = _total_capacity(modules)
    # Default board limits are a guess; only a catalog maximum is enforced.
    maximum = (
        limits.max_memory_capacity
        if limits.motherboard_source == LimitSource.CATALOG and limits.max_memory_capacity
        else None
    )

    notes: List[CompatibilityWarning] = []
    untyped = [m.id for m in modules if not m.specifications.type]
    if untyped:
        notes.append(
            _note(
                "memory_type_unknown",
                f"Memory type not specified for {', '.join(untyped)}, could not verify",
                "Check the memory standard (DDR4/DDR5)",
            )
        )
    if not supported:
        notes.append(
            _note(
                "memory_support_unknown",
                "Motherboard memory support unknown, could not verify",
                "Check the board's memory standard",
            )
        )

    problems: List[str] = []
    affected: List[str] = []
    solutions: List[str] = []
    type_mismatch = False

    if supported:
        allowed = {_normalize_memory_type(t) for t in supported}
        mismatched = [
            m for m in modules
            if m.specifications.type
            and _normalize_memory_type(m.specifications.type) not in allowed
        ]
        if mismatched:
            type_mismatch = True
            bad = sorted({m.specifications.type for m in mismatched})
            problems.append(
                f"Memory type ({', '.join(bad)}) is not supported by "
                f"motherboard (supports: {', '.join(supported)})"
            )
            affected.extend(m.id for m in mismatched)
            solutions.append(f"Choose {' or '.join(supported)} memory")

    if total is not None and maximum is not None and total > maximum:
        problems.append(
            f"Total memory {total}GB exceeds the motherboard maximum of {maximum}GB"
        )
        affected.extend(
            m.id for m in modules
            if m.specifications.capacity is not None and m.id not in affected
        )
        solutions.append(f"Keep total memory at or below {maximum}GB")

    if problems:
        message = "; ".join(problems)
    elif not supported:
        message = "Motherboard memory support unknown, could not verify"
    elif types:
        message = "Memory type supported"
    else:
        message = "Memory type not specified"

    detail = MemoryCompatibility(
        compatible=not problems,
        memory_types=types,
        supported_types=supported,
        total_capacity=total,
        max_capacity=maximum,
        message=message,
    )
    if not problems:
        return CheckOutcome(None, detail, notes)

    issue = CompatibilityIssue(
        id="memory_type_mismatch" if type_mismatch else "memory_capacity_exceeded",
        type=IssueType.MEMORY_INCOMPATIBLE,
        severity=Severity.CRITICAL,
        message=message,
        affected_parts=[*affected, board.id],
        solution="; ".join(solutions),
        category="Memory compatibility",
    )
    return CheckOutcome(issue, detail, notes)


def check_power(configuration: Configuration) -> CheckOutcome:
    """PSU.wattage >= estimated draw (warn below draw × 1.2)"""
    draw = estimate_power_draw(configuration)
    recommended = recommended_psu_wattage(draw)

    psu = configuration.core.psu
    if psu is None:
        detail = PowerCompatibility(
            total_draw=draw,
            recommended_wattage=recommended,
            message=f"Waiting for PSU selection (recommended: {recommended}W)",
        )
        return CheckOutcome(_missing_part("power", "Power supply", ["psu"]), detail)

    wattage = psu.specifications.wattage
    if wattage is None:
        message = "PSU wattage unknown, could not verify"
        detail = PowerCompatibility(
            total_draw=draw, recommended_wattage=recommended, message=message
        )
        return CheckOutcome(
            None,
            detail,
            [_note("psu_wattage_unknown", message, f"Use a PSU of at least {recommended}W", "medium")],
        )

    headroom = round((wattage - draw) / wattage * 100, 1) if wattage > 0 else None

    severity: Optional[Severity] = None
    if wattage < draw:
        message = f"PSU wattage ({wattage:g}W) is below the estimated draw ({draw:g}W)"
        severity = Severity.CRITICAL
    elif wattage < draw * POWER_WARNING_RATIO:
        message = (
            f"PSU wattage ({wattage:g}W) leaves less than 20% headroom "
            f"over the estimated draw ({draw:g}W)"
        )
        severity = Severity.WARNING
    else:
        message = f"PSU wattage ({wattage:g}W) is sufficient"

    detail = PowerCompatibility(
        compatible=wattage >= draw,
        total_draw=draw,
        psu_wattage=wattage,
        recommended_wattage=recommended,
        headroom_percent=headroom,
        message=message,
    )
    if severity is None:
        return CheckOutcome(None, detail)

    issue = CompatibilityIssue(
        id="power_insufficient",
        type=IssueType.POWER_INSUFFICIENT,
        severity=severity,
        message=message,
        affected_parts=[psu.id],
        solution=f"Choose a PSU of at least {recommended}W",
        category="Power supply",
    )
    return CheckOutcome(issue, detail)


def _known_limit(
    declared: Optional[float], resolved: float, limits: PhysicalLimits
) -> Optional[float]:
    """A resolved clearance counts only if the case declared it or the catalog knows it."""
    if declared is not None or limits.case_source == LimitSource.CATALOG:
        return resolved
    return None


def check_physical_fit(core: CoreComponents, limits: PhysicalLimits) -> CheckOutcome:
    """GPU length, cooler height, PSU length, board form factor vs. case"""
    case = core.case
    if case is None:
        return CheckOutcome(
            _missing_part("physical fit", "Physical size", ["case"]),
            PhysicalCompatibility(message="Waiting for case selection"),
        )

    specs = case.specifications
    conflicts: List[str] = []
    affected: List[str] = []
    near: List[str] = []

    gpu = core.gpu
    max_gpu = _known_limit(specs.max_gpu_length, limits.max_gpu_length, limits)
    if gpu is not None and gpu.specifications.length is not None and max_gpu is not None:
        length = gpu.specifications.length
        if length > max_gpu:
            conflicts.append(
                f"GPU length {length:g}mm exceeds case limit {max_gpu:g}mm "
                f"by {length - max_gpu:g}mm"
            )
            affected.append(gpu.id)
        elif length > max_gpu * GPU_NEAR_LIMIT:
            near.append(f"GPU length is close to the case limit ({max_gpu - length:g}mm to spare)")

    cooler = core.cooler
    max_cooler = _known_limit(specs.max_cpu_cooler_height, limits.max_cpu_cooler_height, limits)
    if cooler is not None and cooler.specifications.height is not None and max_cooler is not None:
        height = cooler.specifications.height
        if height > max_cooler:
            conflicts.append(
                f"CPU cooler height {height:g}mm exceeds case limit {max_cooler:g}mm "
                f"by {height - max_cooler:g}mm"
            )
            affected.append(cooler.id)
        elif height > max_cooler * COOLER_NEAR_LIMIT:
            near.append(f"Cooler height is close to the case limit ({max_cooler - height:g}mm to spare)")

    psu = core.psu
    max_psu = _known_limit(specs.max_psu_length, limits.max_psu_length, limits)
    if psu is not None and psu.specifications.length is not None and max_psu is not None:
        psu_length = psu.specifications.length
        if psu_length > max_psu:
            conflicts.append(
                f"PSU length {psu_length:g}mm exceeds case limit {max_psu:g}mm"
            )
            affected.append(psu.id)

    board = core.motherboard
    form_factors_known = bool(specs.form_factor) or limits.case_source == LimitSource.CATALOG
    supported = limits.supported_form_factors if form_factors_known else []
    if board is not None and board.specifications.form_factor and supported:
        board_ff = board.specifications.form_factor
        if _normalize_form_factor(board_ff) not in {_normalize_form_factor(f) for f in supported}:
            conflicts.append(
                f"Motherboard form factor {board_ff} is not supported by case "
                f"(supports: {', '.join(supported)})"
            )
            affected.append(board.id)

    notes = [
        _note(f"physical_near_limit_{i}", message, "Double-check clearances", "medium")
        for i, message in enumerate(near)
    ]

    if conflicts:
        message = "; ".join(conflicts)
    elif near:
        message = f"Everything fits, with {len(near)} tight clearance(s)"
    else:
        message = "Everything fits"

    detail = PhysicalCompatibility(
        compatible=not conflicts,
        conflicts=conflicts,
        near_limits=near,
        message=message,
    )
    if not conflicts:
        return CheckOutcome(None, detail, notes)

    issue = CompatibilityIssue(
        id="physical_size_conflict",
        type=IssueType.SIZE_CONFLICT,
        severity=Severity.CRITICAL,
        message=message,
        affected_parts=[case.id, *affected],
        solution="Choose a larger case or smaller parts",
        category="Physical size",
    )
    return CheckOutcome(issue, detail, notes)


def check_performance_balance(core: CoreComponents) -> CheckOutcome:
    """CPU tier vs. GPU tier — advisory only, never critical."""
    missing = _absent(("cpu", core.cpu), ("gpu", core.gpu))
    if missing:
        return CheckOutcome(
            _missing_part("performance balance", "Performance balance", missing),
            PerformanceCompatibility(message="Waiting for CPU and GPU selection"),
        )

    cpu, gpu = core.cpu, core.gpu
    c_tier, g_tier = cpu_tier(cpu), gpu_tier(gpu)
    c_score, g_score = tier_score(c_tier), tier_score(g_tier)
    gap = abs(c_score - g_score)

    if gap <= MILD_GAP:
        detail = PerformanceCompatibility(
            cpu_tier=c_tier.value,
            gpu_tier=g_tier.value,
            bottleneck="balanced",
            message=f"CPU and GPU are balanced (CPU: {c_tier.value}, GPU: {g_tier.value})",
        )
        return CheckOutcome(None, detail)

    weaker, weaker_tier = ("cpu", c_tier) if c_score < g_score else ("gpu", g_tier)
    if gap > SEVERE_GAP:
        level, severity = "severe", Severity.WARNING
        message = (
            f"The {weaker.upper()} is likely to bottleneck this build "
            f"(CPU: {c_tier.value}, GPU: {g_tier.value})"
        )
    else:
        level, severity = "mild", Severity.INFO
        message = f"Slight performance imbalance ({gap} point gap)"

    detail = PerformanceCompatibility(
        balanced=False,
        cpu_tier=c_tier.value,
        gpu_tier=g_tier.value,
        bottleneck=weaker,
        severity=level,
        message=message,
    )
    upgrade = next_tier(weaker_tier) or weaker_tier
    issue = CompatibilityIssue(
        id="performance_bottleneck",
        type=IssueType.PERFORMANCE_BOTTLENECK,
        severity=severity,
        message=message,
        affected_parts=[cpu.id, gpu.id],
        solution=f"Consider a {upgrade.value} class {weaker.upper()} or better",
        category="Performance balance",
    )
    return CheckOutcome(issue, detail)


# ──────────────────────────────────────────────
# Main Compatibility Check
# ──────────────────────────────────────────────


def run_compatibility_checks(
    configuration: Configuration, limits: PhysicalLimits
) -> CompatibilityReport:
    """Run all five checks and collect issues, notes and details."""
    core = configuration.core
    outcomes = (
        check_socket(core),
        check_memory(configuration, limits),
        check_power(configuration),
        check_physical_fit(core, limits),
        check_performance_balance(core),
    )
    socket, memory, power, physical, performance = outcomes

    return CompatibilityReport(
        issues=[o.issue for o in outcomes if o.issue is not None],
        warnings=[note for o in outcomes for note in o.notes],
        details=CompatibilityDetails(
            cpu_socket=socket.detail,
            memory_type=memory.detail,
            power=power.detail,
            physical_fit=physical.detail,
            performance=performance.detail,
        ),
    )
