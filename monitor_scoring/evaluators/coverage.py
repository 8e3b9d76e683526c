"""Coverage evaluator for package completeness and server scope."""

from monitor_scoring.evaluators.bands import first_match
from monitor_scoring.evaluators.capability import CapabilityIndex
from monitor_scoring.models.model_catalog import MANDATORY_CAPABILITIES, ToolCatalog
from monitor_scoring.models.model_score import CoverageResult, CoverageTier
from monitor_scoring.models.model_system import ServerCoverage, System

COVERAGE_BASE = 45
MISSING_CAPABILITY_PENALTY = 15
SELF_BUILT_BONUS = 5

# Share of mandatory categories covered -> (tier, deduction)
TIER_BANDS: tuple[tuple[float, tuple[CoverageTier, int]], ...] = (
    (1.0, (CoverageTier.FULL, 0)),
    (0.7, (CoverageTier.BASIC, 4)),
    (0.5, (CoverageTier.PARTIAL, 7)),
)
TIER_FALLBACK = (CoverageTier.LOW, 10)

SERVER_DEDUCTIONS: dict[ServerCoverage, int] = {
    ServerCoverage.FULL: 0,
    ServerCoverage.BASIC: 5,
    ServerCoverage.PARTIAL: 10,
    ServerCoverage.LOW: 15,
}


class CoverageEvaluator:
    """Scores mandatory capability coverage and server scope.

    Algorithm:
        coverage_score = 45 - tier_deduction - missing×15 - server_deduction
                         + 5 (self-built monitoring)
        Minimum: 0 (no upper clamp; part 1 is capped downstream)

    The tier deduction and the per-category penalty both apply.
    """

    def __init__(self, index: CapabilityIndex | None = None) -> None:
        self.index = index or CapabilityIndex()

    def evaluate(self, system: System, catalog: ToolCatalog) -> float:
        """Coverage points for the system."""
        return self.assess(system).score

    def assess(self, system: System) -> CoverageResult:
        """Coverage points with the tier label and missing categories.

        Args:
            system: The system to evaluate

        Returns:
            CoverageResult with score, tier and missing mandatory categories
        """
        missing = self.index.missing_mandatory(system)
        total = len(MANDATORY_CAPABILITIES)
        coverage_pct = (total - len(missing)) / total

        tier, tier_deduction = first_match(coverage_pct, TIER_BANDS, TIER_FALLBACK)

        raw = (
            COVERAGE_BASE
            - tier_deduction
            - len(missing) * MISSING_CAPABILITY_PENALTY
            - SERVER_DEDUCTIONS[system.server_coverage]
        )
        if system.is_self_built:
            raw += SELF_BUILT_BONUS

        return CoverageResult(score=max(0, raw), tier=tier, missing_caps=missing)
