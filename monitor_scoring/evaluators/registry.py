"""Evaluator registry for orchestrating all rubric evaluators."""

import logging

from monitor_scoring.evaluators.alert import AlertEvaluator
from monitor_scoring.evaluators.capability import CapabilityIndex
from monitor_scoring.evaluators.composite import build_breakdown
from monitor_scoring.evaluators.coverage import CoverageEvaluator
from monitor_scoring.evaluators.detection import DetectionEvaluator
from monitor_scoring.evaluators.documentation import DocumentationEvaluator
from monitor_scoring.evaluators.standardization import StandardizationEvaluator
from monitor_scoring.evaluators.team import TeamEvaluator
from monitor_scoring.models.model_catalog import ToolCatalog
from monitor_scoring.models.model_score import ScoreBreakdown
from monitor_scoring.models.model_system import System

logger = logging.getLogger(__name__)


class EvaluatorRegistry:
    """Orchestrates all rubric evaluators to score systems.

    This registry manages the section evaluators and provides a unified
    interface for scoring. It handles:
    - Running every section evaluator
    - Folding coverage, standardization and documentation into part 1
    - Rounding and capping the parts and the total
    """

    def __init__(self) -> None:
        """Initialize registry with all evaluators."""
        self.capability_index = CapabilityIndex()
        self.coverage = CoverageEvaluator(self.capability_index)
        self.evaluators = {
            "standardization": StandardizationEvaluator(),
            "documentation": DocumentationEvaluator(),
            "detection": DetectionEvaluator(),
            "alert": AlertEvaluator(),
            "team": TeamEvaluator(),
        }

    def evaluate(self, system: System, catalog: ToolCatalog) -> ScoreBreakdown:
        """Score one system.

        Neither argument is modified; the same inputs always produce an
        equal breakdown.

        Args:
            system: The system to evaluate
            catalog: Tool catalog used to resolve selected tools

        Returns:
            ScoreBreakdown with four parts, total and coverage diagnostics
        """
        coverage = self.coverage.assess(system)
        scores = {
            name: evaluator.evaluate(system, catalog)
            for name, evaluator in self.evaluators.items()
        }

        breakdown = build_breakdown(
            coverage=coverage,
            standardization=scores["standardization"],
            documentation=scores["documentation"],
            detection=scores["detection"],
            alert=scores["alert"],
            team=scores["team"],
        )
        logger.debug(f"Scored {system.id}: total={breakdown.total}")
        return breakdown

    def evaluate_batch(
        self, systems: list[System], catalog: ToolCatalog
    ) -> dict[str, ScoreBreakdown]:
        """Score multiple systems against the same catalog.

        Returns:
            Breakdowns keyed by system ID
        """
        return {system.id: self.evaluate(system, catalog) for system in systems}


_default_registry = EvaluatorRegistry()


def evaluate(system: System, catalog: ToolCatalog) -> ScoreBreakdown:
    """Score a system with the default registry."""
    return _default_registry.evaluate(system, catalog)
