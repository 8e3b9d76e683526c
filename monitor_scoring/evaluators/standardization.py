"""Standardization evaluator for standard-metric compliance per tool."""

import logging

from monitor_scoring.evaluators.bands import first_match
from monitor_scoring.models.model_catalog import MonitorTool, ToolCatalog
from monitor_scoring.models.model_system import System

logger = logging.getLogger(__name__)

TERM_MAX = 10

# Percentage of relevant scenarios checked -> deduction
DEDUCTION_BANDS: tuple[tuple[float, int], ...] = (
    (99, 0),
    (70, 2),
    (50, 5),
    (30, 7),
)
DEDUCTION_FALLBACK = 10


class StandardizationEvaluator:
    """Evaluates how many relevant standard metrics are implemented.

    For each selected tool, the relevant scenarios are those whose category
    is enabled for the system. The tool's term is 10 minus a banded
    deduction on the checked percentage; a tool without relevant scenarios
    gets the full 10.

    The average divides by the number of selected IDs, including IDs the
    catalog no longer knows. Those add no term, which lowers the average.
    """

    def evaluate(self, system: System, catalog: ToolCatalog) -> float:
        """Calculate the standardization score.

        Args:
            system: The system to evaluate
            catalog: Tool catalog used to resolve selected tools

        Returns:
            Score between 0-10
        """
        if not system.selected_tool_ids:
            return 0

        checked = set(system.checked_scenario_ids)
        total = 0.0
        for tool_id in system.selected_tool_ids:
            tool = catalog.get(tool_id)
            if tool is None:
                logger.debug(f"Selected tool {tool_id} not in catalog, no term")
                continue
            total += self.tool_term(tool, system, checked)

        return total / len(system.selected_tool_ids)

    def tool_term(self, tool: MonitorTool, system: System, checked: set[str]) -> float:
        """Points for a single tool (0-10)."""
        enabled = set(system.capabilities_for(tool.id))
        relevant = [s for s in tool.scenarios if s.category in enabled]

        if not relevant:
            return TERM_MAX

        checked_count = sum(1 for s in relevant if s.id in checked)
        checked_pct = checked_count * 100 / len(relevant)

        return TERM_MAX - first_match(checked_pct, DEDUCTION_BANDS, DEDUCTION_FALLBACK)
