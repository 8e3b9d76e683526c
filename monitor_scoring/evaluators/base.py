"""Base evaluator protocol defining the contract for all rubric evaluators."""

from typing import Protocol

from monitor_scoring.models.model_catalog import ToolCatalog
from monitor_scoring.models.model_system import System


class BaseEvaluator(Protocol):
    """Protocol defining the evaluator contract.

    Evaluators are pure functions of a System and the ToolCatalog. They never
    mutate either input, never query storage and never raise on odd input:
    unknown references contribute nothing and out-of-range numbers flow
    through to the clamps each rubric section defines.
    """

    def evaluate(self, system: System, catalog: ToolCatalog) -> float:
        """Score one rubric section.

        Args:
            system: The system to evaluate
            catalog: Tool catalog used to resolve selected tool IDs

        Returns:
            Points earned for this section
        """
        ...
