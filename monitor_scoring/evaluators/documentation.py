"""Documentation evaluator."""

from monitor_scoring.models.model_catalog import ToolCatalog
from monitor_scoring.models.model_system import System


class DocumentationEvaluator:
    """Passes the documented-items points through unchanged.

    The expected range is 0-5; keeping values inside it is the editing
    boundary's job, not this evaluator's.
    """

    def evaluate(self, system: System, catalog: ToolCatalog) -> float:
        return system.documented_items
