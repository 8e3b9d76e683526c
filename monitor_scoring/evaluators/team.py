"""Team evaluator for operational responsiveness."""

from monitor_scoring.models.model_catalog import ToolCatalog
from monitor_scoring.models.model_system import System

TEAM_BASE = 10
PENALTY_LATE_RESPONSE = 2.5
PENALTY_OVERDUE = 1


class TeamEvaluator:
    """Evaluates the operations team.

    Algorithm:
        team_score = 10 - late_responses×2.5 - overdue_items×1
        Minimum: 0
    """

    def evaluate(self, system: System, catalog: ToolCatalog) -> float:
        score = (
            TEAM_BASE
            - system.late_response_count * PENALTY_LATE_RESPONSE
            - system.overdue_count * PENALTY_OVERDUE
        )
        return max(0, score)
