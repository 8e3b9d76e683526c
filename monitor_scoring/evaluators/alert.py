"""Alert evaluator for alert-routing configuration."""

from monitor_scoring.models.model_catalog import ToolCatalog
from monitor_scoring.models.model_system import DataMonitorStatus, System

ALERT_BASE = 10
OPS_LEAD_MISSING_PENALTY = 5
PENALTY_PER_MISMATCHED_ALERT = 1
PENALTY_PER_MISSING_ITEM = 1

DATA_MONITOR_PENALTIES: dict[DataMonitorStatus, int] = {
    DataMonitorStatus.FULL: 0,
    DataMonitorStatus.MISSING: 2,
    DataMonitorStatus.NA: 5,
}


class AlertEvaluator:
    """Evaluates alert recipient configuration.

    Algorithm:
        alert_score = 10 - 5 (no ops lead) - data_monitor_penalty
                      - mismatched_alerts - missing_monitor_items
        Minimum: 0
    """

    def evaluate(self, system: System, catalog: ToolCatalog) -> float:
        score = ALERT_BASE
        if not system.ops_lead_configured:
            score -= OPS_LEAD_MISSING_PENALTY
        score -= DATA_MONITOR_PENALTIES[system.data_monitor_configured]
        score -= system.mismatched_alerts_count * PENALTY_PER_MISMATCHED_ALERT
        score -= system.missing_monitor_items * PENALTY_PER_MISSING_ITEM

        return max(0, score)
