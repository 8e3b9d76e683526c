"""Detection evaluator for monitoring accuracy and fault discovery."""

from monitor_scoring.evaluators.bands import first_match
from monitor_scoring.models.model_catalog import ToolCatalog
from monitor_scoring.models.model_system import System

DETECTION_MAX = 20
EARLY_BONUS_MAX = 5
EARLY_BONUS_PER_INCIDENT = 1

# Point values assigned at data entry (lower bounds of each band)
ACCURACY_POINTS: tuple[tuple[float, int], ...] = (
    (99, 10),
    (95, 7),
    (90, 3),
)
DISCOVERY_POINTS: tuple[tuple[float, int], ...] = (
    (99, 10),
    (95, 7),
    (85, 3),
)


class DetectionEvaluator:
    """Evaluates fault detection quality.

    Algorithm:
        early_bonus = min(5, early_detection_count)
        detection_score = min(20, accuracy + discovery + early_bonus)

    Accuracy and discovery arrive as pre-mapped points (10/7/3/0). The band
    tables above document the mapping used by data entry; see
    accuracy_points() and discovery_points().
    """

    def evaluate(self, system: System, catalog: ToolCatalog) -> float:
        """Calculate the detection score.

        Args:
            system: The system to evaluate
            catalog: Tool catalog (unused for detection scoring)

        Returns:
            Score between 0-20 for well-formed inputs
        """
        early_bonus = min(EARLY_BONUS_MAX, system.early_detection_count * EARLY_BONUS_PER_INCIDENT)
        return min(DETECTION_MAX, system.accuracy_rate + system.discovery_rate + early_bonus)


def accuracy_points(rate_pct: float) -> int:
    """Map a measured accuracy percentage to its point band."""
    return first_match(rate_pct, ACCURACY_POINTS, 0)


def discovery_points(rate_pct: float) -> int:
    """Map a measured fault-discovery percentage to its point band."""
    return first_match(rate_pct, DISCOVERY_POINTS, 0)
