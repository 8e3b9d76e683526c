"""Evaluators module for scoring monitored systems against the rubric.

Systems are evaluated on four parts:
- Configuration (coverage + standardization + documentation, max 60)
- Fault detection (accuracy, discovery, early detection, max 20)
- Alert configuration (max 10)
- Operations team (max 10)

All evaluators are stateless pure functions that take System + ToolCatalog → score.
"""

from monitor_scoring.evaluators.alert import AlertEvaluator
from monitor_scoring.evaluators.base import BaseEvaluator
from monitor_scoring.evaluators.capability import CapabilityIndex
from monitor_scoring.evaluators.composite import build_breakdown, combine_part1, round1
from monitor_scoring.evaluators.coverage import CoverageEvaluator
from monitor_scoring.evaluators.detection import (
    DetectionEvaluator,
    accuracy_points,
    discovery_points,
)
from monitor_scoring.evaluators.documentation import DocumentationEvaluator
from monitor_scoring.evaluators.registry import EvaluatorRegistry, evaluate
from monitor_scoring.evaluators.standardization import StandardizationEvaluator
from monitor_scoring.evaluators.team import TeamEvaluator

__all__ = [
    # Protocol
    "BaseEvaluator",
    # Individual evaluators
    "CapabilityIndex",
    "CoverageEvaluator",
    "StandardizationEvaluator",
    "DocumentationEvaluator",
    "DetectionEvaluator",
    "AlertEvaluator",
    "TeamEvaluator",
    # Orchestration
    "EvaluatorRegistry",
    "evaluate",
    # Composite scoring
    "build_breakdown",
    "combine_part1",
    "round1",
    # Utilities
    "accuracy_points",
    "discovery_points",
]
