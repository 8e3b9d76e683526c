"""Monitoring conformance scoring."""

from monitor_scoring.evaluators.registry import EvaluatorRegistry, evaluate
from monitor_scoring.models.model_score import ScoreBreakdown

__all__ = ["EvaluatorRegistry", "ScoreBreakdown", "evaluate"]
