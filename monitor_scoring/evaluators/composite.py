"""Composite scoring functions for combining section scores into parts."""

import math

from monitor_scoring.consts import PART1_MAX, PART2_MAX
from monitor_scoring.models.model_score import CoverageResult, ScoreBreakdown


def round1(value: float) -> float:
    """Round to one decimal place, halves rounding up (towards +inf)."""
    return math.floor(value * 10 + 0.5) / 10


def combine_part1(coverage: float, standardization: float, documentation: float) -> float:
    """Configuration part: rounded sum of the three sections, capped at 60."""
    return min(PART1_MAX, round1(coverage + standardization + documentation))


def build_breakdown(
    coverage: CoverageResult,
    standardization: float,
    documentation: float,
    detection: float,
    alert: float,
    team: float,
) -> ScoreBreakdown:
    """Assemble the final breakdown from section scores.

    Args:
        coverage: Coverage result with diagnostics
        standardization: Standardization section score (0-10)
        documentation: Documentation section score (0-5 expected)
        detection: Detection section score (0-20)
        alert: Alert section score (0-10)
        team: Team section score (0-10)

    Returns:
        ScoreBreakdown whose total is the rounded sum of the four parts
    """
    part1 = combine_part1(coverage.score, standardization, documentation)
    part2 = min(PART2_MAX, detection)
    part3 = alert
    part4 = team

    return ScoreBreakdown(
        part1=part1,
        part2=part2,
        part3=part3,
        part4=part4,
        total=round1(part1 + part2 + part3 + part4),
        missing_caps=coverage.missing_caps,
        package_level=coverage.tier,
    )
