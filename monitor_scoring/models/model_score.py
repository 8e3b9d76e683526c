"""Score output models."""

from enum import Enum

from pydantic import ConfigDict, Field

from monitor_scoring.models.common import CamelModel
from monitor_scoring.models.model_catalog import CapabilityCategory


class CoverageTier(str, Enum):
    """Package coverage tier derived from mandatory capability coverage."""

    FULL = "full"
    BASIC = "basic"
    PARTIAL = "partial"
    LOW = "low"


class CoverageResult(CamelModel):
    """Coverage component score with its diagnostics."""

    model_config = ConfigDict(frozen=True)

    score: float = Field(ge=0.0, description="Coverage points, may exceed 45 with the bonus")
    tier: CoverageTier
    missing_caps: list[CapabilityCategory] = Field(default_factory=list)


class ScoreBreakdown(CamelModel):
    """Rubric result for one system.

    Recomputed on demand from a System and the tool catalog; never stored
    with an identity of its own.
    """

    model_config = ConfigDict(frozen=True)

    part1: float = Field(default=0.0, description="Configuration completeness, max 60")
    part2: float = Field(default=0.0, description="Fault detection, max 20")
    part3: float = Field(default=0.0, description="Alert configuration, max 10")
    part4: float = Field(default=0.0, description="Operations team, max 10")
    total: float = Field(default=0.0, description="Sum of the four parts, max 100")
    missing_caps: list[CapabilityCategory] = Field(
        default_factory=list, description="Mandatory categories not covered"
    )
    package_level: CoverageTier = Field(default=CoverageTier.FULL)
