"""Pydantic models for monitor_scoring."""

from monitor_scoring.models.model_catalog import (
    CATEGORY_LABELS,
    MANDATORY_CAPABILITIES,
    CapabilityCategory,
    MonitorTool,
    Scenario,
    SeverityLevel,
    ToolCatalog,
)
from monitor_scoring.models.model_score import (
    CoverageResult,
    CoverageTier,
    ScoreBreakdown,
)
from monitor_scoring.models.model_storage import AppState
from monitor_scoring.models.model_system import (
    DataMonitorStatus,
    ServerCoverage,
    System,
    SystemTier,
)

__all__ = [
    # Catalog models
    "CapabilityCategory",
    "MonitorTool",
    "Scenario",
    "SeverityLevel",
    "ToolCatalog",
    # Catalog constants
    "CATEGORY_LABELS",
    "MANDATORY_CAPABILITIES",
    # System models
    "DataMonitorStatus",
    "ServerCoverage",
    "System",
    "SystemTier",
    # Score models
    "CoverageResult",
    "CoverageTier",
    "ScoreBreakdown",
    # Storage models
    "AppState",
]
