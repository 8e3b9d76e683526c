"""Monitored system model holding every scoring input."""

from enum import Enum

from pydantic import Field, field_validator

from monitor_scoring.models.common import CamelModel
from monitor_scoring.models.model_catalog import CapabilityCategory


class SystemTier(str, Enum):
    """Business tier of a system (informational, not scored)."""

    A = "A"  # Core
    B = "B"  # Important
    C = "C"  # General


class ServerCoverage(str, Enum):
    """Share of servers/services under monitoring."""

    FULL = "full"  # 100%
    BASIC = "basic"  # 70%
    PARTIAL = "partial"  # 50%
    LOW = "low"  # 30%


class DataMonitorStatus(str, Enum):
    """Data-level alert recipient configuration."""

    FULL = "full"
    MISSING = "missing"
    NA = "na"


class System(CamelModel):
    """A monitored system and its observability configuration.

    Numeric inputs are unconstrained: the scoring engine accepts
    whatever the editing boundary produced, fractional and negative counters
    included. Numeric strings are parsed; null or blank numbers count as 0.
    Absent fields take the value that contributes no deduction or bonus.
    """

    # Identification
    id: str = Field(description="Unique system ID")
    name: str = Field(default="", description="Display name")
    tier: SystemTier = Field(default=SystemTier.A, description="Business tier")

    # Package coverage
    is_self_built: bool = Field(default=False, description="Has self-built monitoring (+5)")
    server_coverage: ServerCoverage = Field(default=ServerCoverage.FULL)

    # Tool selection and enabled capabilities
    selected_tool_ids: list[str] = Field(default_factory=list)
    tool_capabilities: dict[str, list[CapabilityCategory]] = Field(
        default_factory=dict, description="Tool ID -> capabilities enabled for this system"
    )

    # Standardization
    checked_scenario_ids: list[str] = Field(
        default_factory=list, description="Scenario IDs marked as implemented"
    )

    # Documentation
    documented_items: float = Field(default=0, description="Documentation points, 0-5 expected")

    # Detection
    avg_detection_time: float = Field(default=0, description="Minutes, recorded only")
    max_detection_time: float = Field(default=0, description="Minutes, recorded only")
    accuracy_rate: float = Field(default=0, description="Point band: 10, 7, 3 or 0")
    discovery_rate: float = Field(default=0, description="Point band: 10, 7, 3 or 0")
    early_detection_count: float = Field(default=0, description="Faults caught before alerting")

    # Alerts
    ops_lead_configured: bool = Field(default=False)
    data_monitor_configured: DataMonitorStatus = Field(default=DataMonitorStatus.FULL)
    missing_monitor_items: float = Field(default=0)
    mismatched_alerts_count: float = Field(default=0)

    # Team
    late_response_count: float = Field(default=0)
    overdue_count: float = Field(default=0)

    @field_validator(
        "documented_items",
        "avg_detection_time",
        "max_detection_time",
        "accuracy_rate",
        "discovery_rate",
        "early_detection_count",
        "missing_monitor_items",
        "mismatched_alerts_count",
        "late_response_count",
        "overdue_count",
        mode="before",
    )
    @classmethod
    def blank_number_as_zero(cls, value: object) -> object:
        """Treat null and empty numeric inputs as 0."""
        if value is None or (isinstance(value, str) and not value.strip()):
            return 0
        return value

    def capabilities_for(self, tool_id: str) -> list[CapabilityCategory]:
        """Enabled capabilities of a tool, empty when not configured."""
        return self.tool_capabilities.get(tool_id, [])
