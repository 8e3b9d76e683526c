"""Tool catalog models: monitoring tools and their standard scenarios."""

from enum import Enum

from pydantic import Field, field_validator

from monitor_scoring.models.common import CamelModel


class CapabilityCategory(str, Enum):
    """Monitoring domains a tool can cover."""

    HOST = "host"
    PROCESS = "process"
    NETWORK = "network"
    DB = "db"
    TRANS = "trans"
    LINK = "link"
    DATA = "data"
    CLIENT = "client"


class SeverityLevel(str, Enum):
    """Alert severity of a standard scenario."""

    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    GRAY = "gray"


# Categories required for full coverage credit, in reporting order
MANDATORY_CAPABILITIES: tuple[CapabilityCategory, ...] = (
    CapabilityCategory.HOST,
    CapabilityCategory.PROCESS,
    CapabilityCategory.NETWORK,
    CapabilityCategory.DB,
    CapabilityCategory.TRANS,
)

CATEGORY_LABELS: dict[CapabilityCategory, str] = {
    CapabilityCategory.HOST: "Host performance",
    CapabilityCategory.PROCESS: "Process status",
    CapabilityCategory.NETWORK: "Network load",
    CapabilityCategory.DB: "Database",
    CapabilityCategory.TRANS: "Transactions",
    CapabilityCategory.LINK: "Full-link tracing",
    CapabilityCategory.DATA: "Data reconciliation",
    CapabilityCategory.CLIENT: "Client",
}


class Scenario(CamelModel):
    """A single standardized alerting rule ("metric") of a tool."""

    id: str = Field(description="Unique scenario ID")
    category: CapabilityCategory = Field(description="Capability category it belongs to")
    metric: str = Field(description="Free-text metric name")
    level: SeverityLevel = Field(default=SeverityLevel.ORANGE, description="Severity level")
    threshold: str = Field(default="", description="Free-text threshold description")


class MonitorTool(CamelModel):
    """Catalog entry for a monitoring tool."""

    id: str = Field(description="Unique tool ID")
    name: str = Field(description="Display name")
    default_capabilities: list[CapabilityCategory] = Field(
        default_factory=list, description="Categories enabled when the tool is selected"
    )
    scenarios: list[Scenario] = Field(default_factory=list, description="Standard metrics")

    @field_validator("default_capabilities")
    @classmethod
    def dedupe_capabilities(cls, value: list[CapabilityCategory]) -> list[CapabilityCategory]:
        """Keep first occurrence of each category."""
        return list(dict.fromkeys(value))


class ToolCatalog(CamelModel):
    """Ordered collection of tools with total lookup by ID."""

    tools: list[MonitorTool] = Field(default_factory=list)

    def get(self, tool_id: str) -> MonitorTool | None:
        """Return the tool with this ID, or None when it is not in the catalog."""
        for tool in self.tools:
            if tool.id == tool_id:
                return tool
        return None

    def __contains__(self, tool_id: object) -> bool:
        return isinstance(tool_id, str) and self.get(tool_id) is not None
