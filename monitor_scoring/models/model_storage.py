"""Persisted application document."""

from pydantic import Field

from monitor_scoring.models.common import CamelModel
from monitor_scoring.models.model_catalog import MonitorTool, ToolCatalog
from monitor_scoring.models.model_system import System


class AppState(CamelModel):
    """Whole application state stored as one JSON document.

    Stored under a fixed key and replaced wholesale on every save.
    """

    systems: list[System] = Field(default_factory=list)
    tools: list[MonitorTool] = Field(default_factory=list)
    last_updated: int | None = Field(default=None, description="Epoch milliseconds of last save")

    @property
    def catalog(self) -> ToolCatalog:
        """Tool list wrapped for ID lookups."""
        return ToolCatalog(tools=self.tools)

    def get_system(self, system_id: str) -> System | None:
        """Return the system with this ID, or None."""
        for system in self.systems:
            if system.id == system_id:
                return system
        return None
