"""Capability index: which monitoring categories a system actually covers."""

from monitor_scoring.models.model_catalog import MANDATORY_CAPABILITIES, CapabilityCategory
from monitor_scoring.models.model_system import System


class CapabilityIndex:
    """Derives covered and missing capability categories from tool selections.

    Only capabilities enabled for a selected tool count. Tools that are
    selected but not configured (or unknown to the catalog) contribute an
    empty set.
    """

    def covered(self, system: System) -> set[CapabilityCategory]:
        """Union of enabled capabilities across all selected tools."""
        covered: set[CapabilityCategory] = set()
        for tool_id in system.selected_tool_ids:
            covered.update(system.capabilities_for(tool_id))
        return covered

    def missing_mandatory(self, system: System) -> list[CapabilityCategory]:
        """Mandatory categories not covered, in mandatory order."""
        covered = self.covered(system)
        return [cap for cap in MANDATORY_CAPABILITIES if cap not in covered]
