"""Application state workspace: loading, editing and scoring systems.

Every editing operation is a pure function taking an AppState and returning
a new one; nothing here keeps module-level state. The scoring engine only
reads the result.

Workflow:
1. Load state from storage (defaults fill an empty store)
2. Edit systems and the tool catalog
3. Score systems
4. Save the whole document back
"""

import logging
from typing import Any

from monitor_scoring.consts import SCENARIO_ID_PREFIX, SYSTEM_ID_PREFIX, TOOL_ID_PREFIX
from monitor_scoring.defaults import default_tools, initial_system
from monitor_scoring.evaluators.registry import EvaluatorRegistry
from monitor_scoring.models.common import _epoch_ms
from monitor_scoring.models.model_catalog import (
    CapabilityCategory,
    MonitorTool,
    Scenario,
    SeverityLevel,
)
from monitor_scoring.models.model_score import ScoreBreakdown
from monitor_scoring.models.model_storage import AppState
from monitor_scoring.models.model_system import System
from monitor_scoring.storage.base import PermanentStorage

logger = logging.getLogger(__name__)


class UnknownSystemError(KeyError):
    """Raised when an edit refers to a system ID that does not exist."""


class UnknownToolError(KeyError):
    """Raised when an edit refers to a tool ID that is not in the catalog."""


def _new_id(prefix: str, taken: set[str]) -> str:
    """Timestamp-based ID, bumped until unique."""
    stamp = _epoch_ms()
    while f"{prefix}{stamp}" in taken:
        stamp += 1
    return f"{prefix}{stamp}"


def _toggle(items: list, item: Any) -> list:
    """Remove item if present, else append it."""
    if item in items:
        return [x for x in items if x != item]
    return [*items, item]


# === LOAD / SAVE ===


def default_state() -> AppState:
    """State used when nothing has been stored yet."""
    return AppState(systems=[initial_system()], tools=default_tools())


def load_app_state(storage: PermanentStorage) -> AppState:
    """Load state, falling back to defaults for whatever is missing.

    Systems and tools fall back independently: a stored document with no
    systems still keeps its stored tools, and vice versa.
    """
    state = default_state()
    stored = storage.load_state()
    if stored is None:
        logger.info("No stored state, using defaults")
        return state

    updates: dict[str, Any] = {"last_updated": stored.last_updated}
    if stored.systems:
        updates["systems"] = stored.systems
    if stored.tools:
        updates["tools"] = stored.tools
    return state.model_copy(update=updates)


def save_app_state(storage: PermanentStorage, state: AppState) -> bool:
    """Persist the whole state. Returns False if the backend failed."""
    ok = storage.save_state(state)
    if not ok:
        logger.error("Saving state failed, check storage backend")
    return ok


# === SYSTEMS ===


def get_system(state: AppState, system_id: str) -> System:
    """Return a system by ID or raise UnknownSystemError."""
    system = state.get_system(system_id)
    if system is None:
        raise UnknownSystemError(system_id)
    return system


def resolve_active_system(state: AppState, system_id: str | None = None) -> System:
    """Return the requested system, or the first one if the ID is unknown."""
    if not state.systems:
        raise UnknownSystemError(system_id or "<none>")
    if system_id is not None:
        system = state.get_system(system_id)
        if system is not None:
            return system
    return state.systems[0]


def _replace_system(state: AppState, system: System) -> AppState:
    systems = [system if s.id == system.id else s for s in state.systems]
    return state.model_copy(update={"systems": systems})


def add_system(state: AppState, name: str) -> tuple[AppState, System]:
    """Append a new system built from the template."""
    system_id = _new_id(SYSTEM_ID_PREFIX, {s.id for s in state.systems})
    system = initial_system(system_id=system_id, name=name)
    logger.info(f"Added system {system_id} ({name})")
    return state.model_copy(update={"systems": [*state.systems, system]}), system


def update_system(state: AppState, system_id: str, **changes: Any) -> AppState:
    """Apply field changes to a system, validating them.

    Args:
        state: Current state
        system_id: System to change
        **changes: Field values keyed by attribute name (snake_case)

    Returns:
        New state with the updated system

    Raises:
        UnknownSystemError: If the system does not exist
        pydantic.ValidationError: If a value is not valid for its field
    """
    system = get_system(state, system_id)
    data = system.model_dump()
    data.update(changes)
    data["id"] = system.id
    return _replace_system(state, System.model_validate(data))


def toggle_tool(state: AppState, system_id: str, tool_id: str) -> AppState:
    """Select or deselect a tool for a system.

    Selecting seeds the enabled capabilities from the tool's defaults
    (empty if the tool is unknown); deselecting resets them to empty.
    """
    system = get_system(state, system_id)
    capabilities = dict(system.tool_capabilities)

    if tool_id in system.selected_tool_ids:
        selected = [tid for tid in system.selected_tool_ids if tid != tool_id]
        capabilities[tool_id] = []
    else:
        tool = state.catalog.get(tool_id)
        selected = [*system.selected_tool_ids, tool_id]
        capabilities[tool_id] = list(tool.default_capabilities) if tool else []

    updated = system.model_copy(
        update={"selected_tool_ids": selected, "tool_capabilities": capabilities}
    )
    return _replace_system(state, updated)


def toggle_capability(
    state: AppState, system_id: str, tool_id: str, capability: CapabilityCategory
) -> AppState:
    """Enable or disable one capability of a selected tool for a system."""
    system = get_system(state, system_id)
    capabilities = dict(system.tool_capabilities)
    capabilities[tool_id] = _toggle(system.capabilities_for(tool_id), capability)
    return _replace_system(state, system.model_copy(update={"tool_capabilities": capabilities}))


def toggle_scenario(state: AppState, system_id: str, scenario_id: str) -> AppState:
    """Mark or unmark a scenario as implemented for a system."""
    system = get_system(state, system_id)
    checked = _toggle(system.checked_scenario_ids, scenario_id)
    return _replace_system(state, system.model_copy(update={"checked_scenario_ids": checked}))


# === TOOL CATALOG ===


def _get_tool(state: AppState, tool_id: str) -> MonitorTool:
    tool = state.catalog.get(tool_id)
    if tool is None:
        raise UnknownToolError(tool_id)
    return tool


def _replace_tool(state: AppState, tool: MonitorTool) -> AppState:
    tools = [tool if t.id == tool.id else t for t in state.tools]
    return state.model_copy(update={"tools": tools})


def add_tool(state: AppState, name: str) -> tuple[AppState, MonitorTool]:
    """Append an empty tool (no capabilities, no scenarios)."""
    tool_id = _new_id(TOOL_ID_PREFIX, {t.id for t in state.tools})
    tool = MonitorTool(id=tool_id, name=name)
    logger.info(f"Added tool {tool_id} ({name})")
    return state.model_copy(update={"tools": [*state.tools, tool]}), tool


def rename_tool(state: AppState, tool_id: str, name: str) -> AppState:
    """Change a tool's display name."""
    tool = _get_tool(state, tool_id)
    return _replace_tool(state, tool.model_copy(update={"name": name}))


def delete_tool(state: AppState, tool_id: str) -> AppState:
    """Remove a tool from the catalog.

    Systems keep their references; scoring ignores IDs the catalog no
    longer knows.
    """
    _get_tool(state, tool_id)
    logger.info(f"Deleted tool {tool_id}")
    return state.model_copy(update={"tools": [t for t in state.tools if t.id != tool_id]})


def toggle_default_capability(
    state: AppState, tool_id: str, capability: CapabilityCategory
) -> AppState:
    """Add or remove a category from a tool's default capabilities."""
    tool = _get_tool(state, tool_id)
    defaults = _toggle(tool.default_capabilities, capability)
    return _replace_tool(state, tool.model_copy(update={"default_capabilities": defaults}))


def add_scenario(
    state: AppState,
    tool_id: str,
    category: CapabilityCategory,
    metric: str,
    level: SeverityLevel = SeverityLevel.ORANGE,
    threshold: str = "",
) -> AppState:
    """Append a standard scenario to a tool. A blank metric name is ignored."""
    tool = _get_tool(state, tool_id)
    if not metric.strip():
        logger.warning(f"Ignoring scenario with empty metric name for {tool_id}")
        return state

    taken = {s.id for t in state.tools for s in t.scenarios}
    scenario = Scenario(
        id=_new_id(SCENARIO_ID_PREFIX, taken),
        category=category,
        metric=metric,
        level=level,
        threshold=threshold,
    )
    return _replace_tool(state, tool.model_copy(update={"scenarios": [*tool.scenarios, scenario]}))


def remove_scenario(state: AppState, tool_id: str, scenario_id: str) -> AppState:
    """Remove a scenario from a tool. Systems keep their checked IDs."""
    tool = _get_tool(state, tool_id)
    scenarios = [s for s in tool.scenarios if s.id != scenario_id]
    return _replace_tool(state, tool.model_copy(update={"scenarios": scenarios}))


# === SCORING ===


def score_all(
    state: AppState, registry: EvaluatorRegistry | None = None
) -> dict[str, ScoreBreakdown]:
    """Score every system in the state against its catalog."""
    registry = registry or EvaluatorRegistry()
    return registry.evaluate_batch(state.systems, state.catalog)
