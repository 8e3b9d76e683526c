"""Pytest configuration and fixtures."""

import tempfile
from pathlib import Path

import pytest

from monitor_scoring.defaults import default_tools
from monitor_scoring.models.model_catalog import (
    CapabilityCategory,
    MonitorTool,
    Scenario,
    SeverityLevel,
    ToolCatalog,
)
from monitor_scoring.models.model_storage import AppState
from monitor_scoring.models.model_system import (
    DataMonitorStatus,
    ServerCoverage,
    System,
    SystemTier,
)
from monitor_scoring.storage.file_manager import FileManager

HOST = CapabilityCategory.HOST
PROCESS = CapabilityCategory.PROCESS
NETWORK = CapabilityCategory.NETWORK
DB = CapabilityCategory.DB
TRANS = CapabilityCategory.TRANS


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def file_manager(temp_dir: Path) -> FileManager:
    """Create a FileManager with temporary directory."""
    return FileManager(data_dir=temp_dir)


@pytest.fixture
def sample_catalog() -> ToolCatalog:
    """Catalog whose three tools together cover every mandatory category."""
    return ToolCatalog(
        tools=[
            MonitorTool(
                id="zabbix",
                name="Zabbix",
                default_capabilities=[HOST, PROCESS, NETWORK],
                scenarios=[
                    Scenario(id="z1", category=PROCESS, metric="Process alive", threshold="0"),
                    Scenario(id="z2", category=HOST, metric="CPU usage", threshold=">90%"),
                    Scenario(id="z4", category=NETWORK, metric="Ping unreachable", threshold="Down"),
                ],
            ),
            MonitorTool(
                id="prometheus",
                name="Prometheus",
                default_capabilities=[HOST, PROCESS, TRANS],
                scenarios=[
                    Scenario(
                        id="p1",
                        category=HOST,
                        metric="JVM heap usage",
                        level=SeverityLevel.YELLOW,
                        threshold=">90%",
                    ),
                    Scenario(
                        id="p3",
                        category=TRANS,
                        metric="API response time",
                        level=SeverityLevel.YELLOW,
                        threshold=">2s",
                    ),
                ],
            ),
            MonitorTool(
                id="dbwatch",
                name="DB Watch",
                default_capabilities=[DB],
                scenarios=[
                    Scenario(id="d1", category=DB, metric="Connection pool usage", level=SeverityLevel.RED),
                    Scenario(id="d2", category=DB, metric="Slow queries", level=SeverityLevel.ORANGE),
                ],
            ),
        ]
    )


@pytest.fixture
def full_system() -> System:
    """System that earns every available point."""
    return System(
        id="sys_full",
        name="Core banking",
        tier=SystemTier.A,
        is_self_built=False,
        server_coverage=ServerCoverage.FULL,
        selected_tool_ids=["zabbix", "prometheus", "dbwatch"],
        tool_capabilities={
            "zabbix": [HOST, PROCESS, NETWORK],
            "prometheus": [HOST, PROCESS, TRANS],
            "dbwatch": [DB],
        },
        checked_scenario_ids=["z1", "z2", "z4", "p1", "p3", "d1", "d2"],
        documented_items=5,
        accuracy_rate=10,
        discovery_rate=10,
        early_detection_count=0,
        ops_lead_configured=True,
        data_monitor_configured=DataMonitorStatus.FULL,
        missing_monitor_items=0,
        mismatched_alerts_count=0,
        late_response_count=0,
        overdue_count=0,
    )


@pytest.fixture
def empty_system() -> System:
    """System with nothing selected and every input at its default."""
    return System(id="sys_empty", name="Empty")


@pytest.fixture
def sample_state(full_system: System, sample_catalog: ToolCatalog) -> AppState:
    """Application state holding the full-credit system and sample catalog."""
    return AppState(systems=[full_system], tools=sample_catalog.tools)


@pytest.fixture
def loose_document() -> dict:
    """Stored document with numbers written by browser number inputs.

    Counters may be fractional, numeric strings, blank or null.
    """
    return {
        "systems": [
            {
                "id": "sys_real",
                "name": "Legacy billing",
                "tier": "B",
                "selectedToolIds": ["zabbix"],
                "toolCapabilities": {"zabbix": ["host", "process"]},
                "checkedScenarioIds": ["z1"],
                "documentedItems": 5,
                "avgDetectionTime": "",
                "maxDetectionTime": None,
                "accuracyRate": "7",
                "discoveryRate": 7,
                "earlyDetectionCount": 2.5,
                "opsLeadConfigured": True,
                "dataMonitorConfigured": "full",
                "missingMonitorItems": None,
                "mismatchedAlertsCount": 0,
                "lateResponseCount": 1.5,
                "overdueCount": None,
            }
        ],
        "tools": [tool.model_dump(mode="json", by_alias=True) for tool in default_tools()],
        "lastUpdated": 1_700_000_000_000,
    }
