"""Shipped tool catalog and the template for new systems."""

from monitor_scoring.models.model_catalog import (
    CapabilityCategory,
    MonitorTool,
    Scenario,
    SeverityLevel,
)
from monitor_scoring.models.model_system import (
    DataMonitorStatus,
    ServerCoverage,
    System,
    SystemTier,
)


def default_tools() -> list[MonitorTool]:
    """Return a fresh copy of the shipped tool catalog."""
    return [
        MonitorTool(
            id="zabbix",
            name="Zabbix",
            default_capabilities=[
                CapabilityCategory.HOST,
                CapabilityCategory.PROCESS,
                CapabilityCategory.NETWORK,
            ],
            scenarios=[
                Scenario(
                    id="z1",
                    category=CapabilityCategory.PROCESS,
                    metric="Application process alive",
                    level=SeverityLevel.ORANGE,
                    threshold="0",
                ),
                Scenario(
                    id="z2",
                    category=CapabilityCategory.HOST,
                    metric="CPU usage",
                    level=SeverityLevel.ORANGE,
                    threshold=">90%",
                ),
                Scenario(
                    id="z4",
                    category=CapabilityCategory.NETWORK,
                    metric="Ping unreachable",
                    level=SeverityLevel.ORANGE,
                    threshold="Down",
                ),
            ],
        ),
        MonitorTool(
            id="prometheus",
            name="Prometheus",
            default_capabilities=[
                CapabilityCategory.HOST,
                CapabilityCategory.PROCESS,
                CapabilityCategory.TRANS,
            ],
            scenarios=[
                Scenario(
                    id="p1",
                    category=CapabilityCategory.HOST,
                    metric="JVM heap usage",
                    level=SeverityLevel.YELLOW,
                    threshold=">90%",
                ),
                Scenario(
                    id="p3",
                    category=CapabilityCategory.TRANS,
                    metric="API response time",
                    level=SeverityLevel.YELLOW,
                    threshold=">2s",
                ),
            ],
        ),
    ]


def initial_system(system_id: str = "sys_1", name: str = "Sample system") -> System:
    """Return the template system used for empty stores and new systems."""
    return System(
        id=system_id,
        name=name,
        tier=SystemTier.A,
        is_self_built=False,
        server_coverage=ServerCoverage.FULL,
        selected_tool_ids=["zabbix"],
        tool_capabilities={"zabbix": [CapabilityCategory.HOST, CapabilityCategory.PROCESS]},
        checked_scenario_ids=["z1"],
        documented_items=5,
        avg_detection_time=5,
        max_detection_time=5,
        accuracy_rate=7,
        discovery_rate=7,
        early_detection_count=0,
        ops_lead_configured=True,
        data_monitor_configured=DataMonitorStatus.FULL,
        missing_monitor_items=0,
        mismatched_alerts_count=0,
        late_response_count=0,
        overdue_count=0,
    )
