"""Tests for the evaluator registry and part/total composition."""

import pytest

from monitor_scoring import EvaluatorRegistry, evaluate
from monitor_scoring.defaults import default_tools, initial_system
from monitor_scoring.evaluators.composite import build_breakdown, combine_part1, round1
from monitor_scoring.models.model_catalog import CapabilityCategory, ToolCatalog
from monitor_scoring.models.model_score import CoverageResult, CoverageTier, ScoreBreakdown
from monitor_scoring.models.model_system import ServerCoverage, System

HOST = CapabilityCategory.HOST
PROCESS = CapabilityCategory.PROCESS
NETWORK = CapabilityCategory.NETWORK
DB = CapabilityCategory.DB
TRANS = CapabilityCategory.TRANS


@pytest.fixture
def registry():
    """Create an evaluator registry."""
    return EvaluatorRegistry()


class TestRounding:
    """Tests for one-decimal rounding."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (2.25, 2.3),
            (2.24, 2.2),
            (0.05, 0.1),
            (-0.05, 0.0),
            (39.333333, 39.3),
            (10, 10.0),
        ],
    )
    def test_round1(self, value, expected):
        assert round1(value) == pytest.approx(expected)

    def test_part1_capped(self):
        assert combine_part1(50, 10, 5) == 60

    def test_part1_rounded(self):
        assert combine_part1(26, 25 / 3, 5) == pytest.approx(39.3)


class TestBuildBreakdown:
    """Tests for assembling the breakdown from section scores."""

    def test_detection_capped(self):
        coverage = CoverageResult(score=45, tier=CoverageTier.FULL, missing_caps=[])
        breakdown = build_breakdown(coverage, 10, 5, 25, 10, 10)
        assert breakdown.part2 == 20
        assert breakdown.total == 100

    def test_carries_coverage_diagnostics(self):
        coverage = CoverageResult(score=8, tier=CoverageTier.PARTIAL, missing_caps=[DB, TRANS])
        breakdown = build_breakdown(coverage, 0, 0, 0, 0, 0)
        assert breakdown.package_level == CoverageTier.PARTIAL
        assert breakdown.missing_caps == [DB, TRANS]
        assert breakdown.part1 == 8


class TestEvaluatorRegistry:
    """Tests for full system scoring."""

    def test_full_credit(self, registry, full_system, sample_catalog):
        """Test that a perfectly configured system scores 100."""
        breakdown = registry.evaluate(full_system, sample_catalog)

        assert breakdown == ScoreBreakdown(
            part1=60,
            part2=20,
            part3=10,
            part4=10,
            total=100,
            missing_caps=[],
            package_level=CoverageTier.FULL,
        )

    def test_self_built_still_capped(self, registry, full_system, sample_catalog):
        """Test that part 1 is capped at 60 even with the self-built bonus."""
        system = full_system.model_copy(update={"is_self_built": True})
        breakdown = registry.evaluate(system, sample_catalog)
        assert breakdown.part1 == 60
        assert breakdown.total == 100

    def test_mixed_system(self, registry, full_system, sample_catalog):
        """Test a system exercising every section at once."""
        system = full_system.model_copy(
            update={
                "tool_capabilities": {
                    "zabbix": [HOST, PROCESS, NETWORK],
                    "prometheus": [],
                    "dbwatch": [DB],
                },
                "checked_scenario_ids": ["z1", "z2", "z4", "d1"],
                "accuracy_rate": 7,
                "discovery_rate": 7,
                "early_detection_count": 1,
                "late_response_count": 1,
            }
        )
        breakdown = registry.evaluate(system, sample_catalog)

        # Coverage 26 (basic, trans missing), standardization 25/3, documentation 5
        assert breakdown.part1 == pytest.approx(39.3)
        assert breakdown.part2 == 15
        assert breakdown.part3 == 10
        assert breakdown.part4 == 7.5
        assert breakdown.total == pytest.approx(71.8)
        assert breakdown.package_level == CoverageTier.BASIC
        assert breakdown.missing_caps == [TRANS]

    def test_empty_system(self, registry, empty_system, sample_catalog):
        """Test scoring with every input at its default."""
        breakdown = registry.evaluate(empty_system, sample_catalog)

        assert breakdown.part1 == 0
        assert breakdown.part2 == 0
        # No ops lead configured
        assert breakdown.part3 == 5
        assert breakdown.part4 == 10
        assert breakdown.total == 15
        assert breakdown.package_level == CoverageTier.LOW
        assert breakdown.missing_caps == [HOST, PROCESS, NETWORK, DB, TRANS]

    def test_empty_catalog(self, registry, full_system):
        """Test that an empty catalog only affects standardization."""
        breakdown = registry.evaluate(full_system, ToolCatalog())

        # Capabilities still come from the system; no tool resolves
        assert breakdown.part1 == 50
        assert breakdown.package_level == CoverageTier.FULL

    def test_template_system(self, registry):
        """Test the shipped template against the shipped catalog."""
        breakdown = registry.evaluate(initial_system(), ToolCatalog(tools=default_tools()))

        assert breakdown.part1 == 10
        assert breakdown.part2 == 14
        assert breakdown.part3 == 10
        assert breakdown.part4 == 10
        assert breakdown.total == 44
        assert breakdown.package_level == CoverageTier.LOW
        assert breakdown.missing_caps == [NETWORK, DB, TRANS]

    def test_inputs_not_modified(self, registry, full_system, sample_catalog):
        """Test that scoring leaves system and catalog untouched."""
        system_before = full_system.model_dump()
        catalog_before = sample_catalog.model_dump()

        registry.evaluate(full_system, sample_catalog)

        assert full_system.model_dump() == system_before
        assert sample_catalog.model_dump() == catalog_before

    def test_deterministic(self, registry, full_system, sample_catalog):
        """Test that repeated scoring gives equal results."""
        system = full_system.model_copy(update={"server_coverage": ServerCoverage.BASIC})
        first = registry.evaluate(system, sample_catalog)
        second = registry.evaluate(system, sample_catalog)
        assert first == second

    @pytest.mark.parametrize(
        "changes",
        [
            {},
            {"selected_tool_ids": [], "tool_capabilities": {}},
            {"server_coverage": ServerCoverage.LOW, "is_self_built": True},
            {"late_response_count": 9, "overdue_count": 9, "mismatched_alerts_count": 9},
            {"checked_scenario_ids": []},
        ],
    )
    def test_parts_within_bounds(self, registry, full_system, sample_catalog, changes):
        """Test that parts stay in range for well-formed inputs."""
        system = full_system.model_copy(update=changes)
        breakdown = registry.evaluate(system, sample_catalog)

        assert 0 <= breakdown.part1 <= 60
        assert 0 <= breakdown.part2 <= 20
        assert 0 <= breakdown.part3 <= 10
        assert 0 <= breakdown.part4 <= 10
        assert 0 <= breakdown.total <= 100
        assert breakdown.total == pytest.approx(
            round1(breakdown.part1 + breakdown.part2 + breakdown.part3 + breakdown.part4)
        )

    def test_evaluate_batch(self, registry, full_system, empty_system, sample_catalog):
        """Test batch scoring keyed by system ID."""
        results = registry.evaluate_batch([full_system, empty_system], sample_catalog)

        assert set(results) == {"sys_full", "sys_empty"}
        assert results["sys_full"].total == 100
        assert results["sys_empty"].total == 15

    def test_module_level_evaluate(self, full_system, sample_catalog):
        """Test the convenience function uses a default registry."""
        assert evaluate(full_system, sample_catalog).total == 100


def test_breakdown_serializes_camel_case(full_system, sample_catalog):
    """Test that breakdown JSON uses wire names."""
    data = evaluate(full_system, sample_catalog).model_dump(mode="json", by_alias=True)
    assert data["packageLevel"] == "full"
    assert data["missingCaps"] == []


def test_system_without_capability_entry_scores_like_empty_caps(sample_catalog):
    """Test that selected tools without capability configuration contribute nothing."""
    system = System(id="s", selected_tool_ids=["zabbix"], checked_scenario_ids=["z1"])
    breakdown = evaluate(system, sample_catalog)

    # No relevant scenarios -> standardization 10; coverage floors to 0
    assert breakdown.part1 == 10
    assert breakdown.missing_caps == [HOST, PROCESS, NETWORK, DB, TRANS]
