"""Tests for markrun.statistics module."""

from dataclasses import FrozenInstanceError

import pytest

from markrun.statistics import StatisticsCollector, TestCase, TestRunStatistics


def outcome(name: str, succeeded: bool, ms: int = 1) -> TestCase:
    return TestCase(name=name, succeeded=succeeded, execution_time_ms=ms)


class TestTestCase:
    """Tests for the TestCase outcome record."""

    def test_is_immutable(self):
        case = outcome("check", True)

        with pytest.raises(FrozenInstanceError):
            case.succeeded = False

    def test_equality_ignores_error(self):
        first = TestCase(name="check", succeeded=False, execution_time_ms=3, error=ValueError("a"))
        second = TestCase(name="check", succeeded=False, execution_time_ms=3, error=ValueError("b"))

        assert first == second


class TestStatisticsCollector:
    """Tests for StatisticsCollector."""

    def test_partitions_by_succeeded_flag(self):
        collector = StatisticsCollector()
        for case in [outcome("a", True), outcome("b", False), outcome("c", True), outcome("d", False)]:
            collector.add(case)

        statistics = collector.build()

        assert [c.name for c in statistics.successes] == ["a", "c"]
        assert [c.name for c in statistics.failures] == ["b", "d"]

    def test_build_returns_snapshot(self):
        collector = StatisticsCollector()
        collector.add(outcome("a", True))
        statistics = collector.build()

        collector.add(outcome("b", True))

        assert statistics.successes_total == 1

    def test_empty_collector(self):
        assert StatisticsCollector().build() == TestRunStatistics()


class TestTestRunStatistics:
    """Tests for TestRunStatistics."""

    def test_totals(self):
        statistics = TestRunStatistics(
            successes=(outcome("a", True), outcome("b", True)),
            failures=(outcome("c", False),),
        )

        assert statistics.successes_total == 2
        assert statistics.failures_total == 1
        assert statistics.total == 3

    def test_empty_totals(self):
        statistics = TestRunStatistics()

        assert statistics.total == 0
        assert statistics.successes_total == 0
        assert statistics.failures_total == 0

    def test_from_outcomes_preserves_order(self):
        outcomes = [outcome("x", False), outcome("y", True), outcome("z", False)]

        statistics = TestRunStatistics.from_outcomes(outcomes)

        assert [c.name for c in statistics.failures] == ["x", "z"]
        assert [c.name for c in statistics.successes] == ["y"]
