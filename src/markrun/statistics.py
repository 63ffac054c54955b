"""Test outcome records and run statistics."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class TestCase:
    """Outcome of a single test method invocation."""

    __test__ = False  # Prevent pytest from collecting this as a test class

    name: str
    succeeded: bool
    execution_time_ms: int
    error: Exception | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class TestRunStatistics:
    """Outcomes of a run split into successes and failures, in execution order."""

    __test__ = False  # Prevent pytest from collecting this as a test class

    successes: tuple[TestCase, ...] = ()
    failures: tuple[TestCase, ...] = ()

    @property
    def successes_total(self) -> int:
        """Count of succeeded tests."""
        return len(self.successes)

    @property
    def failures_total(self) -> int:
        """Count of failed tests."""
        return len(self.failures)

    @property
    def total(self) -> int:
        """Total test count."""
        return self.successes_total + self.failures_total

    @classmethod
    def from_outcomes(cls, outcomes: Iterable[TestCase]) -> TestRunStatistics:
        """Partition outcomes, preserving their relative order."""
        collector = StatisticsCollector()
        for outcome in outcomes:
            collector.add(outcome)
        return collector.build()


class StatisticsCollector:
    """Accumulates outcomes as the runner produces them."""

    def __init__(self) -> None:
        self._successes: list[TestCase] = []
        self._failures: list[TestCase] = []

    def add(self, outcome: TestCase) -> None:
        if outcome.succeeded:
            self._successes.append(outcome)
        else:
            self._failures.append(outcome)

    def build(self) -> TestRunStatistics:
        return TestRunStatistics(successes=tuple(self._successes), failures=tuple(self._failures))
