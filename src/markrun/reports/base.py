"""Reporter interface."""

from abc import ABC, abstractmethod

from markrun.statistics import TestRunStatistics


class Reporter(ABC):
    """Consumes the final statistics of a run."""

    @abstractmethod
    def report(self, statistics: TestRunStatistics) -> None:
        """Render the statistics of a completed run."""
