"""Console reporter for markrun statistics using Rich."""

from __future__ import annotations

import sys

from rich.console import Console
from rich.markup import escape

from markrun.config import RunnerSettings
from markrun.reports.base import Reporter
from markrun.statistics import TestCase, TestRunStatistics


class ConsoleReporter(Reporter):
    """Reporter that prints run totals and per-test timings to the console.

    The text is the same for a terminal and a captured stream; colors are
    only added when the console supports them.
    """

    def __init__(self, console: Console | None = None, settings: RunnerSettings | None = None) -> None:
        settings = settings or RunnerSettings()
        self.console = console or Console(file=sys.stdout, no_color=settings.no_color, highlight=False)

    def _print_line(self, text: str = "") -> None:
        self.console.print(text, highlight=False, soft_wrap=True)

    def _print_section(self, title: str, outcomes: tuple[TestCase, ...], color: str) -> None:
        self._print_line()
        self._print_line(f"[bold {color}]{title}[/bold {color}]")
        for outcome in outcomes:
            self._print_line(f"Method {escape(outcome.name)}. Time taken: {outcome.execution_time_ms} ms")

    def report(self, statistics: TestRunStatistics) -> None:
        self._print_line()
        self._print_line(f"[bold]Tests run: {statistics.total}[/bold]")
        self._print_line(f"[green]Succeeded: {statistics.successes_total}[/green]")
        self._print_line(f"[red]Failed: {statistics.failures_total}[/red]")

        self._print_section("Extended statistics for the succeeded tests", statistics.successes, "green")
        self._print_section("Extended statistics for the failed tests", statistics.failures, "red")
