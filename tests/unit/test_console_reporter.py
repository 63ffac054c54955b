"""Tests for markrun.reports.console module."""

import io

from rich.console import Console

from markrun.config import RunnerSettings
from markrun.reports.console import ConsoleReporter
from markrun.statistics import TestCase, TestRunStatistics


def render(statistics: TestRunStatistics) -> str:
    buffer = io.StringIO()
    reporter = ConsoleReporter(console=Console(file=buffer, color_system=None, width=120))
    reporter.report(statistics)
    return buffer.getvalue()


def test_renders_totals_and_extended_statistics():
    statistics = TestRunStatistics(
        successes=(TestCase(name="testA", succeeded=True, execution_time_ms=3),),
        failures=(TestCase(name="testB", succeeded=False, execution_time_ms=5),),
    )

    assert render(statistics) == (
        "\n"
        "Tests run: 2\n"
        "Succeeded: 1\n"
        "Failed: 1\n"
        "\n"
        "Extended statistics for the succeeded tests\n"
        "Method testA. Time taken: 3 ms\n"
        "\n"
        "Extended statistics for the failed tests\n"
        "Method testB. Time taken: 5 ms\n"
    )


def test_renders_empty_run():
    assert render(TestRunStatistics()) == (
        "\n"
        "Tests run: 0\n"
        "Succeeded: 0\n"
        "Failed: 0\n"
        "\n"
        "Extended statistics for the succeeded tests\n"
        "\n"
        "Extended statistics for the failed tests\n"
    )


def test_lists_outcomes_in_order():
    statistics = TestRunStatistics(
        successes=(
            TestCase(name="second", succeeded=True, execution_time_ms=0),
            TestCase(name="first", succeeded=True, execution_time_ms=12),
        ),
    )

    lines = render(statistics).splitlines()

    assert lines[6:8] == [
        "Method second. Time taken: 0 ms",
        "Method first. Time taken: 12 ms",
    ]


def test_output_is_deterministic():
    statistics = TestRunStatistics(
        failures=(TestCase(name="broken", succeeded=False, execution_time_ms=7),),
    )

    assert render(statistics) == render(statistics)


def test_default_console_respects_no_color():
    reporter = ConsoleReporter(settings=RunnerSettings(no_color=True))

    assert reporter.console.no_color is True
