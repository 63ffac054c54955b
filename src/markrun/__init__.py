"""markrun - Marker-driven test runner for plain Python classes."""

from .config import RunnerSettings
from .discovery import Classification, TargetMethod, classify
from .errors import MarkrunError, StructuralError
from .markers import Marker, after, before, test
from .reports import ConsoleReporter, Reporter
from .runner import Runner, run_test
from .statistics import StatisticsCollector, TestCase, TestRunStatistics
from .validation import validate_target
from .version import __version__


__all__ = [
    # Markers
    "Marker",
    "after",
    "before",
    "test",
    # Running
    "Runner",
    "RunnerSettings",
    "run_test",
    "validate_target",
    "classify",
    "Classification",
    "TargetMethod",
    # Statistics
    "StatisticsCollector",
    "TestCase",
    "TestRunStatistics",
    # Reporting
    "ConsoleReporter",
    "Reporter",
    # Errors
    "MarkrunError",
    "StructuralError",
]
