"""Test runner for executing the marked methods of a target class."""

from __future__ import annotations

import asyncio
import inspect
import logging
import time
from typing import Any

from markrun.config import RunnerSettings
from markrun.discovery import Classification, TargetMethod, classify
from markrun.errors import StructuralError
from markrun.reports import ConsoleReporter, Reporter
from markrun.statistics import StatisticsCollector, TestCase, TestRunStatistics
from markrun.validation import validate_target


logger = logging.getLogger(__name__)


async def _await(awaitable: Any) -> Any:
    return await awaitable


def _invoke(instance: Any, method: TargetMethod) -> None:
    """Call a marked method on instance, driving awaitable results to completion.

    Raises:
        StructuralError: If an awaitable is returned while an event loop is
            already running in this thread.
    """
    result = getattr(instance, method.name)()
    if not inspect.isawaitable(result):
        return

    try:
        asyncio.get_running_loop()
    except RuntimeError:
        asyncio.run(_await(result))
        return

    if inspect.iscoroutine(result):
        result.close()
    msg = (
        f"Cannot run async method {method.name} from a running event loop; "
        "markrun must be called from synchronous code"
    )
    raise StructuralError(msg)


def _detach_tracebacks(error: BaseException) -> None:
    """Drop the tracebacks of error and its chained exceptions so their frames can be freed."""
    seen: set[int] = set()
    current: BaseException | None = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        current.__traceback__ = None
        current = current.__cause__ or current.__context__


class Runner:
    """Executes classified test methods, one fresh instance per test.

    Tests run sequentially. Exceptions raised by a test method are recorded
    as failed outcomes; exceptions raised while constructing the instance or
    running setup/teardown methods abort the run with StructuralError.

    Examples:
        runner = Runner()
        statistics = runner.run(Checkout, classify(Checkout))
    """

    def __init__(self, settings: RunnerSettings | None = None) -> None:
        self.settings = settings or RunnerSettings()

    def run(self, target: type, classification: Classification) -> TestRunStatistics:
        """Run every test method of target and return the aggregated statistics."""
        collector = StatisticsCollector()
        for method in classification.test_cases:
            collector.add(self._run_test_case(target, classification, method))
        return collector.build()

    def _run_test_case(self, target: type, classification: Classification, method: TargetMethod) -> TestCase:
        logger.debug("Running %s.%s", target.__qualname__, method.name)
        instance = self._create_instance(target)

        for setup in classification.setup:
            self._run_lifecycle_method(target, instance, setup, "before")

        start = time.perf_counter()
        error = self._run_test_method(target, instance, method)
        duration_ms = int((time.perf_counter() - start) * 1000)

        for teardown in classification.teardown:
            self._run_lifecycle_method(target, instance, teardown, "after")

        return TestCase(
            name=method.name,
            succeeded=error is None,
            execution_time_ms=duration_ms,
            error=error,
        )

    def _create_instance(self, target: type) -> Any:
        try:
            return target()
        except Exception as e:
            msg = f"Failed to create instance of the class {target.__qualname__}"
            raise StructuralError(msg) from e

    def _run_lifecycle_method(self, target: type, instance: Any, method: TargetMethod, kind: str) -> None:
        try:
            _invoke(instance, method)
        except StructuralError:
            raise
        except Exception as e:
            msg = f"Failed to execute {kind} method {method.name} in class {target.__qualname__}"
            raise StructuralError(msg) from e

    def _run_test_method(self, target: type, instance: Any, method: TargetMethod) -> Exception | None:
        """Invoke the test method once; return the exception it raised, if any."""
        try:
            _invoke(instance, method)
        except StructuralError:
            raise
        except Exception as e:
            logger.error(
                "Exception occurred during execution of test method %s in class %s: %s",
                method.name,
                target.__qualname__,
                e,
                exc_info=self.settings.show_traceback,
            )
            # Tracebacks hold the frame of the test method, and with it the instance
            _detach_tracebacks(e)
            return e
        return None


def run_test(
    target: type,
    *,
    reporters: list[Reporter] | None = None,
    settings: RunnerSettings | None = None,
) -> None:
    """Validate, classify and run the test methods of target, then report.

    Args:
        target: The class under test.
        reporters: Reporters receiving the final statistics. Defaults to a
            ConsoleReporter writing to stdout.
        settings: Runner settings; read from the environment when omitted.

    Raises:
        StructuralError: If target is malformed, or constructing an instance
            or running a setup/teardown method fails. No report is printed.

    Example:
        run_test(Checkout)
    """
    settings = settings or RunnerSettings()
    if reporters is None:
        reporters = [ConsoleReporter(settings=settings)]

    validate_target(target)
    classification = classify(target)
    statistics = Runner(settings=settings).run(target, classification)

    for reporter in reporters:
        reporter.report(statistics)
