"""Lifecycle and test markers for methods of a target class."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any, TypeVar


F = TypeVar("F", bound=Callable[..., Any])

MARKERS_ATTR = "__markrun_markers__"


class Marker(Enum):
    """Role a marked method plays in the test lifecycle."""

    BEFORE = "before"  # Runs on the fresh instance before each test
    AFTER = "after"  # Runs on the same instance after each test
    TEST = "test"


def _unwrap(attr: Any) -> Any:
    if isinstance(attr, (staticmethod, classmethod)):
        return attr.__func__
    return attr


def _mark(fn: F, marker: Marker) -> F:
    target = _unwrap(fn)
    markers: list[Marker] = getattr(target, MARKERS_ATTR, [])
    if marker not in markers:
        markers.append(marker)
    setattr(target, MARKERS_ATTR, markers)
    return fn


def before(fn: F) -> F:
    """Mark a method to run on the fresh instance before every test method.

    Example:
    --------
    >>> class Checkout:
    ...     @before
    ...     def setup(self):
    ...         self.cart = []
    """
    return _mark(fn, Marker.BEFORE)


def after(fn: F) -> F:
    """Mark a method to run after every test method, whatever its outcome."""
    return _mark(fn, Marker.AFTER)


def test(fn: F) -> F:
    """Mark a method as a test case."""
    return _mark(fn, Marker.TEST)


test.__test__ = False  # Prevent pytest from collecting the marker itself


def get_markers(attr: Any) -> list[Marker]:
    """Return the markers recorded on a class attribute, in application order.

    Works for plain functions as well as staticmethod and classmethod objects.
    """
    return list(getattr(_unwrap(attr), MARKERS_ATTR, []))
