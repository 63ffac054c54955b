"""Classification of a target class's methods into lifecycle roles."""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import Any

from markrun.errors import StructuralError
from markrun.markers import Marker, get_markers


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TargetMethod:
    """A marked method of the target class."""

    name: str
    marker: Marker


@dataclass(frozen=True)
class Classification:
    """Marked methods of a target class, grouped by role in declaration order."""

    setup: tuple[TargetMethod, ...] = ()
    teardown: tuple[TargetMethod, ...] = ()
    test_cases: tuple[TargetMethod, ...] = ()


def _iter_methods(target: type) -> list[tuple[str, Any]]:
    """Return (name, attribute) for every method of target, base classes first.

    An override keeps the position where its name was first declared.
    """
    members: dict[str, Any] = {}
    for klass in reversed(target.__mro__):
        if klass is object:
            continue
        for name, attr in vars(klass).items():
            members[name] = attr

    methods = []
    for name, attr in members.items():
        fn = attr.__func__ if isinstance(attr, (staticmethod, classmethod)) else attr
        if inspect.isfunction(fn):
            methods.append((name, attr))
    return methods


def _get_role(target: type, name: str, attr: Any) -> Marker | None:
    markers = get_markers(attr)
    if len(markers) > 1:
        msg = (
            f"Method {name} in class {target.__qualname__} cannot have "
            f"@{markers[1].value} and @{markers[0].value} markers at the same time"
        )
        raise StructuralError(msg)
    return markers[0] if markers else None


def _validate_declaration(target: type, name: str, attr: Any) -> None:
    """Check that a marked method is public and callable without arguments."""
    cls_name = target.__qualname__
    if name.startswith("_"):
        msg = f"Method {name} in class {cls_name} must be public"
        raise StructuralError(msg)

    if isinstance(attr, staticmethod):
        params = list(inspect.signature(attr.__func__).parameters)
    else:
        fn = attr.__func__ if isinstance(attr, classmethod) else attr
        params = list(inspect.signature(fn).parameters)
        if not params:
            msg = f"Method {name} in class {cls_name} must accept the instance as its first argument"
            raise StructuralError(msg)
        params = params[1:]

    if params:
        msg = f"Method {name} in class {cls_name} is not allowed to have arguments"
        raise StructuralError(msg)


def classify(target: type) -> Classification:
    """Sort the marked methods of target into setup, teardown and test lists.

    Unmarked methods are ignored. Every marked method must carry exactly one
    marker, be public, and take no arguments besides the instance.

    Args:
        target: A class that already passed validate_target().

    Returns:
        Classification with the methods of each role in declaration order.

    Raises:
        StructuralError: On conflicting markers or an invalid marked method.
    """
    roles: dict[Marker, list[TargetMethod]] = {marker: [] for marker in Marker}

    for name, attr in _iter_methods(target):
        marker = _get_role(target, name, attr)
        if marker is None:
            continue
        _validate_declaration(target, name, attr)
        roles[marker].append(TargetMethod(name=name, marker=marker))

    classification = Classification(
        setup=tuple(roles[Marker.BEFORE]),
        teardown=tuple(roles[Marker.AFTER]),
        test_cases=tuple(roles[Marker.TEST]),
    )
    logger.debug(
        "Classified %s: %d setup, %d teardown, %d test methods",
        target.__qualname__,
        len(classification.setup),
        len(classification.teardown),
        len(classification.test_cases),
    )
    return classification
