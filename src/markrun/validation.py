"""Structural checks applied to a target class before anything runs."""

import inspect
from typing import Any

from markrun.errors import StructuralError


CONSTRUCTOR_ERROR = "Class {name} must have one public no-arg constructor"


def validate_target(target: Any) -> None:
    """Check that target is a public, concrete class constructible without arguments.

    Args:
        target: The class under test.

    Raises:
        StructuralError: If target cannot serve as a test class.
    """
    if not inspect.isclass(target):
        msg = f"{target!r} is not a class"
        raise StructuralError(msg)

    name = target.__qualname__
    if target.__name__.startswith("_"):
        msg = f"Class {name} must be public"
        raise StructuralError(msg)

    if inspect.isabstract(target):
        msg = f"Class {name} is abstract and cannot be instantiated"
        raise StructuralError(msg)

    try:
        signature = inspect.signature(target)
    except (TypeError, ValueError) as e:
        raise StructuralError(CONSTRUCTOR_ERROR.format(name=name)) from e

    if signature.parameters:
        raise StructuralError(CONSTRUCTOR_ERROR.format(name=name))
