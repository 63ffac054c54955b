"""Exceptions raised by markrun."""


class MarkrunError(Exception):
    """Base class for markrun errors."""


class StructuralError(MarkrunError):
    """The target class is malformed or could not be driven through its lifecycle.

    Raised for constructor problems, non-public or parametrized marked
    methods, conflicting markers, and failures while constructing an
    instance or running its setup/teardown methods. Always aborts the run.
    """
