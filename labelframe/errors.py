"""Exceptions raised by labelframe.

Each error also derives from the builtin exception a caller would
naturally catch, so ``except ValueError`` keeps working for code that
does not know about this package.
"""


class LabelFrameError(Exception):
    """Base class for all labelframe errors."""


class DuplicateIdError(LabelFrameError, ValueError):
    """A row or column name collides with an existing one."""


class IncompatibleDimensionError(LabelFrameError, ValueError):
    """Shapes do not line up (row length, slice assignment, empty slice)."""


class RowNameMismatchError(IncompatibleDimensionError):
    """Two frames merged by row do not share the same row names."""


class BadRightHandSideError(LabelFrameError, TypeError):
    """A frame was combined elementwise with a bare sequence."""


class NotSupportedError(LabelFrameError, NotImplementedError):
    """Frame-to-frame elementwise arithmetic is not implemented."""


class InvalidSelectorError(LabelFrameError, TypeError):
    """A selector or constructor argument has an unrecognized type."""


class OutOfRangeError(LabelFrameError, IndexError):
    """A negative integer position was used on the write path."""


class UnknownNameError(LabelFrameError, KeyError):
    """A name was looked up explicitly and does not exist on the axis."""
