"""Elementwise combinators shared by :class:`~labelframe.frame.Frame` operators.

A frame combined with a scalar broadcasts the operation over every
cell.  Combining with a bare collection is rejected, and combining two
frames cell by cell is not implemented.
"""

from __future__ import annotations

import operator
import re
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

import numpy as np

from .errors import BadRightHandSideError, IncompatibleDimensionError, NotSupportedError
from .types import Cell

if TYPE_CHECKING:
    from .frame import Frame

BINARY_OPERATORS: dict[str, Callable[[Any, Any], Any]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
}


def is_collection(value: Any) -> bool:
    """True for iterables that are not strings (lists, tuples, arrays, ...)."""
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes))


def binary_call(frame: Frame, other: Any, fn: Callable[[Cell, Any], Any]) -> Frame:
    """Apply ``fn(cell, other)`` to every cell of ``frame``.

    Raises
    ------
    IncompatibleDimensionError
        If ``other`` is a frame of a different shape.
    NotSupportedError
        If ``other`` is a frame of the same shape.
    BadRightHandSideError
        If ``other`` is a bare collection.
    """
    from .frame import Frame

    if isinstance(other, Frame):
        if frame.shape != other.shape:
            raise IncompatibleDimensionError(
                f"Need same sized frames, got {frame.shape} and {other.shape}"
            )
        raise NotSupportedError("Elementwise operations between frames")
    if is_collection(other):
        raise BadRightHandSideError(f"Bad right-hand side: {other!r}")
    return frame.map(lambda cell: fn(cell, other))


def binary_op(frame: Frame, symbol: str, other: Any) -> Frame:
    """Broadcast one of the :data:`BINARY_OPERATORS` over ``frame``."""
    try:
        return binary_call(frame, other, BINARY_OPERATORS[symbol])
    except BadRightHandSideError as exc:
        raise BadRightHandSideError(
            f"For binary operator {symbol!r} bad right-hand side: {other!r}"
        ) from exc


def logical_and(frame: Frame, other: Any) -> Frame:
    return binary_call(frame, other, lambda x, y: x and y)


def logical_or(frame: Frame, other: Any) -> Frame:
    return binary_call(frame, other, lambda x, y: x or y)


def matches(frame: Frame, pattern: str | re.Pattern) -> Frame:
    """Elementwise regular-expression search, coerced to booleans.

    Cells that are not strings never match.
    """
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    return binary_call(
        frame,
        regex,
        lambda cell, rx: isinstance(cell, str) and rx.search(cell) is not None,
    )


def _plain(value: Any) -> Any:
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, tuple):
        return [_plain(v) for v in value]
    if isinstance(value, list):
        return [_plain(v) for v in value]
    return value


def equals(frame: Frame, other: Any) -> bool | Frame:
    """Compare ``frame`` to another frame, a plain sequence, or a scalar.

    Frames compare their matrices value for value, and a plain sequence
    is compared to :meth:`Frame.to_array`.  Both return a ``bool``.  A
    scalar is compared cell by cell and yields a boolean frame.
    """
    from .frame import Frame

    if isinstance(other, Frame):
        return frame.to_array(preserve_dims=True) == other.to_array(
            preserve_dims=True
        )
    if isinstance(other, (list, tuple, np.ndarray)):
        return frame.to_array() == _plain(other)
    return frame.map(lambda cell: cell == other)


def not_equals(frame: Frame, other: Any) -> bool | Frame:
    """The negation of :func:`equals`, elementwise for scalars."""
    result = equals(frame, other)
    if isinstance(result, bool):
        return not result
    return result.map(operator.not_)
