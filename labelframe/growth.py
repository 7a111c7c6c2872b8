"""Growth of a frame ahead of a write.

Before a write resolves its selectors, :func:`expand_to_fit` extends
the frame so that every integer position and every name the selectors
mention exists.  New rows and columns are filled with ``None``.

Growth is applied element by element, left to right, and is not
rolled back: if a later element (or the write itself) fails, rows and
columns created earlier stay in place.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import numpy as np

from .errors import OutOfRangeError
from .selectors import is_bool, is_int
from .types import NULL, Axis

if TYPE_CHECKING:
    from .frame import Frame

logger = logging.getLogger(__name__)


def expand_to_fit(frame: Frame, row: Any, col: Any) -> None:
    """Grow ``frame`` so the ``row`` and ``col`` selectors can be written.

    Rows are grown first, then columns.

    Raises
    ------
    OutOfRangeError
        If either selector contains a negative integer position.
    """
    expand_axis(frame, row, Axis.ROW)
    expand_axis(frame, col, Axis.COL)


def expand_axis(frame: Frame, raw: Any, axis: Axis) -> None:
    """Grow one axis of ``frame`` to fit the selector ``raw``.

    A frame used as a selector is grown through by its flattened values.
    """
    from .frame import Frame

    if is_bool(raw):
        return
    if isinstance(raw, Frame):
        expand_axis(frame, raw.to_array(), axis)
        return
    if is_int(raw):
        _grow_to_position(frame, int(raw), axis)
    elif isinstance(raw, str):
        _grow_to_name(frame, raw, axis)
    elif isinstance(raw, np.ndarray):
        if raw.dtype != np.bool_:
            for item in raw.tolist():
                expand_axis(frame, item, axis)
    elif isinstance(raw, (list, tuple, range)):
        for item in raw:
            expand_axis(frame, item, axis)


def _grow_to_position(frame: Frame, position: int, axis: Axis) -> None:
    if position < 0:
        raise OutOfRangeError(f"Negative {axis.value} position {position}")
    if axis is Axis.ROW:
        if position >= frame.num_rows:
            logger.debug("Growing rows from %d to %d", frame.num_rows, position + 1)
            frame.num_rows = position + 1
    elif position >= frame.num_cols:
        logger.debug("Growing cols from %d to %d", frame.num_cols, position + 1)
        frame.num_cols = position + 1


def _grow_to_name(frame: Frame, name: str, axis: Axis) -> None:
    if axis is Axis.ROW:
        if frame.row_position(name) is None:
            logger.debug("Creating row %r", name)
            frame.add_row([NULL] * frame.num_cols, name)
    elif frame.col_position(name) is None:
        logger.debug("Creating col %r", name)
        frame.add_col(name)
