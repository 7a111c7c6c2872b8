"""The labeled two-dimensional container.

A :class:`Frame` stores a rectangular, row-major matrix of cells along
with an ordered, uniquely named axis for rows and for columns.  Every
row and column can be addressed by integer position or by name, and
reads and writes accept the selector forms described in
:mod:`labelframe.selectors`::

    >>> d = Frame.create({"snake": {"length": 10, "height": 1},
    ...                   "giraffe": {"length": 3, "height": 10}})
    >>> d["snake", "length"]
    10
    >>> d[["snake", "giraffe"], ["height"]].to_array()
    [1, 10]

Reads never alias: any slice is an independent copy.  Writes first grow
the frame to fit their selectors (see :mod:`labelframe.growth`), then
assign either a broadcast scalar or a frame of the selected shape.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping, Sequence
from functools import cmp_to_key
from typing import Any

import numpy as np

from . import ops
from .errors import (
    BadRightHandSideError,
    DuplicateIdError,
    IncompatibleDimensionError,
    InvalidSelectorError,
    OutOfRangeError,
    RowNameMismatchError,
    UnknownNameError,
)
from .growth import expand_to_fit
from .index import NameIndex
from .selectors import in_bounds, is_atomic, resolve_raw
from .types import NULL, Axis, Cell, Matrix, Name, auto_name, is_auto_name

logger = logging.getLogger(__name__)

_ROW_TYPES = (list, tuple, np.ndarray)


def _fill_names(names: Sequence[Name | None] | None, size: int, axis: Axis) -> list[Name]:
    names = list(names) if names is not None else []
    if len(names) > size:
        raise IncompatibleDimensionError(
            f"{len(names)} {axis.value} names for {size} {axis.value}s"
        )
    names.extend([None] * (size - len(names)))
    return [auto_name(pos) if name is None else name for pos, name in enumerate(names)]


def _write_positions(positions: Sequence[int | None], size: int, axis: Axis) -> list[int]:
    # after growth every selected position must exist; nothing is dropped
    for pos in positions:
        if pos is None or not 0 <= pos < size:
            raise OutOfRangeError(f"Cannot write to {axis.value} {pos!r} of {size}")
    return list(positions)


def _compare_cells(a: Cell, b: Cell) -> int:
    """Three-way comparison of two cells; ``None`` sorts first."""
    if a is None or b is None:
        return (a is not None) - (b is not None)
    return (a > b) - (a < b)


class Frame:
    """Rows x columns of cells addressable by position and by name.

    Parameters
    ----------
    data : Sequence[Sequence[Cell]], optional
        Row-major matrix.  Every row must have the same length.  Rows
        are copied, so later changes to ``data`` do not affect the frame.
    row_names : Sequence[Name], optional
        Names for the rows.  Missing or ``None`` entries become
        ``"_<position>"``.  If ``data`` is empty, one null row is
        created per name.
    col_names : Sequence[Name], optional
        Names for the columns, with the same defaulting rule.  Without
        ``data`` these define the width of an empty frame.

    Raises
    ------
    IncompatibleDimensionError
        If rows are ragged or more names are given than rows/columns.
    DuplicateIdError
        If a name is repeated on either axis.
    InvalidSelectorError
        If ``data`` is not a sequence of rows.
    """

    __hash__ = None  # mutable, and == is elementwise against scalars

    def __init__(
        self,
        data: Sequence[Sequence[Cell]] | None = None,
        row_names: Sequence[Name | None] | None = None,
        col_names: Sequence[Name | None] | None = None,
    ) -> None:
        if data is None:
            data = []
        if isinstance(data, np.ndarray):
            data = data.tolist()
        if not isinstance(data, _ROW_TYPES):
            raise InvalidSelectorError(f"Cannot build a frame from {data!r}")
        matrix: Matrix = []
        for row in data:
            if isinstance(row, np.ndarray):
                row = row.tolist()
            if not isinstance(row, (list, tuple)):
                raise InvalidSelectorError(f"Row {row!r} is not a sequence")
            matrix.append(list(row))

        if matrix:
            width = len(matrix[0])
        else:
            width = len(col_names) if col_names is not None else 0
            n_named = len(row_names) if row_names is not None else 0
            matrix = [[NULL] * width for _ in range(n_named)]
        for pos, row in enumerate(matrix):
            if len(row) != width:
                raise IncompatibleDimensionError(
                    f"Row {pos} has {len(row)} cells, expected {width}"
                )

        rows = NameIndex(_fill_names(row_names, len(matrix), Axis.ROW))
        cols = NameIndex(_fill_names(col_names, width, Axis.COL))
        for index, axis in ((rows, Axis.ROW), (cols, Axis.COL)):
            if not index.is_unique():
                raise DuplicateIdError(
                    f"Repeated {axis.value} names: {index.duplicates()}"
                )
        self._data = matrix
        self._rows = rows
        self._cols = cols

    @classmethod
    def _from_parts(
        cls, data: Matrix, row_names: Sequence[Name], col_names: Sequence[Name]
    ) -> Frame:
        # Trusted path for slices: no validation, duplicate names allowed.
        frame = cls.__new__(cls)
        frame._data = data
        frame._rows = NameIndex(row_names)
        frame._cols = NameIndex(col_names)
        return frame

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_dict(cls, data: Mapping[Name, Mapping[Name, Cell]]) -> Frame:
        """Build a frame from ``{row_name: {col_name: value}}``.

        Row names and column names are each sorted ascending; cells
        missing from a row's mapping are ``None``.
        """
        col_set: dict[Name, None] = {}
        for row_name, values in data.items():
            if not isinstance(values, Mapping):
                raise InvalidSelectorError(
                    f"Row {row_name!r} must map column names to values"
                )
            col_set.update(dict.fromkeys(values))
        row_names = sorted(data)
        col_names = sorted(col_set)
        matrix = [[data[r].get(c) for c in col_names] for r in row_names]
        return cls(matrix, row_names, col_names)

    @classmethod
    def from_array(
        cls,
        data: Sequence[Any],
        row_names: Sequence[Name | None] | None = None,
        col_names: Sequence[Name | None] | None = None,
    ) -> Frame:
        """Build a frame from a list of rows, a list of mappings, or one flat row.

        With a list of mappings, each mapping is added through
        :meth:`add_row`, so columns are created (in sorted order) as
        they first appear.
        """
        if isinstance(data, np.ndarray):
            data = data.tolist()
        data = list(data)
        if not data:
            return cls([], row_names, col_names)
        first = data[0]
        if isinstance(first, _ROW_TYPES):
            return cls(data, row_names, col_names)
        if isinstance(first, Mapping):
            frame = cls([], None, col_names)
            names = list(row_names) if row_names is not None else []
            for pos, row in enumerate(data):
                frame.add_row(row, names[pos] if pos < len(names) else None)
            return frame
        return cls([data], row_names, col_names)

    @classmethod
    def create(cls, *data: Any) -> Frame:
        """Build a frame from whatever shape ``data`` has.

        Examples
        --------
        >>> Frame.create([[10, 1], [3, 10]])                    # matrix
        >>> Frame.create([{"length": 3, "height": 10}])         # rows as mappings
        >>> Frame.create({"snake": {"length": 10, "height": 1}})  # named rows
        >>> Frame.create({"length": 3, "height": 4})            # one anonymous row
        >>> Frame.create(4, 3)                                  # one flat row
        """
        if len(data) == 1:
            data = data[0]
        if isinstance(data, Mapping):
            if data and isinstance(next(iter(data.values())), Mapping):
                return cls.from_dict(data)
            return cls.from_array([data])
        if isinstance(data, _ROW_TYPES):
            return cls.from_array(data)
        raise InvalidSelectorError(f"Cannot build a frame from {data!r}")

    # ------------------------------------------------------------------
    # Shape and names
    # ------------------------------------------------------------------

    @property
    def row_names(self) -> list[Name]:
        """A copy of the row names in order."""
        return self._rows.names

    @property
    def col_names(self) -> list[Name]:
        """A copy of the column names in order."""
        return self._cols.names

    @property
    def row_index(self) -> NameIndex:
        """A copy of the row :class:`NameIndex`; changing it leaves the frame alone."""
        return self._rows.copy()

    @property
    def col_index(self) -> NameIndex:
        """A copy of the column :class:`NameIndex`."""
        return self._cols.copy()

    def row_position(self, name: Name) -> int | None:
        """Position of row ``name``, or ``None`` if there is no such row."""
        return self._rows.lookup(name)

    def col_position(self, name: Name) -> int | None:
        """Position of column ``name``, or ``None`` if there is no such column."""
        return self._cols.lookup(name)

    @property
    def data(self) -> Matrix:
        """A copy of the matrix."""
        return [list(row) for row in self._data]

    @property
    def num_rows(self) -> int:
        return len(self._data)

    @num_rows.setter
    def num_rows(self, n: int) -> None:
        # grows only; a smaller value leaves the frame unchanged
        for _ in range(n - self.num_rows):
            self.add_row([NULL] * self.num_cols)

    @property
    def num_cols(self) -> int:
        return len(self._cols)

    @num_cols.setter
    def num_cols(self, n: int) -> None:
        for _ in range(n - self.num_cols):
            self.add_col()

    @property
    def shape(self) -> tuple[int, int]:
        """``(num_rows, num_cols)``."""
        return (self.num_rows, self.num_cols)

    def copy(self) -> Frame:
        """An independent copy of this frame."""
        return Frame._from_parts(self.data, self.row_names, self.col_names)

    def reindex_names(self, axis: Axis | None = None) -> None:
        """Rebuild the name lookup tables (one axis, or both)."""
        if axis in (None, Axis.ROW):
            self._rows.reindex()
        if axis in (None, Axis.COL):
            self._cols.reindex()

    def _set_names(self, index: NameIndex, names: Sequence[Name], axis: Axis) -> None:
        names = list(names)
        if len(names) != len(index):
            raise IncompatibleDimensionError(
                f"Got {len(names)} {axis.value} names for {len(index)} {axis.value}s"
            )
        candidate = NameIndex(names)
        if not candidate.is_unique():
            raise DuplicateIdError(f"Repeated {axis.value} names: {candidate.duplicates()}")
        logger.debug("Renaming %ss", axis.value)
        index.replace(names)

    def set_row_names(self, names: Sequence[Name]) -> None:
        """Replace every row name at once."""
        self._set_names(self._rows, names, Axis.ROW)

    def set_col_names(self, names: Sequence[Name]) -> None:
        """Replace every column name at once."""
        self._set_names(self._cols, names, Axis.COL)

    def prefix_col_names(self, prefix: str) -> None:
        """Prepend ``prefix`` to every column name, in place.

        Useful before merging a slice back into the frame it came from.
        """
        self._cols.replace([f"{prefix}{name}" for name in self._cols])
        logger.debug("Prefixed col names with %r", prefix)

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def _take(self, rows: Sequence[int], cols: Sequence[int]) -> Frame:
        data = [[self._data[r][c] for c in cols] for r in rows]
        return Frame._from_parts(
            data, [self._rows[r] for r in rows], [self._cols[c] for c in cols]
        )

    def get(self, row: Any, col: Any = True) -> Cell | Frame | None:
        """Read the region selected by ``row`` and ``col``.

        If both selectors are atomic (a single position or name), the
        cell value is returned, or ``None`` if either does not match.
        Otherwise a new frame holding the selected rows and columns is
        returned, or ``None`` if nothing was selected on either axis.

        Parameters
        ----------
        row : Any
            Row selector; see :mod:`labelframe.selectors`.
        col : Any, default True
            Column selector; ``True`` selects every column.

        Returns
        -------
        Cell | Frame | None
        """
        row_pos = resolve_raw(row, self._rows)
        col_pos = resolve_raw(col, self._cols)
        if is_atomic(row) and is_atomic(col):
            r = in_bounds(row_pos, self.num_rows)
            c = in_bounds(col_pos, self.num_cols)
            if not r or not c:
                return None
            return self._data[r[0]][c[0]]
        rows = in_bounds(row_pos, self.num_rows)
        cols = in_bounds(col_pos, self.num_cols)
        if not rows or not cols:
            return None
        return self._take(rows, cols)

    def __getitem__(self, key: Any) -> Cell | Frame | None:
        if isinstance(key, tuple) and len(key) == 2:
            return self.get(*key)
        return self.get(key, True)

    def get_column(self, name: Name) -> Frame | None:
        """Every row of column ``name``.

        Raises
        ------
        UnknownNameError
            If there is no column called ``name``.
        """
        if self._cols.lookup(name) is None:
            raise UnknownNameError(name)
        return self.get(True, [name])

    def get_row(self, name: Name) -> Frame | None:
        """Every column of row ``name``; raises :class:`UnknownNameError` if absent."""
        if self._rows.lookup(name) is None:
            raise UnknownNameError(name)
        return self.get([name], True)

    def get_value(self, row: int, col: int) -> Cell:
        return self._data[row][col]

    def positions(self, row: Any = True, col: Any = True) -> list[tuple[int, int]]:
        """The ``(row, col)`` positions a read of ``row``, ``col`` would touch."""
        rows = in_bounds(resolve_raw(row, self._rows), self.num_rows)
        cols = in_bounds(resolve_raw(col, self._cols), self.num_cols)
        return [(r, c) for r in rows for c in cols]

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    def set(self, row: Any, col: Any, value: Any) -> None:
        """Write ``value`` into the region selected by ``row`` and ``col``.

        The frame first grows so that every integer position and every
        name in the selectors exists.  A scalar ``value`` is broadcast
        to every selected cell; a :class:`Frame` value must have exactly
        the selected shape and is copied cell by cell in selection order.

        Raises
        ------
        OutOfRangeError
            If a selector contains a negative position, or a position
            that still does not exist after growth.
        IncompatibleDimensionError
            If nothing is selected on an axis, or a frame value has the
            wrong shape.
        BadRightHandSideError
            If ``value`` is a bare list, tuple, array or other collection.
        """
        if not isinstance(value, Frame) and ops.is_collection(value):
            raise BadRightHandSideError(
                f"Cannot assign {value!r}; wrap it in a Frame of the slice's shape"
            )
        expand_to_fit(self, row, col)
        rows = _write_positions(resolve_raw(row, self._rows), self.num_rows, Axis.ROW)
        cols = _write_positions(resolve_raw(col, self._cols), self.num_cols, Axis.COL)
        if not rows:
            raise IncompatibleDimensionError("Slice has 0 rows")
        if not cols:
            raise IncompatibleDimensionError("Slice has 0 cols")

        if isinstance(value, Frame):
            if value.shape != (len(rows), len(cols)):
                raise IncompatibleDimensionError(
                    f"Slice is {len(rows)} x {len(cols)}, "
                    f"data is {value.num_rows} x {value.num_cols}"
                )
            source = value.data
            for ri, r in enumerate(rows):
                for ci, c in enumerate(cols):
                    self._data[r][c] = source[ri][ci]
        else:
            for r in rows:
                for c in cols:
                    self._data[r][c] = value

    def __setitem__(self, key: Any, value: Any) -> None:
        if isinstance(key, tuple) and len(key) == 2:
            self.set(key[0], key[1], value)
        else:
            self.set(key, True, value)

    def set_value(self, value: Cell, row: int, col: int) -> None:
        self._data[row][col] = value

    # ------------------------------------------------------------------
    # Plain-data projections
    # ------------------------------------------------------------------

    def to_array(self, preserve_dims: bool = False) -> Any:
        """Export the cells as plain Python data.

        Parameters
        ----------
        preserve_dims : bool, default False
            If ``True``, always return the full list of rows.  Otherwise
            a 1 x 1 frame becomes its single value, and a single row or
            single column becomes a flat list.

        Returns
        -------
        Any
            A copy; modifying it does not affect the frame.
        """
        n_rows, n_cols = self.shape
        if preserve_dims:
            return self.data
        if n_rows == 1 and n_cols == 1:
            return self._data[0][0]
        if n_rows == 1:
            return list(self._data[0])
        if n_cols == 1:
            return [row[0] for row in self._data]
        return self.data

    def rows(self) -> list[dict[Name, Cell]]:
        """One ``{col_name: value}`` dict per row."""
        names = self.col_names
        return [dict(zip(names, row)) for row in self._data]

    def named_rows(self) -> list[dict[Name, dict[Name, Cell]]]:
        """One ``{row_name: {col_name: value}}`` dict per row."""
        return [{name: row} for name, row in zip(self._rows, self.rows())]

    def cols(self) -> dict[Name, list[Cell]]:
        """``{col_name: [values, ...]}`` in row order."""
        return {
            name: [row[c] for row in self._data] for c, name in enumerate(self._cols)
        }

    def iter_cells(self) -> Iterator[Cell]:
        for row in self._data:
            yield from row

    def __iter__(self) -> Iterator[Cell]:
        return self.iter_cells()

    def iter_positions(self) -> Iterator[tuple[int, int]]:
        for r in range(self.num_rows):
            for c in range(self.num_cols):
                yield (r, c)

    def iter_named_positions(self) -> Iterator[tuple[Name, Name]]:
        for r, c in self.iter_positions():
            yield (self._rows[r], self._cols[c])

    # ------------------------------------------------------------------
    # Structural operations
    # ------------------------------------------------------------------

    def _claim_row_name(self, name: Name | None) -> Name:
        if name is None:
            name = self._rows.next_auto_name()
        if name in self._rows:
            raise DuplicateIdError(f"Row named {name!r} repeated")
        return name

    def _push_row(self, row: list[Cell], name: Name) -> None:
        self._rows.append(name)
        self._data.append(row)

    def add_row(self, data: Sequence[Cell] | Mapping[Name, Any], name: Name | None = None) -> None:
        """Add a row at the bottom.

        Parameters
        ----------
        data : Sequence[Cell] | Mapping[Name, Any]
            Either exactly one value per column, or a mapping from column
            name to value.  Mapping keys that are not yet columns create
            new null-filled columns, in sorted order; columns the mapping
            leaves out get ``None``.  A one-entry mapping whose value is
            itself a mapping or list is read as ``{row_name: data}``.
        name : Name, optional
            Name of the new row.  Defaults to ``"_<position>"``, with the
            number bumped past any generated name already in use.

        Raises
        ------
        DuplicateIdError
            If ``name`` already exists; nothing is added.
        IncompatibleDimensionError
            If a sequence has the wrong length.
        """
        if isinstance(data, Mapping):
            if len(data) == 1:
                (key, inner), = data.items()
                if isinstance(inner, (Mapping, list, tuple)):
                    self.add_row(inner, key)
                    return
            self._add_row_mapping(data, name)
        elif isinstance(data, _ROW_TYPES):
            self._add_row_sequence(data, name)
        else:
            raise InvalidSelectorError(f"Cannot add row from {data!r}")

    def _add_row_mapping(self, data: Mapping[Name, Cell], name: Name | None) -> None:
        name = self._claim_row_name(name)
        for col in sorted(k for k in data if self._cols.lookup(k) is None):
            self.add_col(col)
        row: list[Cell] = [NULL] * self.num_cols
        for col, value in data.items():
            row[self._cols.lookup(col)] = value
        self._push_row(row, name)

    def _add_row_sequence(self, data: Sequence[Cell], name: Name | None) -> None:
        name = self._claim_row_name(name)
        row = data.tolist() if isinstance(data, np.ndarray) else list(data)
        if len(row) != self.num_cols:
            raise IncompatibleDimensionError(
                f"Adding row length {len(row)} to frame with {self.num_cols} cols"
            )
        self._push_row(row, name)

    def add_col(self, name: Name | None = None) -> Name:
        """Append a null-filled column and return its name.

        Raises
        ------
        DuplicateIdError
            If ``name`` already exists.
        """
        name = self._cols.append(name)
        for row in self._data:
            row.append(NULL)
        logger.debug("Added col %r", name)
        return name

    def append(self, other: Frame | Sequence[Cell] | Mapping[Name, Any]) -> None:
        """Add rows at the bottom, aligning columns by name.

        A frame contributes every one of its rows; columns missing on
        either side are null-filled, and new ones are created.  Row names
        are kept except generated ``"_<n>"`` names, which are renumbered.
        A sequence or mapping is added as a single row.
        """
        if isinstance(other, Frame):
            for name, row in zip(other.row_names, other.rows()):
                self._add_row_mapping(row, None if is_auto_name(name) else name)
        elif isinstance(other, (Mapping, list, tuple, np.ndarray)):
            self.add_row(other)
        else:
            raise InvalidSelectorError(f"Appending illegal value {other!r}")

    def merge_by_row(self, other: Frame) -> None:
        """Append ``other``'s columns to the right, pairing rows by position.

        Raises
        ------
        RowNameMismatchError
            If the row names differ in identity or order.
        DuplicateIdError
            If any column name occurs in both frames.
        """
        if self.row_names != other.row_names:
            raise RowNameMismatchError(
                f"Row names differ: {self.row_names} vs {other.row_names}"
            )
        overlap = NameIndex(self.col_names + other.col_names).duplicates()
        if overlap:
            raise DuplicateIdError(f"Overlapping column names: {overlap}")
        extra = other.data
        for row, more in zip(self._data, extra):
            row.extend(more)
        self._cols.replace(self.col_names + other.col_names)
        logger.debug("Merged %d cols by row", other.num_cols)

    cbind = merge_by_row

    def transpose(self) -> Frame:
        """A new frame with rows and columns swapped."""
        data = [[row[c] for row in self._data] for c in range(self.num_cols)]
        return Frame._from_parts(data, self.col_names, self.row_names)

    @property
    def T(self) -> Frame:
        return self.transpose()

    def sort_rows(self, comparator: Callable[[Frame, Frame], int]) -> Frame:
        """A new frame with rows reordered by ``comparator``.

        ``comparator`` receives two single-row frames and returns a
        negative, zero or positive number, like an old-style ``cmp``.
        The sort is stable.
        """
        cols = range(self.num_cols)
        order = sorted(
            range(self.num_rows),
            key=cmp_to_key(lambda i, j: comparator(self._take([i], cols), self._take([j], cols))),
        )
        return self._take(order, cols)

    def sort_cols(self, comparator: Callable[[Frame, Frame], int]) -> Frame:
        """A new frame with columns reordered by ``comparator`` (single-column frames)."""
        rows = range(self.num_rows)
        order = sorted(
            range(self.num_cols),
            key=cmp_to_key(lambda i, j: comparator(self._take(rows, [i]), self._take(rows, [j]))),
        )
        return self._take(rows, order)

    def sort_rows_by_col(self, col: Name, ascending: bool = True) -> Frame:
        """A new frame with rows ordered by the values in column ``col``.

        ``None`` sorts before any other value.  Rows with equal values
        keep their relative order.
        """
        c = self._cols.lookup(col)
        if c is None:
            raise UnknownNameError(col)
        sign = 1 if ascending else -1
        return self.sort_rows(lambda a, b: sign * _compare_cells(a._data[0][c], b._data[0][c]))

    def sort_cols_by_row(self, row: Name, ascending: bool = True) -> Frame:
        """A new frame with columns ordered by the values in row ``row``."""
        r = self._rows.lookup(row)
        if r is None:
            raise UnknownNameError(row)
        sign = 1 if ascending else -1
        return self.sort_cols(lambda a, b: sign * _compare_cells(a._data[r][0], b._data[r][0]))

    def resort_rows(self) -> None:
        """Reorder rows in place by ascending row name."""
        names = self.row_names
        if all(a <= b for a, b in zip(names, names[1:])):
            return
        order = sorted(range(len(names)), key=names.__getitem__)
        data = [self._data[r] for r in order]
        self._data = data
        self._rows.replace([names[r] for r in order])
        logger.debug("Resorted %d rows", len(order))

    def resort_cols(self) -> None:
        """Reorder columns in place by ascending column name."""
        names = self.col_names
        if all(a <= b for a, b in zip(names, names[1:])):
            return
        order = sorted(range(len(names)), key=names.__getitem__)
        data = [[row[c] for c in order] for row in self._data]
        self._data = data
        self._cols.replace([names[c] for c in order])
        logger.debug("Resorted %d cols", len(order))

    def resort(self) -> None:
        """Sort both rows and columns by name, in place."""
        self.resort_rows()
        self.resort_cols()

    def iter_groups(self, col: Name) -> Iterator[tuple[Cell, Frame]]:
        """Yield ``(value, rows)`` for each distinct value of column ``col``.

        Rows are stably sorted by ``col`` and consecutive runs of equal
        values form the groups, so groups come out in ascending value
        order.
        """
        if self.num_rows == 0:
            return
        ordered = self.sort_rows_by_col(col)
        c = ordered._cols.lookup(col)
        values = [row[c] for row in ordered._data]
        cols = range(ordered.num_cols)
        start = 0
        for pos in range(1, len(values) + 1):
            if pos == len(values) or values[pos] != values[start]:
                yield values[start], ordered._take(range(start, pos), cols)
                start = pos

    def group_by(self, col: Name, callback: Callable[[Frame], Any]) -> None:
        """Call ``callback`` once per group of rows sharing a value in ``col``."""
        for _, group in self.iter_groups(col):
            callback(group)

    # ------------------------------------------------------------------
    # Elementwise operations
    # ------------------------------------------------------------------

    def map(self, fn: Callable[[Cell], Any]) -> Frame:
        """A new frame of the same shape and names with ``fn`` applied to each cell."""
        data = [[fn(cell) for cell in row] for row in self._data]
        return Frame._from_parts(data, self.row_names, self.col_names)

    def map_inplace(self, fn: Callable[[Cell], Any]) -> None:
        for row in self._data:
            row[:] = [fn(cell) for cell in row]

    def __add__(self, other: Any) -> Frame:
        return ops.binary_op(self, "+", other)

    def __sub__(self, other: Any) -> Frame:
        return ops.binary_op(self, "-", other)

    def __mul__(self, other: Any) -> Frame:
        return ops.binary_op(self, "*", other)

    def __and__(self, other: Any) -> Frame:
        return ops.logical_and(self, other)

    def __or__(self, other: Any) -> Frame:
        return ops.logical_or(self, other)

    def __invert__(self) -> Frame:
        return self.map(lambda cell: not cell)

    def matches(self, pattern: Any) -> Frame:
        """Boolean frame: does each cell contain a match for ``pattern``?"""
        return ops.matches(self, pattern)

    def to_float(self) -> Frame:
        return self.map(lambda cell: None if cell is None else float(cell))

    def to_int(self) -> Frame:
        return self.map(lambda cell: None if cell is None else int(cell))

    def all(self, fn: Callable[[Cell], Any] | None = None) -> bool:
        """True if every cell (or ``fn(cell)``) is truthy."""
        cells = self.iter_cells() if fn is None else map(fn, self.iter_cells())
        return all(cells)

    def any(self, fn: Callable[[Cell], Any] | None = None) -> bool:
        """True if any cell (or ``fn(cell)``) is truthy."""
        cells = self.iter_cells() if fn is None else map(fn, self.iter_cells())
        return any(cells)

    def __eq__(self, other: Any) -> bool | Frame:  # type: ignore[override]
        return ops.equals(self, other)

    def __ne__(self, other: Any) -> bool | Frame:  # type: ignore[override]
        return ops.not_equals(self, other)

    def __bool__(self) -> bool:
        raise ValueError(
            "The truth value of a Frame is ambiguous. Use all() or any()."
        )

    def __repr__(self) -> str:
        from .interop import render_text

        return render_text(self)
