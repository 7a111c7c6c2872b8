"""Adapters between :class:`~labelframe.frame.Frame` and the outside world.

These functions only translate.  Parsing and writing delimited text is
delegated to pandas, and text rendering is a pure function of the
frame's plain-data projection.

Ingestion follows one contract: a matrix of cell values, optional
column names, and optionally one column (by position, or by name when
names are known) that supplies row names instead of data.
"""

from __future__ import annotations

import csv
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import numpy as np
import pandas as pd

from .errors import InvalidSelectorError, UnknownNameError
from .frame import Frame
from .selectors import is_int
from .types import Cell, Name, is_auto_name


def _to_python(value: Any) -> Cell:
    """Unbox numpy scalars and turn pandas missing markers into ``None``."""
    if value is None:
        return None
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return None
    if isinstance(value, np.generic):
        value = value.item()
    return value


def _matrix_of(df: pd.DataFrame) -> list[list[Cell]]:
    return [
        [_to_python(v) for v in row] for row in df.itertuples(index=False, name=None)
    ]


def from_records(
    matrix: Sequence[Sequence[Cell]],
    col_names: Sequence[Name] | None = None,
    name_col: int | str | None = None,
) -> Frame:
    """Build a frame from parsed records.

    Parameters
    ----------
    matrix : Sequence[Sequence[Cell]]
        Row-major cell values.
    col_names : Sequence[Name], optional
        Column names, one per column of ``matrix``.
    name_col : int | str, optional
        Column consumed as row names rather than data.  A name is only
        allowed when ``col_names`` is given.

    Returns
    -------
    Frame
        The new frame.

    Raises
    ------
    InvalidSelectorError
        If ``name_col`` is a name but there are no column names, or is
        of an unsupported type.
    UnknownNameError
        If ``name_col`` names a column that does not exist.
    """
    rows = [list(row) for row in matrix]
    names = list(col_names) if col_names is not None else None
    if name_col is None:
        return Frame(rows, None, names)

    if isinstance(name_col, str):
        if names is None:
            raise InvalidSelectorError(
                f"name_col {name_col!r} given by name but there are no column names"
            )
        if name_col not in names:
            raise UnknownNameError(name_col)
        pos = names.index(name_col)
    elif is_int(name_col):
        pos = int(name_col)
    else:
        raise InvalidSelectorError(f"Illegal type for name_col: {name_col!r}")

    row_names = [str(row.pop(pos)) for row in rows]
    if names is not None:
        names.pop(pos)
    return Frame(rows, row_names, names)


def _read_delimited(
    source: Any, header: bool, name_col: int | str | None, **read_kwargs: Any
) -> Frame:
    df = pd.read_csv(source, header=0 if header else None, **read_kwargs)
    # nullable dtypes keep int columns with blank fields as ints
    df = df.convert_dtypes()
    col_names = [str(c) for c in df.columns] if header else None
    return from_records(_matrix_of(df), col_names=col_names, name_col=name_col)


def read_csv(
    source: Any,
    *,
    header: bool = True,
    name_col: int | str | None = None,
    sep: str = ",",
) -> Frame:
    """Read comma-separated text with :func:`pandas.read_csv`.

    ``source`` is anything pandas accepts (a path or a file-like object).
    Numeric fields come back as Python numbers and empty fields as
    ``None``.
    """
    return _read_delimited(source, header, name_col, sep=sep)


def read_tsv(
    source: Any, *, header: bool = True, name_col: int | str | None = None
) -> Frame:
    """Read tab-separated text; quote characters are taken literally."""
    return _read_delimited(
        source, header, name_col, sep="\t", quoting=csv.QUOTE_NONE
    )


def to_pandas(frame: Frame) -> pd.DataFrame:
    """A :class:`pandas.DataFrame` with the frame's cells and names.

    Columns have ``object`` dtype so cells keep their Python values; a
    ``None`` stays ``None`` rather than becoming ``NaN``.
    """
    return pd.DataFrame(
        frame.to_array(preserve_dims=True),
        index=frame.row_names,
        columns=frame.col_names,
        dtype=object,
    )


def from_pandas(df: pd.DataFrame) -> Frame:
    """Build a frame from a :class:`pandas.DataFrame`.

    A default :class:`pandas.RangeIndex` maps to generated row names;
    any other index is converted to strings.
    """
    row_names = None
    if not isinstance(df.index, pd.RangeIndex):
        row_names = [str(label) for label in df.index]
    col_names = [str(label) for label in df.columns]
    return Frame(_matrix_of(df), row_names, col_names)


def to_csv(
    frame: Frame, path: Any = None, *, header: bool = True, sep: str = ","
) -> str | None:
    """Write the cells (not the row names) as delimited text.

    Returns the text when ``path`` is ``None``.
    """
    df = pd.DataFrame(
        frame.to_array(preserve_dims=True), columns=frame.col_names, dtype=object
    )
    return df.to_csv(path, sep=sep, header=header, index=False)


@dataclass
class DisplayOptions:
    """Options for :func:`render_text`.

    Attributes
    ----------
    max_rows : int, default 60
        Rows shown before pandas truncates the middle of the table.
    max_col_width : int, default 50
        Longest rendering of any single cell.
    show_auto_names : bool, default False
        Print row/column names even when all of them are generated
        ``"_<n>"`` names.
    """

    max_rows: int = 60
    max_col_width: int = 50
    show_auto_names: bool = False


def render_text(frame: Frame, options: DisplayOptions | None = None) -> str:
    """Plain-text table for a frame, headed by its size."""
    options = options or DisplayOptions()
    n_rows, n_cols = frame.shape
    title = f"Frame size=({n_rows},{n_cols})"
    if n_rows == 0 or n_cols == 0:
        return title

    def named(names: list[Name]) -> bool:
        return options.show_auto_names or not all(map(is_auto_name, names))

    body = to_pandas(frame).to_string(
        index=named(frame.row_names),
        header=named(frame.col_names),
        max_rows=options.max_rows,
        max_colwidth=options.max_col_width,
    )
    return f"{title}:\n{body}"
