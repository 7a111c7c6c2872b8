"""Type aliases and small shared definitions for labelframe.

This module defines the names used throughout the package for clarity
and consistency.  The container itself lives in :mod:`labelframe.frame`.
"""

import re
from collections.abc import Hashable
from enum import Enum
from typing import Any

Name = Hashable
"""Alias for a row or column name.

Names are normally strings.  Unnamed slots receive ``"_<position>"``.
"""

Cell = Any
"""A single value stored in the matrix (number, string, bool or ``None``)."""

Matrix = list[list[Cell]]
"""Row-major list of rows; every row has the same length."""

NULL = None
"""Placeholder stored in cells created by growth."""

_AUTO_NAME = re.compile(r"^_\d+$")


class Axis(Enum):
    """The two dimensions of a frame."""

    ROW = "row"
    COL = "col"


def auto_name(position: int) -> str:
    """Return the generated name for an unnamed slot at ``position``."""
    return f"_{position}"


def is_auto_name(name: Name) -> bool:
    """True if ``name`` looks like a generated ``"_<position>"`` name."""
    return isinstance(name, str) and _AUTO_NAME.match(name) is not None
