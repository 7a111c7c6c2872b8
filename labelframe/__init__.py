"""labelframe: a two-dimensional container addressable by position and by name.

The labelframe package provides an in-memory table of cells whose rows
and columns each carry unique names:
- Reads and writes by position, name, list, range, mask, regex or predicate
- Automatic growth when writing past the edge or to a new name
- Structural operations (add, append, merge, transpose, sort, group)
- Elementwise broadcasting and comparisons
- Thin pandas-backed adapters for CSV/TSV and pandas interop
"""

import logging
from importlib import metadata

# Errors
from .errors import (
    BadRightHandSideError,
    DuplicateIdError,
    IncompatibleDimensionError,
    InvalidSelectorError,
    LabelFrameError,
    NotSupportedError,
    OutOfRangeError,
    RowNameMismatchError,
    UnknownNameError,
)

# Container
from .frame import Frame
from .index import NameIndex

# Boundary adapters
from .interop import (
    DisplayOptions,
    from_pandas,
    from_records,
    read_csv,
    read_tsv,
    render_text,
    to_csv,
    to_pandas,
)
from .types import Axis, Cell, Name

try:
    __version__ = metadata.version("labelframe")
except metadata.PackageNotFoundError:
    # Fallback for development installs
    __version__ = "0.1.0"

__all__ = [
    # Container
    "Frame",
    "NameIndex",
    "Axis",
    "Cell",
    "Name",
    # Errors
    "LabelFrameError",
    "DuplicateIdError",
    "IncompatibleDimensionError",
    "RowNameMismatchError",
    "BadRightHandSideError",
    "NotSupportedError",
    "InvalidSelectorError",
    "OutOfRangeError",
    "UnknownNameError",
    # Adapters
    "from_records",
    "read_csv",
    "read_tsv",
    "to_csv",
    "to_pandas",
    "from_pandas",
    "render_text",
    "DisplayOptions",
    # Logging
    "get_logger",
]


# Configure package-wide logging
def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger for the labelframe package.

    Parameters
    ----------
    name : str | None, optional
        Logger name. If None, uses the package name.

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """
    if name is None:
        name = __name__.split(".")[0]
    return logging.getLogger(name)


# Set up default logging configuration
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
