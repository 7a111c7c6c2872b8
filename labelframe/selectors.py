"""Selector classification and resolution.

A selector describes which positions along one axis an operation
targets.  Raw Python values are first classified into one of the tagged
variants below by :func:`as_selector`, then :func:`resolve` turns the
variant into an ordered list of positions.  Resolution keeps the order
in which things were selected and allows duplicates.

Supported raw forms:

* ``int`` (or numpy integer): a single position, no bounds check.
* ``str``: a single name; an absent name resolves to ``[None]``.
* ``True`` / ``False``: every position / nothing.
* ``range`` or ``slice``: its members in order.
* a list, tuple or numpy array: resolved element by element, except
  that a sequence of real booleans as long as the axis is a mask.
* a compiled regular expression: names it matches (``re.search``).
* a callable: names for which it returns a truthy value.
* another :class:`~labelframe.frame.Frame`: its flattened values.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

import numpy as np

from .errors import InvalidSelectorError
from .index import NameIndex
from .types import Name


@dataclass(frozen=True)
class ByPosition:
    position: int


@dataclass(frozen=True)
class ByName:
    name: Name


@dataclass(frozen=True)
class Many:
    items: tuple[Any, ...]


@dataclass(frozen=True)
class Span:
    members: range


@dataclass(frozen=True)
class Predicate:
    fn: Callable[[Name], Any]


@dataclass(frozen=True)
class Pattern:
    regex: re.Pattern


@dataclass(frozen=True)
class Mask:
    flags: tuple[bool, ...]


@dataclass(frozen=True)
class All:
    pass


@dataclass(frozen=True)
class Nothing:
    pass


@dataclass(frozen=True)
class FrameValues:
    values: Any


Selector = (
    ByPosition
    | ByName
    | Many
    | Span
    | Predicate
    | Pattern
    | Mask
    | All
    | Nothing
    | FrameValues
)


def is_bool(value: Any) -> bool:
    """True for Python and numpy booleans only (not 0/1 integers)."""
    return isinstance(value, (bool, np.bool_))


def is_int(value: Any) -> bool:
    """True for Python and numpy integers, excluding booleans."""
    return isinstance(value, (int, np.integer)) and not is_bool(value)


def is_atomic(raw: Any) -> bool:
    """True if ``raw`` selects a single cell on its axis (position or name)."""
    return is_int(raw) or isinstance(raw, str)


def _is_mask(raw: Sequence[Any] | np.ndarray, size: int) -> bool:
    if size == 0 or len(raw) != size:
        return False
    if isinstance(raw, np.ndarray):
        return raw.ndim == 1 and raw.dtype == np.bool_
    return all(is_bool(v) for v in raw)


def as_selector(raw: Any, size: int) -> Selector:
    """Classify a raw selector value for an axis of length ``size``.

    Parameters
    ----------
    raw : Any
        The value passed by the caller.
    size : int
        Current length of the axis; needed to recognize masks.

    Returns
    -------
    Selector
        The tagged variant describing ``raw``.

    Raises
    ------
    InvalidSelectorError
        If ``raw`` has no selector interpretation.
    """
    from .frame import Frame

    if is_bool(raw):
        return All() if raw else Nothing()
    if is_int(raw):
        return ByPosition(int(raw))
    if isinstance(raw, str):
        return ByName(raw)
    if isinstance(raw, Frame):
        return FrameValues(raw.to_array())
    if isinstance(raw, range):
        return Span(raw)
    if isinstance(raw, slice):
        return Span(range(*raw.indices(size)))
    if isinstance(raw, re.Pattern):
        return Pattern(raw)
    if isinstance(raw, (list, tuple, np.ndarray)):
        if _is_mask(raw, size):
            return Mask(tuple(bool(v) for v in raw))
        return Many(tuple(raw))
    if callable(raw):
        return Predicate(raw)
    raise InvalidSelectorError(f"Bad selector {raw!r}")


def resolve(selector: Selector, index: NameIndex) -> list[int | None]:
    """Turn a classified selector into ordered positions on ``index``'s axis.

    ``None`` entries stand for "no match" (an absent name).  Integer
    positions are returned as given, without bounds checking.
    """
    if isinstance(selector, ByPosition):
        return [selector.position]
    if isinstance(selector, ByName):
        return [index.lookup(selector.name)]
    if isinstance(selector, Many):
        positions: list[int | None] = []
        for item in selector.items:
            positions.extend(resolve_raw(item, index))
        return positions
    if isinstance(selector, Span):
        return list(selector.members)
    if isinstance(selector, Mask):
        return [pos for pos, flag in enumerate(selector.flags) if flag]
    if isinstance(selector, All):
        return list(range(len(index)))
    if isinstance(selector, Nothing):
        return []
    if isinstance(selector, Predicate):
        return [pos for pos, name in enumerate(index) if selector.fn(name)]
    if isinstance(selector, Pattern):
        return [
            pos
            for pos, name in enumerate(index)
            if isinstance(name, str) and selector.regex.search(name)
        ]
    if isinstance(selector, FrameValues):
        return resolve_raw(selector.values, index)
    raise InvalidSelectorError(f"Bad selector {selector!r}")


def resolve_raw(raw: Any, index: NameIndex) -> list[int | None]:
    """Classify and resolve ``raw`` in one step."""
    return resolve(as_selector(raw, len(index)), index)


def in_bounds(positions: Sequence[int | None], size: int) -> list[int]:
    """Drop "no match" entries and positions outside ``[0, size)``."""
    return [p for p in positions if p is not None and 0 <= p < size]
