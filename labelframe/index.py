"""Bidirectional name <-> position mapping for one axis of a frame."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .errors import DuplicateIdError
from .types import Name, auto_name


class NameIndex:
    """Ordered axis names plus a lookup table from name to position.

    The ordered ``names`` list is the source of truth.  The lookup table
    is rebuilt in full by :meth:`reindex` whenever the order changes;
    single appends are patched in place.  When a frame carries duplicate
    names (possible for read slices), lookup resolves to the last
    occurrence.

    Parameters
    ----------
    names : Iterable[Name], optional
        Initial names in axis order.
    """

    def __init__(self, names: Iterable[Name] = ()) -> None:
        self._names: list[Name] = list(names)
        self._positions: dict[Name, int] = {}
        self.reindex()

    @property
    def names(self) -> list[Name]:
        """A copy of the names in axis order."""
        return list(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[Name]:
        return iter(self._names)

    def __contains__(self, name: object) -> bool:
        try:
            return name in self._positions
        except TypeError:
            # unhashable names are never present
            return False

    def __getitem__(self, position: int) -> Name:
        return self._names[position]

    def __repr__(self) -> str:
        return f"NameIndex({self._names!r})"

    def reindex(self) -> None:
        """Rebuild the name -> position table from the ordered names."""
        self._positions = {name: pos for pos, name in enumerate(self._names)}

    def lookup(self, name: Name) -> int | None:
        """Return the position of ``name``, or ``None`` if absent."""
        try:
            return self._positions.get(name)
        except TypeError:
            return None

    def is_unique(self) -> bool:
        """True if no name appears twice."""
        return len(self._positions) == len(self._names)

    def duplicates(self) -> list[Name]:
        """Names that appear more than once, in first-seen order."""
        seen: set[Name] = set()
        dups: list[Name] = []
        for name in self._names:
            if name in seen and name not in dups:
                dups.append(name)
            seen.add(name)
        return dups

    def next_auto_name(self) -> str:
        """The generated name a new slot appended now would receive.

        This is ``"_<position>"`` unless that name is already taken (a
        slice keeps its source's generated names), in which case the
        number is bumped until the name is free.
        """
        number = len(self._names)
        while auto_name(number) in self._positions:
            number += 1
        return auto_name(number)

    def append(self, name: Name | None = None) -> Name:
        """Append ``name`` (or a generated name) and return it.

        Raises
        ------
        DuplicateIdError
            If ``name`` already exists on this axis.
        """
        if name is None:
            name = self.next_auto_name()
        if name in self:
            raise DuplicateIdError(f"Name {name!r} repeated")
        self._names.append(name)
        self._positions[name] = len(self._names) - 1
        return name

    def replace(self, names: Iterable[Name]) -> None:
        """Swap in a whole new name sequence and rebuild the table."""
        self._names = list(names)
        self.reindex()

    def copy(self) -> NameIndex:
        """An independent copy."""
        return NameIndex(self._names)
