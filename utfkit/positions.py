"""Storage unit positions.

A position is the Python stand-in for an iterator into a sequence of encoded
storage units. Positions are immutable: moving one returns a new position, so
copies never interfere with each other.

Three shapes exist:

- ``SequencePosition``: an index into any indexable sequence (``bytes``,
  ``bytearray``, ``array.array``, ``memoryview``, ``list``). Random access.
- ``ForwardPosition``: a cursor into a single-pass iterable. The iterable is
  pulled lazily into a singly linked chain, which makes the position
  multi-pass but forward only.
- ``AppendPosition``: an output-only position that appends to a growable sink.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from enum import IntEnum
from typing import Any


class Capability(IntEnum):
    """Traversal capability of a position, ordered weakest first."""

    FORWARD = 1
    BIDIRECTIONAL = 2
    RANDOM_ACCESS = 3


def is_random_access(units: Any) -> bool:
    """Return True if ``units`` can be indexed and measured."""
    if isinstance(units, (str, Mapping)):
        return False
    if isinstance(units, Sequence):
        return True
    return hasattr(units, "__getitem__") and hasattr(units, "__len__")


class SequencePosition:
    """Position at ``index`` inside an indexable sequence of storage units."""

    __slots__ = ("_index", "_units")

    capability = Capability.RANDOM_ACCESS

    def __init__(self, units: Sequence[int], index: int = 0) -> None:
        if not 0 <= index <= len(units):
            raise IndexError(f"Position {index} outside sequence of length {len(units)}")
        self._units = units
        self._index = index

    @property
    def units(self) -> Sequence[int]:
        """Return the underlying sequence."""
        return self._units

    @property
    def index(self) -> int:
        """Return the offset of this position in storage units."""
        return self._index

    @property
    def at_end(self) -> bool:
        """Return True at the one-past-the-end position."""
        return self._index >= len(self._units)

    def unit(self) -> int:
        """Return the storage unit at this position."""
        if self.at_end:
            raise IndexError("Cannot read the end position")
        return self._units[self._index]

    def next(self, count: int = 1) -> SequencePosition:
        """Return the position ``count`` units further on."""
        return SequencePosition(self._units, self._index + count)

    def prev(self) -> SequencePosition:
        """Return the position one unit back."""
        if self._index == 0:
            raise IndexError("Cannot move before the start of the sequence")
        return SequencePosition(self._units, self._index - 1)

    def put(self, value: int) -> SequencePosition:
        """Store ``value`` at this position and return the next position."""
        return self.put_all((value,))

    def put_all(self, values: Sequence[int]) -> SequencePosition:
        """Store all ``values`` starting here, or nothing if they do not fit."""
        units = self._units
        if not hasattr(units, "__setitem__"):
            raise TypeError(f"{type(units).__name__} does not support item assignment")
        if len(units) - self._index < len(values):
            raise IndexError(
                f"Need {len(values)} units at offset {self._index}, only {len(units) - self._index} available"
            )
        index = self._index
        for value in values:
            units[index] = value  # type: ignore[index]
            index += 1
        return SequencePosition(units, index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SequencePosition):
            return NotImplemented
        return self._units is other._units and self._index == other._index

    def __hash__(self) -> int:
        return hash((id(self._units), self._index))

    def __repr__(self) -> str:
        return f"SequencePosition(index={self._index}, length={len(self._units)})"


class _Link:
    """One materialised storage unit of a forward chain."""

    __slots__ = ("next", "value")

    def __init__(self, value: int | None) -> None:
        self.value = value
        self.next: _Link | None = None


class _UnitChain:
    """Lazily links the units of a single-pass iterable."""

    __slots__ = ("_source", "end")

    def __init__(self, source: Iterable[int]) -> None:
        self._source: Iterator[int] = iter(source)
        self.end = _Link(None)

    def pull(self) -> _Link:
        try:
            value = next(self._source)
        except StopIteration:
            return self.end
        return _Link(value)

    def successor(self, link: _Link) -> _Link:
        if link is self.end:
            raise IndexError("Cannot advance past the end position")
        if link.next is None:
            link.next = self.pull()
        return link.next


class ForwardPosition:
    """Forward-only, multi-pass position over a single-pass iterable."""

    __slots__ = ("_chain", "_link", "_offset")

    capability = Capability.FORWARD

    def __init__(self, chain: _UnitChain, link: _Link, offset: int = 0) -> None:
        self._chain = chain
        self._link = link
        self._offset = offset

    @classmethod
    def from_iterable(cls, source: Iterable[int]) -> ForwardPosition:
        """Create a position at the first unit of ``source``."""
        chain = _UnitChain(source)
        return cls(chain, chain.pull())

    @property
    def index(self) -> int:
        """Return the number of units between the start and this position."""
        return self._offset

    @property
    def at_end(self) -> bool:
        """Return True once the source is exhausted."""
        return self._link is self._chain.end

    def unit(self) -> int:
        """Return the storage unit at this position."""
        if self.at_end:
            raise IndexError("Cannot read the end position")
        return self._link.value  # type: ignore[return-value]

    def next(self, count: int = 1) -> ForwardPosition:
        """Return the position ``count`` units further on."""
        link = self._link
        for _ in range(count):
            link = self._chain.successor(link)
        return ForwardPosition(self._chain, link, self._offset + count)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ForwardPosition):
            return NotImplemented
        return self._link is other._link

    def __hash__(self) -> int:
        return id(self._link)

    def __repr__(self) -> str:
        state = "end" if self.at_end else f"index={self._offset}"
        return f"ForwardPosition({state})"


class AppendPosition:
    """Output position that appends every stored unit to ``sink``."""

    __slots__ = ("_sink",)

    def __init__(self, sink: Any) -> None:
        if not hasattr(sink, "append"):
            raise TypeError(f"{type(sink).__name__} has no append method")
        self._sink = sink

    @property
    def sink(self) -> Any:
        """Return the sink being appended to."""
        return self._sink

    def put(self, value: int) -> AppendPosition:
        """Append ``value`` and return the position after it."""
        self._sink.append(value)
        return self

    def put_all(self, values: Sequence[int]) -> AppendPosition:
        """Append all ``values`` and return the position after them."""
        if hasattr(self._sink, "extend"):
            self._sink.extend(values)
        else:
            for value in values:
                self._sink.append(value)
        return self

    def __repr__(self) -> str:
        return f"AppendPosition(sink={type(self._sink).__name__})"


UnitPosition = SequencePosition | ForwardPosition
OutputPosition = SequencePosition | AppendPosition


def storage_units(units: Any) -> Any:
    """Return the storage unit container held by a wrapper such as EncodedText.

    Positions and plain containers are returned unchanged.
    """
    if isinstance(units, (SequencePosition, ForwardPosition, AppendPosition, str)):
        return units
    inner = getattr(units, "units", None)
    if inner is None or inner is units:
        return units
    return storage_units(inner)


def begin(units: Any, index: int = 0) -> UnitPosition:
    """Return a position at offset ``index`` of ``units``.

    Indexable sequences give a ``SequencePosition``; any other iterable gives a
    ``ForwardPosition`` (after skipping ``index`` units).

    Raises:
        TypeError: ``units`` is a ``str``, which already holds code points.
    """
    units = storage_units(units)
    if isinstance(units, (SequencePosition, ForwardPosition)):
        return units if index == 0 else units.next(index)
    if isinstance(units, str):
        raise TypeError("str holds code points, not storage units; encode it first")
    if is_random_access(units):
        return SequencePosition(units, index)
    position = ForwardPosition.from_iterable(units)
    return position.next(index) if index else position


def end(units: Sequence[int]) -> SequencePosition:
    """Return the one-past-the-end position of an indexable sequence."""
    units = storage_units(units)
    if isinstance(units, SequencePosition):
        units = units.units
    if isinstance(units, str) or not is_random_access(units):
        raise TypeError(f"{type(units).__name__} has no reachable end position")
    return SequencePosition(units, len(units))
