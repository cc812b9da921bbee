"""Code point input iterators over encoded storage units."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from ..codec import Encoding, UtfCodec, get_codec, resolve_encoding
from ..positions import Capability, ForwardPosition, SequencePosition, UnitPosition, begin, end


class CodePointIterator:
    """Forward-only cursor that reads code points from storage units.

    The cursor holds nothing but an underlying position and its codec.
    Reading the current value decodes at the position and throws the end of
    the decode away; advancing decodes again and keeps it. Copies are
    therefore fully independent.
    """

    __slots__ = ("_codec", "_position")

    capability = Capability.FORWARD

    def __init__(self, position: UnitPosition, codec: UtfCodec) -> None:
        self._position = position
        self._codec = codec

    @property
    def position(self) -> UnitPosition:
        """Return the underlying storage unit position."""
        return self._position

    @property
    def codec(self) -> UtfCodec:
        """Return the codec bound at construction."""
        return self._codec

    @property
    def encoding(self) -> Encoding:
        """Return the encoding bound at construction."""
        return self._codec.encoding

    @property
    def at_end(self) -> bool:
        """Return True if no code point is left to read."""
        return self._position.at_end

    @property
    def value(self) -> int:
        """Return the code point at the current position.

        Raises:
            BadUtfEncodingError: The units here are malformed. The cursor does
                not move.
            IndexError: The cursor is at the end position.
        """
        return self._codec.decode(self._position)[0]

    @property
    def char(self) -> str:
        """Return the current code point as a one-character string."""
        return chr(self.value)

    def advance(self) -> CodePointIterator:
        """Move to the next code point and return self."""
        self._position = self._codec.decode(self._position)[1]
        return self

    def copy(self) -> CodePointIterator:
        """Return an independent cursor at the same position."""
        return type(self)(self._position, self._codec)

    __copy__ = copy

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        if self._position.at_end:
            raise StopIteration
        code_point, self._position = self._codec.decode(self._position)
        return code_point

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CodePointIterator):
            return NotImplemented
        return self._position == other._position

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._codec.encoding.name}, {self._position!r})"


class BidirectionalCodePointIterator(CodePointIterator):
    """Code point cursor that can also move backwards.

    Random access input still yields this class: finding the n-th code point
    takes a walk over the units before it.
    """

    __slots__ = ()

    capability = Capability.BIDIRECTIONAL

    def retreat(self) -> BidirectionalCodePointIterator:
        """Move to the previous code point and return self.

        Walks back one unit at a time until a lead unit is found.

        Raises:
            IndexError: The cursor is already at the first code point.
        """
        position = self._position.prev()  # type: ignore[union-attr]
        while not self._codec.is_lead_unit(position.unit()):
            position = position.prev()
        self._position = position
        return self


def _iterator_for(position: UnitPosition, codec: UtfCodec) -> CodePointIterator:
    if position.capability >= Capability.BIDIRECTIONAL:
        return BidirectionalCodePointIterator(position, codec)
    return CodePointIterator(position, codec)


def make_iterator(source: Any, encoding: Encoding | str | None = None, *, start: int = 0) -> CodePointIterator:
    """Adapt storage units into a code point iterator.

    Args:
        source: Storage unit sequence, iterable, or position. ``start`` must
            fall on the first unit of a code point.
        encoding: Explicit encoding, or None to infer the native encoding from
            the unit width.
        start: Offset in storage units to start from.

    Returns:
        A ``BidirectionalCodePointIterator`` for indexable input, otherwise a
        forward-only ``CodePointIterator``.
    """
    resolved = resolve_encoding(source, encoding)
    return _iterator_for(begin(source, start), get_codec(resolved))


def make_end_iterator(units: Any, encoding: Encoding | str | None = None) -> BidirectionalCodePointIterator:
    """Return a code point iterator at the end of an indexable sequence."""
    resolved = resolve_encoding(units, encoding)
    return BidirectionalCodePointIterator(end(units), get_codec(resolved))


class CodePointRange:
    """Re-iterable view of storage units as code points."""

    def __init__(self, units: Any, encoding: Encoding | str | None = None) -> None:
        self._encoding = resolve_encoding(units, encoding)
        self._codec = get_codec(self._encoding)
        # ForwardPosition is multi-pass, so one-shot iterables can be re-read
        self._begin = begin(units)

    @property
    def encoding(self) -> Encoding:
        """Return the encoding of the underlying units."""
        return self._encoding

    @property
    def capability(self) -> Capability:
        """Return the capability of iterators produced by this range."""
        return min(self._begin.capability, Capability.BIDIRECTIONAL)

    def begin(self) -> CodePointIterator:
        """Return an iterator at the first code point."""
        return _iterator_for(self._begin, self._codec)

    def end(self) -> CodePointIterator:
        """Return an iterator at the end position."""
        if isinstance(self._begin, SequencePosition):
            return BidirectionalCodePointIterator(end(self._begin), self._codec)
        position: ForwardPosition = self._begin
        while not position.at_end:
            position = position.next()
        return CodePointIterator(position, self._codec)

    def count(self) -> int:
        """Return the number of code points, walking the whole range."""
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[int]:
        return self.begin()

    def __reversed__(self) -> Iterator[int]:
        if self.capability < Capability.BIDIRECTIONAL:
            raise TypeError("Forward-only storage units cannot be read backwards")
        return self._reverse()

    def _reverse(self) -> Iterator[int]:
        first = self.begin()
        cursor = self.end()
        while cursor != first:
            cursor.retreat()  # type: ignore[attr-defined]
            yield cursor.value

    def __repr__(self) -> str:
        return f"CodePointRange({self._encoding.name}, {self._begin!r})"
