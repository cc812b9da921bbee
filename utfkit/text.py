"""Encoded text buffer."""

from __future__ import annotations

from array import array
from collections.abc import Iterable, Iterator
from typing import Any

from .codec import Encoding, get_encoding, resolve_encoding
from .iterators import (
    BidirectionalCodePointIterator,
    CodePointRange,
    make_end_iterator,
    make_iterator,
    make_output_iterator,
)
from .positions import storage_units
from .transcoding import get_malformed_units, new_unit_buffer, units_to_bytes


class EncodedText:
    """Growable text stored as encoded storage units.

    Reads and writes as a sequence of code points while keeping the units of a
    single encoding underneath. ``len()`` counts code points and so walks the
    whole buffer; ``unit_count`` is the constant time storage size.
    """

    __slots__ = ("_encoding", "_units")

    def __init__(self, value: str | Iterable[int] = "", encoding: Encoding | str = Encoding.UTF_8) -> None:
        self._encoding = get_encoding(encoding)
        self._units: array = new_unit_buffer(self._encoding)
        self.extend(value)

    @classmethod
    def from_units(cls, units: Any, encoding: Encoding | str | None = None) -> EncodedText:
        """Wrap a copy of already encoded storage units.

        Raises:
            BadUtfEncodingError: ``units`` holds a malformed sequence.
        """
        resolved = resolve_encoding(units, encoding)
        text = cls(encoding=resolved)
        text._units.extend(int(unit) for unit in storage_units(units))
        # Walk once so malformed input fails here rather than on first read
        for _ in make_iterator(text._units, resolved):
            pass
        return text

    @property
    def encoding(self) -> Encoding:
        """Return the encoding of the stored units."""
        return self._encoding

    @property
    def units(self) -> array:
        """Return the underlying storage units."""
        return self._units

    @property
    def unit_count(self) -> int:
        """Return the number of storage units."""
        return len(self._units)

    def begin(self) -> BidirectionalCodePointIterator:
        """Return a code point iterator at the start of the text."""
        return make_iterator(self._units, self._encoding)  # type: ignore[return-value]

    def end(self) -> BidirectionalCodePointIterator:
        """Return a code point iterator at the end of the text."""
        return make_end_iterator(self._units, self._encoding)

    def append(self, code_point: int | str) -> None:
        """Append a single code point."""
        make_output_iterator(self._units, self._encoding).write(code_point)

    def extend(self, values: str | Iterable[int]) -> None:
        """Append every code point of ``values``.

        Another EncodedText is read as code points, whatever its encoding.
        """
        if values is self:
            values = list(values)
        make_output_iterator(self._units, self._encoding).write_all(values)

    def to_encoding(self, encoding: Encoding | str) -> EncodedText:
        """Return a copy of this text stored in ``encoding``."""
        return EncodedText(self, encoding)

    def to_bytes(self) -> bytes:
        """Return the storage units as raw bytes in host byte order."""
        return units_to_bytes(self._units, self._encoding)

    def is_well_formed(self) -> bool:
        """Return True if every stored sequence decodes."""
        return not get_malformed_units(self._units, self._encoding)

    def __len__(self) -> int:
        return CodePointRange(self._units, self._encoding).count()

    def __bool__(self) -> bool:
        return len(self._units) > 0

    def __iter__(self) -> Iterator[int]:
        return iter(CodePointRange(self._units, self._encoding))

    def __reversed__(self) -> Iterator[int]:
        return reversed(CodePointRange(self._units, self._encoding))

    def __str__(self) -> str:
        return "".join(map(chr, self))

    def __repr__(self) -> str:
        return f"EncodedText({str(self)!r}, encoding={self._encoding.name})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return str(self) == other
        if isinstance(other, EncodedText):
            if other._encoding is self._encoding:
                return self._units == other._units
            return list(self) == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: object) -> EncodedText:
        if not isinstance(other, (str, EncodedText)):
            return NotImplemented
        result = EncodedText(encoding=self._encoding)
        result._units.extend(self._units)
        result.extend(other)
        return result

    def __iadd__(self, other: object) -> EncodedText:
        if not isinstance(other, (str, EncodedText)):
            return NotImplemented
        self.extend(other)
        return self
