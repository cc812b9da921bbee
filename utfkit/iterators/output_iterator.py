"""Code point output iterator that encodes into storage units."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ..codec import Encoding, UtfCodec, get_codec, resolve_encoding
from ..positions import AppendPosition, OutputPosition, SequencePosition, storage_units


def _as_code_point(value: int | str) -> int:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"Expected a single character, got a string of length {len(value)}")
        return ord(value)
    return value


class CodePointWriter:
    """Write-only cursor that encodes each code point written to it.

    Every ``write`` encodes one complete code point and only then moves the
    underlying position past the units it produced.
    """

    __slots__ = ("_codec", "_position", "_units_written")

    def __init__(self, position: OutputPosition, codec: UtfCodec) -> None:
        self._position = position
        self._codec = codec
        self._units_written = 0

    @property
    def position(self) -> OutputPosition:
        """Return the current output position."""
        return self._position

    @property
    def encoding(self) -> Encoding:
        """Return the encoding written by this cursor."""
        return self._codec.encoding

    @property
    def units_written(self) -> int:
        """Return the number of storage units written so far."""
        return self._units_written

    def write(self, code_point: int | str) -> CodePointWriter:
        """Encode ``code_point`` at the current position and advance.

        Raises:
            CodePointRangeError: The value is not a Unicode scalar value.
        """
        units = self._codec.encode_units(_as_code_point(code_point))
        self._position = self._position.put_all(units)
        self._units_written += len(units)
        return self

    def write_all(self, code_points: Iterable[int | str]) -> int:
        """Write every code point of ``code_points`` and return how many were written."""
        count = 0
        for code_point in code_points:
            self.write(code_point)
            count += 1
        return count

    def __repr__(self) -> str:
        return f"CodePointWriter({self._codec.encoding.name}, {self._position!r})"


def make_output_iterator(sink: Any, encoding: Encoding | str | None = None) -> CodePointWriter:
    """Adapt a sink of storage units into a code point writer.

    Args:
        sink: Growable container with ``append`` (``bytearray``,
            ``array.array``, ``list``), or a ``SequencePosition`` to overwrite a
            fixed buffer in place.
        encoding: Explicit encoding, or None to infer the native encoding from
            the sink's unit width.

    Returns:
        A writer bound to the resolved encoding.
    """
    resolved = resolve_encoding(sink, encoding)
    sink = storage_units(sink)
    position: OutputPosition
    if isinstance(sink, (SequencePosition, AppendPosition)):
        position = sink
    else:
        position = AppendPosition(sink)
    return CodePointWriter(position, get_codec(resolved))
