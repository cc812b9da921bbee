"""Base codec class for UTF encodings."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import ClassVar

from ..const import HIGH_SURROGATE_MIN, LOW_SURROGATE_MAX, MAX_CODE_POINT
from ..exceptions import BadUtfEncodingError, CodePointRangeError
from ..positions import OutputPosition, UnitPosition
from .encoding import Encoding


def is_scalar_value(code_point: object) -> bool:
    """Return True if ``code_point`` is an int in the Unicode scalar value range."""
    if not isinstance(code_point, int) or isinstance(code_point, bool):
        return False
    if code_point < 0 or code_point > MAX_CODE_POINT:
        return False
    return not HIGH_SURROGATE_MIN <= code_point <= LOW_SURROGATE_MAX


def validate_code_point(code_point: object) -> int:
    """Return ``code_point`` if it can be encoded, raise otherwise.

    Raises:
        CodePointRangeError: The value is not a Unicode scalar value.
    """
    if not is_scalar_value(code_point):
        raise CodePointRangeError(code_point)
    return code_point  # type: ignore[return-value]


class UtfCodec(ABC):
    """Abstract base class for the stateless UTF codecs.

    All methods taking a storage unit expect the raw unit as stored in the
    sequence. Codecs for a non-host byte order swap each unit on the way in and
    out, so no swapped copy of the data is ever made.
    """

    max_units: ClassVar[int]

    def __init__(self, encoding: Encoding, swap: Callable[[int], int] | None = None) -> None:
        self._encoding = encoding
        self._swap = None if encoding.is_native else swap
        self._max_unit = (1 << (8 * encoding.unit_width)) - 1

    @property
    def encoding(self) -> Encoding:
        """Return the encoding this codec reads and writes."""
        return self._encoding

    def read_unit(self, position: UnitPosition) -> int:
        """Return the raw storage unit at ``position``.

        Raises:
            BadUtfEncodingError: The value does not fit in one storage unit.
            IndexError: ``position`` is the end position.
        """
        unit = position.unit()
        if not 0 <= unit <= self._max_unit:
            raise BadUtfEncodingError(
                unit, self._encoding, f"value does not fit in a {self._encoding.unit_width}-byte unit"
            )
        return unit

    def to_host(self, unit: int) -> int:
        """Return a raw storage unit as a host order value."""
        return self._swap(unit) if self._swap is not None else unit

    def from_host(self, value: int) -> int:
        """Return a host order value as a raw storage unit."""
        return self._swap(value) if self._swap is not None else value

    @abstractmethod
    def unit_count_from_lead(self, unit: int) -> int:
        """Return how many units the code point starting with ``unit`` occupies."""

    @abstractmethod
    def unit_count_from_code_point(self, code_point: int) -> int:
        """Return how many units ``code_point`` occupies once encoded."""

    @abstractmethod
    def is_lead_unit(self, unit: int) -> bool:
        """Return True if ``unit`` cannot be a trailing unit of a sequence."""

    @abstractmethod
    def decode(self, position: UnitPosition) -> tuple[int, UnitPosition]:
        """Decode the code point starting at ``position``.

        Returns:
            The code point and the position just after its last unit.

        Raises:
            BadUtfEncodingError: The units at ``position`` are malformed.
            IndexError: ``position`` is the end position.
        """

    @abstractmethod
    def encode_units(self, code_point: int) -> tuple[int, ...]:
        """Return the raw storage units encoding ``code_point``.

        Raises:
            CodePointRangeError: ``code_point`` is not a Unicode scalar value.
        """

    def encode(self, position: OutputPosition, code_point: int) -> OutputPosition:
        """Write ``code_point`` at ``position`` and return the position after it.

        The units are composed before anything is written, so a failure never
        leaves part of a code point behind.
        """
        return position.put_all(self.encode_units(code_point))

    def next(self, position: UnitPosition) -> UnitPosition:
        """Return the position of the code point after the one at ``position``."""
        return self.decode(position)[1]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._encoding.name})"
