"""UTF-16 codec."""

from __future__ import annotations

from ..const import (
    HIGH_SURROGATE_MAX,
    HIGH_SURROGATE_MIN,
    LOW_SURROGATE_MAX,
    LOW_SURROGATE_MIN,
    SUPPLEMENTARY_OFFSET,
    SURROGATE_MASK,
)
from ..exceptions import BadUtfEncodingError
from ..positions import UnitPosition
from .base_codec import UtfCodec, validate_code_point
from .byte_order import swap16
from .encoding import Encoding


def _is_high_surrogate(value: int) -> bool:
    return HIGH_SURROGATE_MIN <= value <= HIGH_SURROGATE_MAX


def _is_low_surrogate(value: int) -> bool:
    return LOW_SURROGATE_MIN <= value <= LOW_SURROGATE_MAX


class Utf16Codec(UtfCodec):
    """Codec for UTF-16 in either byte order.

    Code points above U+FFFF are stored as a surrogate pair: a high surrogate
    (D800-DBFF) carrying the top ten bits followed by a low surrogate
    (DC00-DFFF) carrying the bottom ten, after subtracting 0x10000.
    """

    max_units = 2

    def __init__(self, encoding: Encoding = Encoding.UTF_16) -> None:
        if encoding.unit_width != 2:
            raise ValueError(f"{encoding.name} is not a UTF-16 encoding")
        super().__init__(encoding, swap16)

    def unit_count_from_lead(self, unit: int) -> int:
        return 2 if _is_high_surrogate(self.to_host(unit)) else 1

    def unit_count_from_code_point(self, code_point: int) -> int:
        return 1 if code_point <= 0xFFFF else 2

    def is_lead_unit(self, unit: int) -> bool:
        return not _is_low_surrogate(self.to_host(unit))

    def decode(self, position: UnitPosition) -> tuple[int, UnitPosition]:
        lead = self.read_unit(position)
        value = self.to_host(lead)
        position = position.next()

        if _is_low_surrogate(value):
            raise BadUtfEncodingError(lead, self._encoding, "unpaired low surrogate")
        if not _is_high_surrogate(value):
            return value, position

        if position.at_end:
            raise BadUtfEncodingError(lead, self._encoding, "high surrogate at end of input")
        trail = self.to_host(self.read_unit(position))
        if not _is_low_surrogate(trail):
            raise BadUtfEncodingError(lead, self._encoding, "unpaired high surrogate")

        result = (((value - HIGH_SURROGATE_MIN) << 10) | (trail - LOW_SURROGATE_MIN)) + SUPPLEMENTARY_OFFSET
        return result, position.next()

    def encode_units(self, code_point: int) -> tuple[int, ...]:
        code_point = validate_code_point(code_point)
        if code_point <= 0xFFFF:
            return (self.from_host(code_point),)

        code_point -= SUPPLEMENTARY_OFFSET
        high = HIGH_SURROGATE_MIN | ((code_point >> 10) & SURROGATE_MASK)
        low = LOW_SURROGATE_MIN | (code_point & SURROGATE_MASK)
        return self.from_host(high), self.from_host(low)
