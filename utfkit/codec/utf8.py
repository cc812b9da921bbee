"""UTF-8 codec."""

from __future__ import annotations

from ..const import (
    CONTINUATION_MASK,
    CONTINUATION_PAYLOAD,
    CONTINUATION_PREFIX,
    HIGH_SURROGATE_MIN,
    INVALID_LEAD_MIN,
    LOW_SURROGATE_MAX,
    MAX_CODE_POINT,
)
from ..exceptions import BadUtfEncodingError
from ..positions import UnitPosition
from .base_codec import UtfCodec, validate_code_point
from .encoding import Encoding

# Indexed by sequence length
_LEAD_PREFIXES = (0x00, 0x00, 0xC0, 0xE0, 0xF0)
_LEAD_PAYLOADS = (0x00, 0x7F, 0x1F, 0x0F, 0x07)
# Smallest code point that needs a sequence of that length (overlong check)
_MIN_CODE_POINTS = (0x00, 0x00, 0x80, 0x800, 0x10000)


class Utf8Codec(UtfCodec):
    """Codec for UTF-8 byte sequences."""

    max_units = 4

    def __init__(self, encoding: Encoding = Encoding.UTF_8) -> None:
        super().__init__(encoding)

    def unit_count_from_lead(self, unit: int) -> int:
        if (unit & 0x80) == 0x00:
            return 1
        if (unit & 0xE0) == 0xC0:
            return 2
        if (unit & 0xF0) == 0xE0:
            return 3
        return 4

    def unit_count_from_code_point(self, code_point: int) -> int:
        if code_point <= 0x7F:
            return 1
        if code_point <= 0x7FF:
            return 2
        if code_point <= 0xFFFF:
            return 3
        return 4

    def is_lead_unit(self, unit: int) -> bool:
        return (unit & CONTINUATION_MASK) != CONTINUATION_PREFIX

    def decode(self, position: UnitPosition) -> tuple[int, UnitPosition]:
        lead = self.read_unit(position)
        if not self.is_lead_unit(lead):
            raise BadUtfEncodingError(lead, self._encoding, "continuation byte in lead position")
        if lead >= INVALID_LEAD_MIN:
            raise BadUtfEncodingError(lead, self._encoding, "invalid lead byte")

        size = self.unit_count_from_lead(lead)
        result = lead & _LEAD_PAYLOADS[size]
        position = position.next()

        for _ in range(size - 1):
            if position.at_end:
                raise BadUtfEncodingError(lead, self._encoding, "truncated sequence")
            unit = self.read_unit(position)
            if (unit & CONTINUATION_MASK) != CONTINUATION_PREFIX:
                raise BadUtfEncodingError(unit, self._encoding, "expected a continuation byte")
            result = (result << 6) | (unit & CONTINUATION_PAYLOAD)
            position = position.next()

        if result < _MIN_CODE_POINTS[size]:
            raise BadUtfEncodingError(lead, self._encoding, "overlong sequence")
        if result > MAX_CODE_POINT:
            raise BadUtfEncodingError(lead, self._encoding, "code point above U+10FFFF")
        if HIGH_SURROGATE_MIN <= result <= LOW_SURROGATE_MAX:
            raise BadUtfEncodingError(lead, self._encoding, "encoded surrogate")

        return result, position

    def encode_units(self, code_point: int) -> tuple[int, ...]:
        code_point = validate_code_point(code_point)
        size = self.unit_count_from_code_point(code_point)
        shift = 6 * (size - 1)

        # Only the first byte differs in prefix and payload width
        units = [((code_point >> shift) & _LEAD_PAYLOADS[size]) | _LEAD_PREFIXES[size]]
        while shift:
            shift -= 6
            units.append(((code_point >> shift) & CONTINUATION_PAYLOAD) | CONTINUATION_PREFIX)
        return tuple(units)
