"""UTF-32 codec."""

from __future__ import annotations

from ..exceptions import BadUtfEncodingError
from ..positions import UnitPosition
from .base_codec import UtfCodec, is_scalar_value, validate_code_point
from .byte_order import swap32
from .encoding import Encoding


class Utf32Codec(UtfCodec):
    """Codec for UTF-32 in either byte order. Every code point is one unit."""

    max_units = 1

    def __init__(self, encoding: Encoding = Encoding.UTF_32) -> None:
        if encoding.unit_width != 4:
            raise ValueError(f"{encoding.name} is not a UTF-32 encoding")
        super().__init__(encoding, swap32)

    def unit_count_from_lead(self, unit: int) -> int:
        return 1

    def unit_count_from_code_point(self, code_point: int) -> int:
        return 1

    def is_lead_unit(self, unit: int) -> bool:
        return True

    def decode(self, position: UnitPosition) -> tuple[int, UnitPosition]:
        unit = self.read_unit(position)
        value = self.to_host(unit)
        if not is_scalar_value(value):
            raise BadUtfEncodingError(unit, self._encoding, "not a Unicode scalar value")
        return value, position.next()

    def encode_units(self, code_point: int) -> tuple[int, ...]:
        return (self.from_host(validate_code_point(code_point)),)
