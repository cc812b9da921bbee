"""Codec traits for UTF-8, UTF-16 and UTF-32.

Each codec is a small stateless object that knows how one encoding maps code
points to storage units:

- ``unit_count_from_lead``: units occupied by the code point starting at a unit
- ``unit_count_from_code_point``: units needed to encode a code point
- ``is_lead_unit``: whether a unit can start a code point (used to walk back)
- ``decode``: read one code point from a position
- ``encode``: write one code point to a position

UTF-16 and UTF-32 exist in both byte orders. Codecs for the foreign byte order
swap each unit as it is read or written.
"""

from __future__ import annotations

from .base_codec import UtfCodec, is_scalar_value, validate_code_point
from .byte_order import swap16, swap32
from .encoding import (
    NATIVE_BYTE_ORDER,
    Encoding,
    native_encoding,
    resolve_encoding,
    unit_width_of,
)
from .encoding_names import ENCODING_ALIASES, get_encoding
from .factory import get_codec
from .utf8 import Utf8Codec
from .utf16 import Utf16Codec
from .utf32 import Utf32Codec

__all__ = [
    "ENCODING_ALIASES",
    "NATIVE_BYTE_ORDER",
    "Encoding",
    "Utf8Codec",
    "Utf16Codec",
    "Utf32Codec",
    "UtfCodec",
    "get_codec",
    "get_encoding",
    "is_scalar_value",
    "native_encoding",
    "resolve_encoding",
    "swap16",
    "swap32",
    "unit_width_of",
    "validate_code_point",
]
