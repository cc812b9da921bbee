"""Shared sample data for the utfkit tests."""

from __future__ import annotations

from array import array
import sys

from utfkit import Encoding

# One code point from each side of every unit count boundary
SAMPLE_CODE_POINTS = [0x7F, 0x80, 0x7FF, 0x800, 0xD7FF, 0xE000, 0xFFFF, 0x10000, 0x10FFFF]
SAMPLE_TEXT = "".join(chr(cp) for cp in SAMPLE_CODE_POINTS)

FOOBAR = [0x66, 0x6F, 0x6F, 0x62, 0x61, 0x72]

ALL_ENCODINGS = list(Encoding)

LITTLE_ENDIAN_HOST = sys.byteorder == "little"

_TYPECODES = {1: "B", 2: "H", 4: "I"}


def python_units(text: str, encoding: Encoding) -> array:
    """Encode ``text`` with Python's own codecs and load the units in host order."""
    units = array(_TYPECODES[encoding.unit_width])
    units.frombytes(text.encode(encoding.codec_name))
    return units
