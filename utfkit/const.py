"""Constants for the utfkit transcoding engine."""

from __future__ import annotations

# Code point space
MAX_CODE_POINT = 0x10FFFF
MAX_ASCII = 0x7F
REPLACEMENT_CHARACTER = 0xFFFD

# UTF-16 surrogate ranges
HIGH_SURROGATE_MIN = 0xD800
HIGH_SURROGATE_MAX = 0xDBFF
LOW_SURROGATE_MIN = 0xDC00
LOW_SURROGATE_MAX = 0xDFFF
SURROGATE_MASK = 0x03FF
SUPPLEMENTARY_OFFSET = 0x10000

# UTF-8 bit layout
CONTINUATION_MASK = 0xC0
CONTINUATION_PREFIX = 0x80
CONTINUATION_PAYLOAD = 0x3F
INVALID_LEAD_MIN = 0xF8

# Configuration keys
CONF_SOURCE_ENCODING = "source_encoding"
CONF_TARGET_ENCODING = "target_encoding"
CONF_ERRORS = "errors"
CONF_REPLACEMENT = "replacement"

# Decode error policies
ERRORS_STRICT = "strict"
ERRORS_REPLACE = "replace"
ERROR_POLICIES = [ERRORS_STRICT, ERRORS_REPLACE]

# Default values
DEFAULT_ERRORS = ERRORS_STRICT
DEFAULT_TARGET_ENCODING = "UTF-8"

# array.array typecodes by storage unit width
UNIT_TYPECODES: dict[int, str] = {
    1: "B",
    2: "H",
    4: "I",
}
