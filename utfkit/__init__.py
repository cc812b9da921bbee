"""Unicode transcoding and code point iteration.

utfkit reads sequences of encoded storage units (bytes, 16-bit or 32-bit
units) as sequences of code points, and writes code points back as storage
units, for UTF-8, UTF-16 and UTF-32 in either byte order.

Iterator Capability:
--------------------
The code point iterator follows the capability of the storage it reads:

1. Indexable storage (bytes, bytearray, array.array, memoryview, list) gives a
   bidirectional iterator. It is never random access, because locating the
   n-th code point still requires a walk.
2. Any other iterable gives a forward-only iterator with no ``retreat``.
"""

from __future__ import annotations

from .codec import (
    NATIVE_BYTE_ORDER,
    Encoding,
    UtfCodec,
    get_codec,
    get_encoding,
    native_encoding,
    resolve_encoding,
)
from .config import TranscodeConfig
from .exceptions import (
    BadUtfEncodingError,
    CodePointRangeError,
    ConfigurationError,
    UnknownEncodingError,
    UtfError,
)
from .iterators import (
    BidirectionalCodePointIterator,
    CodePointIterator,
    CodePointRange,
    CodePointWriter,
    make_end_iterator,
    make_iterator,
    make_output_iterator,
)
from .positions import AppendPosition, Capability, ForwardPosition, SequencePosition
from .text import EncodedText
from .transcoding import (
    decode_units,
    encode_code_points,
    get_malformed_units,
    transcode,
    transcode_with_config,
    units_from_bytes,
    units_to_bytes,
)

__all__ = [
    "NATIVE_BYTE_ORDER",
    "AppendPosition",
    "BadUtfEncodingError",
    "BidirectionalCodePointIterator",
    "Capability",
    "CodePointIterator",
    "CodePointRange",
    "CodePointRangeError",
    "CodePointWriter",
    "ConfigurationError",
    "EncodedText",
    "Encoding",
    "ForwardPosition",
    "SequencePosition",
    "TranscodeConfig",
    "UnknownEncodingError",
    "UtfCodec",
    "UtfError",
    "decode_units",
    "encode_code_points",
    "get_codec",
    "get_encoding",
    "get_malformed_units",
    "make_end_iterator",
    "make_iterator",
    "make_output_iterator",
    "native_encoding",
    "resolve_encoding",
    "transcode",
    "transcode_with_config",
    "units_from_bytes",
    "units_to_bytes",
]
