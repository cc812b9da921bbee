"""Factory function for codec instances."""

from __future__ import annotations

from functools import lru_cache

from .base_codec import UtfCodec
from .encoding import Encoding
from .encoding_names import get_encoding
from .utf8 import Utf8Codec
from .utf16 import Utf16Codec
from .utf32 import Utf32Codec


@lru_cache(maxsize=None)
def _codec_for(encoding: Encoding) -> UtfCodec:
    if encoding is Encoding.UTF_8:
        return Utf8Codec()
    if encoding.unit_width == 2:
        return Utf16Codec(encoding)
    return Utf32Codec(encoding)


def get_codec(encoding: Encoding | str) -> UtfCodec:
    """Return the codec for an encoding or encoding name.

    Codecs are stateless, so one shared instance per encoding is returned.
    """
    return _codec_for(get_encoding(encoding))
