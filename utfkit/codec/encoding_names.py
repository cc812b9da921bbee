"""Encoding name lookup.

This module provides the ENCODING_ALIASES dictionary and get_encoding function
for converting user supplied encoding names to Encoding members.
"""

from __future__ import annotations

from ..exceptions import UnknownEncodingError
from .encoding import Encoding

# Mapping from common encoding names to Encoding members.
# Names without a byte order resolve to the host byte order.
ENCODING_ALIASES: dict[str, Encoding] = {
    "UTF-8": Encoding.UTF_8,
    "UTF8": Encoding.UTF_8,
    "UTF-16": Encoding.UTF_16,
    "UTF-16LE": Encoding.UTF_16LE,
    "UTF-16-LE": Encoding.UTF_16LE,
    "UTF-16BE": Encoding.UTF_16BE,
    "UTF-16-BE": Encoding.UTF_16BE,
    "UTF-32": Encoding.UTF_32,
    "UTF-32LE": Encoding.UTF_32LE,
    "UTF-32-LE": Encoding.UTF_32LE,
    "UTF-32BE": Encoding.UTF_32BE,
    "UTF-32-BE": Encoding.UTF_32BE,
    "U8": Encoding.UTF_8,
    "U16": Encoding.UTF_16,
    "U32": Encoding.UTF_32,
}


def get_encoding(name: str | Encoding) -> Encoding:
    """Get the Encoding for a name.

    Args:
        name: Encoding name (e.g., "UTF-8", "utf_16_be", "UTF32LE") or an
            Encoding, which is returned unchanged.

    Returns:
        The matching Encoding.

    Raises:
        UnknownEncodingError: The name does not denote a supported encoding.
    """
    if isinstance(name, Encoding):
        return name

    # Check mapping first
    key = name.strip().upper()
    if key in ENCODING_ALIASES:
        return ENCODING_ALIASES[key]

    # Try common transformations
    normalized = key.replace("_", "-").replace(" ", "")
    if normalized in ENCODING_ALIASES:
        return ENCODING_ALIASES[normalized]

    # Handle missing hyphen after the UTF prefix (e.g. "UTF16BE")
    if normalized.startswith("UTF") and not normalized.startswith("UTF-"):
        candidate = f"UTF-{normalized[3:]}"
        if candidate in ENCODING_ALIASES:
            return ENCODING_ALIASES[candidate]

    # Member names (e.g. "UTF_16BE")
    member = key.replace("-", "_").replace(" ", "")
    if member in Encoding.__members__:
        return Encoding[member]

    raise UnknownEncodingError(name)
