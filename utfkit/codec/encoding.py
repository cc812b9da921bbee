"""Encodings and storage unit width classification."""

from __future__ import annotations

from enum import Enum
import logging
import sys
from typing import Any, Literal

_LOGGER = logging.getLogger(__name__)

ByteOrder = Literal["little", "big"]

NATIVE_BYTE_ORDER: ByteOrder = sys.byteorder


class Encoding(Enum):
    """Supported Unicode encoding forms.

    Values are the matching Python codec names. ``UTF_16`` and ``UTF_32`` are
    aliases of the host byte order members.
    """

    UTF_8 = "utf-8"
    UTF_16LE = "utf-16-le"
    UTF_16BE = "utf-16-be"
    UTF_32LE = "utf-32-le"
    UTF_32BE = "utf-32-be"
    UTF_16 = "utf-16-le" if sys.byteorder == "little" else "utf-16-be"
    UTF_32 = "utf-32-le" if sys.byteorder == "little" else "utf-32-be"

    @property
    def unit_width(self) -> int:
        """Return the storage unit width in bytes."""
        if self is Encoding.UTF_8:
            return 1
        return 2 if self.value.startswith("utf-16") else 4

    @property
    def byte_order(self) -> ByteOrder | None:
        """Return the byte order of each unit, or None for single-byte units."""
        if self is Encoding.UTF_8:
            return None
        return "little" if self.value.endswith("-le") else "big"

    @property
    def is_native(self) -> bool:
        """Return True if units are stored in host byte order."""
        return self.byte_order in (None, NATIVE_BYTE_ORDER)

    @property
    def codec_name(self) -> str:
        """Return the Python codec name for this encoding."""
        return self.value


def native_encoding(unit_width: int) -> Encoding:
    """Return the host encoding for storage units of ``unit_width`` bytes.

    Raises:
        ValueError: No Unicode encoding uses units of that width.
    """
    if unit_width == 1:
        return Encoding.UTF_8
    if unit_width == 2:
        return Encoding.UTF_16
    if unit_width == 4:
        return Encoding.UTF_32
    raise ValueError(f"No Unicode encoding uses {unit_width}-byte storage units")


def unit_width_of(units: Any) -> int | None:
    """Return the storage unit width of a container or position, if known."""
    # Positions delegate to the sequence they walk or fill
    for attribute in ("units", "sink"):
        inner = getattr(units, attribute, None)
        if inner is not None and inner is not units:
            return unit_width_of(inner)
    if isinstance(units, (bytes, bytearray)):
        return 1
    itemsize = getattr(units, "itemsize", None)
    if isinstance(itemsize, int):
        return itemsize
    width = getattr(units, "unit_width", None)
    return width if isinstance(width, int) else None


def resolve_encoding(units: Any, encoding: Encoding | str | None = None) -> Encoding:
    """Resolve the encoding used to read or write ``units``.

    An explicit encoding is used verbatim, which is how foreign byte order text
    is read. A wrapper exposing its own ``encoding`` supplies it. Otherwise the
    native encoding for the container's unit width is inferred.

    Args:
        units: Storage unit container, sink, or position.
        encoding: Explicit encoding or encoding name, or None to infer.

    Returns:
        The encoding to bind for the lifetime of an adapter.

    Raises:
        TypeError: No encoding was given and the unit width is unknown.
        ValueError: The container's unit width contradicts the encoding.
    """
    width = unit_width_of(units)

    # Wrappers such as EncodedText carry the encoding of their units
    if encoding is None and isinstance(getattr(units, "encoding", None), Encoding):
        encoding = units.encoding

    if encoding is not None:
        if not isinstance(encoding, Encoding):
            from .encoding_names import get_encoding  # noqa: PLC0415

            encoding = get_encoding(encoding)
        if width is not None and width != encoding.unit_width:
            raise ValueError(
                f"{encoding.name} needs {encoding.unit_width}-byte units, "
                f"{type(units).__name__} holds {width}-byte units"
            )
        return encoding

    if width is None:
        raise TypeError(
            f"Cannot infer an encoding for {type(units).__name__}; pass one explicitly"
        )
    resolved = native_encoding(width)
    _LOGGER.debug("Inferred %s for %d-byte storage units", resolved.name, width)
    return resolved
