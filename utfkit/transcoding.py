"""Transcoding functions between storage unit encodings.

This module builds whole-buffer operations on top of the code point iterators:
decoding storage units to code points, encoding code points to storage units,
converting between encodings, and moving storage units to and from raw bytes.

Error Policy:
-------------
Decoding is strict by default and raises BadUtfEncodingError on the first
malformed sequence. With ``errors="replace"`` the caller opts into lenient
decoding: each malformed sequence start is replaced with the replacement code
point (U+FFFD unless configured) and decoding resumes one storage unit later.
"""

from __future__ import annotations

from array import array
from collections.abc import Iterable
import logging
from typing import Any

from .codec import Encoding, get_codec, get_encoding, resolve_encoding
from .config import TranscodeConfig
from .const import ERRORS_REPLACE, ERRORS_STRICT, REPLACEMENT_CHARACTER, UNIT_TYPECODES
from .exceptions import BadUtfEncodingError, ConfigurationError
from .iterators import make_iterator, make_output_iterator
from .positions import begin

_LOGGER = logging.getLogger(__name__)


def unit_typecode(unit_width: int) -> str:
    """Return the ``array.array`` typecode holding units of ``unit_width`` bytes."""
    typecode = UNIT_TYPECODES.get(unit_width)
    if typecode is None:
        raise ValueError(f"No Unicode encoding uses {unit_width}-byte storage units")
    # 'I' is not four bytes on every platform
    if array(typecode).itemsize != unit_width:
        typecode = "L" if array("L").itemsize == unit_width else typecode
    return typecode


def new_unit_buffer(encoding: Encoding | str) -> array:
    """Return an empty growable buffer for the storage units of ``encoding``."""
    return array(unit_typecode(get_encoding(encoding).unit_width))


def decode_units(
    units: Any,
    encoding: Encoding | str | None = None,
    *,
    errors: str = ERRORS_STRICT,
    replacement: int = REPLACEMENT_CHARACTER,
) -> list[int]:
    """Decode storage units into a list of code points.

    Args:
        units: Storage unit sequence or iterable.
        encoding: Encoding of ``units``, or None to infer from the unit width.
        errors: "strict" to raise on malformed input, "replace" to substitute.
        replacement: Code point substituted in "replace" mode.

    Returns:
        The decoded code points.

    Raises:
        BadUtfEncodingError: Malformed input in "strict" mode.
    """
    if errors not in (ERRORS_STRICT, ERRORS_REPLACE):
        raise ConfigurationError(f"Unknown error policy '{errors}'")

    resolved = resolve_encoding(units, encoding)
    if errors == ERRORS_STRICT:
        return list(make_iterator(units, resolved))

    codec = get_codec(resolved)
    position = begin(units)
    result: list[int] = []
    substitutions = 0

    while not position.at_end:
        try:
            code_point, position = codec.decode(position)
        except BadUtfEncodingError as err:
            _LOGGER.debug("Replacing malformed %s unit 0x%X at offset %d", resolved.name, err.bad_value, position.index)
            substitutions += 1
            result.append(replacement)
            position = position.next()
            continue
        result.append(code_point)

    if substitutions:
        _LOGGER.warning("Replaced %d malformed %s sequence(s)", substitutions, resolved.name)
    return result


def encode_code_points(
    code_points: Iterable[int | str],
    encoding: Encoding | str = Encoding.UTF_8,
    sink: Any = None,
) -> Any:
    """Encode code points into storage units.

    Args:
        code_points: Code points, or a ``str`` whose characters are encoded.
        encoding: Target encoding.
        sink: Container to append to. A new ``array.array`` is created if None.

    Returns:
        The sink holding the encoded units.

    Raises:
        CodePointRangeError: A value is not a Unicode scalar value.
    """
    encoding = get_encoding(encoding)
    if sink is None:
        sink = new_unit_buffer(encoding)
    make_output_iterator(sink, encoding).write_all(code_points)
    return sink


def transcode(
    units: Any,
    target: Encoding | str,
    source: Encoding | str | None = None,
    *,
    errors: str = ERRORS_STRICT,
    replacement: int = REPLACEMENT_CHARACTER,
) -> array:
    """Convert storage units from one encoding to another.

    Args:
        units: Source storage units.
        target: Encoding to produce.
        source: Encoding of ``units``, or None to infer from the unit width.
        errors: Decode error policy, "strict" or "replace".
        replacement: Code point substituted in "replace" mode.

    Returns:
        A new ``array.array`` of target storage units.
    """
    target = get_encoding(target)
    resolved = resolve_encoding(units, source)
    if errors == ERRORS_STRICT:
        code_points: Iterable[int] = make_iterator(units, resolved)
    else:
        code_points = decode_units(units, resolved, errors=errors, replacement=replacement)
    _LOGGER.debug("Transcoding %s to %s", resolved.name, target.name)
    return encode_code_points(code_points, target)


def transcode_with_config(units: Any, config: TranscodeConfig) -> array:
    """Convert storage units as described by ``config``."""
    return transcode(
        units,
        config.target,
        config.source,
        errors=config.errors,
        replacement=config.replacement,
    )


def units_from_bytes(data: bytes | bytearray | memoryview, encoding: Encoding | str) -> array:
    """Split raw bytes into storage units for ``encoding``.

    Units are loaded in host byte order; the encoding's byte order then
    decides how each unit is read. Bytes from a big-endian UTF-16 stream are
    therefore read with ``Encoding.UTF_16BE`` on any host.

    Raises:
        ValueError: ``data`` is not a whole number of units.
    """
    encoding = get_encoding(encoding)
    width = encoding.unit_width
    if len(data) % width:
        raise ValueError(f"{len(data)} bytes is not a whole number of {width}-byte {encoding.name} units")
    units = new_unit_buffer(encoding)
    units.frombytes(bytes(data))
    return units


def units_to_bytes(units: Iterable[int], encoding: Encoding | str) -> bytes:
    """Join storage units for ``encoding`` into raw bytes in host byte order."""
    encoding = get_encoding(encoding)
    buffer = new_unit_buffer(encoding)
    buffer.extend(units)
    return buffer.tobytes()


def get_malformed_units(units: Any, encoding: Encoding | str | None = None) -> list[int]:
    """Get the raw units that start malformed sequences.

    Useful for reporting which parts of the input a lenient decode would
    replace.

    Args:
        units: Storage units to check.
        encoding: Encoding of ``units``, or None to infer from the unit width.

    Returns:
        Offending raw unit values in order of appearance.
    """
    codec = get_codec(resolve_encoding(units, encoding))
    position = begin(units)
    malformed: list[int] = []

    while not position.at_end:
        try:
            _, position = codec.decode(position)
        except BadUtfEncodingError as err:
            malformed.append(err.bad_value)
            position = position.next()

    return malformed
