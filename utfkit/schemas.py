"""Validation schemas for transcoding options."""

from __future__ import annotations

from typing import Any

import voluptuous as vol

from .codec.base_codec import is_scalar_value
from .codec.encoding import Encoding
from .codec.encoding_names import get_encoding
from .const import (
    CONF_ERRORS,
    CONF_REPLACEMENT,
    CONF_SOURCE_ENCODING,
    CONF_TARGET_ENCODING,
    DEFAULT_ERRORS,
    DEFAULT_TARGET_ENCODING,
    ERROR_POLICIES,
    REPLACEMENT_CHARACTER,
)
from .exceptions import UnknownEncodingError


def encoding_validator(value: Any) -> Encoding:
    """Validate an encoding name and return the Encoding."""
    if isinstance(value, Encoding):
        return value
    if not isinstance(value, str):
        raise vol.Invalid(f"Expected an encoding name, got {type(value).__name__}")
    try:
        return get_encoding(value)
    except UnknownEncodingError as err:
        raise vol.Invalid(str(err)) from err


def code_point_validator(value: Any) -> int:
    """Validate a code point given as an int or a single character."""
    if isinstance(value, str):
        if len(value) != 1:
            raise vol.Invalid("Expected a single character")
        value = ord(value)
    if not is_scalar_value(value):
        raise vol.Invalid(f"{value!r} is not a Unicode scalar value")
    return value


TRANSCODE_SCHEMA = vol.Schema(
    {
        vol.Optional(CONF_SOURCE_ENCODING, default=None): vol.Any(None, encoding_validator),
        vol.Optional(CONF_TARGET_ENCODING, default=DEFAULT_TARGET_ENCODING): encoding_validator,
        vol.Optional(CONF_ERRORS, default=DEFAULT_ERRORS): vol.All(str, vol.Lower, vol.In(ERROR_POLICIES)),
        vol.Optional(CONF_REPLACEMENT, default=REPLACEMENT_CHARACTER): code_point_validator,
    }
)
