"""Exception hierarchy for utfkit."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .codec.encoding import Encoding


class UtfError(Exception):
    """Base class for all utfkit errors."""


class BadUtfEncodingError(UtfError, ValueError):
    """A storage unit sequence is not well formed for its encoding.

    The offending raw storage unit, as it sits in the sequence before any byte
    swap, is available as ``bad_value``.
    """

    def __init__(self, bad_value: int, encoding: Encoding | None = None, reason: str | None = None) -> None:
        self.bad_value = bad_value
        self.encoding = encoding
        self.reason = reason
        name = encoding.name if encoding is not None else "UTF"
        message = f"Malformed {name} sequence at unit 0x{bad_value:X}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class CodePointRangeError(UtfError, ValueError):
    """A value passed for encoding is not a Unicode scalar value."""

    def __init__(self, code_point: object) -> None:
        self.code_point = code_point
        if isinstance(code_point, int):
            detail = f"0x{code_point:X}"
        else:
            detail = repr(code_point)
        super().__init__(f"Cannot encode {detail}: not a Unicode scalar value")


class UnknownEncodingError(UtfError, LookupError):
    """An encoding name could not be resolved."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown encoding '{name}'")


class ConfigurationError(UtfError, ValueError):
    """Transcoding options failed validation."""
