"""Configuration dataclasses for transcoding."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Literal

import voluptuous as vol

from .codec.encoding import Encoding
from .const import (
    CONF_ERRORS,
    CONF_REPLACEMENT,
    CONF_SOURCE_ENCODING,
    CONF_TARGET_ENCODING,
    REPLACEMENT_CHARACTER,
)
from .exceptions import ConfigurationError
from .schemas import TRANSCODE_SCHEMA


@dataclass
class TranscodeConfig:
    """Options for converting storage units from one encoding to another.

    ``source`` of None means the source encoding is inferred from the unit
    width of the input.
    """

    target: Encoding = Encoding.UTF_8
    source: Encoding | None = None
    errors: Literal["strict", "replace"] = "strict"
    replacement: int = REPLACEMENT_CHARACTER

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TranscodeConfig:
        """Build a config from a plain mapping such as parsed YAML or JSON.

        Raises:
            ConfigurationError: The mapping fails validation.
        """
        try:
            validated = TRANSCODE_SCHEMA(dict(data))
        except vol.Invalid as err:
            raise ConfigurationError(str(err)) from err
        return cls(
            target=validated[CONF_TARGET_ENCODING],
            source=validated[CONF_SOURCE_ENCODING],
            errors=validated[CONF_ERRORS],
            replacement=validated[CONF_REPLACEMENT],
        )

    def as_dict(self) -> dict[str, Any]:
        """Return the config as a mapping accepted by ``from_dict``."""
        return {
            CONF_SOURCE_ENCODING: self.source.name if self.source is not None else None,
            CONF_TARGET_ENCODING: self.target.name,
            CONF_ERRORS: self.errors,
            CONF_REPLACEMENT: self.replacement,
        }
