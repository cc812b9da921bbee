from array import array
from collections.abc import Callable

import pytest

from utfkit import Encoding

from common import python_units


@pytest.fixture
def units_for() -> Callable[[str, Encoding], array]:
    """Return a helper that encodes text into host order storage units."""
    return python_units


@pytest.fixture
def malformed_utf8() -> bytes:
    """UTF-8 input with an invalid lead byte between two ASCII letters."""
    return bytes([0x41, 0xF8, 0x42])
