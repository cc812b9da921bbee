"""Iterator adapters between storage units and code points.

This package provides a code point input iterator, whose capability follows
the underlying storage (forward-only input stays forward-only, indexable input
becomes bidirectional), and a code point output iterator that encodes as it
writes.
"""

from __future__ import annotations

from .input_iterator import (
    BidirectionalCodePointIterator,
    CodePointIterator,
    CodePointRange,
    make_end_iterator,
    make_iterator,
)
from .output_iterator import CodePointWriter, make_output_iterator

__all__ = [
    "BidirectionalCodePointIterator",
    "CodePointIterator",
    "CodePointRange",
    "CodePointWriter",
    "make_end_iterator",
    "make_iterator",
    "make_output_iterator",
]
