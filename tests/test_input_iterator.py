"""Tests for the code point input iterators."""

from array import array
from collections.abc import Callable
import copy

import pytest

from utfkit import (
    BadUtfEncodingError,
    BidirectionalCodePointIterator,
    Capability,
    CodePointIterator,
    CodePointRange,
    Encoding,
    make_end_iterator,
    make_iterator,
)

from common import ALL_ENCODINGS, FOOBAR, LITTLE_ENDIAN_HOST, SAMPLE_CODE_POINTS, SAMPLE_TEXT


class TestCapability:
    """The iterator follows the capability of its input, up to bidirectional."""

    def test_sequence_gives_bidirectional(self) -> None:
        iterator = make_iterator(b"abc")
        assert isinstance(iterator, BidirectionalCodePointIterator)
        assert iterator.capability is Capability.BIDIRECTIONAL

    def test_random_access_is_capped(self) -> None:
        iterator = make_iterator(array("I", FOOBAR))
        assert iterator.capability is Capability.BIDIRECTIONAL
        assert not hasattr(iterator, "__getitem__")

    def test_single_pass_gives_forward(self) -> None:
        iterator = make_iterator(iter(b"abc"), Encoding.UTF_8)
        assert type(iterator) is CodePointIterator
        assert iterator.capability is Capability.FORWARD
        assert not hasattr(iterator, "retreat")

    def test_range_capability(self) -> None:
        assert CodePointRange(b"abc").capability is Capability.BIDIRECTIONAL
        assert CodePointRange(iter(b"abc"), "UTF-8").capability is Capability.FORWARD


@pytest.mark.parametrize("encoding", ALL_ENCODINGS, ids=lambda e: e.name)
class TestForwardTraversal:
    """Forward traversal over indexable and single-pass input."""

    def test_sequence(self, encoding: Encoding, units_for: Callable) -> None:
        assert list(make_iterator(units_for(SAMPLE_TEXT, encoding), encoding)) == SAMPLE_CODE_POINTS

    def test_single_pass(self, encoding: Encoding, units_for: Callable) -> None:
        units = iter(list(units_for(SAMPLE_TEXT, encoding)))
        assert list(make_iterator(units, encoding)) == SAMPLE_CODE_POINTS

    def test_copies_are_independent(self, encoding: Encoding, units_for: Callable) -> None:
        units = iter(list(units_for(SAMPLE_TEXT, encoding)))
        iterator = make_iterator(units, encoding)
        saved = iterator.copy()
        for expected in SAMPLE_CODE_POINTS:
            # Post increment: the copy keeps the old value
            before = iterator.copy()
            iterator.advance()
            assert before.value == expected
        assert iterator.at_end
        assert list(saved) == SAMPLE_CODE_POINTS


@pytest.mark.parametrize("encoding", ALL_ENCODINGS, ids=lambda e: e.name)
class TestBackwardTraversal:
    """Backward traversal over indexable input."""

    def test_retreat_from_end(self, encoding: Encoding, units_for: Callable) -> None:
        units = units_for(SAMPLE_TEXT, encoding)
        first = make_iterator(units, encoding)
        cursor = make_end_iterator(units, encoding)
        seen = []
        while cursor != first:
            seen.append(cursor.retreat().value)
        assert seen == SAMPLE_CODE_POINTS[::-1]

    def test_retreat_undoes_advance(self, encoding: Encoding, units_for: Callable) -> None:
        units = units_for(SAMPLE_TEXT, encoding)
        cursor = make_iterator(units, encoding)
        for _ in SAMPLE_CODE_POINTS:
            saved = cursor.copy()
            cursor.advance()
            assert cursor.copy().retreat() == saved

    def test_reversed_range(self, encoding: Encoding, units_for: Callable) -> None:
        units = units_for(SAMPLE_TEXT, encoding)
        assert list(reversed(CodePointRange(units, encoding))) == SAMPLE_CODE_POINTS[::-1]


class TestIteratorBehavior:
    """Dereference, comparison and error behavior."""

    def test_foobar(self) -> None:
        iterator = make_iterator(b"foobar")
        assert iterator.value == 0x66
        assert list(iterator) == FOOBAR
        assert iterator.at_end

    def test_value_does_not_move(self) -> None:
        iterator = make_iterator("\u00e9".encode())
        assert iterator.value == 0xE9
        assert iterator.value == 0xE9
        assert iterator.position.index == 0

    def test_char(self) -> None:
        assert make_iterator("\U0001f600".encode()).char == "\U0001f600"

    def test_advance_skips_whole_code_point(self) -> None:
        iterator = make_iterator("\U00010000a".encode())
        assert iterator.advance().position.index == 4
        assert iterator.value == 0x61

    def test_start_offset(self) -> None:
        assert list(make_iterator(b"foobar", start=3)) == FOOBAR[3:]

    def test_malformed_lead_does_not_advance(self, malformed_utf8: bytes) -> None:
        iterator = make_iterator(malformed_utf8)
        iterator.advance()
        with pytest.raises(BadUtfEncodingError) as exc_info:
            iterator.advance()
        assert exc_info.value.bad_value == 0xF8
        assert iterator.position.index == 1
        with pytest.raises(BadUtfEncodingError):
            _ = iterator.value

    def test_read_at_end(self) -> None:
        with pytest.raises(IndexError):
            _ = make_end_iterator(b"ab").value

    def test_retreat_at_begin(self) -> None:
        with pytest.raises(IndexError):
            make_iterator(b"ab").retreat()

    def test_equality(self) -> None:
        data = b"foobar"
        assert make_iterator(data) == make_iterator(data)
        assert make_iterator(data).advance() != make_iterator(data)
        assert make_iterator(data) != make_iterator(bytearray(data))
        assert make_iterator(data) != object()

    def test_unhashable(self) -> None:
        with pytest.raises(TypeError):
            hash(make_iterator(b"ab"))

    def test_copy_module(self) -> None:
        iterator = make_iterator(b"ab")
        duplicate = copy.copy(iterator)
        duplicate.advance()
        assert iterator.value == 0x61
        assert duplicate.value == 0x62

    def test_empty_input(self) -> None:
        empty = bytearray()
        assert make_iterator(empty) == make_end_iterator(empty)
        assert list(make_iterator(iter(()), "UTF-8")) == []

    def test_explicit_encoding_required_for_lists(self) -> None:
        with pytest.raises(TypeError):
            make_iterator([0x41])


class TestByteOrder:
    """Foreign byte order input is swapped per unit."""

    def test_big_endian_bytes(self) -> None:
        units = array("H")
        units.frombytes(SAMPLE_TEXT.encode("utf-16-be"))
        assert list(make_iterator(units, Encoding.UTF_16BE)) == SAMPLE_CODE_POINTS

    @pytest.mark.skipif(not LITTLE_ENDIAN_HOST, reason="unit values assume a little-endian host")
    def test_big_endian_units(self) -> None:
        units = [0x7F00, 0x8000, 0xFF07, 0x0008, 0xFFD7, 0x00E0, 0xFFFF, 0x00D8, 0x00DC, 0xFFDB, 0xFFDF]
        assert list(make_iterator(units, Encoding.UTF_16BE)) == SAMPLE_CODE_POINTS

    @pytest.mark.skipif(not LITTLE_ENDIAN_HOST, reason="unit values assume a little-endian host")
    def test_big_endian_retreat(self) -> None:
        units = [0x7F00, 0x00D8, 0x00DC]
        cursor = make_end_iterator(units, Encoding.UTF_16BE)
        assert cursor.retreat().value == 0x10000
        assert cursor.retreat().value == 0x7F

    def test_range_count(self) -> None:
        assert CodePointRange(SAMPLE_TEXT.encode()).count() == len(SAMPLE_CODE_POINTS)

    def test_forward_range_rereads(self) -> None:
        code_points = CodePointRange(iter(b"foobar"), "UTF-8")
        assert list(code_points) == FOOBAR
        assert list(code_points) == FOOBAR

    def test_forward_range_not_reversible(self) -> None:
        with pytest.raises(TypeError):
            reversed(CodePointRange(iter(b"ab"), "UTF-8"))
