"""Tests for EncodedText."""

from array import array

import pytest

from utfkit import (
    BadUtfEncodingError,
    EncodedText,
    Encoding,
    make_end_iterator,
    make_iterator,
    make_output_iterator,
    transcode,
)
from utfkit.positions import storage_units

from common import ALL_ENCODINGS, SAMPLE_CODE_POINTS, SAMPLE_TEXT, python_units


class TestEncodedText:
    """Tests for the EncodedText buffer."""

    @pytest.mark.parametrize("encoding", ALL_ENCODINGS, ids=lambda e: e.name)
    def test_stores_units(self, encoding: Encoding) -> None:
        text = EncodedText(SAMPLE_TEXT, encoding)
        assert text.units == python_units(SAMPLE_TEXT, encoding)
        assert list(text) == SAMPLE_CODE_POINTS
        assert str(text) == SAMPLE_TEXT

    def test_len_counts_code_points(self) -> None:
        text = EncodedText(SAMPLE_TEXT)
        assert len(text) == len(SAMPLE_CODE_POINTS)
        assert text.unit_count == len(SAMPLE_TEXT.encode())

    def test_bool(self) -> None:
        assert not EncodedText()
        assert EncodedText("a")

    def test_from_units(self) -> None:
        text = EncodedText.from_units(array("H", [0xD800, 0xDC00]))
        assert text.encoding is Encoding.UTF_16
        assert str(text) == "\U00010000"

    def test_from_units_copies(self) -> None:
        data = bytearray(b"ab")
        text = EncodedText.from_units(data)
        data[0] = 0x7A
        assert str(text) == "ab"

    def test_from_units_rejects_malformed(self, malformed_utf8: bytes) -> None:
        with pytest.raises(BadUtfEncodingError):
            EncodedText.from_units(malformed_utf8)

    def test_append_and_extend(self) -> None:
        text = EncodedText(encoding="UTF-16BE")
        text.append("a")
        text.append(0x10000)
        text.extend([0x62, 0x63])
        assert str(text) == "a\U00010000bc"
        assert text.to_bytes() == text.units.tobytes()

    def test_iterators(self) -> None:
        text = EncodedText("xyz")
        cursor = text.end()
        assert cursor.retreat().char == "z"
        assert text.begin().advance().char == "y"
        assert list(reversed(text)) == [0x7A, 0x79, 0x78]

    def test_to_encoding(self) -> None:
        text = EncodedText(SAMPLE_TEXT).to_encoding(Encoding.UTF_32BE)
        assert text.encoding is Encoding.UTF_32BE
        assert text == SAMPLE_TEXT

    def test_equality(self) -> None:
        assert EncodedText("abc") == "abc"
        assert EncodedText("abc") == EncodedText("abc", "UTF-32")
        assert EncodedText("abc") != EncodedText("abd")
        assert EncodedText("abc") != 3

    def test_unhashable(self) -> None:
        with pytest.raises(TypeError):
            hash(EncodedText("abc"))

    def test_concatenation(self) -> None:
        text = EncodedText("ab", "UTF-16")
        combined = text + EncodedText("cd", "UTF-8") + "e"
        assert combined == "abcde"
        assert combined.encoding is Encoding.UTF_16
        assert text == "ab"

    def test_in_place_concatenation_with_itself(self) -> None:
        text = EncodedText("ab")
        text += text
        assert text == "abab"

    def test_is_well_formed(self) -> None:
        text = EncodedText("ab")
        assert text.is_well_formed()
        text.units.append(0xFF)
        assert not text.is_well_formed()

    def test_repr(self) -> None:
        assert repr(EncodedText("ab", "UTF-16BE")) == "EncodedText('ab', encoding=UTF_16BE)"


class TestEncodedTextAsUnits:
    """EncodedText passed where storage units are expected."""

    def test_from_units(self) -> None:
        source = EncodedText("\u00e9")
        text = EncodedText.from_units(source)
        assert text.encoding is Encoding.UTF_8
        assert list(text.units) == [0xC3, 0xA9]
        assert text == "\u00e9"

    def test_from_units_keeps_foreign_byte_order(self) -> None:
        text = EncodedText.from_units(EncodedText("\U00010000", "UTF-16BE"))
        assert text.encoding is Encoding.UTF_16BE
        assert str(text) == "\U00010000"

    def test_make_iterator(self) -> None:
        assert list(make_iterator(EncodedText("\u00e9"))) == [0xE9]
        assert list(make_iterator(EncodedText("\u00e9", "UTF-16"))) == [0xE9]

    def test_end_iterator(self) -> None:
        text = EncodedText("ab\U00010000", "UTF-16BE")
        assert make_end_iterator(text).retreat().value == 0x10000

    def test_transcode(self) -> None:
        result = transcode(EncodedText("a\u00e9", "UTF-32BE"), Encoding.UTF_8)
        assert result.tobytes() == "a\u00e9".encode()

    def test_output_iterator_appends_units(self) -> None:
        text = EncodedText("a", "UTF-16")
        make_output_iterator(text).write(0x10000)
        assert text.unit_count == 3
        assert text == "a\U00010000"

    def test_storage_units(self) -> None:
        text = EncodedText("ab")
        assert storage_units(text) is text.units
        assert storage_units(b"ab") == b"ab"
