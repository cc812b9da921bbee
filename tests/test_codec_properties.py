"""Properties every codec must satisfy."""

import pytest

from utfkit import Encoding, SequencePosition, get_codec

from common import ALL_ENCODINGS, SAMPLE_CODE_POINTS, SAMPLE_TEXT, python_units

# A spread over the whole code space, plus the unit count boundaries
CODE_POINTS = sorted(
    {cp for cp in range(0, 0x110000, 0x1F1) if not 0xD800 <= cp <= 0xDFFF} | set(SAMPLE_CODE_POINTS)
)


@pytest.mark.parametrize("encoding", ALL_ENCODINGS, ids=lambda e: e.name)
class TestCodecProperties:
    """Round trip and unit count properties over a sample of code points."""

    def test_round_trip(self, encoding: Encoding) -> None:
        codec = get_codec(encoding)
        for code_point in CODE_POINTS:
            units = codec.encode_units(code_point)
            decoded, after = codec.decode(SequencePosition(units))
            assert decoded == code_point
            assert after.index == len(units)

    def test_unit_counts_agree(self, encoding: Encoding) -> None:
        codec = get_codec(encoding)
        for code_point in CODE_POINTS:
            units = codec.encode_units(code_point)
            assert len(units) == codec.unit_count_from_code_point(code_point)
            assert len(units) == codec.unit_count_from_lead(units[0])
            assert len(units) <= codec.max_units

    def test_only_first_unit_is_a_lead(self, encoding: Encoding) -> None:
        codec = get_codec(encoding)
        for code_point in SAMPLE_CODE_POINTS:
            units = codec.encode_units(code_point)
            assert codec.is_lead_unit(units[0])
            assert not any(codec.is_lead_unit(unit) for unit in units[1:])

    def test_matches_python_codec(self, encoding: Encoding) -> None:
        codec = get_codec(encoding)
        expected = list(python_units(SAMPLE_TEXT, encoding))
        produced = [unit for cp in SAMPLE_CODE_POINTS for unit in codec.encode_units(cp)]
        assert produced == expected


@pytest.mark.slow
@pytest.mark.parametrize("encoding", [Encoding.UTF_8, Encoding.UTF_16], ids=lambda e: e.name)
def test_every_scalar_value_round_trips(encoding: Encoding) -> None:
    """Walk the whole code space once per variable length encoding."""
    codec = get_codec(encoding)
    for code_point in range(0x110000):
        if 0xD800 <= code_point <= 0xDFFF:
            continue
        units = codec.encode_units(code_point)
        assert codec.decode(SequencePosition(units)) == (code_point, SequencePosition(units, len(units)))
        assert codec.unit_count_from_lead(units[0]) == codec.unit_count_from_code_point(code_point) == len(units)
