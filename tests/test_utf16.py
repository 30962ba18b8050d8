import sys

import pytest

from teslkit import utf16
from teslkit.codec import REPLACEMENT_CODEPOINT, CheckMode, CodecError, UnicodeCodecError

CODECS = {"little": "utf-16-le", "big": "utf-16-be"}
SAMPLES = ["A", "\u00e9", "\u20ac", "\uffff", "\U00010000", "\U0001F600", "\U0010FFFF"]


@pytest.mark.parametrize("order", ["little", "big"])
@pytest.mark.parametrize("char", SAMPLES)
def test_encode_matches_standard_codec(order, char):
    assert utf16.encode(ord(char), order) == char.encode(CODECS[order])


@pytest.mark.parametrize("order", ["little", "big"])
@pytest.mark.parametrize("char", SAMPLES)
def test_decode_next_round_trip(order, char):
    data = char.encode(CODECS[order])
    assert utf16.decode_next(data, 0, order) == (ord(char), len(data))


@pytest.mark.parametrize("order", ["little", "big"])
def test_decode_next_walks_text(order):
    text = "a\u00e9\U0001F600z"
    data = text.encode(CODECS[order])
    pos = 0
    decoded = []
    while pos < len(data):
        cp, pos = utf16.decode_next(data, pos, order)
        decoded.append(chr(cp))
    assert "".join(decoded) == text


@pytest.mark.parametrize("order", ["little", "big"])
def test_decode_prev_walks_backwards(order):
    text = "x\U0001F600\u20acy"
    data = text.encode(CODECS[order])
    pos = len(data)
    decoded = []
    while pos > 0:
        cp, pos = utf16.decode_prev(data, pos, order)
        decoded.append(chr(cp))
    assert "".join(reversed(decoded)) == text


def test_decode_prev_defaults_to_end():
    data = "ab\U0001F600".encode("utf-16-le")
    assert utf16.decode_prev(data, byteorder="little") == (0x1F600, 4)


def test_native_default_matches_sys_byteorder():
    assert utf16.encode(0x20AC) == utf16.encode(0x20AC, sys.byteorder)
    assert utf16.encode(0x20AC, "native") == utf16.encode(0x20AC, sys.byteorder)


def test_decode_next_truncated_unit():
    with pytest.raises(UnicodeCodecError) as info:
        utf16.decode_next(b"\x41", 0, "little")
    assert info.value.error == CodecError.INCOMPLETE_INPUT
    assert info.value.pos == 0


def test_decode_next_lead_at_end():
    data = (0xD83D).to_bytes(2, "little")
    with pytest.raises(UnicodeCodecError) as info:
        utf16.decode_next(data, 0, "little")
    assert info.value.error == CodecError.INCOMPLETE_INPUT
    assert info.value.codepoint == REPLACEMENT_CODEPOINT
    assert info.value.pos == 2


def test_decode_next_lone_trail_is_illegal():
    data = (0xDC00).to_bytes(2, "little") + "A".encode("utf-16-le")
    with pytest.raises(UnicodeCodecError) as info:
        utf16.decode_next(data, 0, "little")
    assert info.value.error == CodecError.ILLEGAL_BYTE_SEQUENCE
    assert info.value.pos == 2


def test_decode_next_lead_without_trail_is_illegal():
    data = (0xD800).to_bytes(2, "big") + "A".encode("utf-16-be")
    with pytest.raises(UnicodeCodecError) as info:
        utf16.decode_next(data, 0, "big")
    assert info.value.error == CodecError.ILLEGAL_BYTE_SEQUENCE
    assert info.value.codepoint == REPLACEMENT_CODEPOINT
    assert info.value.pos == 2


def test_decode_next_without_validity_consumes_pair():
    data = (0xD800).to_bytes(2, "little") + "A".encode("utf-16-le")
    _, pos = utf16.decode_next(data, 0, "little", CheckMode.CAPACITY)
    assert pos == len(data)


def test_decode_prev_empty_is_incomplete():
    with pytest.raises(UnicodeCodecError) as info:
        utf16.decode_prev(b"", 0, "little")
    assert info.value.error == CodecError.INCOMPLETE_INPUT


def test_decode_prev_lone_lead_is_illegal():
    data = "A".encode("utf-16-le") + (0xD800).to_bytes(2, "little")
    with pytest.raises(UnicodeCodecError) as info:
        utf16.decode_prev(data, len(data), "little")
    assert info.value.error == CodecError.ILLEGAL_BYTE_SEQUENCE
    assert info.value.pos == 2


def test_decode_prev_trail_at_start_is_incomplete():
    data = (0xDC00).to_bytes(2, "little")
    with pytest.raises(UnicodeCodecError) as info:
        utf16.decode_prev(data, 2, "little")
    assert info.value.error == CodecError.INCOMPLETE_INPUT


def test_decode_prev_trail_after_non_lead_is_illegal():
    data = "A".encode("utf-16-le") + (0xDC00).to_bytes(2, "little")
    with pytest.raises(UnicodeCodecError) as info:
        utf16.decode_prev(data, len(data), "little")
    assert info.value.error == CodecError.ILLEGAL_BYTE_SEQUENCE


@pytest.mark.parametrize("cp", [0xD800, 0xDFFF, 0x110000])
def test_encode_invalid_codepoint_raises_with_replacement(cp):
    with pytest.raises(UnicodeCodecError) as info:
        utf16.encode(cp, "little")
    assert info.value.error == CodecError.INVALID_CODEPOINT
    assert info.value.codepoint == cp
    assert info.value.output == "\ufffd".encode("utf-16-le")


def test_encode_surrogate_without_validity():
    assert utf16.encode(0xD800, "big", CheckMode.NONE) == (0xD800).to_bytes(2, "big")


def test_encode_rejects_negative():
    with pytest.raises(ValueError):
        utf16.encode(-1, "little")


def test_bad_byteorder():
    with pytest.raises(ValueError):
        utf16.encode(0x41, "middle")