"""UTF-8 decoding and encoding, including the historical 5- and 6-byte forms."""

from __future__ import annotations

from .codec import (
    REPLACEMENT_CODEPOINT,
    CheckMode,
    CodecError,
    UnicodeCodecError,
    is_codepoint_valid,
)

__all__ = [
    "REPLACEMENT_SEQUENCE",
    "is_trail",
    "is_overlong_sequence",
    "sequence_length",
    "decode_next",
    "decode_prev",
    "encode",
]

REPLACEMENT_SEQUENCE = b"\xef\xbf\xbd"

_LEAD_MASKS = {1: 0xFF, 2: 0x1F, 3: 0x0F, 4: 0x07, 5: 0x03, 6: 0x03}
_LEAD_MARKS = {2: 0xC0, 3: 0xE0, 4: 0xF0, 5: 0xF8, 6: 0xFC}
_LENGTH_LIMITS = ((0x80, 1), (0x800, 2), (0x10000, 3), (0x200000, 4), (0x4000000, 5), (0x80000000, 6))


def is_trail(b: int) -> bool:
    """True for continuation bytes (``10xxxxxx``)."""
    return (b & 0xC0) == 0x80


def _shortest_length(cp: int) -> int:
    for limit, length in _LENGTH_LIMITS:
        if cp < limit:
            return length
    return 6


def is_overlong_sequence(cp: int, length: int) -> bool:
    """True if ``cp`` would have fitted a shorter sequence than ``length`` bytes."""
    if cp >= 0x80000000:
        return False
    return _shortest_length(cp) != length


def sequence_length(lead: int) -> int:
    """Length of the sequence a lead byte starts, or 0 if it cannot start one."""
    leading_ones = 8 - (~lead & 0xFF).bit_length()
    if leading_ones == 0:
        return 1
    if 2 <= leading_ones <= 6:
        return leading_ones
    return 0


def _decode(data, pos: int, end: int, mode: CheckMode) -> tuple[int, int, CodecError]:
    if pos >= end:
        return REPLACEMENT_CODEPOINT, pos, CodecError.INCOMPLETE_INPUT

    validity = CheckMode.VALIDITY in mode
    lead = data[pos]
    length = sequence_length(lead)
    if length == 0:
        pos += 1
        error = CodecError.ILLEGAL_BYTE_SEQUENCE if validity else CodecError.OK
        return REPLACEMENT_CODEPOINT, pos, error

    if end - pos < length:
        return REPLACEMENT_CODEPOINT, end, CodecError.INCOMPLETE_INPUT

    cp = lead & _LEAD_MASKS[length]
    pos += 1
    for _ in range(length - 1):
        b = data[pos]
        if validity and not is_trail(b):
            return REPLACEMENT_CODEPOINT, pos, CodecError.ILLEGAL_BYTE_SEQUENCE
        cp = (cp << 6) | (b & 0x3F)
        pos += 1

    if validity and (not is_codepoint_valid(cp) or is_overlong_sequence(cp, length)):
        return REPLACEMENT_CODEPOINT, pos, CodecError.ILLEGAL_BYTE_SEQUENCE
    return cp, pos, CodecError.OK


def decode_next(data, pos: int = 0, mode: CheckMode = CheckMode.NORMAL) -> tuple[int, int]:
    """Decode the sequence starting at ``pos``; return ``(codepoint, next_pos)``.

    Raises :class:`UnicodeCodecError` on truncated input and, when ``mode``
    includes ``VALIDITY``, on malformed, overlong or out-of-range sequences.
    """
    cp, pos, error = _decode(data, pos, len(data), mode)
    if error:
        raise UnicodeCodecError(error, cp, pos)
    return cp, pos


def decode_prev(data, pos: int | None = None, mode: CheckMode = CheckMode.NORMAL) -> tuple[int, int]:
    """Decode the sequence ending just before ``pos``; return ``(codepoint, start_pos)``.

    ``pos`` defaults to the end of ``data``.
    """
    if pos is None:
        pos = len(data)
    if pos <= 0:
        raise UnicodeCodecError(CodecError.INCOMPLETE_INPUT, REPLACEMENT_CODEPOINT, pos)

    validity = CheckMode.VALIDITY in mode
    start = pos
    for _ in range(6):
        start -= 1
        if not is_trail(data[start]):
            cp, reached, error = _decode(data, start, pos, mode)
            if not validity:
                return cp, start
            if reached != pos:
                break
            if CodecError.INCOMPLETE_INPUT in error:
                error = (error & ~CodecError.INCOMPLETE_INPUT) | CodecError.ILLEGAL_BYTE_SEQUENCE
            if error:
                raise UnicodeCodecError(error, cp, start)
            return cp, start
        if start == 0:
            break

    raise UnicodeCodecError(CodecError.ILLEGAL_BYTE_SEQUENCE, REPLACEMENT_CODEPOINT, pos - 1)


def encode(cp: int, mode: CheckMode = CheckMode.NORMAL) -> bytes:
    """Encode one code point.

    With ``VALIDITY`` in ``mode`` an invalid code point raises
    :class:`UnicodeCodecError` whose ``output`` is the replacement sequence.
    Without it any 32-bit value is encoded, using up to six bytes.
    """
    if not 0 <= cp <= 0xFFFFFFFF:
        raise ValueError(f"code point out of 32-bit range: {cp}")
    if CheckMode.VALIDITY in mode and not is_codepoint_valid(cp):
        raise UnicodeCodecError(CodecError.INVALID_CODEPOINT, cp, 0, REPLACEMENT_SEQUENCE)

    length = _shortest_length(cp)
    if length == 1:
        return bytes([cp])
    first = (_LEAD_MARKS[length] | (cp >> (6 * (length - 1)))) & 0xFF
    trails = (0x80 | ((cp >> (6 * shift)) & 0x3F) for shift in reversed(range(length - 1)))
    return bytes([first, *trails])