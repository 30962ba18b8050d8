"""UTF-16 decoding and encoding over byte buffers in either byte order."""

from __future__ import annotations

import sys

from .codec import (
    LEAD_OFFSET,
    REPLACEMENT_CODEPOINT,
    SURROGATE_OFFSET,
    CheckMode,
    CodecError,
    UnicodeCodecError,
    is_codepoint_valid,
    is_lead_surrogate,
    is_surrogate,
    is_trail_surrogate,
)

__all__ = ["decode_next", "decode_prev", "encode"]

_UNIT = 2


def _byte_order(byteorder: str) -> str:
    if byteorder == "native":
        return sys.byteorder
    if byteorder in ("little", "big"):
        return byteorder
    raise ValueError(f"byte order must be 'little', 'big' or 'native', got {byteorder!r}")


def _read_unit(data, pos: int, order: str) -> int:
    return int.from_bytes(data[pos:pos + _UNIT], order)


def _unit_bytes(unit: int, order: str) -> bytes:
    return (unit & 0xFFFF).to_bytes(_UNIT, order)


def _combine(lead: int, trail: int) -> int:
    return (lead << 10) + trail - SURROGATE_OFFSET


def decode_next(
    data, pos: int = 0, byteorder: str = sys.byteorder, mode: CheckMode = CheckMode.NORMAL
) -> tuple[int, int]:
    """Decode the code point starting at byte ``pos``; return ``(codepoint, next_pos)``.

    Raises :class:`UnicodeCodecError` on truncated input and, when ``mode``
    includes ``VALIDITY``, on unpaired surrogates.
    """
    order = _byte_order(byteorder)
    validity = CheckMode.VALIDITY in mode
    end = len(data)

    if end - pos < _UNIT:
        raise UnicodeCodecError(CodecError.INCOMPLETE_INPUT, REPLACEMENT_CODEPOINT, pos)

    lead = _read_unit(data, pos, order)
    pos += _UNIT
    if not is_surrogate(lead):
        return lead, pos

    if validity and is_trail_surrogate(lead):
        raise UnicodeCodecError(CodecError.ILLEGAL_BYTE_SEQUENCE, REPLACEMENT_CODEPOINT, pos)

    if end - pos < _UNIT:
        raise UnicodeCodecError(CodecError.INCOMPLETE_INPUT, REPLACEMENT_CODEPOINT, pos)

    trail = _read_unit(data, pos, order)
    if validity and not is_trail_surrogate(trail):
        raise UnicodeCodecError(CodecError.ILLEGAL_BYTE_SEQUENCE, REPLACEMENT_CODEPOINT, pos)

    return _combine(lead, trail), pos + _UNIT


def decode_prev(
    data,
    pos: int | None = None,
    byteorder: str = sys.byteorder,
    mode: CheckMode = CheckMode.NORMAL,
) -> tuple[int, int]:
    """Decode the code point ending just before byte ``pos``; return ``(codepoint, start_pos)``.

    ``pos`` defaults to the end of ``data``.
    """
    order = _byte_order(byteorder)
    validity = CheckMode.VALIDITY in mode
    if pos is None:
        pos = len(data)

    if pos < _UNIT:
        raise UnicodeCodecError(CodecError.INCOMPLETE_INPUT, REPLACEMENT_CODEPOINT, pos)

    pos -= _UNIT
    trail = _read_unit(data, pos, order)
    if not is_surrogate(trail):
        return trail, pos

    if validity and is_lead_surrogate(trail):
        raise UnicodeCodecError(CodecError.ILLEGAL_BYTE_SEQUENCE, REPLACEMENT_CODEPOINT, pos)

    if pos < _UNIT:
        raise UnicodeCodecError(CodecError.INCOMPLETE_INPUT, REPLACEMENT_CODEPOINT, pos)

    lead_pos = pos - _UNIT
    lead = _read_unit(data, lead_pos, order)
    if validity and not is_lead_surrogate(lead):
        raise UnicodeCodecError(CodecError.ILLEGAL_BYTE_SEQUENCE, REPLACEMENT_CODEPOINT, pos)

    return _combine(lead, trail), lead_pos


def encode(cp: int, byteorder: str = sys.byteorder, mode: CheckMode = CheckMode.NORMAL) -> bytes:
    """Encode one code point as one or two UTF-16 code units.

    With ``VALIDITY`` in ``mode`` an invalid code point raises
    :class:`UnicodeCodecError` whose ``output`` is the encoded replacement
    character.
    """
    order = _byte_order(byteorder)
    if not 0 <= cp <= 0xFFFFFFFF:
        raise ValueError(f"code point out of 32-bit range: {cp}")
    if CheckMode.VALIDITY in mode and not is_codepoint_valid(cp):
        raise UnicodeCodecError(
            CodecError.INVALID_CODEPOINT, cp, 0, _unit_bytes(REPLACEMENT_CODEPOINT, order)
        )

    if cp <= 0xFFFF:
        return _unit_bytes(cp, order)
    lead = (cp >> 10) + LEAD_OFFSET
    trail = 0xDC00 + (cp & 0x3FF)
    return _unit_bytes(lead, order) + _unit_bytes(trail, order)