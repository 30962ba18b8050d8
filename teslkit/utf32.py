"""UTF-32 decoding and encoding over byte buffers in either byte order."""

from __future__ import annotations

import sys

from .codec import (
    REPLACEMENT_CODEPOINT,
    CheckMode,
    CodecError,
    UnicodeCodecError,
    is_codepoint_valid,
)

__all__ = ["decode_next", "decode_prev", "encode"]

_UNIT = 4


def _byte_order(byteorder: str) -> str:
    if byteorder == "native":
        return sys.byteorder
    if byteorder in ("little", "big"):
        return byteorder
    raise ValueError(f"byte order must be 'little', 'big' or 'native', got {byteorder!r}")


def _read_unit(data, pos: int, order: str) -> int:
    return int.from_bytes(data[pos:pos + _UNIT], order)


def decode_next(
    data, pos: int = 0, byteorder: str = sys.byteorder, mode: CheckMode = CheckMode.NORMAL
) -> tuple[int, int]:
    """Decode the code unit at byte ``pos``; return ``(codepoint, next_pos)``.

    Raises :class:`UnicodeCodecError` on truncated input and, when ``mode``
    includes ``VALIDITY``, on values that are not Unicode scalar values.
    """
    order = _byte_order(byteorder)
    if len(data) - pos < _UNIT:
        raise UnicodeCodecError(CodecError.INCOMPLETE_INPUT, REPLACEMENT_CODEPOINT, pos)

    cp = _read_unit(data, pos, order)
    pos += _UNIT
    if CheckMode.VALIDITY in mode and not is_codepoint_valid(cp):
        raise UnicodeCodecError(CodecError.ILLEGAL_BYTE_SEQUENCE, REPLACEMENT_CODEPOINT, pos)
    return cp, pos


def decode_prev(
    data,
    pos: int | None = None,
    byteorder: str = sys.byteorder,
    mode: CheckMode = CheckMode.NORMAL,
) -> tuple[int, int]:
    """Decode the code unit ending just before byte ``pos``; return ``(codepoint, start_pos)``.

    ``pos`` defaults to the end of ``data``.
    """
    order = _byte_order(byteorder)
    if pos is None:
        pos = len(data)
    if pos < _UNIT:
        raise UnicodeCodecError(CodecError.INCOMPLETE_INPUT, REPLACEMENT_CODEPOINT, pos)

    pos -= _UNIT
    cp = _read_unit(data, pos, order)
    if CheckMode.VALIDITY in mode and not is_codepoint_valid(cp):
        raise UnicodeCodecError(CodecError.ILLEGAL_BYTE_SEQUENCE, REPLACEMENT_CODEPOINT, pos)
    return cp, pos


def encode(cp: int, byteorder: str = sys.byteorder, mode: CheckMode = CheckMode.NORMAL) -> bytes:
    """Encode one code point as a single 32-bit code unit.

    With ``VALIDITY`` in ``mode`` an invalid code point raises
    :class:`UnicodeCodecError` whose ``output`` is the encoded replacement
    character.
    """
    order = _byte_order(byteorder)
    if not 0 <= cp <= 0xFFFFFFFF:
        raise ValueError(f"code point out of 32-bit range: {cp}")
    if CheckMode.VALIDITY in mode and not is_codepoint_valid(cp):
        raise UnicodeCodecError(
            CodecError.INVALID_CODEPOINT, cp, 0, REPLACEMENT_CODEPOINT.to_bytes(_UNIT, order)
        )
    return cp.to_bytes(_UNIT, order)