"""Shared pieces of the Unicode codecs: error flags, check modes and code point tests."""

from __future__ import annotations

from enum import IntFlag

__all__ = [
    "CodecError",
    "CheckMode",
    "UnicodeCodecError",
    "REPLACEMENT_CODEPOINT",
    "LEAD_OFFSET",
    "SURROGATE_OFFSET",
    "MAX_CODEPOINT",
    "is_surrogate",
    "is_lead_surrogate",
    "is_trail_surrogate",
    "is_codepoint_valid",
]


class CodecError(IntFlag):
    """Bit flags describing what went wrong while encoding or decoding."""

    OK = 0
    INCOMPLETE_INPUT = 1 << 0
    INSUFFICIENT_SPACE = 1 << 1
    ILLEGAL_BYTE_SEQUENCE = 1 << 2
    INVALID_CODEPOINT = 1 << 3


class CheckMode(IntFlag):
    """Which checks a codec performs.

    The end of the input is always respected, since reading past it is not
    possible; ``CAPACITY`` is accepted for completeness.
    """

    NONE = 0
    CAPACITY = 1 << 0
    VALIDITY = 1 << 1
    UNALIGNED = 1 << 2
    NORMAL = CAPACITY | VALIDITY


REPLACEMENT_CODEPOINT = 0xFFFD
MAX_CODEPOINT = 0x10FFFF
LEAD_OFFSET = 0xD800 - (0x10000 >> 10)
SURROGATE_OFFSET = (0xD800 << 10) + 0xDC00 - 0x10000


def _describe(error: CodecError) -> str:
    names = [m.name.lower().replace("_", " ") for m in CodecError if m and m in error]
    return ", ".join(names) or "ok"


class UnicodeCodecError(ValueError):
    """Raised when a codec reports an error.

    ``error`` holds the flags, ``codepoint`` the code point produced (the
    replacement character on decode failures, the rejected code point on
    encode failures), ``pos`` the position reached in the input and
    ``output`` whatever was produced instead.
    """

    def __init__(
        self,
        error: CodecError,
        codepoint: int = REPLACEMENT_CODEPOINT,
        pos: int = 0,
        output: bytes = b"",
    ) -> None:
        super().__init__(f"{_describe(error)} at position {pos}")
        self.error = error
        self.codepoint = codepoint
        self.pos = pos
        self.output = output


def is_surrogate(c: int) -> bool:
    """True for UTF-16 surrogate code units."""
    return 0xD800 <= c <= 0xDFFF


def is_lead_surrogate(c: int) -> bool:
    """True for UTF-16 lead (high) surrogates."""
    return 0xD800 <= c <= 0xDBFF


def is_trail_surrogate(c: int) -> bool:
    """True for UTF-16 trail (low) surrogates."""
    return 0xDC00 <= c <= 0xDFFF


def is_codepoint_valid(cp: int) -> bool:
    """True for Unicode scalar values."""
    return 0 <= cp <= MAX_CODEPOINT and not is_surrogate(cp)