"""Lexical helpers: character classes, line scanning, integer, escape and number parsing.

Positions are indices into a ``str``; every parser takes a start position and
returns the position just past what it consumed.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

__all__ = [
    "ParsedInteger",
    "ParsedNumber",
    "EscapeErrorKind",
    "EscapeError",
    "NumberErrorKind",
    "NumberError",
    "is_digit",
    "is_octal_digit",
    "is_hex_digit",
    "is_alpha",
    "is_valid_id_starter",
    "is_valid_id_meat",
    "find_valid_id_end",
    "find_line_end",
    "find_next_line",
    "char_to_number",
    "representable_digits",
    "add_avoid_overflow",
    "sub_avoid_overflow",
    "parse_integer_sign",
    "parse_integer",
    "parse_character_escape",
    "parse_number",
]

INT_BITS = 64
NOT_A_DIGIT = 255


@dataclass(frozen=True)
class _IntType:
    bits: int
    signed: bool

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    @property
    def digits(self) -> int:
        return self.bits - 1 if self.signed else self.bits

    def wrap(self, value: int) -> int:
        value &= (1 << self.bits) - 1
        if self.signed and value > self.max:
            value -= 1 << self.bits
        return value

    def add(self, a: int, b: int) -> int | None:
        if b >= 0:
            return a + b if a <= self.max - b else None
        return a + b if a >= self.min - b else None

    def sub(self, a: int, b: int) -> int | None:
        if b >= 0:
            return a - b if a >= self.min + b else None
        return a - b if a <= self.max + b else None


_INT = _IntType(INT_BITS, True)


def _signed(bits: int) -> _IntType:
    if bits < 2:
        raise ValueError(f"integer width must be at least 2 bits, got {bits}")
    return _IntType(bits, True)


# --- character classes -------------------------------------------------------

def is_digit(c: str) -> bool:
    """True for ASCII ``0``-``9``."""
    return 0 <= ord(c) - 48 < 10


def is_octal_digit(c: str) -> bool:
    """True for ASCII ``0``-``7``."""
    return 0 <= ord(c) - 48 < 8


def is_hex_digit(c: str) -> bool:
    """True for ASCII hexadecimal digits of either case."""
    return is_digit(c) or 0 <= (ord(c) | 32) - 97 < 6


def is_alpha(c: str) -> bool:
    """True for ASCII letters of either case."""
    return 0 <= (ord(c) | 32) - 97 < 26


def is_valid_id_starter(c: str) -> bool:
    """True for characters that may start an identifier."""
    return is_alpha(c) or c == "_"


def is_valid_id_meat(c: str) -> bool:
    """True for characters that may continue an identifier."""
    return is_digit(c) or is_valid_id_starter(c)


def find_valid_id_end(text: str, pos: int = 0) -> int:
    """Return the position of the first non-identifier character at or after ``pos``."""
    end = len(text)
    while pos < end and is_valid_id_meat(text[pos]):
        pos += 1
    return pos


def find_line_end(text: str, pos: int = 0) -> int:
    """Return the position of the next ``\\r`` or ``\\n`` (or the end of text)."""
    end = len(text)
    while pos < end and text[pos] not in "\r\n":
        pos += 1
    return pos


def find_next_line(text: str, pos: int = 0) -> int:
    """Return the position just after the next line break (``\\r``, ``\\n`` or ``\\r\\n``)."""
    end = len(text)
    while pos < end:
        c = text[pos]
        if c == "\r":
            pos += 1
            if pos < end and text[pos] == "\n":
                pos += 1
            return pos
        if c == "\n":
            return pos + 1
        pos += 1
    return pos


def char_to_number(c: str) -> int:
    """Value of ``c`` as a base-36 digit, or 255 if it is not one."""
    code = ord(c)
    if 48 <= code <= 57:
        return code - 48
    if 65 <= code <= 90:
        return code - 55
    if 97 <= code <= 122:
        return code - 87
    return NOT_A_DIGIT


def representable_digits(bits: int, base: int) -> int:
    """Number of base-``base`` digits that always fit in ``bits`` value bits."""
    if base == 2:
        return bits
    if base == 8:
        return bits // 3
    if base == 16:
        return bits // 4
    if base == 10:
        return len(str((1 << bits) - 1)) - 1
    raise ValueError(f"unsupported base {base}")


def add_avoid_overflow(a: int, b: int, bits: int = INT_BITS) -> int | None:
    """Return ``a + b`` if it fits a signed ``bits``-wide integer, else None."""
    return _signed(bits).add(a, b)


def sub_avoid_overflow(a: int, b: int, bits: int = INT_BITS) -> int | None:
    """Return ``a - b`` if it fits a signed ``bits``-wide integer, else None."""
    return _signed(bits).sub(a, b)


# --- integers ----------------------------------------------------------------

@dataclass
class ParsedInteger:
    """Outcome of scanning the digits of an integer."""

    leading_zeros_parsed: int = 0
    significant_digits_parsed: int = 0
    extra_digits_parsed: int = 0
    number: int = 0
    would_overflow: bool = False


def _parse_digits(
    result: ParsedInteger, text: str, pos: int, base: int, max_digits: int, itype: _IntType
) -> int:
    end = len(text)
    while pos < end and result.significant_digits_parsed < max_digits:
        num = char_to_number(text[pos])
        if num >= base:
            return pos
        result.number = itype.wrap(result.number * base + num)
        pos += 1
        result.significant_digits_parsed += 1

    if pos == end:
        return pos

    num = char_to_number(text[pos])
    if num >= base:
        return pos

    total = itype.add(result.number, num)
    if total is not None:
        result.number = total
        pos += 1
        result.significant_digits_parsed += 1
        if pos == end:
            return pos
        num = char_to_number(text[pos])
        if num >= base:
            return pos

    result.would_overflow = True
    return pos


def _skip_leading_zeros(text: str, pos: int) -> tuple[int, int]:
    start = pos
    end = len(text)
    while pos < end and text[pos] == "0":
        pos += 1
    return pos - start, pos


def _skip_digits(text: str, pos: int, base: int) -> tuple[int, int]:
    start = pos
    end = len(text)
    while pos < end and char_to_number(text[pos]) < base:
        pos += 1
    return pos - start, pos


def parse_integer_sign(text: str, pos: int = 0) -> tuple[int, int]:
    """Consume an optional ``+`` or ``-``; return ``(sign, pos)``."""
    if pos < len(text):
        if text[pos] == "-":
            return -1, pos + 1
        if text[pos] == "+":
            return 1, pos + 1
    return 1, pos


def parse_integer(
    text: str, pos: int = 0, base: int = 10, bits: int = INT_BITS
) -> tuple[ParsedInteger, int]:
    """Parse unsigned digits in ``base`` into a signed ``bits``-wide integer.

    Signs are not consumed. Digits beyond what fits are counted in
    ``extra_digits_parsed`` and flagged by ``would_overflow``.
    """
    itype = _signed(bits)
    max_digits = representable_digits(itype.digits, base)
    result = ParsedInteger()
    result.leading_zeros_parsed, pos = _skip_leading_zeros(text, pos)
    pos = _parse_digits(result, text, pos, base, max_digits, itype)
    result.extra_digits_parsed, pos = _skip_digits(text, pos, base)
    return result, pos


# --- character escapes -------------------------------------------------------

class EscapeErrorKind(Enum):
    NO_INPUT = "no input"
    OUT_OF_RANGE = "out of range"
    INCOMPLETE_ESCAPE = "incomplete escape"
    UNKNOWN_ESCAPE = "unknown escape"


class EscapeError(ValueError):
    """A character escape could not be parsed.

    ``value`` holds whatever character code was assembled and ``pos`` the
    position reached.
    """

    def __init__(self, kind: EscapeErrorKind, value: int = 0, pos: int = 0) -> None:
        super().__init__(f"{kind.value} at position {pos}")
        self.kind = kind
        self.value = value
        self.pos = pos


_SIMPLE_ESCAPES = {
    "'": 0x27,
    '"': 0x22,
    "?": 0x3F,
    "\\": 0x5C,
    "a": 0x07,
    "b": 0x08,
    "e": 0x1B,
    "f": 0x0C,
    "n": 0x0A,
    "r": 0x0D,
    "t": 0x09,
    "v": 0x0B,
}


def parse_character_escape(text: str, pos: int = 0, char_bits: int = 32) -> tuple[int, int]:
    """Parse the escape whose letter is at ``pos`` (just after a backslash).

    Returns ``(code, pos)``. The value is held in an unsigned ``char_bits``-wide
    character. Single-letter escapes leave the position on the letter; numeric
    escapes end after their digits. Raises :class:`EscapeError` on failure.
    """
    if pos >= len(text):
        raise EscapeError(EscapeErrorKind.NO_INPUT, 0, pos)

    ctype = _IntType(char_bits, False)
    c = text[pos]
    if c in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[c], pos

    error: EscapeErrorKind | None = None
    result = ParsedInteger()
    if c in "01234567":
        pos = _parse_digits(result, text, pos, 8, 3, ctype)
    elif c == "x":
        pos = _parse_digits(result, text, pos + 1, 16, representable_digits(ctype.digits, 16), ctype)
        if result.significant_digits_parsed == 0:
            error = EscapeErrorKind.INCOMPLETE_ESCAPE
    elif c in "uU":
        width = 4 if c == "u" else 8
        pos = _parse_digits(result, text, pos + 1, 16, width, ctype)
        if result.significant_digits_parsed != width:
            error = EscapeErrorKind.INCOMPLETE_ESCAPE
    else:
        raise EscapeError(EscapeErrorKind.UNKNOWN_ESCAPE, 0, pos + 1)

    if result.would_overflow:
        error = EscapeErrorKind.OUT_OF_RANGE
    if error is not None:
        raise EscapeError(error, result.number, pos)
    return result.number, pos


# --- numbers -----------------------------------------------------------------

class NumberErrorKind(Enum):
    NO_INPUT = "no input"
    MISSING_EXPONENT_DIGITS = "missing exponent digits"


class NumberError(ValueError):
    """A numeric literal could not be parsed.

    ``parsed`` holds the partial result (if any) and ``pos`` the position reached.
    """

    def __init__(self, kind: NumberErrorKind, parsed: ParsedNumber | None = None, pos: int = 0) -> None:
        super().__init__(f"{kind.value} at position {pos}")
        self.kind = kind
        self.parsed = parsed
        self.pos = pos


@dataclass
class ParsedNumber:
    """A numeric literal: ``significand * base ** (exponent + implicit_exponent)``."""

    significand: ParsedInteger = field(default_factory=ParsedInteger)
    exponent: ParsedInteger = field(default_factory=ParsedInteger)
    implicit_exponent: int = 0
    representable_digits: int = representable_digits(_INT.digits, 10)
    base: int = 10
    has_decimal_point: bool = False
    has_integer_digits: bool = False
    has_fractional_digits: bool = False
    has_exponent: bool = False

    def is_int_too_big(self) -> bool:
        """True if the significand did not fit the integer type."""
        return self.significand.would_overflow

    def get_int(self) -> int:
        """Integer value; meaningful only without fraction digits or exponent."""
        return self.significand.number

    def get_float(self) -> float:
        """Floating-point value of the literal."""
        real_exponent = self.exponent.number
        total = _INT.add(real_exponent, self.implicit_exponent)
        if total is not None:
            real_exponent = total
        try:
            scale = float(self.base) ** float(real_exponent)
        except OverflowError:
            scale = math.inf
        return float(self.significand.number) * scale


def _parse_integer_part(number: ParsedNumber, text: str, pos: int) -> int:
    end = len(text)
    if pos == end:
        return pos
    integer_begin = pos
    if text[pos] == "0":
        pos += 1
        if pos < end:
            if text[pos] in "Xx":
                pos += 1
                integer_begin = pos
                number.base = 16
                number.representable_digits = representable_digits(_INT.digits, 16)
            elif text[pos] in "Bb":
                pos += 1
                integer_begin = pos
                number.base = 2
                number.representable_digits = representable_digits(_INT.digits, 2)

    _, pos = _skip_leading_zeros(text, pos)
    pos = _parse_digits(number.significand, text, pos, number.base, number.representable_digits, _INT)
    number.implicit_exponent, pos = _skip_digits(text, pos, number.base)
    number.has_integer_digits = integer_begin != pos
    return pos


def _parse_fractional_part(number: ParsedNumber, text: str, pos: int) -> int:
    if pos == len(text) or text[pos] != ".":
        return pos
    pos += 1
    number.has_decimal_point = True
    fractional_begin = pos
    integer_digits = number.significand.significant_digits_parsed
    if integer_digits == 0:
        zeros, pos = _skip_leading_zeros(text, pos)
        number.implicit_exponent -= zeros
    pos = _parse_digits(number.significand, text, pos, number.base, number.representable_digits, _INT)
    _, pos = _skip_digits(text, pos, number.base)
    number.has_fractional_digits = fractional_begin != pos
    number.implicit_exponent -= number.significand.significant_digits_parsed - integer_digits
    return pos


def _parse_exponent_part(number: ParsedNumber, text: str, pos: int) -> int:
    exponent_char = ord("e") if number.base == 10 else ord("p")
    if pos == len(text) or (ord(text[pos]) | 32) != exponent_char:
        return pos
    pos += 1
    number.has_exponent = True
    sign, pos = parse_integer_sign(text, pos)
    _, pos = _skip_leading_zeros(text, pos)
    pos = _parse_digits(number.exponent, text, pos, number.base, number.representable_digits, _INT)
    number.exponent.number *= sign
    if number.exponent.significant_digits_parsed == 0:
        raise NumberError(NumberErrorKind.MISSING_EXPONENT_DIGITS, number, pos)
    return pos


def parse_number(text: str, pos: int = 0) -> tuple[ParsedNumber, int]:
    """Parse a numeric literal (decimal, ``0x`` hex or ``0b`` binary); return ``(number, pos)``."""
    if pos >= len(text):
        raise NumberError(NumberErrorKind.NO_INPUT, None, pos)
    number = ParsedNumber()
    pos = _parse_integer_part(number, text, pos)
    pos = _parse_fractional_part(number, text, pos)
    pos = _parse_exponent_part(number, text, pos)
    return number, pos