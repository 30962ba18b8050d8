import pytest

from teslkit.parse import (
    EscapeError,
    EscapeErrorKind,
    NumberError,
    NumberErrorKind,
    add_avoid_overflow,
    char_to_number,
    find_line_end,
    find_next_line,
    find_valid_id_end,
    is_alpha,
    is_digit,
    is_hex_digit,
    is_octal_digit,
    is_valid_id_meat,
    is_valid_id_starter,
    parse_character_escape,
    parse_integer,
    parse_integer_sign,
    parse_number,
    representable_digits,
    sub_avoid_overflow,
)


@pytest.mark.parametrize("c", list("0123456789"))
def test_digits(c):
    assert is_digit(c)
    assert is_hex_digit(c)
    assert char_to_number(c) == int(c)


@pytest.mark.parametrize("c", ["a", "/", ":", " ", "\u0660"])
def test_not_digits(c):
    assert not is_digit(c)


def test_octal_digits():
    assert is_octal_digit("7")
    assert not is_octal_digit("8")


@pytest.mark.parametrize("c,expected", [("a", True), ("F", True), ("g", False), ("`", False), ("@", False)])
def test_hex_digit(c, expected):
    assert is_hex_digit(c) is expected


@pytest.mark.parametrize("c,expected", [("a", True), ("Z", True), ("[", False), ("{", False), ("_", False)])
def test_alpha(c, expected):
    assert is_alpha(c) is expected


def test_identifier_classes():
    assert is_valid_id_starter("_")
    assert not is_valid_id_starter("1")
    assert is_valid_id_meat("1")
    assert not is_valid_id_meat("-")


def test_find_valid_id_end():
    text = "foo_bar1 = 2"
    assert find_valid_id_end(text, 0) == text.index(" ")
    assert find_valid_id_end("abc") == 3


def test_char_to_number_table():
    assert char_to_number("z") == 35
    assert char_to_number("Z") == 35
    assert char_to_number("$") == 255
    assert char_to_number("\u00e9") == 255


def test_find_line_end_and_next_line():
    text = "one\r\ntwo\nthree"
    assert find_line_end(text, 0) == text.index("\r")
    assert find_next_line(text, 0) == text.index("t")
    second = find_next_line(text, 0)
    assert find_next_line(text, second) == text.index("three")
    assert find_next_line(text, text.index("three")) == len(text)
    assert find_line_end("plain") == len("plain")


def test_lone_carriage_return_is_a_line_break():
    assert find_next_line("a\rb", 0) == 2


def test_representable_digits():
    assert representable_digits(63, 10) == 18
    assert representable_digits(32, 16) == 8
    assert representable_digits(63, 2) == 63
    with pytest.raises(ValueError):
        representable_digits(63, 7)


def test_add_sub_avoid_overflow():
    big = 2**63 - 1
    assert add_avoid_overflow(big, 1) is None
    assert add_avoid_overflow(-(2**63), -1) is None
    assert add_avoid_overflow(5, -3) == 5 - 3
    assert sub_avoid_overflow(-(2**63), 1) is None
    assert sub_avoid_overflow(big, -1) is None
    assert sub_avoid_overflow(5, 3) == 5 - 3
    assert add_avoid_overflow(127, 1, 8) is None
    assert add_avoid_overflow(126, 1, 8) == 127


def test_parse_integer_sign():
    assert parse_integer_sign("-5", 0) == (-1, 1)
    assert parse_integer_sign("+5", 0) == (1, 1)
    assert parse_integer_sign("5", 0) == (1, 0)
    assert parse_integer_sign("", 0) == (1, 0)


def test_parse_integer_basic():
    text = "00123abc"
    result, pos = parse_integer(text, 0, 10)
    assert result.number == 123
    assert result.leading_zeros_parsed == 2
    assert result.significant_digits_parsed == 3
    assert not result.would_overflow
    assert pos == text.index("a")


def test_parse_integer_hex():
    result, pos = parse_integer("ff", 0, 16)
    assert result.number == 0xFF
    assert pos == 2


def test_parse_integer_overflow_accounts_for_every_digit():
    text = "9" * 30
    result, pos = parse_integer(text, 0, 10)
    assert result.would_overflow
    assert pos == len(text)
    total = result.leading_zeros_parsed + result.significant_digits_parsed + result.extra_digits_parsed
    assert total == len(text)


@pytest.mark.parametrize("letter,expected", [("n", "\n"), ("t", "\t"), ("e", "\x1b"), ("\\", "\\"), ("'", "'")])
def test_simple_escapes(letter, expected):
    code, pos = parse_character_escape(letter, 0)
    assert code == ord(expected)
    assert pos == 0


def test_hex_escape():
    code, pos = parse_character_escape("x41!", 0)
    assert code == 0x41
    assert pos == 3


def test_unicode_escapes():
    assert parse_character_escape("u00e9", 0) == (0xE9, 5)
    assert parse_character_escape("U0001F600", 0) == (0x1F600, 9)


def test_octal_escape():
    code, pos = parse_character_escape("101", 0)
    assert code == 0o101
    assert pos == 3


def test_incomplete_unicode_escape():
    with pytest.raises(EscapeError) as info:
        parse_character_escape("u12", 0)
    assert info.value.kind is EscapeErrorKind.INCOMPLETE_ESCAPE
    assert info.value.value == 0x12


def test_incomplete_hex_escape():
    with pytest.raises(EscapeError) as info:
        parse_character_escape("xg", 0)
    assert info.value.kind is EscapeErrorKind.INCOMPLETE_ESCAPE


def test_hex_escape_out_of_range():
    with pytest.raises(EscapeError) as info:
        parse_character_escape("x" + "f" * 12, 0)
    assert info.value.kind is EscapeErrorKind.OUT_OF_RANGE


def test_unknown_and_empty_escape():
    with pytest.raises(EscapeError) as info:
        parse_character_escape("q", 0)
    assert info.value.kind is EscapeErrorKind.UNKNOWN_ESCAPE
    assert info.value.pos == 1
    with pytest.raises(EscapeError) as info:
        parse_character_escape("", 0)
    assert info.value.kind is EscapeErrorKind.NO_INPUT


def test_parse_decimal_with_fraction():
    number, pos = parse_number("1.5")
    assert number.has_decimal_point
    assert number.has_integer_digits
    assert number.has_fractional_digits
    assert number.get_float() == 1.5
    assert pos == 3


def test_parse_leading_zero_fraction():
    number, _ = parse_number("0.05")
    assert number.get_float() == pytest.approx(0.05)


def test_parse_integer_literal():
    number, pos = parse_number("42;")
    assert number.get_int() == 42
    assert not number.has_decimal_point
    assert pos == 2


def test_parse_hex_and_binary():
    number, _ = parse_number("0x1F")
    assert number.base == 16
    assert number.get_int() == 0x1F
    number, _ = parse_number("0b101")
    assert number.base == 2
    assert number.get_int() == 0b101


def test_parse_zero_and_bare_prefix():
    number, pos = parse_number("0")
    assert number.has_integer_digits
    assert number.get_int() == 0
    assert pos == 1
    number, _ = parse_number("0x")
    assert not number.has_integer_digits


def test_parse_exponent():
    number, pos = parse_number("12e3")
    assert number.has_exponent
    assert number.get_float() == 12e3
    assert pos == 4
    number, _ = parse_number("25e-2")
    assert number.get_float() == pytest.approx(25e-2)


def test_int_too_big():
    number, _ = parse_number("9" * 25)
    assert number.is_int_too_big()
    small, _ = parse_number("123")
    assert not small.is_int_too_big()


def test_number_errors():
    with pytest.raises(NumberError) as info:
        parse_number("")
    assert info.value.kind is NumberErrorKind.NO_INPUT
    with pytest.raises(NumberError) as info:
        parse_number("1e")
    assert info.value.kind is NumberErrorKind.MISSING_EXPONENT_DIGITS
    assert info.value.parsed.get_int() == 1


def test_parse_number_from_offset():
    text = "x = 7.25"
    number, pos = parse_number(text, text.index("7"))
    assert number.get_float() == 7.25
    assert pos == len(text)