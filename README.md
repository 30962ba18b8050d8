# teslkit

Pure-Python building blocks for small language front ends and runtimes. It has
no dependencies outside the standard library.

- `teslkit.parse`: character classes, line scanning, C-style character escapes
  and numeric literals (decimal, `0x` hex, `0b` binary, with fractions and
  exponents). Overflow is tracked the way a fixed-width signed integer would
  track it (64 bits by default).
- `teslkit.codec`: the shared pieces of the Unicode codecs. These are the
  `CodecError` and `CheckMode` flags, the `UnicodeCodecError` exception and the
  surrogate and code point tests.
- `teslkit.utf8`, `teslkit.utf16`, `teslkit.utf32`: encoders and decoders that
  work one code point at a time and can step forwards (`decode_next`) or
  backwards (`decode_prev`) through a buffer.
- `teslkit.symbol`, `teslkit.symbol_table`: integer-indexed symbols, with
  flat and layered tables of values addressed by them.
- `teslkit.wyhash`: the wyhash 64-bit hash, the `WyRand` generator, the
  mapping helpers `wy2u01`, `wy2gau` and `wy2u0k`, a deterministic 64-bit
  primality test and `make_secret`.

## Installation

```
pip install teslkit
```

## Parsing

Every parser takes a string and a start position. It returns its result
together with the position just past what it consumed.

```python
from teslkit.parse import parse_number, parse_character_escape, find_next_line

number, end = parse_number("0x1F", 0)
number.get_int()          # 31
number.base               # 16

number, end = parse_number("1.5e3", 0)
number.get_float()        # 1500.0
number.is_int_too_big()   # False

parse_character_escape("x41", 0)   # (0x41, 3)
parse_character_escape("n", 0)     # (10, 0): single-letter escapes leave pos on the letter

find_next_line("a\r\nb", 0)        # 3
```

`parse_number` raises `NumberError` when there is no input, or when an
exponent marker has no digits after it. The `kind` attribute of the error is a
`NumberErrorKind`. `parse_character_escape` raises `EscapeError`, whose `kind`
is an `EscapeErrorKind`: no input, out of range, incomplete escape or unknown
escape. `parse_integer(text, pos, base, bits)` returns a `ParsedInteger`. It
counts leading zeros, significant digits and any digits that did not fit, and
sets `would_overflow` when digits did not fit.

## Unicode codecs

```python
from teslkit import utf8, utf16, utf32
from teslkit.codec import CheckMode, UnicodeCodecError

cp, pos = utf8.decode_next("é".encode(), 0, CheckMode.NORMAL)   # (0xE9, 2)
cp, start = utf8.decode_prev("aé".encode())                      # (0xE9, 1)
utf8.encode(0x1F600)                                             # b"\xf0\x9f\x98\x80"

data = utf16.encode(0x1F600, "little")
utf16.decode_next(data, 0, "little")                             # (0x1F600, 4)
utf32.encode(0x41, "big")                                        # b"\x00\x00\x00A"
```

Errors raise `UnicodeCodecError`, which has these attributes:

- `error`: the `CodecError` flags.
- `codepoint`: the replacement character on decode failures, or the rejected
  code point on encode failures.
- `pos`: the position reached.
- `output`: what an encoder would write instead, which is the encoded
  replacement character.

When `CheckMode.VALIDITY` is set, malformed, overlong, surrogate or
out-of-range input is rejected. Without it, any 32-bit value can be encoded,
and UTF-8 uses up to six bytes. Truncated input always raises. The UTF-16
and UTF-32 functions take `"little"`, `"big"` or `"native"` as the byte
order, and default to the machine's order.

## Symbols and symbol tables

```python
from teslkit.symbol import GlobalSymbol
from teslkit.symbol_table import FlatSymbolTable, LayeredSymbolTable

names = FlatSymbolTable()
sym = names.push_back("main")    # GlobalSymbol(index=0)
names.get(sym)                   # "main"

values = LayeredSymbolTable()
values.insert(GlobalSymbol(5), "value")          # LocalSymbol(index=0)
values.get(GlobalSymbol(5))                      # "value"
values.get_local_symbol(GlobalSymbol(2)).is_valid()  # False
```

A symbol created without an index is invalid. The invalid index is
`0xFFFFFFFF`. `push_back` raises `SymbolTableFullError` once a table is full.

## Hashing and random numbers

```python
from teslkit.wyhash import wyhash, make_secret, WyRand, wy2u01

wyhash(b"hello", 0)
wyhash(b"hello", 0, make_secret(1))

rng = WyRand(42)
wy2u01(rng.next())       # float in [0, 1)
```

Multi-byte reads are little-endian, so hashes are the same on every platform.

## What it does not do

teslkit is a library only. It installs no command, and it does not contain a
lexer, parser or interpreter for any language. It supplies the pieces such a
program would be built from. The symbol tables keep their contents in memory
and provide no storage.

## Running the tests

```
pip install -e .[test]
pytest
```