"""Lexing helpers, UTF-8/16/32 codecs, symbol tables and wyhash."""

__version__ = "0.1.0"

__all__ = ["codec", "parse", "symbol", "symbol_table", "utf8", "utf16", "utf32", "wyhash"]