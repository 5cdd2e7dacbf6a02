"""
Words Module - Secret word selection.

A WordSource supplies one secret word per game. Sources never fail:
when the backing list is missing or has no usable entries they return
FALLBACK_WORD so a game can always start.
"""

from .source import (
    FALLBACK_WORD,
    WordSource,
    StaticWordSource,
    FileWordSource,
    PackagedWordSource,
    FixedWordSource,
    load_word_source,
    parse_word_lines,
)

__all__ = [
    "FALLBACK_WORD",
    "WordSource",
    "StaticWordSource",
    "FileWordSource",
    "PackagedWordSource",
    "FixedWordSource",
    "load_word_source",
    "parse_word_lines",
]
