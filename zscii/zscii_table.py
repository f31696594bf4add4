"""
ZSCII <-> Unicode translation.

ZSCII codepoints 0x20-0x7E are identical to ASCII. A handful of control
codes have fixed meanings, and codepoints from 155 upward are the "extra
characters", whose Unicode values come from a translation table that story
files may replace. Everything else is undefined.
"""

import unicodedata
from types import MappingProxyType
from typing import Dict, ItemsView, Iterable, Mapping, Tuple

from .errors import (AmbiguousMapping, InvalidExtraCharacters,
                     UnmappableUnicodeChar, UnmappableZsciiChar)


ZSCII_NULL = 0x00
ZSCII_DELETE = 0x08
ZSCII_NEWLINE = 0x0D
ZSCII_ESCAPE = 0x1B

EXTRA_CHARACTERS_START = 155
MAX_EXTRA_CHARACTERS = 96  # 155-250

BASE_ZSCII: Mapping[int, str] = MappingProxyType({
    ZSCII_NULL: "\x00",
    ZSCII_DELETE: "\x7f",
    ZSCII_NEWLINE: "\x0d",
    ZSCII_ESCAPE: "\x1b",
    **{code: chr(code) for code in range(0x20, 0x7F)},
})

# Standard Unicode translation table (Z-machine standard 1.1, table 1).
# Index 0 is ZSCII 155.
DEFAULT_EXTRA_CHARACTERS: Tuple[str, ...] = tuple(chr(code) for code in (
    0xE4, 0xF6, 0xFC, 0xC4, 0xD6, 0xDC, 0xDF, 0xBB,   # 155-162
    0xAB, 0xEB, 0xEF, 0xFF, 0xCB, 0xCF, 0xE1, 0xE9,   # 163-170
    0xED, 0xF3, 0xFA, 0xFD, 0xC1, 0xC9, 0xCD, 0xD3,   # 171-178
    0xDA, 0xDD, 0xE0, 0xE8, 0xEC, 0xF2, 0xF9, 0xC0,   # 179-186
    0xC8, 0xCC, 0xD2, 0xD9,                           # 187-190
    0xE2, 0xEA, 0xEE, 0xF4, 0xFB, 0xC2, 0xCA, 0xCE,   # 191-198
    0xD4, 0xDB, 0xE5, 0xC5, 0xF8, 0xD8, 0xE3, 0xF1,   # 199-206
    0xF5, 0xC3, 0xD1, 0xD5, 0xE6, 0xC6, 0xE7, 0xC7,   # 207-214
    0xFE, 0xF0, 0xDE, 0xD0, 0xA3, 0x153, 0x152, 0xA1,  # 215-222
    0xBF,                                             # 223
))


class ZsciiTable:
    """Bidirectional, one-to-one map between ZSCII and Unicode."""

    def __init__(self, extra_characters: Iterable[str] = DEFAULT_EXTRA_CHARACTERS):
        extra = tuple(extra_characters)
        if len(extra) > MAX_EXTRA_CHARACTERS:
            raise InvalidExtraCharacters(
                f"extra characters table has {len(extra)} entries, "
                f"at most {MAX_EXTRA_CHARACTERS} fit"
            )

        zscii: Dict[int, str] = dict(BASE_ZSCII)
        for i, char in enumerate(extra):
            if not isinstance(char, str) or len(char) != 1:
                raise InvalidExtraCharacters(
                    f"extra character {i} is not a single character: {char!r}"
                )
            code = EXTRA_CHARACTERS_START + i
            if code in zscii:
                raise AmbiguousMapping(code, char, "Z->U")
            zscii[code] = char

        zscii_for: Dict[str, int] = {}
        for code in sorted(zscii):
            char = zscii[code]
            if char in zscii_for:
                raise AmbiguousMapping(code, char, "U->Z")
            zscii_for[char] = code

        self.extra_characters = extra
        self._unicode = MappingProxyType(zscii)
        self._zscii = MappingProxyType(zscii_for)

    def to_unicode(self, zscii: int) -> str:
        """Translate one ZSCII codepoint to a Unicode character."""
        try:
            return self._unicode[zscii]
        except KeyError:
            raise UnmappableZsciiChar(zscii) from None

    def to_zscii(self, char: str) -> int:
        """Translate one Unicode character to a ZSCII codepoint."""
        try:
            return self._zscii[char]
        except KeyError:
            raise UnmappableUnicodeChar(ord(char), unicodedata.name(char, None)) from None

    def items(self) -> ItemsView[int, str]:
        return self._unicode.items()

    def __contains__(self, zscii: int) -> bool:
        return zscii in self._unicode

    def __len__(self) -> int:
        return len(self._unicode)
