"""
Z-machine shift alphabets.

Z-chars 6-31 select a character from one of three 26-entry alphabets.
A0 is in effect by default; Z-char 4 shifts to A1 and Z-char 5 shifts to A2
for the next character only (Version 3 and later never lock a shift).

Slot 0 of A2 is not a character at all: Z-chars 5, 6 introduce a 10-bit
ZSCII escape, so the table holds NUL there.
"""

from enum import IntEnum
from types import MappingProxyType
from typing import Iterable, Iterator, List, Mapping, Tuple

from .errors import InvalidAlphabetTable


class Alphabet(IntEnum):
    """Shift alphabets, numbered as in the Z-machine standard."""
    A0 = 0  # lowercase
    A1 = 1  # uppercase
    A2 = 2  # punctuation and digits


ALPHABET_SIZE = 26
TABLE_SIZE = 3 * ALPHABET_SIZE

# Z-char values with fixed meanings
ZCHAR_SPACE = 0
ZCHAR_SHIFT_A1 = 4
ZCHAR_SHIFT_A2 = 5
ZCHAR_FIRST_PRINTABLE = 6
ZCHAR_ESCAPE = 6  # only after a shift to A2

# Entries must fit the 10-bit escape
MAX_ZSCII = 1023

# Absolute index of A2 slot 0, the escape marker
ESCAPE_SLOT = 2 * ALPHABET_SIZE

# Entries are ZSCII characters; all of these coincide with ASCII
ALPHABET_A0 = "abcdefghijklmnopqrstuvwxyz"
ALPHABET_A1 = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ALPHABET_A2 = "\x00\x0d0123456789.,!?_#'\"/\\-:()"

DEFAULT_ALPHABET: Tuple[str, ...] = tuple(ALPHABET_A0 + ALPHABET_A1 + ALPHABET_A2)


class AlphabetTable:
    """The 78 characters reachable through single Z-chars and shifts."""

    def __init__(self, characters: Iterable[str] = DEFAULT_ALPHABET, strict: bool = False):
        """
        Build and validate an alphabet table.

        Args:
            characters: 78 one-character strings, A0 then A1 then A2
            strict: If True, a non-NUL escape slot is an error rather than a warning

        Raises:
            InvalidAlphabetTable: wrong length, bad or non-ZSCII entry, or (strict) bad escape slot
        """
        chars = tuple(characters)
        if len(chars) != TABLE_SIZE:
            raise InvalidAlphabetTable(
                f"alphabet table was not {TABLE_SIZE} entries long ({len(chars)})"
            )
        for i, ch in enumerate(chars):
            if not isinstance(ch, str) or len(ch) != 1:
                raise InvalidAlphabetTable(f"alphabet entry {i} is not a single character: {ch!r}")
            if ord(ch) > MAX_ZSCII:
                raise InvalidAlphabetTable(
                    f"alphabet entry {i} is not a ZSCII character: U+{ord(ch):04X}"
                )

        self._chars = chars
        warnings: List[str] = []

        if chars[ESCAPE_SLOT] != "\x00":
            message = (f"alphabet character {ESCAPE_SLOT} not set to 0x000, "
                       f"{ord(chars[ESCAPE_SLOT]):#05x}")
            if strict:
                raise InvalidAlphabetTable(message)
            warnings.append(f"ZA0052: {message}")
        self._warnings = tuple(warnings)

        self._shortcuts = MappingProxyType(self._derive(chars))

    @staticmethod
    def _derive(chars: Tuple[str, ...]) -> dict:
        shortcut = {ord(" "): (ZCHAR_SPACE,)}

        for alphabet in Alphabet:
            offset = alphabet * ALPHABET_SIZE
            prefix = (ZCHAR_SHIFT_A1 + alphabet - 1,) if alphabet else ()  # 4 for A1, 5 for A2

            for slot in range(ALPHABET_SIZE):
                if alphabet == Alphabet.A2 and slot == 0:
                    continue  # escape marker
                # Keep the first, and therefore shortest, encoding
                shortcut.setdefault(ord(chars[offset + slot]),
                                    prefix + (ZCHAR_FIRST_PRINTABLE + slot,))

        return shortcut

    def lookup(self, alphabet: int, slot: int) -> str:
        """Return the character in `slot` (0-25) of `alphabet` (0-2)."""
        if not 0 <= alphabet <= 2:
            raise IndexError(f"no such alphabet: {alphabet}")
        if not 0 <= slot < ALPHABET_SIZE:
            raise IndexError(f"no such alphabet slot: {slot}")
        return self._chars[alphabet * ALPHABET_SIZE + slot]

    @property
    def shortcuts(self) -> Mapping[int, Tuple[int, ...]]:
        """Read-only map from ZSCII codepoint to its shortest Z-char sequence."""
        return self._shortcuts

    def derive_shortcuts(self) -> Mapping[int, Tuple[int, ...]]:
        return self._shortcuts

    def get_warnings(self) -> List[str]:
        """Get all warnings recorded while building the table."""
        return list(self._warnings)

    def __len__(self) -> int:
        return len(self._chars)

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    def __eq__(self, other) -> bool:
        if not isinstance(other, AlphabetTable):
            return NotImplemented
        return self._chars == other._chars

    def __hash__(self) -> int:
        return hash(self._chars)
