"""
Test fixtures and helpers for the zscii codec tests.

The reference vector is "Hello, world.\\n" encoded with the default Version 5
tables, as Z-characters and as packed bytes.
"""

import pytest
import sys
from pathlib import Path
from typing import List

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from zscii import Codec, DEFAULT_ALPHABET, DEFAULT_EXTRA_CHARACTERS


HELLO_TEXT = "Hello, world.\n"

HELLO_ZCHARS = [
    0x04, 0x0D, 0x0A, 0x11, 0x11, 0x14, 0x05, 0x13, 0x00,
    0x1C, 0x14, 0x17, 0x11, 0x09, 0x05, 0x12, 0x05, 0x07,
]

HELLO_PACKED = bytes([
    0x11, 0xAA, 0x46, 0x34, 0x16, 0x60,
    0x72, 0x97, 0x45, 0x25, 0xC8, 0xA7,
])


def words_of(data: bytes) -> List[int]:
    """Split packed bytes into 16-bit big-endian words."""
    return [int.from_bytes(data[i:i + 2], 'big') for i in range(0, len(data), 2)]


def representable_characters() -> List[str]:
    """Every Unicode character the default dialect can round-trip."""
    ascii_range = [chr(c) for c in range(0x20, 0x7F)]
    return ascii_range + ["\n", "\x00", "\x7f", "\x1b"] + list(DEFAULT_EXTRA_CHARACTERS)


@pytest.fixture
def codec():
    """Fixture for a default Version 5 codec."""
    return Codec()


@pytest.fixture
def alphabet_chars():
    """Fixture for a mutable copy of the default alphabet."""
    return list(DEFAULT_ALPHABET)
