"""
zscii - Z-machine text codec.

Converts between Unicode text, ZSCII, Z-characters and packed Z-character
strings as stored in Version 5 Z-machine story files.
"""

__version__ = "0.1.0"
__author__ = "zscii project"

from .alphabet import Alphabet, AlphabetTable, DEFAULT_ALPHABET
from .zscii_table import ZsciiTable, DEFAULT_EXTRA_CHARACTERS
from .codec import (Codec, CodecConfig, CodecResult, encode, decode,
                    words_to_bytes, bytes_to_words)
from .errors import *

__all__ = [
    'Alphabet', 'AlphabetTable', 'DEFAULT_ALPHABET',
    'ZsciiTable', 'DEFAULT_EXTRA_CHARACTERS',
    'Codec', 'CodecConfig', 'CodecResult', 'encode', 'decode',
    'words_to_bytes', 'bytes_to_words',
    'ZsciiError', 'UnsupportedVersion', 'InvalidAlphabetTable',
    'InvalidExtraCharacters', 'AmbiguousMapping', 'UnmappableUnicodeChar',
    'UnmappableZsciiChar', 'ZsciiCodepointOutOfRange', 'UnknownZchar',
    'InvalidZchar', 'TruncatedInput', 'TruncatedEscape', 'OddLengthInput',
    'TrailingDataAfterTerminator',
]
