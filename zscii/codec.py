"""
Z-machine text codec.

Converts between the four forms Z-machine text takes:

- Unicode text (str)
- ZSCII text (list of ZSCII codepoints)
- Z-characters (list of 5-bit values)
- packed Z-characters (bytes, three Z-chars per 16-bit big-endian word,
  top bit set on the last word)
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

from .alphabet import (Alphabet, AlphabetTable, DEFAULT_ALPHABET, MAX_ZSCII, ZCHAR_ESCAPE,
                       ZCHAR_FIRST_PRINTABLE, ZCHAR_SHIFT_A1, ZCHAR_SHIFT_A2, ZCHAR_SPACE)
from .errors import (InvalidZchar, OddLengthInput, TrailingDataAfterTerminator,
                     TruncatedEscape, TruncatedInput, UnknownZchar,
                     UnsupportedVersion, ZsciiCodepointOutOfRange, ZsciiError)
from .zscii_table import DEFAULT_EXTRA_CHARACTERS, ZsciiTable


SUPPORTED_VERSIONS = (5,)

PAD_ZCHAR = ZCHAR_SHIFT_A2
END_OF_STRING = 0x8000


@dataclass(frozen=True)
class CodecConfig:
    """Construction options for a Codec."""
    version: int = 5
    alphabet: Optional[Sequence[str]] = None  # 78 entries; None for the default
    extra_characters: Optional[Sequence[str]] = None  # ZSCII 155 onward
    strict_alphabet: bool = False  # treat a bad escape slot as an error


@dataclass
class CodecResult:
    """Outcome of try_encode/try_decode: a value or the error that stopped it."""
    value: Any = None
    error: Optional[ZsciiError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Codec:
    """Encoder/decoder for Version 5 Z-machine text."""

    def __init__(self, config: Optional[CodecConfig] = None, **options):
        """
        Create a codec.

        Args:
            config: A CodecConfig; if omitted one is built from `options`
            **options: CodecConfig fields, e.g. Codec(version=5)

        Raises:
            UnsupportedVersion: version is not 5
            InvalidAlphabetTable, InvalidExtraCharacters, AmbiguousMapping:
                a supplied table is unusable
        """
        if config is None:
            config = CodecConfig(**options)
        elif options:
            raise TypeError("pass either a CodecConfig or keyword options, not both")

        if config.version not in SUPPORTED_VERSIONS:
            raise UnsupportedVersion(config.version)

        self.config = config
        self.version = config.version
        self.alphabet = AlphabetTable(
            DEFAULT_ALPHABET if config.alphabet is None else config.alphabet,
            strict=config.strict_alphabet,
        )
        self.zscii = ZsciiTable(
            DEFAULT_EXTRA_CHARACTERS if config.extra_characters is None
            else config.extra_characters
        )

    def get_warnings(self) -> List[str]:
        """Get the non-fatal problems found in the codec's tables."""
        return self.alphabet.get_warnings()

    def encode(self, text: str) -> bytes:
        """
        Encode Unicode text to packed Z-characters.

        Native newlines ("\\n") become ZSCII newline (0x0D) first.
        """
        zscii = self.unicode_to_zscii(text.replace("\n", "\r"))
        zchars = self.zscii_to_zchars(zscii)
        return self.pack_zchars(zchars)

    def decode(self, data: bytes) -> str:
        """
        Decode packed Z-characters to Unicode text.

        ZSCII newline (0x0D) comes back as "\\n". Z-char 5s padding out the
        final word are ignored.
        """
        zchars = self.unpack_zchars(data)
        zscii = self.zchars_to_zscii(zchars, padded=True)
        return self.zscii_to_unicode(zscii).replace("\r", "\n")

    def try_encode(self, text: str) -> CodecResult:
        """Like encode(), but report failure in the result instead of raising."""
        try:
            return CodecResult(value=self.encode(text))
        except ZsciiError as e:
            return CodecResult(error=e)

    def try_decode(self, data: bytes) -> CodecResult:
        """Like decode(), but report failure in the result instead of raising."""
        try:
            return CodecResult(value=self.decode(data))
        except ZsciiError as e:
            return CodecResult(error=e)

    def unicode_to_zscii(self, text: str) -> List[int]:
        """Convert Unicode text to ZSCII codepoints in this codec's dialect."""
        return [self.zscii.to_zscii(ch) for ch in text]

    def zscii_to_unicode(self, zscii: Sequence[int]) -> str:
        """Convert ZSCII codepoints to Unicode text in this codec's dialect."""
        return ''.join(self.zscii.to_unicode(code) for code in zscii)

    def zscii_to_zchars(self, zscii: Sequence[int]) -> List[int]:
        """
        Convert ZSCII codepoints to (unpacked) Z-characters.

        Characters in the alphabet table take one Z-char (A0) or a shift and
        one Z-char (A1, A2). Anything else uses the four Z-char escape:
        shift to A2, escape, then the top and bottom five bits.
        """
        shortcuts = self.alphabet.shortcuts
        zchars: List[int] = []

        for code in zscii:
            shortcut = shortcuts.get(code)
            if shortcut is not None:
                zchars.extend(shortcut)
                continue

            if not 0 <= code <= MAX_ZSCII:
                raise ZsciiCodepointOutOfRange(code)

            zchars.extend((ZCHAR_SHIFT_A2, ZCHAR_ESCAPE, (code >> 5) & 0x1F, code & 0x1F))

        return zchars

    def zchars_to_zscii(self, zchars: Sequence[int], padded: bool = False) -> List[int]:
        """
        Convert (unpacked) Z-characters to ZSCII codepoints.

        Shifts apply to the next character only. With `padded`, one or two
        Z-char 5s left pending at the end are taken as the padding that
        pack_zchars adds, rather than as truncation. A trailing Z-char 4 is
        never padding.

        Raises:
            UnknownZchar: abbreviation codes (1-3) or values above 31
            TruncatedEscape: a 10-bit escape lacks its two data Z-chars
            TruncatedInput: the stream ends after a shift
        """
        zscii: List[int] = []
        alphabet = Alphabet.A0
        pending_shifts: List[int] = []
        i = 0

        while i < len(zchars):
            zc = zchars[i]
            i += 1

            if zc == ZCHAR_SHIFT_A1:
                alphabet = Alphabet.A1
                pending_shifts.append(zc)
                continue
            if zc == ZCHAR_SHIFT_A2:
                alphabet = Alphabet.A2
                pending_shifts.append(zc)
                continue
            pending_shifts.clear()

            if zc == ZCHAR_SPACE:
                zscii.append(ord(" "))
            elif zc == ZCHAR_ESCAPE and alphabet == Alphabet.A2:
                if len(zchars) - i < 2:
                    raise TruncatedEscape(len(zchars) - i)
                high, low = zchars[i], zchars[i + 1]
                i += 2
                zscii.append((high << 5) | low)
            elif ZCHAR_FIRST_PRINTABLE <= zc <= 0x1F:
                zscii.append(ord(self.alphabet.lookup(alphabet, zc - ZCHAR_FIRST_PRINTABLE)))
            else:
                raise UnknownZchar(zc, alphabet)

            alphabet = Alphabet.A0

        if alphabet != Alphabet.A0 and not (padded and _is_padding(pending_shifts)):
            raise TruncatedInput(alphabet)

        return zscii

    def pack_words(self, zchars: Sequence[int]) -> List[int]:
        """
        Pack Z-characters three to a 16-bit word.

        The last group is padded with Z-char 5 and the last word gets the
        end-of-string bit. No Z-chars, no words.
        """
        for zc in zchars:
            if not (isinstance(zc, int) and 0 <= zc <= 0x1F):
                raise InvalidZchar(zc)

        words = []
        for i in range(0, len(zchars), 3):
            group = list(zchars[i:i + 3])
            while len(group) < 3:
                group.append(PAD_ZCHAR)

            # Pack: bit 15 = end marker, bits 14-10 = z0, bits 9-5 = z1, bits 4-0 = z2
            word = (group[0] << 10) | (group[1] << 5) | group[2]

            if i + 3 >= len(zchars):
                word |= END_OF_STRING

            words.append(word)

        return words

    def pack_zchars(self, zchars: Sequence[int]) -> bytes:
        """Pack Z-characters into a bytestring; see pack_words()."""
        return words_to_bytes(self.pack_words(zchars))

    def unpack_zchars(self, data: bytes) -> List[int]:
        """
        Unpack a bytestring of packed Z-characters.

        Raises:
            OddLengthInput: the bytestring is not whole words
            TrailingDataAfterTerminator: words follow the end-of-string word
        """
        if len(data) % 2:
            raise OddLengthInput(len(data))

        zchars: List[int] = []
        terminated = False
        for offset, word in enumerate(bytes_to_words(data)):
            if terminated:
                raise TrailingDataAfterTerminator(offset * 2)
            terminated = bool(word & END_OF_STRING)

            zchars.extend(((word >> 10) & 0x1F, (word >> 5) & 0x1F, word & 0x1F))

        return zchars


def _is_padding(zchars: Sequence[int]) -> bool:
    return len(zchars) <= 2 and all(zc == PAD_ZCHAR for zc in zchars)


def words_to_bytes(words: Sequence[int]) -> bytes:
    """Convert list of 16-bit words to bytes (big-endian)."""
    result = bytearray()
    for word in words:
        result.append((word >> 8) & 0xFF)
        result.append(word & 0xFF)
    return bytes(result)


def bytes_to_words(data: bytes) -> List[int]:
    """Convert bytes to a list of 16-bit big-endian words."""
    if len(data) % 2:
        raise OddLengthInput(len(data))
    return [(data[i] << 8) | data[i + 1] for i in range(0, len(data), 2)]


def encode(text: str, version: int = 5) -> bytes:
    """Convenience function to encode text with the default tables."""
    codec = Codec(version=version)
    return codec.encode(text)


def decode(data: bytes, version: int = 5) -> str:
    """Convenience function to decode packed text with the default tables."""
    codec = Codec(version=version)
    return codec.decode(data)
