"""
Errors raised by the ZSCII codec.

Every error is a ValueError so callers that only care about bad input can
catch that; callers that care about the kind of failure can catch the
specific class and read its attributes.
"""

from typing import Optional

__all__ = [
    "ZsciiError", "UnsupportedVersion", "InvalidAlphabetTable",
    "InvalidExtraCharacters", "AmbiguousMapping", "UnmappableUnicodeChar",
    "UnmappableZsciiChar", "ZsciiCodepointOutOfRange", "UnknownZchar",
    "InvalidZchar", "TruncatedInput", "TruncatedEscape", "OddLengthInput",
    "TrailingDataAfterTerminator",
]


class ZsciiError(ValueError):
    """Base class for all codec failures."""


class UnsupportedVersion(ZsciiError):
    """A Z-machine version other than the supported one was requested."""

    def __init__(self, version):
        self.version = version
        super().__init__(f"only Version 5 ZSCII is supported, not {version!r}")


class InvalidAlphabetTable(ZsciiError):
    """The alphabet table is malformed."""


class InvalidExtraCharacters(ZsciiError):
    """The extra characters table is malformed."""


class AmbiguousMapping(ZsciiError):
    """A ZSCII codepoint or Unicode character was assigned twice."""

    def __init__(self, zscii: int, char: str, direction: str):
        self.zscii = zscii
        self.char = char
        super().__init__(
            f"tried to add ambiguous {direction} mapping: "
            f"ZSCII {zscii:#05x} <-> U+{ord(char):04X}"
        )


class UnmappableUnicodeChar(ZsciiError):
    """A Unicode character has no ZSCII equivalent."""

    def __init__(self, codepoint: int, name: Optional[str] = None):
        self.codepoint = codepoint
        self.name = name
        super().__init__(
            f"no ZSCII character available for Unicode U+{codepoint:04X} "
            f"<{name or 'unnamed'}>"
        )


class UnmappableZsciiChar(ZsciiError):
    """A ZSCII codepoint has no Unicode equivalent."""

    def __init__(self, codepoint: int):
        self.codepoint = codepoint
        super().__init__(f"no Unicode character available for ZSCII {codepoint:#05x}")


class ZsciiCodepointOutOfRange(ZsciiError):
    """A ZSCII codepoint does not fit in the 10-bit escape."""

    def __init__(self, codepoint: int):
        self.codepoint = codepoint
        super().__init__(f"can't encode ZSCII codepoint {codepoint:#05x} in Z-characters")


class UnknownZchar(ZsciiError):
    """A Z-character has no meaning in the current alphabet."""

    def __init__(self, value: int, alphabet: int):
        self.value = value
        self.alphabet = alphabet
        super().__init__(f"unknown zchar <{value}> encountered in alphabet <{int(alphabet)}>")


class InvalidZchar(ZsciiError):
    """A value outside 0-31 was given where a Z-character was expected."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"zchar {value!r} does not fit in five bits")


class TruncatedInput(ZsciiError):
    """The Z-character stream ended in the middle of a character."""

    def __init__(self, alphabet: int, message: Optional[str] = None):
        self.alphabet = alphabet
        super().__init__(
            message or f"Z-character string ends after a shift to alphabet <{int(alphabet)}>"
        )


class TruncatedEscape(TruncatedInput):
    """Fewer than two Z-characters followed a 10-bit escape."""

    def __init__(self, remaining: int):
        self.remaining = remaining
        super().__init__(
            2, f"ten-bit ZSCII encoding segment terminated early ({remaining} of 2 zchars)"
        )


class OddLengthInput(ZsciiError):
    """A packed buffer was not made of whole 16-bit words."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(
            f"bytestring of packed zchars is not an even number of bytes ({length})"
        )


class TrailingDataAfterTerminator(ZsciiError):
    """A packed buffer continued past its end-of-string word."""

    def __init__(self, offset: int):
        self.offset = offset
        super().__init__(f"input continues after terminating word (at byte {offset})")
