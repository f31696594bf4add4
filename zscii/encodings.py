"""
Python codec registration for packed Z-machine text.

Call register() once to make the default Version 5 codec available to
codecs.lookup(), str.encode() and bytes.decode():

    >>> zscii.encodings.register()
    >>> "Hello".encode("zscii")

Packed text carries an end-of-string bit on its last word, so there are no
incremental encoders or decoders; each call handles one whole string.
"""

import codecs
from typing import Optional, Tuple

from .codec import Codec as ZsciiCodec

NAME = 'zscii'

_registered = False


def _check_errors(errors: str):
    if errors != 'strict':
        raise ValueError(f"zscii codec supports only errors='strict', not {errors!r}")


class Codec(codecs.Codec):

    codec = ZsciiCodec()

    def encode(self, input, errors='strict') -> Tuple[bytes, int]:
        _check_errors(errors)
        return self.codec.encode(str(input)), len(input)

    def decode(self, input, errors='strict') -> Tuple[str, int]:
        _check_errors(errors)
        data = bytes(input)
        return self.codec.decode(data), len(data)


class StreamWriter(Codec, codecs.StreamWriter):
    pass


class StreamReader(Codec, codecs.StreamReader):
    pass


def getregentry() -> codecs.CodecInfo:
    codec = Codec()
    return codecs.CodecInfo(
        name=NAME,
        encode=codec.encode,
        decode=codec.decode,
        streamreader=StreamReader,
        streamwriter=StreamWriter,
    )


def getaliases():
    return ['zscii_v5', 'zmachine']


def _search_function(encoding: str) -> Optional[codecs.CodecInfo]:
    """Codec search function registered with codecs.register()."""
    normalized = encoding.lower().replace('-', '_')
    if normalized == NAME or normalized in getaliases():
        return getregentry()
    return None


def register():
    """Register the zscii codec with Python's codecs module (idempotent)."""
    global _registered
    if not _registered:
        codecs.register(_search_function)
        _registered = True
