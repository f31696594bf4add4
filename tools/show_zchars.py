#!/usr/bin/env python3
"""
Show every stage of Z-machine text encoding.
Given text, prints its ZSCII, Z-characters and packed words.
Given --hex, decodes a packed Z-character string back through each stage.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from zscii import Codec, bytes_to_words


def show_text(codec, text):
    """Print the forward pipeline for text."""
    zscii = codec.unicode_to_zscii(text.replace("\n", "\r"))
    zchars = codec.zscii_to_zchars(zscii)
    words = codec.pack_words(zchars)

    print(f"Text:    {text!r}")
    print(f"ZSCII:   {' '.join(f'{c:03d}' for c in zscii)}")
    print(f"Z-chars: {' '.join(f'{z:02X}' for z in zchars)}")
    print(f"Words:   {' '.join(f'{w:04X}' for w in words)}")
    print(f"Packed:  {len(words) * 2} bytes for {len(text)} characters")


def show_packed(codec, hex_string):
    """Print the reverse pipeline for a hex dump of packed text."""
    data = bytes.fromhex(hex_string)
    zchars = codec.unpack_zchars(data)
    zscii = codec.zchars_to_zscii(zchars, padded=True)

    print(f"Words:   {' '.join(f'{w:04X}' for w in bytes_to_words(data))}")
    print(f"Z-chars: {' '.join(f'{z:02X}' for z in zchars)}")
    print(f"ZSCII:   {' '.join(f'{c:03d}' for c in zscii)}")
    print(f"Text:    {codec.decode(data)!r}")


def main():
    if len(sys.argv) < 2:
        print("Usage: show_zchars.py <text> | --hex <packed bytes>")
        sys.exit(1)

    codec = Codec()

    try:
        if sys.argv[1] == '--hex':
            show_packed(codec, ''.join(sys.argv[2:]))
        else:
            show_text(codec, ' '.join(sys.argv[1:]))
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

if __name__ == '__main__':
    main()
