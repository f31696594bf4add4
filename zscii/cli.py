"""
Command-line file converter.

Reads a whole file, encodes UTF-8 text to packed Z-characters (-e) or
decodes packed Z-characters to UTF-8 text (-d), and writes the whole result
next to the input.
"""

import sys
from pathlib import Path
from typing import List, Optional

from .codec import Codec
from .errors import ZsciiError

ENCODED_SUFFIX = '.zscii'
DECODED_SUFFIX = '.utf-8'


class Converter:
    """Converts files with one codec."""

    def __init__(self, codec: Optional[Codec] = None, verbose: bool = False):
        self.codec = codec or Codec()
        self.verbose = verbose
        self.warnings: List[str] = []
        for warning in self.codec.get_warnings():
            self.warn(warning)

    def log(self, message: str):
        """Print log message if verbose mode is enabled."""
        if self.verbose:
            print(f"[zscii] {message}", file=sys.stderr)

    def warn(self, message: str):
        """Record a warning, printing it in verbose mode."""
        self.warnings.append(message)
        if self.verbose:
            print(f"[zscii] Warning: {message}", file=sys.stderr)

    def encode_file(self, input_path: str, output_path: Optional[str] = None) -> Path:
        """
        Encode a UTF-8 text file to packed Z-characters.

        Args:
            input_path: Text file to read
            output_path: Where to write (default: input with a .zscii suffix)

        Returns:
            The path written
        """
        source = Path(input_path)
        target = Path(output_path) if output_path else source.with_suffix(ENCODED_SUFFIX)

        self.log(f"Encoding {source}...")
        text = source.read_bytes().decode('utf-8')
        data = self.codec.encode(text)

        self.log(f"Writing {target} ({len(data)} bytes)...")
        target.write_bytes(data)
        return target

    def decode_file(self, input_path: str, output_path: Optional[str] = None) -> Path:
        """
        Decode a file of packed Z-characters to UTF-8 text.

        Args:
            input_path: Packed file to read
            output_path: Where to write (default: input with a .utf-8 suffix)

        Returns:
            The path written
        """
        source = Path(input_path)
        target = Path(output_path) if output_path else source.with_suffix(DECODED_SUFFIX)

        self.log(f"Decoding {source}...")
        text = self.codec.decode(source.read_bytes())

        self.log(f"Writing {target} ({len(text)} characters)...")
        target.write_bytes(text.encode('utf-8'))
        return target


def main(argv: Optional[List[str]] = None):
    """Command-line interface for the converter."""
    import argparse

    parser = argparse.ArgumentParser(
        description='ZSCII converter - Convert between UTF-8 text and packed Z-machine text'
    )
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument('-e', '--encode', action='store_true',
                      help=f'Encode UTF-8 text to packed Z-characters ({ENCODED_SUFFIX})')
    mode.add_argument('-d', '--decode', action='store_true',
                      help=f'Decode packed Z-characters to UTF-8 text ({DECODED_SUFFIX})')
    parser.add_argument('input', help='Input file')
    parser.add_argument('-o', '--output', help='Output file (derived from input if omitted)')
    parser.add_argument('--verbose', action='store_true',
                        help='Verbose output')

    args = parser.parse_args(argv)

    converter = Converter(verbose=args.verbose)
    try:
        if args.encode:
            output_path = converter.encode_file(args.input, args.output)
        else:
            output_path = converter.decode_file(args.input, args.output)
        converter.log(f"Conversion successful: {output_path}")
        success = True
    except (ZsciiError, UnicodeDecodeError, OSError) as e:
        print(f"Conversion error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        success = False

    sys.exit(0 if success else 1)


if __name__ == '__main__':
    main()
