#!/usr/bin/env python3
"""
ZSCII file converter entry point.

Usage: python zsciiconv.py (-e | -d) input [-o output]
"""

from zscii.cli import main

if __name__ == '__main__':
    main()
