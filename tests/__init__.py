"""Tests for the zscii codec."""
