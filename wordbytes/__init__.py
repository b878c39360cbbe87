"""Byte-level operations on 64-bit words and newline conversion for UTF-16 text."""

__version__ = "0.1.0"
__all__ = ["wordops", "newlines"]