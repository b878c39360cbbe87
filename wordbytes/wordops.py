"""Byte-level operations on 64-bit unsigned machine words."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

WORD_SIZE = 8
BYTE_BITS = 8
WORD_BITS = WORD_SIZE * BYTE_BITS
WORD_MASK = (1 << WORD_BITS) - 1
HALF_BITS = WORD_BITS // 2

_MERGE_CHECKS = (
    (0x89ABCDEF12893456, 0xAB45A2B3AF3F1E67, 0x89ABCDEFAF3F1E67),
    (0x0000000000000000, 0x76543210ABCDEF19, 0x00000000ABCDEF19),
    (0xABCABDEBFEBABDCE, 0x1111111111111111, 0xABCABDEB11111111),
    (0x1111111111111111, 0x1561561561561561, 0x1111111161561561),
    (0x5994A123EF548FE4, 0x4821234561234878, 0x5994A12361234878),
)

_PUT_WORD = 0x123456789ABCDEAB
_PUT_BYTE = 0xFF
_PUT_ANSWERS = (
    0xFF3456789ABCDEAB,
    0x12FF56789ABCDEAB,
    0x1234FF789ABCDEAB,
    0x123456FF9ABCDEAB,
    0x12345678FFBCDEAB,
    0x123456789AFFDEAB,
    0x123456789ABCFFAB,
    0x123456789ABCDEFF,
)


def _check_word(value: int, name: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    if not 0 <= value <= WORD_MASK:
        raise ValueError(f"{name} must fit in {WORD_BITS} unsigned bits: {value:#x}")
    return value


def is_big_endian() -> bool:
    """Return True when the running machine stores words most significant byte first."""
    return (1).to_bytes(WORD_SIZE, sys.byteorder)[0] != 1


def word_bytes(x: int) -> bytes:
    """Return the bytes of ``x`` in the order the machine stores them in memory."""
    return _check_word(x, "x").to_bytes(WORD_SIZE, sys.byteorder)


def format_bytes(x: int) -> str:
    """Return the in-memory bytes of ``x`` as space-separated two-digit hex."""
    return " ".join(f"{byte:02x}" for byte in word_bytes(x))


def merge_bytes(x: int, y: int) -> int:
    """Combine the upper half of ``x`` with the lower half of ``y``."""
    _check_word(x, "x")
    _check_word(y, "y")
    low_mask = (1 << HALF_BITS) - 1
    return (x & ~low_mask & WORD_MASK) | (y & low_mask)


def put_byte(x: int, b: int, i: int) -> int:
    """Replace byte ``i`` of ``x`` with ``b``, counting from the most significant byte.

    An index outside the word leaves ``x`` unchanged.
    """
    _check_word(x, "x")
    if not isinstance(b, int) or isinstance(b, bool):
        raise TypeError(f"b must be an int, not {type(b).__name__}")
    if not 0 <= b <= 0xFF:
        raise ValueError(f"b must be a single byte: {b:#x}")
    if not 0 <= i < WORD_SIZE:
        return x
    shift = (WORD_SIZE - i - 1) * BYTE_BITS
    return (x & ~(0xFF << shift) & WORD_MASK) | (b << shift)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the built-in self checks and report any mismatch."""
    parser = argparse.ArgumentParser(
        prog="wordops", description="Self checks for 64-bit word byte operations."
    )
    parser.parse_args(argv)

    print(f">> Check 1 - Is Big Endian? {int(is_big_endian())}")
    print(">> Check 1 - FINISHED")

    failures = 0
    print(">> Check 2 - Merge Bytes")
    for index, (x, y, expected) in enumerate(_MERGE_CHECKS):
        if merge_bytes(x, y) != expected:
            failures += 1
            print(f"   (!) Error in index: {index}")
    print(">> Check 2 - FINISHED")

    print(">> Check 3 - Put Byte")
    for index in range(-2, WORD_SIZE + 2):
        expected = (
            _PUT_ANSWERS[index] if 0 <= index < WORD_SIZE else _PUT_WORD
        )
        result = put_byte(_PUT_WORD, _PUT_BYTE, index)
        if result != expected:
            failures += 1
            print(
                f"   (!) Error in index: {index}. "
                f"Output: {result:#x} Answer: {expected:#x}"
            )
    print(">> Check 3 - FINISHED")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())