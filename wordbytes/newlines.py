"""Newline conversion for UTF-16 text between Unix, classic Mac and Windows.

The input is read as two-byte code units. The first unit is the byte order
mark, which decides how the remaining units are interpreted. A trailing odd
byte is dropped.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from enum import Enum
from os import PathLike
from pathlib import Path

LF = 0x0A
CR = 0x0D
UNIT_SIZE = 2


class Platform(str, Enum):
    """Operating-system newline conventions, keyed by their command-line flag."""

    UNIX = "-unix"
    MAC = "-mac"
    WINDOWS = "-win"

    @property
    def newline(self) -> tuple[int, ...]:
        """The code points that make up a line break on this platform."""
        return {
            Platform.UNIX: (LF,),
            Platform.MAC: (CR,),
            Platform.WINDOWS: (CR, LF),
        }[self]


class Endian(str, Enum):
    """Whether the output keeps the input byte order or swaps it."""

    KEEP = "-keep"
    SWAP = "-swap"


_PLATFORM_FLAGS = frozenset(p.value for p in Platform)
_ENDIAN_FLAGS = frozenset(e.value for e in Endian)


def is_valid_args(argv: Sequence[str]) -> bool:
    """Check a command line of ``src dst [src_os dst_os [endian]]``."""
    if len(argv) not in (2, 4, 5):
        return False
    if argv[0] == argv[1]:
        return False
    if len(argv) > 2 and not (argv[2] in _PLATFORM_FLAGS and argv[3] in _PLATFORM_FLAGS):
        return False
    if len(argv) == 5 and argv[4] not in _ENDIAN_FLAGS:
        return False
    return True


def bom_is_big_endian(unit: bytes) -> bool:
    """Return True unless the unit starts with the little-endian BOM byte 0xFF."""
    if len(unit) != UNIT_SIZE:
        raise ValueError(f"a code unit is {UNIT_SIZE} bytes, got {len(unit)}")
    return unit[0] != 0xFF


def swap_unit(unit: bytes) -> bytes:
    """Return the two-byte unit with its bytes exchanged."""
    if len(unit) != UNIT_SIZE:
        raise ValueError(f"a code unit is {UNIT_SIZE} bytes, got {len(unit)}")
    return unit[::-1]


def _units(data: bytes) -> list[bytes]:
    it = iter(data)
    return [bytes(pair) for pair in zip(it, it)]


def _translate(chars: Iterable[int], src: Platform, dst: Platform) -> Iterator[int]:
    chars = iter(chars)
    if src is dst:
        yield from chars
        return
    if src is Platform.WINDOWS:
        (target,) = dst.newline
        for ch in chars:
            if ch != CR:
                yield ch
                continue
            following = next(chars, None)
            if following is None:
                yield ch
            elif following == LF:
                yield target
            else:
                # The carriage return is consumed even when no line feed follows.
                yield following
        return
    (marker,) = src.newline
    for ch in chars:
        if ch == marker:
            yield from dst.newline
        else:
            yield ch


def convert(
    data: bytes,
    src_os: Platform | str | None = None,
    dst_os: Platform | str | None = None,
    endian: Endian | str | None = None,
) -> bytes:
    """Convert UTF-16 ``data`` between newline conventions and byte orders.

    Without platforms the whole code units are copied unchanged.
    """
    if (src_os is None) != (dst_os is None):
        raise ValueError("source and destination platforms must be given together")
    if src_os is None:
        if endian is not None:
            raise ValueError("an endian mode needs source and destination platforms")
        return b"".join(_units(data))

    src = Platform(src_os)
    dst = Platform(dst_os)
    mode = Endian.KEEP if endian is None else Endian(endian)

    units = _units(data)
    if not units:
        return b""
    bom, body = units[0], units[1:]
    big = bom_is_big_endian(bom)
    if mode is Endian.SWAP:
        bom = swap_unit(bom)
        body = [swap_unit(unit) for unit in body]
        big = not big
    order = "big" if big else "little"

    chars = (int.from_bytes(unit, order) for unit in body)
    converted = b"".join(ch.to_bytes(UNIT_SIZE, order) for ch in _translate(chars, src, dst))
    return bom + converted


def convert_file(
    src_path: str | PathLike[str],
    dst_path: str | PathLike[str],
    src_os: Platform | str | None = None,
    dst_os: Platform | str | None = None,
    endian: Endian | str | None = None,
) -> None:
    """Read ``src_path``, convert it and write the result to ``dst_path``."""
    if str(src_path) == str(dst_path):
        raise ValueError("source and destination must be different files")
    data = Path(src_path).read_bytes()
    result = convert(data, src_os, dst_os, endian)
    Path(dst_path).write_bytes(result)


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry: ``src dst [src_os dst_os [-keep|-swap]]``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not is_valid_args(args):
        print(
            "usage: newlines SRC DST [-unix|-mac|-win -unix|-mac|-win [-keep|-swap]]",
            file=sys.stderr,
        )
        return 0
    src_path, dst_path, *flags = args
    src_os = flags[0] if flags else None
    dst_os = flags[1] if flags else None
    endian = flags[2] if len(flags) == 3 else None
    try:
        convert_file(src_path, dst_path, src_os, dst_os, endian)
    except OSError as exc:
        print(f"newlines: {exc}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())