# wordbytes

Two small tools for working at the byte level:

- **`wordbytes.wordops`**: operations on 64-bit unsigned words. It can detect
  the host's byte order, show a word's bytes as they sit in memory, merge the
  high half of one word with the low half of another, and replace a single byte.
- **`wordbytes.newlines`**: converts the line endings of UTF-16 text between
  Unix (`LF`), classic Mac (`CR`) and Windows (`CR LF`). It can also swap the
  byte order of every code unit in the same pass.

## Installation

```
pip install .
```

## Word operations

```python
from wordbytes.wordops import merge_bytes, put_byte, is_big_endian, format_bytes

merge_bytes(0x89ABCDEF12893456, 0x76543210ABCDEF19)
# 0x89abcdefabcdef19: high half of x, low half of y

put_byte(0x123456789ABCDEAB, 0xFF, 0)
# 0xff3456789abcdeab: byte 0 is the most significant byte

put_byte(0x123456789ABCDEAB, 0xFF, 9)
# 0x123456789abcdeab: an out-of-range index leaves the word unchanged

is_big_endian()      # True on a big-endian host
format_bytes(1)      # "01 00 00 00 00 00 00 00" on a little-endian host
```

`word_bytes(x)` returns the eight bytes of `x` in the order the host stores
them in memory.

Words must be ints from `0` to `2**64 - 1`, and the replacement byte must be
an int from `0` to `0xFF`. Other ints raise `ValueError` and other types
raise `TypeError`.

To run the built-in self checks:

```
wordbytes-selfcheck
```

The command prints the host's byte order. It then checks `merge_bytes` and
`put_byte` against fixed expected values and prints every mismatch. The exit
status is 1 if any check failed and 0 otherwise.

## Newline conversion

The `utf16-newlines` command takes a source file and a destination file. You
can add the source and destination platforms, and after them a byte-order mode:

```
utf16-newlines SOURCE DEST
utf16-newlines SOURCE DEST -unix|-mac|-win -unix|-mac|-win
utf16-newlines SOURCE DEST -unix|-mac|-win -unix|-mac|-win -keep|-swap
```

- The input is read as two-byte code units. A trailing odd byte is dropped.
- With only two paths, the code units are copied unchanged.
- With platforms, the first code unit is read as the byte-order mark. A first
  byte of `0xFF` means little-endian, and anything else means big-endian. The
  BOM is copied, and each newline in the rest of the text is rewritten for the
  destination platform.
- When converting from Windows, a `CR` that is not followed by `LF` is dropped.
- `-keep` keeps the byte order. `-swap` reverses the two bytes of every code
  unit, the BOM included.

When the arguments are bad (wrong count, unknown flags, or the same path for
source and destination), the command prints a usage line to standard error and
writes nothing. When the source file cannot be read, it prints the error and
writes nothing. In both cases the exit status is 0.

From Python:

```python
from wordbytes.newlines import convert, convert_file, Platform, Endian

data = b"\xff\xfea\x00\n\x00"               # UTF-16LE "a\n" with BOM
convert(data, Platform.UNIX, Platform.WINDOWS)
# b"\xff\xfea\x00\r\x00\n\x00"

convert_file("in.txt", "out.txt", Platform.MAC, Platform.UNIX, Endian.SWAP)
```

Platforms and endian modes can be given as `Platform` and `Endian` members or
as their flag strings, such as `"-unix"` or `"-swap"`. `convert` raises
`ValueError` in these cases:

- only one of the two platforms is given;
- an endian mode is given without platforms;
- a flag is unknown.

`convert_file` also raises `ValueError` when the source and destination paths
are the same.

The module also provides three helpers:

- `is_valid_args(argv)` checks a command line given without the program name.
- `bom_is_big_endian(unit)` reads a byte-order mark.
- `swap_unit(unit)` swaps the two bytes of one code unit.

## Running the tests

```
pip install .[test]
pytest
```